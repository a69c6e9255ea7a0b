from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from .labels import HEADING_KEYWORDS


NUMERIC_PREFIX_RE = re.compile(r"^\d+[).\-:]*\s+")
ROMAN_PREFIX_RE = re.compile(r"^[ivxlcdm]+\.\s+", re.IGNORECASE)


@dataclass(frozen=True)
class HeadingRules:
    """
    Configuration for the heading heuristics.

    The short all-caps test only means something for scripts with case. For
    Arabic (and other caseless scripts) every short line equals its own upper
    case, so `short_caps_requires_case` restricts the test to lines containing
    at least one cased character, and `use_short_caps` turns it off entirely.
    """

    keywords: Tuple[str, ...] = HEADING_KEYWORDS
    use_short_caps: bool = True
    short_caps_max_length: int = 50
    short_caps_requires_case: bool = False


DEFAULT_RULES = HeadingRules()


def has_numeric_prefix(line: str) -> bool:
    return bool(NUMERIC_PREFIX_RE.match(line))


def has_roman_prefix(line: str) -> bool:
    return bool(ROMAN_PREFIX_RE.match(line))


def contains_keyword(line: str, keywords: Iterable[str]) -> bool:
    lowered = line.lower()
    return any(k.lower() in lowered for k in keywords)


def is_short_all_caps(line: str, max_length: int = 50, requires_case: bool = False) -> bool:
    if len(line) > max_length:
        return False
    if requires_case and line.upper() == line.lower():
        return False
    return line == line.upper()


def sanitize_heading(line: str) -> str:
    """
    Strip a leading numeric ordinal ("1)", "2.", "3 -") from a heading line.
    """
    return NUMERIC_PREFIX_RE.sub("", line, count=1).strip()


class HeadingClassifier:
    """
    Decide whether a trimmed line looks like a section heading.

    A line is a heading when any of the four predicates holds: numeric
    ordinal prefix, roman numeral prefix, keyword membership, or short
    all-caps text.
    """

    def __init__(self, rules: HeadingRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def is_heading(self, line: str) -> bool:
        rules = self.rules
        if has_numeric_prefix(line) or has_roman_prefix(line):
            return True
        if contains_keyword(line, rules.keywords):
            return True
        if rules.use_short_caps:
            return is_short_all_caps(
                line,
                max_length=rules.short_caps_max_length,
                requires_case=rules.short_caps_requires_case,
            )
        return False

    @staticmethod
    def sanitize(line: str) -> str:
        return sanitize_heading(line)


def is_heading(line: str, rules: HeadingRules = DEFAULT_RULES) -> bool:
    return HeadingClassifier(rules).is_heading(line)
