from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .headings import DEFAULT_RULES, HeadingClassifier, HeadingRules
from .labels import ARABIC_LABELS, Labels


BLOCK_SPLIT_RE = re.compile(r"\n\s*\n+")
FALLBACK_CHUNKS = 4


@dataclass(frozen=True)
class Section:
    title: str
    content: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", tuple(self.content))


@dataclass(frozen=True)
class NoSection:
    """Nothing accumulated yet (or the previous accumulation was flushed)."""


@dataclass(frozen=True)
class Accumulating:
    title: Optional[str]
    lines: Tuple[str, ...] = ()


AccumulatorState = Union[NoSection, Accumulating]


def normalize_article(text: str) -> str:
    return text.replace("\r", "").strip()


def split_blocks(text: str) -> List[List[str]]:
    """
    Split normalized text into paragraph blocks of non-empty trimmed lines.
    """
    blocks: List[List[str]] = []
    for block in BLOCK_SPLIT_RE.split(text):
        block = block.strip()
        if not block:
            continue
        lines = [ln.strip() for ln in block.split("\n") if ln.strip()]
        if lines:
            blocks.append(lines)
    return blocks


def default_title(labels: Labels, ordinal: int) -> str:
    return f"{labels.overview} {ordinal}"


def flush(sections: Tuple[Section, ...], state: AccumulatorState, labels: Labels) -> Tuple[Section, ...]:
    """
    Close the current accumulation and return the extended section list.

    - titled: emitted as is, even without content
    - untitled with lines: titled "<overview> <n>"
    - empty: dropped
    """
    if not isinstance(state, Accumulating):
        return sections
    if state.title:
        return sections + (Section(title=state.title, content=state.lines),)
    if state.lines:
        title = default_title(labels, len(sections) + 1)
        return sections + (Section(title=title, content=state.lines),)
    return sections


def consume_block(
    sections: Tuple[Section, ...],
    state: AccumulatorState,
    lines: List[str],
    classifier: HeadingClassifier,
    labels: Labels,
) -> Tuple[Tuple[Section, ...], AccumulatorState]:
    """
    One reducer step: a heading block starts a new section, anything else is
    appended to the current one.
    """
    if not lines:
        return sections, state

    first = lines[0]
    if classifier.is_heading(first):
        sections = flush(sections, state, labels)
        return sections, Accumulating(title=classifier.sanitize(first), lines=tuple(lines[1:]))

    if isinstance(state, Accumulating):
        return sections, Accumulating(title=state.title, lines=state.lines + tuple(lines))
    return sections, Accumulating(title=None, lines=tuple(lines))


def chunk_lines(text: str, labels: Labels, chunks: int = FALLBACK_CHUNKS) -> List[Section]:
    """
    Equal-size fallback: group the non-empty lines into at most `chunks`
    consecutive sections.
    """
    merged = [ln.strip() for ln in re.split(r"\n+", text) if ln.strip()]
    if not merged:
        return []
    size = max(1, math.ceil(len(merged) / chunks))
    sections: List[Section] = []
    for start in range(0, len(merged), size):
        sections.append(
            Section(
                title=default_title(labels, len(sections) + 1),
                content=merged[start : start + size],
            )
        )
    return sections


class SectionSegmenter:
    """
    Infer (title, content-lines) sections from a pasted article.

    Blocks are separated by blank lines; a block whose first line passes the
    heading classifier opens a new section. When nothing can be inferred the
    lines are split into equal chunks instead.
    """

    def __init__(self, labels: Labels = ARABIC_LABELS, rules: HeadingRules = DEFAULT_RULES) -> None:
        self.labels = labels
        self.classifier = HeadingClassifier(rules)

    def segment(self, raw: str) -> List[Section]:
        text = normalize_article(raw)
        if not text:
            return []

        sections: Tuple[Section, ...] = ()
        state: AccumulatorState = NoSection()
        for lines in split_blocks(text):
            sections, state = consume_block(sections, state, lines, self.classifier, self.labels)
        sections = flush(sections, state, self.labels)

        if not sections:
            return chunk_lines(text, self.labels)
        return list(sections)


def generate_sections(
    raw: str,
    labels: Labels = ARABIC_LABELS,
    rules: HeadingRules = DEFAULT_RULES,
) -> List[Section]:
    return SectionSegmenter(labels=labels, rules=rules).segment(raw)
