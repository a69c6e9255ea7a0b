from __future__ import annotations

import re
from typing import List

from .utils import collapse_whitespace


SENTENCE_DELIMITER_RE = re.compile(r"(?<=[.!?؟؛])\s+")
LEADING_BULLET_RE = re.compile(r"^[\-•\s]+")

MAX_SENTENCE_CHARS = 120
ELLIPSIS = "..."


def parse_sentences(content: List[str]) -> List[str]:
    """
    Split section lines into sentences.

    Terminal punctuation (Latin . ! ? and Arabic ؟ ؛) stays attached to its
    sentence; leading bullet glyphs and dashes are removed.
    """
    joined = re.sub(r"\s+", " ", " ".join(content))
    if not joined.strip():
        return []

    sentences: List[str] = []
    for fragment in SENTENCE_DELIMITER_RE.split(joined):
        fragment = fragment.strip()
        if not fragment:
            continue
        sentence = LEADING_BULLET_RE.sub("", fragment)
        if sentence:
            sentences.append(sentence)
    return sentences


def simplify_sentence(sentence: str, max_chars: int = MAX_SENTENCE_CHARS) -> str:
    """
    Cap a sentence for display, truncating with "..." when it is too long.
    """
    normalized = collapse_whitespace(sentence)
    if len(normalized) <= max_chars:
        return normalized
    return normalized[: max_chars - len(ELLIPSIS)].strip() + ELLIPSIS
