from __future__ import annotations

import re
import sys
from pathlib import Path


def ensure_path(path: Path) -> None:
    """
    Ensure directory exists (mkdir -p).
    """
    path.mkdir(parents=True, exist_ok=True)


def log(message: str) -> None:
    """
    Lightweight logging helper for CLI.
    """
    print(f"[article2slides] {message}")


def error(message: str) -> None:
    print(f"[article2slides] ERROR: {message}", file=sys.stderr)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def non_empty_lines(text: str) -> list[str]:
    return [ln.strip() for ln in normalize_newlines(text).split("\n") if ln.strip()]
