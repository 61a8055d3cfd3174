"""Line classification for indentation-based key extraction."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum

TOP_LEVEL_KEY_CHARS = frozenset(string.ascii_letters + "_\\")
INDENTED_KEY_CHARS = frozenset(string.ascii_letters + "_")


class LineKind(str, Enum):
    """Possible verdicts for a single line."""

    BLANK = "blank"
    TOP_LEVEL = "top_level"
    INDENTED = "indented"
    OTHER = "other"


@dataclass(frozen=True)
class Key:
    """A key token found on a line together with its nesting width."""

    value: str
    indentation: int


@dataclass(frozen=True)
class LineVerdict:
    kind: LineKind
    key: Key | None = None

    @property
    def is_key(self) -> bool:
        return self.key is not None


BLANK = LineVerdict(LineKind.BLANK)
OTHER = LineVerdict(LineKind.OTHER)


def leading_run(text: str, allowed: frozenset[str], start: int = 0) -> str:
    """Return the run of ``allowed`` characters beginning at ``start``."""
    end = start
    while end < len(text) and text[end] in allowed:
        end += 1
    return text[start:end]


def indentation_width(line: str) -> int:
    """Count whitespace characters before the first non-whitespace one (or the end)."""
    width = 0
    while width < len(line) and line[width].isspace():
        width += 1
    return width


def classify_line(line: str) -> LineVerdict:
    """
    Decide whether ``line`` introduces a key.

    Blank lines are detected first. A line whose very first character may start
    a key is a top-level key and never an indented one, even if the key run is
    followed by arbitrary content.
    """
    if not line.strip():
        return BLANK

    top_level = leading_run(line, TOP_LEVEL_KEY_CHARS)
    if top_level:
        return LineVerdict(LineKind.TOP_LEVEL, Key(top_level, 0))

    width = indentation_width(line)
    if width == 0:
        return OTHER
    value = leading_run(line, INDENTED_KEY_CHARS, start=width)
    if not value:
        return OTHER
    return LineVerdict(LineKind.INDENTED, Key(value, width))


def key_span(line: str, key: Key) -> tuple[int, int]:
    """
    Return the ``(start, end)`` character offsets of ``key`` on ``line``.

    The start is the first ASCII letter or underscore on the line. Keys made only
    of backslashes have none, in which case the token's own offset is used.
    """
    start = next(
        (index for index, char in enumerate(line) if char in INDENTED_KEY_CHARS),
        key.indentation,
    )
    return start, start + len(key.value)
