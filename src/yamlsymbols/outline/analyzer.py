"""Single-pass extraction of dotted key paths from YAML-like lines."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from yamlsymbols.outline.ancestors import AncestorStack
from yamlsymbols.outline.classifier import Key, LineKind, classify_line, key_span

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    line: int
    character: int


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position


@dataclass(frozen=True)
class Record:
    """One outline entry: the full dotted path of a key and where its leaf sits."""

    key: str
    line: int
    start: int
    end: int

    @property
    def range(self) -> Range:
        return Range(Position(self.line, self.start), Position(self.line, self.end))


class HierarchyTracker:
    """Maintains the ancestor chain while lines are fed in order."""

    def __init__(self) -> None:
        self.stack = AncestorStack()
        self.previous_indentation = 0

    def enter_top_level(self, key: Key) -> None:
        self.stack.reset(key)
        self.previous_indentation = 0

    def enter_indented(self, key: Key) -> None:
        width = key.indentation
        if width > self.previous_indentation:
            self.stack.push(key)
        elif width == self.previous_indentation:
            self.stack.replace_top(key)
        elif self.stack.truncate_at_depth(width):
            self.stack.push(key)
        else:
            LOG.debug("Dedent to unseen width %d for key '%s'", width, key.value)
            self.stack.truncate_to_parent_of(width)
            self.stack.push(key)
        self.previous_indentation = width


def analyze(lines: Iterable[str]) -> list[Record]:
    """
    Build the key outline of a document.

    Every line is classified independently; blank and non-key lines are skipped
    without touching the hierarchy. The result is in document order.
    """
    tracker = HierarchyTracker()
    records: list[Record] = []
    for index, line in enumerate(lines):
        verdict = classify_line(line)
        if not verdict.is_key:
            continue
        if verdict.kind is LineKind.TOP_LEVEL:
            tracker.enter_top_level(verdict.key)
        else:
            tracker.enter_indented(verdict.key)
        start, end = key_span(line, verdict.key)
        records.append(Record(key=tracker.stack.path(), line=index, start=start, end=end))
    LOG.debug("Extracted %d keys", len(records))
    return records
