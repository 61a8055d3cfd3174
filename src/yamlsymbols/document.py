"""Adapter between documents on disk and the outline core."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from yamlsymbols.discovery import DocumentNotFoundError
from yamlsymbols.outline.analyzer import Range, Record, analyze

LOG = logging.getLogger(__name__)


class SymbolKind(str, Enum):
    KEY = "key"


@dataclass(frozen=True)
class OutlineSymbol:
    """Host-facing outline entry for one key."""

    name: str
    kind: SymbolKind
    path: Path
    range: Range

    @property
    def depth(self) -> int:
        return self.name.count(".") + 1

    @classmethod
    def from_record(cls, record: Record, path: Path) -> "OutlineSymbol":
        return cls(name=record.key, kind=SymbolKind.KEY, path=path, range=record.range)


@dataclass
class DocumentOutline:
    """All outline symbols of a single document."""

    path: Path
    symbols: list[OutlineSymbol] = field(default_factory=list)

    def limited(self, max_depth: int | None) -> "DocumentOutline":
        """Return a copy without symbols nested deeper than ``max_depth`` segments."""
        if max_depth is None:
            return self
        kept = [symbol for symbol in self.symbols if symbol.depth <= max_depth]
        return DocumentOutline(path=self.path, symbols=kept)


def split_document(text: str) -> list[str]:
    """
    Split document text into lines.

    A leading byte-order mark and trailing whitespace of the whole document are
    dropped; other leading content is kept intact so line indices and
    first-line indentation stay accurate.
    """
    trimmed = text.removeprefix("\ufeff").rstrip()
    if not trimmed:
        return []
    return [line.rstrip("\r") for line in trimmed.split("\n")]


def read_document_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    if not path.is_file():
        raise DocumentNotFoundError(path, f"Document {path} does not exist.")
    return split_document(path.read_text(encoding=encoding))


def provide_document_symbols(path: Path, encoding: str = "utf-8") -> list[OutlineSymbol]:
    """Return one KEY symbol per key found in the document, in document order."""
    records = analyze(read_document_lines(path, encoding=encoding))
    return [OutlineSymbol.from_record(record, path) for record in records]


def outline_document(path: Path, encoding: str = "utf-8") -> DocumentOutline:
    symbols = provide_document_symbols(path, encoding=encoding)
    LOG.debug("Outlined %s with %d symbols", path, len(symbols))
    return DocumentOutline(path=path, symbols=symbols)
