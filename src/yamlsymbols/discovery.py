"""Locate YAML documents below user-supplied paths."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

LOG = logging.getLogger(__name__)


class DocumentNotFoundError(FileNotFoundError):
    """Raised when a requested document or directory cannot be located."""

    def __init__(self, path: Path, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or f"No YAML document found at {path}")


def has_extension(path: Path, extensions: Iterable[str]) -> bool:
    return path.suffix.lower() in {ext.lower() for ext in extensions}


def discover_documents(
    paths: Sequence[Path],
    extensions: Sequence[str] = (".yaml", ".yml"),
    recursive: bool = True,
) -> tuple[Path, ...]:
    """
    Expand files and directories into the documents to outline.

    Files named explicitly are kept whatever their extension; directories are
    scanned for matching extensions. The result is sorted and free of duplicates.
    """
    found: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            found.add(path)
            continue
        if not path.is_dir():
            raise DocumentNotFoundError(path, f"Path {path} does not exist.")

        pattern = "**/*" if recursive else "*"
        matches = [
            candidate
            for candidate in path.glob(pattern)
            if candidate.is_file() and has_extension(candidate, extensions)
        ]
        LOG.debug("Found %d documents under %s", len(matches), path)
        if not matches:
            wanted = ", ".join(extensions)
            raise DocumentNotFoundError(
                path,
                f"No documents with extensions {wanted} found under {path}.",
            )
        found.update(matches)
    return tuple(sorted(found))
