"""High-level orchestration for outlining a set of documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from yamlsymbols.config import AppConfig
from yamlsymbols.discovery import discover_documents
from yamlsymbols.document import DocumentOutline, outline_document

LOG = logging.getLogger(__name__)


@dataclass
class PipelineOutput:
    """Artifacts produced by the pipeline."""

    outlines: list[DocumentOutline]
    skipped: list[Path] = field(default_factory=list)

    @property
    def symbol_count(self) -> int:
        return sum(len(outline.symbols) for outline in self.outlines)


def run_pipeline(config: AppConfig) -> PipelineOutput:
    """Discover documents and outline each of them in path order."""
    LOG.info("Discovering documents...")
    documents = discover_documents(
        config.paths,
        extensions=config.discovery.extensions,
        recursive=config.discovery.recursive,
    )
    LOG.info("Found %d documents", len(documents))

    outlines: list[DocumentOutline] = []
    skipped: list[Path] = []
    for path in documents:
        try:
            outline = outline_document(path, encoding=config.discovery.encoding)
        except UnicodeDecodeError as exc:
            LOG.warning("Skipping %s: cannot decode as %s (%s)", path, config.discovery.encoding, exc)
            skipped.append(path)
            continue
        outlines.append(outline.limited(config.output.max_depth))

    output = PipelineOutput(outlines=outlines, skipped=skipped)
    LOG.info("Outlined %d documents with %d keys", len(outlines), output.symbol_count)
    return output
