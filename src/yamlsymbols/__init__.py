"""
yamlsymbols package initialisation.

Exposes the outline core that turns YAML-like text into dotted key paths with
source locations, inferred from indentation alone.
"""

from importlib import metadata

from yamlsymbols.outline.analyzer import Record, analyze

try:
    __version__ = metadata.version("yamlsymbols")
except metadata.PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.1.0"

__all__ = ["Record", "__version__", "analyze"]
