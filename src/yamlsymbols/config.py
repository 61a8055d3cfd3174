"""Configuration models and helpers for yamlsymbols."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel, Field, field_validator

DEFAULT_EXTENSIONS = [".yaml", ".yml"]


class DiscoveryConfig(BaseModel):
    """Settings that control which documents are outlined."""

    extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File extensions treated as YAML documents.",
    )
    recursive: bool = Field(default=True, description="Descend into sub-directories.")
    encoding: str = Field(default="utf-8", description="Text encoding used to read documents.")

    @field_validator("extensions")
    @classmethod
    def normalise_extensions(cls, value: List[str]) -> List[str]:
        normalised = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalised.append(ext if ext.startswith(".") else f".{ext}")
        if not normalised:
            raise ValueError("At least one document extension is required")
        return normalised

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown text encoding '{value}'") from exc
        return value


class OutputConfig(BaseModel):
    """Presentation preferences."""

    rich_output: bool = Field(default=True)
    max_depth: Optional[int] = Field(
        default=None, ge=1, description="Hide keys nested deeper than this many segments."
    )
    export_json: Optional[Path] = Field(default=None)
    export_csv: Optional[Path] = Field(default=None)

    @field_validator("export_json", "export_csv")
    @classmethod
    def ensure_parent_dir(cls, value: Optional[Path]) -> Optional[Path]:
        """Ensure export directories exist."""
        if value is not None:
            value.parent.mkdir(parents=True, exist_ok=True)
        return value


class AppConfig(BaseModel):
    """Top-level configuration for an outline run."""

    paths: List[Path] = Field(default_factory=lambda: [Path(".")])
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(
    paths: Optional[List[Path]] = None,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> AppConfig:
    """
    Build AppConfig from defaults, an optional YAML file and keyword overrides.

    Overrides use dotted keys matching the nested models
    (e.g. ``output.max_depth=2``); ``None`` values are ignored so unset CLI
    options do not clobber file settings. Explicit ``paths`` win over any
    ``paths`` entry in the file.
    """
    merged = OmegaConf.create(AppConfig().model_dump(mode="json"))

    if config_path:
        merged = OmegaConf.merge(merged, load_config_file(config_path))

    if paths:
        merged.paths = [str(path) for path in paths]

    for dotted_key, value in (overrides or {}).items():
        if value is not None:
            OmegaConf.update(merged, dotted_key, value, merge=True)

    return AppConfig.model_validate(OmegaConf.to_container(merged, resolve=True))


def load_config_file(path: Path) -> DictConfig:
    """Read a YAML configuration file, which must hold a mapping."""
    loaded = OmegaConf.load(path)
    if not isinstance(loaded, DictConfig):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return loaded

