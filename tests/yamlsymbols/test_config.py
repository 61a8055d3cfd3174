from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from yamlsymbols.config import AppConfig, load_config


def test_defaults() -> None:
    config = load_config()
    assert config.paths == [Path(".")]
    assert config.discovery.extensions == [".yaml", ".yml"]
    assert config.discovery.recursive is True
    assert config.output.rich_output is True
    assert config.output.max_depth is None


def test_file_values_merge_with_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "yamlsymbols.yaml"
    config_path.write_text(
        "discovery:\n  extensions: [yaml, .EYAML]\noutput:\n  max_depth: 2\n",
        encoding="utf-8",
    )
    config = load_config(config_path=config_path)
    assert config.discovery.extensions == [".yaml", ".eyaml"]
    assert config.discovery.recursive is True
    assert config.output.max_depth == 2


def test_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    config_path = tmp_path / "yamlsymbols.yaml"
    config_path.write_text("output:\n  max_depth: 2\n", encoding="utf-8")
    config = load_config(
        paths=[tmp_path],
        config_path=config_path,
        overrides={"output.max_depth": None, "discovery.recursive": False},
    )
    assert config.paths == [tmp_path]
    assert config.output.max_depth == 2
    assert config.discovery.recursive is False


def test_export_parent_directories_are_created(tmp_path: Path) -> None:
    target = tmp_path / "out" / "outline.json"
    load_config(overrides={"output.export_json": str(target)})
    assert target.parent.is_dir()


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        load_config(overrides={"output.max_depth": 0})
    with pytest.raises(ValidationError):
        AppConfig.model_validate({"discovery": {"extensions": [" "]}})


def test_non_mapping_config_file_is_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "list.yaml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(config_path=config_path)


def test_unknown_encoding_is_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "yamlsymbols.yaml"
    config_path.write_text("discovery:\n  encoding: utf-9\n", encoding="utf-8")
    with pytest.raises(ValidationError) as excinfo:
        load_config(config_path=config_path)
    assert "utf-9" in str(excinfo.value)


def test_known_encoding_aliases_are_accepted() -> None:
    config = load_config(overrides={"discovery.encoding": "latin-1"})
    assert config.discovery.encoding == "latin-1"
