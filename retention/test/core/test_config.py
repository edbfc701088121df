"""Tests for retention.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from retention.core.config import (
    DEFAULT_KEEP,
    Config,
    DataConfig,
    RetentionConfig,
    load_config,
    load_config_or_default,
)
from retention.core.result import Err, Ok


class TestDefaults:
    def test_retention(self) -> None:
        assert RetentionConfig().keep == DEFAULT_KEEP == 3

    def test_data(self) -> None:
        config = DataConfig()
        assert config.dir == "data"
        assert config.projects == "Projects.json"
        assert config.environments == "Environments.json"

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.retention = RetentionConfig(keep=1)  # type: ignore[misc]


class TestFromDict:
    def test_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_values(self) -> None:
        config = Config.from_dict(
            {
                "retention": {"keep": 5},
                "data": {"dir": "fixtures", "deployments": "deploys.json"},
            }
        )
        assert config.retention.keep == 5
        assert config.data.dir == "fixtures"
        assert config.data.deployments == "deploys.json"
        assert config.data.releases == "Releases.json"

    def test_keep_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="keep"):
            Config.from_dict({"retention": {"keep": 0}})


class TestLoadConfig:
    def test_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "retention.toml"
        path.write_text('[retention]\nkeep = 2\n\n[data]\ndir = "json"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.retention.keep == 2
        assert result.value.data.dir == "json"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "retention.toml"
        path.write_text("[retention\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "retention.toml"
        path.write_text("[retention]\nkeep = -1\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert result.error.path == path


class TestLoadConfigOrDefault:
    def test_absent_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "retention.toml") == Ok(Config())

    def test_broken_file_is_still_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "retention.toml"
        path.write_text("not toml = = =", encoding="utf-8")
        assert isinstance(load_config_or_default(path), Err)
