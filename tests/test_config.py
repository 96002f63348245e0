# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from pep440_version.cli.config import (
    CLIConfig,
    ConfigError,
    find_project_root,
    load_config,
)


class TestCLIConfig:
    """Tests for CLIConfig."""

    def test_defaults(self, temp_project: Path) -> None:
        """Test loading a project without a [tool.pep440] table."""
        config = CLIConfig.from_pyproject(temp_project)

        assert config.project_dir == temp_project
        assert config.name == "test-project"
        assert config.version == "1.0.0"
        assert config.strict is False
        assert config.allow_local is True
        assert config.allow_dev is True

    def test_tool_options(self, make_project) -> None:
        """Test reading [tool.pep440] options."""
        project_dir = make_project(
            tool_pep440="strict = true\nallow-local = false\nallow_dev = false"
        )

        config = CLIConfig.from_pyproject(project_dir)

        assert config.strict is True
        assert config.allow_local is False
        assert config.allow_dev is False

    def test_wrong_option_type(self) -> None:
        """Test that non-boolean options are rejected."""
        with pytest.raises(ConfigError, match="strict"):
            CLIConfig.from_pyproject_dict({"tool": {"pep440": {"strict": "yes"}}}, Path("."))

    def test_wrong_version_type(self) -> None:
        """Test that a non-string version is rejected."""
        with pytest.raises(ConfigError, match="version"):
            CLIConfig.from_pyproject_dict({"project": {"version": 1.0}}, Path("."))

    def test_missing_pyproject(self, tmp_path: Path) -> None:
        """Test loading from a directory without pyproject.toml."""
        with pytest.raises(FileNotFoundError):
            CLIConfig.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test loading an invalid pyproject.toml."""
        (tmp_path / "pyproject.toml").write_text("[project\nname = ")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            CLIConfig.from_pyproject(tmp_path)


class TestFindProjectRoot:
    """Tests for find_project_root and load_config."""

    def test_finds_parent(self, temp_project: Path) -> None:
        """Test that the search walks up from a subdirectory."""
        nested = temp_project / "src" / "pkg"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == temp_project.resolve()

    def test_load_config_from_directory(self, temp_project: Path) -> None:
        """Test load_config with an explicit directory."""
        assert load_config(temp_project).version == "1.0.0"

    def test_load_config_missing(self, tmp_path: Path) -> None:
        """Test load_config with a directory without pyproject.toml."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path)
