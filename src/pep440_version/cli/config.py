# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _get_option(table: dict[str, Any], key: str, default: bool) -> bool:
    """Read a boolean [tool.pep440] option, accepting dashed or underscored keys."""
    value = table.get(key, table.get(key.replace("-", "_"), default))
    if not isinstance(value, bool):
        raise ConfigError(f"[tool.pep440] {key} must be a boolean, got {value!r}")
    return value


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Package name
        version: Package version as written in [project]
        strict: Treat check warnings (non-canonical spelling) as errors
        allow_local: Accept versions with a local version label
        allow_dev: Accept development releases
    """

    project_dir: Path
    name: str = ""
    version: str = ""
    strict: bool = False
    allow_local: bool = True
    allow_dev: bool = True

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If a [tool.pep440] option has the wrong type
        """
        project = pyproject.get("project", {})
        tool_pep440 = pyproject.get("tool", {}).get("pep440", {})

        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError(f"[project] version must be a string, got {version!r}")

        return cls(
            project_dir=project_dir,
            name=project.get("name", ""),
            version=version,
            strict=_get_option(tool_pep440, "strict", False),
            allow_local=_get_option(tool_pep440, "allow-local", True),
            allow_dev=_get_option(tool_pep440, "allow-dev", True),
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
        FileNotFoundError: If pyproject.toml doesn't exist
    """
    if project_dir is None:
        project_dir = find_project_root()

    return CLIConfig.from_pyproject(project_dir)
