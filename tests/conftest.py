# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Create a temporary project directory with a pyproject.toml.

    Returns a factory taking the project version and the body of an
    optional [tool.pep440] table.
    """

    def _make(version: str = "1.0.0", tool_pep440: str = "") -> Path:
        project_dir = tmp_path / "test_project"
        project_dir.mkdir(exist_ok=True)

        content = f"""[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "{version}"
description = "Test project"
"""
        if tool_pep440:
            content += f"\n[tool.pep440]\n{tool_pep440}\n"

        (project_dir / "pyproject.toml").write_text(content)
        return project_dir

    return _make


@pytest.fixture
def temp_project(make_project: Callable[..., Path]) -> Path:
    """Create a temporary project with a canonical version."""
    return make_project()
