# SPDX-License-Identifier: MIT
"""Command-line interface for pep440-version."""

from .main import cli, main

__all__ = ["cli", "main"]
