# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import normalize, compare, sort, check

__all__ = ["normalize", "compare", "sort", "check"]
