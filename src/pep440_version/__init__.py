# SPDX-License-Identifier: MIT
"""PEP 440 version parsing, normalization and comparison.

This package parses version identifiers following PEP 440 (epoch, release,
pre-, post- and development releases, local version labels), renders them
in canonical form, and orders them by PEP 440 precedence.

Example:
    >>> from pep440_version import parse_version, compare_versions, is_valid_version
    >>>
    >>> version = parse_version("1!2.0-ALPHA_3.post1+ubuntu-1")
    >>> str(version)
    '1!2.0a3.post1+ubuntu.1'
    >>> version.release
    (2, 0)
    >>>
    >>> is_valid_version("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.dev1", "1.0")
    -1
"""

__version__ = "0.1.0"

from .pattern import (
    VERSION_PATTERN,
    VersionMatch,
    match_version,
)
from .version import (
    Version,
    Prerelease,
    PrereleaseKind,
    parse_version,
    try_parse_version,
    is_valid_version,
    VersionError,
    InvalidVersionError,
    InvalidVersionArgumentError,
)
from .ordering import (
    compare_sequences,
    compare_prerelease,
    compare_post,
    compare_dev,
    compare_local_segment,
    compare_local,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
)

__all__ = [
    # Grammar matching
    "VERSION_PATTERN",
    "VersionMatch",
    "match_version",
    # Version parsing
    "Version",
    "Prerelease",
    "PrereleaseKind",
    "parse_version",
    "try_parse_version",
    "is_valid_version",
    "VersionError",
    "InvalidVersionError",
    "InvalidVersionArgumentError",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "compare_sequences",
    "compare_prerelease",
    "compare_post",
    "compare_dev",
    "compare_local_segment",
    "compare_local",
]
