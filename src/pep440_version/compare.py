# SPDX-License-Identifier: MIT
"""Version comparison following PEP 440 ordering semantics.

Ordering is by epoch, then release, then pre-release (a < b < rc < final),
post-release, dev-release (dev < non-dev) and finally the local label.
It is *not* lexicographic on the version string.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, Union

from .ordering import compare_fields
from .version import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions following PEP 440 ordering.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.2.dev1", "1.2")
        -1
        >>> compare_versions("1!1", "2")
        1
        >>> compare_versions("1.2+flam.0", "1.2+flam.five")
        1
        >>> compare_versions("v1.2", "1.2")
        0
    """
    return compare_fields(_coerce(version1), _coerce(version2))


_VersionKey = cmp_to_key(compare_versions)


def version_key(version: Union[str, Version]) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Strings are parsed once when the key is built.

    Examples:
        >>> sorted(["1.0.post1", "1.0", "1.0.dev1", "0.9"], key=version_key)
        ['0.9', '1.0.dev1', '1.0', '1.0.post1']
    """
    return _VersionKey(_coerce(version))


def sort_versions(
    versions: Iterable[Union[str, Version]],
    reverse: bool = False,
) -> list[Union[str, Version]]:
    """Sort versions in PEP 440 order.

    The sort is stable, so versions that compare equal (``1.0`` and
    ``v1.0``) keep their input order. Items are returned as given.

    Raises:
        InvalidVersionError: If any version string is invalid
    """
    return sorted(versions, key=version_key, reverse=reverse)
