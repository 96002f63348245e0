# SPDX-License-Identifier: MIT
"""Field-level comparison rules for PEP 440 ordering.

Every compare_* function here returns -1, 0 or 1 and works on plain values, so each
rule can be exercised on its own. ``compare_fields`` chains them in
precedence order:

    epoch > release > pre-release > post-release > dev-release > local label
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence, TypeVar

if TYPE_CHECKING:
    from .version import Prerelease, Version

T = TypeVar("T")

_NUMERIC_SEGMENT = re.compile(r"[0-9]+")


def compare_numbers(left: Any, right: Any) -> int:
    """Three-way comparison of two mutually ordered values."""
    return (left > right) - (left < right)


def compare_sequences(
    left: Sequence[T],
    right: Sequence[T],
    compare_item: Callable[[T, T], int],
) -> int:
    """Compare two sequences element-wise, then by length.

    The first non-zero item comparison decides. If one sequence is a strict
    prefix of the other, the longer one is greater.

    Examples:
        >>> compare_sequences((1, 2), (1, 2, 0), compare_numbers)
        -1
        >>> compare_sequences((1, 3), (1, 2, 9), compare_numbers)
        1
    """
    for left_item, right_item in zip(left, right):
        result = compare_item(left_item, right_item)
        if result:
            return result
    return compare_numbers(len(left), len(right))


def compare_prerelease(left: Optional["Prerelease"], right: Optional["Prerelease"]) -> int:
    """Compare pre-release segments.

    A version with a pre-release sorts before the same version without one.
    Otherwise kinds are ranked alpha < beta < rc, then numbers compared.
    """
    if left is None and right is None:
        return 0
    if left is None:
        return 1  # Release > pre-release
    if right is None:
        return -1  # Pre-release < release

    return compare_numbers(left.kind, right.kind) or compare_numbers(left.number, right.number)


def compare_post(left: Optional[int], right: Optional[int]) -> int:
    """Compare post-release numbers, an absent number counting as 0."""
    return compare_numbers(left or 0, right or 0)


def compare_dev(left: Optional[int], right: Optional[int]) -> int:
    """Compare development-release numbers.

    The presence of a dev segment makes a version *earlier*: ``1.0.dev5`` is
    before ``1.0``. Two dev numbers compare numerically, and two absent ones
    are equal. Absence is not the same as 0 here (``1.0.dev0 < 1.0``).

    Examples:
        >>> compare_dev(None, None)
        0
        >>> compare_dev(0, None)
        -1
        >>> compare_dev(2, 1)
        1
    """
    if left is None and right is None:
        return 0
    if left is None:
        return 1
    if right is None:
        return -1
    return compare_numbers(left, right)


def is_numeric_segment(segment: str) -> bool:
    """Return True if a local label segment compares as an integer."""
    return _NUMERIC_SEGMENT.fullmatch(segment) is not None


def compare_local_segment(left: str, right: str) -> int:
    """Compare a single local version label segment.

    All-digit segments compare as integers, and an all-digit segment is
    always greater than one containing letters. Two alphanumeric segments
    compare as text.

    Examples:
        >>> compare_local_segment("10", "9")
        1
        >>> compare_local_segment("0", "five")
        1
        >>> compare_local_segment("abc", "abd")
        -1
    """
    left_numeric = is_numeric_segment(left)
    right_numeric = is_numeric_segment(right)

    if left_numeric and right_numeric:
        return compare_numbers(int(left), int(right))
    if left_numeric:
        return 1
    if right_numeric:
        return -1
    return compare_numbers(left, right)


def compare_local(left: Sequence[str], right: Sequence[str]) -> int:
    """Compare local version labels; no label sorts before any label."""
    return compare_sequences(left, right, compare_local_segment)


def compare_fields(left: "Version", right: "Version") -> int:
    """Compare two versions by PEP 440 precedence.

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right
    """
    return (
        compare_numbers(left.epoch, right.epoch)
        or compare_sequences(left.release, right.release, compare_numbers)
        or compare_prerelease(left.prerelease, right.prerelease)
        or compare_post(left.post, right.post)
        or compare_dev(left.dev, right.dev)
        or compare_local(left.local, right.local)
    )
