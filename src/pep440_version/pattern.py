# SPDX-License-Identifier: MIT
"""PEP 440 grammar matching.

Recognizes a version string and exposes the raw captures for each segment.
Alias folding (``alpha`` -> ``a``, ``pre`` -> ``rc``, ...) and number
conversion are left to the caller.

https://peps.python.org/pep-0440/#appendix-b-parsing-version-strings-with-regular-expressions
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

VERSION_PATTERN = r"""
    v?
    (?:(?P<epoch>[0-9]+)!)?                               # epoch
    (?P<release>[0-9]+(?:\.[0-9]+)*)                      # release segment
    (?P<pre>                                              # pre-release
        [-_\.]?
        (?P<pre_l>alpha|a|beta|b|preview|pre|rc|c)
        [-_\.]?
        (?P<pre_n>[0-9]+)?
    )?
    (?P<post>                                             # post release
        (?:-(?P<post_n1>[0-9]+))
        |
        (?:
            [-_\.]?
            (?P<post_l>post|rev|r)
            [-_\.]?
            (?P<post_n2>[0-9]+)?
        )
    )?
    (?P<dev>                                              # dev release
        [-_\.]?
        (?P<dev_l>dev)
        [-_\.]?
        (?P<dev_n>[0-9]+)?
    )?
    (?:\+(?P<local>[a-z0-9]+(?:[-_\.][a-z0-9]+)*))?       # local version
"""

VERSION_REGEX = re.compile(r"^\s*" + VERSION_PATTERN + r"\s*$", re.VERBOSE | re.ASCII)


@dataclass(frozen=True, slots=True)
class VersionMatch:
    """Raw captures of a matched version string.

    All values are case-folded substrings of the input, or None when the
    segment (or its number) was not written.

    Attributes:
        release: Dotted release numbers, e.g. "1.2.3"
        epoch: Epoch digits without the "!"
        pre_label: Pre-release token as written (a, alpha, c, pre, ...)
        pre_number: Pre-release digits
        post_label: Post-release token (post, rev, r); None for the implicit "-N" form
        post_number: Post-release digits
        dev_label: Always "dev" when a dev segment is present
        dev_number: Dev-release digits
        local: Local label without the leading "+", separators intact
    """

    release: str
    epoch: Optional[str] = None
    pre_label: Optional[str] = None
    pre_number: Optional[str] = None
    post_label: Optional[str] = None
    post_number: Optional[str] = None
    dev_label: Optional[str] = None
    dev_number: Optional[str] = None
    local: Optional[str] = None

    @property
    def has_pre(self) -> bool:
        return self.pre_label is not None

    @property
    def has_post(self) -> bool:
        # "1.0-1" carries a number but no label
        return self.post_label is not None or self.post_number is not None

    @property
    def has_dev(self) -> bool:
        return self.dev_label is not None


def match_version(version_string: str) -> Optional[VersionMatch]:
    """Match a string against the PEP 440 grammar.

    Surrounding whitespace is ignored and matching is case-insensitive;
    captures are returned lower-cased. The whole string must match, and
    any non-ASCII character (look-alike letters, other digits) means no match.

    Args:
        version_string: Candidate version string

    Returns:
        A VersionMatch, or None if the string is not a PEP 440 version

    Examples:
        >>> match_version("v1.2-ALPHA_3").pre_label
        'alpha'
        >>> match_version("1.2,3") is None
        True
    """
    if not version_string.isascii():
        return None

    match = VERSION_REGEX.match(version_string.strip().lower())
    if match is None:
        return None

    return VersionMatch(
        release=match.group("release"),
        epoch=match.group("epoch"),
        pre_label=match.group("pre_l"),
        pre_number=match.group("pre_n"),
        post_label=match.group("post_l"),
        post_number=match.group("post_n1") or match.group("post_n2"),
        dev_label=match.group("dev_l"),
        dev_number=match.group("dev_n"),
        local=match.group("local"),
    )
