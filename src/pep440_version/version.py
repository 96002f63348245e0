# SPDX-License-Identifier: MIT
"""PEP 440 version values and parsing.

Supports the full public version scheme plus local version labels:

    [N!]N(.N)*[{a|b|rc}N][.postN][.devN][+local]

Alternate spellings accepted by PEP 440 (``v`` prefix, ``alpha``/``c``/``pre``
aliases, ``-``/``_`` separators, implicit post releases such as ``1.0-1``)
are parsed, and ``str()`` always renders the canonical form.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from .ordering import compare_fields, is_numeric_segment
from .pattern import match_version

logger = logging.getLogger(__name__)

_LOCAL_SEPARATORS = re.compile(r"[-_\.]")
_LOCAL_SEGMENT = re.compile(r"[a-z0-9]+")


class VersionError(ValueError):
    """Base class for version errors."""

    pass


class InvalidVersionError(VersionError):
    """Raised when a string is not a valid PEP 440 version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid PEP 440 version: {version!r}"
        super().__init__(self.message)


class InvalidVersionArgumentError(VersionError):
    """Raised when a Version is constructed from invalid components."""

    def __init__(self, argument: str, message: str):
        self.argument = argument
        self.message = message
        super().__init__(message)


class PrereleaseKind(enum.IntEnum):
    """Pre-release phase, ordered alpha < beta < release candidate."""

    ALPHA = 0
    BETA = 1
    RELEASE_CANDIDATE = 2

    @property
    def token(self) -> str:
        """Canonical spelling used in version strings."""
        return _KIND_TOKENS[self]

    @classmethod
    def from_label(cls, label: str) -> "PrereleaseKind":
        """Resolve a pre-release label, including its PEP 440 aliases.

        Raises:
            InvalidVersionArgumentError: If the label is not a pre-release token
        """
        try:
            return _KIND_ALIASES[label.lower()]
        except KeyError:
            raise InvalidVersionArgumentError(
                "prerelease", f"Unknown pre-release label: {label!r}"
            ) from None


_KIND_TOKENS = {
    PrereleaseKind.ALPHA: "a",
    PrereleaseKind.BETA: "b",
    PrereleaseKind.RELEASE_CANDIDATE: "rc",
}

_KIND_ALIASES = {
    "a": PrereleaseKind.ALPHA,
    "alpha": PrereleaseKind.ALPHA,
    "b": PrereleaseKind.BETA,
    "beta": PrereleaseKind.BETA,
    "c": PrereleaseKind.RELEASE_CANDIDATE,
    "rc": PrereleaseKind.RELEASE_CANDIDATE,
    "pre": PrereleaseKind.RELEASE_CANDIDATE,
    "preview": PrereleaseKind.RELEASE_CANDIDATE,
}


def _check_number(argument: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidVersionArgumentError(
            argument, f"{argument} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidVersionArgumentError(argument, f"{argument} must be non-negative, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class Prerelease:
    """Pre-release segment of a version, e.g. ``rc2``.

    ``kind`` may be given as a PrereleaseKind or any accepted label
    (``"alpha"``, ``"c"``, ...).
    """

    kind: PrereleaseKind
    number: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.kind, PrereleaseKind):
            if not isinstance(self.kind, str):
                raise InvalidVersionArgumentError(
                    "prerelease", f"Unknown pre-release kind: {self.kind!r}"
                )
            object.__setattr__(self, "kind", PrereleaseKind.from_label(self.kind))
        _check_number("prerelease number", self.number)

    def __str__(self) -> str:
        return f"{self.kind.token}{self.number}"


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """An immutable PEP 440 version.

    Versions are hashable and totally ordered by PEP 440 precedence. Equality
    follows that ordering, so ``1.0`` equals ``1.0.post0`` but not ``1.0.0``.

    Attributes:
        release: Release numbers, at least one (e.g. (1, 2, 3))
        prerelease: Optional pre-release segment
        post: Post-release number, or None
        dev: Development-release number, or None
        epoch: Epoch number, 0 when not written
        local: Local version label segments, empty when there is no label
    """

    release: tuple[int, ...]
    prerelease: Optional[Prerelease] = None
    post: Optional[int] = None
    dev: Optional[int] = None
    epoch: int = 0
    local: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.release, (str, bytes)):
            raise InvalidVersionArgumentError(
                "release", "release must be a sequence of integers, not a string"
            )
        release = tuple(_check_number("release", n) for n in self.release)
        if not release:
            raise InvalidVersionArgumentError(
                "release", "Version must have at least one release number"
            )
        object.__setattr__(self, "release", release)

        if self.prerelease is not None and not isinstance(self.prerelease, Prerelease):
            raise InvalidVersionArgumentError(
                "prerelease", f"prerelease must be a Prerelease, got {type(self.prerelease).__name__}"
            )
        if self.post is not None:
            _check_number("post", self.post)
        if self.dev is not None:
            _check_number("dev", self.dev)
        _check_number("epoch", self.epoch)

        local = self.local if self.local is not None else ()
        if isinstance(local, str):
            raise InvalidVersionArgumentError(
                "local", "local must be a sequence of label segments, not a string"
            )
        segments = []
        for segment in local:
            segment = str(segment)
            if not segment.isascii() or not _LOCAL_SEGMENT.fullmatch(segment.lower()):
                raise InvalidVersionArgumentError(
                    "local", f"Invalid local version segment: {segment!r}"
                )
            segments.append(segment.lower())
        object.__setattr__(self, "local", tuple(segments))

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See parse_version."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.public
        if self.local:
            version += "+" + ".".join(self.local)
        return version

    def __repr__(self) -> str:
        return f"<Version({str(self)!r})>"

    def __hash__(self) -> int:
        # post=None compares equal to post0, and "007" to "7" in local labels
        local = tuple(int(s) if is_numeric_segment(s) else s for s in self.local)
        return hash((self.epoch, self.release, self.prerelease, self.post or 0, self.dev, local))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_fields(self, other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_fields(self, other) != 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_fields(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_fields(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_fields(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_fields(self, other) >= 0

    @property
    def public(self) -> str:
        """Return the canonical version without the local label."""
        version = ".".join(str(n) for n in self.release)
        if self.epoch:
            version = f"{self.epoch}!{version}"
        if self.prerelease is not None:
            version += str(self.prerelease)
        if self.post is not None:
            version += f".post{self.post}"
        if self.dev is not None:
            version += f".dev{self.dev}"
        return version

    @property
    def base_version(self) -> str:
        """Return the epoch and release only, e.g. ``1!2.0`` for ``1!2.0rc1.dev3``."""
        version = ".".join(str(n) for n in self.release)
        if self.epoch:
            version = f"{self.epoch}!{version}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True for pre-releases and development releases."""
        return self.prerelease is not None or self.dev is not None

    @property
    def is_postrelease(self) -> bool:
        return self.post is not None

    @property
    def is_devrelease(self) -> bool:
        return self.dev is not None

    @property
    def major(self) -> int:
        return self.release[0]

    @property
    def minor(self) -> int:
        return self.release[1] if len(self.release) > 1 else 0

    @property
    def micro(self) -> int:
        return self.release[2] if len(self.release) > 2 else 0


def _to_number(digits: Optional[str]) -> int:
    return int(digits) if digits else 0


def parse_version(version_string: str) -> Version:
    """Parse a PEP 440 version string into a Version object.

    Args:
        version_string: A version string, in canonical or any alternate
            PEP 440 spelling. Surrounding whitespace and case are ignored.

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow PEP 440

    Examples:
        >>> str(parse_version("v1.2"))
        '1.2'
        >>> str(parse_version("1.7.3.4-alpha_99"))
        '1.7.3.4a99'
        >>> parse_version("2!5b3post66.dev983").epoch
        2
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string.strip():
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = match_version(version_string)
    if match is None:
        logger.debug("Rejected version string %r", version_string)
        raise InvalidVersionError(version_string)

    prerelease = None
    if match.has_pre:
        prerelease = Prerelease(
            PrereleaseKind.from_label(match.pre_label), _to_number(match.pre_number)
        )

    version = Version(
        release=tuple(int(n) for n in match.release.split(".")),
        prerelease=prerelease,
        post=_to_number(match.post_number) if match.has_post else None,
        dev=_to_number(match.dev_number) if match.has_dev else None,
        epoch=_to_number(match.epoch),
        local=tuple(_LOCAL_SEPARATORS.split(match.local)) if match.local else (),
    )
    logger.debug("Parsed %r as %s", version_string, version)
    return version


def try_parse_version(version_string: str) -> tuple[Optional[Version], bool]:
    """Parse a version string without raising.

    Returns:
        ``(version, True)`` on success, ``(None, False)`` otherwise

    Examples:
        >>> try_parse_version("1.0rc1")
        (<Version('1.0rc1')>, True)
        >>> try_parse_version("hello")
        (None, False)
    """
    try:
        return parse_version(version_string), True
    except InvalidVersionError:
        return None, False


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid PEP 440 version.

    Examples:
        >>> is_valid_version("1.0.post1")
        True
        >>> is_valid_version("6,9")
        False
    """
    return try_parse_version(version_string)[1]

