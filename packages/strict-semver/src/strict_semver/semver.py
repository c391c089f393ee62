# SPDX-License-Identifier: MIT
"""Semantic version value type and parser.

Supports MAJOR.MINOR.PATCH with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Equality and hashing use the canonical text, build metadata included.
Ordering uses precedence, which ignores build metadata. The two relations
are intentionally different: 1.0.0+a and 1.0.0+b have equal precedence but
are not equal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from itertools import zip_longest

from .errors import InvalidBaseFormatError, InvalidVersionError
from .grammar import (
    BUILD_METADATA_DELIMITER,
    PRE_RELEASE_DELIMITER,
    SEPARATOR,
    check_build_metadata_identifier,
    check_numeric_field,
    check_prerelease_identifier,
    is_numeric_identifier,
    parse_numeric_field,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a validated semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1"))
        build: Build metadata identifiers (e.g., ("build", "123"))

    Every field is validated on construction, so an instance always holds a
    valid version. Identifier iterables are frozen into tuples.

    Raises:
        IllegalMajorVersionError, IllegalMinorVersionError,
        IllegalPatchVersionError: If a number is negative or not an int
        IllegalPreReleaseIdentifierError: If a pre-release identifier is invalid
        IllegalBuildMetadataIdentifierError: If a build identifier is invalid
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()
    _text: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        check_numeric_field("major", self.major)
        check_numeric_field("minor", self.minor)
        check_numeric_field("patch", self.patch)
        object.__setattr__(
            self, "prerelease", _freeze(self.prerelease, check_prerelease_identifier)
        )
        object.__setattr__(self, "build", _freeze(self.build, check_build_metadata_identifier))
        object.__setattr__(self, "_text", self._render())

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a version string. See parse_version()."""
        return parse_version(version_string)

    def _render(self) -> str:
        version = self.base_version
        if self.prerelease:
            version += PRE_RELEASE_DELIMITER + SEPARATOR.join(self.prerelease)
        if self.build:
            version += BUILD_METADATA_DELIMITER + SEPARATOR.join(self.build)
        return version

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def is_unstable(self) -> bool:
        """Return True for initial development versions (major version zero).

        See https://semver.org/#spec-item-4
        """
        return self.major == 0

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}{SEPARATOR}{self.minor}{SEPARATOR}{self.patch}"


def _freeze(identifiers: Iterable[str], check: Callable[[str], str]) -> tuple[str, ...]:
    if isinstance(identifiers, str):
        raise TypeError(
            f"Identifiers must be given as a sequence of strings, not a string: {identifiers!r}"
        )
    return tuple(check(identifier) for identifier in identifiers)


def _sign(diff: int) -> int:
    return (diff > 0) - (diff < 0)


def _compare_prerelease(pre1: tuple[str, ...], pre2: tuple[str, ...]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    for p1, p2 in zip_longest(pre1, pre2):
        # Shorter sequence with an equal prefix sorts first
        if p1 is None:
            return -1
        if p2 is None:
            return 1

        is_num1 = is_numeric_identifier(p1)
        is_num2 = is_numeric_identifier(p2)

        if is_num1 and is_num2:
            diff = _sign(int(p1) - int(p2))
        elif is_num1:
            # Numeric < alphanumeric per SemVer
            return -1
        elif is_num2:
            return 1
        else:
            diff = (p1 > p2) - (p1 < p2)
        if diff:
            return diff

    return 0


def compare_precedence(version1: Version, version2: Version) -> int:
    """Compare the precedence of two versions.

    Args:
        version1: First version
        version2: Second version

    Returns:
        -1 if version1 has lower precedence than version2
        0 if both have the same precedence
        1 if version1 has higher precedence than version2

    Note:
        Build metadata never participates, so versions that differ only in
        build metadata compare as 0 even though they are not equal.

    Examples:
        >>> compare_precedence(Version(1), Version(2))
        -1
        >>> compare_precedence(Version(1, 0, 0, ["alpha"]), Version(1, 0, 0, ["1"]))
        1
        >>> compare_precedence(Version(1, build=["a"]), Version(1, build=["b"]))
        0
    """
    for attr in ("major", "minor", "patch"):
        diff = _sign(getattr(version1, attr) - getattr(version2, attr))
        if diff:
            return diff

    return _compare_prerelease(version1.prerelease, version2.prerelease)


# The version of the Semantic Versioning specification implemented here.
SEMANTIC_VERSION_VERSION = Version(2, 0, 0)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Only the first "+" starts build metadata and only the first "-" before
    it starts the pre-release. Empty identifiers are rejected, and no
    surrounding whitespace is stripped. A trailing dot keeps its empty group,
    so "1.2." raises IllegalPatchVersionError while "1.2.3." raises
    InvalidBaseFormatError.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidBaseFormatError: If the base is not three dot-separated groups
        IllegalMajorVersionError, IllegalMinorVersionError,
        IllegalPatchVersionError: If a base group is not a valid number
        IllegalPreReleaseIdentifierError: If a pre-release identifier is invalid
        IllegalBuildMetadataIdentifierError: If a build identifier is invalid
        TypeError: If version_string is not a string

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("1.0.0-alpha.1+build.456")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=('build', '456'))
    """
    if not isinstance(version_string, str):
        raise TypeError(f"Version must be a string, got {type(version_string).__name__}")

    try:
        return _parse(version_string)
    except InvalidVersionError as e:
        logger.debug("Rejected version %r: %s: %s", version_string, type(e).__name__, e.message)
        raise


def _parse(version_string: str) -> Version:
    rest, has_build, raw_build = version_string.partition(BUILD_METADATA_DELIMITER)
    base, has_prerelease, raw_prerelease = rest.partition(PRE_RELEASE_DELIMITER)

    groups = base.split(SEPARATOR)
    if len(groups) != 3:
        raise InvalidBaseFormatError(
            version_string,
            f"Expected MAJOR.MINOR.PATCH, got {len(groups)} group(s) in {base!r}",
        )

    major = parse_numeric_field("major", groups[0])
    minor = parse_numeric_field("minor", groups[1])
    patch = parse_numeric_field("patch", groups[2])

    prerelease = tuple(raw_prerelease.split(SEPARATOR)) if has_prerelease else ()
    build = tuple(raw_build.split(SEPARATOR)) if has_build else ()

    return Version(major, minor, patch, prerelease, build)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if parse_version() would accept the string, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
