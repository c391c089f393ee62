# SPDX-License-Identifier: MIT
"""Comparison and sorting helpers built on compare_precedence().

Precedence follows https://semver.org/#spec-item-11 and ignores build metadata.
It is independent of Version equality, which includes build metadata.
"""

from __future__ import annotations

from typing import Union

from .grammar import is_numeric_identifier
from .semver import Version, compare_precedence, parse_version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions given as strings or Version objects.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have the same precedence
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return compare_precedence(v1, v2)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, ordered by precedence.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions. Versions that differ
        only in build metadata get equal keys.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # No pre-release becomes (1,) to sort after every pre-release.
    # Numeric identifiers get a leading 0 so they sort before textual ones.
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease:
            if is_numeric_identifier(part):
                parts.append((0, int(part), ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
