# SPDX-License-Identifier: MIT
"""Strict Semantic Versioning 2.0.0 parsing, validation and precedence.

This package provides an immutable Version value type that rejects any
input deviating from the SemVer 2.0.0 grammar, with one exception class per
kind of violation.

Example:
    >>> from strict_semver import parse_version, compare_versions, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> is_valid_semver("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

import logging

__version__ = "0.1.0"

from .errors import (
    IllegalBuildMetadataIdentifierError,
    IllegalMajorVersionError,
    IllegalMinorVersionError,
    IllegalPatchVersionError,
    IllegalPreReleaseIdentifierError,
    InvalidBaseFormatError,
    InvalidVersionError,
)
from .grammar import SEMVER_PATTERN
from .semver import (
    SEMANTIC_VERSION_VERSION,
    Version,
    compare_precedence,
    parse_version,
    is_valid_semver,
)
from .compare import (
    compare_versions,
    version_key,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    "SEMANTIC_VERSION_VERSION",
    # Version comparison
    "compare_precedence",
    "compare_versions",
    "version_key",
    # Errors
    "InvalidVersionError",
    "InvalidBaseFormatError",
    "IllegalMajorVersionError",
    "IllegalMinorVersionError",
    "IllegalPatchVersionError",
    "IllegalPreReleaseIdentifierError",
    "IllegalBuildMetadataIdentifierError",
]
