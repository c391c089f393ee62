# SPDX-License-Identifier: MIT
"""Lexical grammar of Semantic Versioning 2.0.0.

Delimiters, identifier patterns and the per-field validators shared by the
parser and by direct construction of a Version.
"""

from __future__ import annotations

import re

from .errors import (
    IllegalBuildMetadataIdentifierError,
    IllegalMajorVersionError,
    IllegalMinorVersionError,
    IllegalPatchVersionError,
    IllegalPreReleaseIdentifierError,
    InvalidVersionError,
)

SEPARATOR = "."
PRE_RELEASE_DELIMITER = "-"
BUILD_METADATA_DELIMITER = "+"

# Identifier patterns are applied with fullmatch(); [0-9] rather than \d keeps them ASCII.
COMMON_IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")
NUMERIC_IDENTIFIER_PATTERN = re.compile(r"0|[1-9][0-9]*")
DIGITS_PATTERN = re.compile(r"[0-9]+")

# Reference regex from semver.org, restricted to ASCII digits and anchored
# with \Z so that match() rejects a trailing newline.
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?\Z"
)

_FIELD_ERRORS: dict[str, type[InvalidVersionError]] = {
    "major": IllegalMajorVersionError,
    "minor": IllegalMinorVersionError,
    "patch": IllegalPatchVersionError,
}


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if the identifier consists solely of ASCII digits.

    Anything containing a letter or hyphen is textual, so "1-2" and "a1"
    are not numeric.
    """
    return DIGITS_PATTERN.fullmatch(identifier) is not None


def parse_numeric_field(field: str, text: str) -> int:
    """Parse one of the three base groups of a version string.

    Args:
        field: "major", "minor" or "patch"; selects the error raised
        text: The raw group text

    Returns:
        The group value as an int

    Raises:
        IllegalMajorVersionError, IllegalMinorVersionError,
        IllegalPatchVersionError: If the group is not a numeric identifier
    """
    if NUMERIC_IDENTIFIER_PATTERN.fullmatch(text) is None:
        raise _FIELD_ERRORS[field](
            text, f"{field.capitalize()} version must be a number without leading zeros: {text!r}"
        )
    return int(text)


def check_numeric_field(field: str, value: int) -> int:
    """Validate a major, minor or patch number given directly."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise _FIELD_ERRORS[field](
            value, f"{field.capitalize()} version must be an int, got {type(value).__name__}"
        )
    if value < 0:
        raise _FIELD_ERRORS[field](
            value, f"{field.capitalize()} version must not be negative: {value}"
        )
    return value


def check_prerelease_identifier(identifier: str) -> str:
    """Validate a single pre-release identifier.

    Raises:
        IllegalPreReleaseIdentifierError: If the identifier is empty, contains
            characters outside [0-9A-Za-z-], or is numeric with a leading zero
    """
    _require_str(identifier, "Pre-release")
    if COMMON_IDENTIFIER_PATTERN.fullmatch(identifier) is None:
        raise IllegalPreReleaseIdentifierError(
            identifier, f"Invalid pre-release identifier: {identifier!r}"
        )
    if is_numeric_identifier(identifier) and NUMERIC_IDENTIFIER_PATTERN.fullmatch(identifier) is None:
        raise IllegalPreReleaseIdentifierError(
            identifier,
            f"Numeric pre-release identifier must not have leading zeros: {identifier!r}",
        )
    return identifier


def check_build_metadata_identifier(identifier: str) -> str:
    """Validate a single build metadata identifier. Leading zeros are allowed."""
    _require_str(identifier, "Build metadata")
    if COMMON_IDENTIFIER_PATTERN.fullmatch(identifier) is None:
        raise IllegalBuildMetadataIdentifierError(
            identifier, f"Invalid build metadata identifier: {identifier!r}"
        )
    return identifier


def _require_str(identifier: object, kind: str) -> None:
    if not isinstance(identifier, str):
        raise TypeError(f"{kind} identifier must be a string, got {type(identifier).__name__}")
