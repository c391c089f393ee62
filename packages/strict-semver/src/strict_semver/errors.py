# SPDX-License-Identifier: MIT
"""Exceptions raised when a version fails the Semantic Versioning grammar.

Each grammar violation has its own class so callers can tell them apart.
All of them derive from InvalidVersionError, itself a ValueError.
"""

from __future__ import annotations

from typing import Any


class InvalidVersionError(ValueError):
    """Raised when a version does not follow semantic versioning."""

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Invalid semantic version: {value!r}"
        super().__init__(self.message)


class InvalidBaseFormatError(InvalidVersionError):
    """The base version is not exactly MAJOR.MINOR.PATCH."""


class IllegalMajorVersionError(InvalidVersionError):
    """The major version is malformed or negative."""


class IllegalMinorVersionError(InvalidVersionError):
    """The minor version is malformed or negative."""


class IllegalPatchVersionError(InvalidVersionError):
    """The patch version is malformed or negative."""


class IllegalPreReleaseIdentifierError(InvalidVersionError):
    """A pre-release identifier is malformed or has a leading zero."""


class IllegalBuildMetadataIdentifierError(InvalidVersionError):
    """A build metadata identifier is malformed."""
