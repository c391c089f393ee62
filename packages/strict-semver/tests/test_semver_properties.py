# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing, equality and precedence.

These tests verify that:
- Canonical text is a fixed point of parsing
- Precedence is a total order that ignores build metadata
- Equality is strictly finer than precedence equality
- The reference regex, is_valid_semver and version_key agree with the parser
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from strict_semver import (
    SEMVER_PATTERN,
    Version,
    compare_precedence,
    is_valid_semver,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=10**20)

numeric_identifiers = st.integers(min_value=0, max_value=10**20).map(str)

textual_identifiers = st.from_regex(r"[0-9]*[A-Za-z-][0-9A-Za-z-]*", fullmatch=True)

prerelease_identifiers = st.one_of(numeric_identifiers, textual_identifiers)

build_identifiers = st.from_regex(r"[0-9A-Za-z-]+", fullmatch=True)

# Small alphabet so generated versions collide often enough to be interesting
small_prerelease_identifiers = st.sampled_from(["0", "1", "2", "10", "a", "b", "rc", "1-2", "A"])


@st.composite
def versions(draw, prerelease=prerelease_identifiers, build=build_identifiers):
    """Generate a valid Version."""
    return Version(
        draw(numbers),
        draw(numbers),
        draw(numbers),
        draw(st.lists(prerelease, max_size=4)),
        draw(st.lists(build, max_size=3)),
    )


@st.composite
def close_versions(draw):
    """Generate versions drawn from a narrow space so precedence ties occur."""
    return Version(
        draw(st.integers(min_value=0, max_value=1)),
        draw(st.integers(min_value=0, max_value=1)),
        0,
        draw(st.lists(small_prerelease_identifiers, max_size=3)),
        draw(st.lists(st.sampled_from(["a", "b", "001"]), max_size=1)),
    )


# Strings that sometimes look like versions and sometimes do not
version_like_text = st.text(alphabet="0123456789.-+aZ_ \n", max_size=16)


# =============================================================================
# Property-Based Tests
# =============================================================================


class TestRoundTrip:
    """Canonical text survives parsing unchanged."""

    @given(version=versions())
    @settings(max_examples=200)
    def test_parse_of_canonical_text_is_equal(self, version):
        """*For any* valid Version, parsing its text yields an equal Version."""
        parsed = parse_version(str(version))
        assert parsed == version
        assert str(parsed) == str(version)
        assert parsed.prerelease == version.prerelease
        assert parsed.build == version.build

    @given(text=version_like_text)
    @settings(max_examples=500)
    def test_accepted_text_is_canonical(self, text):
        """*For any* accepted string, the canonical text is the input itself."""
        if is_valid_semver(text):
            assert str(parse_version(text)) == text


class TestPrecedenceOrder:
    """compare_precedence is a total order that ignores build metadata."""

    @given(a=close_versions())
    def test_reflexive(self, a):
        assert compare_precedence(a, a) == 0

    @given(a=close_versions(), b=close_versions())
    @settings(max_examples=300)
    def test_antisymmetric(self, a, b):
        assert compare_precedence(a, b) == -compare_precedence(b, a)

    @given(a=close_versions(), b=close_versions(), c=close_versions())
    @settings(max_examples=300)
    def test_transitive(self, a, b, c):
        if compare_precedence(a, b) <= 0 and compare_precedence(b, c) <= 0:
            assert compare_precedence(a, c) <= 0

    @given(version=versions(), build=st.lists(build_identifiers, max_size=3))
    def test_build_metadata_ignored(self, version, build):
        other = Version(version.major, version.minor, version.patch, version.prerelease, build)
        assert compare_precedence(version, other) == 0
        assert version_key(version) == version_key(other)

    @given(version=versions(), extra=st.lists(prerelease_identifiers, min_size=1, max_size=3))
    def test_release_outranks_prerelease(self, version, extra):
        release = Version(version.major, version.minor, version.patch)
        prerelease = Version(version.major, version.minor, version.patch, extra)
        assert compare_precedence(release, prerelease) == 1

    @given(a=close_versions(), b=close_versions())
    @settings(max_examples=300)
    def test_version_key_agrees(self, a, b):
        expected = compare_precedence(a, b)
        ka, kb = version_key(a), version_key(b)
        assert ((ka > kb) - (ka < kb)) == expected


class TestEquality:
    """Equality keys off canonical text, not precedence."""

    @given(a=close_versions(), b=close_versions())
    @settings(max_examples=300)
    def test_equal_implies_same_precedence_and_hash(self, a, b):
        if a == b:
            assert compare_precedence(a, b) == 0
            assert hash(a) == hash(b)

    @given(version=versions(), left=build_identifiers, right=build_identifiers)
    def test_equality_finer_than_precedence(self, version, left, right):
        a = Version(version.major, version.minor, version.patch, version.prerelease, [left])
        b = Version(version.major, version.minor, version.patch, version.prerelease, [right])
        assert compare_precedence(a, b) == 0
        assert (a == b) == (left == right)


class TestValidationAgreement:
    """The reference regex and the parser accept the same language."""

    @given(text=version_like_text)
    @settings(max_examples=500)
    def test_regex_agrees_with_parser(self, text):
        assert (SEMVER_PATTERN.fullmatch(text) is not None) == is_valid_semver(text)

    @given(version=versions())
    def test_regex_accepts_canonical_text(self, version):
        assert SEMVER_PATTERN.fullmatch(str(version)) is not None

    @given(text=version_like_text)
    @settings(max_examples=500)
    def test_regex_match_agrees_with_parser(self, text):
        """*For any* text, an anchored match() accepts exactly what the parser accepts."""
        assert (SEMVER_PATTERN.match(text) is not None) == is_valid_semver(text)

    @given(version=versions())
    def test_trailing_newline_rejected(self, version):
        text = str(version) + "\n"
        assert SEMVER_PATTERN.match(text) is None
        assert is_valid_semver(text) is False
