"""Tests for the npm-flavoured semver helpers."""

import pytest

from versioning.semver import (
    highest_satisfying,
    is_valid_range,
    is_valid_version,
    normalize_remote,
    satisfies,
    sort_descending,
    strip_v,
)


class TestValidation:
    @pytest.mark.parametrize("value", ["1.0.0", "18.0.0", "2.1.0-beta.1", "1.0.0+build.5"])
    def test_valid_versions(self, value):
        assert is_valid_version(value)

    @pytest.mark.parametrize("value", ["v1.0.0", "1.0", "latest", "", "01.0.0"])
    def test_invalid_versions(self, value):
        assert not is_valid_version(value)

    @pytest.mark.parametrize("value", ["^2.0.0", "18.0.0", "~1.2", ">=1.0.0 <2.0.0", "1.x", "*", "20"])
    def test_valid_ranges(self, value):
        assert is_valid_range(value)

    @pytest.mark.parametrize("value", ["default", "lts", "my-alias", "latest"])
    def test_alias_like_names_are_not_ranges(self, value):
        assert not is_valid_range(value)


class TestMatching:
    def test_satisfies_caret(self):
        assert satisfies("2.1.0", "^2.0.0")
        assert not satisfies("3.0.0", "^2.0.0")

    def test_exact_version_is_a_range_of_one(self):
        assert satisfies("2.0.0", "2.0.0")
        assert not satisfies("2.0.1", "2.0.0")

    def test_prerelease_excluded_from_plain_range(self):
        assert not satisfies("3.0.0-beta.1", ">=2.0.0")

    def test_invalid_inputs_never_satisfy(self):
        assert not satisfies("nope", "^1.0.0")
        assert not satisfies("1.0.0", "not-a-range")

    def test_highest_satisfying_takes_first_match(self):
        assert highest_satisfying(["2.1.0", "2.0.0", "1.0.0"], "^2.0.0") == "2.1.0"
        assert highest_satisfying(["2.1.0", "2.0.0"], "^3.0.0") is None

    @pytest.mark.parametrize("version_range, version, expected", [
        (">= 18", "20.1.0", True),
        (">=  18 < 21", "21.0.0", False),
        ("^ 20.0.0", "20.1.0", True),
        ("~ 20.1", "20.2.0", False),
        ("= 20.0.0", "20.0.0", True),
    ])
    def test_space_after_operator(self, version_range, version, expected):
        assert is_valid_range(version_range)
        assert satisfies(version, version_range) is expected

    def test_highest_satisfying_with_spaced_operators(self):
        assert highest_satisfying(["22.0.0", "20.1.0"], ">= 18 < 21") == "20.1.0"


class TestOrdering:
    def test_sort_is_semver_not_lexicographic(self):
        assert sort_descending(["9.0.0", "10.0.0", "9.10.0", "9.2.0"]) == [
            "10.0.0", "9.10.0", "9.2.0", "9.0.0",
        ]

    def test_sort_drops_invalid(self):
        assert sort_descending(["1.0.0", "garbage"]) == ["1.0.0"]

    def test_strip_v(self):
        assert strip_v("v1.2.3") == "1.2.3"
        assert strip_v("1.2.3") == "1.2.3"

    def test_normalize_remote(self):
        tags = ["v1.5.0", "v3.0.0-beta.1", "v2.1.0", "2.0.0", "nightly", "v2.1.0"]
        assert normalize_remote(tags) == ["2.1.0", "2.0.0", "1.5.0"]
