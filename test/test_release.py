import pytest

import jsr56._release as release_mod
from jsr56._release import (
    acceptable_releases,
    accepts_element,
    accepts_simple_element,
    is_acceptable_release,
    is_milestone,
    matching_element,
    select_release,
)


class TestAcceptsSimpleElement:
    @pytest.mark.parametrize(
        "release, simple_element",
        [
            ("1.8.0", "1.8*"),
            ("1.8", "1.8*"),
            ("1.8.0_202", "1.8*"),
            ("1.8.0_202", "1*"),
            ("1.8.0", "1.8.0+"),
            ("1.8.0_202", "1.8.0+"),
            ("1.9", "1.8.0+"),
            ("1.8", "1.8.0+"),
            ("1.8.0", "1.8"),
            ("1.8", "1.8.0"),
            ("1.8.0-ea", "1.8.0-ea"),
            ("1.8.0-ea", "1.8.0-ea*"),
            ("1.8.0-ea", "1.8.0-ea+"),
        ],
    )
    def test_accepts(self, release, simple_element):
        assert accepts_simple_element(release, simple_element)

    @pytest.mark.parametrize(
        "release, simple_element",
        [
            ("1.7.0", "1.8*"),
            ("1.7.0", "1.8.0+"),
            ("1.8.1", "1.8.0"),
            ("1.8.0_202", "1.8.0"),
            # Milestone builds never satisfy a relaxed requirement...
            ("1.8.0-ea", "1.8*"),
            ("1.8.0-ea", "1.7+"),
            ("1.8.0-ea", "1.8.0-e*"),
            # ...and are ordinary versions for an exact one.
            ("1.8.0-ea", "1.8.0-rc"),
        ],
    )
    def test_rejects(self, release, simple_element):
        assert not accepts_simple_element(release, simple_element)

    def test_milestone_exact_match_is_byte_exact(self):
        # Exact Match equates these, but "*" on a milestone build wants the same bytes.
        assert accepts_simple_element("1.8.0-ea", "1.8.0_ea")
        assert not accepts_simple_element("1.8.0-ea", "1.8.0_ea*")

    @pytest.mark.parametrize(
        "release, simple_element",
        [
            ("1.8.0", ""),
            ("", "1.8"),
            ("", ""),
            (None, "1.8+"),
            ("1.8.0", None),
            ("1.8.0", "+"),
            ("1.8.0", "*"),
        ],
    )
    def test_degenerate_input_rejects(self, release, simple_element):
        assert not accepts_simple_element(release, simple_element)


class TestAcceptsElement:
    def test_intersection(self):
        assert accepts_element("1.6.0_20", "1.6+&1.6*")
        assert accepts_element("1.7.0", "1.6+&1.7.0")
        assert not accepts_element("1.7.0", "1.6+&1.6*")
        assert not accepts_element("1.5.0", "1.6+&1.6*")

    def test_single(self):
        assert accepts_element("1.6.0", "1.6*")

    def test_short_circuits(self, monkeypatch):
        seen = []

        def _accepts(release, simple_element):
            seen.append(simple_element)
            return simple_element != "b"

        monkeypatch.setattr(release_mod, "accepts_simple_element", _accepts)
        assert not accepts_element("1.0", "a&b&c")
        assert seen == ["a", "b"]

    def test_empty_simple_element_rejects(self):
        assert not accepts_element("1.6.0", "1.6*&&1.6+")
        assert not accepts_element("1.6.0", "")
        assert not accepts_element("1.6.0", None)


class TestIsAcceptableRelease:
    def test_union(self):
        assert is_acceptable_release("1.6.0_20", "1.5+ 1.6* 1.7*")
        assert is_acceptable_release("1.7.0_80", "1.6* 1.7*")
        assert not is_acceptable_release("1.8.0", "1.6* 1.7*")

    def test_single_element(self):
        assert is_acceptable_release("1.8.0_202", "1.8*")
        assert not is_acceptable_release("1.8.0_202", "1.8")

    def test_milestone(self):
        assert not is_acceptable_release("1.7.0-ea", "1.6+ 1.7*")
        assert is_acceptable_release("1.7.0-ea", "1.6+ 1.7.0-ea")

    def test_malformed_version_strings(self):
        # Doubled spaces add an empty alternative that never matches.
        assert is_acceptable_release("1.6.0", "1.5  1.6*")
        assert not is_acceptable_release("1.7.0", "1.5  1.6*")
        assert not is_acceptable_release("1.6.0", " ")
        assert not is_acceptable_release("1.6.0", "")
        assert not is_acceptable_release("1.6.0", None)
        assert not is_acceptable_release(None, "1.6*")

    def test_very_long_numeric_component(self):
        # A 5000-digit component overflows a Java int and compares as text.
        release = "1." + "1" * 5000
        assert not is_acceptable_release(release, "1.2+")
        assert is_acceptable_release(release, "1.1+")
        assert is_acceptable_release(release, "1*")
        assert is_acceptable_release(release, release)
        assert select_release([release, "1.2"], "1+") == "1.2"

    def test_short_circuits(self, monkeypatch):
        seen = []

        def _accepts(release, element):
            seen.append(element)
            return element == "b"

        monkeypatch.setattr(release_mod, "accepts_element", _accepts)
        assert is_acceptable_release("1.0", "a b c")
        assert seen == ["a", "b"]


def test_matching_element():
    assert matching_element("1.6.0_20", "1.5+ 1.6* 1.7*") == "1.5+"
    assert matching_element("1.7.0", "1.8+ 1.6+&1.7*") == "1.6+&1.7*"
    assert matching_element("1.4", "1.5+ 1.6*") is None


def test_is_milestone():
    assert is_milestone("1.8.0-ea")
    assert not is_milestone("1.8.0_202")


def test_acceptable_releases(installed_releases):
    assert acceptable_releases(installed_releases, "1.6* 1.8.0") == [
        "1.6.0_20",
        "1.6.0_45",
        "1.8",
        "1.8.0",
    ]
    assert acceptable_releases(installed_releases, "1.9+") == []
    assert acceptable_releases([], "1.6+") == []


class TestSelectRelease:
    def test_newest(self, installed_releases):
        assert select_release(installed_releases, "1.6*") == "1.6.0_45"
        assert select_release(installed_releases, "1.6+") == "1.8"
        assert select_release(reversed(installed_releases), "1.6+") == "1.8.0"

    def test_skips_milestones(self, installed_releases):
        assert select_release(installed_releases, "1.7*") == "1.7.0_80"
        assert select_release(installed_releases, "1.7.0-ea") == "1.7.0-ea"

    def test_none(self, installed_releases):
        assert select_release(installed_releases, "1.9+") is None
        assert select_release([], "1.6+") is None

    def test_accepts_generators(self):
        releases = (r for r in ["1.6.0", "1.6.1", "1.6.0_10"])
        assert select_release(releases, "1.6*") == "1.6.1"
