"""Tests for pluralia.core.case module."""

from pluralia.core.case import (
    is_all_upper,
    is_proper_name,
    is_proper_name_ending_in_s,
    match_case,
    match_suffix,
)


class TestMatchCase:
    """Tests for whole-word case projection."""

    def test_lowercase_original_keeps_replacement(self):
        assert match_case("child", "children") == "children"

    def test_all_upper_original(self):
        assert match_case("CHILD", "children") == "CHILDREN"
        assert match_case("OX", "oxen") == "OXEN"

    def test_capitalized_original(self):
        assert match_case("Child", "children") == "Children"
        assert match_case("Person", "people") == "People"

    def test_only_first_character_is_capitalized(self):
        """Mixed case beyond the first letter is not copied."""
        assert match_case("ChIlD", "children") == "Children"

    def test_single_letter_upper(self):
        assert match_case("I", "we") == "We"

    def test_single_letter_lower(self):
        assert match_case("i", "we") == "we"

    def test_single_letter_ignores_non_letters(self):
        assert match_case("A-1", "bees") == "Bees"

    def test_empty_inputs(self):
        assert match_case("", "cats") == "cats"
        assert match_case("Cat", "") == ""


class TestMatchSuffix:
    """Tests for suffix-only case projection."""

    def test_upper_word_gets_upper_suffix(self):
        assert match_suffix("BOX", "es") == "ES"

    def test_capitalized_word_keeps_lower_suffix(self):
        """Unlike match_case, a capitalized word does not capitalize the suffix."""
        assert match_suffix("Box", "es") == "es"
        assert match_case("Box", "es") == "Es"

    def test_lower_word(self):
        assert match_suffix("box", "es") == "es"


class TestWordShape:
    """Tests for the word-shape predicates."""

    def test_is_all_upper(self):
        assert is_all_upper("NASA")
        assert is_all_upper("R2D2")
        assert not is_all_upper("Nasa")

    def test_is_proper_name(self):
        assert is_proper_name("Mary")
        assert not is_proper_name("mary")
        assert not is_proper_name("NASA")
        assert not is_proper_name("M")

    def test_is_proper_name_ending_in_s(self):
        assert is_proper_name_ending_in_s("Jones")
        assert not is_proper_name_ending_in_s("Mary")
        assert not is_proper_name_ending_in_s("JONES")
        assert not is_proper_name_ending_in_s("jones")
