"""Tests for pluralia.core.rules module."""

import pytest

from pluralia.core.rules import (
    PLURAL_RULES,
    SINGULAR_RULES,
    pluralize_suffix,
    singularize_suffix,
)


def _first_rule(rules, word: str) -> str | None:
    for rule in rules:
        if rule.apply(word, word.lower()) is not None:
            return rule.name
    return None


class TestPluralCascade:
    """Tests for the singular -> plural suffix cascade."""

    def test_rule_order(self):
        assert [rule.name for rule in PLURAL_RULES] == [
            "man->men",
            "sibilant+es",
            "consonant-y->ies",
            "f/fe->ves",
            "vowel-o+s",
            "o-exception+s",
            "o+es",
        ]

    @pytest.mark.parametrize(
        ("word", "rule"),
        [
            ("fireman", "man->men"),
            ("human", None),
            ("talisman", None),
            ("box", "sibilant+es"),
            ("city", "consonant-y->ies"),
            ("day", None),
            ("knife", "f/fe->ves"),
            ("roof", None),
            ("radio", "vowel-o+s"),
            ("piano", "o-exception+s"),
            ("hero", "o+es"),
            ("cat", None),
        ],
    )
    def test_first_matching_rule(self, word, rule):
        assert _first_rule(PLURAL_RULES, word) == rule

    @pytest.mark.parametrize(("word", "expected"), [("cat", "cats"), ("DAY", "DAYS"), ("human", "humans")])
    def test_unmatched_words_take_s(self, word, expected):
        assert _first_rule(PLURAL_RULES, word) is None
        assert pluralize_suffix(word, word.lower()) == expected

    def test_man_rule_wins_over_later_rules(self):
        """A -man word never falls through to plain -s."""
        assert pluralize_suffix("chairman", "chairman") == "chairmen"

    def test_man_rule_projects_case_onto_tail(self):
        assert pluralize_suffix("FIREMAN", "fireman") == "FIREMEN"
        assert pluralize_suffix("FireMan", "fireman") == "FireMen"

    def test_proper_name_ending_in_y(self):
        assert pluralize_suffix("Mary", "mary") == "Marys"
        assert pluralize_suffix("MARY", "mary") == "MARIES"

    def test_suffix_only_case_matching(self):
        """The stem is kept as typed; only the suffix follows all-caps input."""
        assert pluralize_suffix("BOX", "box") == "BOXES"
        assert pluralize_suffix("Box", "box") == "Boxes"
        assert pluralize_suffix("bOx", "box") == "bOxes"

    def test_ff_is_not_vesified(self):
        assert pluralize_suffix("cliff", "cliff") == "cliffs"

    def test_single_o(self):
        assert pluralize_suffix("o", "o") == "os"

    def test_phrase_uses_trailing_characters(self):
        assert pluralize_suffix("post box", "post box") == "post boxes"


class TestSingularCascade:
    """Tests for the plural -> singular suffix cascade."""

    def test_rule_order(self):
        assert [rule.name for rule in SINGULAR_RULES] == [
            "men->man",
            "ves->f/fe",
            "consonant-ies->y",
            "sibilant-es",
            "strip-s",
        ]

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("firemen", "fireman"),
            ("knives", "knife"),
            ("wolves", "wolf"),
            ("cities", "city"),
            ("classes", "class"),
            ("bushes", "bush"),
            ("churches", "church"),
            ("boxes", "box"),
            ("buzzes", "buzz"),
            ("heroes", "hero"),
            ("buses", "bus"),
            ("radios", "radio"),
            ("cats", "cat"),
        ],
    )
    def test_singularize(self, word, expected):
        assert singularize_suffix(word, word) == expected

    def test_no_match_returns_word(self):
        assert singularize_suffix("class", "class") == "class"
        assert singularize_suffix("cat", "cat") == "cat"
        assert singularize_suffix("s", "s") == "s"

    def test_short_words_are_left_alone(self):
        assert singularize_suffix("ves", "ves") == "ve"
        assert singularize_suffix("oes", "oes") == "oe"

    def test_upper_case_suffix_replacement(self):
        assert singularize_suffix("CITIES", "cities") == "CITY"
        assert singularize_suffix("KNIVES", "knives") == "KNIFE"
