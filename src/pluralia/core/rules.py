"""
Suffix rule cascades for regular nouns.

Each direction is an ordered tuple of named rules. A rule receives the
original word and its lowercase form and returns the inflected word, or
``None`` when it does not apply. The first rule that applies wins, so the
order of the tuples is significant.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .case import is_proper_name, is_vowel, match_case, match_suffix
from .tables import FE_STEMS, MAN_TAKES_S, O_TAKES_S, VES_WORDS

RuleFn = Callable[[str, str], "str | None"]


@dataclass(frozen=True)
class SuffixRule:
    """A named step in a suffix cascade."""

    name: str
    apply: RuleFn


def apply_rules(rules: tuple[SuffixRule, ...], word: str, lower: str) -> str | None:
    """Run ``rules`` in order and return the first result."""
    for rule in rules:
        result = rule.apply(word, lower)
        if result is not None:
            return result
    return None


# =============================================================================
# Singular -> plural
# =============================================================================


def _man_to_men(word: str, lower: str) -> str | None:
    # fireman -> firemen, but human -> humans and German -> Germans
    if not lower.endswith("man") or lower.endswith("human") or lower in MAN_TAKES_S:
        return None
    return word[:-3] + match_case(word[-3:], "men")


def _sibilant_es(word: str, lower: str) -> str | None:
    if lower.endswith(("s", "ss", "sh", "ch", "x", "z")):
        return word + match_suffix(word, "es")
    return None


def _consonant_y_ies(word: str, lower: str) -> str | None:
    if len(lower) < 2 or not lower.endswith("y") or is_vowel(lower[-2]):
        return None
    # Mary -> Marys, not Maries
    if is_proper_name(word):
        return word + match_suffix(word, "s")
    return word[:-1] + match_suffix(word, "ies")


def _f_fe_ves(word: str, lower: str) -> str | None:
    if lower not in VES_WORDS:
        return None
    if lower.endswith("fe"):
        return word[:-2] + match_suffix(word, "ves")
    if lower.endswith("f") and not lower.endswith("ff"):
        return word[:-1] + match_suffix(word, "ves")
    return None


def _vowel_o_s(word: str, lower: str) -> str | None:
    if len(lower) > 1 and lower.endswith("o") and is_vowel(lower[-2]):
        return word + match_suffix(word, "s")
    return None


def _o_exception_s(word: str, lower: str) -> str | None:
    if lower.endswith("o") and lower in O_TAKES_S:
        return word + match_suffix(word, "s")
    return None


def _o_es(word: str, lower: str) -> str | None:
    if len(lower) > 1 and lower.endswith("o"):
        return word + match_suffix(word, "es")
    return None


def _default_s(word: str, lower: str) -> str:
    return word + match_suffix(word, "s")


PLURAL_RULES: tuple[SuffixRule, ...] = (
    SuffixRule("man->men", _man_to_men),
    SuffixRule("sibilant+es", _sibilant_es),
    SuffixRule("consonant-y->ies", _consonant_y_ies),
    SuffixRule("f/fe->ves", _f_fe_ves),
    SuffixRule("vowel-o+s", _vowel_o_s),
    SuffixRule("o-exception+s", _o_exception_s),
    SuffixRule("o+es", _o_es),
)


def pluralize_suffix(word: str, lower: str) -> str:
    """Regular plural of ``word``; falls back to appending -s."""
    result = apply_rules(PLURAL_RULES, word, lower)
    return _default_s(word, lower) if result is None else result


# =============================================================================
# Plural -> singular
# =============================================================================


def _men_to_man(word: str, lower: str) -> str | None:
    if len(lower) > 3 and lower.endswith("men"):
        return word[:-3] + match_case(word[-3:], "man")
    return None


def _ves_to_f_fe(word: str, lower: str) -> str | None:
    if len(lower) <= 3 or not lower.endswith("ves"):
        return None
    # knives -> knife, wolves -> wolf
    if lower[:-3] in FE_STEMS:
        return word[:-3] + match_suffix(word, "fe")
    return word[:-3] + match_suffix(word, "f")


def _ies_to_y(word: str, lower: str) -> str | None:
    if len(lower) > 3 and lower.endswith("ies") and not is_vowel(lower[-4]):
        return word[:-3] + match_suffix(word, "y")
    return None


def _strip_es(word: str, lower: str) -> str | None:
    if len(lower) <= 2 or not lower.endswith("es"):
        return None
    stem = lower[:-2]
    if stem.endswith(("ss", "sh", "ch", "x", "zz")):
        return word[:-2]
    # heroes -> hero, but not radios
    if (
        len(stem) > 1
        and stem.endswith("o")
        and stem not in O_TAKES_S
        and not is_vowel(stem[-2])
    ):
        return word[:-2]
    # buses -> bus
    if stem.endswith("s") and not stem.endswith("ss"):
        return word[:-2]
    return None


def _strip_s(word: str, lower: str) -> str | None:
    if len(lower) > 1 and lower.endswith("s") and not lower.endswith("ss"):
        return word[:-1]
    return None


SINGULAR_RULES: tuple[SuffixRule, ...] = (
    SuffixRule("men->man", _men_to_man),
    SuffixRule("ves->f/fe", _ves_to_f_fe),
    SuffixRule("consonant-ies->y", _ies_to_y),
    SuffixRule("sibilant-es", _strip_es),
    SuffixRule("strip-s", _strip_s),
)


def singularize_suffix(word: str, lower: str) -> str:
    """Regular singular of ``word``, or ``word`` when no rule applies."""
    result = apply_rules(SINGULAR_RULES, word, lower)
    return word if result is None else result
