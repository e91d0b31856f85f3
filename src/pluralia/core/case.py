"""
Case projection helpers.

Results are computed on lowercase words; these helpers put the caller's
capitalization back. ``match_case`` projects a whole-word pattern onto a
replacement, ``match_suffix`` only decides the case of an appended suffix.
"""

from __future__ import annotations

VOWELS = frozenset("aeiouAEIOU")


def is_all_upper(word: str) -> bool:
    """True if no letter in ``word`` is lowercase."""
    return not any(ch.isalpha() and not ch.isupper() for ch in word)


def is_proper_name(word: str) -> bool:
    """
    Capitalized, at least two characters, and not an acronym.

    Examples:
        >>> is_proper_name("Mary")
        True
        >>> is_proper_name("NASA")
        False
    """
    if len(word) < 2:
        return False
    if not word[0].isupper():
        return False
    return not is_all_upper(word)


def is_proper_name_ending_in_s(word: str) -> bool:
    return is_proper_name(word) and word[-1].lower() == "s"


def is_vowel(ch: str) -> bool:
    return ch in VOWELS


def _capitalize_first(text: str) -> str:
    return text[0].upper() + text[1:]


def match_case(original: str, replacement: str) -> str:
    """
    Apply the case pattern of ``original`` to ``replacement``.

    Args:
        original: Word whose capitalization is copied
        replacement: Computed (lowercase) result

    Returns:
        ``replacement`` re-cased: fully upper if ``original`` is an all-caps
        word, capitalized if ``original`` starts with a capital, else as-is.

    Examples:
        >>> match_case("CHILD", "children")
        'CHILDREN'
        >>> match_case("Child", "children")
        'Children'
        >>> match_case("I", "we")
        'We'
    """
    if not original or not replacement:
        return replacement

    letters = sum(1 for ch in original if ch.isalpha())

    # A lone capital letter says nothing about the rest of the word
    if letters == 1:
        if original[0].isupper():
            return _capitalize_first(replacement)
        return replacement

    if is_all_upper(original):
        return replacement.upper()

    if original[0].isupper():
        return _capitalize_first(replacement)

    return replacement


def match_suffix(word: str, suffix: str) -> str:
    """Upper-case ``suffix`` when ``word`` is all caps (BOX -> BOXES)."""
    if is_all_upper(word):
        return suffix.upper()
    return suffix
