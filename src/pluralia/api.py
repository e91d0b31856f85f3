"""
Module-level inflection functions.

Every function here delegates to one process-wide :class:`Engine`, created
on first use and configured from PLURALIA_CLASSICAL. Code that needs
isolated settings should construct its own ``Engine`` instead.
"""

from __future__ import annotations

import logging
import threading

from .core.classical import ClassicalFlag
from .core.engine import Engine
from .core.environment import get_classical_flags

logger = logging.getLogger(__name__)

_default_engine: Engine | None = None
_default_engine_lock = threading.Lock()


def default_engine() -> Engine:
    """Return the shared engine behind the module-level functions."""
    global _default_engine
    if _default_engine is None:
        with _default_engine_lock:
            if _default_engine is None:
                _default_engine = _create_default_engine()
    return _default_engine


def _create_default_engine() -> Engine:
    engine = Engine()
    flags = get_classical_flags()
    # "all" first so that the individual names cannot be undone by it
    for flag in sorted(flags, key=lambda f: f is not ClassicalFlag.ALL):
        engine.set_classical(flag, True)
    if flags:
        logger.debug("Default engine classical flags: %s", ", ".join(flags))
    return engine


# =============================================================================
# Inflection
# =============================================================================


def plural(word: str) -> str:
    """
    Return the plural form of an English noun.

    Examples:
        >>> plural("cat")
        'cats'
        >>> plural("box")
        'boxes'
        >>> plural("child")
        'children'
        >>> plural("sheep")
        'sheep'
    """
    return default_engine().plural(word)


def singular(word: str) -> str:
    """
    Return the singular form of an English noun.

    Examples:
        >>> singular("cats")
        'cat'
        >>> singular("children")
        'child'
    """
    return default_engine().singular(word)


def plural_noun(word: str, count: int | None = None) -> str:
    return default_engine().plural_noun(word, count)


def singular_noun(word: str, count: int | None = None) -> str:
    return default_engine().singular_noun(word, count)


def is_plural(word: str) -> bool:
    return default_engine().is_plural(word)


def is_singular(word: str) -> bool:
    return default_engine().is_singular(word)


def compare_nouns(word1: str, word2: str) -> str:
    return default_engine().compare_nouns(word1, word2)


# =============================================================================
# Classical policy
# =============================================================================


def classical_all(enabled: bool) -> None:
    default_engine().classical_all(enabled)


def classical(enabled: bool) -> None:
    default_engine().classical(enabled)


def classical_zero(enabled: bool) -> None:
    default_engine().classical_zero(enabled)


def classical_herd(enabled: bool) -> None:
    default_engine().classical_herd(enabled)


def classical_names(enabled: bool) -> None:
    default_engine().classical_names(enabled)


def classical_ancient(enabled: bool) -> None:
    default_engine().classical_ancient(enabled)


def classical_persons(enabled: bool) -> None:
    default_engine().classical_persons(enabled)


def is_classical_all() -> bool:
    return default_engine().is_classical_all()


def is_classical() -> bool:
    return default_engine().is_classical()


def is_classical_zero() -> bool:
    return default_engine().is_classical_zero()


def is_classical_herd() -> bool:
    return default_engine().is_classical_herd()


def is_classical_names() -> bool:
    return default_engine().is_classical_names()


def is_classical_ancient() -> bool:
    return default_engine().is_classical_ancient()


def is_classical_persons() -> bool:
    return default_engine().is_classical_persons()


# =============================================================================
# Noun overrides
# =============================================================================


def def_noun(singular: str, plural: str) -> None:
    """
    Define a custom noun on the default engine.

    Examples:
        >>> def_noun("foo", "foos")
        >>> plural("Foo")
        'Foos'
    """
    default_engine().def_noun(singular, plural)


def add_irregular(singular: str, plural: str) -> None:
    default_engine().add_irregular(singular, plural)


def add_uncountable(*words: str) -> None:
    default_engine().add_uncountable(*words)


def undef_noun(singular: str) -> bool:
    return default_engine().undef_noun(singular)


def def_noun_reset() -> None:
    default_engine().def_noun_reset()


def reset() -> None:
    """Restore the default engine to its freshly constructed state."""
    default_engine().reset()
