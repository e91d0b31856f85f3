"""
Inflection engine.

An :class:`Engine` owns every piece of mutable inflection state: the merged
irregular/override table and the classical flags. All of it sits behind one
reader/writer lock, so an engine can be shared freely between threads.
Separate engines, including a clone and its source, share nothing mutable.

Usage:
    from pluralia import Engine

    engine = Engine()
    engine.plural("child")          # "children"
    engine.classical_ancient(True)
    engine.plural("formula")        # "formulae"
    engine.def_noun("child", "childs")
    engine.plural("Child")          # "Childs"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .case import is_proper_name_ending_in_s, match_case
from .classical import ClassicalFlag, ClassicalFlags
from .locking import ReadWriteLock
from .overrides import OverrideRegistry
from .rules import pluralize_suffix, singularize_suffix
from .tables import CLASSICAL_PLURALS, HERD_ANIMALS, INVARIANT_ENDINGS, UNCHANGED_PLURALS

if TYPE_CHECKING:
    from .manifest import Manifest

logger = logging.getLogger(__name__)


class Engine:
    """Thread-safe container for inflection state."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._flags = ClassicalFlags()
        self._nouns = OverrideRegistry()

    @classmethod
    def from_manifest(cls, manifest: Manifest) -> Engine:
        """Create an engine configured from a loaded ``pluralia.toml``."""
        engine = cls()
        engine.apply_manifest(manifest)
        return engine

    # =========================================================================
    # Inflection
    # =========================================================================

    def plural(self, word: str) -> str:
        """
        Return the plural form of an English noun.

        Precedence (first match wins): classical proper names, classical
        Latin/Greek forms, classical "persons", irregular and user-defined
        nouns, unchanged nouns, herd animals, -ese/-ois nationalities, then
        the regular suffix rules.

        Examples:
            >>> Engine().plural("box")
            'boxes'
            >>> Engine().plural("CHILD")
            'CHILDREN'
        """
        if not word:
            return ""

        lower = word.lower()

        with self._lock.read():
            flags = self._flags

            if flags.names and is_proper_name_ending_in_s(word):
                return word

            if flags.ancient_enabled:
                classical = CLASSICAL_PLURALS.get(lower)
                if classical is not None:
                    return match_case(word, classical)

            if flags.persons and lower == "person":
                return match_case(word, "persons")

            irregular = self._nouns.plural_of(lower)
            if irregular is not None:
                return match_case(word, irregular)

            herd = flags.herd

        if lower in UNCHANGED_PLURALS:
            return word

        if lower in HERD_ANIMALS:
            if herd:
                return word
            return pluralize_suffix(word, lower)

        if lower.endswith(INVARIANT_ENDINGS):
            return word

        return pluralize_suffix(word, lower)

    def singular(self, word: str) -> str:
        """
        Return the singular form of an English noun.

        Best effort: words that do not look plural come back unchanged, and
        ``singular(plural(w))`` is not guaranteed to equal ``w``.

        Examples:
            >>> Engine().singular("children")
            'child'
            >>> Engine().singular("Cities")
            'City'
        """
        if not word:
            return ""

        lower = word.lower()

        with self._lock.read():
            irregular = self._nouns.singular_of(lower)
        if irregular is not None:
            return match_case(word, irregular)

        if lower in UNCHANGED_PLURALS:
            return word

        if lower.endswith(INVARIANT_ENDINGS):
            return word

        return singularize_suffix(word, lower)

    def plural_noun(self, word: str, count: int | None = None) -> str:
        """
        Pluralize ``word`` unless ``count`` is 1 or -1.

        Leading and trailing whitespace is kept as-is.
        """
        if not word:
            return ""
        prefix, trimmed, suffix = _split_whitespace(word)
        if not trimmed:
            return word
        if count in (1, -1):
            return word
        return prefix + self.plural(trimmed) + suffix

    def singular_noun(self, word: str, count: int | None = None) -> str:
        """Singularize ``word`` unless ``count`` is given and not 1 or -1."""
        if not word:
            return ""
        prefix, trimmed, suffix = _split_whitespace(word)
        if not trimmed:
            return word
        if count is not None and count not in (1, -1):
            return word
        return prefix + self.singular(trimmed) + suffix

    def is_plural(self, word: str) -> bool:
        if not word:
            return False
        return word.lower() != self.singular(word).lower()

    def is_singular(self, word: str) -> bool:
        if not word:
            return False
        return not self.is_plural(word)

    def compare_nouns(self, word1: str, word2: str) -> str:
        """
        Compare two nouns for singular/plural equality.

        Returns:
            "eq" if equal ignoring case, "s:p" if ``word2`` is the plural of
            ``word1``, "p:s" for the reverse, "p:p" if both are plural forms
            of the same noun, and "" if they are unrelated.

        Examples:
            >>> Engine().compare_nouns("cat", "cats")
            's:p'
            >>> Engine().compare_nouns("mice", "mouse")
            'p:s'
        """
        if not word1 or not word2:
            return "eq" if word1 == word2 else ""

        lower1 = word1.lower()
        lower2 = word2.lower()
        if lower1 == lower2:
            return "eq"

        if self.plural(word1).lower() == lower2:
            return "s:p"
        if self.plural(word2).lower() == lower1:
            return "p:s"

        singular1 = self.singular(word1).lower()
        singular2 = self.singular(word2).lower()
        if singular1 == singular2 and lower1 != singular1 and lower2 != singular2:
            plural_of_singular = self.plural(singular1).lower()
            if plural_of_singular in (lower1, lower2):
                return "p:p"

        return ""

    # =========================================================================
    # Classical policy
    # =========================================================================

    def classical_all(self, enabled: bool) -> None:
        """Set every classical flag (and the legacy switch) at once."""
        with self._lock.write():
            self._flags.set_all(enabled)

    def classical(self, enabled: bool) -> None:
        """Legacy alias for :meth:`classical_all`."""
        self.classical_all(enabled)

    def classical_zero(self, enabled: bool) -> None:
        with self._lock.write():
            self._flags.zero = enabled

    def classical_herd(self, enabled: bool) -> None:
        with self._lock.write():
            self._flags.herd = enabled

    def classical_names(self, enabled: bool) -> None:
        with self._lock.write():
            self._flags.names = enabled

    def classical_ancient(self, enabled: bool) -> None:
        """Toggle Latin/Greek plurals; keeps the legacy switch in step."""
        with self._lock.write():
            self._flags.set_ancient(enabled)

    def classical_persons(self, enabled: bool) -> None:
        with self._lock.write():
            self._flags.persons = enabled

    def set_classical(self, flag: ClassicalFlag | str, enabled: bool) -> None:
        """Set a classical flag by name ("all", "zero", "herd", ...)."""
        with self._lock.write():
            self._flags.set(flag, enabled)

    def is_classical_all(self) -> bool:
        """True only while all six classical flags are set."""
        with self._lock.read():
            return self._flags.all_enabled

    def is_classical(self) -> bool:
        """True if Latin/Greek forms are active (ancient or the legacy switch)."""
        with self._lock.read():
            return self._flags.ancient_enabled

    def is_classical_zero(self) -> bool:
        with self._lock.read():
            return self._flags.zero

    def is_classical_herd(self) -> bool:
        with self._lock.read():
            return self._flags.herd

    def is_classical_names(self) -> bool:
        with self._lock.read():
            return self._flags.names

    def is_classical_ancient(self) -> bool:
        with self._lock.read():
            return self._flags.ancient

    def is_classical_persons(self) -> bool:
        with self._lock.read():
            return self._flags.persons

    def classical_flags(self) -> dict[str, bool]:
        """Snapshot of the stored flag values, keyed by flag name."""
        with self._lock.read():
            return self._flags.as_dict()

    # =========================================================================
    # Noun overrides
    # =========================================================================

    def def_noun(self, singular: str, plural: str) -> None:
        """
        Define a custom noun, stored lowercase.

        The mapping takes precedence over any built-in irregular with the
        same singular, in both directions.
        """
        with self._lock.write():
            self._nouns.define(singular, plural)

    def add_irregular(self, singular: str, plural: str) -> None:
        self.def_noun(singular, plural)

    def add_uncountable(self, *words: str) -> None:
        """Define each word as its own plural."""
        with self._lock.write():
            for word in words:
                self._nouns.define(word, word)

    def undef_noun(self, singular: str) -> bool:
        """
        Remove a noun added with :meth:`def_noun`.

        Returns False if nothing was removed, which includes every built-in
        irregular. Use :meth:`def_noun_reset` to undo shadowing of built-ins.
        """
        with self._lock.write():
            return self._nouns.undefine(singular)

    def def_noun_reset(self) -> None:
        """Drop all custom nouns and restore the built-in table."""
        with self._lock.write():
            self._nouns.reset()
        logger.debug("Noun overrides reset")

    def user_nouns(self) -> dict[str, str]:
        """Snapshot of the custom nouns defined on this engine."""
        with self._lock.read():
            return self._nouns.user_entries()

    def irregular_nouns(self) -> dict[str, str]:
        """Snapshot of the merged built-in and custom table."""
        with self._lock.read():
            return self._nouns.entries()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def reset(self) -> None:
        """Restore the state of a freshly constructed engine."""
        with self._lock.write():
            self._flags = ClassicalFlags()
            self._nouns.reset()
        logger.debug("Engine reset")

    def clone(self) -> Engine:
        """Return an independent deep copy of this engine."""
        clone = Engine.__new__(Engine)
        clone._lock = ReadWriteLock()
        with self._lock.read():
            clone._flags = self._flags.copy()
            clone._nouns = self._nouns.copy()
        return clone

    def apply_manifest(self, manifest: Manifest) -> None:
        """Apply classical flags and nouns from a manifest in one write."""
        with self._lock.write():
            if manifest.classical.all is not None:
                self._flags.set_all(manifest.classical.all)
            for flag, enabled in manifest.classical.explicit_flags().items():
                self._flags.set(flag, enabled)
            for singular, plural in manifest.nouns.items():
                self._nouns.define(singular, plural)
        logger.debug(
            "Applied manifest %s (%d nouns)", manifest.source or "<inline>", len(manifest.nouns)
        )


def _split_whitespace(word: str) -> tuple[str, str, str]:
    """Split ``word`` into leading whitespace, core and trailing whitespace."""
    trimmed = word.strip()
    if not trimmed:
        return word, "", ""
    start = word.index(trimmed)
    return word[:start], trimmed, word[start + len(trimmed) :]
