"""
User-defined noun overrides layered over the built-in irregular table.

The registry keeps the merged singular->plural table and its inverse. A
user entry whose singular matches a built-in shadows it; the built-in is
never removed, so undefining or resetting brings it back.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .tables import IRREGULAR_PLURALS, IRREGULAR_SINGULARS

logger = logging.getLogger(__name__)


class OverrideRegistry:
    """Merged irregular table plus the set of user-defined singulars."""

    def __init__(
        self,
        baseline: Mapping[str, str] = IRREGULAR_PLURALS,
        baseline_inverse: Mapping[str, str] = IRREGULAR_SINGULARS,
    ) -> None:
        self._baseline = baseline
        self._baseline_inverse = baseline_inverse
        self._plurals: dict[str, str] = dict(baseline)
        self._singulars: dict[str, str] = dict(baseline_inverse)
        self._user: dict[str, str] = {}

    # ── Lookups ─────────────────────────────────────────────────────────

    def plural_of(self, lower: str) -> str | None:
        return self._plurals.get(lower)

    def singular_of(self, lower: str) -> str | None:
        return self._singulars.get(lower)

    def is_builtin(self, lower: str) -> bool:
        return lower in self._baseline

    def user_entries(self) -> dict[str, str]:
        return dict(self._user)

    def entries(self) -> dict[str, str]:
        return dict(self._plurals)

    # ── Mutations ───────────────────────────────────────────────────────

    def define(self, singular: str, plural: str) -> None:
        """Register ``singular -> plural``, shadowing any built-in."""
        lower = singular.lower()
        lower_plural = plural.lower()

        previous = self._user.get(lower)
        if previous is not None and previous != lower_plural:
            self._drop_inverse(previous, lower)

        self._user[lower] = lower_plural
        self._plurals[lower] = lower_plural
        self._singulars[lower_plural] = lower
        logger.debug("Defined noun %s -> %s", lower, lower_plural)

    def undefine(self, singular: str) -> bool:
        """
        Remove a user-defined noun.

        Returns:
            True if an entry was removed. False for unknown words and for
            built-ins, even when a user entry currently shadows them.
        """
        lower = singular.lower()
        if lower in self._baseline:
            return False

        plural = self._user.pop(lower, None)
        if plural is None:
            return False

        del self._plurals[lower]
        self._drop_inverse(plural, lower)
        logger.debug("Undefined noun %s", lower)
        return True

    def reset(self) -> None:
        """Drop every override and rebuild both tables from the baseline."""
        self._plurals = dict(self._baseline)
        self._singulars = dict(self._baseline_inverse)
        self._user = {}

    def copy(self) -> OverrideRegistry:
        clone = OverrideRegistry.__new__(OverrideRegistry)
        clone._baseline = self._baseline
        clone._baseline_inverse = self._baseline_inverse
        clone._plurals = dict(self._plurals)
        clone._singulars = dict(self._singulars)
        clone._user = dict(self._user)
        return clone

    def _drop_inverse(self, plural: str, singular: str) -> None:
        # Only remove the reverse entry if it still points at this singular
        if self._singulars.get(plural) != singular:
            return
        builtin = self._baseline_inverse.get(plural)
        if builtin is not None:
            self._singulars[plural] = builtin
        else:
            del self._singulars[plural]
