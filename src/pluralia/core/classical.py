"""
Classical pluralization policy.

Six independent switches control the Latin/Greek-influenced conventions:

- zero: "0 cat" rather than "0 cats" (read by count-aware callers)
- herd: "wildebeest" rather than "wildebeests"
- names: proper names ending in -s stay unchanged ("Jones")
- ancient: Latin/Greek forms ("formulae" rather than "formulas")
- persons: "persons" rather than "people"
- all: master switch

``mode`` is the legacy classical switch and always follows ``ancient``.

Setting ``all`` cascades to every other flag, but the stored ``all`` bit is
not recomputed when a single flag is toggled later. ``all_enabled`` is the
reading callers should use: it is true only while every stored flag is true.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class ClassicalFlag(StrEnum):
    """Names of the individually settable classical flags."""

    ALL = "all"
    ZERO = "zero"
    HERD = "herd"
    NAMES = "names"
    ANCIENT = "ancient"
    PERSONS = "persons"


@dataclass
class ClassicalFlags:
    """Classical flag state for one engine. Not thread-safe on its own."""

    all: bool = False
    zero: bool = False
    herd: bool = False
    names: bool = False
    ancient: bool = False
    persons: bool = False
    mode: bool = False

    def set_all(self, enabled: bool) -> None:
        self.all = enabled
        self.zero = enabled
        self.herd = enabled
        self.names = enabled
        self.ancient = enabled
        self.persons = enabled
        self.mode = enabled

    def set_ancient(self, enabled: bool) -> None:
        self.ancient = enabled
        self.mode = enabled

    def set(self, flag: ClassicalFlag | str, enabled: bool) -> None:
        """Set one flag by name, with the same cascades as the named setters."""
        flag = ClassicalFlag(flag)
        if flag is ClassicalFlag.ALL:
            self.set_all(enabled)
        elif flag is ClassicalFlag.ANCIENT:
            self.set_ancient(enabled)
        else:
            setattr(self, flag.value, enabled)

    @property
    def all_enabled(self) -> bool:
        return (
            self.all
            and self.zero
            and self.herd
            and self.names
            and self.ancient
            and self.persons
        )

    @property
    def ancient_enabled(self) -> bool:
        """Latin/Greek forms are active through either ancient or the legacy switch."""
        return self.ancient or self.mode

    def copy(self) -> ClassicalFlags:
        return replace(self)

    def as_dict(self) -> dict[str, bool]:
        return {flag.value: getattr(self, flag.value) for flag in ClassicalFlag}
