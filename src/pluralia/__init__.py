"""
pluralia - English noun pluralization with classical options.

Converts nouns between singular and plural forms, with switchable
Latin/Greek conventions and user-defined overrides.

    >>> import pluralia
    >>> pluralia.plural("child")
    'children'
    >>> pluralia.singular("boxes")
    'box'
"""

from __future__ import annotations

from ._version import get_version
from .api import (
    add_irregular,
    add_uncountable,
    classical,
    classical_all,
    classical_ancient,
    classical_herd,
    classical_names,
    classical_persons,
    classical_zero,
    compare_nouns,
    def_noun,
    def_noun_reset,
    default_engine,
    is_classical,
    is_classical_all,
    is_classical_ancient,
    is_classical_herd,
    is_classical_names,
    is_classical_persons,
    is_classical_zero,
    is_plural,
    is_singular,
    plural,
    plural_noun,
    reset,
    singular,
    singular_noun,
    undef_noun,
)
from .core.case import match_case, match_suffix
from .core.classical import ClassicalFlag
from .core.engine import Engine
from .core.errors import ManifestError, PluraliaError
from .core.manifest import Manifest, load_manifest

__version__ = get_version()

__all__ = [
    "__version__",
    "Engine",
    "ClassicalFlag",
    "Manifest",
    "load_manifest",
    "PluraliaError",
    "ManifestError",
    "default_engine",
    # Inflection
    "plural",
    "singular",
    "plural_noun",
    "singular_noun",
    "is_plural",
    "is_singular",
    "compare_nouns",
    "match_case",
    "match_suffix",
    # Classical policy
    "classical",
    "classical_all",
    "classical_zero",
    "classical_herd",
    "classical_names",
    "classical_ancient",
    "classical_persons",
    "is_classical",
    "is_classical_all",
    "is_classical_zero",
    "is_classical_herd",
    "is_classical_names",
    "is_classical_ancient",
    "is_classical_persons",
    # Noun overrides
    "def_noun",
    "add_irregular",
    "add_uncountable",
    "undef_noun",
    "def_noun_reset",
    "reset",
]
