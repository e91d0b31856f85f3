"""Core pluralia functionality: noun tables, suffix rules, classical policy, engine."""

from .case import match_case, match_suffix
from .classical import ClassicalFlag, ClassicalFlags
from .engine import Engine
from .errors import ErrorContext, ManifestError, PluraliaError
from .manifest import ClassicalConfig, Manifest, find_manifest, load_manifest, parse_manifest
from .overrides import OverrideRegistry
from .rules import PLURAL_RULES, SINGULAR_RULES, SuffixRule

__all__ = [
    "Engine",
    "ClassicalFlag",
    "ClassicalFlags",
    "OverrideRegistry",
    "SuffixRule",
    "PLURAL_RULES",
    "SINGULAR_RULES",
    "match_case",
    "match_suffix",
    "PluraliaError",
    "ManifestError",
    "ErrorContext",
    "Manifest",
    "ClassicalConfig",
    "load_manifest",
    "parse_manifest",
    "find_manifest",
]
