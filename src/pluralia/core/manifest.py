"""
Engine manifest loaded from ``pluralia.toml``.

Example:

    [classical]
    ancient = true
    herd = true

    [nouns]
    octopus = "octopodes"
    cactus = "cactuses"

``all`` is applied before the individual flags, so ``all = true`` together
with ``persons = false`` enables everything except "persons".
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .classical import ClassicalFlag
from .errors import ErrorContext, ManifestError

MANIFEST_FILENAME = "pluralia.toml"


@dataclass
class ClassicalConfig:
    """Classical flags requested by a manifest. ``None`` means "leave as is"."""

    all: bool | None = None
    zero: bool | None = None
    herd: bool | None = None
    names: bool | None = None
    ancient: bool | None = None
    persons: bool | None = None

    def explicit_flags(self) -> dict[ClassicalFlag, bool]:
        """Individual flags (everything except ``all``) that were set."""
        result: dict[ClassicalFlag, bool] = {}
        for flag in ClassicalFlag:
            if flag is ClassicalFlag.ALL:
                continue
            value = getattr(self, flag.value)
            if value is not None:
                result[flag] = value
        return result


@dataclass
class Manifest:
    """Parsed ``pluralia.toml``."""

    classical: ClassicalConfig = field(default_factory=ClassicalConfig)
    nouns: dict[str, str] = field(default_factory=dict)
    source: Path | None = None


def parse_manifest(data: dict[str, Any], source: Path | None = None) -> Manifest:
    classical_data = data.get("classical", {})
    nouns_data = data.get("nouns", {})

    if not isinstance(classical_data, dict):
        raise ManifestError(
            "[classical] must be a table", ErrorContext(file=source, key="classical")
        )
    if not isinstance(nouns_data, dict):
        raise ManifestError("[nouns] must be a table", ErrorContext(file=source, key="nouns"))

    known = {flag.value for flag in ClassicalFlag}
    classical = ClassicalConfig()
    for key, value in classical_data.items():
        if key not in known:
            raise ManifestError(
                f"Unknown classical flag '{key}' (expected one of: {', '.join(sorted(known))})",
                ErrorContext(file=source, key=f"classical.{key}"),
            )
        if not isinstance(value, bool):
            raise ManifestError(
                f"Classical flag '{key}' must be true or false, got {value!r}",
                ErrorContext(file=source, key=f"classical.{key}"),
            )
        setattr(classical, key, value)

    nouns: dict[str, str] = {}
    for singular, plural in nouns_data.items():
        if not isinstance(plural, str) or not plural:
            raise ManifestError(
                f"Plural for '{singular}' must be a non-empty string, got {plural!r}",
                ErrorContext(file=source, key=f"nouns.{singular}"),
            )
        nouns[singular] = plural

    return Manifest(classical=classical, nouns=nouns, source=source)


def load_manifest(path: Path) -> Manifest:
    """
    Load a manifest file.

    Raises:
        ManifestError: If the file is missing, is not valid TOML, or holds
            invalid values.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ManifestError(f"Manifest not found: {path}") from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML: {e}", ErrorContext(file=path)) from e

    return parse_manifest(data, source=path)


def find_manifest(start: Path | None = None) -> Path | None:
    """Look for ``pluralia.toml`` in ``start`` and its parents."""
    directory = (start or Path.cwd()).resolve()
    for candidate in (directory, *directory.parents):
        manifest_path = candidate / MANIFEST_FILENAME
        if manifest_path.is_file():
            return manifest_path
    return None
