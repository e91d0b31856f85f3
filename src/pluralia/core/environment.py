"""
Environment configuration for the default engine.

PLURALIA_CLASSICAL selects the classical flags the process-wide default
engine starts with. It is read once, when that engine is first created.

Values:
    - "" / "none" / "off" (default): modern English plurals
    - "all": every classical flag
    - comma-separated flag names, e.g. "ancient,herd"

Usage:
    PLURALIA_CLASSICAL=ancient,persons python app.py
"""

from __future__ import annotations

import logging
import os

from .classical import ClassicalFlag

logger = logging.getLogger(__name__)

# Environment variable name
PLURALIA_CLASSICAL_VAR = "PLURALIA_CLASSICAL"

_OFF_VALUES = frozenset({"", "none", "off", "false", "0"})


def get_classical_flags() -> list[ClassicalFlag]:
    """Classical flags requested through PLURALIA_CLASSICAL.

    Unknown names are logged and skipped; this never raises.

    With PLURALIA_CLASSICAL="ancient, herd" this returns
    ``[ClassicalFlag.ANCIENT, ClassicalFlag.HERD]``.
    """
    raw = os.environ.get(PLURALIA_CLASSICAL_VAR, "").lower().strip()
    if raw in _OFF_VALUES:
        return []

    flags: list[ClassicalFlag] = []
    for part in raw.split(","):
        name = part.strip()
        if not name:
            continue
        try:
            flag = ClassicalFlag(name)
        except ValueError:
            logger.warning(
                "Unknown %s value '%s'. Expected: %s",
                PLURALIA_CLASSICAL_VAR,
                name,
                ", ".join(f.value for f in ClassicalFlag),
            )
            continue
        if flag not in flags:
            flags.append(flag)
    return flags
