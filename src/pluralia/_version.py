"""Installed pluralia version."""

from importlib.metadata import PackageNotFoundError, version

DIST_NAME = "pluralia"


def get_version() -> str:
    """Version of the installed distribution, or "0.0.0" when running from a bare checkout."""
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"
