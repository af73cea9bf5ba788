"""Local cache directory helpers."""

from __future__ import annotations

from pathlib import Path

import platformdirs

from pallets.util.errors import CacheDirectoryError

APP_NAME = "pallets"
APP_AUTHOR = "esfalsa"
DUMPS_SUBDIR = "dumps"


def default_cache_directory() -> Path:
    """Return the platform data directory dumps are stored under."""
    return platformdirs.user_data_path(APP_NAME, APP_AUTHOR) / DUMPS_SUBDIR


def resolve_cache_directory(override: str | Path | None = None, *, create: bool = True) -> Path:
    """Return the dump cache directory, creating it when missing.

    `override` (from config or ``PALLETS_DUMP_DIR``) replaces the platform
    default entirely.
    """

    directory = Path(override).expanduser().resolve() if override else default_cache_directory()

    if create:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CacheDirectoryError(f"Could not create dump directory {directory}: {exc}") from exc

    if directory.exists() and not directory.is_dir():
        raise CacheDirectoryError(f"Dump directory {directory} is not a directory")
    return directory


__all__ = ["APP_AUTHOR", "APP_NAME", "DUMPS_SUBDIR", "default_cache_directory", "resolve_cache_directory"]
