"""Expose the dump directory elsewhere through a directory symlink."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

from pallets.util.errors import LinkExistsError

logger = logging.getLogger(__name__)

NESTED_LINK_NAME = "dumps"


class LinkBackend(Protocol):
    """Creates a filesystem alias at `destination` pointing to `source`."""

    def __call__(self, source: Path, destination: Path) -> None:
        ...


def os_symlink_backend(source: Path, destination: Path) -> None:
    # target_is_directory matters on Windows only; POSIX ignores it.
    os.symlink(source, destination, target_is_directory=True)


def link_cache(
    directory: Path,
    target: Path,
    *,
    backend: LinkBackend = os_symlink_backend,
    nested_name: str = NESTED_LINK_NAME,
) -> Path:
    """Link `target` (or `target/dumps` when `target` is a directory) to `directory`.

    Existing entries are never replaced; a dangling symlink counts as existing.
    Returns the path of the created link.
    """

    target = Path(target)
    destination = target

    if os.path.lexists(target):
        if not target.is_dir():
            raise LinkExistsError(target)
        destination = target / nested_name
        if os.path.lexists(destination):
            raise LinkExistsError(destination)

    backend(Path(directory), destination)
    logger.info("Linked %s -> %s", destination, directory)
    return destination


__all__ = ["LinkBackend", "NESTED_LINK_NAME", "link_cache", "os_symlink_backend"]
