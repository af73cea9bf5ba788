"""Discover cached dumps by scanning the cache directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pallets.dumps.models import DumpRecord
from pallets.dumps.naming import parse_file_name
from pallets.util.errors import CacheDirectoryError

logger = logging.getLogger(__name__)


def scan(directory: Path) -> list[DumpRecord]:
    """Return every dump present directly inside `directory`.

    The filesystem is the only index: a dump exists if and only if a file with
    its canonical name is present. Unrelated entries are skipped. Result order
    follows directory enumeration and is not meaningful.
    """

    try:
        with os.scandir(directory) as entries:
            names = [entry.name for entry in entries]
    except OSError as exc:
        raise CacheDirectoryError(f"Could not read dump directory {directory}: {exc}") from exc

    records: list[DumpRecord] = []
    for name in names:
        record = parse_file_name(name)
        if record is None:
            logger.debug("Ignoring non-dump entry %s", name)
            continue
        records.append(record)
    return records


__all__ = ["scan"]
