"""Filename and URL layout for daily dumps.

Local files use the hyphenated ``-xml.gz`` suffix, the same one the archive
publishes under, so the local name and the remote basename always agree.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from pathlib import Path

from pallets.dumps.models import DumpKind, DumpRecord

ARCHIVE_HOST = "www.nationstates.net"
FILE_SUFFIX = "-xml.gz"

FILE_NAME_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})-(?P<kind>nations|regions)-xml\.gz$"
)


def local_file_name(kind: DumpKind, day: date) -> str:
    """Return the canonical cache file name for a dump."""
    return f"{_date_stamp(day)}-{kind.value}{FILE_SUFFIX}"


def remote_url(kind: DumpKind, day: date, *, host: str = ARCHIVE_HOST, scheme: str = "https") -> str:
    """Return the archive URL a dump is published at."""
    return f"{scheme}://{host}/archive/{kind.value}/{_date_stamp(day)}-{kind.value}{FILE_SUFFIX}"


def local_path(directory: Path, kind: DumpKind, day: date) -> Path:
    return Path(directory) / local_file_name(kind, day)


def parse_file_name(name: str) -> DumpRecord | None:
    """Invert :func:`local_file_name`.

    Returns ``None`` for anything that is not a canonical dump file name,
    including names carrying impossible dates such as ``2024-02-30``.
    """

    match = FILE_NAME_PATTERN.fullmatch(name)
    if match is None:
        return None

    try:
        day = datetime.strptime(match.group("date"), "%Y-%m-%d").date()
        kind = DumpKind.parse(match.group("kind"))
    except ValueError:
        return None

    return DumpRecord(kind=kind, date=day)


def _date_stamp(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


__all__ = [
    "ARCHIVE_HOST",
    "FILE_NAME_PATTERN",
    "FILE_SUFFIX",
    "local_file_name",
    "local_path",
    "parse_file_name",
    "remote_url",
]
