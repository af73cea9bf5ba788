"""High-level operations over one dump cache directory."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional

import requests

from pallets.config.models import ArchiveConfig
from pallets.dumps.inventory import scan
from pallets.dumps.models import DumpKind, DumpOrder, DumpRecord
from pallets.dumps.naming import local_path
from pallets.dumps.query import query
from pallets.io.fetcher import fetch_dump
from pallets.util.errors import DumpExistsError, DumpNotFoundError
from pallets.util.symlink import LinkBackend, link_cache, os_symlink_backend

logger = logging.getLogger(__name__)


class DumpManager:
    """Download, inspect and remove dumps stored in `directory`.

    The directory is injected rather than discovered so callers and tests
    decide where the cache lives.
    """

    def __init__(
        self,
        directory: Path,
        *,
        archive: ArchiveConfig | None = None,
        session: Optional[requests.Session] = None,
        link_backend: LinkBackend = os_symlink_backend,
    ) -> None:
        self._directory = Path(directory)
        self._archive = archive or ArchiveConfig()
        self._session = session
        self._link_backend = link_backend

    @property
    def directory(self) -> Path:
        return self._directory

    def dump_path(self, kind: DumpKind, day: date) -> Path:
        return local_path(self._directory, kind, day)

    def has_dump(self, kind: DumpKind, day: date) -> bool:
        return self.dump_path(kind, day).is_file()

    def require_dump(self, kind: DumpKind, day: date) -> Path:
        """Return the path of a cached dump, raising if it is absent."""

        path = self.dump_path(kind, day)
        if not path.is_file():
            raise DumpNotFoundError(path)
        return path

    def download_dump(self, kind: DumpKind, day: date, *, user_agent: str, force: bool = False) -> Path:
        """Fetch a dump from the archive into the cache.

        An existing copy is left alone unless `force` is set.
        """

        path = self.dump_path(kind, day)
        if path.exists() and not force:
            raise DumpExistsError(path)

        return fetch_dump(
            kind,
            day,
            self._directory,
            user_agent=user_agent,
            host=self._archive.host,
            scheme=self._archive.scheme,
            timeout_seconds=self._archive.timeout_seconds,
            expected_content_type=self._archive.content_type,
            chunk_size=self._archive.chunk_size,
            session=self._session,
        )

    def delete_dump(self, kind: DumpKind, day: date) -> Path:
        path = self.require_dump(kind, day)
        path.unlink()
        logger.info("Deleted %s", path)
        return path

    def list_dumps(
        self,
        *,
        kind: Optional[DumpKind] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        order: DumpOrder = DumpOrder.ASCENDING,
    ) -> list[DumpRecord]:
        return query(scan(self._directory), kind=kind, start=start, end=end, order=order)

    def link(self, target: Path) -> Path:
        return link_cache(self._directory, target, backend=self._link_backend)


__all__ = ["DumpManager"]
