from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable

import requests
from requests.structures import CaseInsensitiveDict

from pallets.dumps.models import DumpKind
from pallets.dumps.naming import local_path


class DummyResponse:
    """Minimal stand-in for a streamed ``requests.Response``."""

    def __init__(
        self,
        content: bytes,
        *,
        status_code: int = 200,
        content_type: str | None = "application/x-gzip",
    ) -> None:
        self.content = content
        self.status_code = status_code
        self.headers = CaseInsensitiveDict()
        if content_type is not None:
            self.headers["Content-Type"] = content_type
        self.closed = False
        self.chunks_read = 0

    def iter_content(self, chunk_size: int = 8192):
        for idx in range(0, len(self.content), chunk_size):
            self.chunks_read += 1
            yield self.content[idx : idx + chunk_size]

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")

    def close(self) -> None:
        self.closed = True


def seed_dumps(directory: Path, dumps: Iterable[tuple[DumpKind, date]], *, payload: bytes = b"dump") -> list[Path]:
    """Create placeholder dump files in `directory`."""

    created: list[Path] = []
    for kind, day in dumps:
        path = local_path(directory, kind, day)
        path.write_bytes(payload)
        created.append(path)
    return created
