"""Archive download utilities."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Optional

import requests

from pallets import __version__
from pallets.dumps.models import DumpKind
from pallets.dumps.naming import ARCHIVE_HOST, local_path, remote_url
from pallets.util.errors import ContentTypeMismatchError, MissingContentTypeError

logger = logging.getLogger(__name__)

EXPECTED_CONTENT_TYPE = "application/x-gzip"
DEFAULT_MAINTAINER = "Esfalsa"


def build_user_agent(user: str, *, maintainer: str = DEFAULT_MAINTAINER) -> str:
    """Return the identifying User-Agent NationStates asks scripts to send."""
    return f"pallets/{__version__} (by:{maintainer}, usedBy:{user})"


def fetch_dump(
    kind: DumpKind,
    day: date,
    directory: Path,
    *,
    user_agent: str,
    host: str = ARCHIVE_HOST,
    scheme: str = "https",
    timeout_seconds: float | None = 30.0,
    expected_content_type: str = EXPECTED_CONTENT_TYPE,
    chunk_size: int = 8192,
    headers: Mapping[str, str] | None = None,
    session: Optional[requests.Session] = None,
) -> Path:
    """Download one dump into `directory`, overwriting any existing copy.

    The response's Content-Type is checked before the destination is opened,
    so a rejected response never touches the filesystem. Transport errors
    (including non-2xx statuses) propagate as ``requests`` exceptions.
    """

    url = remote_url(kind, day, host=host, scheme=scheme)
    dest = local_path(directory, kind, day)

    merged_headers = dict(headers or {})
    merged_headers["User-Agent"] = user_agent

    getter = session.get if session is not None else requests.get
    logger.info("Fetching %s -> %s", url, dest)
    response = getter(url, stream=True, timeout=timeout_seconds, headers=merged_headers)
    try:
        response.raise_for_status()

        content_type = response.headers.get("Content-Type")
        if content_type is None:
            raise MissingContentTypeError(url)
        if content_type != expected_content_type:
            raise ContentTypeMismatchError(content_type, expected_content_type)

        with dest.open("wb") as handle:
            for chunk in response.iter_content(chunk_size=chunk_size):
                if chunk:
                    handle.write(chunk)
    finally:
        response.close()

    logger.info("Saved %s dump for %s to %s", kind, day.isoformat(), dest)
    return dest


__all__ = ["DEFAULT_MAINTAINER", "EXPECTED_CONTENT_TYPE", "build_user_agent", "fetch_dump"]
