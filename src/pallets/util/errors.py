"""Error types raised by pallets operations."""

from __future__ import annotations

from pathlib import Path


class PalletsError(Exception):
    """Base class for user-facing pallets failures."""


class CacheDirectoryError(PalletsError):
    """Raised when the dump cache directory cannot be resolved, created or read."""


class DumpNotFoundError(PalletsError):
    """Raised when a dump is required locally but is absent."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Dump does not exist: {path}")
        self.path = path


class DumpExistsError(PalletsError):
    """Raised when downloading a dump that is already cached without --force."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Dump already exists: {path}")
        self.path = path


class LinkExistsError(PalletsError):
    """Raised when a link destination is already occupied."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Path already exists: {path}")
        self.path = path


class ContentTypeError(PalletsError):
    """Raised when an archive response does not declare the expected content type."""


class ContentTypeMismatchError(ContentTypeError):
    def __init__(self, content_type: str, expected: str) -> None:
        super().__init__(f"Unexpected content type: {content_type} (expected {expected})")
        self.content_type = content_type
        self.expected = expected


class MissingContentTypeError(ContentTypeError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Could not determine content type for {url}")
        self.url = url


__all__ = [
    "CacheDirectoryError",
    "ContentTypeError",
    "ContentTypeMismatchError",
    "DumpExistsError",
    "DumpNotFoundError",
    "LinkExistsError",
    "MissingContentTypeError",
    "PalletsError",
]
