"""Pydantic models describing pallets configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArchiveConfig(BaseModel):
    """Where dumps are published and how to request them."""

    model_config = ConfigDict(extra="allow")

    host: str = "www.nationstates.net"
    scheme: Literal["https", "http"] = "https"
    content_type: str = "application/x-gzip"
    timeout_seconds: float = Field(default=30.0, gt=0)
    maintainer: str = "Esfalsa"
    chunk_size: int = Field(default=8192, ge=1)

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        host = value.strip().strip("/")
        if not host:
            raise ValueError("archive host must not be empty.")
        return host


class RuntimeConfig(BaseModel):
    """Local settings such as the dump directory and date parsing."""

    model_config = ConfigDict(extra="allow")

    dump_dir: Optional[Path] = None
    log_path: Optional[Path] = None
    date_format: str = "%Y-%m-%d"


class PalletsConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="allow")

    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)


__all__ = ["ArchiveConfig", "PalletsConfig", "RuntimeConfig"]
