"""Logging setup utilities."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def configure_logging(*, log_path: Path | None = None, level: int = logging.WARNING) -> logging.Logger:
    """Configure the ``pallets`` logger.

    `level` applies to console output only, which goes to stderr so command
    output on stdout stays parseable. The log file, when given, receives
    every record from INFO up.
    """

    logger = logging.getLogger("pallets")
    logger.setLevel(logging.DEBUG)

    streams = [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    if not streams:
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
        streams = [stream_handler]
    for handler in streams:
        handler.setLevel(level)

    if log_path and str(Path(log_path).resolve()) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.INFO)
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
