from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_pallets_logger():
    """Drop handlers CLI invocations attach to the process-wide ``pallets`` logger.

    CliRunner closes its temporary stderr after each invoke, so a handler left
    bound to it would break later tests that log or flush.
    """
    logger = logging.getLogger("pallets")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in original_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(original_level)
