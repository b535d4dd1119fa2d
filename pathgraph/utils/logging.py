"""Logging helpers for pathgraph.

The library never installs real handlers; applications configure logging.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "pathgraph"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``pathgraph``."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
