from __future__ import annotations

import logging
import os

ROOT_LOGGER = "corenlp_client"
LOG_FORMAT = "%(levelname)s | %(message)s"


def _configure_package_logger() -> None:
    """
    Attach handlers to the ``corenlp_client`` logger only; the root logger is
    left to the application.

    Without CORENLP_LOG_LEVEL a NullHandler is installed and records propagate
    as usual. With it, a StreamHandler at that level is added as well.
    """
    package_logger = logging.getLogger(ROOT_LOGGER)
    if package_logger.handlers:
        return
    package_logger.addHandler(logging.NullHandler())
    level_name = os.getenv("CORENLP_LOG_LEVEL", "").strip().upper()
    if level_name:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(getattr(logging, level_name, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``corenlp_client`` namespace."""
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    _configure_package_logger()
    return logging.getLogger(name)
