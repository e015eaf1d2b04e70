from __future__ import annotations

from typing import Optional, Tuple

from ..domain.models import ServerConfig


def http_timeout_seconds(milliseconds: int) -> Optional[float]:
    """Convert a millisecond setting to the float seconds ``requests`` expects.

    Zero or negative means no limit (``None``); ``requests`` rejects such values.
    """
    ms = int(milliseconds)
    if ms <= 0:
        return None
    return ms / 1000.0


def request_timeout(config: ServerConfig) -> Tuple[Optional[float], Optional[float]]:
    """(connect, receive) timeout pair for ``requests`` built from the server config."""
    return (
        http_timeout_seconds(config.connect_timeout),
        http_timeout_seconds(config.recv_timeout),
    )
