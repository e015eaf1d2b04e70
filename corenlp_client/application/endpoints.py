from __future__ import annotations

from ..domain.models import ServerConfig


def build_endpoint(config: ServerConfig, relative_path: str = "") -> str:
    """
    Compose the URL for a server path.

    Exactly one slash separates the base path from ``relative_path`` however
    either was written ("/", "", "/api/", "ping", "/ping" ...). Host and base
    path are trusted configuration and are not escaped.
    """
    base = config.base_path.rstrip("/")
    rel = relative_path.lstrip("/")
    return f"http://{config.host}:{int(config.port)}{base}/{rel}"
