from __future__ import annotations

import os
from typing import Mapping, Optional

from ..domain.models import ServerConfig

# setting name -> (environment variable, default)
_SETTINGS = {
    "host": ("CORENLP_HOST", "localhost"),
    "base_path": ("CORENLP_BASE_PATH", "/"),
    "port": ("CORENLP_PORT", "9000"),
    "recv_timeout": ("CORENLP_RECV_TIMEOUT", "30000"),
    "connect_timeout": ("CORENLP_CONNECT_TIMEOUT", "8000"),
}


def env_str(name: str, default: str) -> str:
    return os.getenv(name, default).strip() or default


def setting_str(key: str, settings: Optional[Mapping[str, object]] = None) -> str:
    """
    Resolve one named setting.

    Lookup order: explicit ``settings`` mapping, then the CORENLP_* environment
    variable, then the built-in default. Blank values count as unset.
    """
    env_name, default = _SETTINGS[key]
    if settings is not None:
        value = settings.get(key)
        if value is not None and str(value).strip():
            return str(value).strip()
    return env_str(env_name, default)


def setting_int(key: str, settings: Optional[Mapping[str, object]] = None) -> int:
    default = int(_SETTINGS[key][1])
    try:
        return int(setting_str(key, settings))
    except ValueError:
        return default


def corenlp_host(settings: Optional[Mapping[str, object]] = None) -> str:
    return setting_str("host", settings)


def corenlp_base_path(settings: Optional[Mapping[str, object]] = None) -> str:
    return setting_str("base_path", settings)


def corenlp_port(settings: Optional[Mapping[str, object]] = None) -> int:
    return setting_int("port", settings)


def recv_timeout_ms(settings: Optional[Mapping[str, object]] = None) -> int:
    """Receive timeout in milliseconds (CORENLP_RECV_TIMEOUT, default 30000)."""
    return setting_int("recv_timeout", settings)


def connect_timeout_ms(settings: Optional[Mapping[str, object]] = None) -> int:
    return setting_int("connect_timeout", settings)


def load_server_config(settings: Optional[Mapping[str, object]] = None) -> ServerConfig:
    """Build a ServerConfig from ``settings`` (if given), the environment and defaults."""
    return ServerConfig(
        host=corenlp_host(settings),
        base_path=corenlp_base_path(settings),
        port=corenlp_port(settings),
        recv_timeout=recv_timeout_ms(settings),
        connect_timeout=connect_timeout_ms(settings),
    )
