from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ServerConfig:
    """Connection settings for a CoreNLP server.

    Fields:
        host: Server host name; used verbatim in the endpoint URL.
        base_path: Path prefix the server is mounted under (e.g. "/" or "/corenlp").
        port: TCP port.
        recv_timeout: Receive timeout in milliseconds.
        connect_timeout: Connect timeout in milliseconds.
    """
    host: str = "localhost"
    base_path: str = "/"
    port: int = 9000
    recv_timeout: int = 30000
    connect_timeout: int = 8000


@dataclass(frozen=True)
class PatternQuery:
    """A TokensRegex/Semgrex/Tregex pattern as supplied by the caller (unescaped).

    Fields:
        pattern: Raw pattern text.
        filter: Opaque server-side flag; passed through untouched.
    """
    pattern: str
    filter: bool = False


# --- Transport outcomes (what the HTTP adapter reports) ---

@dataclass(frozen=True)
class TransportResponse:
    """The server answered; any status code."""
    status_code: int
    body: str


@dataclass(frozen=True)
class TransportFailure:
    """No usable response (refused, DNS, timeout, ...)."""
    message: str


TransportOutcome = Union[TransportResponse, TransportFailure]


# --- Call results (what callers branch on) ---

@dataclass(frozen=True)
class Success:
    """Status 200; decoded JSON for POST calls, trimmed text for probes."""
    value: Any

    ok = True
    kind = "ok"


@dataclass(frozen=True)
class HttpError:
    """Server reachable but replied with a non-200 status; body is trimmed and undecoded."""
    status_code: int
    body: str

    ok = False
    kind = "http"


@dataclass(frozen=True)
class TransportError:
    """Network-layer failure; message comes from the HTTP library."""
    message: str

    ok = False
    kind = "transport"


@dataclass(frozen=True)
class JsonError:
    """Status 200 but the body is not valid JSON; body is kept raw for diagnostics."""
    body: str

    ok = False
    kind = "json"


Result = Union[Success, HttpError, TransportError, JsonError]
