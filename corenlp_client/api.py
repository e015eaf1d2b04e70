"""
Public client for a Stanford CoreNLP server.

Every call returns a tagged Result instead of raising:

    Success(value)            status 200 (decoded JSON, or trimmed text for probes)
    HttpError(status, body)   server answered with another status
    TransportError(message)   connection refused, DNS failure, timeout
    JsonError(body)           status 200 but the body is not JSON

Only caller mistakes (properties that cannot be encoded, non-string text)
raise, as ContractError / PropertiesSerializationError.
"""
from __future__ import annotations

from typing import Mapping, Optional

from .application.dto import (
    LIVE,
    PING,
    READY,
    SEMGREX,
    TOKENSREGEX,
    TREGEX,
    AnnotateRequest,
    PatternRequest,
    ProbeRequest,
)
from .application.properties import PropertiesInput
from .application.use_cases.annotate import AnnotateUseCase
from .application.use_cases.pattern_query import PatternQueryUseCase
from .application.use_cases.probe import ProbeUseCase
from .domain.interfaces import HttpTransport
from .domain.models import PatternQuery, Result, ServerConfig
from .infrastructure.config import load_server_config
from .infrastructure.corenlp.client import RequestsHttpTransport


class CoreNLPClient:
    """Thin, stateless client; safe to share between threads.

    Args:
        config: Fixed server settings. When omitted, settings are resolved from
            ``settings`` / the CORENLP_* environment on every call.
        transport: HTTP adapter; defaults to ``RequestsHttpTransport``.
        settings: Optional key-value source (host, base_path, port,
            recv_timeout, connect_timeout) consulted before the environment.
    """

    def __init__(
        self,
        config: Optional[ServerConfig] = None,
        transport: Optional[HttpTransport] = None,
        settings: Optional[Mapping[str, object]] = None,
    ) -> None:
        self._config = config
        self._settings = settings
        self._transport = transport or RequestsHttpTransport()

    @property
    def config(self) -> ServerConfig:
        if self._config is not None:
            return self._config
        return load_server_config(self._settings)

    def annotate(self, text: str, properties: PropertiesInput = None) -> Result:
        """Annotate ``text``; ``properties`` selects annotators and options (outputFormat is always JSON).

        Without properties the server runs its default pipeline, which can be
        expensive; pass e.g. ``{"annotators": "tokenize,ssplit,pos"}`` to scope it.
        """
        req = AnnotateRequest(text=text, properties=properties)
        return AnnotateUseCase(self._transport, self.config).execute(req)

    def tokensregex(self, text: str, pattern: str, filter: bool = False) -> Result:
        """Apply a TokensRegex pattern, e.g. ``(?$foxtype [{pos:JJ}]+ ) fox``."""
        return self._pattern(TOKENSREGEX, text, PatternQuery(pattern=pattern, filter=filter))

    def semgrex(self, text: str, pattern: str, filter: bool = False) -> Result:
        """Apply a Semgrex pattern over the dependency graph, e.g. ``{pos:/VB.*/} >nsubj {}=subject``."""
        return self._pattern(SEMGREX, text, PatternQuery(pattern=pattern, filter=filter))

    def tregex(self, text: str, pattern: str) -> Result:
        """Apply a Tregex pattern over the parse tree, e.g. ``NP < NN=animal``."""
        return self._pattern(TREGEX, text, PatternQuery(pattern=pattern))

    def ping(self) -> Result:
        """Success("pong") when the server is up."""
        return self._probe(PING)

    def live(self) -> Result:
        """Success("live") when the server process is alive (maybe not ready)."""
        return self._probe(LIVE)

    def ready(self) -> Result:
        """Success("ready") when the server is alive and accepting requests."""
        return self._probe(READY)

    def _pattern(self, kind: str, text: str, query: PatternQuery) -> Result:
        req = PatternRequest(kind=kind, text=text, query=query)
        return PatternQueryUseCase(self._transport, self.config).execute(req)

    def _probe(self, path: str) -> Result:
        return ProbeUseCase(self._transport, self.config).execute(ProbeRequest(path=path))


# --- Module-level shortcuts using the process settings ---

def annotate(text: str, properties: PropertiesInput = None) -> Result:
    return CoreNLPClient().annotate(text, properties)


def tokensregex(text: str, pattern: str, filter: bool = False) -> Result:
    return CoreNLPClient().tokensregex(text, pattern, filter)


def semgrex(text: str, pattern: str, filter: bool = False) -> Result:
    return CoreNLPClient().semgrex(text, pattern, filter)


def tregex(text: str, pattern: str) -> Result:
    return CoreNLPClient().tregex(text, pattern)


def ping() -> Result:
    return CoreNLPClient().ping()


def live() -> Result:
    return CoreNLPClient().live()


def ready() -> Result:
    return CoreNLPClient().ready()
