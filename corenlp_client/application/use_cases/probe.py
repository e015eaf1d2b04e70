from __future__ import annotations

from ..dto import ProbeRequest
from ..endpoints import build_endpoint
from ..responses import normalize_get_response
from ...domain.interfaces import HttpTransport
from ...domain.models import Result, ServerConfig
from ...infrastructure.timeouts import request_timeout


class ProbeUseCase:
    """Use-case: GET a liveness endpoint (ping/live/ready) and return its trimmed text."""

    def __init__(self, transport: HttpTransport, config: ServerConfig) -> None:
        self._transport = transport
        self._config = config

    def execute(self, req: ProbeRequest) -> Result:
        endpoint = build_endpoint(self._config, req.path)
        return normalize_get_response(self._transport.get(endpoint, request_timeout(self._config)))
