from __future__ import annotations

from typing import Dict

from ..dto import FILTERABLE_PATTERN_KINDS, SEMGREX, TOKENSREGEX, TREGEX, PatternRequest
from ..endpoints import build_endpoint
from ..patterns import prepare_pattern
from ..responses import normalize_post_response
from ...domain.errors import ContractError
from ...domain.interfaces import HttpTransport
from ...domain.models import Result, ServerConfig
from ...infrastructure.timeouts import request_timeout

PATTERN_KINDS = frozenset({TOKENSREGEX, SEMGREX, TREGEX})


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


class PatternQueryUseCase:
    """Use-case: evaluate a TokensRegex, Semgrex or Tregex pattern against a document."""

    def __init__(self, transport: HttpTransport, config: ServerConfig) -> None:
        self._transport = transport
        self._config = config

    def build_params(self, req: PatternRequest) -> Dict[str, str]:
        # tregex takes no filter parameter on the server side
        params = {"pattern": prepare_pattern(req.query.pattern)}
        if req.kind in FILTERABLE_PATTERN_KINDS:
            params["filter"] = _bool_param(req.query.filter)
        return params

    def execute(self, req: PatternRequest) -> Result:
        if req.kind not in PATTERN_KINDS:
            raise ContractError(f"Unknown pattern kind '{req.kind}'; expected one of {sorted(PATTERN_KINDS)}")
        if not isinstance(req.text, str):
            raise ContractError(f"text must be a string, got {type(req.text).__name__}")
        if not isinstance(req.query.pattern, str):
            raise ContractError(f"pattern must be a string, got {type(req.query.pattern).__name__}")
        if not isinstance(req.query.filter, bool):
            raise ContractError(f"filter must be a bool, got {type(req.query.filter).__name__}")
        params = self.build_params(req)
        endpoint = build_endpoint(self._config, req.kind)
        outcome = self._transport.post(endpoint, req.text, params, request_timeout(self._config))
        return normalize_post_response(outcome, endpoint, params)
