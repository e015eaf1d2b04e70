from __future__ import annotations

from dataclasses import dataclass
from ..domain.models import PatternQuery
from .properties import PropertiesInput

TOKENSREGEX = "tokensregex"
SEMGREX = "semgrex"
TREGEX = "tregex"

# Pattern languages whose endpoint accepts the ``filter`` parameter.
FILTERABLE_PATTERN_KINDS = frozenset({TOKENSREGEX, SEMGREX})

PING = "ping"
LIVE = "live"
READY = "ready"


@dataclass(frozen=True)
class AnnotateRequest:
    text: str
    properties: PropertiesInput = None


@dataclass(frozen=True)
class PatternRequest:
    kind: str
    text: str
    query: PatternQuery


@dataclass(frozen=True)
class ProbeRequest:
    path: str
