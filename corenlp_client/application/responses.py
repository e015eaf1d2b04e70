from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from ..domain.models import (
    HttpError,
    JsonError,
    Result,
    Success,
    TransportError,
    TransportFailure,
    TransportOutcome,
)
from ..infrastructure.logging import get_logger
from .properties import describe_properties

logger = get_logger("corenlp_client.application.responses")

HTTP_OK = 200


def normalize_get_response(outcome: TransportOutcome) -> Result:
    """Map a probe GET outcome to a Result. Bodies are plain text; nothing is logged."""
    if isinstance(outcome, TransportFailure):
        return TransportError(message=outcome.message)
    body = outcome.body.strip()
    if outcome.status_code == HTTP_OK:
        return Success(value=body)
    return HttpError(status_code=outcome.status_code, body=body)


def normalize_post_response(
    outcome: TransportOutcome,
    endpoint: str,
    properties: Optional[Mapping[str, Any]] = None,
) -> Result:
    """
    Map a POST outcome to a Result.

    - transport failure -> TransportError, plus one error log line naming the
      endpoint and the request properties
    - 200 -> Success(decoded JSON), or JsonError(raw body) when decoding fails
    - other status -> HttpError(status, trimmed body); error payloads are not decoded
    """
    if isinstance(outcome, TransportFailure):
        logger.error(
            "Failed on query to endpoint '%s' with properties: %s: %s",
            endpoint,
            describe_properties(properties),
            outcome.message,
        )
        return TransportError(message=outcome.message)
    if outcome.status_code != HTTP_OK:
        return HttpError(status_code=outcome.status_code, body=outcome.body.strip())
    try:
        return Success(value=json.loads(outcome.body))
    except ValueError:
        return JsonError(body=outcome.body)
