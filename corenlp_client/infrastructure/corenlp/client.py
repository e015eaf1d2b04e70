from __future__ import annotations

from typing import Mapping, Optional, Tuple
import requests

from ...domain.interfaces import HttpTransport
from ...domain.models import TransportFailure, TransportOutcome, TransportResponse

TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def _decode_body(r: requests.Response) -> str:
    # CoreNLP often omits the charset; requests would then fall back to ISO-8859-1.
    if r.encoding is None or "charset" not in r.headers.get("content-type", "").lower():
        r.encoding = "utf-8"
    return r.text


class RequestsHttpTransport(HttpTransport):
    """HTTP adapter for the CoreNLP server built on ``requests``.

    One request per call, no retries, no session: pooling is left to the
    library defaults.
    """

    def post(
        self,
        endpoint: str,
        body: str,
        params: Mapping[str, str],
        timeout: Optional[Tuple[Optional[float], Optional[float]]] = None,
    ) -> TransportOutcome:
        try:
            r = requests.post(
                endpoint,
                params=dict(params),
                data=body.encode("utf-8"),
                headers={"content-type": TEXT_CONTENT_TYPE},
                timeout=timeout,
            )
            return TransportResponse(status_code=r.status_code, body=_decode_body(r))
        except requests.exceptions.RequestException as e:
            return TransportFailure(message=_failure_message(e))

    def get(self, endpoint: str, timeout: Optional[Tuple[Optional[float], Optional[float]]] = None) -> TransportOutcome:
        try:
            r = requests.get(endpoint, timeout=timeout)
            return TransportResponse(status_code=r.status_code, body=_decode_body(r))
        except requests.exceptions.RequestException as e:
            return TransportFailure(message=_failure_message(e))


def _failure_message(e: requests.exceptions.RequestException) -> str:
    """Human-readable text for a transport exception."""
    if isinstance(e, requests.exceptions.Timeout):
        return f"timeout: {e}"
    return str(e) or e.__class__.__name__
