from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Tuple

from .models import TransportOutcome


class HttpTransport(ABC):
    """Port for the HTTP layer talking to the CoreNLP server."""

    @abstractmethod
    def post(
        self,
        endpoint: str,
        body: str,
        params: Mapping[str, str],
        timeout: Optional[Tuple[Optional[float], Optional[float]]] = None,
    ) -> TransportOutcome:
        """Send ``body`` as the raw request body with ``params`` as query parameters.

        Implementations must not raise for network failures; they report them
        as ``TransportFailure``. A single attempt is made.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, endpoint: str, timeout: Optional[Tuple[Optional[float], Optional[float]]] = None) -> TransportOutcome:
        """Plain GET without parameters (probes)."""
        raise NotImplementedError
