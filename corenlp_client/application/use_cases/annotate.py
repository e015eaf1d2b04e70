from __future__ import annotations

from ..dto import AnnotateRequest
from ..endpoints import build_endpoint
from ..properties import force_json_output, serialize_properties
from ..responses import normalize_post_response
from ...domain.errors import ContractError
from ...domain.interfaces import HttpTransport
from ...domain.models import Result, ServerConfig
from ...infrastructure.timeouts import request_timeout


class AnnotateUseCase:
    """Use-case: run the annotation pipeline over a document and decode the JSON result."""

    def __init__(self, transport: HttpTransport, config: ServerConfig) -> None:
        self._transport = transport
        self._config = config

    def execute(self, req: AnnotateRequest) -> Result:
        """
        POST the text to the server root with JSON output forced.

        Args:
            req: Document text and optional annotator properties (mapping or pairs).

        Returns:
            Result: Success with the decoded annotation, or HttpError/TransportError/JsonError.

        Raises:
            PropertiesSerializationError: properties cannot be normalized or encoded.
        """
        if not isinstance(req.text, str):
            raise ContractError(f"text must be a string, got {type(req.text).__name__}")
        props = force_json_output(req.properties)
        params = {"properties": serialize_properties(props)}
        endpoint = build_endpoint(self._config)
        outcome = self._transport.post(endpoint, req.text, params, request_timeout(self._config))
        return normalize_post_response(outcome, endpoint, props)
