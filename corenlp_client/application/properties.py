from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from ..domain.errors import PropertiesSerializationError

OUTPUT_FORMAT_KEY = "outputFormat"
OUTPUT_FORMAT_JSON = "JSON"

PropertiesInput = Union[Mapping[str, Any], Sequence[Tuple[str, Any]], None]


def normalize_properties(properties: PropertiesInput) -> Dict[str, Any]:
    """
    Turn caller-supplied annotator properties into a fresh dict.

    Accepts a mapping, an ordered sequence of ``(name, value)`` pairs (later
    pairs win on duplicate names) or ``None``. The caller's object is never
    modified.

    Raises:
        PropertiesSerializationError: a pair is malformed or a name is not a string.
    """
    if properties is None:
        return {}
    if isinstance(properties, Mapping):
        items = list(properties.items())
    elif isinstance(properties, (str, bytes)) or not isinstance(properties, Sequence):
        raise PropertiesSerializationError(
            f"properties must be a mapping or a sequence of (name, value) pairs, got {type(properties).__name__}"
        )
    else:
        items = []
        for pair in properties:
            if not isinstance(pair, (tuple, list)) or len(pair) != 2:
                raise PropertiesSerializationError(f"Malformed property pair: {pair!r}")
            items.append((pair[0], pair[1]))

    out: Dict[str, Any] = {}
    for name, value in items:
        if not isinstance(name, str):
            raise PropertiesSerializationError(f"Property name must be a string, got {name!r}")
        out[name] = value
    return out


def force_json_output(properties: PropertiesInput) -> Dict[str, Any]:
    """Normalized copy of ``properties`` with outputFormat=JSON (overrides any caller value)."""
    props = normalize_properties(properties)
    props[OUTPUT_FORMAT_KEY] = OUTPUT_FORMAT_JSON
    return props


def serialize_properties(properties: Mapping[str, Any]) -> str:
    """Encode properties as the JSON string the server reads from the ``properties`` parameter."""
    try:
        return json.dumps(dict(properties), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise PropertiesSerializationError(f"Annotation properties are not JSON-encodable: {e}") from e


def describe_properties(properties: Optional[Mapping[str, Any]]) -> str:
    """Single-line dump of request properties for diagnostics; never raises."""
    if not properties:
        return "{}"
    return json.dumps(dict(properties), sort_keys=True, default=repr)
