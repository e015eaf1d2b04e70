from __future__ import annotations


class ContractError(ValueError):
    """Raised when a call violates its documented contract (e.g., non-string text)."""


class PropertiesSerializationError(ContractError):
    """Raised when annotation properties cannot be normalized or encoded as JSON."""
