from __future__ import annotations


def prepare_pattern(raw: str) -> str:
    """Escape ``&`` and ``+`` so the server's query parser reads them literally.

    Not idempotent: call once per raw pattern.
    """
    return raw.replace("&", "\\&").replace("+", "\\+")
