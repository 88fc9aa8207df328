"""
Response formatting — any API payload to the text a tool returns.

- str passes through unchanged
- bytes decode as UTF-8
- everything else becomes indented JSON in source key order
"""

import json
from typing import Any

from models import SerializationError


def format_result(value: Any) -> str:
    """
    Serialize a result value as text.

    Raises:
        SerializationError: If value contains a reference cycle.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")

    try:
        # default=str covers datetimes, Decimals and other non-JSON leaves
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
    except (ValueError, RecursionError) as e:
        raise SerializationError(f"Result can't be serialized: {e}") from e
