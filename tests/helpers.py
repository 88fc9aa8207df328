"""
Shared test helpers for mcp-gcp.

Centralizes mock wiring patterns that repeat across test files.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock, seal

from models import ToolResult

# Project id the patched google.auth.default() reports
ADC_PROJECT = "adc-project"


def mock_api_chain(
    mock_service: MagicMock,
    chain: str,
    response: Any = None,
    *,
    side_effect: Any = None,
) -> MagicMock:
    """Set up a mock Google API response for a chained call.

    Navigates the MagicMock attribute chain and sets return_value (or side_effect)
    on the final method. Returns the final mock method for adding assertions.

    Args:
        mock_service: The mocked service object
        chain: Dot-separated chain. Each part except the last is treated as
               a callable method (traversed via .return_value).
               Examples: "buckets.list.execute",
                         "projects.secrets.versions.access.execute"
        response: The return value for the final method
        side_effect: Alternative to response — sets side_effect instead

    Examples:
        mock_api_chain(service, "buckets.list.execute", {"items": []})
        # equivalent to: service.buckets().list().execute.return_value = {"items": []}
    """
    parts = chain.split(".")
    obj = mock_service
    for part in parts[:-1]:
        obj = getattr(obj, part).return_value
    final = getattr(obj, parts[-1])
    if side_effect is not None:
        final.side_effect = side_effect
    elif response is not None:
        final.return_value = response
    return final


def api_method(mock_service: MagicMock, chain: str) -> MagicMock:
    """The mock for the API method itself (e.g. "buckets.list"), for call assertions."""
    obj = mock_service
    parts = chain.split(".")
    for part in parts[:-1]:
        obj = getattr(obj, part).return_value
    return getattr(obj, parts[-1])


def seal_service(mock_service: MagicMock) -> None:
    """Seal a mock service after all mock_api_chain() calls.

    Prevents MagicMock from silently creating new attributes when
    production code renames an API method.

    Must be called AFTER all mock_api_chain() calls for this service.
    """
    seal(mock_service)


def result_text(result: ToolResult) -> str:
    """The single text block of a ToolResult."""
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


def result_json(result: ToolResult) -> Any:
    """Parse a ToolResult's text back into the payload it was formatted from."""
    return json.loads(result_text(result))
