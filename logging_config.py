"""
Logging for mcp-gcp.

One package logger, `mcp_gcp`, writing to stderr: stdout carries the MCP
stream. Adapters log each Google API call at debug level through
log_api_call / log_api_result; the registry logs tool failures at warning.
"""

import logging
import sys
from typing import Any

logger = logging.getLogger("mcp_gcp")

# googleapiclient logs every discovery fetch and cache miss at INFO
_NOISY_LOGGERS = ("googleapiclient.discovery", "googleapiclient.discovery_cache")

# Request arguments that carry payloads (message data, request bodies)
_PAYLOAD_PARAMS = frozenset({"body", "data", "messages", "parameters"})

_MAX_PARAM_REPR = 120


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR); unknown names mean INFO
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logger.setLevel(resolved)

    # Only add handler if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        ))
        logger.addHandler(handler)

    # Discovery chatter is only interesting when debugging
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if resolved <= logging.DEBUG else logging.WARNING)


# NOTE: Call configure_logging() explicitly in server.py or cli.py.
# We don't auto-configure to avoid side effects on import.


def _describe_param(name: str, value: Any) -> str:
    if name in _PAYLOAD_PARAMS:
        size = len(value) if hasattr(value, "__len__") else "?"
        return f"{name}=<{type(value).__name__} len={size}>"
    text = repr(value)
    if len(text) > _MAX_PARAM_REPR:
        text = text[:_MAX_PARAM_REPR] + "..."
    return f"{name}={text}"


def _describe_response(response: Any) -> str:
    """Item count and paging state of a list response, or the payload size."""
    if isinstance(response, (bytes, bytearray)):
        return f"{len(response)} bytes"
    if not isinstance(response, dict):
        return "completed"

    parts = []
    for key, value in response.items():
        if isinstance(value, list):
            parts.append(f"{len(value)} {key}")
            break
    if response.get("nextPageToken"):
        parts.append("more pages")
    return ", ".join(parts) or "completed"


def log_api_call(api: str, method: str, **params: Any) -> None:
    """Log a Google API call; payload-bearing arguments are logged by size only."""
    param_str = ", ".join(_describe_param(k, v) for k, v in params.items() if v is not None)
    logger.debug(f"API: {api}.{method}({param_str})")


def log_api_result(api: str, method: str, response: Any = None) -> None:
    """Log a one-line summary of an API response."""
    logger.debug(f"API: {api}.{method} -> {_describe_response(response)}")
