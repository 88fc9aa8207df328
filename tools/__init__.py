"""
Tools — MCP tool implementations.

Each module declares its tools as (name, description, input model, handler)
entries in TOOLS; build_registry() registers them all. server.py and cli.py
both serve from that registry.

Every tool but gapi.request follows one pattern:
scopes → credentials/project → one Google API call → formatted text.
"""

from registry import ToolRegistry

from . import compute, gapi, identity, pubsub, secretmanager, storage

_MODULES = (identity, storage, secretmanager, pubsub, compute, gapi)


def build_registry() -> ToolRegistry:
    """Create a registry with every tool, in declaration order."""
    registry = ToolRegistry()
    for module in _MODULES:
        for name, description, input_model, handler in module.TOOLS:
            registry.register(name, description, input_model, handler)
    return registry


# Single source of truth for tool names, in registration order.
TOOL_NAMES = tuple(
    name for module in _MODULES for name, *_ in module.TOOLS
)

__all__ = ["build_registry", "TOOL_NAMES"]
