#!/usr/bin/env python3
"""
Google Cloud MCP Server

Exposes a fixed set of Google Cloud operations as MCP tools:
- gcp.whoami, gcp.projects.list
- gcs.buckets.list, gcs.objects.list, gcs.objects.download
- secretmanager.secrets.list, secretmanager.secrets.access
- pubsub.topics.list, pubsub.topics.publish
- run.services.list, compute.instances.list
- gapi.request: any discovery API method (allow-listed)

Architecture:
- adapters/: Thin Google API wrappers
- tools/: Tool schemas + handlers, build_registry()
- registry.py: Validation and dispatch
- auth.py: ADC credentials + project resolution
- server.py: MCP wiring over stdio (this file)

The registry is the only validator: the SDK's own jsonschema check is
turned off so callers get our structured InputValidationError.
"""

import asyncio
import os
import signal
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from formatting import format_result
from gcp_config import SERVER_NAME, SERVER_VERSION, log_level
from logging_config import configure_logging, logger
from models import GcpError
from registry import ToolRegistry
from tools import build_registry


class ToolCallFailed(Exception):
    """
    Raised out of the call_tool handler so the SDK answers with isError.

    The message is the JSON error object ({"error": true, "kind": ...}),
    which the SDK uses verbatim as the error result's text.
    """

    def __init__(self, error: GcpError):
        super().__init__(format_result(error.to_dict()))
        self.error = error


def list_tool_definitions(registry: ToolRegistry) -> list[types.Tool]:
    """Every registered tool as an MCP Tool, in registration order."""
    return [
        types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.input_schema(),
        )
        for tool in registry.list_tools()
    ]


async def call_registered_tool(
    registry: ToolRegistry,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """
    Invoke a tool and convert its result to MCP content.

    Raises:
        ToolCallFailed: Wrapping any GcpError from validation or execution.
    """
    try:
        result = await registry.invoke(name, arguments)
    except GcpError as e:
        raise ToolCallFailed(e) from e
    return [types.TextContent(type="text", text=block.text) for block in result.content]


def create_server(registry: ToolRegistry) -> Server:
    """Wire a registry into an MCP low-level server."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return list_tool_definitions(registry)

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await call_registered_tool(registry, name, arguments)

    return server


async def serve() -> None:
    """Serve every tool over stdio until the client disconnects."""
    registry = build_registry()
    server = create_server(registry)
    logger.info(f"{SERVER_NAME} {SERVER_VERSION} serving {len(registry)} tools on stdio")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


# ============================================================================
# SERVER ENTRY POINT
# ============================================================================

def _shutdown_handler(signum: int, frame: object) -> None:
    """Handle termination signals by exiting immediately.

    os._exit() is required because sys.exit() raises SystemExit,
    which asyncio's event loop catches and ignores. The server
    would survive SIGTERM until stdin closes.
    """
    os._exit(0)


def main() -> None:
    configure_logging(log_level())
    signal.signal(signal.SIGTERM, _shutdown_handler)
    signal.signal(signal.SIGINT, _shutdown_handler)
    asyncio.run(serve())


if __name__ == "__main__":
    main()
