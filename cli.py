#!/usr/bin/env python3
"""
CLI interface for mcp-gcp.

Usage:
    mcp-gcp-cli tools
    mcp-gcp-cli call gcs.buckets.list --args '{"projectId": "my-project"}'
    mcp-gcp-cli whoami

Same registry, same validation and same output as the MCP tools, for
agents and humans that don't speak MCP.
"""

import argparse
import asyncio
import json
import sys
from typing import Any

from formatting import format_result
from gcp_config import log_level
from logging_config import configure_logging
from models import GcpError
from tools import build_registry


def _parse_args_json(raw: str | None) -> dict[str, Any]:
    """Parse --args; must be a JSON object."""
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SystemExit(f"--args is not valid JSON: {e}")
    if not isinstance(value, dict):
        raise SystemExit("--args must be a JSON object")
    return value


def _call(tool: str, arguments: dict[str, Any]) -> int:
    """Invoke a tool, print its text (or the error object). Returns exit code."""
    registry = build_registry()
    try:
        result = asyncio.run(registry.invoke(tool, arguments))
    except GcpError as e:
        print(format_result(e.to_dict()), file=sys.stderr)
        return 1
    for block in result.content:
        print(block.text)
    return 0


def cmd_tools(args: argparse.Namespace) -> int:
    """List registered tools."""
    for tool in build_registry().list_tools():
        if args.schema:
            print(json.dumps({"name": tool.name, "inputSchema": tool.input_schema()}, indent=2))
        else:
            print(f"{tool.name:32} {tool.description}")
    return 0


def cmd_call(args: argparse.Namespace) -> int:
    """Call a tool by name."""
    return _call(args.tool, _parse_args_json(args.args))


def cmd_whoami(args: argparse.Namespace) -> int:
    """Show the ambient ADC identity."""
    return _call("gcp.whoami", {"includeScopes": True})


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Google Cloud tools from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    mcp-gcp-cli tools
    mcp-gcp-cli whoami
    mcp-gcp-cli call gcp.projects.list --args '{"pageSize": 10}'
    mcp-gcp-cli call secretmanager.secrets.access --args '{"secretId": "api-key"}'
    MCP_GCP_GAPI_ALLOW='storage.v1.*' mcp-gcp-cli call gapi.request \\
        --args '{"api": "storage", "version": "v1", "method": "buckets.get", "parameters": {"bucket": "b"}}'
""",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # tools
    tools_p = subparsers.add_parser("tools", help="List available tools")
    tools_p.add_argument("--schema", action="store_true", help="Print input schemas as JSON")
    tools_p.set_defaults(func=cmd_tools)

    # call
    call_p = subparsers.add_parser("call", help="Call a tool")
    call_p.add_argument("tool", help="Tool name, e.g. gcs.buckets.list")
    call_p.add_argument("--args", help="Tool arguments as a JSON object")
    call_p.set_defaults(func=cmd_call)

    # whoami
    whoami_p = subparsers.add_parser("whoami", help="Show ADC identity and default project")
    whoami_p.set_defaults(func=cmd_whoami)

    args = parser.parse_args(argv)
    configure_logging(args.log_level or log_level())
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
