"""
Type definitions for mcp-gcp.

Dataclasses and errors defining the contracts between layers:
- auth produces a ResolvedIdentity per invocation
- Adapters take credentials and return raw API payloads
- Tools wrap payloads in a ToolResult
- The registry owns ToolDefinitions and raises GcpError subclasses

Nothing here outlives a single request except the ToolDefinitions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Literal

from pydantic import BaseModel


# ============================================================================
# ERROR TYPES
# ============================================================================

class ErrorKind(Enum):
    """Categories of errors for consistent handling."""
    AUTH_RESOLUTION = "auth_resolution"          # No usable ADC credential
    MISSING_PROJECT = "missing_project"          # No project id from any source
    INPUT_VALIDATION = "input_validation"        # Arguments don't match the schema
    UNKNOWN_TOOL = "unknown_tool"                # No tool registered under that name
    DUPLICATE_TOOL = "duplicate_tool"            # Name registered twice
    UNKNOWN_API = "unknown_api"                  # No discovery doc for api/version
    INVALID_METHOD_PATH = "invalid_method_path"  # Intermediate path segment missing
    NOT_CALLABLE = "not_callable"                # Final path segment isn't a method
    METHOD_NOT_ALLOWED = "method_not_allowed"    # Blocked by the gapi allow-list
    TOOL_EXECUTION = "tool_execution"            # Underlying API call failed
    SERIALIZATION = "serialization"              # Result can't be rendered as text


class GcpError(Exception):
    """
    Structured error for consistent handling across layers.

    Tools and the registry raise these; the server turns them into
    MCP error results via to_dict().
    """

    kind: ErrorKind = ErrorKind.TOOL_EXECUTION

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for MCP response."""
        return {
            "error": True,
            "kind": self.kind.value,
            "message": self.message,
            **self.details,
        }


class AuthResolutionError(GcpError):
    kind = ErrorKind.AUTH_RESOLUTION


class MissingProjectError(GcpError):
    kind = ErrorKind.MISSING_PROJECT


class InputValidationError(GcpError):
    """Arguments rejected by a tool's input schema.

    details["errors"] lists every violation as {field, constraint, message}.
    """
    kind = ErrorKind.INPUT_VALIDATION


class UnknownToolError(GcpError):
    kind = ErrorKind.UNKNOWN_TOOL


class DuplicateToolError(GcpError):
    kind = ErrorKind.DUPLICATE_TOOL


class UnknownAPIError(GcpError):
    kind = ErrorKind.UNKNOWN_API


class InvalidMethodPathError(GcpError):
    """details["prefix"] is the dotted path up to and including the missing segment."""
    kind = ErrorKind.INVALID_METHOD_PATH


class NotCallableError(GcpError):
    kind = ErrorKind.NOT_CALLABLE


class MethodNotAllowedError(GcpError):
    kind = ErrorKind.METHOD_NOT_ALLOWED


class ToolExecutionError(GcpError):
    """Wraps a failure from the underlying Google API call (cause is chained)."""
    kind = ErrorKind.TOOL_EXECUTION


class SerializationError(GcpError):
    kind = ErrorKind.SERIALIZATION


# ============================================================================
# TOOL TYPES
# ============================================================================

@dataclass(frozen=True)
class TextContent:
    """One text block of a tool response."""
    text: str
    type: Literal["text"] = "text"


@dataclass
class ToolResult:
    """Response of a single tool invocation."""
    content: list[TextContent] = field(default_factory=list)

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])


ToolHandler = Callable[[Any], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolDefinition:
    """
    A registered tool.

    input_model is the pydantic model arguments are validated against;
    its JSON schema (camelCase aliases) is what clients see.
    """
    name: str
    description: str
    input_model: type[BaseModel]
    handler: ToolHandler

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)


# ============================================================================
# AUTH TYPES
# ============================================================================

@dataclass
class ResolvedIdentity:
    """
    Credentials and project for one tool invocation.

    Never cached or shared: every invocation resolves its own.
    """
    credentials: Any  # google.auth.credentials.Credentials
    project_id: str | None = None
