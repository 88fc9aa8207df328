"""
Tool registry — name → ToolDefinition, with validated dispatch.

The registry is the only place arguments are validated: the MCP layer
hands raw arguments straight through. Validation is strict (no "5" → 5
coercion, no clamping, no unknown keys).
"""

from typing import Any

from pydantic import BaseModel, ValidationError

from logging_config import logger
from models import (
    DuplicateToolError,
    GcpError,
    InputValidationError,
    ToolDefinition,
    ToolExecutionError,
    ToolHandler,
    ToolResult,
    UnknownToolError,
)


def _get_http_status(exception: BaseException) -> int | None:
    """
    Extract HTTP status code from exception if available.

    Works with googleapiclient.errors.HttpError and similar.
    """
    # Check for resp.status attribute (googleapiclient.errors.HttpError)
    if hasattr(exception, "resp") and hasattr(exception.resp, "status"):
        status = exception.resp.status
        if isinstance(status, int):
            return status

    # Check for status_code attribute (requests-style)
    if hasattr(exception, "status_code"):
        status = exception.status_code
        if isinstance(status, int):
            return status

    return None


def _to_execution_error(tool: str, exception: Exception) -> ToolExecutionError:
    """Wrap a failure from a tool's underlying API call."""
    details: dict[str, Any] = {"tool": tool, "cause": type(exception).__name__}
    status = _get_http_status(exception)
    if status is not None:
        details["status"] = status
        reason = getattr(exception, "reason", None)
        if reason:
            details["reason"] = reason
    return ToolExecutionError(f"{tool} failed: {exception}", details=details)


def _validation_errors(error: ValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors to {field, constraint, message}, fields by alias."""
    return [
        {
            "field": ".".join(str(part) for part in e["loc"]) or "(root)",
            "constraint": e["type"],
            "message": e["msg"],
        }
        for e in error.errors()
    ]


class ToolRegistry:
    """
    Registered tools in registration order.

    Definitions are immutable once registered; the registry holds no
    per-invocation state, so concurrent invoke() calls don't interact.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}

    def register(
        self,
        name: str,
        description: str,
        input_model: type[BaseModel],
        handler: ToolHandler,
    ) -> ToolDefinition:
        """
        Register a tool.

        Raises:
            DuplicateToolError: If name is already registered.
        """
        if name in self._tools:
            raise DuplicateToolError(
                f"Tool already registered: {name}",
                details={"tool": name},
            )
        definition = ToolDefinition(
            name=name,
            description=description,
            input_model=input_model,
            handler=handler,
        )
        self._tools[name] = definition
        logger.debug(f"Registered tool {name}")
        return definition

    def get(self, name: str) -> ToolDefinition:
        """
        Raises:
            UnknownToolError: If no tool has this name.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(
                f"Unknown tool: {name}. Available: {', '.join(self._tools)}",
                details={"tool": name},
            ) from None

    def list_tools(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def validate(self, name: str, raw_input: dict[str, Any] | None) -> BaseModel:
        """
        Validate raw arguments against a tool's input model.

        Raises:
            UnknownToolError: If no tool has this name.
            InputValidationError: With every violated field/constraint.
        """
        tool = self.get(name)
        try:
            return tool.input_model.model_validate(raw_input or {})
        except ValidationError as e:
            errors = _validation_errors(e)
            summary = "; ".join(f"{err['field']}: {err['message']}" for err in errors)
            raise InputValidationError(
                f"Invalid arguments for {name}: {summary}",
                details={"tool": name, "errors": errors},
            ) from e

    async def invoke(self, name: str, raw_input: dict[str, Any] | None = None) -> ToolResult:
        """
        Validate and run a tool.

        GcpErrors raised by the handler propagate unchanged; anything else
        is wrapped in ToolExecutionError with the original as __cause__.
        """
        params = self.validate(name, raw_input)
        tool = self._tools[name]

        logger.debug(f"Invoking {name}")
        try:
            return await tool.handler(params)
        except GcpError as e:
            logger.warning(f"{name} failed [{e.kind.value}]: {e.message}")
            raise
        except Exception as e:
            logger.warning(f"{name} failed: {e}")
            raise _to_execution_error(name, e) from e
