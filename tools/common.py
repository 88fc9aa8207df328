"""
Shared pieces for tool modules: the input model base and result wrapping.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from formatting import format_result
from models import ToolResult


class ToolInput(BaseModel):
    """
    Base for tool argument schemas.

    Wire names are camelCase (projectId, pageSize). Strict: no type
    coercion, unknown keys rejected.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        strict=True,
        extra="forbid",
        frozen=True,
    )


def text_result(value: Any) -> ToolResult:
    """Format an API payload as the single text block of a ToolResult."""
    return ToolResult.text(format_result(value))
