"""
Generic passthrough — gapi.request.

Calls any method on any discovery-based Google API:

    gapi.request(api="storage", version="v1", method="buckets.list",
                 parameters={"project": "my-project"})

Gated by the MCP_GCP_GAPI_ALLOW allow-list (deny by default) and by the
scopes the caller requests. Credentials are bound to the service built
for this call only.
"""

import asyncio
from typing import Any

from pydantic import Field

from adapters.services import build_discovery_service
from auth import resolve_credentials
from gcp_config import DEFAULT_GAPI_SCOPES, gapi_allow_patterns
from logging_config import log_api_call, log_api_result
from models import ToolResult
from resolver import call_method, check_allowed, resolve_method
from tools.common import ToolInput, text_result


class GapiRequestInput(ToolInput):
    api: str = Field(min_length=1, description="API name, e.g. 'storage'")
    version: str = Field(min_length=1, description="API version, e.g. 'v1'")
    method: str = Field(min_length=1, description="Dotted method path, e.g. 'buckets.list'")
    parameters: dict[str, Any] = Field(default_factory=dict, description="Method parameters, passed verbatim")
    scopes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_GAPI_SCOPES),
        min_length=1,
        description="OAuth scopes to request (at least one)",
    )


def _request(params: GapiRequestInput) -> Any:
    """Resolve and run the call. Blocking; runs in a worker thread."""
    credentials = resolve_credentials(params.scopes)
    service = build_discovery_service(params.api, params.version, credentials)
    fn = resolve_method(service, params.method)

    log_api_call(params.api, params.method, parameters=params.parameters)
    result = call_method(fn, dict(params.parameters))
    log_api_result(params.api, params.method, result)
    return result


async def gapi_request(params: GapiRequestInput) -> ToolResult:
    check_allowed(params.api, params.version, params.method, gapi_allow_patterns())
    result = await asyncio.to_thread(_request, params)
    return text_result(result)


TOOLS = [
    ("gapi.request", "Generic Google API call via discovery clients.", GapiRequestInput, gapi_request),
]
