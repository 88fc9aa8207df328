"""
Compute tools — Compute Engine instances and Cloud Run services.
"""

import asyncio

from pydantic import Field

from adapters.compute import list_instances
from adapters.run import list_services
from auth import resolve_identity
from gcp_config import CLOUD_PLATFORM_READ_ONLY, COMPUTE_READ_ONLY, DEFAULT_RUN_REGION
from models import ToolResult
from tools.common import ToolInput, text_result


class RunServicesListInput(ToolInput):
    project_id: str | None = Field(default=None, description="Project id (defaults to the ambient project)")
    region: str = Field(default=DEFAULT_RUN_REGION, description="Cloud Run region")


class InstancesListInput(ToolInput):
    project_id: str | None = Field(default=None, description="Project id (defaults to the ambient project)")
    zone: str | None = Field(default=None, description="Zone; omit to list all zones (aggregated)")


async def run_services_list(params: RunServicesListInput) -> ToolResult:
    identity = await asyncio.to_thread(resolve_identity, [CLOUD_PLATFORM_READ_ONLY], params.project_id)
    response = await asyncio.to_thread(
        list_services, identity.credentials, identity.project_id, params.region,
    )
    return text_result(response)


async def instances_list(params: InstancesListInput) -> ToolResult:
    identity = await asyncio.to_thread(resolve_identity, [COMPUTE_READ_ONLY], params.project_id)
    response = await asyncio.to_thread(
        list_instances, identity.credentials, identity.project_id, params.zone,
    )
    return text_result(response)


TOOLS = [
    ("run.services.list", "List Cloud Run services in a region.", RunServicesListInput, run_services_list),
    (
        "compute.instances.list",
        "List Compute Engine instances. If zone omitted, lists aggregated.",
        InstancesListInput,
        instances_list,
    ),
]
