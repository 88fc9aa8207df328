"""
Identity and project tools — gcp.whoami, gcp.projects.list.
"""

import asyncio

from pydantic import Field

from adapters.resourcemanager import list_projects
from auth import describe_identity, resolve_credentials
from gcp_config import CLOUD_PLATFORM_READ_ONLY
from models import ToolResult
from tools.common import ToolInput, text_result


class WhoamiInput(ToolInput):
    include_scopes: bool | None = Field(default=None, description="Include the credential's OAuth scopes")


class ProjectsListInput(ToolInput):
    page_size: int | None = Field(default=None, ge=1, le=300, description="Projects per page (1-300)")
    page_token: str | None = Field(default=None, description="Token from a previous page")


async def whoami(params: WhoamiInput) -> ToolResult:
    identity = await asyncio.to_thread(describe_identity, bool(params.include_scopes))
    return text_result(identity)


async def projects_list(params: ProjectsListInput) -> ToolResult:
    scopes = [CLOUD_PLATFORM_READ_ONLY]
    credentials = await asyncio.to_thread(resolve_credentials, scopes)
    response = await asyncio.to_thread(
        list_projects, credentials, params.page_size, params.page_token,
    )
    return text_result(response)


TOOLS = [
    ("gcp.whoami", "Show current ADC identity and default project.", WhoamiInput, whoami),
    ("gcp.projects.list", "List projects using Cloud Resource Manager v3.", ProjectsListInput, projects_list),
]
