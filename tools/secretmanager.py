"""
Secret Manager tools — list secrets, access a version payload as text.
"""

import asyncio

from pydantic import Field

from adapters.secretmanager import access_secret_version, decode_payload, list_secrets, secret_version_name
from auth import resolve_identity
from gcp_config import CLOUD_PLATFORM_READ_ONLY, DEFAULT_SECRET_VERSION
from models import ToolResult
from tools.common import ToolInput, text_result

SCOPES = [CLOUD_PLATFORM_READ_ONLY]


class SecretsListInput(ToolInput):
    project_id: str | None = Field(default=None, description="Project id (defaults to the ambient project)")
    page_size: int | None = Field(default=None, ge=1, le=25000, description="Secrets per page (1-25000)")
    page_token: str | None = Field(default=None, description="Token from a previous page")


class SecretAccessInput(ToolInput):
    project_id: str | None = Field(default=None, description="Project id (defaults to the ambient project)")
    secret_id: str = Field(description="Secret id")
    version: str = Field(default=DEFAULT_SECRET_VERSION, description="Version number or alias")


async def secrets_list(params: SecretsListInput) -> ToolResult:
    identity = await asyncio.to_thread(resolve_identity, SCOPES, params.project_id)
    response = await asyncio.to_thread(
        list_secrets, identity.credentials, identity.project_id,
        params.page_size, params.page_token,
    )
    return text_result(response)


async def secret_access(params: SecretAccessInput) -> ToolResult:
    identity = await asyncio.to_thread(resolve_identity, SCOPES, params.project_id)
    name = secret_version_name(identity.project_id, params.secret_id, params.version)
    response = await asyncio.to_thread(access_secret_version, identity.credentials, name)
    # The decoded payload is the result, not JSON around it
    return ToolResult.text(decode_payload(response))


TOOLS = [
    ("secretmanager.secrets.list", "List Secret Manager secrets in a project (metadata only).", SecretsListInput, secrets_list),
    (
        "secretmanager.secrets.access",
        "Access a Secret Manager version payload as text (UTF-8).",
        SecretAccessInput,
        secret_access,
    ),
]
