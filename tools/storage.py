"""
Cloud Storage tools — bucket/object listing and small text downloads.
"""

import asyncio

from pydantic import Field

from adapters.storage import download_object, list_buckets, list_objects
from auth import resolve_credentials, resolve_identity
from gcp_config import DEVSTORAGE_READ_ONLY
from models import ToolResult
from tools.common import ToolInput, text_result

SCOPES = [DEVSTORAGE_READ_ONLY]


class BucketsListInput(ToolInput):
    project_id: str | None = Field(default=None, description="Project id (defaults to the ambient project)")


class ObjectsListInput(ToolInput):
    bucket: str = Field(description="Bucket name")
    prefix: str | None = Field(default=None, description="Only objects whose names start with this")
    max_results: int | None = Field(default=None, ge=1, le=1000, description="Objects per page (1-1000)")


class ObjectsDownloadInput(ToolInput):
    bucket: str = Field(description="Bucket name")
    object_name: str = Field(alias="object", description="Object name")
    generation: str | None = Field(default=None, description="Specific object generation")


async def buckets_list(params: BucketsListInput) -> ToolResult:
    identity = await asyncio.to_thread(resolve_identity, SCOPES, params.project_id)
    response = await asyncio.to_thread(list_buckets, identity.credentials, identity.project_id)
    return text_result(response)


async def objects_list(params: ObjectsListInput) -> ToolResult:
    credentials = await asyncio.to_thread(resolve_credentials, SCOPES)
    response = await asyncio.to_thread(
        list_objects, credentials, params.bucket, params.prefix, params.max_results,
    )
    return text_result(response)


async def objects_download(params: ObjectsDownloadInput) -> ToolResult:
    credentials = await asyncio.to_thread(resolve_credentials, SCOPES)
    content = await asyncio.to_thread(
        download_object, credentials, params.bucket, params.object_name, params.generation,
    )
    # str passes through, bytes decode as UTF-8
    return text_result(content)


TOOLS = [
    ("gcs.buckets.list", "List GCS buckets in a project.", BucketsListInput, buckets_list),
    ("gcs.objects.list", "List objects in a GCS bucket.", ObjectsListInput, objects_list),
    (
        "gcs.objects.download",
        "Download a small text object from GCS (returns content inline).",
        ObjectsDownloadInput,
        objects_download,
    ),
]
