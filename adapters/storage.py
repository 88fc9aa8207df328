"""
Storage adapter — Cloud Storage JSON API v1 wrapper.

Bucket and object listing plus small inline downloads.
"""

from typing import Any

from adapters.services import build_service
from logging_config import log_api_call, log_api_result


def list_buckets(credentials: Any, project: str) -> dict[str, Any]:
    """List buckets in a project. Returns the raw buckets.list response."""
    service = build_service("storage", "v1", credentials)

    log_api_call("storage", "buckets.list", project=project)
    response = service.buckets().list(project=project).execute()
    log_api_result("storage", "buckets.list", response)
    return response


def list_objects(
    credentials: Any,
    bucket: str,
    prefix: str | None = None,
    max_results: int | None = None,
) -> dict[str, Any]:
    """
    List objects in a bucket.

    Args:
        credentials: ADC credentials for this invocation
        bucket: Bucket name
        prefix: Only objects whose names start with this
        max_results: Maximum objects per page (1-1000)

    Returns:
        Raw objects.list response (items, prefixes, nextPageToken).
    """
    service = build_service("storage", "v1", credentials)

    kwargs: dict[str, Any] = {"bucket": bucket}
    if prefix is not None:
        kwargs["prefix"] = prefix
    if max_results is not None:
        kwargs["maxResults"] = max_results

    log_api_call("storage", "objects.list", **kwargs)
    response = service.objects().list(**kwargs).execute()
    log_api_result("storage", "objects.list", response)
    return response


def download_object(
    credentials: Any,
    bucket: str,
    object_name: str,
    generation: str | None = None,
) -> bytes:
    """
    Download object content (alt=media) into memory.

    Meant for small text objects; the whole body is held in memory.
    """
    service = build_service("storage", "v1", credentials)

    kwargs: dict[str, Any] = {"bucket": bucket, "object": object_name}
    if generation:
        kwargs["generation"] = generation

    log_api_call("storage", "objects.get_media", **kwargs)
    content = service.objects().get_media(**kwargs).execute()
    log_api_result("storage", "objects.get_media", content)
    return content
