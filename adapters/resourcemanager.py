"""
Resource Manager adapter — Cloud Resource Manager API v3 wrapper.
"""

from typing import Any

from adapters.services import build_service
from logging_config import log_api_call, log_api_result


def list_projects(
    credentials: Any,
    page_size: int | None = None,
    page_token: str | None = None,
) -> dict[str, Any]:
    """
    List projects visible to the caller.

    Args:
        credentials: ADC credentials for this invocation
        page_size: Maximum projects per page (1-300)
        page_token: Pagination token from a previous call

    Returns:
        Raw projects.list response (projects, nextPageToken).
    """
    service = build_service("cloudresourcemanager", "v3", credentials)

    kwargs: dict[str, Any] = {}
    if page_size is not None:
        kwargs["pageSize"] = page_size
    if page_token:
        kwargs["pageToken"] = page_token

    log_api_call("cloudresourcemanager", "projects.list", **kwargs)
    response = service.projects().list(**kwargs).execute()
    log_api_result("cloudresourcemanager", "projects.list", response)
    return response
