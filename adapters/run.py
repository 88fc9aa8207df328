"""
Cloud Run adapter — Cloud Run Admin API v2 wrapper.
"""

from typing import Any

from adapters.services import build_service
from logging_config import log_api_call, log_api_result


def list_services(credentials: Any, project: str, region: str) -> dict[str, Any]:
    """List Cloud Run services in one region."""
    service = build_service("run", "v2", credentials)
    parent = f"projects/{project}/locations/{region}"

    log_api_call("run", "projects.locations.services.list", parent=parent)
    response = service.projects().locations().services().list(parent=parent).execute()
    log_api_result("run", "projects.locations.services.list", response)
    return response
