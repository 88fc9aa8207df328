"""
Compute adapter — Compute Engine API v1 wrapper.
"""

from typing import Any

from adapters.services import build_service
from logging_config import log_api_call, log_api_result


def list_instances(credentials: Any, project: str, zone: str | None = None) -> dict[str, Any]:
    """
    List VM instances.

    With a zone, lists that zone only. Without one, uses aggregatedList,
    whose items are keyed by "zones/{zone}".
    """
    service = build_service("compute", "v1", credentials)

    if zone:
        log_api_call("compute", "instances.list", project=project, zone=zone)
        response = service.instances().list(project=project, zone=zone).execute()
        log_api_result("compute", "instances.list", response)
        return response

    log_api_call("compute", "instances.aggregatedList", project=project)
    response = service.instances().aggregatedList(project=project).execute()
    log_api_result("compute", "instances.aggregatedList", response)
    return response
