"""
Secret Manager adapter — Secret Manager API v1 wrapper.
"""

import base64
from typing import Any

from adapters.services import build_service
from logging_config import log_api_call, log_api_result


def secret_version_name(project: str, secret_id: str, version: str) -> str:
    """Full resource name of a secret version."""
    return f"projects/{project}/secrets/{secret_id}/versions/{version}"


def list_secrets(
    credentials: Any,
    project: str,
    page_size: int | None = None,
    page_token: str | None = None,
) -> dict[str, Any]:
    """List secrets (metadata only, never payloads) in a project."""
    service = build_service("secretmanager", "v1", credentials)

    kwargs: dict[str, Any] = {"parent": f"projects/{project}"}
    if page_size is not None:
        kwargs["pageSize"] = page_size
    if page_token:
        kwargs["pageToken"] = page_token

    log_api_call("secretmanager", "projects.secrets.list", **kwargs)
    response = service.projects().secrets().list(**kwargs).execute()
    log_api_result("secretmanager", "projects.secrets.list", response)
    return response


def access_secret_version(credentials: Any, name: str) -> dict[str, Any]:
    """Access a secret version. Returns the raw response (payload.data is base64)."""
    service = build_service("secretmanager", "v1", credentials)

    log_api_call("secretmanager", "projects.secrets.versions.access", name=name)
    response = service.projects().secrets().versions().access(name=name).execute()
    log_api_result("secretmanager", "projects.secrets.versions.access", response)
    return response


def decode_payload(response: dict[str, Any]) -> str:
    """
    Decode an access response's payload to UTF-8 text.

    Returns "" when the version carries no payload data. Bytes that aren't
    valid UTF-8 become U+FFFD rather than failing the call.
    """
    data = (response.get("payload") or {}).get("data")
    if not data:
        return ""
    return base64.b64decode(data).decode("utf-8", errors="replace")
