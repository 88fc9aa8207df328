"""
Credential resolution for mcp-gcp.

Everything rides on Application Default Credentials (ADC):
- GOOGLE_APPLICATION_CREDENTIALS service account / external account file
- gcloud user credentials (gcloud auth application-default login)
- GCE / Cloud Run / GKE metadata server

Project id precedence:
1. Explicit projectId from the caller (no further lookups)
2. GOOGLE_CLOUD_PROJECT, then GCLOUD_PROJECT
3. Whatever project ADC reports

Nothing is cached. Each call builds fresh credentials so concurrent
invocations never share an identity.
"""

from typing import Any, Sequence

import google.auth
import google_auth_httplib2
import httplib2
from google.auth.exceptions import DefaultCredentialsError, RefreshError

from gcp_config import API_TIMEOUT, CLOUD_PLATFORM_READ_ONLY, PROJECT_ENV_VARS, project_from_env
from logging_config import logger
from models import AuthResolutionError, MissingProjectError, ResolvedIdentity

_NO_CREDENTIALS_HINT = (
    "No Application Default Credentials found. Run "
    "'gcloud auth application-default login' or set GOOGLE_APPLICATION_CREDENTIALS."
)


def _default(scopes: Sequence[str]) -> tuple[Any, str | None]:
    """google.auth.default() with our error type."""
    try:
        return google.auth.default(scopes=list(scopes))
    except DefaultCredentialsError as e:
        raise AuthResolutionError(
            f"{_NO_CREDENTIALS_HINT} ({e})",
            details={"scopes": list(scopes)},
        ) from e


def resolve_credentials(scopes: Sequence[str]) -> Any:
    """
    Build ADC credentials scoped to exactly the given scopes.

    Raises:
        AuthResolutionError: If no ambient credential source is discoverable.
    """
    credentials, _ = _default(scopes)
    logger.debug(f"Resolved credentials {type(credentials).__name__} for {list(scopes)}")
    return credentials


def resolve_project(scopes: Sequence[str], explicit_project_id: str | None = None) -> str:
    """
    Resolve the effective project id.

    Args:
        scopes: Scopes for the ADC lookup (only used at step 3)
        explicit_project_id: Caller-supplied projectId; wins if non-empty

    Raises:
        MissingProjectError: If no source yields a project id.
        AuthResolutionError: If ADC has to be consulted and can't be found.
    """
    if explicit_project_id:
        return explicit_project_id

    from_env = project_from_env()
    if from_env:
        return from_env

    _, project = _default(scopes)
    if not project:
        raise MissingProjectError(
            "No default project found. Pass projectId or set "
            f"{' or '.join(PROJECT_ENV_VARS)}."
        )
    return project


def resolve_identity(scopes: Sequence[str], explicit_project_id: str | None = None) -> ResolvedIdentity:
    """Resolve project then credentials for one invocation."""
    project_id = resolve_project(scopes, explicit_project_id)
    return ResolvedIdentity(credentials=resolve_credentials(scopes), project_id=project_id)


def describe_identity(include_scopes: bool = False) -> dict[str, Any]:
    """
    Summarise the ambient ADC identity.

    Returns:
        projectId: Project id (None when none can be determined)
        token: Whether an access token could be minted
        scopes: Credential scopes (only with include_scopes)
    """
    scopes = [CLOUD_PLATFORM_READ_ONLY]
    try:
        project_id: str | None = resolve_project(scopes)
    except MissingProjectError:
        project_id = None

    credentials = resolve_credentials(scopes)
    try:
        credentials.refresh(google_auth_httplib2.Request(httplib2.Http(timeout=API_TIMEOUT)))
    except RefreshError as e:
        raise AuthResolutionError(f"Could not obtain an access token: {e}") from e

    identity: dict[str, Any] = {
        "projectId": project_id,
        "token": bool(getattr(credentials, "token", None)),
    }
    if include_scopes:
        granted = getattr(credentials, "scopes", None)
        identity["scopes"] = list(granted) if granted else None
    return identity
