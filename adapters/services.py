"""
Google API service construction.

Shared by all adapters. Builds discovery-based service objects bound to
the credentials passed in.

Unlike a token.json-backed desktop app, nothing here is cached: every
tool invocation gets its own credentials, its own httplib2 connection and
its own service object, so concurrent invocations stay isolated (shared
httplib2 connections aren't thread-safe either).

All services use a 60-second timeout to prevent indefinite hangs
when Google APIs are slow or network connections stall.
"""

from typing import Any

import google_auth_httplib2
import httplib2
from googleapiclient.discovery import Resource, build
from googleapiclient.errors import HttpError, UnknownApiNameOrVersion

from gcp_config import API_TIMEOUT
from models import UnknownAPIError

__all__ = [
    "build_service",
    "build_discovery_service",
]


def _get_authorized_http(credentials: Any) -> google_auth_httplib2.AuthorizedHttp:
    """Create authorized HTTP client with timeout."""
    http = httplib2.Http(timeout=API_TIMEOUT)
    return google_auth_httplib2.AuthorizedHttp(credentials, http=http)


def build_service(api: str, version: str, credentials: Any) -> Resource:
    """Build an authenticated service for a known API (storage v1, pubsub v1, ...)."""
    return build(
        api,
        version,
        http=_get_authorized_http(credentials),
        cache_discovery=False,
    )


def build_discovery_service(api: str, version: str, credentials: Any) -> Resource:
    """
    Build a service for an API named at runtime.

    Raises:
        UnknownAPIError: If no discovery document exists for api/version.
    """
    try:
        return build_service(api, version, credentials)
    except UnknownApiNameOrVersion as e:
        raise UnknownAPIError(
            f"Unknown API {api} {version}",
            details={"api": api, "version": version},
        ) from e
    except HttpError as e:
        if e.resp.status == 404:
            raise UnknownAPIError(
                f"Unknown API {api} {version}",
                details={"api": api, "version": version},
            ) from e
        raise
