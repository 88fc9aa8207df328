"""
GCP Configuration - Single Source of Truth

Scopes, defaults and environment variable names. Do not duplicate elsewhere.
"""

import os

# MCP server identity
SERVER_NAME = 'mcp-gcp'
SERVER_VERSION = '0.1.0'

# OAuth scopes, one per access level the tools request
CLOUD_PLATFORM_READ_ONLY = 'https://www.googleapis.com/auth/cloud-platform.read-only'
DEVSTORAGE_READ_ONLY = 'https://www.googleapis.com/auth/devstorage.read_only'
PUBSUB_READ_ONLY = 'https://www.googleapis.com/auth/pubsub.readonly'
PUBSUB = 'https://www.googleapis.com/auth/pubsub'
COMPUTE_READ_ONLY = 'https://www.googleapis.com/auth/compute.readonly'

# Scopes used by gapi.request when the caller doesn't pass any
DEFAULT_GAPI_SCOPES = [CLOUD_PLATFORM_READ_ONLY]

# Project fallbacks, consulted in this order after an explicit projectId
PROJECT_ENV_VARS = ('GOOGLE_CLOUD_PROJECT', 'GCLOUD_PROJECT')

# Allow-list for gapi.request: comma-separated shell patterns matched
# against "{api}.{version}.{method}". Unset or empty denies every call.
GAPI_ALLOW_ENV_VAR = 'MCP_GCP_GAPI_ALLOW'

LOG_LEVEL_ENV_VAR = 'MCP_GCP_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'INFO'

# Cloud Run region when run.services.list gets none
DEFAULT_RUN_REGION = 'us-central1'

# Secret Manager version alias when secretmanager.secrets.access gets none
DEFAULT_SECRET_VERSION = 'latest'

# Timeout for every Google API HTTP call (seconds)
API_TIMEOUT = 60


def project_from_env() -> str | None:
    """First non-empty project id from the environment, or None."""
    for name in PROJECT_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


def gapi_allow_patterns() -> list[str]:
    """Parse the gapi.request allow-list from the environment."""
    raw = os.environ.get(GAPI_ALLOW_ENV_VAR, '')
    return [p.strip() for p in raw.split(',') if p.strip()]


def log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
