"""
Shared pytest fixtures for mcp-gcp tests.

Nothing here talks to Google: ADC discovery and discovery-client
construction are both patched, and each (api, version) pair gets its own
MagicMock service that tests wire with tests.helpers.mock_api_chain.
"""

from collections import defaultdict
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest

from gcp_config import GAPI_ALLOW_ENV_VAR, PROJECT_ENV_VARS
from registry import ToolRegistry
from tools import build_registry

from tests.helpers import ADC_PROJECT

# Re-export make_http_error for convenience (actual implementation in mock_utils.py)
from tests.mock_utils import make_http_error  # noqa: F401


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """No ambient project or allow-list leaks in from the developer's shell."""
    for name in PROJECT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv(GAPI_ALLOW_ENV_VAR, raising=False)


@pytest.fixture
def mock_credentials() -> MagicMock:
    """ADC credentials stand-in."""
    creds = MagicMock(name="credentials")
    creds.token = "ya29.test-token"
    creds.scopes = ["https://www.googleapis.com/auth/cloud-platform.read-only"]
    return creds


@pytest.fixture
def adc(mock_credentials: MagicMock) -> Generator[MagicMock, None, None]:
    """
    Patch google.auth.default to return mock credentials and ADC_PROJECT.

    Yields the patched default() so tests can inspect requested scopes or
    change the project (adc.return_value = (creds, None)).
    """
    with patch("google.auth.default", return_value=(mock_credentials, ADC_PROJECT)) as default:
        yield default


@pytest.fixture
def services() -> Generator[defaultdict[str, MagicMock], None, None]:
    """
    Patch discovery build(); yields {"api.version": mock service}.

    Example:
        def test_something(services):
            mock_api_chain(services["storage.v1"], "buckets.list.execute", {"items": []})
    """
    built: defaultdict[str, MagicMock] = defaultdict(MagicMock)

    def fake_build(api: str, version: str, **_kwargs: object) -> MagicMock:
        return built[f"{api}.{version}"]

    with patch("adapters.services.build", side_effect=fake_build):
        yield built


@pytest.fixture
def registry() -> ToolRegistry:
    """Registry with every tool."""
    return build_registry()
