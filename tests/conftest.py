"""
Pytest configuration and shared fixtures for siteup tests.
"""

import json
from unittest.mock import patch

import pytest

from siteup.core.settings import GraphSettings

SITE_ID = "contoso.sharepoint.com,11111111-aaaa,22222222-bbbb"
GRAPH = "https://graph.microsoft.com/v1.0"


@pytest.fixture
def graph_values():
    """Provide a complete Graph settings section."""
    return {
        "TenantId": "tenant-123",
        "ClientId": "client-456",
        "ClientSecret": "s3cret",
        "SiteResourceId": SITE_ID,
    }


@pytest.fixture
def write_settings(tmp_path):
    """Factory fixture writing a settings file into tmp_path."""

    def _write(data, name="appsettings.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings_dir(tmp_path, write_settings, graph_values, monkeypatch):
    """A working directory holding a complete appsettings.json."""
    write_settings({"Graph": graph_values})
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SITEUP_ENVIRONMENT", raising=False)
    return tmp_path


@pytest.fixture
def graph_settings(graph_values):
    return GraphSettings(
        tenant_id=graph_values["TenantId"],
        client_id=graph_values["ClientId"],
        client_secret=graph_values["ClientSecret"],
        site_resource_id=graph_values["SiteResourceId"],
    )


@pytest.fixture
def mock_msal():
    """Stub the MSAL confidential client so no token endpoint is contacted."""
    with patch("siteup.core.auth.msal.ConfidentialClientApplication") as mock:
        mock.return_value.acquire_token_for_client.return_value = {
            "access_token": "fake-token",
            "token_type": "Bearer",
            "expires_in": 3599,
        }
        yield mock
