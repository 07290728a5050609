"""
Tests for siteup.core.client.

Graph HTTP traffic is served by requests_mock.
"""

import io
from unittest.mock import Mock

import pytest
import requests

from siteup.core.client import GraphClient
from siteup.exceptions import GraphServiceError

from conftest import GRAPH, SITE_ID


@pytest.fixture
def client():
    auth = Mock()
    auth.get_headers.return_value = {"Authorization": "Bearer fake-token"}
    return GraphClient(auth)


class TestGetSite:
    """Tests for fetching the site descriptor."""

    def test_returns_site(self, client, requests_mock):
        requests_mock.get(
            f"{GRAPH}/sites/{SITE_ID}",
            json={
                "id": SITE_ID,
                "name": "marketing",
                "displayName": "Marketing",
                "webUrl": "https://contoso.sharepoint.com/sites/marketing",
            },
        )

        site = client.get_site(SITE_ID)

        assert site.id == SITE_ID
        assert site.display_name == "Marketing"
        assert site.label(SITE_ID) == "Marketing"
        request = requests_mock.last_request
        assert request.headers["Authorization"] == "Bearer fake-token"
        assert request.qs["$select"] == ["id,name,displayname,weburl"]

    def test_label_falls_back_to_name_then_default(self, client, requests_mock):
        requests_mock.get(f"{GRAPH}/sites/{SITE_ID}", json={"name": "marketing"})

        site = client.get_site(SITE_ID)

        assert site.label(SITE_ID) == "marketing"
        site.name = None
        assert site.label(SITE_ID) == SITE_ID

    def test_empty_body_returns_none(self, client, requests_mock):
        requests_mock.get(f"{GRAPH}/sites/{SITE_ID}", text="")

        assert client.get_site(SITE_ID) is None

    def test_error_envelope_raises_service_error(self, client, requests_mock):
        requests_mock.get(
            f"{GRAPH}/sites/{SITE_ID}",
            status_code=404,
            json={"error": {"code": "itemNotFound", "message": "Requested site could not be found"}},
        )

        with pytest.raises(GraphServiceError) as excinfo:
            client.get_site(SITE_ID)

        error = excinfo.value
        assert error.status_code == 404
        assert error.code == "itemNotFound"
        assert error.message == "Requested site could not be found"
        assert error.reason == "Not Found"

    def test_error_without_envelope_uses_reason(self, client, requests_mock):
        requests_mock.get(
            f"{GRAPH}/sites/{SITE_ID}", status_code=403, reason="Forbidden", text="nope"
        )

        with pytest.raises(GraphServiceError, match="Forbidden") as excinfo:
            client.get_site(SITE_ID)

        assert excinfo.value.status_code == 403
        assert excinfo.value.code is None

    def test_transport_errors_propagate(self, client, requests_mock):
        requests_mock.get(f"{GRAPH}/sites/{SITE_ID}", exc=requests.exceptions.ConnectTimeout)

        with pytest.raises(requests.exceptions.ConnectTimeout):
            client.get_site(SITE_ID)


class TestGetSiteDrive:
    """Tests for fetching the default document library."""

    def test_returns_drive(self, client, requests_mock):
        requests_mock.get(
            f"{GRAPH}/sites/{SITE_ID}/drive",
            json={"id": "drive-1", "name": "Documents", "driveType": "documentLibrary"},
        )

        drive = client.get_site_drive(SITE_ID)

        assert drive.id == "drive-1"
        assert drive.drive_type == "documentLibrary"

    def test_drive_without_id(self, client, requests_mock):
        requests_mock.get(f"{GRAPH}/sites/{SITE_ID}/drive", json={"name": "Documents"})

        drive = client.get_site_drive(SITE_ID)

        assert drive.id is None


class TestUploadContent:
    """Tests for the single-shot content upload."""

    def test_puts_stream_under_drive_root(self, client, requests_mock):
        requests_mock.put(
            f"{GRAPH}/drives/drive-1/items/root:/report-20240102030405678.csv:/content",
            status_code=201,
            json={
                "id": "item-1",
                "name": "report-20240102030405678.csv",
                "size": 4,
                "webUrl": "https://contoso.sharepoint.com/sites/marketing/Shared%20Documents/report.csv",
            },
        )

        item = client.upload_content(
            "drive-1", "report-20240102030405678.csv", io.BytesIO(b"a,b\n")
        )

        assert item.id == "item-1"
        assert item.size == 4
        assert item.web_url.startswith("https://contoso.sharepoint.com/")
        request = requests_mock.last_request
        assert request.method == "PUT"
        assert request.headers["Content-Type"] == "application/octet-stream"

    def test_path_is_quoted(self, client, requests_mock):
        requests_mock.put(
            f"{GRAPH}/drives/drive-1/items/root:/my%20report-1.csv:/content",
            json={"id": "item-2"},
        )

        item = client.upload_content("drive-1", "my report-1.csv", io.BytesIO(b""))

        assert item.id == "item-2"

    def test_empty_upload_response_returns_none(self, client, requests_mock):
        requests_mock.put(
            f"{GRAPH}/drives/drive-1/items/root:/a.txt:/content", status_code=200, text=""
        )

        assert client.upload_content("drive-1", "a.txt", io.BytesIO(b"x")) is None

    def test_upload_failure_raises(self, client, requests_mock):
        requests_mock.put(
            f"{GRAPH}/drives/drive-1/items/root:/a.txt:/content",
            status_code=507,
            json={"error": {"code": "quotaLimitReached", "message": "Insufficient Space Available"}},
        )

        with pytest.raises(GraphServiceError) as excinfo:
            client.upload_content("drive-1", "a.txt", io.BytesIO(b"x"))

        assert excinfo.value.status_code == 507
        assert excinfo.value.reason == "Insufficient Storage"
