"""Core Graph client for siteup."""

import logging
from urllib.parse import quote

import requests

from siteup.core.auth import GraphAuth
from siteup.core.config import GRAPH_API_ENDPOINT, SITE_SELECT_FIELDS
from siteup.exceptions import GraphServiceError
from siteup.models.graph import Drive, DriveItem, Site

logger = logging.getLogger(__name__)


class GraphClient:
    """Core Graph client that handles the site, drive and upload calls.

    Each call is a single attempt; failures are raised as GraphServiceError.
    """

    def __init__(self, auth: GraphAuth, session=None, base_url=GRAPH_API_ENDPOINT):
        """Initialize the Graph client."""
        self.auth = auth
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")

    def _request(self, method, path, params=None, headers=None, data=None):
        url = f"{self.base_url}{path}"
        request_headers = self.auth.get_headers().copy()
        if headers:
            request_headers.update(headers)

        response = self.session.request(
            method, url, params=params, headers=request_headers, data=data
        )
        logger.debug("%s %s -> %s", method, response.url, response.status_code)

        if not response.ok:
            raise self._service_error(response)

        if not response.content or not response.content.strip():
            return None
        return response.json()

    @staticmethod
    def _service_error(response):
        """Build a GraphServiceError from the Graph error envelope, if any."""
        code = None
        message = None
        try:
            error = response.json().get("error") or {}
        except (ValueError, AttributeError):
            error = {}
        if isinstance(error, dict):
            code = error.get("code")
            message = error.get("message")
        if not message:
            message = response.reason or f"HTTP {response.status_code}"
        return GraphServiceError(message, response.status_code, code)

    def get_site(self, site_id, select=SITE_SELECT_FIELDS):
        """Fetch a site by its resource id, requesting only the selected fields."""
        params = {"$select": ",".join(select)} if select else None
        data = self._request("GET", f"/sites/{site_id}", params=params)
        return Site.from_api_response(data) if data else None

    def get_site_drive(self, site_id):
        """Fetch the default document library of a site."""
        data = self._request("GET", f"/sites/{site_id}/drive")
        return Drive.from_api_response(data) if data else None

    def upload_content(self, drive_id, remote_path, stream):
        """Stream content to a path under the drive root in a single PUT."""
        sanitized_path = quote(remote_path.strip("/"))
        data = self._request(
            "PUT",
            f"/drives/{drive_id}/items/root:/{sanitized_path}:/content",
            headers={"Content-Type": "application/octet-stream"},
            data=stream,
        )
        return DriveItem.from_api_response(data) if data else None
