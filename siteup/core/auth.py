"""Authentication module for siteup."""

import logging

import msal

from siteup.core.config import AUTHORITY_TEMPLATE, SCOPES
from siteup.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class GraphAuth:
    """Handles app-only authentication against Microsoft Graph."""

    def __init__(self, tenant_id, client_id, client_secret, scopes=None):
        """Initialize authentication with credentials."""
        self.tenant_id = tenant_id
        self.client_id = client_id
        self.client_secret = client_secret
        self.scopes = list(scopes or SCOPES)
        self.authority = AUTHORITY_TEMPLATE.format(tenant_id=tenant_id)
        self.access_token = None
        self._app = None

    @classmethod
    def from_settings(cls, settings):
        """Build an authenticator from a GraphSettings instance."""
        return cls(settings.tenant_id, settings.client_id, settings.client_secret)

    def _get_app(self):
        if self._app is None:
            self._app = msal.ConfidentialClientApplication(
                client_id=self.client_id,
                authority=self.authority,
                client_credential=self.client_secret,
            )
        return self._app

    def get_access_token(self):
        """
        Acquires an app-only access token using the client credentials flow.
        The token is requested on first use and reused for the rest of the run.
        """
        if self.access_token:
            return self.access_token

        logger.debug("Requesting token for client %s from %s", self.client_id, self.authority)
        result = self._get_app().acquire_token_for_client(scopes=self.scopes)

        if result and "access_token" in result:
            self.access_token = result["access_token"]
            return self.access_token

        result = result or {}
        raise AuthenticationError(result.get("error"), result.get("error_description"))

    def get_headers(self):
        """Constructs the default headers for API requests."""
        token = self.get_access_token()
        return {"Authorization": f"Bearer {token}"}
