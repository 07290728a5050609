"""Exception types for siteup."""

from http import HTTPStatus


class SiteupError(Exception):
    """Base exception for siteup errors."""

    pass


class ConfigurationError(SiteupError):
    """Raised when a required setting is missing or a settings file is unreadable."""

    pass


class AuthenticationError(SiteupError):
    """Raised when an access token cannot be acquired."""

    def __init__(self, error=None, description=None):
        self.error = error
        self.description = description
        message = "Failed to acquire access token"
        if error:
            message += f": {error}"
        if description:
            message += f" ({description})"
        super().__init__(message)


class GraphServiceError(SiteupError):
    """Raised when Microsoft Graph answers with a non-success status."""

    def __init__(self, message, status_code, code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code

    @property
    def reason(self):
        """HTTP reason phrase for the status code, or an empty string."""
        try:
            return HTTPStatus(self.status_code).phrase
        except ValueError:
            return ""
