"""Configuration constants for siteup."""

# Microsoft Graph API constants
GRAPH_API_ENDPOINT = "https://graph.microsoft.com/v1.0"
SCOPES = ["https://graph.microsoft.com/.default"]  # Scope for confidential client flow
AUTHORITY_TEMPLATE = "https://login.microsoftonline.com/{tenant_id}"

# Fields requested when resolving the target site
SITE_SELECT_FIELDS = ["id", "name", "displayName", "webUrl"]

# Settings files
SETTINGS_FILE = "appsettings.json"
SETTINGS_OVERLAY_TEMPLATE = "appsettings.{environment}.json"
DEFAULT_ENVIRONMENT = "Development"

# Setting keys
KEY_TENANT_ID = "Graph:TenantId"
KEY_CLIENT_ID = "Graph:ClientId"
KEY_CLIENT_SECRET = "Graph:ClientSecret"
KEY_SITE_RESOURCE_ID = "Graph:SiteResourceId"

# Environment variable names
ENV_ENVIRONMENT = "SITEUP_ENVIRONMENT"
ENV_LOG_LEVEL = "LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

# Local file defaults
DEFAULT_FILE_NAME = "sample.txt"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"  # milliseconds are appended separately
