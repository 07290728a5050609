"""siteup - Upload a file to a SharePoint site's document library via Microsoft Graph."""

from siteup.core.auth import GraphAuth
from siteup.core.client import GraphClient
from siteup.core.settings import GraphSettings, load_graph_settings
from siteup.services.upload import SiteUploader

__version__ = "0.1.0"
__all__ = [
    "GraphAuth",
    "GraphClient",
    "GraphSettings",
    "SiteUploader",
    "load_graph_settings",
]
