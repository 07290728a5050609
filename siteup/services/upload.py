"""Upload operations for siteup."""

import logging
import os

from rich.console import Console
from rich.markup import escape

from siteup.utils.helpers import build_remote_file_name, display_path

console = Console(soft_wrap=True)
logger = logging.getLogger(__name__)


class SiteUploader:
    """Uploads a local file to the default document library of a site."""

    def __init__(self, client, settings):
        """Initialize with a GraphClient and the GraphSettings of the run."""
        self.client = client
        self.settings = settings

    def upload(self, file_path, now=None):
        """
        Resolve the site and its drive, then stream file_path to the drive root.

        Returns the uploaded DriveItem, or None when the site has no document
        library or Graph returned an empty body for the upload.
        """
        site_id = self.settings.site_resource_id
        console.print(f"Authenticated using app client id {escape(self.settings.client_id)}.")

        site = self.client.get_site(site_id)
        site_label = site.label(site_id) if site else site_id
        console.print(f"Found site '{escape(site_label)}'.")

        drive = self.client.get_site_drive(site_id)
        if drive is None or not drive.id:
            console.print("[yellow]The site does not expose a default document library.[/yellow]")
            return None
        logger.debug("Using drive %s (%s)", drive.id, drive.name)

        remote_name = build_remote_file_name(file_path, now)
        console.print(
            f"[cyan]Uploading {escape(display_path(file_path))} as {escape(remote_name)} "
            f"({os.path.getsize(file_path)} bytes)...[/cyan]"
        )

        with open(file_path, "rb") as f:
            item = self.client.upload_content(drive.id, remote_name, f)

        web_url = item.web_url if item and item.web_url else "unknown location"
        console.print(f"[green]Upload complete! View it at: {escape(web_url)}[/green]")
        return item
