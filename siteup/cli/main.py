"""Command Line Interface for siteup."""

import argparse
import os
import traceback

from rich.console import Console
from rich.markup import escape

from siteup.core.auth import GraphAuth
from siteup.core.client import GraphClient
from siteup.core.config import DEFAULT_FILE_NAME
from siteup.core.settings import load_graph_settings
from siteup.exceptions import GraphServiceError
from siteup.services.upload import SiteUploader
from siteup.utils.helpers import resolve_local_file
from siteup.utils.logging import configure_logging

console = Console(soft_wrap=True)


def create_argument_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="siteup",
        description="Upload a file to the default document library of a SharePoint site using app-only authentication.",
        epilog="""
        Credentials are read from appsettings.json (keys Graph:TenantId, Graph:ClientId,
        Graph:ClientSecret, Graph:SiteResourceId) and an optional
        appsettings.<environment>.json overlay. The application needs the
        'Sites.ReadWrite.All' Application Permission with admin consent.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "file_path",
        nargs="?",
        default=DEFAULT_FILE_NAME,
        help=f"The local file to upload. Default is '{DEFAULT_FILE_NAME}'.",
    )
    return parser


def report_service_error(error: GraphServiceError):
    """Print a failed Graph call with its HTTP status."""
    console.print(f"[red]Graph call failed: {escape(error.message)}[/red]")
    console.print(f"[red]HTTP status: {error.status_code} {escape(error.reason)}[/red]")


def report_failure(error: Exception):
    """Print an unexpected failure with its full traceback."""
    console.print(f"[red]Unhandled failure: {escape(str(error))}[/red]")
    details = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    console.print(details.rstrip(), style="red", markup=False, highlight=False)


def main(argv=None):
    """Main function to handle command-line arguments and run the upload."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging()

    # Configuration errors are fatal and left unhandled.
    settings = load_graph_settings()

    requested_path = args.file_path or DEFAULT_FILE_NAME
    file_path = resolve_local_file(requested_path)
    if file_path is None:
        console.print(f"File not found: {escape(os.path.abspath(requested_path))}")
        console.print("Usage: siteup <path-to-file>")
        return

    client = GraphClient(GraphAuth.from_settings(settings))

    try:
        SiteUploader(client, settings).upload(file_path)
    except GraphServiceError as e:
        report_service_error(e)
    except Exception as e:
        report_failure(e)


if __name__ == "__main__":
    main()
