"""Utility functions for siteup."""

import os
from datetime import datetime, timezone

from siteup.core.config import DEFAULT_FILE_NAME, TIMESTAMP_FORMAT


def resolve_local_file(path=None):
    """Resolve a local file path to an absolute path; returns None when it is not a file."""
    absolute_path = os.path.abspath(path or DEFAULT_FILE_NAME)
    if not os.path.isfile(absolute_path):
        return None
    return absolute_path


def format_timestamp(now=None):
    """Format a UTC timestamp down to milliseconds, e.g. 20240131235959123."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return f"{now.strftime(TIMESTAMP_FORMAT)}{now.microsecond // 1000:03d}"


def build_remote_file_name(path, now=None):
    """Insert a UTC timestamp between the base name and the extension of a file."""
    filename = os.path.basename(path)
    name, extension = os.path.splitext(filename)
    if extension == ".":
        extension = ""
    elif not extension and len(name) > 1 and name.startswith(".") and "." not in name[1:]:
        # ".env" is all extension
        name, extension = "", filename
    return f"{name}-{format_timestamp(now)}{extension}"


def display_path(path, max_length=60):
    """Truncate a file path with ellipses if it's too long."""
    if len(path) <= max_length:
        return path

    filename = os.path.basename(path)
    if len(filename) >= max_length - 3:
        return f"...{filename[-(max_length-3):]}"

    remaining_space = max_length - len(filename) - 4  # "..." plus separator
    if remaining_space <= 0:
        return f"...{filename}"
    return f"...{os.path.dirname(path)[-remaining_space:]}{os.sep}{filename}"
