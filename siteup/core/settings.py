"""Layered JSON settings for siteup.

Settings are read from ``appsettings.json`` and an optional
``appsettings.{environment}.json`` overlay in the same directory. Nested
JSON objects are flattened into colon-joined keys, so::

    {"Graph": {"TenantId": "..."}}

is looked up as ``Graph:TenantId``. Later layers win and key lookup is
case-insensitive. Files must be strict JSON: ``//`` comments and trailing
commas are rejected with a ConfigurationError.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import siteup
from siteup.core.config import (
    DEFAULT_ENVIRONMENT,
    ENV_ENVIRONMENT,
    KEY_CLIENT_ID,
    KEY_CLIENT_SECRET,
    KEY_SITE_RESOURCE_ID,
    KEY_TENANT_ID,
    SETTINGS_FILE,
    SETTINGS_OVERLAY_TEMPLATE,
)
from siteup.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphSettings:
    """Credentials and target site for a single run."""

    tenant_id: str
    client_id: str
    client_secret: str
    site_resource_id: str

    def __repr__(self):
        return (
            f"GraphSettings(tenant_id={self.tenant_id!r}, client_id={self.client_id!r}, "
            f"client_secret='***', site_resource_id={self.site_resource_id!r})"
        )


class Settings:
    """Flattened, case-insensitive view over the merged settings layers."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = {}
        if values:
            self.update(values)

    def update(self, values: Dict[str, Any]):
        """Merge a (possibly nested) mapping on top of the current values."""
        for key, value in _flatten(values).items():
            self._values[key.casefold()] = value

    def get(self, key: str, default=None):
        return self._values.get(key.casefold(), default)

    def __getitem__(self, key: str):
        return self._values[key.casefold()]

    def __contains__(self, key):
        return key.casefold() in self._values


def _flatten(values: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Flatten nested dicts into colon-joined keys; lists and scalars are leaves."""
    flat: Dict[str, Any] = {}
    for key, value in values.items():
        full_key = f"{prefix}:{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(_flatten(value, full_key))
        else:
            flat[full_key] = value
    return flat


def _load_json_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except json.JSONDecodeError as err:
        raise ConfigurationError(f"Invalid JSON in settings file '{path}': {err}") from err
    except OSError as err:
        raise ConfigurationError(f"Cannot read settings file '{path}': {err}") from err

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Settings file '{path}' must contain a JSON object at the top level."
        )
    return data


def resolve_settings_dir(cwd: Optional[Path] = None, base_dir: Optional[Path] = None) -> Path:
    """Use the working directory when it holds the settings file, else the application directory."""
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    if (cwd / SETTINGS_FILE).is_file():
        return cwd
    if base_dir is not None:
        return Path(base_dir)
    return Path(siteup.__file__).resolve().parent


def load_settings(settings_dir: Optional[Path] = None, environment: Optional[str] = None) -> Settings:
    """Load the base settings file and merge the environment overlay, if any."""
    if settings_dir is None:
        settings_dir = resolve_settings_dir()
    settings_dir = Path(settings_dir)

    if environment is None:
        environment = os.getenv(ENV_ENVIRONMENT) or DEFAULT_ENVIRONMENT

    base_path = settings_dir / SETTINGS_FILE
    if not base_path.is_file():
        raise ConfigurationError(
            f"The configuration file '{SETTINGS_FILE}' was not found in '{settings_dir}'."
        )

    settings = Settings(_load_json_file(base_path))
    logger.debug("Loaded settings from %s", base_path)

    overlay_path = settings_dir / SETTINGS_OVERLAY_TEMPLATE.format(environment=environment)
    if overlay_path.is_file():
        settings.update(_load_json_file(overlay_path))
        logger.debug("Merged settings overlay %s", overlay_path)

    return settings


def require_setting(settings: Settings, key: str) -> str:
    """Return a non-blank string setting or raise ConfigurationError."""
    value = settings.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"Missing configuration value '{key}'.")
    return value


def load_graph_settings(settings_dir: Optional[Path] = None, environment: Optional[str] = None) -> GraphSettings:
    """Resolve the four required Graph settings before any network activity."""
    settings = load_settings(settings_dir, environment)
    return GraphSettings(
        tenant_id=require_setting(settings, KEY_TENANT_ID),
        client_id=require_setting(settings, KEY_CLIENT_ID),
        client_secret=require_setting(settings, KEY_CLIENT_SECRET),
        site_resource_id=require_setting(settings, KEY_SITE_RESOURCE_ID),
    )
