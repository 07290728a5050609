"""Graph resource models for siteup."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Site:
    """Represents a SharePoint site."""

    id: Optional[str] = None
    name: Optional[str] = None
    display_name: Optional[str] = None
    web_url: Optional[str] = None

    @classmethod
    def from_api_response(cls, item: Dict[str, Any]) -> "Site":
        """Create a Site object from Graph API response data."""
        return cls(
            id=item.get("id"),
            name=item.get("name"),
            display_name=item.get("displayName"),
            web_url=item.get("webUrl"),
        )

    def label(self, default: str) -> str:
        """Best human-readable name for the site."""
        return self.display_name or self.name or default


@dataclass
class Drive:
    """Represents a document library (drive)."""

    id: Optional[str] = None
    name: Optional[str] = None
    drive_type: Optional[str] = None
    web_url: Optional[str] = None

    @classmethod
    def from_api_response(cls, item: Dict[str, Any]) -> "Drive":
        return cls(
            id=item.get("id"),
            name=item.get("name"),
            drive_type=item.get("driveType"),
            web_url=item.get("webUrl"),
        )


@dataclass
class DriveItem:
    """Represents an uploaded file in a drive."""

    id: Optional[str] = None
    name: Optional[str] = None
    size: int = 0
    web_url: Optional[str] = None

    @classmethod
    def from_api_response(cls, item: Dict[str, Any]) -> "DriveItem":
        return cls(
            id=item.get("id"),
            name=item.get("name"),
            size=item.get("size", 0),
            web_url=item.get("webUrl"),
        )
