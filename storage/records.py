# storage/records.py
"""
Plain records returned by every storage backend.

The SQL backend converts its rows into these, so controllers never see an
ORM object and both backends are interchangeable.  ``to_dict`` renders the
camelCase wire format the web client expects.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Optional

from flask_login import UserMixin

# Content fields are opaque JSON (objects or lists); the store never looks inside.
CONTENT_FIELDS = (
    "specifications",
    "materials",
    "safety_requirements",
    "usage_instructions",
    "troubleshooting",
)


def isoformat(ts: datetime) -> str:
    """UTC ISO-8601 with a trailing ``Z``, e.g. ``2024-05-01T10:00:00.123Z``."""
    ts = as_utc(ts)
    return ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(ts: datetime) -> datetime:
    """Aware UTC datetime; naive values are taken to be UTC already."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


@dataclass
class CategoryRecord:
    id: int
    name: str
    icon: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "icon": self.icon}


@dataclass
class DeviceRecord:
    id: int
    name: str
    icon: str
    short_description: str
    category_id: int
    specifications: Any
    materials: Any
    safety_requirements: Any
    usage_instructions: Any
    troubleshooting: Any
    media_items: list = field(default_factory=list)

    def updated(self, **changes) -> "DeviceRecord":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "shortDescription": self.short_description,
            "categoryId": self.category_id,
            "specifications": self.specifications,
            "materials": self.materials,
            "safetyRequirements": self.safety_requirements,
            "usageInstructions": self.usage_instructions,
            "troubleshooting": self.troubleshooting,
            "mediaItems": self.media_items,
        }


@dataclass
class MessageRecord:
    id: int
    device_id: int
    is_user: bool
    message: str
    timestamp: datetime
    image_url: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "deviceId": self.device_id,
            "isUser": self.is_user,
            "message": self.message,
            "timestamp": isoformat(self.timestamp),
        }
        if self.image_url:
            data["imageUrl"] = self.image_url
        return data


@dataclass
class UserRecord(UserMixin):
    id: int
    username: str
    password_hash: str
    display_name: str
    is_admin: bool = False
    created_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> dict:
        """Public view: the password hash never leaves the server."""
        return {
            "id": self.id,
            "username": self.username,
            "displayName": self.display_name,
            "isAdmin": self.is_admin,
            "createdAt": isoformat(self.created_at),
        }
