# storage/base.py
"""
Storage interface shared by the in-memory and SQL backends.

Every mutation of categories, devices, chat messages and users goes through
one of these methods.  Lookups return ``None`` for an unknown id; deletes
return ``False``.  Ids are integers handed out by the backend in strictly
increasing order per entity type and never reused.
"""
from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from storage.records import (
    CategoryRecord,
    DeviceRecord,
    MessageRecord,
    UserRecord,
)

DEVICE_FIELDS = (
    "name",
    "icon",
    "short_description",
    "category_id",
    "specifications",
    "materials",
    "safety_requirements",
    "usage_instructions",
    "troubleshooting",
    "media_items",
)


def normalize_media_items(items) -> list:
    """Copy *items*, giving every media item without an ``id`` a fresh UUID."""
    out = []
    for item in items or []:
        item = dict(item)
        if not item.get("id"):
            item["id"] = str(uuid.uuid4())
        out.append(item)
    return out


def device_values(data: dict) -> dict:
    """Keep only known device columns from *data* and normalise media items."""
    values = {k: data[k] for k in DEVICE_FIELDS if k in data}
    if "media_items" in values:
        values["media_items"] = normalize_media_items(values["media_items"])
    return values


class Storage(ABC):

    # ── Device categories ────────────────────────────────────────────
    @abstractmethod
    def list_categories(self) -> List[CategoryRecord]: ...

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[CategoryRecord]: ...

    @abstractmethod
    def create_category(self, data: dict) -> CategoryRecord: ...

    @abstractmethod
    def delete_category(self, category_id: int) -> bool:
        """
        Remove a category.  Raises ``CategoryInUseError`` while any device
        still references it.
        """

    # ── Devices ──────────────────────────────────────────────────────
    @abstractmethod
    def list_devices(self) -> List[DeviceRecord]: ...

    @abstractmethod
    def list_devices_by_category(self, category_id: int) -> List[DeviceRecord]:
        """Devices of *category_id*; empty (never an error) for an unknown id."""

    @abstractmethod
    def get_device(self, device_id: int) -> Optional[DeviceRecord]: ...

    @abstractmethod
    def create_device(self, data: dict) -> DeviceRecord:
        """Raises ``UnknownCategoryError`` when ``category_id`` does not exist."""

    @abstractmethod
    def update_device(self, device_id: int, data: dict) -> Optional[DeviceRecord]:
        """Apply the keys present in *data*; ``None`` for an unknown device."""

    @abstractmethod
    def delete_device(self, device_id: int) -> bool:
        """Delete the device together with its whole chat transcript."""

    # ── Chat messages ────────────────────────────────────────────────
    @abstractmethod
    def list_messages(self, device_id: int) -> List[MessageRecord]:
        """Transcript of *device_id*, oldest first."""

    @abstractmethod
    def create_message(self, device_id: int, is_user: bool, message: str,
                       image_url: Optional[str] = None,
                       timestamp: Optional[datetime] = None) -> MessageRecord: ...

    @abstractmethod
    def clear_messages(self, device_id: int) -> None: ...

    # ── Users ────────────────────────────────────────────────────────
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserRecord]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserRecord]: ...

    @abstractmethod
    def create_user(self, username: str, password_hash: str,
                    display_name: str, is_admin: bool = False) -> UserRecord:
        """Raises ``DuplicateUsernameError`` when *username* is taken."""
