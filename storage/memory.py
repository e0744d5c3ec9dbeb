# storage/memory.py
"""
In-memory storage backend.

Dicts keyed by id plus one counter per entity type.  A single re-entrant
lock wraps every read-modify-write, since the WSGI server may dispatch
requests on several threads.
"""
from __future__ import annotations

import copy
import itertools
import threading
from datetime import datetime
from typing import Dict, List, Optional

from storage.base import Storage, device_values
from storage.records import (
    CategoryRecord,
    DeviceRecord,
    MessageRecord,
    UserRecord,
    as_utc,
    utcnow,
)
from utils.errors import (
    CategoryInUseError,
    DuplicateUsernameError,
    UnknownCategoryError,
)


class MemoryStorage(Storage):

    def __init__(self):
        self._lock = threading.RLock()

        self._categories: Dict[int, CategoryRecord] = {}
        self._devices: Dict[int, DeviceRecord] = {}
        self._messages: Dict[int, MessageRecord] = {}
        self._users: Dict[int, UserRecord] = {}

        self._category_ids = itertools.count(1)
        self._device_ids = itertools.count(1)
        self._message_ids = itertools.count(1)
        self._user_ids = itertools.count(1)

    # ── Device categories ────────────────────────────────────────────
    def list_categories(self) -> List[CategoryRecord]:
        with self._lock:
            return [copy.copy(c) for c in self._categories.values()]

    def get_category(self, category_id: int) -> Optional[CategoryRecord]:
        with self._lock:
            cat = self._categories.get(category_id)
            return copy.copy(cat) if cat else None

    def create_category(self, data: dict) -> CategoryRecord:
        with self._lock:
            cat = CategoryRecord(
                id=next(self._category_ids),
                name=data["name"],
                icon=data["icon"],
            )
            self._categories[cat.id] = cat
            return copy.copy(cat)

    def delete_category(self, category_id: int) -> bool:
        with self._lock:
            if category_id not in self._categories:
                return False
            in_use = sum(1 for d in self._devices.values()
                         if d.category_id == category_id)
            if in_use:
                raise CategoryInUseError(category_id, in_use)
            del self._categories[category_id]
            return True

    # ── Devices ──────────────────────────────────────────────────────
    def list_devices(self) -> List[DeviceRecord]:
        with self._lock:
            return [copy.deepcopy(d) for d in self._devices.values()]

    def list_devices_by_category(self, category_id: int) -> List[DeviceRecord]:
        with self._lock:
            return [copy.deepcopy(d) for d in self._devices.values()
                    if d.category_id == category_id]

    def get_device(self, device_id: int) -> Optional[DeviceRecord]:
        with self._lock:
            dev = self._devices.get(device_id)
            return copy.deepcopy(dev) if dev else None

    def create_device(self, data: dict) -> DeviceRecord:
        values = copy.deepcopy(device_values(data))
        values.setdefault("media_items", [])
        with self._lock:
            if values["category_id"] not in self._categories:
                raise UnknownCategoryError(values["category_id"])
            dev = DeviceRecord(id=next(self._device_ids), **values)
            self._devices[dev.id] = dev
            return copy.deepcopy(dev)

    def update_device(self, device_id: int, data: dict) -> Optional[DeviceRecord]:
        values = copy.deepcopy(device_values(data))
        with self._lock:
            dev = self._devices.get(device_id)
            if dev is None:
                return None
            if "category_id" in values and values["category_id"] not in self._categories:
                raise UnknownCategoryError(values["category_id"])
            dev = dev.updated(**values)
            self._devices[device_id] = dev
            return copy.deepcopy(dev)

    def delete_device(self, device_id: int) -> bool:
        with self._lock:
            if self._devices.pop(device_id, None) is None:
                return False
            self._drop_messages(device_id)
            return True

    # ── Chat messages ────────────────────────────────────────────────
    def list_messages(self, device_id: int) -> List[MessageRecord]:
        with self._lock:
            rows = [copy.copy(m) for m in self._messages.values()
                    if m.device_id == device_id]
        return sorted(rows, key=lambda m: (m.timestamp, m.id))

    def create_message(self, device_id: int, is_user: bool, message: str,
                       image_url: Optional[str] = None,
                       timestamp: Optional[datetime] = None) -> MessageRecord:
        with self._lock:
            msg = MessageRecord(
                id=next(self._message_ids),
                device_id=device_id,
                is_user=is_user,
                message=message,
                timestamp=as_utc(timestamp) if timestamp else utcnow(),
                image_url=image_url,
            )
            self._messages[msg.id] = msg
            return copy.copy(msg)

    def clear_messages(self, device_id: int) -> None:
        with self._lock:
            self._drop_messages(device_id)

    def _drop_messages(self, device_id: int) -> None:
        for msg_id in [m.id for m in self._messages.values()
                       if m.device_id == device_id]:
            del self._messages[msg_id]

    # ── Users ────────────────────────────────────────────────────────
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        with self._lock:
            user = self._users.get(user_id)
            return copy.copy(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with self._lock:
            user = next((u for u in self._users.values()
                         if u.username == username), None)
            return copy.copy(user) if user else None

    def create_user(self, username: str, password_hash: str,
                    display_name: str, is_admin: bool = False) -> UserRecord:
        with self._lock:
            if any(u.username == username for u in self._users.values()):
                raise DuplicateUsernameError(username)
            user = UserRecord(
                id=next(self._user_ids),
                username=username,
                password_hash=password_hash,
                display_name=display_name,
                is_admin=is_admin,
            )
            self._users[user.id] = user
            return copy.copy(user)
