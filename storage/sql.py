# storage/sql.py
"""
SQL storage backend on top of Flask-SQLAlchemy.

Must be used inside an application context.  Each mutating call commits
its own transaction; rows are converted to records before they leave.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from extensions import db
from models.chat_message import ChatMessage
from models.device import Device
from models.device_category import DeviceCategory
from models.user import User
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


class SqlStorage(Storage):

    def __init__(self, database=db):
        self.db = database

    @property
    def session(self):
        return self.db.session

    # ── Device categories ────────────────────────────────────────────
    def list_categories(self) -> List[CategoryRecord]:
        rows = DeviceCategory.query.order_by(DeviceCategory.id).all()
        return [c.to_record() for c in rows]

    def get_category(self, category_id: int) -> Optional[CategoryRecord]:
        cat = self.session.get(DeviceCategory, category_id)
        return cat.to_record() if cat else None

    def create_category(self, data: dict) -> CategoryRecord:
        cat = DeviceCategory(name=data["name"], icon=data["icon"])
        self.session.add(cat)
        self.session.commit()
        return cat.to_record()

    def delete_category(self, category_id: int) -> bool:
        cat = self.session.get(DeviceCategory, category_id)
        if cat is None:
            return False
        in_use = (
            self.session.query(func.count(Device.id))
            .filter(Device.category_id == category_id)
            .scalar()
        )
        if in_use:
            raise CategoryInUseError(category_id, in_use)
        self.session.delete(cat)
        self.session.commit()
        return True

    # ── Devices ──────────────────────────────────────────────────────
    def list_devices(self) -> List[DeviceRecord]:
        return [d.to_record() for d in Device.query.order_by(Device.id)]

    def list_devices_by_category(self, category_id: int) -> List[DeviceRecord]:
        rows = (
            Device.query
            .filter_by(category_id=category_id)
            .order_by(Device.id)
            .all()
        )
        return [d.to_record() for d in rows]

    def get_device(self, device_id: int) -> Optional[DeviceRecord]:
        dev = self.session.get(Device, device_id)
        return dev.to_record() if dev else None

    def create_device(self, data: dict) -> DeviceRecord:
        values = device_values(data)
        values.setdefault("media_items", [])
        self._require_category(values["category_id"])
        dev = Device(**values)
        self.session.add(dev)
        self.session.commit()
        return dev.to_record()

    def update_device(self, device_id: int, data: dict) -> Optional[DeviceRecord]:
        dev = self.session.get(Device, device_id)
        if dev is None:
            return None
        values = device_values(data)
        if "category_id" in values:
            self._require_category(values["category_id"])
        for key, value in values.items():
            setattr(dev, key, value)
        self.session.commit()
        return dev.to_record()

    def delete_device(self, device_id: int) -> bool:
        dev = self.session.get(Device, device_id)
        if dev is None:
            return False
        # explicit, so the cascade does not depend on SQLite's foreign_keys pragma
        ChatMessage.query.filter_by(device_id=device_id).delete()
        self.session.delete(dev)
        self.session.commit()
        return True

    def _require_category(self, category_id: int) -> None:
        if self.session.get(DeviceCategory, category_id) is None:
            raise UnknownCategoryError(category_id)

    # ── Chat messages ────────────────────────────────────────────────
    def list_messages(self, device_id: int) -> List[MessageRecord]:
        rows = (
            ChatMessage.query
            .filter_by(device_id=device_id)
            .order_by(ChatMessage.timestamp.asc(), ChatMessage.id.asc())
            .all()
        )
        return [m.to_record() for m in rows]

    def create_message(self, device_id: int, is_user: bool, message: str,
                       image_url: Optional[str] = None,
                       timestamp: Optional[datetime] = None) -> MessageRecord:
        msg = ChatMessage(
            device_id=device_id,
            is_user=is_user,
            message=message,
            image_url=image_url,
            timestamp=as_utc(timestamp) if timestamp else utcnow(),
        )
        self.session.add(msg)
        self.session.commit()
        return msg.to_record()

    def clear_messages(self, device_id: int) -> None:
        ChatMessage.query.filter_by(device_id=device_id).delete()
        self.session.commit()

    # ── Users ────────────────────────────────────────────────────────
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        user = self.session.get(User, user_id)
        return user.to_record() if user else None

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        user = User.query.filter_by(username=username).first()
        return user.to_record() if user else None

    def create_user(self, username: str, password_hash: str,
                    display_name: str, is_admin: bool = False) -> UserRecord:
        if User.query.filter_by(username=username).first():
            raise DuplicateUsernameError(username)
        user = User(
            username=username,
            password=password_hash,
            display_name=display_name,
            is_admin=is_admin,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise DuplicateUsernameError(username)
        return user.to_record()
