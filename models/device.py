# models/device.py

import copy

from extensions import db
from storage.records import DeviceRecord

class Device(db.Model):
    __tablename__ = 'devices'
    __table_args__ = {"sqlite_autoincrement": True}

    # Primary key
    id = db.Column(db.Integer, primary_key=True)

    # Human-friendly name and client icon
    name = db.Column(db.String(150), nullable=False)
    icon = db.Column(db.String(100), nullable=False)
    short_description = db.Column(db.Text, nullable=False)

    # Device FK -> category
    category_id = db.Column(db.Integer,
                            db.ForeignKey("device_categories.id"),
                            nullable=False)
    category    = db.relationship("DeviceCategory", back_populates="devices")

    # Reference content – JSON blobs, kept opaque
    specifications      = db.Column(db.JSON, nullable=False)
    materials           = db.Column(db.JSON, nullable=False)
    safety_requirements = db.Column(db.JSON, nullable=False)
    usage_instructions  = db.Column(db.JSON, nullable=False)
    troubleshooting     = db.Column(db.JSON, nullable=False)
    media_items         = db.Column(db.JSON, nullable=False, default=list)

    messages = db.relationship("ChatMessage", back_populates="device",
                               cascade="all, delete-orphan",
                               passive_deletes=True)

    def __repr__(self):
        return f"<Device {self.name} (category {self.category_id})>"

    def to_record(self) -> DeviceRecord:
        return DeviceRecord(
            id=self.id,
            name=self.name,
            icon=self.icon,
            short_description=self.short_description,
            category_id=self.category_id,
            specifications=copy.deepcopy(self.specifications),
            materials=copy.deepcopy(self.materials),
            safety_requirements=copy.deepcopy(self.safety_requirements),
            usage_instructions=copy.deepcopy(self.usage_instructions),
            troubleshooting=copy.deepcopy(self.troubleshooting),
            media_items=copy.deepcopy(self.media_items or []),
        )
