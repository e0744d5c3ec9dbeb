# models/device_category.py

from extensions import db
from storage.records import CategoryRecord

class DeviceCategory(db.Model):
    __tablename__ = "device_categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id   = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)   # "Lathes", "Welding Equipment", ...

    # Icon identifier used by the client (e.g. a Material icon name)
    icon = db.Column(db.String(100), nullable=False)

    devices = db.relationship("Device", back_populates="category")

    def __repr__(self):
        return f"<DeviceCategory {self.name}>"

    def to_record(self) -> CategoryRecord:
        return CategoryRecord(id=self.id, name=self.name, icon=self.icon)
