# models/chat_message.py

from extensions import db
from datetime import datetime, timezone
from storage.records import MessageRecord, as_utc

class ChatMessage(db.Model):
    __tablename__ = "chat_messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id        = db.Column(db.Integer, primary_key=True)
    device_id = db.Column(db.Integer,
                          db.ForeignKey("devices.id", ondelete="CASCADE"),
                          nullable=False, index=True)
    device    = db.relationship("Device", back_populates="messages")

    is_user   = db.Column(db.Boolean, nullable=False)
    message   = db.Column(db.Text, nullable=False)
    timestamp = db.Column(db.DateTime(timezone=True), nullable=False,
                          default=lambda: datetime.now(timezone.utc))
    image_url = db.Column(db.String(512), nullable=True)

    def __repr__(self):
        who = "user" if self.is_user else "assistant"
        return f"<ChatMessage {self.id} device={self.device_id} {who}>"

    def to_record(self) -> MessageRecord:
        return MessageRecord(
            id=self.id,
            device_id=self.device_id,
            is_user=self.is_user,
            message=self.message,
            timestamp=as_utc(self.timestamp),
            image_url=self.image_url,
        )
