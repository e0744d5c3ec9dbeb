# models/user.py
from extensions import db
from datetime import datetime, timezone

from storage.records import UserRecord

# ----------------------------------------------------------------------
# 'User' model to store user data
# ----------------------------------------------------------------------

class User(db.Model):
    __tablename__ = 'users'
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)    # Hashed password
    display_name = db.Column(db.String(120), nullable=False)
    is_admin = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False,
                           default=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        return f'<User {self.username}>'

    def to_record(self) -> UserRecord:
        return UserRecord(
            id=self.id,
            username=self.username,
            password_hash=self.password,
            display_name=self.display_name,
            is_admin=self.is_admin,
            created_at=self.created_at,
        )
