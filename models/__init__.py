# models/__init__.py

from .device_category import DeviceCategory
from .device import Device
from .chat_message import ChatMessage
from .user import User

# For migrations or Flask shell usage
__all__ = [
    "DeviceCategory",
    "Device",
    "ChatMessage",
    "User",
]
