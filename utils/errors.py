# utils/errors.py

class StoreError(Exception):
    """Base class for errors raised by the data store."""


class CategoryInUseError(StoreError):
    """A category still has devices pointing at it."""

    def __init__(self, category_id, device_count):
        self.category_id = category_id
        self.device_count = device_count
        super().__init__(
            f"Category {category_id} still has {device_count} device(s); "
            "reassign or delete them first"
        )


class UnknownCategoryError(StoreError):
    def __init__(self, category_id):
        self.category_id = category_id
        super().__init__(f"Category {category_id} does not exist")


class DuplicateUsernameError(StoreError):
    def __init__(self, username):
        self.username = username
        super().__init__(f"Username '{username}' already exists")


class UpstreamUnavailable(Exception):
    """
    The language-model provider could not produce a reply.

    ``reason`` is ``"not_configured"`` when no credential is set and
    ``"request_failed"`` for transport, HTTP or response-shape failures.
    """

    NOT_CONFIGURED = "not_configured"
    REQUEST_FAILED = "request_failed"

    def __init__(self, reason, detail=""):
        self.reason = reason
        self.detail = detail
        super().__init__(f"{reason}: {detail}" if detail else reason)
