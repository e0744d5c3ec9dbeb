# storage/__init__.py
"""
Data store wiring.

``init_store(app)`` builds the backend named by ``STORAGE_BACKEND`` once per
application and keeps it in ``app.extensions``; request code reaches it
through ``get_store()``.
"""
from flask import current_app

EXTENSION_KEY = "workshop_store"
BACKENDS = ("sql", "memory")


def init_store(app, store=None):
    """Attach *store* (or a freshly built backend) to *app* and return it."""
    if store is None:
        backend = app.config.get("STORAGE_BACKEND", "sql")
        if backend == "memory":
            from storage.memory import MemoryStorage
            store = MemoryStorage()
        elif backend == "sql":
            from storage.sql import SqlStorage
            store = SqlStorage()
        else:
            raise RuntimeError(
                f"Unknown STORAGE_BACKEND '{backend}' (expected one of {', '.join(BACKENDS)})"
            )
    app.extensions[EXTENSION_KEY] = store
    app.logger.info("🗄️  Data store: %s", type(store).__name__)
    return store


def get_store():
    return current_app.extensions[EXTENSION_KEY]
