from flask import current_app

from .base import RecordStore, StoreResult
from .local import LocalStore
from .sql import SQLStore

EXTENSION_KEY = "dailytrack.store"


def init_store(app):
    backend = app.config.get("STORAGE_BACKEND", "sql")
    if backend == "local":
        store = LocalStore(app.config["LOCAL_STORE_PATH"])
    elif backend == "sql":
        store = SQLStore()
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")
    app.extensions[EXTENSION_KEY] = store
    return store


def get_store() -> RecordStore:
    return current_app.extensions[EXTENSION_KEY]


__all__ = ["RecordStore", "StoreResult", "SQLStore", "LocalStore", "init_store", "get_store"]
