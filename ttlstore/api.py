"""
Module-Level Store Access

Thin wrappers around a process-wide default FileStore bound to
settings.STORE_FILE, for callers that want plain function calls:

    from ttlstore import api
    api.add("name", "John", 5)
    api.get("name")

The default store is created on first use. Tests and applications can
swap it with set_default_store().
"""

from typing import Any, Dict, Optional

from .config.settings import settings
from .store.entry import Entry, JSONValue
from .store.file_store import FileStore

_default_store: Optional[FileStore] = None


def get_default_store() -> FileStore:
    """Return the default store, creating it on first use."""
    global _default_store
    if _default_store is None:
        _default_store = FileStore(settings.STORE_FILE)
    return _default_store


def set_default_store(store: FileStore) -> None:
    """Replace the default store."""
    global _default_store
    _default_store = store


def reset_default_store() -> None:
    """Drop the default store so the next call rebuilds it from settings."""
    global _default_store
    _default_store = None


def load() -> Dict[str, Entry]:
    """Re-read the backing file, sweep expired entries and persist."""
    return get_default_store().load()


def add(key: str, value: JSONValue, ttl_minutes: Optional[float] = None) -> None:
    """Insert or overwrite a key (keys must be str)."""
    get_default_store().add(key, value, ttl_minutes)


def update(key: str, value: JSONValue, ttl_minutes: Optional[float] = None) -> bool:
    """Replace the value and expiration of an existing key."""
    return get_default_store().update(key, value, ttl_minutes)


def remove(key: str) -> bool:
    """Delete a key."""
    return get_default_store().remove(key)


def get(key: str, default: Any = None) -> Any:
    """Retrieve the value for a key, or default if missing or expired."""
    return get_default_store().get(key, default)


def get_all() -> Dict[str, Entry]:
    """Return every live entry."""
    return get_default_store().get_all()


def exists(key: str) -> bool:
    """Check if a key is present and not expired."""
    return get_default_store().exists(key)


def expire(key: str) -> bool:
    """Mark a key as expired now."""
    return get_default_store().expire(key)


def expire_all() -> None:
    """Mark every in-memory entry as expired now."""
    get_default_store().expire_all()


def get_expired_details() -> Dict[str, Entry]:
    """Return in-memory entries whose expiration has passed."""
    return get_default_store().get_expired_details()


def get_active_details() -> Dict[str, Entry]:
    """Return in-memory entries that never expire or expire later."""
    return get_default_store().get_active_details()


def remove_all() -> None:
    """Remove every key and persist the empty store."""
    get_default_store().remove_all()


def expire_all_expired() -> int:
    """Remove all expired entries and persist (the sweep)."""
    return get_default_store().expire_all_expired()
