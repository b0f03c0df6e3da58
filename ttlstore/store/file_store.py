"""
File-Backed Store Module

This module implements the key-value store kept in a single JSON file.

Every reading or mutating call follows the same cycle:
- load: re-read the whole file and sweep expired entries
- mutate: change the in-memory mapping
- save: rewrite the whole file

The exceptions are expire(), expire_all(), remove_all() and the detail
queries, which act on the in-memory snapshot left by the previous call.

There is no locking and no atomic rename. Treat a backing file as
having a single writer.
"""

import json
import logging
import time
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from ..config.settings import settings
from .entry import Entry, JSONValue, compute_expiration

logger = logging.getLogger(__name__)


class FileStore:
    """
    Key-value store with per-key expiration, persisted to a JSON file.

    The file is the source of truth. The in-memory mapping only lives
    between a load and the save that follows it.

    Usage:
        store = FileStore(".env")
        store.add("name", "John", ttl_minutes=5)
        store.get("name")  # "John"

    File format:
        {
            "<key>": {"value": <any>, "expiration": <epoch-seconds-or-null>}
        }

    Attributes:
        path: Location of the backing file
        clock: Callable returning the current time as epoch seconds
        indent: Indentation used when writing the file
    """

    def __init__(
        self,
        path: Union[str, Path, None] = None,
        clock: Optional[Callable[[], float]] = None,
        indent: Optional[int] = None,
    ):
        """
        Initialize the store. The file is not touched until the first call.

        Args:
            path: Backing file (default from settings.STORE_FILE)
            clock: Time source (default time.time)
            indent: JSON indentation (default from settings.JSON_INDENT)
        """
        self.path = Path(path if path is not None else settings.STORE_FILE)
        self.clock = clock if clock is not None else time.time
        self.indent = indent if indent is not None else settings.JSON_INDENT

        self._entries: Dict[str, Entry] = {}
        self._loaded = False

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _read(self) -> Dict[str, Entry]:
        """Read the backing file. Missing or malformed content reads as empty."""
        try:
            text = self.path.read_text(encoding=settings.FILE_ENCODING)
        except FileNotFoundError:
            logger.debug(f"No store file at {self.path}, starting empty")
            return {}
        except UnicodeDecodeError as e:
            logger.warning(f"Store file {self.path} is not valid text, starting empty: {e}")
            return {}

        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Store file {self.path} is malformed, starting empty: {e}")
            return {}

        if not isinstance(raw, dict):
            logger.warning(
                f"Store file {self.path} holds {type(raw).__name__}, not an object, starting empty"
            )
            return {}

        entries = {}
        for key, item in raw.items():
            if not isinstance(item, dict):
                logger.warning(f"Dropping malformed entry {key!r} from {self.path}")
                continue

            expiration = item.get("expiration")
            if expiration is not None and (
                isinstance(expiration, bool) or not isinstance(expiration, (int, float))
            ):
                logger.warning(
                    f"Dropping entry {key!r} from {self.path}: bad expiration {expiration!r}"
                )
                continue
            entries[key] = Entry.from_dict(item)
        return entries

    def _save(self) -> None:
        """Rewrite the backing file from the in-memory mapping."""
        document = {key: entry.to_dict() for key, entry in self._entries.items()}

        # Serialize before opening so an unserializable value leaves the file intact
        text = json.dumps(document, indent=self.indent) + "\n"
        self.path.write_text(text, encoding=settings.FILE_ENCODING)
        logger.debug(f"Saved {len(document)} entries to {self.path}")

    def _ensure_loaded(self) -> None:
        """Load once if this instance has never seen the file."""
        if not self._loaded:
            self.load()

    def load(self) -> Dict[str, Entry]:
        """
        Re-read the backing file, sweep expired entries and persist.

        Returns:
            Snapshot of the live entries after the sweep
        """
        self._entries = self._read()
        self._loaded = True
        logger.debug(f"Loaded {len(self._entries)} entries from {self.path}")

        self.expire_all_expired()
        return dict(self._entries)

    # ------------------------------------------------------------------
    # Reloading operations
    # ------------------------------------------------------------------

    def add(self, key: str, value: JSONValue, ttl_minutes: Optional[float] = None) -> None:
        """
        Insert or overwrite a key.

        Args:
            key: The key to store (must be a str; other types are written
                as JSON strings and will not match on reload)
            value: Any JSON-serializable value
            ttl_minutes: Time-to-live in minutes (None or 0 = no expiration)
        """
        self.load()
        self._entries[key] = Entry(value, compute_expiration(ttl_minutes, self.clock()))
        self._save()

    def update(self, key: str, value: JSONValue, ttl_minutes: Optional[float] = None) -> bool:
        """
        Replace the value and expiration of an existing key.

        Returns:
            True if the key existed, False if nothing was done
        """
        self.load()
        if key not in self._entries:
            return False

        self._entries[key] = Entry(value, compute_expiration(ttl_minutes, self.clock()))
        self._save()
        return True

    def remove(self, key: str) -> bool:
        """
        Delete a key.

        Returns:
            True if the key was present, False otherwise
        """
        self.load()
        found = self._entries.pop(key, None) is not None
        self._save()
        return found

    def get(self, key: str, default: Any = None) -> Any:
        """
        Retrieve the value for a key.

        Args:
            key: The key to look up
            default: Returned when the key is missing or expired

        Returns:
            The stored value, or default
        """
        self.load()
        entry = self._entries.get(key)
        if entry is None:
            return default
        return entry.value

    def get_all(self) -> Dict[str, Entry]:
        """Return every live entry."""
        return self.load()

    def exists(self, key: str) -> bool:
        """Check if a key is present and not expired."""
        self.load()
        return key in self._entries

    # ------------------------------------------------------------------
    # In-memory operations (no reload)
    # ------------------------------------------------------------------

    def expire(self, key: str) -> bool:
        """
        Mark a key as expired now. It is removed by the next load.

        Returns:
            True if the key existed, False if nothing was done
        """
        self._ensure_loaded()
        entry = self._entries.get(key)
        if entry is None:
            return False

        self._entries[key] = replace(entry, expiration=int(self.clock()))
        self._save()
        return True

    def expire_all(self) -> None:
        """Mark every in-memory entry as expired now."""
        self._ensure_loaded()
        now = int(self.clock())
        for key, entry in self._entries.items():
            self._entries[key] = replace(entry, expiration=now)
        self._save()

    def get_expired_details(self) -> Dict[str, Entry]:
        """Return in-memory entries whose expiration has passed."""
        self._ensure_loaded()
        now = self.clock()
        return {k: e for k, e in self._entries.items() if e.is_expired(now)}

    def get_active_details(self) -> Dict[str, Entry]:
        """Return in-memory entries that never expire or expire later."""
        self._ensure_loaded()
        now = self.clock()
        return {k: e for k, e in self._entries.items() if not e.is_expired(now)}

    def remove_all(self) -> None:
        """Remove every key and persist the empty store."""
        self._entries = {}
        self._loaded = True
        self._save()

    def expire_all_expired(self) -> int:
        """
        Remove all expired entries from memory and persist (the sweep).

        Returns:
            Number of entries removed
        """
        expired = self.get_expired_details()
        for key in expired:
            del self._entries[key]
        self._save()

        if expired:
            logger.info(f"Swept {len(expired)} expired entries from {self.path}")
        return len(expired)

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the in-memory state.

        Returns:
            Dictionary containing:
            - total_keys: Entries held in memory
            - expired_keys: Entries expired but not yet swept
            - active_keys: Entries still live
        """
        expired = len(self.get_expired_details())
        total = len(self._entries)
        return {
            "total_keys": total,
            "expired_keys": expired,
            "active_keys": total - expired,
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
