"""
ttlstore: File-Backed Key-Value Store

A small persistent key-value store with per-key expiration, kept in a
single pretty-printed JSON file that is re-read and rewritten on every call.
"""

from . import api
from .store import Entry, FileStore

__version__ = "1.0.0"

__all__ = ["Entry", "FileStore", "api"]
