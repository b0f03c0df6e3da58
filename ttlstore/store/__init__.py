"""Store module for ttlstore."""

from .entry import Entry, compute_expiration
from .file_store import FileStore

__all__ = ["Entry", "FileStore", "compute_expiration"]
