"""
ttlstore Configuration Settings

This module contains all configuration constants for the store.
Only the storage path can be overridden from the environment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Store configuration settings."""

    # Storage settings
    STORE_FILE: str = os.environ.get("TTLSTORE_FILE", ".env")
    FILE_ENCODING: str = "utf-8"

    # Serialization settings
    JSON_INDENT: int = 4


# Global settings instance
settings = Settings()
