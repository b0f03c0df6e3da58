"""Configuration module for ttlstore."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
