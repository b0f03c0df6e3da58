"""
Store Entry Definitions

This module defines a single stored entry and the TTL arithmetic used
to turn a time-to-live in minutes into an absolute expiration instant.

Expiration instants are integer epoch seconds. An entry without an
expiration never expires.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

SECONDS_PER_MINUTE = 60

# Anything json.dumps() accepts
JSONValue = Union[None, bool, int, float, str, list, Dict[str, Any]]


def compute_expiration(ttl_minutes: Optional[float], now: float) -> Optional[int]:
    """
    Convert a TTL in minutes into an absolute expiration instant.

    Args:
        ttl_minutes: Time-to-live in minutes (None or 0 = no expiration)
        now: Current time as epoch seconds

    Returns:
        Expiration as integer epoch seconds, or None for no expiration
    """
    if not ttl_minutes:
        return None
    return int(now + ttl_minutes * SECONDS_PER_MINUTE)


@dataclass(frozen=True)
class Entry:
    """
    A stored value plus its optional expiration instant.

    Attributes:
        value: Any JSON-serializable payload
        expiration: Epoch seconds at which the entry expires (None = never)
    """
    value: JSONValue = None
    expiration: Optional[int] = None

    def is_expired(self, now: float) -> bool:
        """Check whether the entry is expired at the given instant."""
        return self.expiration is not None and self.expiration <= now

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the on-disk representation."""
        return {"value": self.value, "expiration": self.expiration}

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Entry":
        """Build an entry from its on-disk representation."""
        return cls(value=raw.get("value"), expiration=raw.get("expiration"))
