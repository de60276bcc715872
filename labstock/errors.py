"""Exceptions raised by inventory, validation and geo operations."""
from __future__ import annotations

import enum
from typing import Iterable, List, Optional


class InventoryError(Exception):
    """Base class for errors surfaced to the user action that triggered them."""

    def __init__(self, messages: Iterable[str] | str = ()):
        if isinstance(messages, str):
            messages = [messages]
        self.messages: List[str] = list(messages)
        super().__init__("\n".join(self.messages))


class ValidationError(InventoryError):
    """User-correctable input problems; the store is left untouched."""


class ParseError(InventoryError):
    """A numeric field could not be parsed. Raised before business validation."""


class NotFoundError(InventoryError, KeyError):
    """The requested item id is not in the store."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        InventoryError.__init__(self, f"Item {item_id} not found.")

    def __str__(self) -> str:
        return self.messages[0]


class GeoErrorKind(enum.Enum):
    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    UNKNOWN = "unknown"


_GEO_MESSAGES = {
    GeoErrorKind.PERMISSION_DENIED: "ACCESS DENIED: Location permission blocked.",
    GeoErrorKind.POSITION_UNAVAILABLE: "ERROR: Location data unavailable.",
    GeoErrorKind.UNKNOWN: "Geolocation Error. Check permissions.",
}


class GeoError(InventoryError):
    """Terminal failure of a single location request."""

    def __init__(self, kind: GeoErrorKind, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or _GEO_MESSAGES[kind])
