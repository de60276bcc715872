"""Load/save the full item list under one storage key."""
from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from labstock.core.config import settings
from labstock.db import SessionLocal, engine, make_engine, make_session_factory
from labstock.errors import InventoryError
from labstock.init_db import init_db
from labstock.models import Item, StorageSlot

log = logging.getLogger(__name__)


_MIGRATIONS_APPLIED = False

def _ensure_migrations():
    global _MIGRATIONS_APPLIED
    if not _MIGRATIONS_APPLIED:
        init_db(engine)
        _MIGRATIONS_APPLIED = True


class StorageGateway(Protocol):
    def save(self, items: Iterable[Item]) -> None: ...

    def load(self) -> Optional[List[Item]]: ...


def serialize_items(items: Iterable[Item]) -> str:
    return json.dumps([item.to_record() for item in items], ensure_ascii=False)


def deserialize_items(payload: str) -> List[Item]:
    try:
        records = json.loads(payload, parse_float=Decimal)
    except ValueError as exc:
        raise InventoryError("Stored inventory data is not valid JSON.") from exc
    if not isinstance(records, list):
        raise InventoryError("Stored inventory data must be a list of items.")
    items = []
    for position, record in enumerate(records):
        try:
            items.append(Item.from_record(record))
        except InventoryError as exc:
            raise InventoryError([f"Stored item #{position} is invalid."] + exc.messages) from exc
    return items


class MemoryGateway:
    """Keeps serialized slots in a dict. Same wire format as the SQL gateway."""

    def __init__(self, key: Optional[str] = None):
        self.key = key or settings.STORAGE_KEY
        self.slots: Dict[str, str] = {}

    def save(self, items: Iterable[Item]) -> None:
        self.slots[self.key] = serialize_items(items)

    def load(self) -> Optional[List[Item]]:
        payload = self.slots.get(self.key)
        if payload is None:
            return None
        return deserialize_items(payload)


class SqlSlotGateway:
    """Stores the serialized inventory in the storage_slots table."""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal, key: Optional[str] = None):
        if session_factory is SessionLocal:
            _ensure_migrations()
        self.key = key or settings.STORAGE_KEY
        self._session_factory = session_factory

    @classmethod
    def from_url(cls, url: str, key: Optional[str] = None) -> "SqlSlotGateway":
        """Gateway over its own engine; the slot table is created if missing."""
        slot_engine = make_engine(url)
        init_db(slot_engine)
        return cls(make_session_factory(slot_engine), key=key)

    @property
    def session_factory(self) -> Callable[[], Session]:
        return self._session_factory

    def save(self, items: Iterable[Item]) -> None:
        payload = serialize_items(items)
        session = self._session_factory()
        try:
            slot = session.get(StorageSlot, self.key)
            if slot is None:
                session.add(StorageSlot(key=self.key, value=payload))
            else:
                slot.value = payload
            session.commit()
            log.debug("Saved slot %s (%d bytes)", self.key, len(payload))
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def load(self) -> Optional[List[Item]]:
        session = self._session_factory()
        try:
            payload = session.execute(
                select(StorageSlot.value).where(StorageSlot.key == self.key)
            ).scalar_one_or_none()
        finally:
            session.close()
        if payload is None:
            log.debug("Slot %s is empty", self.key)
            return None
        try:
            return deserialize_items(payload)
        except InventoryError:
            log.error("Slot %s holds unreadable inventory data", self.key)
            raise
