import pytest

from labstock.db import make_engine, make_session_factory
from labstock.init_db import init_db
from labstock.persistence import SqlSlotGateway
from labstock.services.inventory_service import InventoryStore


@pytest.fixture()
def session_factory():
    engine = make_engine("sqlite:///:memory:")
    init_db(engine)
    try:
        yield make_session_factory(engine)
    finally:
        engine.dispose()


@pytest.fixture()
def gateway(session_factory):
    return SqlSlotGateway(session_factory=session_factory)


@pytest.fixture()
def empty_store(gateway):
    """A store loaded with nothing persisted and no demo seed."""
    store = InventoryStore(gateway, seed=())
    store.load()
    return store


@pytest.fixture()
def demo_store(gateway):
    store = InventoryStore(gateway)
    store.load()
    return store
