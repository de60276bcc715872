import logging

from labstock.core.config import settings
from labstock.dashboard import render
from labstock.persistence import SqlSlotGateway
from labstock.services.inventory_service import InventoryStore


def run():
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    print(f"LabStock environment: {settings.ENV}")
    print(f"App Name: {settings.APP_NAME}")
    print(f"Debug: {settings.DEBUG}")

    store = InventoryStore(SqlSlotGateway())
    store.load()
    print()
    print(render(store.items()))


if __name__ == "__main__":
    run()
