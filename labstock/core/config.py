import os
from dataclasses import dataclass
from typing import Optional


def _env_float(name: str) -> Optional[float]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@dataclass
class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "LabStock")
    ENV: str = os.getenv("LABSTOCK_ENV", "dev").lower()  # dev|stage|prod
    DEBUG: bool = os.getenv("DEBUG", "").lower() in {"1", "true", "yes"} or os.getenv("LABSTOCK_ENV", "dev").lower() != "prod"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "").upper()

    # Name of the single key-value slot holding the serialized inventory
    STORAGE_KEY: str = os.getenv("LABSTOCK_STORAGE_KEY", "labInventoryData")
    LOW_STOCK_THRESHOLD: int = int(os.getenv("LABSTOCK_LOW_STOCK_THRESHOLD") or "10")
    CURRENCY_SYMBOL: str = os.getenv("LABSTOCK_CURRENCY_SYMBOL", "₹")

    # Reference point for supplier distance reports
    LAB_NAME: str = os.getenv("LABSTOCK_LAB_NAME", "Lab Central Depot")
    LAB_LAT: float = float(os.getenv("LABSTOCK_LAB_LAT") or "18.6655")
    LAB_LNG: float = float(os.getenv("LABSTOCK_LAB_LNG") or "73.7635")

    # Optional reported position of the user (desktop has no browser geolocation)
    USER_LAT: Optional[float] = _env_float("LABSTOCK_USER_LAT")
    USER_LNG: Optional[float] = _env_float("LABSTOCK_USER_LNG")

    def __post_init__(self):
        base_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
        data_dir = os.getenv("LABSTOCK_DATA_DIR") or os.path.join(base_dir, "data")
        os.makedirs(data_dir, exist_ok=True)
        db_name = f"labstock_{self.ENV}.sqlite3"
        self.DATA_DIR = data_dir
        self.DB_PATH = os.path.join(data_dir, db_name)
        self.DATABASE_URL = f"sqlite:///{self.DB_PATH}"
        if not self.LOG_LEVEL:
            self.LOG_LEVEL = "DEBUG" if self.DEBUG else "INFO"


# singleton settings
settings = Settings()

# Back-compat for modules importing DATABASE_URL directly
DATABASE_URL = settings.DATABASE_URL
