"""Distance from the lab depot to the user's reported position."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple
from urllib.parse import quote_plus

from labstock.core.config import settings
from labstock.errors import GeoError, GeoErrorKind

log = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371
SUPPLIER_AREA = "Pimpri Chinchwad"


@dataclass(frozen=True)
class Location:
    name: str
    lat: float
    lng: float


LAB_LOCATION = Location(settings.LAB_NAME, settings.LAB_LAT, settings.LAB_LNG)


@dataclass(frozen=True)
class DistanceReport:
    item_name: str
    reference: Location
    distance_km: float
    supplier_search_url: str


class PositionProvider(Protocol):
    def current_position(self) -> Tuple[float, float]: ...


class FixedPositionProvider:
    def __init__(self, lat: float, lng: float):
        self._position = (lat, lng)

    def current_position(self) -> Tuple[float, float]:
        return self._position


class FailingPositionProvider:
    def __init__(self, kind: GeoErrorKind):
        self.kind = kind

    def current_position(self) -> Tuple[float, float]:
        raise GeoError(self.kind)


class EnvPositionProvider:
    """Reads LABSTOCK_USER_LAT / LABSTOCK_USER_LNG from settings."""

    def current_position(self) -> Tuple[float, float]:
        if settings.USER_LAT is None or settings.USER_LNG is None:
            raise GeoError(GeoErrorKind.POSITION_UNAVAILABLE)
        return settings.USER_LAT, settings.USER_LNG


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(EARTH_RADIUS_KM * c, 2)


def supplier_search_url(item_name: str) -> str:
    query = quote_plus(f"buy {item_name.strip()} suppliers near {SUPPLIER_AREA}")
    return f"https://www.google.com/maps/search/{query}"


class GeoAdvisory:
    """One-shot supplier distance lookups. Failures are terminal, never retried."""

    def __init__(self, provider: Optional[PositionProvider], reference: Location = LAB_LOCATION):
        self._provider = provider
        self.reference = reference

    def locate(self, item_name: str) -> DistanceReport:
        if self._provider is None:
            raise GeoError(GeoErrorKind.UNKNOWN, "Geolocation is not supported.")
        try:
            lat, lng = self._provider.current_position()
        except GeoError as exc:
            log.info("Location request for %s failed: %s", item_name, exc.kind.value)
            raise
        except Exception as exc:
            log.exception("Position provider crashed")
            raise GeoError(GeoErrorKind.UNKNOWN) from exc

        distance = haversine_km(lat, lng, self.reference.lat, self.reference.lng)
        return DistanceReport(
            item_name=item_name,
            reference=self.reference,
            distance_km=distance,
            supplier_search_url=supplier_search_url(item_name),
        )
