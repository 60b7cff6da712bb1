from __future__ import annotations

from ..recommendations.geo import load_catalog
from ..recommendations.models import GeoPoint, Restaurant
from .config import DEFAULT_CATALOG_CONFIG
from .loader import load_restaurants

_catalog: list[Restaurant] | None = None


def get_user_location() -> GeoPoint:
    return GeoPoint(
        latitude=DEFAULT_CATALOG_CONFIG.user_latitude,
        longitude=DEFAULT_CATALOG_CONFIG.user_longitude,
    )


def get_catalog() -> list[Restaurant]:
    """Return the distance-annotated catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        restaurants = load_restaurants()
        load_catalog(restaurants, get_user_location())
        _catalog = restaurants
    return _catalog


def find_restaurant(restaurant_id: str) -> Restaurant | None:
    for restaurant in get_catalog():
        if restaurant.id == restaurant_id:
            return restaurant
    return None
