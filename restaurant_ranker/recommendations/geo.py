from __future__ import annotations

import logging

import numpy as np

from .models import GeoPoint, Restaurant

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0


def _round_half_up(values, decimals: int = 1):
    factor = 10 ** decimals
    return np.floor(values * factor + 0.5) / factor


def haversine_km(lat1, lon1, lat2, lon2):
    """Great-circle distance in km, rounded to one decimal.

    Accepts scalars or numpy arrays; NaN inputs yield NaN.
    """
    lat1 = np.asarray(lat1, dtype=float)
    lat2 = np.asarray(lat2, dtype=float)
    # sin² is even, so absolute deltas keep a(p, q) == a(q, p) bit for bit
    dlat = np.radians(np.abs(lat2 - lat1))
    dlon = np.radians(np.abs(np.asarray(lon2, dtype=float) - np.asarray(lon1, dtype=float)))

    a = (
        np.sin(dlat / 2) ** 2
        + np.cos(np.radians(lat1)) * np.cos(np.radians(lat2)) * np.sin(dlon / 2) ** 2
    )
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    distance = _round_half_up(EARTH_RADIUS_KM * c)
    if distance.ndim == 0:
        return float(distance)
    return distance


def load_catalog(restaurants: list[Restaurant], user_location: GeoPoint) -> None:
    """Populate ``distance_km`` on every restaurant from ``user_location``.

    Must run before any recommendation request; calling it again simply
    recomputes the distances.
    """
    if not restaurants:
        logger.info("Catalog is empty, no distances to compute")
        return

    lats = np.array([r.latitude for r in restaurants], dtype=float)
    lons = np.array([r.longitude for r in restaurants], dtype=float)
    distances = haversine_km(user_location.latitude, user_location.longitude, lats, lons)

    for restaurant, distance in zip(restaurants, distances):
        restaurant.distance_km = float(distance)

    non_finite = int(np.count_nonzero(~np.isfinite(distances)))
    if non_finite:
        logger.warning("%d restaurants have a non-finite distance", non_finite)
    logger.info("Computed distances for %d restaurants", len(restaurants))
