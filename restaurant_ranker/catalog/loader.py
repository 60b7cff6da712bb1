from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

import pandas as pd

from ..recommendations.models import Restaurant
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

CANONICAL_COLUMNS: List[str] = [
    "id",
    "name",
    "location",
    "latitude",
    "longitude",
    "rating",
    "cost_for_two",
    "cuisines",
    "veg",
    "delivery",
    "table_booking",
    "reviews",
    "image_url",
]

_TRUTHY = {"true", "yes", "y", "1"}


def _normalize_rating(rating: float | int | str | None) -> float | None:
    if rating is None:
        return None
    raw = str(rating).strip()
    # Handle "X/5" format (e.g. "4.1/5")
    if "/" in raw:
        raw = raw.split("/")[0].strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if value != value:
        return None

    # Clamp to [0, 5]
    return max(0.0, min(5.0, value))


def _normalize_cuisines(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        parts = value
    elif isinstance(value, str):
        parts = value.split(",")
    else:
        return []
    return [str(c).strip() for c in parts if str(c).strip()]


def _normalize_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    if value is None or pd.isna(value):
        return False
    return bool(value)


def _text(value: Any) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")


def _normalize_row(row: pd.Series) -> dict[str, Any] | None:
    name = _text(row.get("name"))
    cuisines = _normalize_cuisines(row.get("cuisines"))
    if not name or not cuisines:
        return None

    cost = _to_float(row.get("cost_for_two"))
    return {
        "id": _text(row.get("id")) or str(row.name),
        "name": name,
        "location": _text(row.get("location")),
        "latitude": _to_float(row.get("latitude")),
        "longitude": _to_float(row.get("longitude")),
        "rating": _normalize_rating(row.get("rating")) or 0.0,
        "cost_for_two": max(0.0, cost) if pd.notna(cost) else 0.0,
        "cuisines": cuisines,
        "veg": _normalize_flag(row.get("veg")),
        "delivery": _normalize_flag(row.get("delivery")),
        "table_booking": _normalize_flag(row.get("table_booking")),
        "reviews": _text(row.get("reviews")),
        "image_url": _text(row.get("image_url")),
    }


def load_restaurants(path: Path | None = None, config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[Restaurant]:
    """
    Read a JSON catalog and map every record onto the Restaurant schema.

    Records without a name or any cuisine are skipped. Coordinates that cannot
    be parsed are kept as NaN; their distance then fails every distance filter.
    """
    path = Path(path) if path is not None else config.catalog_path
    if not path.is_file():
        raise FileNotFoundError(f"Restaurant catalog not found: {path}")

    df = pd.read_json(path, orient="records", dtype=False)

    # Ensure all expected columns exist so row.get() never misses
    for col in CANONICAL_COLUMNS:
        if col not in df.columns:
            df[col] = None
    df = df[CANONICAL_COLUMNS]

    restaurants: list[Restaurant] = []
    skipped = 0
    for _, row in df.iterrows():
        record = _normalize_row(row)
        if record is None:
            skipped += 1
            continue
        restaurants.append(Restaurant(**record))

    if skipped:
        logger.warning("Skipped %d catalog records without a name or cuisine", skipped)
    logger.info("Loaded %d restaurants from %s", len(restaurants), path)
    return restaurants
