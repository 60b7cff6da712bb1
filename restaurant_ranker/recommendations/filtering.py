from __future__ import annotations

import pandas as pd

from .models import Restaurant, UserQuery, VegFilter

NEARBY_RADIUS_KM = 5.0

_FILTER_COLUMNS = {
    "rating", "cost_for_two", "location", "veg", "delivery", "table_booking", "distance_km",
}


def _to_frame(catalog: list[Restaurant]) -> pd.DataFrame:
    df = pd.DataFrame([r.model_dump(include=_FILTER_COLUMNS) for r in catalog])
    # Missing distances become NaN so every comparison on them is False.
    df["distance_km"] = pd.to_numeric(df["distance_km"], errors="coerce")
    return df


def filter_catalog(catalog: list[Restaurant], query: UserQuery) -> list[Restaurant]:
    """Return the restaurants satisfying every hard constraint, in catalog order."""
    if not catalog:
        return []

    df = _to_frame(catalog)

    mask = (df["rating"] >= query.min_rating) & (df["cost_for_two"] <= query.max_cost)

    if query.location_substring:
        needle = query.location_substring.casefold()
        mask = mask & df["location"].str.casefold().str.contains(needle, regex=False)

    if query.veg_filter == VegFilter.veg:
        mask = mask & df["veg"]
    elif query.veg_filter == VegFilter.nonveg:
        mask = mask & ~df["veg"]

    if query.require_delivery:
        mask = mask & df["delivery"]

    if query.require_booking:
        mask = mask & df["table_booking"]

    if query.nearby_only:
        mask = mask & (df["distance_km"] <= NEARBY_RADIUS_KM)

    return [catalog[i] for i in df.index[mask.to_numpy(dtype=bool)]]
