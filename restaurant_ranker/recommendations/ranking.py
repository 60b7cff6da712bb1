from __future__ import annotations

import pandas as pd

from .models import ScoredRestaurant, SortKey

# sort key -> (value extractor, ascending)
_SORT_SPECS = {
    SortKey.rating: (lambda s: s.restaurant.rating, False),
    SortKey.cost: (lambda s: s.restaurant.cost_for_two, True),
    SortKey.distance: (lambda s: s.restaurant.distance_km, True),
    SortKey.similarity: (lambda s: s.similarity, False),
}


def rank_restaurants(
    scored: list[ScoredRestaurant],
    sort_key: SortKey = SortKey.similarity,
) -> list[ScoredRestaurant]:
    """Stable sort by ``sort_key``; ties keep their incoming order.

    Missing or NaN keys (e.g. an uncomputed distance) always sort last.
    """
    if not scored:
        return []

    extract, ascending = _SORT_SPECS.get(sort_key, _SORT_SPECS[SortKey.similarity])
    keys = pd.to_numeric(pd.Series([extract(s) for s in scored]), errors="coerce")
    order = keys.sort_values(ascending=ascending, kind="stable", na_position="last").index

    return [scored[i] for i in order]
