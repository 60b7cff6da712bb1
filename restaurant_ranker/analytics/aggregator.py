from __future__ import annotations

from collections import Counter

import numpy as np
import pandas as pd

from ..recommendations.models import (
    AnalyticsSummary,
    CuisineCount,
    CuisineRating,
    ScoredRestaurant,
)

TOP_CUISINES = 8
TOP_RATED_CUISINES = 6

COST_BANDS = ["$0-$25", "$26-$40", "$41-$60", "$61+"]
_COST_EDGES = [-np.inf, 25, 40, 60, np.inf]

RATING_BANDS = ["0-2", "2-3", "3-4", "4-4.5", "4.5-5"]
_RATING_EDGES = [-np.inf, 2, 3, 4, 4.5, np.inf]


def _band_counts(values: list[float], edges: list[float], labels: list[str], right: bool) -> dict[str, int]:
    bands = pd.cut(pd.Series(values, dtype=float), bins=edges, labels=labels, right=right)
    counts = bands.value_counts(sort=False).reindex(labels, fill_value=0)
    return {label: int(count) for label, count in counts.items()}


def compute_analytics(ranked: list[ScoredRestaurant]) -> AnalyticsSummary:
    restaurants = [s.restaurant for s in ranked]

    # Cuisine distribution; most_common keeps first-seen order on ties
    cuisine_counter: Counter[str] = Counter()
    for r in restaurants:
        for c in r.cuisines:
            cuisine_counter[c] += 1
    cuisine_counts = [
        CuisineCount(name=n, count=c) for n, c in cuisine_counter.most_common(TOP_CUISINES)
    ]

    # Cost bands are closed on the right: 25 -> "$0-$25", 26 -> "$26-$40"
    cost_band_counts = _band_counts(
        [r.cost_for_two for r in restaurants], _COST_EDGES, COST_BANDS, right=True,
    )
    # Rating bands are closed on the left: 4.5 -> "4.5-5"
    rating_band_counts = _band_counts(
        [r.rating for r in restaurants], _RATING_EDGES, RATING_BANDS, right=False,
    )

    # Mean rating per cuisine
    pairs = pd.DataFrame(
        [(c, r.rating) for r in restaurants for c in r.cuisines],
        columns=["cuisine", "rating"],
    )
    if pairs.empty:
        top_rated: list[CuisineRating] = []
    else:
        means = (
            pairs.groupby("cuisine", sort=False)["rating"]
            .mean()
            .sort_values(ascending=False, kind="stable")
            .head(TOP_RATED_CUISINES)
        )
        top_rated = [
            CuisineRating(name=name, avg_rating=round(float(avg), 2))
            for name, avg in means.items()
        ]

    return AnalyticsSummary(
        cuisine_counts=cuisine_counts,
        cost_band_counts=cost_band_counts,
        rating_band_counts=rating_band_counts,
        top_cuisine_avg_ratings=top_rated,
    )
