from __future__ import annotations

import math

from .models import Restaurant, UserQuery

WEIGHTS: dict[str, float] = {
    "cuisine": 0.40,
    "rating": 0.25,
    "cost": 0.20,
    "reviews": 0.15,
}

# Credit given to the preference-based components when no cuisine is selected.
NO_PREFERENCE_CREDIT = 0.5
COST_CEILING = 200.0


def _cuisine_score(restaurant: Restaurant, selected: list[str]) -> float:
    if not selected:
        return NO_PREFERENCE_CREDIT
    # Divides by the number of selected cuisines, not the restaurant's own
    # cuisine count, so extra restaurant cuisines are never penalised.
    matches = sum(1 for c in restaurant.cuisines if c in selected)
    return matches / len(selected)


def _review_score(restaurant: Restaurant, selected: list[str]) -> float:
    if not selected:
        return NO_PREFERENCE_CREDIT
    text = restaurant.reviews.lower()
    matches = sum(1 for c in selected if c.lower() in text)
    return matches / len(selected)


def score_restaurant(restaurant: Restaurant, query: UserQuery) -> int:
    """Blend cuisine, rating, cost and review matches into a 0-100 score."""
    selected = query.selected_cuisines

    components = {
        "cuisine": _cuisine_score(restaurant, selected),
        "rating": restaurant.rating / 5.0,
        "cost": max(0.0, 1.0 - restaurant.cost_for_two / COST_CEILING),
        "reviews": _review_score(restaurant, selected),
    }

    raw = sum(WEIGHTS[name] * value for name, value in components.items())
    total_weight = sum(WEIGHTS.values())

    score = math.floor(raw / total_weight * 100 + 0.5)
    return max(0, min(100, score))
