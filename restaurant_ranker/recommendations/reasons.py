from __future__ import annotations

from .models import ScoredRestaurant, UserQuery

HIGH_RATING = 4.5
BUDGET_COST = 35.0
NEARBY_KM = 2.0

GENERIC_REASON = "This restaurant fits your overall preferences and criteria."


def explain(scored: ScoredRestaurant, query: UserQuery) -> str:
    """Build a one-sentence justification from the restaurant's features."""
    restaurant = scored.restaurant
    reasons: list[str] = []

    if restaurant.rating >= HIGH_RATING:
        reasons.append("highly rated")

    matching = [c for c in restaurant.cuisines if c in query.selected_cuisines]
    if matching:
        reasons.append(f"matches your preference for {', '.join(matching)} cuisine")

    if restaurant.cost_for_two <= BUDGET_COST:
        reasons.append("budget-friendly")

    # NaN compares False, so unknown distances never count as nearby.
    if restaurant.distance_km is not None and restaurant.distance_km <= NEARBY_KM:
        reasons.append("nearby location")

    if not reasons:
        return GENERIC_REASON

    return f"This restaurant is {', '.join(reasons)}."
