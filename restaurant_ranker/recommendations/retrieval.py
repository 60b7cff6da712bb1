from __future__ import annotations

import logging
import time

from ..analytics.aggregator import compute_analytics
from .filtering import filter_catalog
from .models import (
    EmptyResult,
    RecommendationItem,
    RecommendationResult,
    Restaurant,
    ScoredRestaurant,
    UserQuery,
)
from .ranking import rank_restaurants
from .reasons import explain
from .scoring import score_restaurant

logger = logging.getLogger(__name__)

TOP_N = 12


def recommend(
    catalog: list[Restaurant],
    query: UserQuery,
    top_n: int = TOP_N,
) -> RecommendationResult | EmptyResult:
    """Run filter -> score -> rank -> (explain, analytics) for one query.

    Returns ``EmptyResult`` when no restaurant passes the hard filters.
    """
    start_time = time.time()

    # --- Hard filters ---
    candidates = filter_catalog(catalog, query)
    if not candidates:
        logger.info("No candidates out of %d restaurants", len(catalog))
        return EmptyResult()

    # --- Scoring ---
    scored = [
        ScoredRestaurant(restaurant=r, similarity=score_restaurant(r, query))
        for r in candidates
    ]

    ranked = rank_restaurants(scored, query.sort_key)

    # --- Assemble response ---
    items = [
        RecommendationItem(
            restaurant=s.restaurant,
            similarity=s.similarity,
            reason=explain(s, query),
        )
        for s in ranked[:top_n]
    ]

    result = RecommendationResult(
        results=items,
        total_candidates=len(ranked),
        analytics=compute_analytics(ranked),
        message=f"Found {len(ranked)} restaurants matching your preferences",
    )

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.info(
        "Ranked %d of %d restaurants by %s in %.1f ms",
        len(ranked), len(catalog), query.sort_key.value, elapsed_ms,
    )
    return result
