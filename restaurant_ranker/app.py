from __future__ import annotations

from fastapi import FastAPI, HTTPException

from .catalog.data_store import find_restaurant, get_catalog, get_user_location
from .recommendations.models import (
    EmptyResult,
    ExplainRequest,
    ExplainResponse,
    RecommendationResult,
    ScoredRestaurant,
    UserQuery,
)
from .recommendations.reasons import explain
from .recommendations.retrieval import recommend
from .recommendations.scoring import score_restaurant

app = FastAPI(title="Restaurant Ranker API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    catalog = get_catalog()
    cuisines: set[str] = set()
    for restaurant in catalog:
        cuisines.update(restaurant.cuisines)
    locations = sorted({r.location for r in catalog if r.location})
    return {
        "cuisines": sorted(cuisines),
        "locations": locations,
        "user_location": get_user_location().model_dump(),
        "total_restaurants": len(catalog),
    }


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/recommendations", response_model=RecommendationResult | EmptyResult)
def recommendations(body: UserQuery) -> RecommendationResult | EmptyResult:
    return recommend(get_catalog(), body)


@app.post("/explain", response_model=ExplainResponse)
def explain_restaurant(body: ExplainRequest) -> ExplainResponse:
    restaurant = find_restaurant(body.restaurant_id)
    if restaurant is None:
        raise HTTPException(status_code=404, detail="Restaurant not found")

    scored = ScoredRestaurant(
        restaurant=restaurant,
        similarity=score_restaurant(restaurant, body.query),
    )
    return ExplainResponse(
        restaurant_id=restaurant.id,
        similarity=scored.similarity,
        reason=explain(scored, body.query),
    )
