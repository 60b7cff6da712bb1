from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class VegFilter(str, Enum):
    any = "any"
    veg = "veg"
    nonveg = "nonveg"


class SortKey(str, Enum):
    similarity = "similarity"
    rating = "rating"
    cost = "cost"
    distance = "distance"


class GeoPoint(BaseModel):
    latitude: float
    longitude: float


class Restaurant(BaseModel):
    id: str
    name: str
    location: str = ""
    latitude: float
    longitude: float
    rating: float = Field(..., ge=0.0, le=5.0)
    cost_for_two: float = Field(..., ge=0.0)
    cuisines: list[str] = Field(..., min_length=1)
    veg: bool = False
    delivery: bool = False
    table_booking: bool = False
    reviews: str = ""
    image_url: str = ""
    # Filled in by load_catalog(); None until then.
    distance_km: float | None = None


class UserQuery(BaseModel):
    selected_cuisines: list[str] = Field(default_factory=list)
    location_substring: str = ""
    min_rating: float = 0.0
    max_cost: float = 200.0
    veg_filter: VegFilter = VegFilter.any
    require_delivery: bool = False
    require_booking: bool = False
    nearby_only: bool = False
    sort_key: SortKey = SortKey.similarity

    @field_validator("selected_cuisines")
    @classmethod
    def _dedupe_cuisines(cls, value: list[str]) -> list[str]:
        seen: list[str] = []
        for cuisine in value:
            if cuisine.strip() and cuisine not in seen:
                seen.append(cuisine)
        return seen

    @field_validator("location_substring")
    @classmethod
    def _blank_location(cls, value: str) -> str:
        # Whitespace-only means "no location filter"; anything else is matched as given.
        return value if value.strip() else ""

    @field_validator("min_rating")
    @classmethod
    def _clamp_rating(cls, value: float) -> float:
        """Out-of-range rating filters are treated as their nearest bound."""
        return max(0.0, min(5.0, value))

    @field_validator("max_cost")
    @classmethod
    def _clamp_cost(cls, value: float) -> float:
        return max(0.0, value)


class ScoredRestaurant(BaseModel):
    restaurant: Restaurant
    similarity: int = Field(..., ge=0, le=100)


class RecommendationItem(ScoredRestaurant):
    reason: str


class CuisineCount(BaseModel):
    name: str
    count: int


class CuisineRating(BaseModel):
    name: str
    avg_rating: float


class AnalyticsSummary(BaseModel):
    cuisine_counts: list[CuisineCount]
    cost_band_counts: dict[str, int]
    rating_band_counts: dict[str, int]
    top_cuisine_avg_ratings: list[CuisineRating]


class RecommendationResult(BaseModel):
    results: list[RecommendationItem]
    total_candidates: int
    analytics: AnalyticsSummary
    message: str


class EmptyResult(BaseModel):
    results: list[RecommendationItem] = Field(default_factory=list)
    total_candidates: int = 0
    message: str = "No restaurants match your criteria. Try adjusting your filters."


class ExplainRequest(BaseModel):
    restaurant_id: str = Field(..., min_length=1)
    query: UserQuery = Field(default_factory=UserQuery)


class ExplainResponse(BaseModel):
    restaurant_id: str
    similarity: int
    reason: str
