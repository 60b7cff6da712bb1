from __future__ import annotations

from restaurant_ranker.recommendations.models import Restaurant, ScoredRestaurant, SortKey
from restaurant_ranker.recommendations.ranking import rank_restaurants


def _scored(rid: str, similarity: int = 50, distance_km: float | None = 1.0, **overrides) -> ScoredRestaurant:
    fields = dict(
        id=rid, name=f"R{rid}", latitude=0.0, longitude=0.0,
        rating=4.0, cost_for_two=30, cuisines=["Italian"],
    )
    fields.update(overrides)
    restaurant = Restaurant(**fields)
    restaurant.distance_km = distance_km
    return ScoredRestaurant(restaurant=restaurant, similarity=similarity)


def _ids(ranked: list[ScoredRestaurant]) -> list[str]:
    return [s.restaurant.id for s in ranked]


def test_rating_descending():
    scored = [_scored("a", rating=3.0), _scored("b", rating=4.8), _scored("c", rating=4.0)]
    ranked = rank_restaurants(scored, SortKey.rating)
    assert [s.restaurant.rating for s in ranked] == [4.8, 4.0, 3.0]


def test_cost_ascending():
    scored = [_scored("a", cost_for_two=50), _scored("b", cost_for_two=20), _scored("c", cost_for_two=30)]
    assert _ids(rank_restaurants(scored, SortKey.cost)) == ["b", "c", "a"]


def test_distance_ascending_with_unknown_last():
    scored = [
        _scored("a", distance_km=None),
        _scored("b", distance_km=3.2),
        _scored("c", distance_km=float("nan")),
        _scored("d", distance_km=0.4),
    ]
    assert _ids(rank_restaurants(scored, SortKey.distance)) == ["d", "b", "a", "c"]


def test_similarity_is_default():
    scored = [_scored("a", similarity=40), _scored("b", similarity=90), _scored("c", similarity=65)]
    assert _ids(rank_restaurants(scored)) == ["b", "c", "a"]


def test_ties_keep_input_order():
    scored = [
        _scored("a", similarity=70, rating=4.0, cost_for_two=30),
        _scored("b", similarity=90, rating=4.5, cost_for_two=20),
        _scored("c", similarity=70, rating=4.0, cost_for_two=30),
        _scored("d", similarity=90, rating=4.5, cost_for_two=20),
        _scored("e", similarity=70, rating=4.0, cost_for_two=30),
    ]
    assert _ids(rank_restaurants(scored, SortKey.similarity)) == ["b", "d", "a", "c", "e"]
    assert _ids(rank_restaurants(scored, SortKey.rating)) == ["b", "d", "a", "c", "e"]
    assert _ids(rank_restaurants(scored, SortKey.cost)) == ["b", "d", "a", "c", "e"]
    assert _ids(rank_restaurants(scored, SortKey.distance)) == ["a", "b", "c", "d", "e"]


def test_output_is_permutation_of_input():
    scored = [_scored(str(i), similarity=(i * 37) % 101, rating=(i % 6) * 0.9) for i in range(25)]
    for key in SortKey:
        ranked = rank_restaurants(scored, key)
        assert sorted(_ids(ranked)) == sorted(_ids(scored))
        assert len(ranked) == len(scored)


def test_does_not_reorder_input_list():
    scored = [_scored("a", similarity=10), _scored("b", similarity=90)]
    rank_restaurants(scored)
    assert _ids(scored) == ["a", "b"]


def test_empty_input():
    assert rank_restaurants([], SortKey.rating) == []
