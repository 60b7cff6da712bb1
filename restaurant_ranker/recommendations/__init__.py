"""
Restaurant ranking engine.

Responsibilities:
- Precompute each restaurant's distance from the user location (geo).
- Filter the catalog down to candidates matching the hard constraints.
- Score candidates with a weighted cuisine/rating/cost/review blend.
- Rank by the requested sort key and explain each top result.
"""
