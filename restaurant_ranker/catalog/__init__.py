"""
Catalog package for the restaurant ranker.

Responsibilities:
- Read the bundled restaurant catalog from disk.
- Normalize each record into the canonical Restaurant schema.
- Hold the distance-annotated catalog in memory for the running process.
"""
