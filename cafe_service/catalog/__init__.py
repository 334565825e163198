"""
Café catalog package.

Responsibilities:
- Define the immutable café record and the city -> cafés catalog.
- Load the bundled catalog data once at startup.
- Expose read-only lookup by city key to the query handler.
"""
