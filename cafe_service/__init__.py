"""
Café lookup service.

Answers ``GET /cafe?city=...&count=...&search=...`` with the comma-joined
names of matching cafés from an in-memory catalog.
"""
