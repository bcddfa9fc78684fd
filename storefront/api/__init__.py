"""
API layer for the Community Store backend.

Exposes the JSON endpoints under /api (health, signup/login, catalog and
search, cart, checkout and purchase history, profile settings).
"""
