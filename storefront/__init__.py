"""
Community Store backend — root package.

This package contains the FastAPI app entry point (main.py), API routes,
use cases, the cart/purchase-history domain model, and the MongoDB and
in-memory user stores.
"""
