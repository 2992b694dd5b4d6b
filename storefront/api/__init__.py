"""
API layer for the Storefront Backend.

Exposes HTTP endpoints under /v1 (auth, users, products, cart) and the
global error handlers translating ApiError into JSON responses.
"""
