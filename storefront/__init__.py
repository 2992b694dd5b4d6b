"""
Storefront Backend Application — root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (users, products, carts) and infrastructure (MongoDB).
"""
