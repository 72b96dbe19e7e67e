"""
Core utilities shared across the profile board API.

This package hosts configuration, logging setup, password hashing and id
generation. Services depend on these primitives instead of importing FastAPI or
the storage layer for cross-cutting concerns.
"""
