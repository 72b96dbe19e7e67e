"""
High-level use cases for the profile board API.

Each service module orchestrates the document store/repository to implement
business rules (register, edit a profile, comment on a profile, etc.).

Routers (FastAPI endpoints) call these services instead of manipulating the
JSON document directly.
"""
