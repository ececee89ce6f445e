"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary; services re-validate patches
    - Response schemas never expose password hashes or owner ids of other users
"""
