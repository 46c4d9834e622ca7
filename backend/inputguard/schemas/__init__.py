"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the HTTP boundary only
    - Authorization semantics never live here

Design Decisions:
    - Separate from core types: schemas are API contracts
"""
