"""Core Layer - pure authorization and input-filtering logic, no IO, no async.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure and deterministic
    - Catalog and whitelist tables are immutable after import/construction

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
