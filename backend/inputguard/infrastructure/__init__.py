"""Infrastructure Layer - cross-cutting concerns and configuration loaders.

Invariants:
    - Infrastructure never holds authorization logic (that lives in core/)
    - Loaders run once per process and hand immutable values to core

Design Decisions:
    - Cached loaders over module globals (ADR: single responsibility)
"""
