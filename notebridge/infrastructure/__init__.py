"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All remote calls wrapped with auth and error mapping

Design Decisions:
    - Thin wrappers over raw clients (ADR: single responsibility)
"""
