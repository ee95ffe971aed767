"""Core Layer — pure placement logic, no IO, no async, no network.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic (clock values are arguments)

Design Decisions:
    - Functional core separated from imperative shell
"""
