"""Services Layer — probing, naming, resolving and executing placements.

Invariants:
    - One component per module, leaf-first: prober → namer → resolver → executor
    - Services catch typed remote errors and return OperationResult values

Design Decisions:
    - Components share one open LocalRestApiClient per invocation
"""
