"""Services Layer — the warehouse manager that composes the typed registries.

Invariants:
    - Registry failures stop here: converted to reports, never raised further

Design Decisions:
    - One manager class owning both registries (fixed set of kinds)
"""
