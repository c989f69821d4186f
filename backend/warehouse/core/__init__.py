"""Core Layer — pure domain logic, no IO, no logging, no printing.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - Registry failures are returned as values, never raised

Design Decisions:
    - Functional core separated from imperative shell: the manager in services/
      owns the output and logging around these pure operations
"""
