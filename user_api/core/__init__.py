"""Core Layer — pure domain logic and boundary contracts, no IO.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - Presence checks are pure and deterministic

Design Decisions:
    - Functional core separated from the async controller shell
"""
