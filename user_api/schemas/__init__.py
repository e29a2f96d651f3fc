"""Pydantic Schemas — the user entity and the result envelope.

Invariants:
    - Schemas validate at the controller boundary (inputs and envelopes)
    - Domain types from core/ used for status codes

Design Decisions:
    - Pydantic over dataclasses: validation plus alias-aware serialization
"""
