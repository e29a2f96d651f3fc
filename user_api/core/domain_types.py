"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the store-assigned string identifier
    - ResultStatus holds the only two status codes the controller emits

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - int Enum for status: compares equal to the raw HTTP code in envelopes
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ResultStatus(int, Enum):
    """Envelope status codes. Not-found and invalid input share 404."""
    OK = 200
    NOT_FOUND = 404
