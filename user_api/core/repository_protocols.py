"""Boundary Protocols — contracts between the controller and persistence.

Invariants:
    - Controller NEVER imports a concrete repository, only this Protocol
    - Every method is async because implementations do IO
    - get_by_id returns None for a missing entity (never raises for not-found)
    - Faults are raised as RepositoryError and propagate through the controller

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Generic over the entity type: one contract, implemented per entity
    - get_by_id takes str: typed ids such as UserId are str NewTypes
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

from user_api.core.errors import RepositoryError

__all__ = ["ApplicationRepository", "RepositoryError", "UserLike"]

E = TypeVar("E")


class UserLike(Protocol):
    """Structural contract for user objects checked by core/enforce_user.

    Avoids coupling the pure checks to the pydantic schema while giving mypy
    real type information (unlike Any).
    """
    id: str | None
    first_name: str | None
    last_name: str | None


class ApplicationRepository(Protocol[E]):
    """Contract for single-entity persistence, implemented outside this package.

    Implementations raise RepositoryError for IO faults; a missing entity is
    a None from get_by_id, never an exception.
    """
    async def get_by_id(self, entity_id: str) -> E | None: ...
    async def get_all(self) -> Sequence[E]: ...
    async def add(self, entity: E) -> E: ...
    async def update(self, entity: E) -> E: ...
    async def delete(self, entity: E) -> None: ...
