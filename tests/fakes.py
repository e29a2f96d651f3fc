"""Fake Collaborators — hand-written repository double for controller tests.

Invariants:
    - FakeUserRepository records every call in `log` as {"method", "args"}
    - Results are served from plain attributes set by the test (no magic)
    - add/update return the configured entity, or echo the input when unset
    - get_all serves `listing` (any Sequence) when set, else the stored users
    - `fail_with` makes every method raise that exception after logging the call

Design Decisions:
    - Flat fake over unittest.mock: explicit, easy to debug, structurally
      satisfies ApplicationRepository[AppUser]
"""

from collections.abc import Sequence

from user_api.schemas.user import AppUser

CONTROLLER_LOGGER = "tests.user_controller"


class FakeUserRepository:
    """In-memory stand-in for ApplicationRepository[AppUser]."""

    def __init__(self, users: dict[str, AppUser] | None = None):
        self.users: dict[str, AppUser] = dict(users or {})
        self.listing: Sequence[AppUser] | None = None
        self.added: AppUser | None = None
        self.updated: AppUser | None = None
        self.fail_with: Exception | None = None
        self.log: list[dict] = []

    def calls(self, method: str) -> list[tuple]:
        return [c["args"] for c in self.log if c["method"] == method]

    def _record(self, method: str, *args) -> None:
        self.log.append({"method": method, "args": args})
        if self.fail_with is not None:
            raise self.fail_with

    async def get_by_id(self, entity_id: str) -> AppUser | None:
        self._record("get_by_id", entity_id)
        return self.users.get(entity_id)

    async def get_all(self) -> Sequence[AppUser]:
        self._record("get_all")
        if self.listing is not None:
            return self.listing
        return list(self.users.values())

    async def add(self, entity: AppUser) -> AppUser:
        self._record("add", entity)
        return self.added if self.added is not None else entity

    async def update(self, entity: AppUser) -> AppUser:
        self._record("update", entity)
        return self.updated if self.updated is not None else entity

    async def delete(self, entity: AppUser) -> None:
        self._record("delete", entity)
