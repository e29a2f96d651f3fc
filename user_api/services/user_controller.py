"""User Controller — CRUD over an injected repository, wrapped in ApiResult envelopes.

Invariants:
    - Every operation returns an ApiResult; not-found and invalid input are
      envelopes (success=False, 404, data=None), never exceptions
    - Invalid input never reaches the repository
    - delete_user returns the entity as it was before deletion
    - Repository faults propagate untouched (no catch, no retry)
    - No mutable state besides the two injected collaborators

Design Decisions:
    - Invalid input and missing resources share 404: existing API convention kept as-is
    - Empty get_all is a 404, not an empty success: existing API convention kept as-is
    - Logger is a side-channel only: it never influences the envelope
"""

import logging

from user_api.core.domain_types import ResultStatus, UserId
from user_api.core.enforce_user import validate_user_creation, validate_user_update
from user_api.core.repository_protocols import ApplicationRepository
from user_api.schemas.result import ApiResult
from user_api.schemas.user import AppUser

logger = logging.getLogger(__name__)


class UserController:
    """Fetch, list, create, update and delete users."""

    def __init__(
        self,
        repository: ApplicationRepository[AppUser],
        log: logging.Logger | None = None,
    ):
        self.repository = repository
        self.logger = log or logger

    async def get_one(self, user_id: UserId) -> ApiResult[AppUser]:
        """Fetch a single user by id."""
        user = await self.repository.get_by_id(user_id)
        if user is None:
            self._not_found("get_one", user_id, f"User '{user_id}' not found")
            return ApiResult[AppUser].not_found()
        self._ok("get_one", user_id, f"Fetched user '{user_id}'")
        return ApiResult[AppUser].ok(user)

    async def get_all(self) -> ApiResult[list[AppUser]]:
        """List every user. An empty store is reported as not found."""
        users = list(await self.repository.get_all())
        if not users:
            self._not_found("get_all", None, "No users found")
            return ApiResult[list[AppUser]].not_found()
        self._ok("get_all", None, f"Fetched {len(users)} user(s)")
        return ApiResult[list[AppUser]].ok(users)

    async def add_user(self, user: AppUser) -> ApiResult[AppUser]:
        """Create a user that has both names set."""
        error = validate_user_creation(user)
        if error:
            self._rejected("add_user", user.id, error)
            return ApiResult[AppUser].not_found()
        created = await self.repository.add(user)
        self._ok("add_user", created.id, "Created user")
        return ApiResult[AppUser].ok(created)

    async def update_user(self, user: AppUser) -> ApiResult[AppUser]:
        """Update a user that has an id and both names set."""
        error = validate_user_update(user)
        if error:
            self._rejected("update_user", user.id, error)
            return ApiResult[AppUser].not_found()
        updated = await self.repository.update(user)
        self._ok("update_user", user.id, f"Updated user '{user.id}'")
        return ApiResult[AppUser].ok(updated)

    async def delete_user(self, user_id: UserId) -> ApiResult[AppUser]:
        """Delete a user by id and return it as it was before deletion."""
        user = await self.repository.get_by_id(user_id)
        if user is None:
            self._not_found("delete_user", user_id, f"User '{user_id}' not found")
            return ApiResult[AppUser].not_found()
        await self.repository.delete(user)
        self._ok("delete_user", user_id, f"Deleted user '{user_id}'")
        return ApiResult[AppUser].ok(user)

    # ─── Logging helpers ────────────────────────────────────────

    def _ok(self, operation: str, user_id: str | None, message: str) -> None:
        self.logger.info(message, extra={
            "operation": operation, "user_id": user_id,
            "status_code": ResultStatus.OK.value,
        })

    def _not_found(self, operation: str, user_id: str | None, message: str) -> None:
        self.logger.warning(message, extra={
            "operation": operation, "user_id": user_id,
            "status_code": ResultStatus.NOT_FOUND.value,
        })

    def _rejected(self, operation: str, user_id: str | None, error: dict) -> None:
        self.logger.warning(error["message"], extra={
            "operation": operation, "user_id": user_id,
            "status_code": ResultStatus.NOT_FOUND.value,
            "error_code": error["error_code"],
        })
