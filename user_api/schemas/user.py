"""User Schema — the AppUser entity passed between caller, controller and repository.

Invariants:
    - id is None (or blank) until the store assigns one
    - Every field is optional: presence is checked by core/enforce_user, not here
    - AppUser() is a valid object that fails every presence check

Design Decisions:
    - No field constraints beyond types: deep validation is out of scope
    - from_attributes enabled: repositories may build users from ORM rows
"""

from pydantic import BaseModel, ConfigDict


class AppUser(BaseModel):
    """A user record as seen by the controller."""
    model_config = ConfigDict(from_attributes=True)

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    is_active: bool = False
