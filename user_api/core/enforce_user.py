"""User Presence Enforcement — validates required fields before persistence.

Invariants:
    - Checks are PURE: return an error descriptor or None, never raise
    - Only presence is checked: no format, length or uniqueness rules
    - A value is present when it is not None and not blank after strip()
    - Update checks the identifier before the names

Design Decisions:
    - Error descriptor as dict (status/error_code/missing/message): the controller
      logs it and maps any descriptor to the 404 envelope
    - Typed against UserLike, not the pydantic schema: core never imports schemas/
"""

from user_api.core.repository_protocols import UserLike


REQUIRED_NAME_FIELDS: tuple[str, ...] = ("first_name", "last_name")


def is_present(value: str | None) -> bool:
    """Presence rule shared by every check."""
    return value is not None and bool(value.strip())


def _missing_names(user: UserLike) -> list[str]:
    return [name for name in REQUIRED_NAME_FIELDS if not is_present(getattr(user, name))]


def validate_user_creation(user: UserLike) -> dict | None:
    """New users need a first and last name. The id is assigned by the store."""
    missing = _missing_names(user)
    if missing:
        return {
            "status": "error",
            "error_code": "MISSING_REQUIRED_FIELDS",
            "missing": missing,
            "message": f"ERROR: User is missing required field(s): {', '.join(missing)}.",
        }
    return None


def validate_user_update(user: UserLike) -> dict | None:
    """Updates need the identifier and both names."""
    if not is_present(user.id):
        return {
            "status": "error",
            "error_code": "MISSING_USER_ID",
            "missing": ["id"],
            "message": "ERROR: User update requires an id.",
        }
    return validate_user_creation(user)
