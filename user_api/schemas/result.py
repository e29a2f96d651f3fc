"""Result Envelope — the uniform {success, statusCode, data} shape of every operation.

Invariants:
    - success is True iff status_code == 200 iff data is not None
    - Inconsistent envelopes are rejected at construction (ValidationError)
    - Serialized with camelCase alias: statusCode

Design Decisions:
    - Generic model: ApiResult[AppUser] and ApiResult[list[AppUser]] share one contract
    - ok()/not_found() factories: callers never spell out the three fields by hand
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from user_api.core.domain_types import ResultStatus

T = TypeVar("T")


class ApiResult(BaseModel, Generic[T]):
    """Envelope returned by every controller operation."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    status_code: int = Field(alias="statusCode")
    data: T | None = None

    @model_validator(mode="after")
    def check_consistency(self) -> "ApiResult[T]":
        ok_status = self.status_code == ResultStatus.OK
        has_data = self.data is not None
        if not (self.success == ok_status == has_data):
            raise ValueError(
                "success, statusCode == 200 and data presence must agree "
                f"(got success={self.success}, statusCode={self.status_code}, "
                f"data={'set' if has_data else 'None'})"
            )
        return self

    @classmethod
    def ok(cls, data: T) -> "ApiResult[T]":
        return cls(success=True, status_code=ResultStatus.OK.value, data=data)

    @classmethod
    def not_found(cls) -> "ApiResult[T]":
        return cls(success=False, status_code=ResultStatus.NOT_FOUND.value, data=None)
