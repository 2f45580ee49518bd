"""Tagged outcome of a service operation."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from src.ecom.core.exceptions import InvalidRequestError, NotFoundError

T = TypeVar("T")


class ResultKind(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"


class ServiceResult(BaseModel, Generic[T]):
    """Outcome of a service call that may miss or be rejected.

    Not-found and rejected requests are reported as values, never raised, so
    callers branch on ``kind`` (or ``ok``). Use :meth:`unwrap` to turn a
    failure into a :class:`~src.ecom.core.exceptions.EcomError`.
    """

    kind: ResultKind = Field(description="Outcome of the operation")
    value: T | None = Field(default=None, description="Payload when the call succeeded")
    message: str | None = Field(default=None, description="Reason for a failed call")

    @classmethod
    def success(cls, value: T | None = None) -> "ServiceResult[T]":
        return cls(kind=ResultKind.OK, value=value)

    @classmethod
    def not_found(cls, message: str) -> "ServiceResult[T]":
        return cls(kind=ResultKind.NOT_FOUND, message=message)

    @classmethod
    def invalid(cls, message: str) -> "ServiceResult[T]":
        return cls(kind=ResultKind.INVALID, message=message)

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.OK

    @property
    def is_not_found(self) -> bool:
        return self.kind is ResultKind.NOT_FOUND

    @property
    def is_invalid(self) -> bool:
        return self.kind is ResultKind.INVALID

    def unwrap(self) -> T | None:
        """Return the value, raising if the call did not succeed."""
        if self.kind is ResultKind.NOT_FOUND:
            raise NotFoundError(self.message or "Not found")
        if self.kind is ResultKind.INVALID:
            raise InvalidRequestError(self.message or "Invalid request")
        return self.value
