"""Outcome: the uniform return type of every travel service operation.

A success may carry no payload (delete), so callers branch on ``success``
and never on ``payload is None``.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

from core.errors import ErrorCode

T = TypeVar("T")


class Outcome(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    success: bool
    payload: T | None = None
    message: str | None = None
    detail: str | list[str] | None = None
    code: ErrorCode | None = None

    @model_validator(mode="after")
    def success_or_failure(self) -> "Outcome[T]":
        if self.success:
            if self.detail is not None or self.code is not None:
                raise ValueError("a successful outcome carries no error detail")
        else:
            if self.payload is not None:
                raise ValueError("a failed outcome carries no payload")
            if not self.message:
                raise ValueError("a failed outcome requires a message")
        return self

    @classmethod
    def ok(cls, payload: Any = None, message: str | None = None) -> "Outcome[Any]":
        return cls(success=True, payload=payload, message=message)

    @classmethod
    def fail(
        cls,
        message: str,
        detail: str | list[str] | None = None,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
    ) -> "Outcome[Any]":
        return cls(success=False, message=message, detail=detail, code=code)
