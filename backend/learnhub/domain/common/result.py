"""Result<T> pattern — domain and application code return this for expected failures."""
from __future__ import annotations
from typing import TypeVar, Generic, Optional

T = TypeVar("T")

INVALID = "invalid"
NOT_FOUND = "not_found"


class Result(Generic[T]):
    def __init__(
        self,
        is_success: bool,
        value: Optional[T] = None,
        error: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        self.is_success = is_success
        self.value = value
        self.error = error
        self.error_code = error_code

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def fail(cls, error: str, error_code: str = INVALID) -> "Result[T]":
        return cls(is_success=False, error=error, error_code=error_code)

    @classmethod
    def not_found(cls, error: str) -> "Result[T]":
        return cls(is_success=False, error=error, error_code=NOT_FOUND)

    @property
    def is_not_found(self) -> bool:
        return self.error_code == NOT_FOUND

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.ok({self.value!r})"
        return f"Result.fail({self.error!r}, {self.error_code!r})"
