"""Structured faults for caller misuse of the functional containers.

Absence and tagged failure are data (see Opt and Result); nothing in the
combinator vocabulary raises. The exceptions here are reserved for the few
escape hatches that extract a plain value or materialize a stream and can
therefore be misused. Uses Pydantic for validation and serialization.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from functools import lru_cache
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class ErrorCode(StrEnum):
    """Machine-readable classification of faults and captured exceptions."""
    ABSENT_VALUE = "ABSENT_VALUE"
    UNWRAP_ERR = "UNWRAP_ERR"
    UNWRAP_OK = "UNWRAP_OK"
    STREAM_LIMIT = "STREAM_LIMIT"
    ARITHMETIC = "ARITHMETIC"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    LOOKUP = "LOOKUP"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    UNKNOWN = "UNKNOWN"


# Checked in order; first isinstance match wins
_EXCEPTION_CODES: tuple[tuple[type[BaseException], ErrorCode], ...] = (
    (ArithmeticError, ErrorCode.ARITHMETIC),
    (LookupError, ErrorCode.LOOKUP),
    (TypeError, ErrorCode.TYPE_MISMATCH),
    (ValueError, ErrorCode.INVALID_ARGUMENT),
)


@lru_cache(maxsize=128)
def _classify_type(exc_type: type[BaseException]) -> ErrorCode:
    for base, code in _EXCEPTION_CODES:
        if issubclass(exc_type, base):
            return code
    return ErrorCode.UNKNOWN


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map an exception to an error code by its type hierarchy."""
    if isinstance(exc, FaultException):
        return exc.fault.code
    return _classify_type(type(exc))


class Fault(BaseModel):
    """Structured description of a misuse fault.

    Attributes:
        code: Machine-readable error code
        message: Human-readable message
        operation: Name of the operation that was misused (e.g. "Opt.get")
        details: Optional detail text (e.g. a formatted traceback)
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        validate_default=True,
        json_schema_extra={
            "title": "Fault",
            "examples": [{
                "code": "ABSENT_VALUE",
                "message": "Called get() on Absent",
                "operation": "Opt.get",
            }],
        },
    )

    code: ErrorCode = Field(default=ErrorCode.UNKNOWN, description="Fault classification")
    message: Annotated[str, Field(min_length=1, description="Human-readable message")]
    operation: str = Field(default="", description="Operation that raised the fault")
    details: str | None = Field(default=None, description="Optional detail text")

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | Exception) -> str:
        """Accept Exception objects and extract message."""
        return (str(v) or type(v).__name__) if isinstance(v, Exception) else v

    @computed_field
    @property
    def is_misuse(self) -> bool:
        """Whether the fault stems from calling an extractor on the wrong variant or an unbounded stream."""
        return self.code in _MISUSE_CODES

    @classmethod
    def create(cls, code: ErrorCode, message: str, operation: str = "", *, details: str | None = None) -> Self:
        """Factory method for construction."""
        return cls(code=code, message=message, operation=operation, details=details)

    @classmethod
    def from_exception(cls, exc: Exception, operation: str = "", *, include_trace: bool = False) -> Self:
        """Create from exception with auto-classification."""
        return cls(
            code=classify_exception(exc),
            message=exc,  # type: ignore[arg-type]
            operation=operation,
            details="".join(traceback.format_exception(exc)) if include_trace else None,
        )

    def render(self) -> str:
        """Single-line rendering: [CODE] operation: message."""
        where = f" {self.operation}:" if self.operation else ""
        return f"[{self.code}]{where} {self.message}"

    __str__ = render


_MISUSE_CODES: frozenset[ErrorCode] = frozenset({
    ErrorCode.ABSENT_VALUE,
    ErrorCode.UNWRAP_ERR,
    ErrorCode.UNWRAP_OK,
    ErrorCode.STREAM_LIMIT,
})


class FaultException(RuntimeError):
    """Exception wrapping a Fault for raising."""

    __slots__ = ("fault",)

    def __init__(self, fault: Fault) -> None:
        self.fault = fault
        super().__init__(fault.render())

    @property
    def code(self) -> ErrorCode:
        return self.fault.code

    @classmethod
    def create(cls, code: ErrorCode, message: str, operation: str = "") -> Self:
        """Create fault exception."""
        return cls(Fault(code=code, message=message, operation=operation))
