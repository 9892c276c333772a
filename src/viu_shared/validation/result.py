"""ValidationResult and ValidationIssue: the validation contract's outputs.

INVARIANT: exactly one branch of a ValidationResult is populated.
``ok=True`` carries the validated value and no errors; ``ok=False``
carries at least one issue.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class IssueCode:
    """Machine-readable issue codes."""

    INVALID_TYPE = "invalid_type"
    REQUIRED = "required"
    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    INVALID_STRING = "invalid_string"
    INVALID_DATE = "invalid_date"
    INVALID_ENUM = "invalid_enum"
    NOT_INTEGER = "not_integer"
    NOT_UNIQUE = "not_unique"
    UNRECOGNIZED_KEY = "unrecognized_key"
    CUSTOM = "custom"


class ValidationIssue(BaseModel):
    """One violated constraint.

    Attributes:
        path: Dot-notation location of the offending value (``""`` for the root).
        message: Human-readable, pt-BR message.
        code: One of the :class:`IssueCode` values.
    """

    model_config = {"frozen": True}

    path: str = ""
    message: str
    code: str = IssueCode.CUSTOM


class ValidationResult(BaseModel):
    """Discriminated outcome of a safe validation call."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: bool
    value: Any = None
    errors: list[ValidationIssue] = Field(default_factory=list)

    @model_validator(mode="after")
    def _one_branch(self) -> Self:
        if self.ok and self.errors:
            raise ValueError("a successful result cannot carry errors")
        if not self.ok and not self.errors:
            raise ValueError("a failed result must carry at least one error")
        if not self.ok and self.value is not None:
            raise ValueError("a failed result cannot carry a value")
        return self

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, errors: list[ValidationIssue]) -> ValidationResult:
        return cls(ok=False, errors=list(errors))


class SchemaValidationError(ValueError):
    """Raised by the strict validation variants; carries every issue found."""

    def __init__(self, errors: list[ValidationIssue]) -> None:
        self.errors: tuple[ValidationIssue, ...] = tuple(errors)
        summary = "; ".join(
            f"{issue.path}: {issue.message}" if issue.path else issue.message for issue in self.errors
        )
        super().__init__(f"{len(self.errors)} validation error(s): {summary}")

    def to_result(self) -> ValidationResult:
        return ValidationResult.failure(list(self.errors))


class AsyncRefinementError(RuntimeError):
    """A coroutine refinement was reached from a synchronous validation call."""
