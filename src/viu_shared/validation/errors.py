"""Reshape validation failures for forms and API responses."""

from __future__ import annotations

from collections.abc import Iterable

from viu_shared.validation.result import SchemaValidationError, ValidationIssue, ValidationResult

Failure = ValidationResult | SchemaValidationError | Iterable[ValidationIssue]


def _issues_of(failure: Failure) -> list[ValidationIssue]:
    if isinstance(failure, ValidationResult):
        return list(failure.errors)
    if isinstance(failure, SchemaValidationError):
        return list(failure.errors)
    return list(failure)


def extract_errors(failure: Failure) -> dict[str, list[str]]:
    """Group messages by dot-notation path, preserving first-seen order.

    Examples:
        >>> extract_errors([ValidationIssue(path="nome", message="curto")])
        {'nome': ['curto']}
    """
    grouped: dict[str, list[str]] = {}
    for issue in _issues_of(failure):
        grouped.setdefault(issue.path, []).append(issue.message)
    return grouped


def format_errors_for_display(failure: Failure) -> list[str]:
    """One line per issue: ``"<path>: <message>"``, or just the message at the root."""
    return [
        f"{issue.path}: {issue.message}" if issue.path else issue.message
        for issue in _issues_of(failure)
    ]
