"""Schema interpreter: one walker, a synchronous and an asynchronous driver.

The walker (:func:`_walk`) is a generator. Whenever it needs a refinement
evaluated it yields a :class:`_Pending` request and receives the
predicate's answer back through ``send()``. The two drivers differ only in
what they do with an awaitable answer:

- :func:`_run_sync` refuses it (:class:`AsyncRefinementError`).
- :func:`_run_async` awaits it.

So both variants share a single traversal and therefore the same ordering
and aggregation rules: every field is checked, issues are collected across
the whole input, and a value that fails its own type check is not also
checked against its bounds.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Generator
from dataclasses import dataclass
from typing import Any

from viu_shared.validation.result import (
    AsyncRefinementError,
    IssueCode,
    SchemaValidationError,
    ValidationIssue,
    ValidationResult,
)
from viu_shared.validation.schema import (
    MISSING,
    ArraySchema,
    ObjectSchema,
    Path,
    RecordSchema,
    Refinement,
    RefinementOutcome,
    Schema,
    TypeMismatch,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Pending:
    """A refinement call the driver must perform."""

    refinement: Refinement
    value: Any


_Walk = Generator[_Pending, Any, Any]


def dotted(path: Path) -> str:
    """Render a path tuple in dot notation: ``("items", 0, "nome")`` -> ``items.0.nome``."""
    return ".".join(str(p) for p in path)


def _issue(path: Path, message: str, code: str) -> ValidationIssue:
    return ValidationIssue(path=dotted(path), message=message, code=code)


def _walk(schema: Schema, value: Any, path: Path, issues: list[ValidationIssue]) -> _Walk:
    """Validate *value* against *schema*, appending to *issues*.

    Returns the normalized value, or ``MISSING`` when the value failed or
    was an absent optional key.
    """
    if value is not MISSING:
        for fn in schema.preprocessors:
            value = fn(value)

    if value is MISSING or value is None:
        if schema.has_default:
            value = schema.make_default()
        elif schema.is_optional:
            return value
        else:
            issues.append(_issue(path, schema.required_message, IssueCode.REQUIRED))
            return MISSING

    try:
        value = schema.coerce(value)
    except TypeMismatch as exc:
        issues.append(_issue(path, exc.message, exc.code))
        return MISSING

    start = len(issues)
    value = schema.normalize(value)
    for check in schema.checks:
        if not check.after_children and not check.test(value):
            issues.append(_issue(path, check.message, check.code))
    children_start = len(issues)

    if isinstance(schema, ObjectSchema):
        value = yield from _walk_object(schema, value, path, issues)
    elif isinstance(schema, ArraySchema):
        items = []
        for index, item in enumerate(value):
            items.append((yield from _walk(schema.item, item, (*path, index), issues)))
        value = items
    elif isinstance(schema, RecordSchema):
        entries = {}
        for key, item in value.items():
            entries[key] = yield from _walk(schema.values, item, (*path, key), issues)
        value = entries

    if len(issues) == children_start:
        for check in schema.checks:
            if check.after_children and not check.test(value):
                issues.append(_issue(path, check.message, check.code))

    if len(issues) > start:
        return MISSING

    for refinement in schema.refinements:
        outcome = yield _Pending(refinement, value)
        failure = _refinement_issue(refinement, outcome, path)
        if failure is not None:
            issues.append(failure)

    if len(issues) > start:
        return MISSING

    for fn in schema.transforms:
        value = fn(value)
    return value


def _walk_object(schema: ObjectSchema, value: Any, path: Path, issues: list[ValidationIssue]) -> _Walk:
    result: dict[str, Any] = {}
    for name, field_schema in schema.fields.items():
        out = yield from _walk(field_schema, value.get(name, MISSING), (*path, name), issues)
        if out is not MISSING:
            result[name] = out

    for key in value:
        if key in schema.fields:
            continue
        if schema.extra == "allow":
            result[key] = value[key]
        elif schema.extra == "forbid":
            issues.append(_issue((*path, key), "Campo não permitido", IssueCode.UNRECOGNIZED_KEY))
    return result


def _refinement_issue(refinement: Refinement, outcome: Any, path: Path) -> ValidationIssue | None:
    if isinstance(outcome, RefinementOutcome):
        if outcome.valid:
            return None
        rel = outcome.path if outcome.path is not None else refinement.path
        return _issue((*path, *rel), outcome.message or refinement.message, IssueCode.CUSTOM)
    if outcome:
        return None
    return _issue((*path, *refinement.path), refinement.message, IssueCode.CUSTOM)


def _finish(value: Any, issues: list[ValidationIssue], *, mode: str) -> ValidationResult:
    if issues:
        logger.debug("%s validation failed with %d issue(s)", mode, len(issues))
        return ValidationResult.failure(issues)
    return ValidationResult.success(None if value is MISSING else value)


def _run_sync(schema: Schema, data: Any) -> ValidationResult:
    issues: list[ValidationIssue] = []
    walker = _walk(schema, data, (), issues)
    try:
        pending = next(walker)
        while True:
            outcome = pending.refinement.predicate(pending.value)
            if inspect.isawaitable(outcome):
                if inspect.iscoroutine(outcome):
                    outcome.close()
                walker.close()
                msg = "Asynchronous refinement reached during synchronous validation; use validate_async"
                raise AsyncRefinementError(msg)
            pending = walker.send(outcome)
    except StopIteration as stop:
        return _finish(stop.value, issues, mode="sync")


async def _run_async(schema: Schema, data: Any) -> ValidationResult:
    issues: list[ValidationIssue] = []
    walker = _walk(schema, data, (), issues)
    try:
        pending = next(walker)
        while True:
            outcome = pending.refinement.predicate(pending.value)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            pending = walker.send(outcome)
    except StopIteration as stop:
        return _finish(stop.value, issues, mode="async")


# --- Public API ---


def safe_validate(schema: Schema, data: Any) -> ValidationResult:
    """Validate *data*; always return a :class:`ValidationResult`, never raise on bad data."""
    return _run_sync(schema, data)


async def safe_validate_async(schema: Schema, data: Any) -> ValidationResult:
    """Async :func:`safe_validate`; awaits coroutine refinements."""
    return await _run_async(schema, data)


def validate(schema: Schema, data: Any) -> Any:
    """Return the validated value or raise :class:`SchemaValidationError`."""
    result = _run_sync(schema, data)
    if not result.ok:
        raise SchemaValidationError(result.errors)
    return result.value


async def validate_async(schema: Schema, data: Any) -> Any:
    """Async :func:`validate`."""
    result = await _run_async(schema, data)
    if not result.ok:
        raise SchemaValidationError(result.errors)
    return result.value
