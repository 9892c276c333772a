"""Generic validation contract: schema descriptors, interpreter and results.

Typical use::

    from viu_shared.validation import ObjectSchema, StringSchema, safe_validate

    schema = ObjectSchema({"nome": StringSchema().min_length(2)})
    result = safe_validate(schema, payload)
    if not result.ok:
        return format_errors_for_display(result)
"""

from viu_shared.validation.engine import safe_validate, safe_validate_async, validate, validate_async
from viu_shared.validation.errors import extract_errors, format_errors_for_display
from viu_shared.validation.result import (
    AsyncRefinementError,
    IssueCode,
    SchemaValidationError,
    ValidationIssue,
    ValidationResult,
)
from viu_shared.validation.schema import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    DateSchema,
    EnumSchema,
    NumberSchema,
    ObjectSchema,
    RecordSchema,
    RefinementOutcome,
    Schema,
    StringSchema,
)

__all__ = [
    "AnySchema",
    "ArraySchema",
    "AsyncRefinementError",
    "BooleanSchema",
    "DateSchema",
    "EnumSchema",
    "IssueCode",
    "NumberSchema",
    "ObjectSchema",
    "RecordSchema",
    "RefinementOutcome",
    "Schema",
    "SchemaValidationError",
    "StringSchema",
    "ValidationIssue",
    "ValidationResult",
    "extract_errors",
    "format_errors_for_display",
    "safe_validate",
    "safe_validate_async",
    "validate",
    "validate_async",
]
