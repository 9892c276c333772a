"""Immutable schema descriptors with a chainable builder API.

Every constraint-adding call returns a *new* descriptor; nothing is
mutated in place, so a base schema can be shared and specialised freely::

    NAME = StringSchema().trim().min_length(2).max_length(100)
    SIGNUP = ObjectSchema({"nome": NAME, "email": StringSchema().trim().lower().email()})

Descriptors carry no evaluation logic beyond the per-kind type check
(:meth:`Schema.coerce`). A single interpreter in
:mod:`viu_shared.validation.engine` walks them.

Per-value evaluation order (see the engine):

1. ``preprocess`` functions on the raw input.
2. Missing / ``None`` handling (``default``, ``optional`` or a
   ``required`` issue).
3. Type check: a mismatch short-circuits the value.
4. Normalizers (string ``trim``/``lower``/``upper``).
5. Constraint checks: all of them, every failure collected.
6. Children (array items, object fields, record values), then any check
   over the walked children (``unique_items``) when they all passed.
7. Refinements, only when steps 3-6 produced no issue.
8. ``transform`` functions, only when the value is clean.
"""

from __future__ import annotations

import copy
import dataclasses
import ipaddress
import math
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time
from typing import Any, ClassVar, Literal, Self

from viu_shared.validation.predicates import (
    EMAIL_PATTERN,
    UUID_PATTERN,
    is_valid_url,
    parse_iso_datetime,
)
from viu_shared.validation.result import IssueCode


class _Missing:
    """Marker for an absent object key (distinct from an explicit ``None``)."""

    _instance: ClassVar[_Missing | None] = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

Path = tuple[str | int, ...]
ExtraMode = Literal["ignore", "allow", "forbid"]


class TypeMismatch(Exception):
    """Raised by :meth:`Schema.coerce` when the input has the wrong kind."""

    def __init__(self, message: str, code: str = IssueCode.INVALID_TYPE) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


@dataclass(frozen=True)
class Check:
    """A synchronous constraint over an already type-checked value."""

    test: Callable[[Any], bool]
    message: str
    code: str
    # Runs on the walked children (normalized items) instead of the raw value.
    after_children: bool = False


@dataclass(frozen=True)
class RefinementOutcome:
    """Rich refinement answer: lets a predicate pick its own message and path."""

    valid: bool
    message: str | None = None
    path: str | Path | None = None

    def __post_init__(self) -> None:
        if self.path is not None:
            object.__setattr__(self, "path", _as_path(self.path))


@dataclass(frozen=True)
class Refinement:
    """A predicate over the whole (structurally valid) value.

    The predicate may return ``bool``, a :class:`RefinementOutcome`, or an
    awaitable of either. ``path`` is relative to the schema the refinement
    is attached to, so an object-level rule can blame a single field.
    """

    predicate: Callable[[Any], Any]
    message: str
    path: Path = ()


def _as_path(path: str | Path | Iterable[str | int]) -> Path:
    if isinstance(path, str):
        return tuple(p for p in path.split(".") if p)
    return tuple(path)


@dataclass(frozen=True, kw_only=True)
class Schema:
    """Base descriptor. Accepts any value unless a subclass narrows :meth:`coerce`."""

    kind: ClassVar[str] = "any"
    default_type_message: ClassVar[str] = "Valor inválido"

    preprocessors: tuple[Callable[[Any], Any], ...] = ()
    checks: tuple[Check, ...] = ()
    refinements: tuple[Refinement, ...] = ()
    transforms: tuple[Callable[[Any], Any], ...] = ()
    is_optional: bool = False
    default_value: Any = MISSING
    required_message: str = "Campo obrigatório"
    type_message: str | None = None
    description: str | None = None

    # --- evaluation hooks used by the engine ---

    def coerce(self, value: Any) -> Any:
        """Return *value* as this schema's kind, or raise :class:`TypeMismatch`."""
        return value

    def normalize(self, value: Any) -> Any:
        return value

    def make_default(self) -> Any:
        """Return a fresh copy of the declared default (mutable defaults are not shared)."""
        return copy.deepcopy(self.default_value)

    @property
    def has_default(self) -> bool:
        return self.default_value is not MISSING

    def _type_error(self) -> TypeMismatch:
        return TypeMismatch(self.type_message or self.default_type_message)

    # --- builder helpers ---

    def _replace(self, **changes: Any) -> Self:
        return dataclasses.replace(self, **changes)

    def _check(
        self, test: Callable[[Any], bool], message: str, code: str, *, after_children: bool = False
    ) -> Self:
        return self._replace(checks=(*self.checks, Check(test, message, code, after_children)))

    # --- modifiers shared by every kind ---

    def optional(self) -> Self:
        """Accept a missing key or ``None``."""
        return self._replace(is_optional=True)

    def required(self, message: str | None = None) -> Self:
        return self._replace(is_optional=False, required_message=message or self.required_message)

    def default(self, value: Any) -> Self:
        """Substitute *value* for a missing key or ``None``; the default is validated too.

        A default wins over :meth:`optional` regardless of call order, so
        ``TAGS.optional()`` on a defaulted ``TAGS`` still yields the default
        for a missing key rather than omitting it.
        """
        return self._replace(default_value=value)

    def refine(
        self,
        predicate: Callable[[Any], Any],
        message: str = "Valor inválido",
        *,
        path: str | Path = (),
    ) -> Self:
        return self._replace(
            refinements=(*self.refinements, Refinement(predicate, message, _as_path(path)))
        )

    def transform(self, fn: Callable[[Any], Any]) -> Self:
        return self._replace(transforms=(*self.transforms, fn))

    def preprocess(self, fn: Callable[[Any], Any]) -> Self:
        return self._replace(preprocessors=(*self.preprocessors, fn))

    def describe(self, text: str) -> Self:
        return self._replace(description=text)


@dataclass(frozen=True, kw_only=True)
class AnySchema(Schema):
    """Accepts every value (the ``unknown`` of record payloads)."""


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True, kw_only=True)
class StringSchema(Schema):
    kind: ClassVar[str] = "string"
    default_type_message: ClassVar[str] = "Esperado texto"

    normalizers: tuple[Callable[[str], str], ...] = ()

    def coerce(self, value: Any) -> str:
        if not isinstance(value, str):
            raise self._type_error()
        return value

    def normalize(self, value: str) -> str:
        for fn in self.normalizers:
            value = fn(value)
        return value

    # --- normalizers ---

    def trim(self) -> Self:
        return self._replace(normalizers=(*self.normalizers, str.strip))

    def lower(self) -> Self:
        return self._replace(normalizers=(*self.normalizers, str.lower))

    def upper(self) -> Self:
        return self._replace(normalizers=(*self.normalizers, str.upper))

    # --- constraints ---

    def min_length(self, n: int, message: str | None = None) -> Self:
        return self._check(
            lambda v: len(v) >= n,
            message or f"Deve ter pelo menos {n} caracteres",
            IssueCode.TOO_SMALL,
        )

    def max_length(self, n: int, message: str | None = None) -> Self:
        return self._check(
            lambda v: len(v) <= n,
            message or f"Deve ter no máximo {n} caracteres",
            IssueCode.TOO_BIG,
        )

    def length(self, n: int, message: str | None = None) -> Self:
        return self._check(
            lambda v: len(v) == n,
            message or f"Deve ter exatamente {n} caracteres",
            IssueCode.INVALID_STRING,
        )

    def nonempty(self, message: str | None = None) -> Self:
        return self.min_length(1, message or "Não pode estar vazio")

    def regex(self, pattern: str | re.Pattern[str], message: str | None = None) -> Self:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self._check(
            lambda v: compiled.search(v) is not None,
            message or "Formato inválido",
            IssueCode.INVALID_STRING,
        )

    def email(self, message: str | None = None) -> Self:
        return self._check(
            lambda v: EMAIL_PATTERN.match(v) is not None,
            message or "Email inválido",
            IssueCode.INVALID_STRING,
        )

    def url(self, message: str | None = None) -> Self:
        return self._check(is_valid_url, message or "URL inválida", IssueCode.INVALID_STRING)

    def uuid(self, message: str | None = None) -> Self:
        return self._check(
            lambda v: UUID_PATTERN.match(v) is not None,
            message or "UUID inválido",
            IssueCode.INVALID_STRING,
        )

    def datetime(self, message: str | None = None) -> Self:
        """Require a full ISO 8601 date-time (date *and* time parts)."""
        return self._check(
            lambda v: "T" in v.upper() and parse_iso_datetime(v) is not None,
            message or "Data/hora inválida",
            IssueCode.INVALID_STRING,
        )

    def ip(self, message: str | None = None) -> Self:
        def _is_ip(v: str) -> bool:
            try:
                ipaddress.ip_address(v)
            except ValueError:
                return False
            return True

        return self._check(_is_ip, message or "Endereço IP inválido", IssueCode.INVALID_STRING)


@dataclass(frozen=True, kw_only=True)
class NumberSchema(Schema):
    """Finite ``int``/``float``. ``bool`` is rejected even though it subclasses ``int``."""

    kind: ClassVar[str] = "number"
    default_type_message: ClassVar[str] = "Esperado número"

    def coerce(self, value: Any) -> int | float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self._type_error()
        if isinstance(value, float) and not math.isfinite(value):
            raise TypeMismatch(self.type_message or "Número inválido")
        return value

    def min(self, n: float, message: str | None = None) -> Self:
        return self._check(
            lambda v: v >= n, message or f"Deve ser maior ou igual a {n}", IssueCode.TOO_SMALL
        )

    def max(self, n: float, message: str | None = None) -> Self:
        return self._check(
            lambda v: v <= n, message or f"Deve ser menor ou igual a {n}", IssueCode.TOO_BIG
        )

    def gt(self, n: float, message: str | None = None) -> Self:
        return self._check(lambda v: v > n, message or f"Deve ser maior que {n}", IssueCode.TOO_SMALL)

    def lt(self, n: float, message: str | None = None) -> Self:
        return self._check(lambda v: v < n, message or f"Deve ser menor que {n}", IssueCode.TOO_BIG)

    def positive(self, message: str | None = None) -> Self:
        return self.gt(0, message or "Deve ser positivo")

    def nonnegative(self, message: str | None = None) -> Self:
        return self.min(0, message or "Não pode ser negativo")

    def int_(self, message: str | None = None) -> Self:
        return self._check(
            lambda v: isinstance(v, int) or float(v).is_integer(),
            message or "Deve ser um número inteiro",
            IssueCode.NOT_INTEGER,
        )


@dataclass(frozen=True, kw_only=True)
class BooleanSchema(Schema):
    kind: ClassVar[str] = "boolean"
    default_type_message: ClassVar[str] = "Esperado verdadeiro ou falso"

    def coerce(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise self._type_error()
        return value


@dataclass(frozen=True, kw_only=True)
class DateSchema(Schema):
    """Accepts ``date``/``datetime`` objects or ISO 8601 strings; yields aware datetimes.

    Naive inputs are taken as UTC so validated values always compare safely.
    """

    kind: ClassVar[str] = "date"
    default_type_message: ClassVar[str] = "Data inválida"

    def coerce(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            parsed: datetime | None = value
        elif isinstance(value, date):
            parsed = datetime.combine(value, time())
        elif isinstance(value, str):
            parsed = parse_iso_datetime(value)
        else:
            parsed = None
        if parsed is None:
            raise TypeMismatch(self.type_message or self.default_type_message, IssueCode.INVALID_DATE)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed

    def min(self, bound: datetime, message: str | None = None) -> Self:
        floor = self.coerce(bound)
        return self._check(
            lambda v: v >= floor,
            message or f"Data deve ser a partir de {floor.date().isoformat()}",
            IssueCode.TOO_SMALL,
        )

    def max(self, bound: datetime, message: str | None = None) -> Self:
        ceiling = self.coerce(bound)
        return self._check(
            lambda v: v <= ceiling,
            message or f"Data deve ser até {ceiling.date().isoformat()}",
            IssueCode.TOO_BIG,
        )


@dataclass(frozen=True)
class EnumSchema(Schema):
    """Membership in a fixed value set.

    The matching *declared* member is returned, so a plain ``"ALTA"`` input
    comes back as ``Priority.ALTA`` when the set was declared from the enum.
    """

    kind: ClassVar[str] = "enum"

    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def coerce(self, value: Any) -> Any:
        for member in self.values:
            if isinstance(member, bool) != isinstance(value, bool):
                continue
            if member == value:
                return member
        expected = ", ".join(str(v) for v in self.values)
        raise TypeMismatch(
            self.type_message or f"Valor inválido. Esperado: {expected}", IssueCode.INVALID_ENUM
        )


# ---------------------------------------------------------------------------
# Composites
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ArraySchema(Schema):
    kind: ClassVar[str] = "array"
    default_type_message: ClassVar[str] = "Esperada uma lista"

    item: Schema = field(default_factory=AnySchema)

    def coerce(self, value: Any) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            raise self._type_error()
        return list(value)

    def min_items(self, n: int, message: str | None = None) -> Self:
        return self._check(
            lambda v: len(v) >= n, message or f"Deve ter pelo menos {n} itens", IssueCode.TOO_SMALL
        )

    def max_items(self, n: int, message: str | None = None) -> Self:
        return self._check(
            lambda v: len(v) <= n, message or f"Deve ter no máximo {n} itens", IssueCode.TOO_BIG
        )

    def unique_items(self, message: str | None = None) -> Self:
        """Reject repeated items, compared after each item is normalized."""

        def _unique(v: list[Any]) -> bool:
            seen: list[Any] = []
            for item in v:
                if item in seen:
                    return False
                seen.append(item)
            return True

        return self._check(
            _unique, message or "Itens duplicados", IssueCode.NOT_UNIQUE, after_children=True
        )


@dataclass(frozen=True)
class RecordSchema(Schema):
    """A ``str``-keyed mapping whose values all follow one schema."""

    kind: ClassVar[str] = "record"
    default_type_message: ClassVar[str] = "Esperado um objeto"

    values: Schema = field(default_factory=AnySchema)

    def coerce(self, value: Any) -> dict[str, Any]:
        if not isinstance(value, Mapping) or not all(isinstance(k, str) for k in value):
            raise self._type_error()
        return dict(value)


@dataclass(frozen=True)
class ObjectSchema(Schema):
    """A mapping with a declared set of fields.

    Unknown keys are dropped (``extra="ignore"``), copied through
    (``"allow"``), or reported (``"forbid"``).
    """

    kind: ClassVar[str] = "object"
    default_type_message: ClassVar[str] = "Esperado um objeto"

    fields: Mapping[str, Schema] = field(default_factory=dict)
    extra: ExtraMode = field(default="ignore", kw_only=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", dict(self.fields))

    def coerce(self, value: Any) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise self._type_error()
        return value

    @property
    def shape(self) -> dict[str, Schema]:
        return dict(self.fields)

    def extend(self, fields: Mapping[str, Schema]) -> Self:
        return self._replace(fields={**self.fields, **fields})

    def pick(self, *names: str) -> Self:
        return self._replace(fields={k: v for k, v in self.fields.items() if k in names})

    def omit(self, *names: str) -> Self:
        return self._replace(fields={k: v for k, v in self.fields.items() if k not in names})

    def partial(self) -> Self:
        """Make every field optional (update payloads)."""
        return self._replace(
            fields={k: v._replace(is_optional=True, default_value=MISSING) for k, v in self.fields.items()}
        )

    def strict(self) -> Self:
        return self._replace(extra="forbid")

    def passthrough(self) -> Self:
        return self._replace(extra="allow")
