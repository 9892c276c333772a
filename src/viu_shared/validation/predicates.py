"""Standalone boolean validators and sanitizers.

These are the building blocks the schema layer reuses (email, URL, UUID,
ISO dates) plus the business predicates the web and API clients call
directly. Malformed strings return ``False`` rather than raising.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime, timedelta
from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, Field

from viu_shared.domain.documents import only_digits
from viu_shared.domain.limits import COORDINATE_MAX, MONEY_MAX_CENTAVOS, TAG_MAX_LENGTH, TAGS_MAX_COUNT

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
TAG_PATTERN = re.compile(r"^[a-zA-Z0-9\-_]+$")
ALPHABETIC_PATTERN = re.compile(r"^[a-zA-ZÀ-ÿ\s]+$")
ALPHANUMERIC_PATTERN = re.compile(r"^[a-zA-Z0-9À-ÿ\s]+$")
NUMERIC_PATTERN = re.compile(r"^\d+$")

PROFANITY_WORDS: tuple[str, ...] = ("spam", "scam", "fake", "fraud")

# Password policy: the special-character set is the one the API accepts.
PASSWORD_SPECIALS = "@$!%*?&"
_COMMON_PASSWORD_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"123456"),
    re.compile(r"password", re.IGNORECASE),
    re.compile(r"qwerty", re.IGNORECASE),
    re.compile(r"abc123", re.IGNORECASE),
    re.compile(r"admin", re.IGNORECASE),
)


# --- Dates ---


def parse_iso_datetime(value: str) -> datetime | None:
    """Parse an ISO 8601 date or date-time, accepting a trailing ``Z``.

    Returns None instead of raising.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text[-1:] in ("z", "Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def is_valid_date(value: str | datetime) -> bool:
    if isinstance(value, datetime):
        return True
    return parse_iso_datetime(value) is not None


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def is_valid_deadline(deadline: str | datetime, *, now: datetime | None = None) -> bool:
    """A deadline must parse and lie strictly in the future."""
    parsed = deadline if isinstance(deadline, datetime) else parse_iso_datetime(deadline)
    if parsed is None:
        return False
    current = now or datetime.now(UTC)
    return _aware(parsed) > _aware(current)


# --- Contact ---


def is_valid_email(email: str) -> bool:
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


def is_valid_phone(phone: str) -> bool:
    """Landline (10 digits), mobile (11), or either with the +55 country code (13)."""
    digits = only_digits(phone)
    if len(digits) in (10, 11):
        return True
    return len(digits) == 13 and digits.startswith("55")


def is_valid_url(url: str) -> bool:
    """Absolute URL with a scheme and a host (``https://viu.com``, ``ftp://host/x``)."""
    if not isinstance(url, str) or any(ch.isspace() for ch in url):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme) and parsed.scheme.isascii() and bool(parsed.netloc)


# --- Data ---


def is_valid_uuid(value: str) -> bool:
    return isinstance(value, str) and UUID_PATTERN.match(value) is not None


def is_valid_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_positive_integer(value: Any) -> bool:
    return is_valid_number(value) and float(value).is_integer() and value > 0


def is_in_range(value: Any, minimum: float, maximum: float) -> bool:
    return is_valid_number(value) and minimum <= value <= maximum


# --- Text ---


def is_alphabetic(text: str) -> bool:
    return ALPHABETIC_PATTERN.match(text) is not None


def is_numeric(text: str) -> bool:
    return NUMERIC_PATTERN.match(text) is not None


def is_alphanumeric(text: str) -> bool:
    return ALPHANUMERIC_PATTERN.match(text) is not None


def is_valid_slug(slug: str) -> bool:
    return SLUG_PATTERN.match(slug) is not None


def contains_profanity(text: str) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in PROFANITY_WORDS)


# --- Business rules ---


def is_valid_budget(budget: Any) -> bool:
    """Budgets are positive amounts in centavos, capped at R$ 9.999.999,99."""
    return is_valid_number(budget) and 0 < budget <= MONEY_MAX_CENTAVOS


def is_valid_tag(tag: str) -> bool:
    return (
        1 <= len(tag) <= TAG_MAX_LENGTH
        and TAG_PATTERN.match(tag) is not None
        and not contains_profanity(tag)
    )


def is_valid_tag_array(tags: list[str]) -> bool:
    """At most 20 valid tags, no duplicates."""
    return len(tags) <= TAGS_MAX_COUNT and all(is_valid_tag(t) for t in tags) and len(set(tags)) == len(tags)


def is_valid_coordinate(x: Any, y: Any) -> bool:
    """Positional feedback pins live on a 0..10000 grid on both axes."""
    return is_in_range(x, 0, COORDINATE_MAX) and is_in_range(y, 0, COORDINATE_MAX)


# --- Passwords ---


class PasswordStrength(BaseModel):
    """Score 0-5 with the pt-BR hints the signup form displays."""

    model_config = {"frozen": True}

    score: int
    feedback: list[str] = Field(default_factory=list)
    is_valid: bool


def get_password_strength(password: str, *, min_score: int = 4) -> PasswordStrength:
    """Score *password* one point per satisfied rule, minus one for a common pattern."""
    feedback: list[str] = []
    score = 0

    rules: tuple[tuple[bool, str], ...] = (
        (len(password) >= 8, "Senha deve ter pelo menos 8 caracteres"),
        (re.search(r"[a-z]", password) is not None, "Adicione pelo menos uma letra minúscula"),
        (re.search(r"[A-Z]", password) is not None, "Adicione pelo menos uma letra maiúscula"),
        (re.search(r"\d", password) is not None, "Adicione pelo menos um número"),
        (
            any(ch in PASSWORD_SPECIALS for ch in password),
            f"Adicione pelo menos um caractere especial ({PASSWORD_SPECIALS})",
        ),
    )
    for passed, hint in rules:
        if passed:
            score += 1
        else:
            feedback.append(hint)

    if any(p.search(password) for p in _COMMON_PASSWORD_PATTERNS):
        feedback.append('Evite padrões comuns como "123456" ou "password"')
        score = max(0, score - 1)

    return PasswordStrength(score=score, feedback=feedback, is_valid=score >= min_score)


# --- Rate limiting ---


def is_rate_limited(
    attempts: int,
    max_attempts: int,
    window: timedelta,
    last_attempt: datetime,
    *,
    now: datetime | None = None,
) -> bool:
    """True while *attempts* within *window* of *last_attempt* reached *max_attempts*."""
    current = now or datetime.now(UTC)
    if _aware(current) - _aware(last_attempt) > window:
        return False
    return attempts >= max_attempts


# --- Sanitizers ---

_SCRIPT_TAG = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_IFRAME_TAG = re.compile(r"<iframe\b[^<]*(?:(?!</iframe>)<[^<]*)*</iframe>", re.IGNORECASE)
_JS_PROTOCOL = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"on\w+\s*=", re.IGNORECASE)


def sanitize_html(html: str) -> str:
    """Strip script/iframe blocks, ``javascript:`` URLs and inline event handlers."""
    html = _SCRIPT_TAG.sub("", html)
    html = _IFRAME_TAG.sub("", html)
    html = _JS_PROTOCOL.sub("", html)
    return _EVENT_HANDLER.sub("", html)


def sanitize_for_database(value: str) -> str:
    return re.sub(r"['\";\\]", "", value)


def sanitize_text(text: str) -> str:
    """Trim, collapse whitespace, and drop characters outside ``[\\w\\s-_.@]``."""
    text = re.sub(r"\s+", " ", text.strip())
    return re.sub(r"[^\w\s\-_.@]", "", text)
