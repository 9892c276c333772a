"""pt-BR display formatting for dates, money, numbers, phones and text.

All helpers are pure and total: unparseable input is returned unchanged
(or as ``"Data inválida"`` for dates) rather than raising, since they sit
directly in front of rendered UI.
"""

from __future__ import annotations

import math
import re
import unicodedata
from datetime import UTC, date, datetime
from urllib.parse import urlparse

from viu_shared.domain.documents import only_digits
from viu_shared.validation.predicates import parse_iso_datetime

INVALID_DATE = "Data inválida"

_FILE_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
_HEX_RGB = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)
_HAS_PROTOCOL = re.compile(r"^https?://", re.IGNORECASE)


# --- Numbers ---


def _pt_br(value: float, decimals: int) -> str:
    """Group thousands with ``.`` and use ``,`` as the decimal mark."""
    return f"{value:,.{decimals}f}".translate(str.maketrans({",": ".", ".": ","}))


def format_number(num: float) -> str:
    """Thousands-grouped number with up to three decimals: ``1234.5`` -> ``1.234,5``."""
    text = _pt_br(num, 3)
    if "," in text:
        text = text.rstrip("0").rstrip(",")
    return text


def format_percentage(value: float, decimals: int = 1) -> str:
    """``12.5`` -> ``12,5%``; *value* is already in percent."""
    return f"{_pt_br(value, decimals)}%"


def format_file_size(size: int) -> str:
    """Binary units with one decimal: ``1024`` -> ``1.0 KB``."""
    if size <= 0:
        return "0 B"
    index = 0
    while index < len(_FILE_SIZE_UNITS) - 1 and size >= 1024 ** (index + 1):
        index += 1
    if index == 0:
        return f"{size} B"
    return f"{size / 1024**index:.1f} {_FILE_SIZE_UNITS[index]}"


# --- Money ---


def format_currency_from_number(value: float) -> str:
    """Reais to BRL: ``1234.56`` -> ``R$ 1.234,56``."""
    amount = _pt_br(abs(value), 2)
    return f"-R$ {amount}" if value < 0 and amount != "0,00" else f"R$ {amount}"


def format_currency(centavos: int) -> str:
    """Centavos to BRL: ``123456`` -> ``R$ 1.234,56``."""
    return format_currency_from_number(centavos / 100)


def parse_currency_to_centavos(currency: str) -> int:
    """``"R$ 1.234,56"`` -> ``123456``; unparseable input is ``0``."""
    cleaned = re.sub(r"[^\d,]", "", currency).replace(",", ".", 1)
    match = re.match(r"\d*\.?\d+", cleaned) or re.match(r"\d+", cleaned)
    if match is None:
        return 0
    return math.floor(float(match.group()) * 100 + 0.5)


# --- Dates ---


def _as_datetime(value: datetime | date | str) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return parse_iso_datetime(value)


def format_date(value: datetime | date | str, fmt: str = "DD/MM/YYYY") -> str:
    """Render *value* with ``DD MM YYYY HH mm ss`` tokens (first occurrence of each)."""
    parsed = _as_datetime(value)
    if parsed is None:
        return INVALID_DATE
    tokens = (
        ("DD", f"{parsed.day:02d}"),
        ("MM", f"{parsed.month:02d}"),
        ("YYYY", str(parsed.year)),
        ("HH", f"{parsed.hour:02d}"),
        ("mm", f"{parsed.minute:02d}"),
        ("ss", f"{parsed.second:02d}"),
    )
    for token, replacement in tokens:
        fmt = fmt.replace(token, replacement, 1)
    return fmt


def _plural(n: int, singular: str, plural: str) -> str:
    return f"há {n} {singular if n == 1 else plural}"


def format_relative_date(value: datetime | date | str, *, now: datetime | None = None) -> str:
    """``há 2 horas``, ``ontem``, ``há 3 semanas``... relative to *now*."""
    parsed = _as_datetime(value)
    if parsed is None:
        return INVALID_DATE
    current = now or datetime.now(UTC)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    if current.tzinfo is None:
        current = current.replace(tzinfo=UTC)

    seconds = math.floor((current - parsed).total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if seconds < 60:
        return "agora mesmo"
    if minutes < 60:
        return _plural(minutes, "minuto", "minutos")
    if hours < 24:
        return _plural(hours, "hora", "horas")
    if days == 1:
        return "ontem"
    if days < 7:
        return f"há {days} dias"
    if days < 30:
        return _plural(days // 7, "semana", "semanas")
    if days < 365:
        return _plural(days // 30, "mês", "meses")
    return _plural(days // 365, "ano", "anos")


def format_duration(seconds: int) -> str:
    """``9015`` -> ``2h 30m 15s``; zero components are skipped."""
    if seconds < 60:
        return f"{seconds}s"
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    parts = [f"{n}{unit}" for n, unit in ((hours, "h"), (minutes, "m"), (secs, "s")) if n > 0]
    return " ".join(parts)


# --- Phones ---


def format_phone(phone: str) -> str:
    """``11987654321`` -> ``(11) 98765-4321``; other lengths are returned as given."""
    digits = only_digits(phone)
    if len(digits) == 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    if len(digits) == 11:
        return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
    if len(digits) == 13 and digits.startswith("55"):
        return f"+55 ({digits[2:4]}) {digits[4:9]}-{digits[9:]}"
    return phone


def unformat_phone(phone: str) -> str:
    return only_digits(phone)


def mask_phone(phone: str) -> str:
    """``(11) 98765-4321`` -> ``(11) 9****-4321``."""
    formatted = format_phone(phone)
    if ")" not in formatted:
        return phone
    return re.sub(r"(\d)\d{4}(-\d{4})", r"\1****\2", formatted, count=1)


# --- Text ---


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:].lower()


def capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max(max_length - 3, 0)] + "..."


def remove_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not "\u0300" <= ch <= "\u036f")


def slugify(text: str) -> str:
    """``"Meu Projeto Incrível"`` -> ``meu-projeto-incrivel``."""
    text = remove_accents(text).lower().strip()
    text = re.sub(r"[^\w\s-]", "", text, flags=re.ASCII)
    text = re.sub(r"[\s_-]+", "-", text)
    return text.strip("-")


def get_initials(name: str) -> str:
    """At most two upper-case initials: ``"ana maria souza"`` -> ``AM``."""
    return "".join(word[0].upper() for word in name.split(" ") if word)[:2]


def mask_email(email: str) -> str:
    """``joao@example.com`` -> ``j**o@example.com``; short local parts are left alone."""
    username, _, domain = email.partition("@")
    if len(username) <= 2:
        return email
    return f"{username[0]}{'*' * (len(username) - 2)}{username[-1]}@{domain}"


# --- Colors ---


def hex_to_rgb(hex_color: str) -> tuple[int, int, int] | None:
    match = _HEX_RGB.match(hex_color)
    if match is None:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    return r, g, b


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def is_light_color(hex_color: str) -> bool:
    """Perceived luminance above 0.5; unparseable colors count as light."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return True
    r, g, b = rgb
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255 > 0.5


# --- URLs ---


def ensure_protocol(url: str) -> str:
    if not url or _HAS_PROTOCOL.match(url):
        return url
    return f"https://{url}"


def extract_domain(url: str) -> str:
    try:
        hostname = urlparse(ensure_protocol(url)).hostname
    except ValueError:
        return url
    return hostname or url
