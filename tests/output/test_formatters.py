"""Tests for the pt-BR display formatters."""

from datetime import UTC, date, datetime, timedelta

import pytest

from viu_shared.output.formatters import (
    INVALID_DATE,
    capitalize,
    capitalize_words,
    ensure_protocol,
    extract_domain,
    format_currency,
    format_currency_from_number,
    format_date,
    format_duration,
    format_file_size,
    format_number,
    format_percentage,
    format_phone,
    format_relative_date,
    get_initials,
    hex_to_rgb,
    is_light_color,
    mask_email,
    mask_phone,
    parse_currency_to_centavos,
    remove_accents,
    rgb_to_hex,
    slugify,
    truncate_text,
    unformat_phone,
)

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


class TestNumbers:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1234.5, "1.234,5"), (1000, "1.000"), (0, "0"), (1234567.891, "1.234.567,891")],
    )
    def test_format_number(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_percentage(self) -> None:
        assert format_percentage(12.5) == "12,5%"
        assert format_percentage(33.333, 2) == "33,33%"

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (512, "512 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (5 * 1024 * 1024, "5.0 MB"),
            (3 * 1024**3, "3.0 GB"),
        ],
    )
    def test_file_size(self, size: int, expected: str) -> None:
        assert format_file_size(size) == expected


class TestCurrency:
    def test_centavos(self) -> None:
        assert format_currency(123456) == "R$ 1.234,56"

    def test_zero(self) -> None:
        assert format_currency(0) == "R$ 0,00"

    def test_from_number(self) -> None:
        assert format_currency_from_number(1234567.8) == "R$ 1.234.567,80"

    def test_negative(self) -> None:
        assert format_currency(-1050) == "-R$ 10,50"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("R$ 1.234,56", 123456), ("R$ 10", 1000), ("0,5", 50), ("abc", 0)],
    )
    def test_parse(self, text: str, expected: int) -> None:
        assert parse_currency_to_centavos(text) == expected


class TestDates:
    def test_default_format(self) -> None:
        assert format_date("2024-03-05T10:00:00Z") == "05/03/2024"

    def test_custom_format(self) -> None:
        value = datetime(2024, 3, 5, 9, 7, 3)
        assert format_date(value, "DD/MM/YYYY HH:mm:ss") == "05/03/2024 09:07:03"

    def test_date_object(self) -> None:
        assert format_date(date(2024, 12, 25)) == "25/12/2024"

    def test_invalid(self) -> None:
        assert format_date("ontem") == INVALID_DATE

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=30), "agora mesmo"),
            (timedelta(minutes=1), "há 1 minuto"),
            (timedelta(minutes=5), "há 5 minutos"),
            (timedelta(hours=2), "há 2 horas"),
            (timedelta(days=1), "ontem"),
            (timedelta(days=3), "há 3 dias"),
            (timedelta(days=14), "há 2 semanas"),
            (timedelta(days=60), "há 2 meses"),
            (timedelta(days=400), "há 1 ano"),
        ],
    )
    def test_relative(self, delta: timedelta, expected: str) -> None:
        assert format_relative_date(NOW - delta, now=NOW) == expected

    def test_relative_invalid(self) -> None:
        assert format_relative_date("x", now=NOW) == INVALID_DATE

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(45, "45s"), (60, "1m"), (9015, "2h 30m 15s"), (3600, "1h")],
    )
    def test_duration(self, seconds: int, expected: str) -> None:
        assert format_duration(seconds) == expected


class TestPhones:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("11987654321", "(11) 98765-4321"),
            ("1134567890", "(11) 3456-7890"),
            ("5511987654321", "+55 (11) 98765-4321"),
            ("123", "123"),
        ],
    )
    def test_format(self, raw: str, expected: str) -> None:
        assert format_phone(raw) == expected

    def test_unformat(self) -> None:
        assert unformat_phone("(11) 98765-4321") == "11987654321"

    def test_mask(self) -> None:
        assert mask_phone("11987654321") == "(11) 9****-4321"

    def test_mask_unknown_shape(self) -> None:
        assert mask_phone("123") == "123"


class TestText:
    def test_capitalize(self) -> None:
        assert capitalize("mARIA") == "Maria"
        assert capitalize("") == ""

    def test_capitalize_words(self) -> None:
        assert capitalize_words("ana MARIA souza") == "Ana Maria Souza"

    def test_truncate(self) -> None:
        assert truncate_text("Identidade visual", 10) == "Identid..."
        assert truncate_text("curto", 10) == "curto"

    def test_remove_accents(self) -> None:
        assert remove_accents("ação não é fácil") == "acao nao e facil"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Meu Projeto Incrível", "meu-projeto-incrivel"),
            ("  Logo -- Café & Cia  ", "logo-cafe-cia"),
            ("snake_case_name", "snake-case-name"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, text: str, expected: str) -> None:
        assert slugify(text) == expected

    def test_initials(self) -> None:
        assert get_initials("ana maria souza") == "AM"
        assert get_initials("Ana") == "A"

    def test_mask_email(self) -> None:
        assert mask_email("joao@example.com") == "j**o@example.com"
        assert mask_email("jo@example.com") == "jo@example.com"


class TestColors:
    def test_hex_to_rgb(self) -> None:
        assert hex_to_rgb("#FF8000") == (255, 128, 0)
        assert hex_to_rgb("ff8000") == (255, 128, 0)
        assert hex_to_rgb("#fff") is None

    def test_rgb_to_hex(self) -> None:
        assert rgb_to_hex(255, 128, 0) == "#ff8000"

    def test_is_light(self) -> None:
        assert is_light_color("#ffffff") is True
        assert is_light_color("#000000") is False
        assert is_light_color("nope") is True


class TestUrls:
    def test_ensure_protocol(self) -> None:
        assert ensure_protocol("viu.com") == "https://viu.com"
        assert ensure_protocol("http://viu.com") == "http://viu.com"
        assert ensure_protocol("") == ""

    def test_extract_domain(self) -> None:
        assert extract_domain("https://app.viu.com/projetos/1") == "app.viu.com"
        assert extract_domain("viu.com/x") == "viu.com"
