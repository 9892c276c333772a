"""Brazilian registry numbers: CPF, CNPJ and CEP.

CPF (individuals, 11 digits) and CNPJ (legal entities, 14 digits) both end
in two mod-11 check digits computed from the preceding digits.

INVARIANT: every validator here is total. Malformed input of any kind
(wrong length, letters, empty, non-str) yields ``False``; nothing raises.
"""

from __future__ import annotations

import re

_NON_DIGIT = re.compile(r"[^0-9]")

CPF_LENGTH = 11
CNPJ_LENGTH = 14
CEP_LENGTH = 8


def only_digits(value: str) -> str:
    """Return *value* with every non-digit character removed.

    Non-string input is treated as empty.

    Examples:
        >>> only_digits("123.456.789-09")
        '12345678909'
        >>> only_digits("abc")
        ''
    """
    if not isinstance(value, str):
        return ""
    return _NON_DIGIT.sub("", value)


def _all_same(digits: str) -> bool:
    return digits == digits[0] * len(digits)


def _cpf_check_digit(digits: str, first_weight: int) -> int:
    total = sum(int(d) * (first_weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder in (10, 11) else remainder


def _cnpj_check_digit(digits: str) -> int:
    # Weights run right-to-left: 2, 3, ..., 9, then wrap back to 2.
    total = 0
    weight = 2
    for d in reversed(digits):
        total += int(d) * weight
        weight = 2 if weight == 9 else weight + 1
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(value: str) -> bool:
    """Check whether *value* is a structurally valid CPF.

    Punctuation is ignored. Repeated-digit sequences such as
    ``111.111.111-11`` are rejected even though their arithmetic passes.
    """
    digits = only_digits(value)
    if len(digits) != CPF_LENGTH or _all_same(digits):
        return False
    if _cpf_check_digit(digits[:9], 10) != int(digits[9]):
        return False
    return _cpf_check_digit(digits[:10], 11) == int(digits[10])


def is_valid_cnpj(value: str) -> bool:
    """Check whether *value* is a structurally valid CNPJ.

    Examples:
        >>> is_valid_cnpj("11.222.333/0001-81")
        True
        >>> is_valid_cnpj("11.222.333/0001-80")
        False
    """
    digits = only_digits(value)
    if len(digits) != CNPJ_LENGTH or _all_same(digits):
        return False
    if _cnpj_check_digit(digits[:12]) != int(digits[12]):
        return False
    return _cnpj_check_digit(digits[:13]) == int(digits[13])


def is_valid_cep(value: str) -> bool:
    """Check whether *value* holds exactly eight digits once punctuation is removed."""
    return len(only_digits(value)) == CEP_LENGTH


def format_cpf(value: str) -> str:
    """Mask a CPF as ``000.000.000-00``; return *value* unchanged if it is not 11 digits."""
    d = only_digits(value)
    if len(d) != CPF_LENGTH:
        return value
    return f"{d[0:3]}.{d[3:6]}.{d[6:9]}-{d[9:11]}"


def format_cnpj(value: str) -> str:
    """Mask a CNPJ as ``00.000.000/0000-00``; return *value* unchanged if it is not 14 digits."""
    d = only_digits(value)
    if len(d) != CNPJ_LENGTH:
        return value
    return f"{d[0:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:14]}"


def format_cep(value: str) -> str:
    """Mask a CEP as ``00000-000``; return *value* unchanged if it is not 8 digits."""
    d = only_digits(value)
    if len(d) != CEP_LENGTH:
        return value
    return f"{d[0:5]}-{d[5:8]}"
