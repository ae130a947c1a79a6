"""
Brazilian document and date checks used by the validation rules.

- is_valid_cpf: personal taxpayer id (11 digits, two mod-11 check digits)
- is_valid_cnpj: company taxpayer id (14 digits, two mod-11 check digits)
- is_valid_state: two-letter federative unit code
- is_adult: at least 18 full years old today
"""

import re
from datetime import date

STATES = frozenset({
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO",
    "MA", "MT", "MS", "MG", "PA", "PB", "PR", "PE", "PI",
    "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
})

ADULT_AGE = 18

_CPF_WEIGHTS_1 = (10, 9, 8, 7, 6, 5, 4, 3, 2)
_CPF_WEIGHTS_2 = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _check_digit(digits: str, weights: tuple[int, ...]) -> str:
    """Mod-11 check digit shared by CPF and CNPJ."""
    remainder = sum(int(d) * w for d, w in zip(digits, weights)) % 11
    return "0" if remainder < 2 else str(11 - remainder)


def _is_repeated(digits: str) -> bool:
    # "00000000000", "11111111111", ... pass the checksum but are never issued
    return len(set(digits)) == 1


def is_valid_cpf(cpf: str | None) -> bool:
    """
    Validate a CPF. Accepts "529.982.247-25" or "52998224725";
    surrounding whitespace, dots and dashes are ignored, anything else
    makes it invalid.
    """
    if not cpf or not cpf.strip():
        return False

    cpf = cpf.strip().replace(".", "").replace("-", "")
    if len(cpf) != 11 or not cpf.isdigit() or _is_repeated(cpf):
        return False

    first = _check_digit(cpf[:9], _CPF_WEIGHTS_1)
    second = _check_digit(cpf[:9] + first, _CPF_WEIGHTS_2)
    return cpf.endswith(first + second)


def clean_cnpj(cnpj: str) -> str:
    """Keep only the digits ("11.222.333/0001-81" -> "11222333000181")."""
    return re.sub(r"\D", "", cnpj)


def is_valid_cnpj(cnpj: str | None) -> bool:
    """Validate a CNPJ; any punctuation is stripped before checking."""
    if not cnpj or not cnpj.strip():
        return False

    cnpj = clean_cnpj(cnpj)
    if len(cnpj) != 14 or _is_repeated(cnpj):
        return False

    first = _check_digit(cnpj[:12], _CNPJ_WEIGHTS_1)
    second = _check_digit(cnpj[:12] + first, _CNPJ_WEIGHTS_2)
    return cnpj.endswith(first + second)


def is_valid_state(state: str | None) -> bool:
    return state in STATES


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return day.replace(year=day.year - years, day=28)


def age_on(date_of_birth: date, today: date) -> int:
    """Full years completed on `today`."""
    age = today.year - date_of_birth.year
    if date_of_birth > _years_before(today, age):
        age -= 1
    return age


def is_adult(date_of_birth: date | None, today: date | None = None) -> bool:
    if date_of_birth is None:
        return False
    return age_on(date_of_birth, today or date.today()) >= ADULT_AGE
