"""
Indonesian number words ("terbilang") for money amounts.

    >>> spell_currency(50000)
    'Lima Puluh Ribu Rupiah'
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import List, Tuple, Union

Number = Union[int, float, Decimal, str]

CURRENCY_UNIT = "Rupiah"
ZERO_WORD = "Nol"

_WORDS: List[str] = [
    "",
    "Satu",
    "Dua",
    "Tiga",
    "Empat",
    "Lima",
    "Enam",
    "Tujuh",
    "Delapan",
    "Sembilan",
    "Sepuluh",
    "Sebelas",
]

# (scale, word), largest first; 10**15 and above is unsupported
_SCALES: List[Tuple[int, str]] = [
    (10**12, "Triliun"),
    (10**9, "Miliar"),
    (10**6, "Juta"),
    (10**3, "Ribu"),
]
LIMIT = 10**15


def _magnitude(number: Number) -> Decimal:
    try:
        value = abs(Decimal(str(number)))
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {number!r}") from exc
    if not value.is_finite():
        raise ValueError(f"Not a finite number: {number!r}")
    return value


def _normalize(number: Number) -> int:
    return int(_magnitude(number))


def _spell(n: int) -> str:
    if n < 12:
        return _WORDS[n]
    if n < 20:
        return f"{_WORDS[n - 10]} Belas"
    if n < 100:
        tens, units = divmod(n, 10)
        return f"{_WORDS[tens]} Puluh" + (f" {_WORDS[units]}" if units else "")
    if n < 200:
        return "Seratus" + (f" {_spell(n - 100)}" if n > 100 else "")
    if n < 1000:
        hundreds, rest = divmod(n, 100)
        return f"{_WORDS[hundreds]} Ratus" + (f" {_spell(rest)}" if rest else "")
    if n < 2000:
        return "Seribu" + (f" {_spell(n - 1000)}" if n > 1000 else "")
    for scale, word in _SCALES:
        if n >= scale:
            head, rest = divmod(n, scale)
            return f"{_spell(head)} {word}" + (f" {_spell(rest)}" if rest else "")
    raise AssertionError(f"unreachable for {n}")


def spell(number: Number) -> str:
    """Spell a non-negative integer; the sign of negative input is dropped."""
    n = _normalize(number)
    if n >= LIMIT:
        raise ValueError(f"Cannot spell {n}: values from 10^15 upward are not supported")
    if n == 0:
        return ZERO_WORD
    return _spell(n)


def spell_currency(number: Number) -> str:
    if _magnitude(number) < 1:
        return f"{ZERO_WORD} {CURRENCY_UNIT}"
    return f"{spell(number)} {CURRENCY_UNIT}"
