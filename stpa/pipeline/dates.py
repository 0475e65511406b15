from __future__ import annotations

from datetime import date, datetime
from typing import Dict


ROMAN_MONTHS: Dict[int, str] = {
    1: "I", 2: "II", 3: "III", 4: "IV",
    5: "V", 6: "VI", 7: "VII", 8: "VIII",
    9: "IX", 10: "X", 11: "XI", 12: "XII",
}

MONTH_NAMES: Dict[int, str] = {
    1: "Januari", 2: "Februari", 3: "Maret", 4: "April",
    5: "Mei", 6: "Juni", 7: "Juli", 8: "Agustus",
    9: "September", 10: "Oktober", 11: "November", 12: "Desember",
}

# date.weekday(): Monday == 0
DAY_NAMES: Dict[int, str] = {
    0: "Senin",
    1: "Selasa",
    2: "Rabu",
    3: "Kamis",
    4: "Jumat",
    5: "Sabtu",
    6: "Minggu",
}


def _check_month(month: int) -> int:
    if month not in ROMAN_MONTHS:
        raise ValueError(f"Month must be 1..12, got {month!r}")
    return month


def roman_month(month: int) -> str:
    return ROMAN_MONTHS[_check_month(month)]


def month_name(month: int) -> str:
    return MONTH_NAMES[_check_month(month)]


def day_name(value: date) -> str:
    return DAY_NAMES[value.weekday()]


def long_date(value: date) -> str:
    """``05 Januari 2026``"""
    return f"{value.day:02d} {month_name(value.month)} {value.year}"


def clock(value: datetime) -> str:
    # the form uses a dot between hours and minutes
    return value.strftime("%H.%M")
