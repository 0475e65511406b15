from __future__ import annotations

from datetime import date, datetime

import pytest

from stpa.pipeline.dates import clock, day_name, long_date, month_name, roman_month


def test_roman_months() -> None:
    expected = ["I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII"]
    assert [roman_month(m) for m in range(1, 13)] == expected


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_out_of_range(month: int) -> None:
    with pytest.raises(ValueError):
        roman_month(month)
    with pytest.raises(ValueError):
        month_name(month)


def test_indonesian_names() -> None:
    assert day_name(date(2026, 1, 15)) == "Kamis"
    assert day_name(date(2026, 1, 18)) == "Minggu"
    assert month_name(8) == "Agustus"
    assert long_date(date(2026, 1, 5)) == "05 Januari 2026"
    assert clock(datetime(2026, 1, 5, 9, 7)) == "09.07"
