from __future__ import annotations

from stpa.models import FontSpec
from stpa.pipeline.dashfill import (
    center_with_symmetric_fill,
    fill_line,
    justify_with_trailing_fill,
    row_with_label_and_filled_value,
)
from stpa.pipeline.metrics import DEFAULT_METRICS

FONT = FontSpec(size=10, line_height=5)


def _sides(line: str) -> tuple[int, int]:
    return len(line) - len(line.lstrip("-")), len(line) - len(line.rstrip("-"))


def test_justify_fills_to_target(fixed_metrics) -> None:
    line = justify_with_trailing_fill("--- ", "abc", 20, FONT, fixed_metrics)
    assert line == "--- abc " + "-" * 12


def test_justify_never_negative(fixed_metrics) -> None:
    body = "x" * 30
    assert justify_with_trailing_fill("", body, 20, FONT, fixed_metrics) == body + " "


def test_justify_width_bounds_with_real_font(body_font) -> None:
    target = 165.0
    glyph = DEFAULT_METRICS.width("-", body_font)
    for body in ["Demikian", "Pada hari ini Kamis tanggal 15 Januari 2026", "W" * 40]:
        before = DEFAULT_METRICS.width(body + " ", body_font)
        line = justify_with_trailing_fill("", body, target, body_font)
        after = DEFAULT_METRICS.width(line, body_font)
        assert after >= before
        assert after <= target + glyph


def test_center_splits_odd_glyph_to_the_right(fixed_metrics) -> None:
    line = center_with_symmetric_fill("X", 20, FONT, fixed_metrics, padding=4)
    assert line == "-" * 7 + "X" + "-" * 8


def test_center_sides_differ_by_at_most_one(body_font) -> None:
    for text in ['" PENIPUAN ONLINE "', "X", '" AKSES ILEGAL "', ": Dengan maksud :"]:
        left, right = _sides(center_with_symmetric_fill(text, 165, body_font))
        assert abs(left - right) <= 1
        assert left > 0


def test_center_without_room(fixed_metrics) -> None:
    text = "Y" * 30
    assert center_with_symmetric_fill(text, 20, FONT, fixed_metrics) == text


def test_fill_line_keeps_gap(fixed_metrics) -> None:
    assert fill_line("abc", ";", 10, FONT, fixed_metrics, gap=2) == "abc;----"


def test_row_single_line(fixed_metrics) -> None:
    row = row_with_label_and_filled_value("Nama", "Budi", ";", 50, FONT, fixed_metrics, slack=10)
    assert row.label == "Nama"
    assert row.lines == ["Budi;" + "-" * 43]


def test_row_placeholder_for_missing_value(fixed_metrics) -> None:
    row = row_with_label_and_filled_value("NIK", None, ";", 20, FONT, fixed_metrics)
    assert row.lines[0].startswith("-;")


def test_row_delegates_to_wrap(fixed_metrics) -> None:
    value = " ".join(["abcd"] * 10)
    row = row_with_label_and_filled_value("Alamat", value, ";", 30, FONT, fixed_metrics, slack=10, wrap_slack=20)
    assert row.lines[:4] == ["abcd abcd"] * 4
    assert row.lines[4] == "abcd abcd;" + "-" * 18
