from __future__ import annotations

from stpa.models import FontSpec
from stpa.pipeline.metrics import DEFAULT_METRICS
from stpa.pipeline.wrap import wrap_with_terminator, wrap_words

FONT = FontSpec(size=10, line_height=5)

NARRATIVE = (
    "Pelapor mendapat pesan dari nomor tidak dikenal yang mengaku sebagai petugas bank "
    "dan meminta kode OTP, setelah kode diberikan saldo rekening pelapor berkurang "
    "karena beberapa transaksi yang tidak pernah dilakukan oleh pelapor sendiri"
)


def test_wrap_words_greedy(fixed_metrics) -> None:
    assert wrap_words("aa bb cc dd", 5, FONT, fixed_metrics) == ["aa bb", "cc dd"]
    assert wrap_words("", 5, FONT, fixed_metrics) == [""]


def test_terminator_only_on_last_line(body_font) -> None:
    lines = wrap_with_terminator(NARRATIVE, 117, ".", body_font, slack=20)
    assert len(lines) > 1
    assert all("." not in line for line in lines[:-1])
    assert lines[-1].count(".") == 1
    assert lines[-1].endswith("-")
    assert not any(line.endswith("-") for line in lines[:-1])


def test_non_final_lines_fit_inside_slack(body_font) -> None:
    column, slack = 117.0, 20.0
    lines = wrap_with_terminator(NARRATIVE, column, ";", body_font, slack=slack)
    for line in lines[:-1]:
        assert DEFAULT_METRICS.width(line, body_font) <= column - slack


def test_oversized_word_is_not_split(fixed_metrics) -> None:
    lines = wrap_with_terminator("supercalifragilistic short", 15, ";", FONT, fixed_metrics, slack=5)
    assert lines[0] == "supercalifragilistic"
    assert lines[1].startswith("short;")


def test_empty_value_still_gives_one_line(fixed_metrics) -> None:
    assert wrap_with_terminator("", 20, ";", FONT, fixed_metrics, slack=5) == [";" + "-" * 17]


def test_leading_indent_kept_on_first_line(fixed_metrics) -> None:
    assert wrap_words("  aa bb cc", 7, FONT, fixed_metrics) == ["  aa bb", "cc"]
