"""
Dash-fill justification.

Legal forms are typed to the right margin: whatever room a value leaves on
its line is padded with a run of filler glyphs so nothing can be written
in afterwards.
"""
from __future__ import annotations

import math
from typing import List, NamedTuple, Optional

from ..models import FontSpec
from .metrics import DEFAULT_METRICS, TextMetrics

FILL_GLYPH = "-"


class LabeledRow(NamedTuple):
    label: str
    lines: List[str]
    terminator: str


def fill_count(remaining: float, glyph_width: float) -> int:
    if remaining <= 0 or glyph_width <= 0:
        return 0
    return int(math.floor(remaining / glyph_width))


def justify_with_trailing_fill(
    prefix: str,
    body: str,
    target_width: float,
    font: FontSpec,
    metrics: TextMetrics = DEFAULT_METRICS,
    fill: str = FILL_GLYPH,
) -> str:
    composed = f"{prefix}{body} "
    remaining = target_width - metrics.width(composed, font)
    return composed + fill * fill_count(remaining, metrics.width(fill, font))


def fill_line(
    line: str,
    terminator: str,
    column_width: float,
    font: FontSpec,
    metrics: TextMetrics = DEFAULT_METRICS,
    fill: str = FILL_GLYPH,
    gap: float = 2.0,
) -> str:
    """Append the terminator, then filler up to ``column_width - gap``."""
    text = line + terminator
    remaining = column_width - metrics.width(text, font) - gap
    return text + fill * fill_count(remaining, metrics.width(fill, font))


def center_with_symmetric_fill(
    text: str,
    target_width: float,
    font: FontSpec,
    metrics: TextMetrics = DEFAULT_METRICS,
    fill: str = FILL_GLYPH,
    padding: float = 4.0,
) -> str:
    """
    Center ``text`` between two runs of filler.

    The room left after ``padding`` is turned into a glyph count and halved
    with floor division; an odd glyph always goes to the right side.
    """
    glyph = metrics.width(fill, font)
    available = target_width - metrics.width(text, font) - padding
    total = fill_count(available, glyph)
    left = total // 2
    right = total - left
    return fill * left + text + fill * right


def row_with_label_and_filled_value(
    label: str,
    value: Optional[str],
    terminator: str,
    column_width: float,
    font: FontSpec,
    metrics: TextMetrics = DEFAULT_METRICS,
    fill: str = FILL_GLYPH,
    slack: float = 10.0,
    wrap_slack: float = 20.0,
    gap: float = 2.0,
) -> LabeledRow:
    from .wrap import wrap_with_terminator

    value = (value or "").rstrip()
    if not value.strip():
        value = "-"
    if metrics.width(value + terminator, font) > column_width - slack:
        lines = wrap_with_terminator(
            value,
            column_width,
            terminator,
            font,
            metrics=metrics,
            fill=fill,
            slack=wrap_slack,
            gap=gap,
        )
    else:
        lines = [fill_line(value, terminator, column_width, font, metrics=metrics, fill=fill, gap=gap)]
    return LabeledRow(label, lines, terminator)
