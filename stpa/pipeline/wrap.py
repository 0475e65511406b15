from __future__ import annotations

from typing import List

from ..models import FontSpec
from .dashfill import FILL_GLYPH, fill_line
from .metrics import DEFAULT_METRICS, TextMetrics


def wrap_words(value: str, max_width: float, font: FontSpec, metrics: TextMetrics = DEFAULT_METRICS) -> List[str]:
    """
    Greedy word wrap.

    A word wider than ``max_width`` on its own still gets a line of its own;
    it is never hyphenated or cut. Leading spaces indent the first line.
    """
    value = value or ""
    words = value.split()
    if not words:
        return [""]

    indent = value[: len(value) - len(value.lstrip(" "))]
    lines: List[str] = []
    cur: List[str] = []

    for w in words:
        lead = "" if lines else indent
        test = lead + " ".join(cur + [w])
        if metrics.width(test, font) <= max_width:
            cur.append(w)
            continue

        if cur:
            lines.append(lead + " ".join(cur))
        cur = [w]

    if cur:
        lines.append(("" if lines else indent) + " ".join(cur))

    return lines


def wrap_with_terminator(
    value: str,
    column_width: float,
    terminator: str,
    font: FontSpec,
    metrics: TextMetrics = DEFAULT_METRICS,
    fill: str = FILL_GLYPH,
    slack: float = 20.0,
    gap: float = 2.0,
) -> List[str]:
    """
    Wrap ``value`` inside ``column_width - slack`` and close the last line.

    Only the final line carries the terminator and the trailing fill;
    earlier lines are left as plain text.
    """
    lines = wrap_words(value, column_width - slack, font, metrics=metrics)
    lines[-1] = fill_line(lines[-1], terminator, column_width, font, metrics=metrics, fill=fill, gap=gap)
    return lines
