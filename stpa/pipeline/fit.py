from __future__ import annotations

import logging
import math
import re
from dataclasses import replace
from typing import List, NamedTuple, Optional, Sequence

from ..models import FontSpec
from .metrics import DEFAULT_METRICS, TextMetrics

logger = logging.getLogger(__name__)


class FontBand(NamedTuple):
    max_length: Optional[int]
    size: float
    line_height: float


# longer narratives get smaller type; the last band is the floor
DEFAULT_BANDS: List[FontBand] = [
    FontBand(600, 11, 5.5),
    FontBand(850, 10, 5.0),
    FontBand(1200, 9, 4.5),
    FontBand(None, 8, 4.0),
]


class FitResult(NamedTuple):
    font: FontSpec
    estimated_height: float
    overflow: bool


def clean_text(text: str) -> str:
    return re.sub(r"\s+", " ", text or "").strip()


def bands_from_preset(preset: Sequence[dict]) -> List[FontBand]:
    return [FontBand(b.get("max_length"), float(b["size"]), float(b["line_height"])) for b in preset]


def _band_index(length: int, bands: Sequence[FontBand]) -> int:
    for i, band in enumerate(bands):
        if band.max_length is None or length <= band.max_length:
            return i
    return len(bands) - 1


def estimate_lines(text: str, column_width: float, font: FontSpec, metrics: TextMetrics = DEFAULT_METRICS) -> int:
    return int(math.ceil(metrics.width(text, font) / column_width)) + 1


def fit_font_spec(
    text: str,
    available_height: float,
    column_width: float,
    base: FontSpec,
    metrics: TextMetrics = DEFAULT_METRICS,
    bands: Sequence[FontBand] = DEFAULT_BANDS,
) -> FitResult:
    """
    Pick the narrative font so the block fits above the signatures.

    The band comes from the text length. If the estimate still overflows,
    step down one band and estimate again, once. Whatever that gives is
    used even when it overflows: the page is still produced.
    """
    cleaned = clean_text(text)
    index = _band_index(len(cleaned), bands)

    def _estimate(i: int) -> FitResult:
        band = bands[i]
        font = replace(base, size=band.size, line_height=band.line_height)
        height = estimate_lines(cleaned, column_width, font, metrics) * band.line_height
        return FitResult(font, height, height > available_height)

    result = _estimate(index)
    if result.overflow and index < len(bands) - 1:
        result = _estimate(index + 1)

    if result.overflow:
        logger.warning(
            "Narrative of %d chars needs %.1fmm at %spt, only %.1fmm left; page will overflow",
            len(cleaned),
            result.estimated_height,
            result.font.size,
            available_height,
        )
    return result


def choose_font_spec(
    text: str,
    available_height: float,
    column_width: float,
    base: FontSpec,
    metrics: TextMetrics = DEFAULT_METRICS,
    bands: Sequence[FontBand] = DEFAULT_BANDS,
) -> FontSpec:
    return fit_font_spec(text, available_height, column_width, base, metrics=metrics, bands=bands).font
