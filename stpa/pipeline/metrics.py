from __future__ import annotations

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth

from ..models import FontSpec


class TextMetrics:
    """
    Rendered text width in millimetres.

    Backed by reportlab's AFM tables for the standard PDF fonts, which are
    loaded once per process and only ever read.
    """

    def width(self, text: str, font: FontSpec) -> float:
        if not text:
            return 0.0
        return stringWidth(text, font.font_name, font.size) / mm


DEFAULT_METRICS = TextMetrics()
