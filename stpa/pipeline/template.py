from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from .. import config
from ..errors import TemplateNotFoundError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _read_template(path: str) -> bytes:
    return Path(path).read_bytes()


def load_template(path: Optional[Path] = None) -> bytes:
    """
    Blank letterhead page the document is printed over.

    Read once per path and kept as immutable bytes, so concurrent renders can
    share it.
    """
    template = Path(path or config.TEMPLATE_PATH)
    if not template.is_file():
        raise TemplateNotFoundError(
            f"STPA template not found: {template}. Build one with `stpa template --out {template}`."
        )
    return _read_template(str(template.resolve()))


def build_template(output_path: Path, logo_path: Optional[Path] = None) -> Path:
    """Draw the static letterhead of the STPA form into a one-page PDF."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pw, ph = A4
    margin_left = 25 * mm
    content_w = 165 * mm
    center_x = margin_left + content_w / 2
    line_h = 5 * mm

    canv = canvas.Canvas(str(output_path), pagesize=A4)
    canv.setTitle(config.DOCUMENT_TITLE)

    y = ph - 10 * mm - line_h * 0.75
    canv.setFont("Helvetica-Bold", 12)
    for i, line in enumerate(config.LETTERHEAD_LINES):
        canv.drawCentredString(center_x, y, line)
        if i == len(config.LETTERHEAD_LINES) - 1:
            w = canv.stringWidth(line, "Helvetica-Bold", 12)
            canv.setLineWidth(0.6)
            canv.line(center_x - w / 2, y - 1.5, center_x + w / 2, y - 1.5)
        y -= line_h

    logo = logo_path or config.LOGO_PATH
    if logo and Path(logo).exists():
        # beside the letterhead, the number line leaves no room below it
        logo_w, logo_h = 15 * mm, 18 * mm
        canv.drawImage(str(logo), margin_left, ph - 10 * mm - logo_h, logo_w, logo_h, mask="auto")
    else:
        logger.info("No logo at %s, letterhead drawn without it", logo)

    # the title sits right above the number line written at 41.5mm
    title_y = ph - 37 * mm
    canv.setFont("Helvetica-Bold", 12)
    canv.drawCentredString(center_x, title_y, config.DOCUMENT_TITLE)
    w = canv.stringWidth(config.DOCUMENT_TITLE, "Helvetica-Bold", 12)
    canv.line(center_x - w / 2, title_y - 1.5, center_x + w / 2, title_y - 1.5)

    canv.showPage()
    canv.save()
    _read_template.cache_clear()
    return output_path
