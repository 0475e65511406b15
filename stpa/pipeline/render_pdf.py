from __future__ import annotations

import io
from pathlib import Path
from typing import Optional

import fitz  # PyMuPDF
from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from .canvas import LayoutField, PageDescription
from .template import load_template

PT_TO_MM = 25.4 / 72.0


def _baseline(item: LayoutField) -> float:
    """
    Baseline in mm from the top of the page.

    Fields are placed like table cells: ``y`` is the top of a cell one
    line-height tall and the text sits vertically centred in it.
    """
    font = item.font
    cap = font.size * PT_TO_MM * 0.7
    return item.y + (font.line_height + cap) / 2


def _draw_field(canv: canvas.Canvas, item: LayoutField, page_h: float, mask: bool) -> None:
    font = item.font
    text_w = canv.stringWidth(item.text, font.font_name, font.size)
    cell_x = item.x * mm
    cell_w = item.width * mm

    if item.align == "C":
        left = cell_x + (cell_w - text_w) / 2
    elif item.align == "R":
        left = cell_x + cell_w - text_w
    else:
        left = cell_x

    if mask and item.text:
        # cover the template's dotted guide lines under the value
        top = page_h - item.y * mm
        canv.setFillColor(colors.white)
        canv.rect(left - 0.5 * mm, top - font.line_height * mm, text_w + 1 * mm, font.line_height * mm, stroke=0, fill=1)

    baseline = page_h - _baseline(item) * mm
    canv.setFillColor(colors.black)
    canv.setFont(font.font_name, font.size)
    canv.drawString(left, baseline, item.text)

    if item.underline and item.text:
        canv.setStrokeColor(colors.black)
        canv.setLineWidth(0.5)
        canv.line(left, baseline - 1.5, left + text_w, baseline - 1.5)


def render_overlay(page: PageDescription, mask: bool = True) -> bytes:
    pw, ph = page.page_size
    buffer = io.BytesIO()
    canv = canvas.Canvas(buffer, pagesize=(pw * mm, ph * mm))
    if page.document_number:
        canv.setTitle(page.document_number)
    for item in page.fields:
        _draw_field(canv, item, ph * mm, mask)
    canv.showPage()
    canv.save()
    return buffer.getvalue()


def render_page(page: PageDescription, template: Optional[bytes] = None, mask: bool = True) -> bytes:
    """Render the page description as exactly one PDF page over the template."""
    overlay = render_overlay(page, mask=mask)
    background = template if template is not None else load_template(page.template_path)

    with fitz.open(stream=background, filetype="pdf") as tpl, fitz.open(stream=overlay, filetype="pdf") as ov:
        with fitz.open() as out:
            out.insert_pdf(tpl, from_page=0, to_page=0)
            out[0].show_pdf_page(out[0].rect, ov, 0)
            return out.tobytes(garbage=3, deflate=True)


def render_pdf(page: PageDescription, output_path: Path, template: Optional[bytes] = None) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(render_page(page, template=template))
    return output_path
