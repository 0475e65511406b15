from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF


def render_preview(pdf_path: Path, out_path: Path, min_px: int = 1600) -> Path:
    """PNG of the first page, scaled so its short side is at least ``min_px``."""
    with fitz.open(pdf_path) as doc:
        page = doc.load_page(0)

        # 72dpi base; zoom until the short side reaches min_px
        rect = page.rect
        short_side = min(rect.width, rect.height)
        zoom = max(2.0, min_px / float(short_side))
        mat = fitz.Matrix(zoom, zoom)

        pix = page.get_pixmap(matrix=mat, alpha=False)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        pix.save(str(out_path))
    return out_path
