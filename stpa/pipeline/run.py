from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, NamedTuple, Optional

from .. import config
from ..models import CaseRecord
from ..storage import artifact_path
from .assemble import DocumentAssembler
from .canvas import PageDescription
from .ingest import load_record, slug_for_record
from .render_pdf import render_pdf
from .render_preview import render_preview

logger = logging.getLogger(__name__)


class RenderedRecord(NamedTuple):
    slug: str
    pdf_path: Path
    preview_path: Optional[Path]
    page: PageDescription


def _write_error(slug: str, message: str, base_dir: Optional[Path] = None) -> Path:
    error_path = artifact_path(slug, "error", base_dir=base_dir)
    error_path.write_text(message, encoding="utf-8")
    return error_path


def render_record(
    record: CaseRecord,
    assembler: DocumentAssembler,
    slug: Optional[str] = None,
    base_dir: Optional[Path] = None,
    preview: bool = False,
) -> RenderedRecord:
    slug = slug or slug_for_record(record)
    page = assembler.generate(record)
    for warning in page.warnings:
        logger.warning("%s: %s", slug, warning)

    pdf_path = render_pdf(page, artifact_path(slug, "pdf", base_dir=base_dir))
    preview_path = None
    if preview:
        preview_path = render_preview(pdf_path, artifact_path(slug, "preview", base_dir=base_dir))
    return RenderedRecord(slug, pdf_path, preview_path, page)


def run_batch(
    record_paths: Iterable[Path],
    assembler: Optional[DocumentAssembler] = None,
    base_dir: Optional[Path] = None,
    preview: bool = False,
) -> dict[str, list[str]]:
    """Render every record file; one bad record never stops the others."""
    assembler = assembler or DocumentAssembler()
    base_dir = base_dir or config.OUT_DIR
    results: dict[str, list[str]] = {"READY": [], "FAILED": []}
    for path in record_paths:
        slug = path.stem
        try:
            record = load_record(path)
            slug = slug_for_record(record, fallback=path.stem)
            render_record(record, assembler, slug=slug, base_dir=base_dir, preview=preview)
        except Exception as exc:
            logger.exception("Rendering failed for %s", path)
            _write_error(slug, str(exc), base_dir=base_dir)
            results["FAILED"].append(slug)
            continue
        results["READY"].append(slug)
    return results
