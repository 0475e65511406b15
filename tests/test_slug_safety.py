from __future__ import annotations

from stpa.models import CaseRecord
from stpa.pipeline.ingest import slug_for_record


def test_slug_sanitization() -> None:
    slug = slug_for_record(CaseRecord(report_number="STPA / 12 / ../X: 2025!"))
    assert slug == "stpa-12-x-2025"


def test_slug_falls_back_without_number() -> None:
    assert slug_for_record(CaseRecord(), fallback="aduan 3") == "aduan-3"
