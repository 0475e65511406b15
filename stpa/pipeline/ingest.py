from __future__ import annotations

import hashlib
import json
import re
from pathlib import Path
from typing import List

from pydantic import ValidationError
from slugify import slugify

from ..errors import CaseRecordError
from ..models import CaseRecord


def load_record(path: Path) -> CaseRecord:
    if not path.exists():
        raise FileNotFoundError(f"Record not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CaseRecordError(f"{path.name} is not valid JSON: {exc}") from exc
    return parse_record(data, source=path.name)


def parse_record(data: dict, source: str = "record") -> CaseRecord:
    if not isinstance(data, dict):
        raise CaseRecordError(f"{source} must hold a JSON object")
    try:
        return CaseRecord.model_validate(data)
    except ValidationError as exc:
        raise CaseRecordError(f"{source} is malformed: {exc}") from exc


def list_records(directory: Path) -> List[Path]:
    if not directory.is_dir():
        raise FileNotFoundError(f"Record directory not found: {directory}")
    return sorted(directory.glob("*.json"))


def slug_for_record(record: CaseRecord, fallback: str = "draft") -> str:
    title = record.report_number or fallback
    slug = slugify(title)
    slug = re.sub(r"[^a-z0-9-]+", "-", slug.lower()).strip("-")
    if not slug:
        slug = hashlib.md5(title.encode("utf-8")).hexdigest()[:12]
    if ".." in slug or "/" in slug or "\\" in slug:
        raise ValueError("Invalid slug generated from report number")
    return slug
