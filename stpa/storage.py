from __future__ import annotations

from pathlib import Path

from . import config


ARTIFACT_NAMES = {
    "pdf": "stpa.pdf",
    "preview": "preview.png",
    "error": "error.log",
}


def record_dir(slug: str, base_dir: Path | None = None) -> Path:
    root = base_dir or config.OUT_DIR
    path = root / slug
    path.mkdir(parents=True, exist_ok=True)
    return path


def artifact_path(slug: str, artifact_type: str, base_dir: Path | None = None) -> Path:
    filename = ARTIFACT_NAMES[artifact_type]
    return record_dir(slug, base_dir=base_dir) / filename
