from __future__ import annotations

from pathlib import Path
from typing import List
import json
import os


BASE_DIR = Path(__file__).resolve().parents[1]
OUT_DIR = BASE_DIR / "out"
ASSETS_DIR = BASE_DIR / "assets"
TEMPLATE_PATH = Path(os.environ.get("STPA_TEMPLATE_PATH", ASSETS_DIR / "templates" / "template_stpa.pdf"))
LOGO_PATH = ASSETS_DIR / "brand" / "polri_logo.png"
LAYOUT_PRESET_PATH = ASSETS_DIR / "layout" / "stpa_layout.json"

STPA_SUFFIX = "Ditressiber"
PLACEHOLDER = "-"

LETTERHEAD_LINES: List[str] = [
    "KEPOLISIAN NEGARA REPUBLIK INDONESIA",
    "DAERAH JAWA TENGAH",
    "DIREKTORAT RESERSE SIBER",
]
DOCUMENT_TITLE = "SURAT TANDA PENERIMAAN ADUAN"
OFFICE_NAME = "Kantor Direktorat Reserse Siber Polda Jawa Tengah"
RECEIVER_TITLE = "PAWAS PIKET DITRESSIBER"


def load_layout_preset() -> dict:
    with LAYOUT_PRESET_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def set_out_dir(path: Path) -> None:
    global OUT_DIR
    OUT_DIR = path


def set_template_path(path: Path) -> None:
    global TEMPLATE_PATH
    TEMPLATE_PATH = path
