from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest

from stpa.models import (
    Address,
    CaseRecord,
    DigitalIdentity,
    FontSpec,
    Gender,
    Officer,
    Person,
    Suspect,
    Victim,
)
from stpa.pipeline.metrics import TextMetrics
from stpa.pipeline.template import build_template


class FixedMetrics(TextMetrics):
    """Every character is ``font.size / 10`` mm wide."""

    def width(self, text: str, font: FontSpec) -> float:
        return len(text) * font.size / 10.0


@pytest.fixture
def fixed_metrics() -> FixedMetrics:
    return FixedMetrics()


@pytest.fixture
def body_font() -> FontSpec:
    return FontSpec(family="Helvetica", size=11, line_height=5)


@pytest.fixture
def template_path(tmp_path: Path) -> Path:
    return build_template(tmp_path / "template_stpa.pdf")


@pytest.fixture
def sample_record() -> CaseRecord:
    ktp = Address(
        detail="Jl. Pandanaran No. 12",
        rt="003",
        rw="007",
        village="Mugassari",
        district="Semarang Selatan",
        regency="Kota Semarang",
        province="Jawa Tengah",
    )
    return CaseRecord(
        report_number="601",
        report_date=datetime(2026, 1, 15, 14, 30),
        reporter=Person(
            name="Budi Santoso",
            nik="3374010101900001",
            birth_place="Semarang",
            birth_date=datetime(1990, 1, 1).date(),
            gender=Gender.MALE,
            occupation="Karyawan Swasta",
            phone="081234567890",
            ktp_address=ktp,
        ),
        category="Penipuan Online",
        incident_address="Jl. Pemuda No. 1",
        incident_regency="Kota Semarang",
        incident_province="Jawa Tengah",
        incident_time=datetime(2026, 1, 10, 9, 5),
        victims=[
            Victim(
                person=Person(name="Budi Santoso", gender=Gender.MALE),
                loss_amount=Decimal("50000"),
            )
        ],
        suspects=[
            Suspect(
                person=Person(name="Andi"),
                identities=[
                    DigitalIdentity(kind="telepon", value="089876543210", platform="WhatsApp", account_name="Andi W"),
                    DigitalIdentity(kind="rekening", value="1234567890", platform="BCA"),
                ],
            )
        ],
        narrative="Pelapor membeli telepon genggam melalui media sosial dan telah mentransfer uang, "
        "namun barang tidak pernah dikirim dan nomor penjual tidak dapat dihubungi.",
        officer=Officer(name="Agus Prasetyo", rank="AIPTU", nrp="78010123"),
    )
