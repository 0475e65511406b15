"""Text values of the STPA form, built from a case record."""
from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional

from ..config import PLACEHOLDER, STPA_SUFFIX
from ..models import Address, CaseRecord, DigitalIdentity, Gender, Person, Suspect, Victim
from .dates import clock, long_date, roman_month
from .terbilang import spell_currency

NUMBER_PLACEHOLDER = "....."
NO_LOSS = "- (tidak ada kerugian material)"
NO_VICTIMS = "- (tidak ada korban tercatat)"
NO_SUSPECTS = "- Belum teridentifikasi"
UNKNOWN_NAME = "Tidak diketahui"
UNKNOWN_CATEGORY = "TIDAK DIKETAHUI"

IDENTITY_LABELS = {
    "telepon": "No. HP",
    "rekening": "No. Rekening",
    "sosmed": "Akun Sosmed",
    "email": "Email",
    "ewallet": "E-Wallet",
    "kripto": "Dompet Kripto",
    "marketplace": "Marketplace",
    "website": "Website",
    "lainnya": "Lainnya",
}

_FULL_NUMBER = re.compile(r"STPA/\s*(\d+)\s*/")


def or_dash(value: Optional[str]) -> str:
    value = (value or "").strip()
    return value or PLACEHOLDER


def stpa_number(report_number: Optional[str]) -> str:
    """
    Sequence part of the STPA number.

    ``STPA/601/IV/2025/Ditressiber`` gives ``601``; a bare manual number is
    used as typed.
    """
    raw = (report_number or "").strip()
    if not raw:
        return NUMBER_PLACEHOLDER
    match = _FULL_NUMBER.search(raw)
    if match:
        return match.group(1)
    return raw


def document_number(record: CaseRecord) -> str:
    when = record.report_date
    return f"STPA/ {stpa_number(record.report_number)} / {roman_month(when.month)} / {when.year} / {STPA_SUFFIX}"


def format_registry_number(sequence: int, when: datetime) -> str:
    """Registry form ``STPA/007/IV/2025/Ditressiber``; the caller owns the sequence."""
    return f"STPA/{sequence:03d}/{roman_month(when.month)}/{when.year}/{STPA_SUFFIX}"


def _join_parts(parts: Iterable[Optional[str]]) -> str:
    kept = [p.strip() for p in parts if p and p.strip()]
    return ", ".join(kept) or PLACEHOLDER


def format_address(address: Optional[Address]) -> str:
    if address is None:
        return PLACEHOLDER
    rt_rw = " ".join(
        part for part in (
            f"RT {address.rt}" if address.rt else "",
            f"RW {address.rw}" if address.rw else "",
        ) if part
    )
    return _join_parts([
        address.detail,
        rt_rw,
        f"Kel. {address.village}" if address.village else None,
        f"Kec. {address.district}" if address.district else None,
        address.regency,
        address.province,
    ])


def format_incident_location(record: CaseRecord) -> str:
    return _join_parts([
        record.incident_address,
        f"Kel. {record.incident_village}" if record.incident_village else None,
        f"Kec. {record.incident_district}" if record.incident_district else None,
        record.incident_regency,
        record.incident_province,
    ])


def format_incident_time(when: Optional[datetime]) -> str:
    if when is None:
        return PLACEHOLDER
    return f"{long_date(when)} Pukul {clock(when)} WIB"


def format_birth(person: Person) -> str:
    place = or_dash(person.birth_place)
    if person.birth_date:
        return f"{place}, {long_date(person.birth_date)}"
    return place


def domicile_or_ktp(person: Person) -> str:
    if person.domicile_address is None:
        return format_address(person.ktp_address)
    return format_address(person.domicile_address)


def gender_phrase(person: Optional[Person]) -> str:
    if person is not None and person.gender == Gender.FEMALE:
        return "seorang Perempuan"
    return "seorang Laki-laki"


def format_rupiah(amount: Decimal) -> str:
    return "Rp. " + f"{int(amount):,}".replace(",", ".")


def total_loss(victims: List[Victim]) -> Decimal:
    return sum((v.loss_amount or Decimal(0) for v in victims), Decimal(0))


def format_loss(victims: List[Victim]) -> str:
    total = total_loss(victims)
    # below one Rupiah prints as "Rp. 0"
    if total < 1:
        return NO_LOSS
    words = None
    if len(victims) == 1:
        words = (victims[0].loss_words or "").strip() or None
    return f"{format_rupiah(total)},- ({words or spell_currency(total)})"


def format_victims(victims: List[Victim]) -> str:
    if not victims:
        return NO_VICTIMS
    names = []
    for victim in victims:
        person = victim.person
        name = (person.name if person else None) or UNKNOWN_NAME
        prefix = "Sdri." if person is not None and person.gender == Gender.FEMALE else "Sdr."
        names.append(f"{prefix} {name}")
    return ", ".join(names)


def identity_label(identity: DigitalIdentity) -> str:
    kind = (identity.kind or "").strip()
    return IDENTITY_LABELS.get(kind.lower(), kind.capitalize() or "ID")


def format_identity(identity: DigitalIdentity) -> str:
    platform = f" ({identity.platform})" if identity.platform else ""
    account = f" a.n. {identity.account_name}" if identity.account_name else ""
    return f"  - {identity_label(identity)}: {or_dash(identity.value)}{platform}{account}"


def format_suspect_notes(notes: str) -> str:
    return f"  Catatan: {notes.strip()}"


def suspect_name_line(suspect: Suspect, index: int, count: int) -> Optional[str]:
    name = suspect.person.name if suspect.person else None
    if not name:
        return None
    marker = f"{index + 1}. " if count > 1 else "- "
    return f"{marker}Nama: {name}"


def category_title(record: CaseRecord) -> str:
    name = (record.category or "").strip() or UNKNOWN_CATEGORY
    return f'" {name.upper()} "'


def download_filename(record: CaseRecord, slug: str) -> str:
    if record.report_number and record.report_number.strip():
        return f"STPA-{record.report_number.strip().replace('/', '-')}.pdf"
    return f"STPA-DRAFT-{slug}.pdf"
