from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from sqlmodel import Field, SQLModel


class Gender(str, Enum):
    MALE = "LAKI-LAKI"
    FEMALE = "PEREMPUAN"


class IdentityKind(str, Enum):
    PHONE = "telepon"
    BANK_ACCOUNT = "rekening"
    SOCIAL = "sosmed"
    EMAIL = "email"
    EWALLET = "ewallet"
    CRYPTO = "kripto"
    MARKETPLACE = "marketplace"
    WEBSITE = "website"
    OTHER = "lainnya"


class Address(SQLModel):
    detail: Optional[str] = None
    rt: Optional[str] = None
    rw: Optional[str] = None
    village: Optional[str] = None
    district: Optional[str] = None
    regency: Optional[str] = None
    province: Optional[str] = None


class Person(SQLModel):
    name: Optional[str] = None
    nik: Optional[str] = None
    birth_place: Optional[str] = None
    birth_date: Optional[date] = None
    gender: Optional[Gender] = None
    occupation: Optional[str] = None
    phone: Optional[str] = None
    ktp_address: Optional[Address] = None
    domicile_address: Optional[Address] = None


class DigitalIdentity(SQLModel):
    # free text is allowed for kinds outside IdentityKind
    kind: str = IdentityKind.OTHER.value
    value: Optional[str] = None
    platform: Optional[str] = None
    account_name: Optional[str] = None


class Victim(SQLModel):
    person: Optional[Person] = None
    loss_amount: Decimal = Field(default=Decimal(0))
    loss_words: Optional[str] = None


class Suspect(SQLModel):
    person: Optional[Person] = None
    identities: List[DigitalIdentity] = Field(default_factory=list)
    notes: Optional[str] = None


class Officer(SQLModel):
    name: Optional[str] = None
    rank: Optional[str] = None
    nrp: Optional[str] = None


class CaseRecord(SQLModel):
    """Case data resolved by the caller; the engine never fetches anything."""

    report_number: Optional[str] = None
    report_date: Optional[datetime] = None
    reporter: Optional[Person] = None
    category: Optional[str] = None
    incident_address: Optional[str] = None
    incident_village: Optional[str] = None
    incident_district: Optional[str] = None
    incident_regency: Optional[str] = None
    incident_province: Optional[str] = None
    incident_time: Optional[datetime] = None
    victims: List[Victim] = Field(default_factory=list)
    suspects: List[Suspect] = Field(default_factory=list)
    narrative: Optional[str] = None
    officer: Optional[Officer] = None


@dataclass(frozen=True)
class FontSpec:
    family: str = "Helvetica"
    style: str = ""
    size: float = 11.0
    line_height: float = 5.0

    @property
    def font_name(self) -> str:
        """reportlab name of the standard font, e.g. ``Helvetica-Bold``."""
        if "B" in self.style and "I" in self.style:
            return f"{self.family}-BoldOblique"
        if "B" in self.style:
            return f"{self.family}-Bold"
        if "I" in self.style:
            return f"{self.family}-Oblique"
        return self.family
