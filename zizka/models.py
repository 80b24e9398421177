"""Eingabemodelle für Konfiguration und Abrechnungszeitraum.

Die Modelle werden einmal an der Grenze (YAML → Python) validiert und sind
danach unveränderlich. Der Kern prüft sie nicht erneut.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .money import to_decimal


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Address(_Frozen):
    street: str
    city: str
    zip: str
    country_code: Optional[str] = None

    @field_validator("zip", mode="before")
    @classmethod
    def _zip_as_text(cls, value: object) -> object:
        # YAML liest "11000" ohne Anführungszeichen als int
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class CompanyConfig(_Frozen):
    name: str
    company_id: str
    tax_id: str = ""
    address: Address
    bank_account: Optional[str] = None

    @field_validator("company_id", "tax_id", mode="before")
    @classmethod
    def _id_as_text(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class Config(_Frozen):
    supplier: CompanyConfig
    recipients: Dict[str, CompanyConfig] = Field(default_factory=dict)
    recipient: Optional[CompanyConfig] = None
    due_days: int = Field(ge=0)
    currency: str = Field(min_length=3, max_length=3)

    @field_validator("recipients", mode="before")
    @classmethod
    def _empty_recipients(cls, value: object) -> object:
        return {} if value is None else value

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.upper()


class LineItem(_Frozen):
    text: str
    md: Optional[Decimal] = None
    md_rate: Optional[Decimal] = None
    hr: Optional[Decimal] = None
    hr_rate: Optional[Decimal] = None

    @field_validator("md", "md_rate", "hr", "hr_rate", mode="before")
    @classmethod
    def _as_decimal(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return to_decimal(value)
        return value


class InvoiceInput(_Frozen):
    nr: str
    month: int
    payment_id: str
    recipient_id: Optional[str] = None
    items: Tuple[LineItem, ...] = Field(min_length=1)

    @field_validator("nr", "payment_id", "recipient_id", mode="before")
    @classmethod
    def _as_text(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
