"""Kanonisches Dokumentmodell einer ISDOC-Rechnung (Version 6.0.1).

Die Felder folgen den ISDOC-Elementen in Schemareihenfolge; der Generator in
``zizka.isdoc`` übersetzt sie eins zu eins in XML. Nach dem Aufbau wird ein
Dokument nicht mehr verändert.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Tuple

DOCUMENT_TYPE_INVOICE = 1
PAYMENT_MEANS_BANK_TRANSFER = 42
VAT_CALCULATION_FROM_BOTTOM = 0


@dataclass(frozen=True, slots=True)
class Country:
    identification_code: str = ""
    name: str = ""


@dataclass(frozen=True, slots=True)
class PostalAddress:
    street_name: str
    building_number: str
    city_name: str
    postal_zone: str
    country: Country


@dataclass(frozen=True, slots=True)
class PartyTaxScheme:
    company_id: str
    tax_scheme: str


@dataclass(frozen=True, slots=True)
class Party:
    identification: str
    name: str
    postal_address: PostalAddress
    tax_scheme: PartyTaxScheme


@dataclass(frozen=True, slots=True)
class ClassifiedTaxCategory:
    percent: Decimal
    vat_calculation_method: int
    vat_applicable: bool


@dataclass(frozen=True, slots=True)
class InvoiceLine:
    line_id: str
    invoiced_quantity: Decimal
    line_extension_amount: Decimal
    line_extension_amount_tax_inclusive: Decimal
    line_extension_tax_amount: Decimal
    unit_price: Decimal
    unit_price_tax_inclusive: Decimal
    classified_tax_category: ClassifiedTaxCategory
    description: str


@dataclass(frozen=True, slots=True)
class TaxCategory:
    percent: Decimal
    vat_applicable: bool


@dataclass(frozen=True, slots=True)
class TaxSubTotal:
    taxable_amount: Decimal
    tax_amount: Decimal
    tax_inclusive_amount: Decimal
    already_claimed_taxable_amount: Decimal
    already_claimed_tax_amount: Decimal
    already_claimed_tax_inclusive_amount: Decimal
    difference_taxable_amount: Decimal
    difference_tax_amount: Decimal
    difference_tax_inclusive_amount: Decimal
    tax_category: TaxCategory


@dataclass(frozen=True, slots=True)
class TaxTotal:
    sub_total: TaxSubTotal
    tax_amount: Decimal


@dataclass(frozen=True, slots=True)
class LegalMonetaryTotal:
    tax_exclusive_amount: Decimal
    tax_inclusive_amount: Decimal
    already_claimed_tax_exclusive_amount: Decimal
    already_claimed_tax_inclusive_amount: Decimal
    difference_tax_exclusive_amount: Decimal
    difference_tax_inclusive_amount: Decimal
    payable_rounding_amount: Decimal
    paid_deposits_amount: Decimal
    payable_amount: Decimal


@dataclass(frozen=True, slots=True)
class PaymentDetails:
    payment_due_date: datetime
    account_id: str = ""
    bank_code: str = ""
    name: str = ""
    iban: str = ""
    bic: str = ""
    variable_symbol: str = ""
    constant_symbol: str = ""
    specific_symbol: str = ""


@dataclass(frozen=True, slots=True)
class PaymentMeans:
    paid_amount: Decimal
    payment_means_code: int
    details: PaymentDetails


@dataclass(frozen=True, slots=True)
class InvoiceDocument:
    document_type: int
    document_id: str
    uuid: str
    issuing_system: str
    issue_date: datetime
    tax_point_date: datetime
    vat_applicable: bool
    currency_code: str
    supplier: Party
    customer: Party
    lines: Tuple[InvoiceLine, ...]
    tax_total: TaxTotal
    legal_monetary_total: LegalMonetaryTotal
    payment_means: PaymentMeans

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
