"""Zusammenbau des ISDOC-Dokuments aus Konfiguration, Positionen und Beträgen."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Sequence

from .billing import ResolvedBilling, resolve_all
from .dates import InvoiceDates, billing_year, compute_dates
from .document import (
    DOCUMENT_TYPE_INVOICE,
    PAYMENT_MEANS_BANK_TRANSFER,
    VAT_CALCULATION_FROM_BOTTOM,
    ClassifiedTaxCategory,
    Country,
    InvoiceDocument,
    InvoiceLine,
    LegalMonetaryTotal,
    Party,
    PartyTaxScheme,
    PaymentDetails,
    PaymentMeans,
    PostalAddress,
    TaxCategory,
    TaxSubTotal,
    TaxTotal,
)
from .models import CompanyConfig, Config, InvoiceInput
from .money import MonetaryTotals, compute_totals
from .recipients import resolve_recipient

logger = logging.getLogger(__name__)

DEFAULT_ISSUING_SYSTEM = "zizka"
MONTH_PLACEHOLDER = "{{month}}"
SUPPLIER_COUNTRY_CODE = ""
CUSTOMER_COUNTRY_CODE = "CZ"

MONTH_LABELS = {
    1: "leden",
    2: "únor",
    3: "březen",
    4: "duben",
    5: "květen",
    6: "červen",
    7: "červenec",
    8: "srpen",
    9: "září",
    10: "říjen",
    11: "listopad",
    12: "prosinec",
}

_ZERO = Decimal("0")


def document_id_for(year: int, nr: str) -> str:
    return f"{year}/{nr}"


def document_uuid_for(supplier: CompanyConfig, document_id: str) -> str:
    """Deterministische UUID: gleiche Rechnung, gleiche UUID."""

    name = f"isdoc:{supplier.company_id}:{document_id}"
    return str(uuid.uuid5(uuid.NAMESPACE_URL, name)).upper()


def render_description(text: str, month: int) -> str:
    # nur das erste Vorkommen wird ersetzt
    return text.replace(MONTH_PLACEHOLDER, MONTH_LABELS[month], 1)


def build_party(company: CompanyConfig, *, vat_applicable: bool, default_country_code: str) -> Party:
    address = company.address
    country_code = address.country_code if address.country_code is not None else default_country_code
    return Party(
        identification=company.company_id,
        name=company.name,
        postal_address=PostalAddress(
            street_name=address.street,
            building_number="",
            city_name=address.city,
            postal_zone=address.zip,
            country=Country(identification_code=country_code, name=""),
        ),
        tax_scheme=PartyTaxScheme(
            company_id=company.tax_id if company.tax_id.strip() else company.company_id,
            tax_scheme="VAT" if vat_applicable else "NONE",
        ),
    )


def build_invoice_document(
    config: Config,
    invoice: InvoiceInput,
    recipient: CompanyConfig,
    billings: Sequence[ResolvedBilling],
    totals: MonetaryTotals,
    dates: InvoiceDates,
    *,
    year: int,
    issuing_system: str = DEFAULT_ISSUING_SYSTEM,
) -> InvoiceDocument:
    if len(billings) != len(invoice.items) or len(totals.lines) != len(invoice.items):
        raise ValueError("billings and totals must cover every invoice item")

    vat_applicable = totals.vat_applicable
    vat_percent = totals.vat_percent
    document_id = document_id_for(year, invoice.nr)

    lines = tuple(
        InvoiceLine(
            line_id=str(index),
            invoiced_quantity=billing.quantity,
            line_extension_amount=amounts.amount,
            line_extension_amount_tax_inclusive=amounts.amount_tax_inclusive,
            line_extension_tax_amount=amounts.tax_amount,
            unit_price=billing.rate,
            unit_price_tax_inclusive=amounts.unit_price_tax_inclusive,
            classified_tax_category=ClassifiedTaxCategory(
                percent=vat_percent,
                vat_calculation_method=VAT_CALCULATION_FROM_BOTTOM,
                vat_applicable=vat_applicable,
            ),
            description=render_description(item.text, invoice.month),
        )
        for index, (item, billing, amounts) in enumerate(
            zip(invoice.items, billings, totals.lines), start=1
        )
    )

    tax_total = TaxTotal(
        sub_total=TaxSubTotal(
            taxable_amount=totals.subtotal,
            tax_amount=totals.tax_amount,
            tax_inclusive_amount=totals.total,
            already_claimed_taxable_amount=_ZERO,
            already_claimed_tax_amount=_ZERO,
            already_claimed_tax_inclusive_amount=_ZERO,
            difference_taxable_amount=totals.subtotal,
            difference_tax_amount=totals.tax_amount,
            difference_tax_inclusive_amount=totals.total,
            tax_category=TaxCategory(percent=vat_percent, vat_applicable=vat_applicable),
        ),
        tax_amount=totals.tax_amount,
    )

    legal_monetary_total = LegalMonetaryTotal(
        tax_exclusive_amount=totals.subtotal,
        tax_inclusive_amount=totals.total,
        already_claimed_tax_exclusive_amount=_ZERO,
        already_claimed_tax_inclusive_amount=_ZERO,
        difference_tax_exclusive_amount=totals.subtotal,
        difference_tax_inclusive_amount=totals.total,
        payable_rounding_amount=_ZERO,
        paid_deposits_amount=_ZERO,
        payable_amount=totals.total,
    )

    payment_means = PaymentMeans(
        paid_amount=totals.subtotal,
        payment_means_code=PAYMENT_MEANS_BANK_TRANSFER,
        details=PaymentDetails(
            payment_due_date=dates.due_date,
            variable_symbol=invoice.payment_id,
        ),
    )

    return InvoiceDocument(
        document_type=DOCUMENT_TYPE_INVOICE,
        document_id=document_id,
        uuid=document_uuid_for(config.supplier, document_id),
        issuing_system=issuing_system,
        issue_date=dates.issue_date,
        tax_point_date=dates.tax_point_date,
        vat_applicable=vat_applicable,
        currency_code=config.currency,
        supplier=build_party(
            config.supplier,
            vat_applicable=vat_applicable,
            default_country_code=SUPPLIER_COUNTRY_CODE,
        ),
        customer=build_party(
            recipient,
            vat_applicable=vat_applicable,
            default_country_code=CUSTOMER_COUNTRY_CODE,
        ),
        lines=lines,
        tax_total=tax_total,
        legal_monetary_total=legal_monetary_total,
        payment_means=payment_means,
    )


def assemble_invoice(
    config: Config,
    invoice: InvoiceInput,
    *,
    year: Optional[int] = None,
    clock: Callable[[], datetime] | None = None,
    issuing_system: str = DEFAULT_ISSUING_SYSTEM,
) -> InvoiceDocument:
    """Führt die komplette Berechnung aus und liefert das fertige Dokument.

    Fehler (``ConfigurationError``, ``InvalidLineItemError``) werden nicht
    abgefangen; ohne vollständiges Dokument gibt es kein Ergebnis.
    """

    year = billing_year(year, clock)

    recipient = resolve_recipient(config, invoice.recipient_id)
    billings = resolve_all(invoice.items)
    totals = compute_totals(billings, config.supplier.tax_id)
    dates = compute_dates(invoice.month, config.due_days, year=year)

    document = build_invoice_document(
        config,
        invoice,
        recipient,
        billings,
        totals,
        dates,
        year=year,
        issuing_system=issuing_system,
    )
    logger.debug(
        "assembled invoice %s for %s: total=%s %s",
        document.document_id,
        recipient.name,
        totals.total,
        config.currency,
    )
    return document
