"""ISDOC 6.0.1 Generator (lxml)."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from lxml import etree

from zizka.document import (
    InvoiceDocument,
    InvoiceLine,
    LegalMonetaryTotal,
    Party,
    PaymentMeans,
    TaxTotal,
)

ISDOC_NAMESPACE = "http://isdoc.cz/namespace/2013"
ISDOC_VERSION = "6.0.1"
GENERATOR_VERSION = "zizka-isdoc-1.0.0"

_NS = "{%s}" % ISDOC_NAMESPACE


def version() -> str:
    return GENERATOR_VERSION


def _format_decimal(value: Decimal) -> str:
    return format(value, "f")


def _format_date(value: datetime | date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _sub(parent: etree._Element, tag: str, text: Optional[str] = None) -> etree._Element:
    element = etree.SubElement(parent, _NS + tag)
    if text is not None:
        element.text = text
    return element


def _render_party(parent: etree._Element, wrapper: str, party: Party) -> None:
    node = _sub(_sub(parent, wrapper), "Party")
    _sub(_sub(node, "PartyIdentification"), "ID", party.identification)
    _sub(_sub(node, "PartyName"), "Name", party.name)

    address = party.postal_address
    postal = _sub(node, "PostalAddress")
    _sub(postal, "StreetName", address.street_name)
    _sub(postal, "BuildingNumber", address.building_number)
    _sub(postal, "CityName", address.city_name)
    _sub(postal, "PostalZone", address.postal_zone)
    country = _sub(postal, "Country")
    _sub(country, "IdentificationCode", address.country.identification_code)
    _sub(country, "Name", address.country.name)

    tax_scheme = _sub(node, "PartyTaxScheme")
    _sub(tax_scheme, "CompanyID", party.tax_scheme.company_id)
    _sub(tax_scheme, "TaxScheme", party.tax_scheme.tax_scheme)


def _render_invoice_line(parent: etree._Element, line: InvoiceLine) -> None:
    node = _sub(parent, "InvoiceLine")
    _sub(node, "ID", line.line_id)
    _sub(node, "InvoicedQuantity", _format_decimal(line.invoiced_quantity))
    _sub(node, "LineExtensionAmount", _format_decimal(line.line_extension_amount))
    _sub(
        node,
        "LineExtensionAmountTaxInclusive",
        _format_decimal(line.line_extension_amount_tax_inclusive),
    )
    _sub(node, "LineExtensionTaxAmount", _format_decimal(line.line_extension_tax_amount))
    _sub(node, "UnitPrice", _format_decimal(line.unit_price))
    _sub(node, "UnitPriceTaxInclusive", _format_decimal(line.unit_price_tax_inclusive))

    category = line.classified_tax_category
    category_node = _sub(node, "ClassifiedTaxCategory")
    _sub(category_node, "Percent", _format_decimal(category.percent))
    _sub(category_node, "VATCalculationMethod", str(category.vat_calculation_method))
    _sub(category_node, "VATApplicable", _format_bool(category.vat_applicable))

    _sub(_sub(node, "Item"), "Description", line.description)


def _render_tax_total(parent: etree._Element, tax_total: TaxTotal) -> None:
    node = _sub(parent, "TaxTotal")
    sub_total = tax_total.sub_total
    sub = _sub(node, "TaxSubTotal")
    _sub(sub, "TaxableAmount", _format_decimal(sub_total.taxable_amount))
    _sub(sub, "TaxAmount", _format_decimal(sub_total.tax_amount))
    _sub(sub, "TaxInclusiveAmount", _format_decimal(sub_total.tax_inclusive_amount))
    _sub(sub, "AlreadyClaimedTaxableAmount", _format_decimal(sub_total.already_claimed_taxable_amount))
    _sub(sub, "AlreadyClaimedTaxAmount", _format_decimal(sub_total.already_claimed_tax_amount))
    _sub(
        sub,
        "AlreadyClaimedTaxInclusiveAmount",
        _format_decimal(sub_total.already_claimed_tax_inclusive_amount),
    )
    _sub(sub, "DifferenceTaxableAmount", _format_decimal(sub_total.difference_taxable_amount))
    _sub(sub, "DifferenceTaxAmount", _format_decimal(sub_total.difference_tax_amount))
    _sub(
        sub,
        "DifferenceTaxInclusiveAmount",
        _format_decimal(sub_total.difference_tax_inclusive_amount),
    )
    category = _sub(sub, "TaxCategory")
    _sub(category, "Percent", _format_decimal(sub_total.tax_category.percent))
    _sub(category, "VATApplicable", _format_bool(sub_total.tax_category.vat_applicable))
    _sub(node, "TaxAmount", _format_decimal(tax_total.tax_amount))


def _render_legal_monetary_total(parent: etree._Element, total: LegalMonetaryTotal) -> None:
    node = _sub(parent, "LegalMonetaryTotal")
    for tag, value in (
        ("TaxExclusiveAmount", total.tax_exclusive_amount),
        ("TaxInclusiveAmount", total.tax_inclusive_amount),
        ("AlreadyClaimedTaxExclusiveAmount", total.already_claimed_tax_exclusive_amount),
        ("AlreadyClaimedTaxInclusiveAmount", total.already_claimed_tax_inclusive_amount),
        ("DifferenceTaxExclusiveAmount", total.difference_tax_exclusive_amount),
        ("DifferenceTaxInclusiveAmount", total.difference_tax_inclusive_amount),
        ("PayableRoundingAmount", total.payable_rounding_amount),
        ("PaidDepositsAmount", total.paid_deposits_amount),
        ("PayableAmount", total.payable_amount),
    ):
        _sub(node, tag, _format_decimal(value))


def _render_payment_means(parent: etree._Element, means: PaymentMeans) -> None:
    payment = _sub(_sub(parent, "PaymentMeans"), "Payment")
    _sub(payment, "PaidAmount", _format_decimal(means.paid_amount))
    _sub(payment, "PaymentMeansCode", str(means.payment_means_code))
    details = means.details
    node = _sub(payment, "Details")
    _sub(node, "PaymentDueDate", _format_date(details.payment_due_date))
    _sub(node, "ID", details.account_id)
    _sub(node, "BankCode", details.bank_code)
    _sub(node, "Name", details.name)
    _sub(node, "IBAN", details.iban)
    _sub(node, "BIC", details.bic)
    _sub(node, "VariableSymbol", details.variable_symbol)
    _sub(node, "ConstantSymbol", details.constant_symbol)
    _sub(node, "SpecificSymbol", details.specific_symbol)


def build_isdoc_tree(document: InvoiceDocument) -> etree._Element:
    root = etree.Element(_NS + "Invoice", nsmap={None: ISDOC_NAMESPACE})
    root.set("version", ISDOC_VERSION)

    _sub(root, "DocumentType", str(document.document_type))
    _sub(root, "ID", document.document_id)
    _sub(root, "UUID", document.uuid)
    _sub(root, "IssuingSystem", document.issuing_system)
    _sub(root, "IssueDate", _format_date(document.issue_date))
    _sub(root, "TaxPointDate", _format_date(document.tax_point_date))
    _sub(root, "VATApplicable", _format_bool(document.vat_applicable))
    _sub(root, "ElectronicPossibilityAgreementReference", "")
    _sub(root, "LocalCurrencyCode", document.currency_code)
    _sub(root, "CurrRate", "1")
    _sub(root, "RefCurrRate", "1")

    _render_party(root, "AccountingSupplierParty", document.supplier)
    _render_party(root, "AccountingCustomerParty", document.customer)

    lines = _sub(root, "InvoiceLines")
    for line in document.lines:
        _render_invoice_line(lines, line)

    _render_tax_total(root, document.tax_total)
    _render_legal_monetary_total(root, document.legal_monetary_total)
    _render_payment_means(root, document.payment_means)
    return root


def build_isdoc_xml(document: InvoiceDocument) -> bytes:
    return etree.tostring(
        build_isdoc_tree(document),
        xml_declaration=True,
        encoding="UTF-8",
        pretty_print=True,
    )
