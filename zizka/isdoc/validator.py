"""Offline-Validator für erzeugte ISDOC-Dokumente.

Ohne XSD werden nur Struktur und Summen geprüft. Ist ein offizielles
ISDOC-Schema hinterlegt (``ZIZKA_ISDOC_XSD_PATH``), wird zusätzlich dagegen
validiert.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List, Optional

from lxml import etree

from .generator import GENERATOR_VERSION, ISDOC_NAMESPACE, ISDOC_VERSION

REQUIRED_HEADER = (
    "DocumentType",
    "ID",
    "UUID",
    "IssueDate",
    "VATApplicable",
    "LocalCurrencyCode",
    "AccountingSupplierParty",
    "AccountingCustomerParty",
    "InvoiceLines",
    "TaxTotal",
    "LegalMonetaryTotal",
)

_NSMAP = {"isdoc": ISDOC_NAMESPACE}


@dataclass(frozen=True)
class ISDOCValidationResult:
    schema_ok: bool
    messages: List[str]

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def _parse_decimal(text: Optional[str]) -> Decimal:
    return Decimal((text or "0").strip())


def _validate_with_xsd(xml_doc: etree._Element, xsd_path: Path) -> ISDOCValidationResult:
    try:
        schema = etree.XMLSchema(etree.parse(str(xsd_path)))
    except (OSError, etree.XMLSchemaParseError, etree.XMLSyntaxError) as err:
        return ISDOCValidationResult(False, [f"XSD_VALIDATOR: cannot load {xsd_path.name} – {err}"])
    if schema.validate(xml_doc):
        return ISDOCValidationResult(True, [f"XSD_VALIDATOR: Schema validation OK ({xsd_path.name})"])
    return ISDOCValidationResult(
        False, [f"XSD_VALIDATOR: Schema validation failed: {schema.error_log.last_error}"]
    )


def _validate_structure(root: etree._Element) -> ISDOCValidationResult:
    messages: List[str] = []

    if root.tag != f"{{{ISDOC_NAMESPACE}}}Invoice":
        messages.append("STRUCTURE: Root element must be isdoc 'Invoice'")
        return ISDOCValidationResult(False, messages)
    if root.get("version") != ISDOC_VERSION:
        messages.append(f"STRUCTURE: version attribute must be {ISDOC_VERSION}")
        return ISDOCValidationResult(False, messages)

    missing = [tag for tag in REQUIRED_HEADER if root.find(f"isdoc:{tag}", _NSMAP) is None]
    if missing:
        messages.append(f"STRUCTURE: missing elements {', '.join(missing)}")
        return ISDOCValidationResult(False, messages)

    lines = root.findall("isdoc:InvoiceLines/isdoc:InvoiceLine", _NSMAP)
    if not lines:
        messages.append("STRUCTURE: at least one InvoiceLine required")
        return ISDOCValidationResult(False, messages)

    try:
        line_sum = sum(
            (_parse_decimal(line.findtext("isdoc:LineExtensionAmount", namespaces=_NSMAP)) for line in lines),
            Decimal("0"),
        )
        tax_exclusive = _parse_decimal(
            root.findtext("isdoc:LegalMonetaryTotal/isdoc:TaxExclusiveAmount", namespaces=_NSMAP)
        )
        tax_inclusive = _parse_decimal(
            root.findtext("isdoc:LegalMonetaryTotal/isdoc:TaxInclusiveAmount", namespaces=_NSMAP)
        )
        payable = _parse_decimal(
            root.findtext("isdoc:LegalMonetaryTotal/isdoc:PayableAmount", namespaces=_NSMAP)
        )
    except InvalidOperation as err:
        messages.append(f"TOTALS: Invalid monetary amount – {err!r}")
        return ISDOCValidationResult(False, messages)

    if line_sum != tax_exclusive:
        messages.append(f"TOTALS: line sum {line_sum} != TaxExclusiveAmount {tax_exclusive}")
        return ISDOCValidationResult(False, messages)
    if payable != tax_inclusive:
        messages.append("TOTALS: PayableAmount vs TaxInclusiveAmount mismatch")
        return ISDOCValidationResult(False, messages)

    messages.append(f"STRUCTURE: ISDOC {ISDOC_VERSION} document validated ({GENERATOR_VERSION})")
    return ISDOCValidationResult(True, messages)


def validate_isdoc(xml_bytes: bytes, xsd_path: Path | str | None = None) -> ISDOCValidationResult:
    try:
        root = etree.fromstring(xml_bytes)
    except etree.XMLSyntaxError as err:
        return ISDOCValidationResult(False, [f"STRUCTURE: XML parse error – {err}"])

    result = _validate_structure(root)
    if not result.schema_ok or xsd_path is None:
        return result

    xsd_result = _validate_with_xsd(root, Path(xsd_path))
    return ISDOCValidationResult(xsd_result.schema_ok, result.messages + xsd_result.messages)
