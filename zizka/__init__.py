"""zizka – ISDOC-Rechnungen aus YAML-Abrechnungsdaten."""

from .assembler import MONTH_LABELS, assemble_invoice, build_invoice_document
from .billing import BillingVariant, ResolvedBilling, resolve_billing
from .dates import InvoiceDates, compute_dates, last_day_of_month
from .document import InvoiceDocument
from .errors import (
    ConfigurationError,
    DocumentValidationError,
    InputValidationError,
    InvalidLineItemError,
    InvoiceError,
    OutputWriteError,
)
from .isdoc import build_isdoc_xml, validate_isdoc, version
from .loader import load_config, load_invoice
from .models import Address, CompanyConfig, Config, InvoiceInput, LineItem
from .money import MonetaryTotals, compute_totals, round2
from .recipients import resolve_recipient

__all__ = [
    "MONTH_LABELS",
    "assemble_invoice",
    "build_invoice_document",
    "BillingVariant",
    "ResolvedBilling",
    "resolve_billing",
    "InvoiceDates",
    "compute_dates",
    "last_day_of_month",
    "InvoiceDocument",
    "ConfigurationError",
    "DocumentValidationError",
    "InputValidationError",
    "InvalidLineItemError",
    "InvoiceError",
    "OutputWriteError",
    "build_isdoc_xml",
    "validate_isdoc",
    "version",
    "load_config",
    "load_invoice",
    "Address",
    "CompanyConfig",
    "Config",
    "InvoiceInput",
    "LineItem",
    "MonetaryTotals",
    "compute_totals",
    "round2",
    "resolve_recipient",
]
