"""ISDOC-Rechnung aus ``config.yaml`` und ``invoice.yaml`` erzeugen.

    zizka -c config.yaml -i 2026-03.yaml

Die Datei wird neben der Rechnungs-YAML abgelegt (gleicher Basisname,
Endung ``.isdoc``).
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional

from .assembler import assemble_invoice
from .errors import DocumentValidationError, InvoiceError, OutputWriteError
from .isdoc import build_isdoc_xml, validate_isdoc
from .loader import load_config, load_invoice
from .logging import configure_logging, run_log_context
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def output_path_for(invoice_path: Path, suffix: str = ".isdoc") -> Path:
    return invoice_path.with_name(invoice_path.stem + suffix)


def _fixed_clock(now: datetime) -> Callable[[], datetime]:
    def _clock() -> datetime:
        return now

    return _clock


def generate_invoice(
    config_path: Path,
    invoice_path: Path,
    *,
    now: Optional[datetime] = None,
    dry_run: bool = False,
    include_document: bool = False,
    settings: Settings | None = None,
) -> dict:
    """Lädt beide Eingaben, baut das Dokument und schreibt die ISDOC-Datei.

    Die Datei wird erst geschrieben, wenn Berechnung, Serialisierung und
    Validierung vollständig durchgelaufen sind.
    """

    settings = settings or default_settings
    config = load_config(config_path)
    invoice = load_invoice(invoice_path)

    document = assemble_invoice(
        config,
        invoice,
        clock=_fixed_clock(now) if now is not None else None,
        issuing_system=settings.issuing_system,
    )
    xml_bytes = build_isdoc_xml(document)

    validation = None
    if settings.validate_output:
        validation = validate_isdoc(xml_bytes, settings.isdoc_xsd_path)
        if not validation.schema_ok:
            raise DocumentValidationError(validation.messages)
        logger.debug("validation: %s", validation.messages)

    out_path = output_path_for(invoice_path, settings.output_suffix)
    if not dry_run:
        try:
            out_path.write_bytes(xml_bytes)
        except OSError as err:
            raise OutputWriteError(out_path, err.strerror or str(err)) from err

    summary = {
        "output": str(out_path),
        "document_id": document.document_id,
        "customer": document.customer.name,
        "currency": document.currency_code,
        "tax_exclusive": str(document.legal_monetary_total.tax_exclusive_amount),
        "tax_inclusive": str(document.legal_monetary_total.tax_inclusive_amount),
        "due_date": document.payment_means.details.payment_due_date.date().isoformat(),
        "validation": validation.to_dict() if validation else None,
        "dry_run": dry_run,
    }
    if include_document:
        summary["document"] = document.to_dict()
    return summary


def _iso_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid ISO-8601 timestamp: {value!r}") from err


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="zizka", description="Generate an ISDOC invoice")
    parser.add_argument("-c", "--config", type=Path, required=True, help="path to config.yaml")
    parser.add_argument("-i", "--invoice", type=Path, required=True, help="path to invoice.yaml")
    parser.add_argument("--dry-run", action="store_true", help="Compute and validate, write nothing")
    parser.add_argument("--verbose", action="store_true", help="Debug logging and JSON result")
    parser.add_argument(
        "--now",
        type=_iso_datetime,
        help="ISO-8601 timestamp used instead of the system clock (e.g. 2026-01-15T09:00:00)",
    )
    return parser.parse_args(None if argv is None else list(argv))


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    level = "DEBUG" if args.verbose else default_settings.log_level
    configure_logging(level, json_output=default_settings.log_json)

    try:
        with run_log_context(config_path=str(args.config), invoice_path=str(args.invoice)) as event:
            output = generate_invoice(
                args.config,
                args.invoice,
                now=args.now,
                dry_run=args.dry_run,
                include_document=args.verbose,
            )
            event["document_id"] = output["document_id"]
            event["output"] = output["output"]
    except InvoiceError as err:
        logger.debug("generation failed", exc_info=err)
        return 1

    if args.verbose:
        print(json.dumps(output, indent=2, ensure_ascii=False, default=str))
    if not args.dry_run:
        print(f"→ {output['output']} generated")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
