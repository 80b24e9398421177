"""Tests for the zizka command line entry point."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest
from lxml import etree

from zizka.cli import generate_invoice, main, output_path_for
from zizka.errors import DocumentValidationError, OutputWriteError
from zizka.isdoc import ISDOC_NAMESPACE
from zizka.settings import Settings

NS = {"i": ISDOC_NAMESPACE}
NOW = datetime(2026, 10, 19, 9, 30)


def test_output_path_beside_invoice() -> None:
    assert output_path_for(Path("/data/2026/invoice-03.yaml")) == Path("/data/2026/invoice-03.isdoc")
    assert output_path_for(Path("inv.v2.yml"), ".xml") == Path("inv.v2.xml")


def test_generate_invoice_writes_isdoc(config_file: Path, invoice_file: Path) -> None:
    result = generate_invoice(config_file, invoice_file, now=NOW)

    out_path = invoice_file.with_suffix(".isdoc")
    assert result["output"] == str(out_path)
    assert result["document_id"] == "2026/12"
    assert result["customer"] == "Globex s.r.o."
    assert result["tax_exclusive"] == "31000.00"
    assert result["tax_inclusive"] == "37510.00"
    assert result["due_date"] == "2027-01-30"
    assert result["validation"]["schema_ok"] is True

    root = etree.fromstring(out_path.read_bytes())
    assert root.findtext("i:ID", namespaces=NS) == "2026/12"
    assert root.findtext("i:IssueDate", namespaces=NS) == "2026-12-31"
    lines = root.findall("i:InvoiceLines/i:InvoiceLine", NS)
    assert lines[0].findtext("i:Item/i:Description", namespaces=NS) == "Vývoj za prosinec"


def test_dry_run_writes_nothing(config_file: Path, invoice_file: Path) -> None:
    result = generate_invoice(config_file, invoice_file, now=NOW, dry_run=True)

    assert result["dry_run"] is True
    assert not invoice_file.with_suffix(".isdoc").exists()


def test_settings_control_suffix_and_issuing_system(config_file: Path, invoice_file: Path) -> None:
    custom = Settings(output_suffix="xml", issuing_system="fakturace", validate_output=False)
    result = generate_invoice(config_file, invoice_file, now=NOW, settings=custom)

    out_path = invoice_file.with_suffix(".xml")
    assert result["output"] == str(out_path)
    assert result["validation"] is None
    root = etree.fromstring(out_path.read_bytes())
    assert root.findtext("i:IssuingSystem", namespaces=NS) == "fakturace"


def test_failed_validation_writes_nothing(config_file: Path, invoice_file: Path, tmp_path: Path) -> None:
    custom = Settings(isdoc_xsd_path=tmp_path / "missing.xsd")
    with pytest.raises(DocumentValidationError, match="XSD_VALIDATOR"):
        generate_invoice(config_file, invoice_file, now=NOW, settings=custom)

    assert not invoice_file.with_suffix(".isdoc").exists()


def test_main_success(config_file: Path, invoice_file: Path, capsys) -> None:
    code = main(["-c", str(config_file), "-i", str(invoice_file), "--now", "2026-10-19T09:30:00"])

    assert code == 0
    out = capsys.readouterr().out
    assert f"→ {invoice_file.with_suffix('.isdoc')} generated" in out
    assert invoice_file.with_suffix(".isdoc").exists()


def test_main_verbose_dry_run(config_file: Path, invoice_file: Path, capsys) -> None:
    code = main(
        ["--config", str(config_file), "--invoice", str(invoice_file), "--dry-run", "--verbose", "--now", "2030-01-01"]
    )

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["document_id"] == "2030/12"
    assert output["dry_run"] is True
    assert output["document"]["uuid"]
    assert output["document"]["payment_means"]["details"]["variable_symbol"] == "20260012"
    assert output["document"]["legal_monetary_total"]["payable_amount"] == "37510.00"
    assert not invoice_file.with_suffix(".isdoc").exists()


def test_main_invalid_item_fails(config_file: Path, write_yaml) -> None:
    invoice_path = write_yaml(
        "bad.yaml",
        """\
        nr: 1
        month: 5
        payment_id: "1"
        items:
          - {text: Bez sazby, hr: 8}
        """,
    )

    assert main(["-c", str(config_file), "-i", str(invoice_path)]) == 1
    assert not invoice_path.with_suffix(".isdoc").exists()


def test_main_requires_both_paths(config_file: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["-c", str(config_file)])
    assert excinfo.value.code == 2


def test_main_rejects_bad_now(config_file: Path, invoice_file: Path) -> None:
    with pytest.raises(SystemExit):
        main(["-c", str(config_file), "-i", str(invoice_file), "--now", "yesterday"])


def test_unwritable_output_is_reported(config_file: Path, invoice_file: Path) -> None:
    invoice_file.with_suffix(".isdoc").mkdir()

    with pytest.raises(OutputWriteError) as excinfo:
        generate_invoice(config_file, invoice_file, now=NOW)
    assert excinfo.value.path == invoice_file.with_suffix(".isdoc")


def test_main_unwritable_output_exits_with_error(config_file: Path, invoice_file: Path) -> None:
    invoice_file.with_suffix(".isdoc").mkdir()

    assert main(["-c", str(config_file), "-i", str(invoice_file), "--now", "2026-10-19T09:30:00"]) == 1


def test_summary_omits_document_by_default(config_file: Path, invoice_file: Path) -> None:
    result = generate_invoice(config_file, invoice_file, now=NOW, dry_run=True)

    assert "document" not in result
