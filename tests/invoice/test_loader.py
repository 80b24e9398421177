"""Tests for YAML loading and boundary validation."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from zizka.errors import ConfigurationError, InputValidationError
from zizka.loader import load_config, load_invoice


def test_load_config(config_file: Path) -> None:
    config = load_config(config_file)

    assert config.supplier.name == "Jan Žižka"
    assert config.supplier.tax_id == "CZ123"
    assert config.supplier.bank_account == "2701799387/2010"
    assert list(config.recipients) == ["acme", "globex"]
    assert config.recipients["acme"].address.zip == "11000"
    assert config.recipients["globex"].company_id == "22222222"
    assert config.recipients["globex"].tax_id == ""
    assert config.recipient is None
    assert config.due_days == 30
    assert config.currency == "CZK"


def test_load_legacy_config(write_yaml) -> None:
    path = write_yaml(
        "legacy.yaml",
        """\
        supplier:
          name: Jan Žižka
          company_id: "12345678"
          tax_id: ""
          address: {street: Vinohradská 1, city: Praha, zip: "12000"}
        recipient:
          name: ACME a.s.
          company_id: "11111111"
          tax_id: CZ11111111
          address: {street: Na Příkopě 5, city: Praha, zip: "11000"}
        due_days: 14
        currency: czk
        """,
    )
    config = load_config(path)

    assert config.recipients == {}
    assert config.recipient.name == "ACME a.s."
    assert config.currency == "CZK"


def test_load_invoice(invoice_file: Path) -> None:
    invoice = load_invoice(invoice_file)

    assert invoice.nr == "12"
    assert invoice.month == 12
    assert invoice.payment_id == "20260012"
    assert invoice.recipient_id == "globex"
    assert [item.text for item in invoice.items] == ["Vývoj za {{month}}", "Konzultace"]
    assert invoice.items[0].md == Decimal("10")
    assert invoice.items[1].hr_rate == Decimal("750")


def test_float_quantities_keep_their_decimal_text(write_yaml) -> None:
    path = write_yaml(
        "float.yaml",
        """\
        nr: "3"
        month: 1
        payment_id: "1"
        items:
          - {text: Půlden, md: 0.5, md_rate: 2.005}
        """,
    )
    item = load_invoice(path).items[0]
    assert item.md == Decimal("0.5")
    assert item.md_rate == Decimal("2.005")


@pytest.mark.parametrize(
    "content, fragment",
    [
        ("- just\n- a list\n", "mapping"),
        ("nr: [unclosed\n", "invalid YAML"),
        ("nr: 1\nmonth: 1\npayment_id: x\nitems: []\n", "items"),
        ("nr: 1\npayment_id: x\nitems:\n  - {text: a, md: 1, md_rate: 1}\n", "month"),
        ("nr: 1\nmonth: 1\npayment_id: x\nitems:\n  - {md: 1, md_rate: 1}\n", "items.0.text"),
        ("nr: 1\nmonth: 1\npayment_id: x\nitems:\n  - {text: a, md: abc, md_rate: 1}\n", "items.0.md"),
    ],
    ids=["not_mapping", "broken_yaml", "no_items", "no_month", "no_text", "bad_number"],
)
def test_invalid_invoice_rejected(write_yaml, content: str, fragment: str) -> None:
    path = write_yaml("broken.yaml", content)
    with pytest.raises(InputValidationError) as excinfo:
        load_invoice(path)

    assert fragment in str(excinfo.value)
    assert excinfo.value.path == path
    assert isinstance(excinfo.value, ConfigurationError)


@pytest.mark.parametrize(
    "content, fragment",
    [
        ("due_days: 14\ncurrency: CZK\n", "supplier"),
        (
            "supplier: {name: a, company_id: '1', address: {street: s, city: c, zip: '1'}}\n"
            "due_days: -1\ncurrency: CZK\n",
            "due_days",
        ),
        (
            "supplier: {name: a, company_id: '1', address: {street: s, city: c, zip: '1'}}\n"
            "due_days: 14\ncurrency: KORUNA\n",
            "currency",
        ),
    ],
    ids=["no_supplier", "negative_due_days", "bad_currency"],
)
def test_invalid_config_rejected(write_yaml, content: str, fragment: str) -> None:
    path = write_yaml("config.yaml", content)
    with pytest.raises(InputValidationError, match=fragment):
        load_config(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputValidationError, match="cannot read file"):
        load_config(tmp_path / "missing.yaml")
