from __future__ import annotations

import logging
import textwrap
from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

from zizka.logging import LOGGER_NAME
from zizka.models import Address, CompanyConfig, Config, InvoiceInput, LineItem


def make_company(name: str, company_id: str, tax_id: str = "") -> CompanyConfig:
    return CompanyConfig(
        name=name,
        company_id=company_id,
        tax_id=tax_id,
        address=Address(street="Vinohradská 1", city="Praha", zip="12000"),
    )


SUPPLIER = make_company("Jan Žižka", "12345678")
VAT_SUPPLIER = make_company("Žižka s.r.o.", "87654321", tax_id="CZ123")
ACME = make_company("ACME a.s.", "11111111", tax_id="CZ11111111")
GLOBEX = make_company("Globex s.r.o.", "22222222")


@pytest.fixture(autouse=True)
def reset_zizka_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def companies() -> dict[str, CompanyConfig]:
    return {"supplier": SUPPLIER, "vat_supplier": VAT_SUPPLIER, "acme": ACME, "globex": GLOBEX}


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    def _clock() -> datetime:
        return datetime(2026, 10, 19, 9, 30)

    return _clock


@pytest.fixture
def make_config() -> Callable[..., Config]:
    def _make(**overrides) -> Config:
        data = {
            "supplier": SUPPLIER,
            "recipients": {"acme": ACME, "globex": GLOBEX},
            "due_days": 14,
            "currency": "CZK",
        }
        data.update(overrides)
        return Config(**data)

    return _make


@pytest.fixture
def make_invoice() -> Callable[..., InvoiceInput]:
    def _make(*items: LineItem, **overrides) -> InvoiceInput:
        data = {
            "nr": "7",
            "month": 3,
            "payment_id": "20260007",
            "items": items or (LineItem(text="Vývoj za {{month}}", md=10, md_rate=2500),),
        }
        data.update(overrides)
        return InvoiceInput(**data)

    return _make


CONFIG_YAML = """\
supplier:
  name: Jan Žižka
  company_id: "12345678"
  tax_id: CZ123
  address:
    street: Vinohradská 1
    city: Praha
    zip: "12000"
  bank_account: 2701799387/2010
recipients:
  acme:
    name: ACME a.s.
    company_id: "11111111"
    tax_id: CZ11111111
    address:
      street: Na Příkopě 5
      city: Praha
      zip: 11000
  globex:
    name: Globex s.r.o.
    company_id: 22222222
    address:
      street: Masarykova 10
      city: Brno
      zip: "60200"
due_days: 30
currency: CZK
"""

INVOICE_YAML = """\
nr: 12
month: 12
payment_id: "20260012"
recipient_id: globex
items:
  - text: Vývoj za {{month}}
    md: 10
    md_rate: 2500
  - text: Konzultace
    hr: 8
    hr_rate: 750
"""


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_file(write_yaml) -> Path:
    return write_yaml("config.yaml", CONFIG_YAML)


@pytest.fixture
def invoice_file(write_yaml) -> Path:
    return write_yaml("2026-12.yaml", INVOICE_YAML)
