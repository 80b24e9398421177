"""Betragsberechnung für ISDOC-Rechnungen.

Alle Beträge sind ``Decimal`` und werden mit ``ROUND_HALF_UP`` auf zwei
Nachkommastellen quantisiert. Gerundet wird an jeder Stelle, an der ein Betrag
entsteht, nicht erst am Ende. Abweichungen zwischen Gesamtsumme und der Summe
einzeln gerundeter Positionswerte bleiben erhalten.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import TYPE_CHECKING, Iterable, Tuple

if TYPE_CHECKING:
    from .billing import ResolvedBilling

logger = logging.getLogger(__name__)

DecimalLike = Decimal | str | int | float

STANDARD_VAT_PERCENT = Decimal("21")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: DecimalLike) -> Decimal:
    """Konvertiere Eingaben deterministisch in ``Decimal``.

    Floats laufen über ``str``, damit z. B. ``2.005`` als ``Decimal("2.005")``
    ankommt und nicht als binäre Näherung.
    """

    if isinstance(value, bool):
        raise TypeError(f"Unsupported decimal input: {type(value)!r}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, str, float)):
        return Decimal(str(value))
    raise TypeError(f"Unsupported decimal input: {type(value)!r}")


def round2(amount: DecimalLike) -> Decimal:
    """Rundet Beträge auf zwei Nachkommastellen (ROUND_HALF_UP)."""

    return to_decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def is_vat_applicable(tax_id: str | None) -> bool:
    return bool(tax_id and tax_id.strip())


def vat_percent_for(tax_id: str | None) -> Decimal:
    return STANDARD_VAT_PERCENT if is_vat_applicable(tax_id) else ZERO


@dataclass(frozen=True, slots=True)
class LineAmounts:
    quantity: Decimal
    unit_price: Decimal
    amount: Decimal
    # nicht gerundet, siehe compute_line_amounts
    amount_tax_inclusive: Decimal
    tax_amount: Decimal
    unit_price_tax_inclusive: Decimal


@dataclass(frozen=True, slots=True)
class MonetaryTotals:
    vat_applicable: bool
    vat_percent: Decimal
    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal
    lines: Tuple[LineAmounts, ...]


def compute_line_amounts(billing: ResolvedBilling, vat_percent: Decimal) -> LineAmounts:
    """Berechnet die Beträge einer Position.

    Der Bruttobetrag der Position wird nicht gerundet, Steuerbetrag und
    Bruttoeinzelpreis dagegen schon. Das entspricht den Feldern, die das
    ISDOC-Schema pro Zeile erwartet.
    """

    factor = 1 + vat_percent / HUNDRED
    amount = round2(billing.quantity * billing.rate)
    return LineAmounts(
        quantity=billing.quantity,
        unit_price=billing.rate,
        amount=amount,
        amount_tax_inclusive=amount * factor,
        tax_amount=round2(amount * vat_percent / HUNDRED),
        unit_price_tax_inclusive=round2(billing.rate * factor),
    )


def compute_totals(billings: Iterable[ResolvedBilling], supplier_tax_id: str | None) -> MonetaryTotals:
    vat_applicable = is_vat_applicable(supplier_tax_id)
    vat_percent = vat_percent_for(supplier_tax_id)

    lines = tuple(compute_line_amounts(billing, vat_percent) for billing in billings)
    subtotal = sum((line.amount for line in lines), Decimal("0.00"))
    tax_amount = round2(subtotal * vat_percent / HUNDRED)
    total = round2(subtotal * (1 + vat_percent / HUNDRED))

    logger.debug(
        "totals computed: lines=%d subtotal=%s vat=%s tax=%s total=%s",
        len(lines),
        subtotal,
        vat_percent,
        tax_amount,
        total,
    )
    return MonetaryTotals(
        vat_applicable=vat_applicable,
        vat_percent=vat_percent,
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=total,
        lines=lines,
    )
