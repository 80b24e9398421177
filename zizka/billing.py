"""Auflösung der Abrechnungsvariante je Position (Manntage oder Stunden)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable, List

from .errors import InvalidLineItemError
from .models import LineItem

logger = logging.getLogger(__name__)


class BillingVariant(str, Enum):
    MAN_DAY = "md"
    HOUR = "hr"


@dataclass(frozen=True, slots=True)
class ResolvedBilling:
    quantity: Decimal
    rate: Decimal
    variant: BillingVariant


def resolve_billing(item: LineItem) -> ResolvedBilling:
    """Ermittelt Menge und Satz einer Position.

    Manntage haben Vorrang: ist ``md`` + ``md_rate`` vollständig, gewinnt diese
    Variante auch dann, wenn zusätzlich Stundenfelder gesetzt sind.
    """

    if item.md is not None and item.md_rate is not None:
        return ResolvedBilling(item.md, item.md_rate, BillingVariant.MAN_DAY)
    if item.hr is not None and item.hr_rate is not None:
        return ResolvedBilling(item.hr, item.hr_rate, BillingVariant.HOUR)
    raise InvalidLineItemError(item.text)


def resolve_all(items: Iterable[LineItem]) -> List[ResolvedBilling]:
    billings = [resolve_billing(item) for item in items]
    logger.debug("resolved billing variants: %s", [b.variant.value for b in billings])
    return billings
