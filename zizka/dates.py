"""Ausstellungs- und Fälligkeitsdatum einer Monatsrechnung."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from .errors import ConfigurationError

ISSUE_HOUR = 12


def _default_clock() -> datetime:
    return datetime.now()


@dataclass(frozen=True, slots=True)
class InvoiceDates:
    issue_date: datetime
    due_date: datetime

    @property
    def tax_point_date(self) -> datetime:
        return self.issue_date


def last_day_of_month(year: int, month: int) -> datetime:
    """Tag 0 des Folgemonats um 12:00 Uhr, d. h. der letzte Tag von ``month``.

    Für Dezember läuft der Folgemonat in den Januar des nächsten Jahres über.
    """

    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ConfigurationError(f"invalid month {month!r}: expected 1-12")
    carry, next_month = divmod(month, 12)
    first_of_next = datetime(year + carry, next_month + 1, 1, ISSUE_HOUR)
    return first_of_next - timedelta(days=1)


def billing_year(year: Optional[int] = None, clock: Callable[[], datetime] | None = None) -> int:
    """Explizites ``year`` gewinnt, sonst das Jahr der (injizierbaren) Uhr."""

    if year is not None:
        return year
    return (clock or _default_clock)().year


def compute_dates(
    month: int,
    due_days: int,
    *,
    year: Optional[int] = None,
    clock: Callable[[], datetime] | None = None,
) -> InvoiceDates:
    issue_date = last_day_of_month(billing_year(year, clock), month)
    return InvoiceDates(issue_date=issue_date, due_date=issue_date + timedelta(days=due_days))
