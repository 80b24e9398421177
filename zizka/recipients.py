"""Auswahl des Rechnungsempfängers aus der Konfiguration."""

from __future__ import annotations

from typing import Optional

from .errors import ConfigurationError
from .models import CompanyConfig, Config


def resolve_recipient(config: Config, recipient_id: Optional[str] = None) -> CompanyConfig:
    """Liefert den Empfänger für eine Rechnung.

    Reihenfolge: Eintrag ``recipients[recipient_id]``; ohne ``recipient_id``
    der erste Eintrag in Deklarationsreihenfolge; danach das alte Einzelfeld
    ``recipient``.
    """

    if recipient_id is not None and recipient_id in config.recipients:
        return config.recipients[recipient_id]
    if recipient_id is None and config.recipients:
        return next(iter(config.recipients.values()))
    if config.recipient is not None:
        return config.recipient
    if recipient_id is not None:
        raise ConfigurationError(f"no recipient resolvable for recipient_id '{recipient_id}'")
    raise ConfigurationError("no recipient resolvable: configure 'recipients' or 'recipient'")
