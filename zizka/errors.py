"""Fehlerklassen für die Rechnungserzeugung."""

from __future__ import annotations

from pathlib import Path


class InvoiceError(RuntimeError):
    pass


class ConfigurationError(InvoiceError):
    pass


class InputValidationError(ConfigurationError):
    """YAML-Eingabe nicht lesbar oder nicht schemakonform."""

    def __init__(self, path: Path | str, detail: str) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"{self.path}: {detail}")


class InvalidLineItemError(InvoiceError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f'Item "{text}" must specify either md+md_rate or hr+hr_rate')


class DocumentValidationError(InvoiceError):
    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__("ISDOC document failed validation: " + "; ".join(self.messages))


class OutputWriteError(InvoiceError):
    def __init__(self, path: Path | str, detail: str) -> None:
        self.path = Path(path)
        super().__init__(f"cannot write {self.path}: {detail}")
