"""YAML-Eingaben laden und an der Grenze in typisierte Modelle überführen."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Type, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .errors import InputValidationError
from .models import Config, InvoiceInput

ModelT = TypeVar("ModelT", bound=BaseModel)


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as err:
        raise InputValidationError(path, f"cannot read file: {err.strerror or err}") from err
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as err:
        raise InputValidationError(path, f"invalid YAML: {err}") from err
    if not isinstance(parsed, dict):
        raise InputValidationError(path, "top-level YAML value must be a mapping")
    return parsed


def _summarize(err: ValidationError) -> str:
    parts = []
    for error in err.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def _load(path: Path | str, model: Type[ModelT]) -> ModelT:
    path = Path(path)
    raw = _read_yaml(path)
    try:
        return model.model_validate(raw)
    except ValidationError as err:
        raise InputValidationError(path, _summarize(err)) from err


def load_config(path: Path | str) -> Config:
    return _load(path, Config)


def load_invoice(path: Path | str) -> InvoiceInput:
    return _load(path, InvoiceInput)
