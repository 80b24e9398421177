"""ISDOC (tschechische E-Rechnung, Version 6.0.1) Generator und Validator."""

from .generator import (
    ISDOC_NAMESPACE,
    ISDOC_VERSION,
    build_isdoc_tree,
    build_isdoc_xml,
    version,
)
from .validator import ISDOCValidationResult, validate_isdoc

__all__ = [
    "ISDOC_NAMESPACE",
    "ISDOC_VERSION",
    "build_isdoc_tree",
    "build_isdoc_xml",
    "version",
    "ISDOCValidationResult",
    "validate_isdoc",
]
