"""Diagnostic system for message model errors.

Provides structured error diagnostics with codes and hints, plus the
result types returned by validation.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DuplicateIdError,
    DuplicateVariantError,
    MessageModelError,
    MissingValueError,
    NoVariantFound,
    NoVariantFoundError,
    ShapeMismatchError,
)
from .formatter import format_diagnostic
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DuplicateIdError",
    "DuplicateVariantError",
    "ErrorTemplate",
    "MessageModelError",
    "MissingValueError",
    "NoVariantFound",
    "NoVariantFoundError",
    "ShapeMismatchError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "format_diagnostic",
]
