"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Variant errors (group insertion and resolution)
        2000-2999: Rendering errors (pattern substitution)
        3000-3999: Structure errors (text unit shape, registry identity)
    """

    # Variant errors (1000-1999)
    DUPLICATE_VARIANT = 1001
    NO_VARIANT_FOUND = 1002

    # Rendering errors (2000-2999)
    MISSING_VALUE = 2001

    # Structure errors (3000-3999)
    SHAPE_MISMATCH = 3001
    DUPLICATE_ID = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        subject: Identifier the error is about (group, placeholder or entry id)
        severity: Error severity level
        tried: Selector sets attempted during resolution, in order
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    subject: str | None = None
    severity: Literal["error", "warning"] = "error"
    tried: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[NO_VARIANT_FOUND]: No variant of 'items' matches {COUNT:FEW}
              = subject: items
              = tried: {COUNT:FEW}
              = help: Add a variant for this selector set or enable a fallback policy

        Returns:
            Formatted error message
        """
        from .formatter import format_diagnostic  # noqa: PLC0415 - circular

        return format_diagnostic(self)
