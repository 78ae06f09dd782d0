"""Unified validation result for message group and text unit validation.

Consolidates structural errors (data that cannot be served correctly)
and semantic warnings (data that resolves but is probably incomplete).

Python 3.13+.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structural error found during validation.

    Attributes:
        code: Error code (e.g., "mixed-locale", "locale-clash")
        message: Human-readable error message
        context: Identifier the error is about (message or group id)
    """

    code: str
    message: str
    context: str | None = None

    def format(self) -> str:
        """Format error as a single human-readable line."""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code}]: {self.message}{context}"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Semantic warning found during validation.

    Attributes:
        code: Warning code (e.g., "missing-catch-all")
        message: Human-readable warning message
        context: Additional context (e.g., the selector name)
    """

    code: str
    message: str
    context: str | None = None

    def format(self) -> str:
        """Format warning as a single human-readable line."""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code}]: {self.message}{context}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable validation result.

    Warnings do not affect validity; they are informational.

    Attributes:
        errors: Structural validation errors
        warnings: Semantic validation warnings

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result = ValidationResult.invalid(
        ...     errors=(ValidationError("mixed-locale", "Variants span 2 locales"),)
        ... )
        >>> result.error_count
        1
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were found."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    @staticmethod
    def invalid(
        errors: tuple[ValidationError, ...] = (),
        warnings: tuple[ValidationWarning, ...] = (),
    ) -> "ValidationResult":
        """Create a result carrying errors and/or warnings.

        Args:
            errors: Tuple of validation errors (default: empty)
            warnings: Tuple of validation warnings (default: empty)

        Returns:
            ValidationResult with provided errors/warnings
        """
        return ValidationResult(errors=errors, warnings=warnings)

    def format(self, *, include_warnings: bool = True) -> str:
        """Format validation result as human-readable string.

        Args:
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format()}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(f"  {warning.format()}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
