"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def duplicate_variant(group_id: str, selector_values: str) -> Diagnostic:
        """Variant key already present in a message group.

        Args:
            group_id: The group receiving the insert
            selector_values: Display form of the colliding selector set

        Returns:
            Diagnostic for DUPLICATE_VARIANT
        """
        msg = f"Group '{group_id}' already has a variant for {selector_values}"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_VARIANT,
            message=msg,
            hint="Each selector set may key at most one variant per group",
            subject=group_id,
        )

    @staticmethod
    def no_variant_found(
        group_id: str, query: str, tried: Sequence[str] = ()
    ) -> Diagnostic:
        """No variant matched the query or any fallback candidate.

        Args:
            group_id: The group being resolved
            query: Display form of the original query
            tried: Display forms of every candidate attempted, in order

        Returns:
            Diagnostic for NO_VARIANT_FOUND
        """
        msg = f"No variant of '{group_id}' matches {query}"
        return Diagnostic(
            code=DiagnosticCode.NO_VARIANT_FOUND,
            message=msg,
            hint="Add a variant for this selector set or enable a fallback policy",
            subject=group_id,
            tried=tuple(tried) if tried else None,
        )

    @staticmethod
    def missing_value(placeholder_id: str) -> Diagnostic:
        """Placeholder has neither an interpolation value nor default text.

        Args:
            placeholder_id: The placeholder identifier

        Returns:
            Diagnostic for MISSING_VALUE
        """
        msg = f"No value supplied for placeholder '{placeholder_id}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_VALUE,
            message=msg,
            hint=f"Pass '{placeholder_id}' in the interpolation values",
            subject=placeholder_id,
        )

    @staticmethod
    def shape_mismatch(source_shape: str, target_shape: str) -> Diagnostic:
        """Text unit sides differ in shape.

        Args:
            source_shape: Type name of the source side
            target_shape: Type name of the target side

        Returns:
            Diagnostic for SHAPE_MISMATCH
        """
        msg = f"Cannot pair source {source_shape} with target {target_shape}"
        return Diagnostic(
            code=DiagnosticCode.SHAPE_MISMATCH,
            message=msg,
            hint="Pair Message with Message or MessageGroup with MessageGroup",
        )

    @staticmethod
    def duplicate_id(entry_id: str) -> Diagnostic:
        """Identifier already registered in a catalog.

        Args:
            entry_id: The colliding message or group id

        Returns:
            Diagnostic for DUPLICATE_ID
        """
        msg = f"Id '{entry_id}' is already registered"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_ID,
            message=msg,
            hint="Message and group ids must be unique within a catalog",
            subject=entry_id,
        )
