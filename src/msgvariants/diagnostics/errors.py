"""Message model exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error
information. Every error is raised synchronously to the caller and is a
deterministic function of its inputs; nothing is retried internally.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from msgvariants.model.selectors import SelectorSet

__all__ = [
    "DuplicateIdError",
    "DuplicateVariantError",
    "MessageModelError",
    "MissingValueError",
    "NoVariantFound",
    "NoVariantFoundError",
    "ShapeMismatchError",
]


class MessageModelError(Exception):
    """Base exception for all message model errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageModelError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DuplicateVariantError(MessageModelError):
    """Insert collided with an existing variant key.

    The group keeps the variant that was registered first; the rejected
    message is never stored.

    Attributes:
        group_id: Id of the group that rejected the insert
        selector_values: The colliding selector set
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        group_id: str = "",
        selector_values: SelectorSet | None = None,
    ) -> None:
        super().__init__(message)
        self.group_id = group_id
        self.selector_values = selector_values


class NoVariantFoundError(MessageModelError):
    """Resolution exhausted the query and every fallback candidate.

    Callers decide whether to use a hardcoded last-resort string.

    Attributes:
        group_id: Id of the group being resolved
        query: The selector set the caller asked for
        tried: Every selector set attempted, in fallback order
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        group_id: str = "",
        query: SelectorSet | None = None,
        tried: tuple[SelectorSet, ...] = (),
    ) -> None:
        super().__init__(message)
        self.group_id = group_id
        self.query = query
        self.tried = tried


# Short name used throughout the data model documentation.
NoVariantFound = NoVariantFoundError


class MissingValueError(MessageModelError):
    """Placeholder has no interpolation value and no default text.

    Rendering never substitutes an empty string for a missing value.

    Attributes:
        placeholder_id: Id of the unresolved placeholder
    """

    def __init__(self, message: str | Diagnostic, *, placeholder_id: str = "") -> None:
        super().__init__(message)
        self.placeholder_id = placeholder_id


class ShapeMismatchError(MessageModelError):
    """TextUnit sides are not the same shape.

    Attributes:
        source_shape: Type name of the source side
        target_shape: Type name of the target side
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        source_shape: str = "",
        target_shape: str = "",
    ) -> None:
        super().__init__(message)
        self.source_shape = source_shape
        self.target_shape = target_shape


class DuplicateIdError(MessageModelError):
    """Catalog already holds an entry with the same id.

    Attributes:
        entry_id: The colliding message or group id
    """

    def __init__(self, message: str | Diagnostic, *, entry_id: str = "") -> None:
        super().__init__(message)
        self.entry_id = entry_id
