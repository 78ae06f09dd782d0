"""Message: one concrete (pattern, locale, selector set) variant.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeIs

from msgvariants.model.pattern import Pattern
from msgvariants.model.selectors import SelectorSet

__all__ = ["Message"]


@dataclass(frozen=True, slots=True)
class Message:
    """Single message variant with a stable identity.

    Created once per (locale, variant) combination and never mutated.
    Global uniqueness of ``id`` belongs to whichever store builds messages
    (see MessageCatalog), not to the message itself.

    Attributes:
        id: Globally unique message id
        locale: Locale code of the pattern text (e.g., "en", "pt-BR")
        pattern: The renderable template
        selector_values: Selector set this variant answers to

    Example:
        >>> msg = Message(
        ...     id="items-one",
        ...     locale="en",
        ...     pattern=Pattern.of(Placeholder("COUNT"), " item selected."),
        ...     selector_values=SelectorSet.of(COUNT="ONE"),
        ... )
        >>> msg.render({"COUNT": "1"})
        '1 item selected.'
    """

    id: str
    locale: str
    pattern: Pattern
    selector_values: SelectorSet = field(default_factory=SelectorSet)

    def __post_init__(self) -> None:
        """Validate identity fields and component types."""
        if not isinstance(self.id, str) or not self.id:
            msg = "Message id must be a non-empty string"
            raise ValueError(msg)
        if not isinstance(self.locale, str) or not self.locale:
            msg = f"Message '{self.id}' locale must be a non-empty string"
            raise ValueError(msg)
        if not isinstance(self.pattern, Pattern):
            msg = f"Message '{self.id}' pattern must be a Pattern, got {type(self.pattern).__name__}"
            raise TypeError(msg)
        if not isinstance(self.selector_values, SelectorSet):
            msg = (
                f"Message '{self.id}' selector_values must be a SelectorSet, "
                f"got {type(self.selector_values).__name__}"
            )
            raise TypeError(msg)

    @staticmethod
    def guard(entry: object) -> TypeIs["Message"]:
        """Type guard for Message (used in entry filtering)."""
        return isinstance(entry, Message)

    def render(self, values: Mapping[str, str] | None = None) -> str:
        """Render this variant's pattern. See Pattern.render()."""
        return self.pattern.render(values)

    def __str__(self) -> str:
        return str(self.pattern)
