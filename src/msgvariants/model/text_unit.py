"""TextUnit: a source rendition paired with its target rendition.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from msgvariants.diagnostics import ErrorTemplate, ShapeMismatchError
from msgvariants.model.group import MessageGroup
from msgvariants.model.message import Message

__all__ = ["MessageEntry", "TextUnit"]

type MessageEntry = Message | MessageGroup


def _shape(entry: object) -> type | None:
    if isinstance(entry, Message):
        return Message
    if isinstance(entry, MessageGroup):
        return MessageGroup
    return None


@dataclass(frozen=True, slots=True, eq=False)
class TextUnit:
    """Unit of translation work.

    Both sides must have the same shape: a Message paired with a Message,
    or a MessageGroup paired with a MessageGroup. Mixed pairs are rejected
    at construction time.

    Attributes:
        source: Source-locale rendition
        target: Target-locale rendition
        id: Optional identifier assigned by the translation workflow

    Example:
        >>> TextUnit(source=english_group, target=latvian_group).is_group
        True
    """

    source: MessageEntry
    target: MessageEntry
    id: str | None = None

    def __post_init__(self) -> None:
        """Fail fast on mismatched or unsupported shapes.

        Raises:
            ShapeMismatchError: If the sides differ in shape or either side
                is neither a Message nor a MessageGroup
        """
        shape = _shape(self.source)
        if shape is None or shape is not _shape(self.target):
            source_shape = type(self.source).__name__
            target_shape = type(self.target).__name__
            raise ShapeMismatchError(
                ErrorTemplate.shape_mismatch(source_shape, target_shape),
                source_shape=source_shape,
                target_shape=target_shape,
            )

    @property
    def is_group(self) -> bool:
        """True when both sides are MessageGroups."""
        return isinstance(self.source, MessageGroup)

    @property
    def source_locale(self) -> str | None:
        return _entry_locale(self.source)

    @property
    def target_locale(self) -> str | None:
        return _entry_locale(self.target)


def _entry_locale(entry: MessageEntry) -> str | None:
    # Groups report a locale only when every variant agrees on one.
    if isinstance(entry, Message):
        return entry.locale
    locales = entry.locales
    if len(locales) == 1:
        return next(iter(locales))
    return None
