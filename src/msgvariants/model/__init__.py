"""Message data model.

Leaf-first:
    SelectorSet - Unordered selector-name to selector-value mapping
    PlaceholderType, Placeholder - Typed interpolation slots
    TextPart, Pattern - Ordered literal text and placeholders
    Message - One (pattern, locale, selector set) variant
    MessageGroup - Variants of one logical message, with resolution
    TextUnit - Source/target pairing for translation work

Python 3.13+.
"""

from .selectors import SelectorSet  # noqa: I001 - leaf-first import order
from .placeholders import (
    Placeholder,
    PlaceholderKind,
    PlaceholderType,
    PlaceholderTypeAttributes,
    ph_type_attrs_map,
)
from .pattern import Pattern, PatternPart, TextPart
from .message import Message
from .group import MessageGroup
from .text_unit import MessageEntry, TextUnit

__all__ = [
    "Message",
    "MessageEntry",
    "MessageGroup",
    "Pattern",
    "PatternPart",
    "Placeholder",
    "PlaceholderKind",
    "PlaceholderType",
    "PlaceholderTypeAttributes",
    "SelectorSet",
    "TextPart",
    "TextUnit",
    "ph_type_attrs_map",
]
