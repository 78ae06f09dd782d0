"""Placeholder types and placeholders.

PlaceholderType is a closed set of kinds (UNKNOWN, GENDER, PLURAL) with
one open, string-tagged case: OTHER(tag). New placeholder types are added
by convention through new tags, never by subclassing, so matching on
``kind`` stays exhaustive:

    match ph_type:
        case PlaceholderType(kind=PlaceholderKind.PLURAL): ...
        case PlaceholderType(kind=PlaceholderKind.OTHER, tag="PRODUCT"): ...

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from msgvariants.constants import GENDER_VALUES, PLURAL_CATEGORIES

__all__ = [
    "Placeholder",
    "PlaceholderKind",
    "PlaceholderType",
    "PlaceholderTypeAttributes",
    "ph_type_attrs_map",
]


class PlaceholderKind(StrEnum):
    """Closed set of placeholder kinds.

    StrEnum provides automatic string conversion: str(PlaceholderKind.PLURAL) == "plural"
    """

    UNKNOWN = "unknown"
    """Sentinel for placeholders whose type was not determined."""

    GENDER = "gender"
    """Grammatical gender selector (MASCULINE, FEMININE, ...)."""

    PLURAL = "plural"
    """Plural category selector (ONE, FEW, OTHER, ...)."""

    OTHER = "other"
    """Open-ended type identified by a free-form tag."""


@dataclass(frozen=True, slots=True)
class PlaceholderType:
    """Type of a placeholder: a kind plus, for OTHER only, a tag.

    Use the class constants for the closed kinds and ``other()`` for tagged
    types. Instances are hashable and can key lookup tables such as
    ph_type_attrs_map().

    Attributes:
        kind: Closed placeholder kind
        tag: Free-form tag; required for OTHER, forbidden otherwise

    Example:
        >>> PlaceholderType.other("PRODUCT_NAME")
        PlaceholderType(kind=<PlaceholderKind.OTHER: 'other'>, tag='PRODUCT_NAME')
        >>> str(PlaceholderType.PLURAL)
        'PLURAL'
    """

    kind: PlaceholderKind
    tag: str | None = None

    UNKNOWN: ClassVar["PlaceholderType"]
    GENDER: ClassVar["PlaceholderType"]
    PLURAL: ClassVar["PlaceholderType"]

    def __post_init__(self) -> None:
        """Validate that tag is present exactly when kind is OTHER."""
        if self.kind is PlaceholderKind.OTHER:
            if not isinstance(self.tag, str) or not self.tag:
                msg = "OTHER placeholder type requires a non-empty tag"
                raise ValueError(msg)
        elif self.tag is not None:
            msg = f"Only OTHER placeholder types carry a tag, got kind {self.kind}"
            raise ValueError(msg)

    @staticmethod
    def other(tag: str) -> "PlaceholderType":
        """Create an OTHER(tag) placeholder type."""
        return PlaceholderType(PlaceholderKind.OTHER, tag)

    def __str__(self) -> str:
        if self.kind is PlaceholderKind.OTHER:
            return f"OTHER({self.tag})"
        return self.kind.name


PlaceholderType.UNKNOWN = PlaceholderType(PlaceholderKind.UNKNOWN)
PlaceholderType.GENDER = PlaceholderType(PlaceholderKind.GENDER)
PlaceholderType.PLURAL = PlaceholderType(PlaceholderKind.PLURAL)


@dataclass(frozen=True, slots=True)
class PlaceholderTypeAttributes:
    """Advisory metadata about a placeholder type.

    Attributes:
        enumerated: True if values are drawn from a fixed, recognized set
        values: The recognized values (empty when not enumerated)
    """

    enumerated: bool
    values: frozenset[str] = frozenset()


def ph_type_attrs_map() -> dict[PlaceholderType, PlaceholderTypeAttributes]:
    """Return metadata for the built-in enumerated placeholder types.

    The table is advisory: selection never consults it. Validation uses it
    to flag selector values outside a type's recognized set. A fresh dict
    is returned on every call so callers can add entries for their own
    OTHER(tag) types.
    """
    return {
        PlaceholderType.GENDER: PlaceholderTypeAttributes(
            enumerated=True, values=GENDER_VALUES
        ),
        PlaceholderType.PLURAL: PlaceholderTypeAttributes(
            enumerated=True, values=PLURAL_CATEGORIES
        ),
    }


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Named, typed slot inside a pattern.

    ``id`` is the interpolation key. Several placeholders in one pattern
    may share an id when they stand for the same value (PRODUCT_NAME
    everywhere it recurs) or use distinct ids when contents differ
    (SPAN1, SPAN2). Uniqueness is the pattern owner's concern.

    When ``default_text`` is None a value for ``id`` must be supplied at
    render time.

    Attributes:
        id: Interpolation key
        ph_type: Placeholder type (default: UNKNOWN)
        default_text: Text the placeholder stands for, if known
    """

    id: str
    ph_type: PlaceholderType = PlaceholderType.UNKNOWN
    default_text: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            msg = "Placeholder id must be a non-empty string"
            raise ValueError(msg)
        if self.default_text is not None and not isinstance(self.default_text, str):
            msg = (
                f"Placeholder '{self.id}' default_text must be str or None, "
                f"got {type(self.default_text).__name__}"
            )
            raise TypeError(msg)

    def __str__(self) -> str:
        return f"{{{self.id}}}"
