"""msgvariants - Localized message variants and selector-based resolution.

The data and selection layer beneath a localization or translation
management system. Models placeholder-bearing patterns, keys families of
message variants by unordered selector sets (COUNT=ONE, GENDER=FEMININE),
and resolves a runtime selector query to the matching variant with an
explicit, documented catch-all fallback order.

Public API:
    SelectorSet - Unordered selector-name to selector-value mapping
    Placeholder, PlaceholderType - Typed interpolation slots
    TextPart, Pattern - Renderable templates
    Message - One (pattern, locale, selector set) variant
    MessageGroup - Variant family with insert() and resolve()
    TextUnit - Source/target pairing for translation work
    FallbackPolicy - Catch-all resolution order
    MessageCatalog - Registry owning id uniqueness

Exceptions:
    MessageModelError - Base exception class
    DuplicateVariantError - Variant key collision on insert
    NoVariantFoundError (alias NoVariantFound) - Resolution exhausted
    MissingValueError - Placeholder without value or default text
    ShapeMismatchError - TextUnit sides of different shapes
    DuplicateIdError - Catalog id collision

Submodules:
    msgvariants.model - Data model
    msgvariants.runtime - Fallback policy and readers-writer lock
    msgvariants.validation - Group and text unit validation (CLDR-aware)
    msgvariants.diagnostics - Error types, codes and validation results
"""

# Model first: model.group imports runtime, which imports model.selectors.
from .model import (  # noqa: I001
    Message,
    MessageGroup,
    Pattern,
    Placeholder,
    PlaceholderKind,
    PlaceholderType,
    SelectorSet,
    TextPart,
    TextUnit,
    ph_type_attrs_map,
)
from .catalog import MessageCatalog
from .diagnostics import (
    DuplicateIdError,
    DuplicateVariantError,
    MessageModelError,
    MissingValueError,
    NoVariantFound,
    NoVariantFoundError,
    ShapeMismatchError,
)
from .runtime import FallbackPolicy

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("msgvariants")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DuplicateIdError",
    "DuplicateVariantError",
    "FallbackPolicy",
    "Message",
    "MessageCatalog",
    "MessageGroup",
    "MessageModelError",
    "MissingValueError",
    "NoVariantFound",
    "NoVariantFoundError",
    "Pattern",
    "Placeholder",
    "PlaceholderKind",
    "PlaceholderType",
    "SelectorSet",
    "ShapeMismatchError",
    "TextPart",
    "TextUnit",
    "__version__",
    "ph_type_attrs_map",
]
