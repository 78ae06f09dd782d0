"""Shared constants for msgvariants.

This module provides centralized constants used across the model, runtime
and validation packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Selector values: Catch-all and recognized enumerated values
- Logging limits: Truncation of rendered text in debug output

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Selector values
    "CATCH_ALL_VALUE",
    "EXPLICIT_NUMBER_PREFIX",
    "PLURAL_CATEGORIES",
    "GENDER_VALUES",
    # Logging limits
    "LOG_TRUNCATE_DEBUG",
]

# ============================================================================
# SELECTOR VALUES
# ============================================================================

# Catch-all selector value used by the default fallback policy.
# Plural and gender variant families conventionally carry an OTHER entry
# so that resolution always succeeds when it is present.
CATCH_ALL_VALUE: str = "OTHER"

# Prefix for explicit numeric selector values (e.g., "=0" for "no items").
# Such keys are valid for PLURAL selectors alongside the CLDR categories.
EXPLICIT_NUMBER_PREFIX: str = "="

# CLDR plural categories, upper-cased to match selector value convention.
# Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
PLURAL_CATEGORIES: frozenset[str] = frozenset(
    {"ZERO", "ONE", "TWO", "FEW", "MANY", "OTHER"}
)

# Grammatical gender values recognized for GENDER selectors.
GENDER_VALUES: frozenset[str] = frozenset(
    {"MASCULINE", "FEMININE", "NEUTER", "OTHER"}
)

# ============================================================================
# LOGGING LIMITS
# ============================================================================

# Debug messages are high-volume; 50 chars keeps logs manageable.
LOG_TRUNCATE_DEBUG: int = 50
