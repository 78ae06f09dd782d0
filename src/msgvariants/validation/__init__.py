"""Validation utilities for message groups and text units.

Separated from the data model so that building and resolving messages
never pays for CLDR lookups.

Python 3.13+.
"""

from msgvariants.validation.messages import (
    validate_group,
    validate_text_unit,
)

__all__ = [
    "validate_group",
    "validate_text_unit",
]
