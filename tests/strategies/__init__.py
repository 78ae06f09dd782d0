"""Hypothesis strategies for msgvariants property-based testing.

Usage:
    from tests.strategies import selector_pairs, selector_sets, patterns
"""

from .model import (
    interpolation_values,
    patterns,
    placeholder_ids,
    placeholder_types,
    placeholders,
    selector_names,
    selector_pairs,
    selector_sets,
    selector_values,
    text_parts,
)

__all__ = [
    "interpolation_values",
    "patterns",
    "placeholder_ids",
    "placeholder_types",
    "placeholders",
    "selector_names",
    "selector_pairs",
    "selector_sets",
    "selector_values",
    "text_parts",
]
