"""Hypothesis strategies for the message data model.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - model_selector_size: SelectorSet size classification (empty|single|multi)
    - model_ph_kind: PlaceholderKind drawn
    - model_pattern_shape: Pattern composition (text_only|placeholder_only|mixed|empty)
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from msgvariants.model import (
    Pattern,
    PatternPart,
    Placeholder,
    PlaceholderType,
    SelectorSet,
    TextPart,
)

# Selector names mix conventional upper-case names with case-only variants
# so that case sensitivity is exercised.
selector_names = st.sampled_from(
    ["COUNT", "count", "GENDER", "gender", "ROLE", "N", "PLURAL_2"]
) | st.from_regex(r"[A-Za-z][A-Za-z0-9_]{0,8}", fullmatch=True)

selector_values = st.sampled_from(
    ["ONE", "one", "OTHER", "FEW", "MANY", "ZERO", "=0", "FEMININE", "5", "14", ""]
) | st.text(max_size=6)

placeholder_ids = st.from_regex(r"[A-Z][A-Z0-9_]{0,10}", fullmatch=True)


@st.composite
def selector_pairs(draw: st.DrawFn, max_size: int = 5) -> list[tuple[str, str]]:
    """Generate a list of (name, value) pairs with unique names.

    Events emitted:
    - model_selector_size={empty|single|multi}
    """
    names = draw(st.lists(selector_names, unique=True, max_size=max_size))
    pairs = [(name, draw(selector_values)) for name in names]
    size = "empty" if not pairs else "single" if len(pairs) == 1 else "multi"
    event(f"model_selector_size={size}")
    return pairs


@st.composite
def selector_sets(draw: st.DrawFn, max_size: int = 5) -> SelectorSet:
    """Generate SelectorSet instances."""
    return SelectorSet(draw(selector_pairs(max_size=max_size)))


@st.composite
def placeholder_types(draw: st.DrawFn) -> PlaceholderType:
    """Generate closed-kind and OTHER(tag) placeholder types.

    Events emitted:
    - model_ph_kind={unknown|gender|plural|other}
    """
    ph_type = draw(
        st.sampled_from(
            [PlaceholderType.UNKNOWN, PlaceholderType.GENDER, PlaceholderType.PLURAL]
        )
        | st.builds(PlaceholderType.other, placeholder_ids)
    )
    event(f"model_ph_kind={ph_type.kind}")
    return ph_type


placeholders = st.builds(
    Placeholder,
    id=placeholder_ids,
    ph_type=placeholder_types(),
    default_text=st.none() | st.text(max_size=10),
)

text_parts = st.builds(TextPart, st.text(max_size=20))


@st.composite
def patterns(draw: st.DrawFn, max_parts: int = 6) -> Pattern:
    """Generate patterns mixing text parts and placeholders.

    Events emitted:
    - model_pattern_shape={empty|text_only|placeholder_only|mixed}
    """
    parts: list[PatternPart] = draw(
        st.lists(st.one_of(text_parts, placeholders), max_size=max_parts)
    )
    has_text = any(isinstance(part, TextPart) for part in parts)
    has_ph = any(isinstance(part, Placeholder) for part in parts)
    if not parts:
        shape = "empty"
    elif has_text and has_ph:
        shape = "mixed"
    elif has_text:
        shape = "text_only"
    else:
        shape = "placeholder_only"
    event(f"model_pattern_shape={shape}")
    return Pattern(tuple(parts))


@st.composite
def interpolation_values(draw: st.DrawFn, pattern: Pattern) -> dict[str, str]:
    """Generate a complete value mapping for every placeholder id in ``pattern``."""
    return {ph_id: draw(st.text(max_size=10)) for ph_id in pattern.placeholder_ids}
