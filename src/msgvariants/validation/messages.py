"""Message group and text unit validation.

Standalone checks for data a translation workflow hands to the runtime.
Validation never raises for problems in the data; it reports them in a
ValidationResult.

Architecture:
    - validate_group(): Main entry point for one MessageGroup
    - _check_locales(): Pass 1 - All variants share one locale
    - _check_selector_values(): Pass 2 - Enumerated selector values are recognized
    - _check_plural_coverage(): Pass 3 - PLURAL keys against the locale's CLDR categories
    - _check_catch_all(): Pass 4 - A last-resort variant exists
    - validate_text_unit(): Locale and placeholder consistency across a pairing

Python 3.13+. Depends on Babel for CLDR plural data.
"""

import logging
from collections.abc import Mapping

from msgvariants.constants import EXPLICIT_NUMBER_PREFIX, PLURAL_CATEGORIES
from msgvariants.diagnostics import ValidationError, ValidationResult, ValidationWarning
from msgvariants.locale_utils import normalize_locale, plural_categories
from msgvariants.model import (
    Message,
    MessageEntry,
    MessageGroup,
    PlaceholderType,
    PlaceholderTypeAttributes,
    SelectorSet,
    TextUnit,
    ph_type_attrs_map,
)
from msgvariants.runtime.fallback import DEFAULT_FALLBACK, FallbackPolicy

__all__ = ["validate_group", "validate_text_unit"]

logger = logging.getLogger(__name__)


def _locales(entry: MessageEntry) -> set[str]:
    if isinstance(entry, Message):
        return {normalize_locale(entry.locale)}
    return {normalize_locale(locale) for locale in entry.locales}


def _check_locales(group: MessageGroup) -> list[ValidationError]:
    locales = _locales(group)
    if len(locales) <= 1:
        return []
    return [
        ValidationError(
            code="mixed-locale",
            message=f"Variants span {len(locales)} locales: {', '.join(sorted(locales))}",
            context=group.id,
        )
    ]


def _check_selector_values(
    keys: tuple[SelectorSet, ...],
    selector_types: Mapping[str, PlaceholderType],
    attrs: Mapping[PlaceholderType, PlaceholderTypeAttributes],
) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    for name in sorted(selector_types):
        ph_type = selector_types[name]
        info = attrs.get(ph_type)
        if info is None or not info.enumerated:
            continue
        used = sorted({key[name] for key in keys if name in key})
        for value in used:
            if value in info.values:
                continue
            if ph_type == PlaceholderType.PLURAL and value.startswith(EXPLICIT_NUMBER_PREFIX):
                continue
            warnings.append(
                ValidationWarning(
                    code="unrecognized-selector-value",
                    message=f"Value '{value}' is not a recognized {ph_type} value",
                    context=f"{name}={value}",
                )
            )
    return warnings


def _check_plural_coverage(
    group: MessageGroup,
    keys: tuple[SelectorSet, ...],
    selector_types: Mapping[str, PlaceholderType],
    catch_all: str,
) -> list[ValidationWarning]:
    locales = group.locales
    if len(locales) != 1:
        return []
    locale = next(iter(locales))
    categories = plural_categories(locale)
    if categories is None:
        logger.debug("No CLDR plural data for '%s'; coverage check skipped", locale)
        return []

    warnings: list[ValidationWarning] = []
    plural_names = sorted(
        name for name, ph_type in selector_types.items() if ph_type == PlaceholderType.PLURAL
    )
    for name in plural_names:
        used = {key[name] for key in keys if name in key}
        for value in sorted((used & PLURAL_CATEGORIES) - categories):
            warnings.append(
                ValidationWarning(
                    code="unused-plural-category",
                    message=f"Locale '{locale}' never selects plural category '{value}'",
                    context=f"{name}={value}",
                )
            )
        if catch_all in used:
            continue
        for value in sorted(categories - used):
            warnings.append(
                ValidationWarning(
                    code="missing-plural-category",
                    message=f"No variant for plural category '{value}' of locale '{locale}'",
                    context=f"{name}={value}",
                )
            )
    return warnings


def _check_catch_all(
    group: MessageGroup, keys: tuple[SelectorSet, ...], catch_all: str
) -> list[ValidationWarning]:
    # Every walk over the same selector names reaches the all-catch-all key;
    # every walk with drop_keys reaches the empty key.
    for key in keys:
        if all(value == catch_all for value in key.values()):
            return []
    return [
        ValidationWarning(
            code="missing-catch-all",
            message=f"No variant keyed only by '{catch_all}' values or by no selectors",
            context=group.id,
        )
    ]


def validate_group(
    group: MessageGroup,
    *,
    selector_types: Mapping[str, PlaceholderType] | None = None,
    attrs: Mapping[PlaceholderType, PlaceholderTypeAttributes] | None = None,
    fallback: FallbackPolicy | None = None,
) -> ValidationResult:
    """Validate one message group.

    Args:
        group: The group to check
        selector_types: Placeholder type of each selector name; selectors
            not listed are only checked for catch-all coverage
        attrs: Placeholder type metadata (default: ph_type_attrs_map())
        fallback: Policy whose catch-all value is expected (default: the
            group's own policy, else DEFAULT_FALLBACK)

    Returns:
        ValidationResult with structural errors and coverage warnings

    Example:
        >>> result = validate_group(group, selector_types={"COUNT": PlaceholderType.PLURAL})
        >>> for warning in result.warnings:
        ...     print(warning.format())
    """
    types = selector_types if selector_types is not None else {}
    attrs_map = attrs if attrs is not None else ph_type_attrs_map()
    policy = fallback or group.fallback or DEFAULT_FALLBACK
    keys = group.keys()

    # Pass 1: Locale consistency
    errors = _check_locales(group)

    # Pass 2: Enumerated selector values
    value_warnings = _check_selector_values(keys, types, attrs_map)

    # Pass 3: Plural categories for the group's locale
    plural_warnings = _check_plural_coverage(group, keys, types, policy.catch_all)

    # Pass 4: Last-resort variant
    catch_all_warnings = _check_catch_all(group, keys, policy.catch_all) if keys else []

    all_warnings = value_warnings + plural_warnings + catch_all_warnings

    logger.debug(
        "Validated group '%s': %d errors, %d warnings",
        group.id,
        len(errors),
        len(all_warnings),
    )

    return ValidationResult(errors=tuple(errors), warnings=tuple(all_warnings))


def _placeholder_ids(entry: MessageEntry) -> set[str]:
    messages = (entry,) if isinstance(entry, Message) else entry.sorted_variants()
    return {ph_id for message in messages for ph_id in message.pattern.placeholder_ids}


def validate_text_unit(unit: TextUnit) -> ValidationResult:
    """Validate a source/target pairing.

    Errors:
        locale-clash: Source and target share a locale
        mixed-locale: A group side spans several locales

    Warnings:
        placeholder-mismatch: A target variant uses a placeholder id that
            no source variant defines

    Args:
        unit: The text unit to check

    Returns:
        ValidationResult with errors and warnings
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []

    if unit.is_group:
        for side in (unit.source, unit.target):
            if isinstance(side, MessageGroup):
                errors.extend(_check_locales(side))

    source_locales = _locales(unit.source)
    target_locales = _locales(unit.target)
    shared = source_locales & target_locales
    if shared:
        errors.append(
            ValidationError(
                code="locale-clash",
                message=f"Source and target share locale {', '.join(sorted(shared))}",
                context=unit.id or unit.source.id,
            )
        )

    source_ids = _placeholder_ids(unit.source)
    targets = (
        (unit.target,) if isinstance(unit.target, Message) else unit.target.sorted_variants()
    )
    for message in targets:
        extra = sorted(set(message.pattern.placeholder_ids) - source_ids)
        if extra:
            warnings.append(
                ValidationWarning(
                    code="placeholder-mismatch",
                    message=f"Target uses placeholders absent from source: {', '.join(extra)}",
                    context=message.id,
                )
            )

    logger.debug(
        "Validated text unit '%s': %d errors, %d warnings",
        unit.id or unit.source.id,
        len(errors),
        len(warnings),
    )

    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
