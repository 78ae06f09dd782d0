"""Locale utilities for BCP-47 to POSIX conversion and CLDR lookups.

Centralizes locale normalization so that validation compares locales in
one canonical form, and wraps Babel's CLDR plural data.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from msgvariants.constants import CATCH_ALL_VALUE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "plural_categories",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=128)
def plural_categories(locale_code: str) -> frozenset[str] | None:
    """CLDR plural categories a locale can produce, upper-cased.

    Returns None for locales Babel does not know, so callers can skip
    locale-specific checks instead of guessing.

    Example:
        >>> sorted(plural_categories("en"))
        ['ONE', 'OTHER']
        >>> sorted(plural_categories("ru"))
        ['FEW', 'MANY', 'ONE', 'OTHER']
        >>> plural_categories("xx-unknown") is None
        True
    """
    try:
        locale_obj = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError):
        return None
    # Babel lists explicit rules only; "other" is always implied.
    tags = {tag.upper() for tag in locale_obj.plural_form.tags}
    tags.add(CATCH_ALL_VALUE)
    return frozenset(tags)
