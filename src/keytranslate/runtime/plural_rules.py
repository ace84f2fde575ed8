"""CLDR plural categories as a ``pluralize`` function, using Babel.

The engine's default plural selection is exact-number with an ``"n"``
fallback. Stores keyed by CLDR categories instead can plug in a pluralizer
built here:

    >>> t = Translator(
    ...     {"files": {"one": "{n} soubor", "few": "{n} soubory", "n": "{n} souborů"}},
    ...     pluralize=cldr_pluralizer("cs"),
    ... )
    >>> t("files", 3)
    '3 soubory'

A category missing from the group falls back to ``"n"`` like any other
selector key. Locale codes may be written as BCP-47 tags ("pt-BR") or in
Babel's own form ("pt_BR").

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import functools
import logging
import math
from decimal import Decimal
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from .selector import Pluralizer

if TYPE_CHECKING:
    from babel.plural import PluralRule

__all__ = ["cldr_pluralizer", "plural_rule_for", "select_plural_category"]

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=128)
def plural_rule_for(locale: str) -> PluralRule:
    """CLDR plural rule of a locale, parsed once per locale code.

    Pluralizers for the same language share one rule object, so swapping
    stores on every locale switch does not re-read CLDR data.

    Args:
        locale: Locale code; hyphens are read as underscores

    Returns:
        Babel PluralRule, callable as ``rule(count) -> category``

    Raises:
        babel.core.UnknownLocaleError: If Babel has no data for the locale
        ValueError: If the locale code is malformed
    """
    # Babel loads CLDR data at import time; defer until a pluralizer is built
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(locale.strip().replace("-", "_")).plural_form


def select_plural_category(n: int | float | Decimal, locale: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(42, "ja_JP")
        'other'

    If locale parsing fails, falls back to simple one/other rule.
    """
    try:
        rule = plural_rule_for(locale)
    except (UnknownLocaleError, ValueError):
        # Most common pattern: n == 1 -> "one", else -> "other"
        return "one" if abs(n) == 1 else "other"

    return rule(n)


def cldr_pluralizer(locale: str) -> Pluralizer:
    """Build a ``pluralize`` function for a locale.

    Args:
        locale: Locale code (BCP-47 or POSIX)

    Returns:
        Callable mapping a count to its CLDR category name

    Raises:
        babel.core.UnknownLocaleError: If Babel has no data for the locale
        ValueError: If the locale code is malformed
    """
    # Resolve eagerly so an unknown locale fails at configuration time
    rule = plural_rule_for(locale)
    logger.debug("Built CLDR pluralizer for %s", locale)

    def pluralize(count: int | float | Decimal) -> str:
        if isinstance(count, (float, Decimal)) and not math.isfinite(count):
            return "other"
        return rule(count)

    pluralize.__qualname__ = f"cldr_pluralizer({locale!r})"
    return pluralize
