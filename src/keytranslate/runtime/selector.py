"""Plural and sub-key branch selection.

Picks the leaf template of a node for a given selector:

- Template: returned unchanged; any selector is interpolation data only
- Group + number: exact child for the selector key, else ``"n"``
- Group + string: exact child for the sub-key, else ``"*"``
- Group + nothing: ``"*"``, else ``"n"``

Exact matches always win; the default branch is only consulted on absence.

Python 3.13+. Zero external dependencies.
"""

import logging
import math
from collections.abc import Callable
from decimal import Decimal

from keytranslate.constants import (
    DEFAULT_BRANCH_ORDER,
    PLURAL_FALLBACK_KEY,
    SUBKEY_FALLBACK_KEY,
)
from keytranslate.diagnostics import (
    ErrorTemplate,
    MissingPluralBranchError,
    MissingSelectorError,
    MissingSubkeyBranchError,
)
from keytranslate.store.nodes import Group, Template, TranslationNode

__all__ = [
    "Number",
    "Pluralizer",
    "Selector",
    "is_numeric_selector",
    "select",
    "selector_key",
]

logger = logging.getLogger(__name__)

type Number = int | float | Decimal
type Selector = Number | str
type Pluralizer = Callable[[Number], str]


def is_numeric_selector(value: object) -> bool:
    """True for int/float/Decimal counts (bool is not a count)."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def selector_key(count: Number, pluralize: Pluralizer | None = None) -> str | None:
    """Compute the child key a count selects.

    Args:
        count: Numeric selector
        pluralize: Optional custom function returning the child key

    Returns:
        ``pluralize(count)`` if given, else the integer portion of the count
        as a string. None for NaN/infinite counts (no exact child can match).

    Example:
        >>> selector_key(5)
        '5'
        >>> selector_key(2.7)
        '2'
        >>> selector_key(1, lambda n: "one" if n == 1 else "other")
        'one'
    """
    if pluralize is not None:
        return str(pluralize(count))
    if isinstance(count, Decimal):
        if not count.is_finite():
            return None
    elif isinstance(count, float) and not math.isfinite(count):
        return None
    return str(int(count))


def _select_plural(key: str, group: Group, count: Number, pluralize: Pluralizer | None) -> Template:
    wanted = selector_key(count, pluralize)
    if wanted is not None and wanted in group.children:
        return group.children[wanted]
    if PLURAL_FALLBACK_KEY in group.children:
        logger.debug("No branch %r in %r, using 'n'", wanted, key)
        return group.children[PLURAL_FALLBACK_KEY]
    raise MissingPluralBranchError(
        ErrorTemplate.plural_branch_not_found(key, str(wanted), count)
    )


def _select_subkey(key: str, group: Group, subkey: str) -> Template:
    if subkey in group.children:
        return group.children[subkey]
    if SUBKEY_FALLBACK_KEY in group.children:
        logger.debug("No branch %r in %r, using '*'", subkey, key)
        return group.children[SUBKEY_FALLBACK_KEY]
    raise MissingSubkeyBranchError(ErrorTemplate.subkey_branch_not_found(key, subkey))


def _select_default(key: str, group: Group) -> Template:
    for name in DEFAULT_BRANCH_ORDER:
        if name in group.children:
            return group.children[name]
    raise MissingSelectorError(ErrorTemplate.selector_required(key))


def select(
    node: TranslationNode,
    selector: Selector | None = None,
    *,
    key: str = "",
    pluralize: Pluralizer | None = None,
) -> Template:
    """Select the leaf template for a node.

    Args:
        node: Template or Group from the store
        selector: Count, sub-key, or None
        key: Translation key of the node (for diagnostics)
        pluralize: Custom count-to-child-key function

    Returns:
        The selected Template

    Raises:
        MissingPluralBranchError: Count matched nothing and there is no "n"
        MissingSubkeyBranchError: Sub-key matched nothing and there is no "*"
        MissingSelectorError: No selector and neither "*" nor "n" exists
        TypeError: Selector is neither a number, a string, nor None

    Example:
        >>> items = Group.from_children({"0": Template("none"), "n": Template("{n}")})
        >>> select(items, 0)
        Template(text='none')
        >>> select(items, 7)
        Template(text='{n}')
    """
    match node:
        case Template():
            return node
        case Group():
            if selector is None:
                return _select_default(key, node)
            if is_numeric_selector(selector):
                return _select_plural(key, node, selector, pluralize)  # type: ignore[arg-type]
            if isinstance(selector, str):
                return _select_subkey(key, node, selector)
            msg = f"Selector must be a number or string, got {type(selector).__name__}"
            raise TypeError(msg)
