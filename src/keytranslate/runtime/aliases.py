"""Alias expansion - inlines ``{{key}}`` references into templates.

A template may embed another key's text with ``{{otherKey}}``:

    support = Contact support
    footer  = Need help? {{support}}     ->  Need help? Contact support

Rules:
    - Only top-level Template values are rewritten; group branches are not.
    - Targets are expanded recursively before being inlined.
    - A Group target contributes its default branch ("*", else "n").
    - Dangling aliases and Group targets without a default branch are left
      verbatim; the rest of the template is still expanded.
    - An alias whose chain revisits a key (or exceeds MAX_DEPTH) is left
      verbatim, and so is every alias whose expansion would contain it.
    - Text is rescanned after substitution until no alias resolves any
      more, since inlined text can complete a new span:
      ``{{{b}}}`` with ``b = {c}`` becomes ``{{c}}``.

Together these keep expansion idempotent, expand(expand(S)) == expand(S),
for every store whose alias chains fit within MAX_DEPTH.

Every unresolved alias is reported as an UnresolvedAliasError
(CyclicAliasError for cycles and depth overruns).

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from collections.abc import Mapping
from enum import Enum, auto

from keytranslate.constants import LOG_TRUNCATE_WARNING, MAX_DEPTH
from keytranslate.diagnostics import (
    CyclicAliasError,
    Diagnostic,
    ErrorTemplate,
    UnresolvedAliasError,
)
from keytranslate.store.message_store import MessageStore
from keytranslate.store.nodes import Group, Template, TranslationNode

from .resolution_context import ResolutionContext

__all__ = ["ALIAS_PATTERN", "expand_aliases", "resolve_aliases"]

logger = logging.getLogger(__name__)

ALIAS_PATTERN = re.compile(r"\{\{([^{}]+)\}\}")


class _Unresolved(Enum):
    """Why an alias target could not be inlined."""

    VERBATIM = auto()  # Dangling, or group without default branch
    CYCLE = auto()  # Chain reaches a cycle
    TOO_DEEP = auto()  # Chain longer than max_depth


class _AliasExpander:
    """One expansion pass over a store snapshot."""

    __slots__ = ("_context", "_errors", "_reported", "_store")

    def __init__(self, store: MessageStore, max_depth: int) -> None:
        self._store = store
        self._context = ResolutionContext(max_depth=max_depth)
        self._errors: list[UnresolvedAliasError] = []
        self._reported: set[tuple[str, str]] = set()

    @property
    def errors(self) -> tuple[UnresolvedAliasError, ...]:
        return tuple(self._errors)

    def _report(self, error_type: type[UnresolvedAliasError], diagnostic: Diagnostic) -> None:
        # One report per (owner, message) within a pass
        marker = (diagnostic.key or "", diagnostic.message)
        if marker not in self._reported:
            self._reported.add(marker)
            self._errors.append(error_type(diagnostic))

    def expand_top_level(self, key: str, template: Template) -> Template:
        """Expand a top-level template; failing aliases stay verbatim."""
        self._context.push(key)
        try:
            text = self._expand_lenient(key, template.text)
        finally:
            self._context.pop()
        return template if text == template.text else Template(text)

    def _substitute(self, owner: str, text: str) -> tuple[str, _Unresolved | None]:
        """Replace every resolvable alias in text once.

        Returns:
            (new_text, failure): unresolvable aliases are kept verbatim in
            new_text; failure is the first cycle or depth failure seen.
        """
        pieces: list[str] = []
        failure: _Unresolved | None = None
        position = 0
        for match in ALIAS_PATTERN.finditer(text):
            pieces.append(text[position : match.start()])
            position = match.end()
            outcome = self._resolve_target(owner, match.group(1).strip())
            if isinstance(outcome, str):
                pieces.append(outcome)
                continue
            pieces.append(match.group(0))
            if outcome is not _Unresolved.VERBATIM and failure is None:
                failure = outcome
        pieces.append(text[position:])
        return "".join(pieces), failure

    def _expand_lenient(self, owner: str, text: str) -> str:
        """Expand to a fixed point, keeping failed aliases verbatim."""
        for _ in range(self._context.max_depth):
            expanded = self._substitute(owner, text)[0]
            if expanded == text:
                return text
            text = expanded
        self._report(
            CyclicAliasError, ErrorTemplate.alias_depth_exceeded(owner, self._context.max_depth)
        )
        return text

    def _expand_strict(self, owner: str, text: str) -> str | _Unresolved:
        """Expand to a fixed point; any cycle or depth failure fails the text.

        Used for nested targets so a partially expanded cycle is never
        inlined anywhere.
        """
        for _ in range(self._context.max_depth):
            expanded, failure = self._substitute(owner, text)
            if failure is not None:
                return failure
            if expanded == text:
                return text
            text = expanded
        self._report(
            CyclicAliasError, ErrorTemplate.alias_depth_exceeded(owner, self._context.max_depth)
        )
        return _Unresolved.TOO_DEEP

    def _resolve_target(self, owner: str, alias: str) -> str | _Unresolved:
        """Expanded text of an alias target, or why it cannot be inlined."""
        context = self._context
        if alias in context.resolved:
            return context.resolved[alias]
        if alias in context.cyclic:
            return _Unresolved.CYCLE

        node: TranslationNode | None = self._store.get(alias)
        if node is None:
            self._report(UnresolvedAliasError, ErrorTemplate.alias_not_found(owner, alias))
            return _Unresolved.VERBATIM

        if Group.guard(node):
            template = node.default_child
            if template is None:
                self._report(
                    UnresolvedAliasError, ErrorTemplate.alias_no_default_branch(owner, alias)
                )
                return _Unresolved.VERBATIM
        else:
            template = node

        if context.contains(alias):
            self._report(CyclicAliasError, ErrorTemplate.cyclic_alias(context.get_cycle_path(alias)))
            return _Unresolved.CYCLE

        if context.is_depth_exceeded(alias):
            self._report(
                CyclicAliasError, ErrorTemplate.alias_depth_exceeded(owner, context.max_depth)
            )
            return _Unresolved.TOO_DEEP

        context.push(alias)
        try:
            result = self._expand_strict(alias, template.text)
        finally:
            context.pop()

        match result:
            case str():
                context.resolved[alias] = result
            case _Unresolved.CYCLE:
                context.cyclic.add(alias)
            case _Unresolved.TOO_DEEP:
                context.mark_too_deep(alias)
        return result


def expand_aliases(
    store: "Mapping[str, object] | MessageStore",
    *,
    max_depth: int = MAX_DEPTH,
) -> tuple[MessageStore, tuple[UnresolvedAliasError, ...]]:
    """Inline ``{{key}}`` references across a store.

    Args:
        store: MessageStore or raw deserialized data
        max_depth: Maximum alias chain length

    Returns:
        Tuple of (expanded_store, errors). The input snapshot is never
        modified; if nothing changes the same snapshot is returned.

    Example:
        >>> expanded, errors = expand_aliases({
        ...     "support": "Contact support",
        ...     "footer": "Need help? {{support}}",
        ... })
        >>> expanded["footer"].text
        'Need help? Contact support'
        >>> errors
        ()
    """
    snapshot = MessageStore.from_mapping(store)
    expander = _AliasExpander(snapshot, max_depth)

    updates: dict[str, TranslationNode] = {}
    for key, node in snapshot.items():
        if Template.guard(node) and "{{" in node.text:
            expanded = expander.expand_top_level(key, node)
            if expanded is not node:
                updates[key] = expanded

    logger.debug(
        "Alias expansion: %d template(s) rewritten, %d unresolved alias(es)",
        len(updates),
        len(expander.errors),
    )
    if not updates:
        return snapshot, expander.errors
    return snapshot.replacing(updates), expander.errors


def log_alias_errors(errors: tuple[UnresolvedAliasError, ...], *, debug: bool) -> None:
    """Report unresolved aliases through the missing-translation log channel."""
    level = logging.WARNING if debug else logging.DEBUG
    for error in errors:
        message = error.diagnostic.message if error.diagnostic is not None else str(error)
        logger.log(level, "Unresolved alias: %s", message[:LOG_TRUNCATE_WARNING])


def resolve_aliases(
    store: "Mapping[str, object] | MessageStore",
    *,
    debug: bool = False,
    max_depth: int = MAX_DEPTH,
) -> MessageStore:
    """Standalone alias resolution for host applications.

    Same as expand_aliases() but returns only the store; unresolved aliases
    are logged (WARNING when debug is set, DEBUG otherwise).

    Args:
        store: MessageStore or raw deserialized data
        debug: Log unresolved aliases at WARNING level
        max_depth: Maximum alias chain length

    Returns:
        Expanded MessageStore
    """
    expanded, errors = expand_aliases(store, max_depth=max_depth)
    log_alias_errors(errors, debug=debug)
    return expanded
