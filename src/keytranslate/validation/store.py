"""Message store validation.

Checks a store for entries that will silently fall back at runtime:

- Empty groups (resolve as missing keys)
- Groups without a "*" or "n" branch (need a selector on every call)
- Aliases to unknown keys
- Aliases to groups without a default branch
- Alias cycles

Use this in CI/tooling before shipping translation data. It never raises
for content problems; unrepresentable data raises TypeError while building
the store, as everywhere else.

Python 3.13+.
"""

import logging
from collections.abc import Mapping

from keytranslate.analysis.graph import build_alias_graph, detect_cycles
from keytranslate.diagnostics import DiagnosticCode, ValidationResult, ValidationWarning
from keytranslate.introspection import extract_aliases
from keytranslate.store.message_store import MessageStore
from keytranslate.store.nodes import Group, Template

__all__ = ["validate_store"]

logger = logging.getLogger(__name__)


def _check_aliases(
    key: str, template: Template, store: MessageStore, warnings: list[ValidationWarning]
) -> None:
    for alias in sorted(extract_aliases(template)):
        if alias not in store:
            warnings.append(
                ValidationWarning(
                    code=DiagnosticCode.VALIDATION_UNDEFINED_ALIAS,
                    message=f"Alias '{{{{{alias}}}}}' references an unknown key",
                    context=key,
                )
            )
            continue
        target = store[alias]
        if Group.guard(target) and target.default_child_key is None:
            warnings.append(
                ValidationWarning(
                    code=DiagnosticCode.VALIDATION_ALIAS_TO_GROUP,
                    message=f"Alias '{{{{{alias}}}}}' targets a group with no '*' or 'n' branch",
                    context=key,
                )
            )


def validate_store(store: "Mapping[str, object] | MessageStore") -> ValidationResult:
    """Validate message store contents.

    Args:
        store: MessageStore or raw deserialized data

    Returns:
        ValidationResult with one warning per finding

    Raises:
        TypeError: If raw data cannot be converted into a store

    Example:
        >>> result = validate_store({"a": "{{b}}", "b": "{{a}}"})
        >>> result.is_clean
        False
        >>> print(result.format())
        Warnings (1):
          [VALIDATION_CIRCULAR_ALIAS]: Circular alias: a -> b -> a (a)
    """
    snapshot = MessageStore.from_mapping(store)
    warnings: list[ValidationWarning] = []

    for key, node in snapshot.items():
        if Group.guard(node):
            if node.is_empty:
                warnings.append(
                    ValidationWarning(
                        code=DiagnosticCode.VALIDATION_EMPTY_GROUP,
                        message="Group has no branches and resolves as missing",
                        context=key,
                    )
                )
                continue
            if node.default_child_key is None:
                warnings.append(
                    ValidationWarning(
                        code=DiagnosticCode.VALIDATION_NO_DEFAULT_BRANCH,
                        message="Group has no '*' or 'n' branch; unmatched selectors will fail",
                        context=key,
                    )
                )
            for template in node.children.values():
                _check_aliases(key, template, snapshot, warnings)
        else:
            _check_aliases(key, node, snapshot, warnings)

    for cycle in detect_cycles(build_alias_graph(snapshot)):
        warnings.append(
            ValidationWarning(
                code=DiagnosticCode.VALIDATION_CIRCULAR_ALIAS,
                message=f"Circular alias: {' -> '.join(cycle)}",
                context=cycle[0],
            )
        )

    logger.debug("Validated %d key(s): %d warning(s)", len(snapshot), len(warnings))
    if not warnings:
        return ValidationResult.clean()
    return ValidationResult(warnings=tuple(warnings))
