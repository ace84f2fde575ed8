"""Template introspection.

Extracts the placeholder tokens and alias references of templates, for
tooling such as CI checks that every caller passes the right arguments.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from keytranslate.constants import DEFAULT_BRANCH_ORDER
from keytranslate.runtime.aliases import ALIAS_PATTERN
from keytranslate.runtime.interpolator import scan_template
from keytranslate.store.nodes import Group, Template, TranslationNode

__all__ = [
    "MessageIntrospection",
    "extract_aliases",
    "extract_placeholders",
    "introspect_node",
]


def extract_placeholders(template: Template | str) -> frozenset[str]:
    """Placeholder token names used by a template.

    Example:
        >>> sorted(extract_placeholders("{0}: {count} new for {name}"))
        ['0', 'count', 'name']
    """
    text = template.text if Template.guard(template) else template
    _, tokens = scan_template(text)
    return frozenset(tokens)


def extract_aliases(template: Template | str) -> frozenset[str]:
    """Keys referenced through ``{{key}}`` aliases in a template.

    Example:
        >>> extract_aliases("Need help? {{support}}")
        frozenset({'support'})
    """
    text = template.text if Template.guard(template) else template
    return frozenset(match.group(1).strip() for match in ALIAS_PATTERN.finditer(text))


@dataclass(frozen=True, slots=True)
class MessageIntrospection:
    """Introspection data for one store entry.

    Attributes:
        key: Translation key
        is_group: True for plural/sub-key groups
        branches: Child keys of a group (empty for templates)
        placeholders: Named placeholder tokens across all branches
        positional: Positional placeholder indices across all branches
        aliases: Alias targets across all branches
    """

    key: str
    is_group: bool
    branches: frozenset[str]
    placeholders: frozenset[str]
    positional: frozenset[int]
    aliases: frozenset[str]

    @property
    def requires_selector(self) -> bool:
        """True if the entry cannot resolve without a count or sub-key."""
        return self.is_group and not self.branches.intersection(DEFAULT_BRANCH_ORDER)


def introspect_node(key: str, node: TranslationNode) -> MessageIntrospection:
    """Collect placeholder and alias usage for a store entry."""
    templates = list(node.children.values()) if Group.guard(node) else [node]

    tokens: set[str] = set()
    aliases: set[str] = set()
    for template in templates:
        tokens |= extract_placeholders(template)
        aliases |= extract_aliases(template)

    return MessageIntrospection(
        key=key,
        is_group=Group.guard(node),
        branches=frozenset(node.children) if Group.guard(node) else frozenset(),
        placeholders=frozenset(t for t in tokens if not t.isdigit()),
        positional=frozenset(int(t) for t in tokens if t.isdigit()),
        aliases=frozenset(aliases),
    )
