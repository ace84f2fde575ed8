"""Translation node definitions.

A message store maps top-level keys to one of two node variants:

- Template: a leaf message with zero or more ``{placeholder}`` tokens
- Group: single-level children keyed by count (``"0"``, ``"1"``, ``"n"``)
  or by sub-key name (``"submit"``, ``"*"``)

The engine does not distinguish plural groups from sub-key groups
structurally; the selector type supplied at resolution time decides.

Includes type guards as static methods (eliminates isinstance chains in callers).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeIs

from keytranslate.constants import DEFAULT_BRANCH_ORDER

__all__ = [
    "Group",
    "Template",
    "TranslationNode",
    "build_node",
]


@dataclass(frozen=True, slots=True)
class Template:
    """Leaf message definition.

    Attributes:
        text: Literal text with ``{name}`` / ``{0}`` placeholders and
              optional ``{{key}}`` aliases

    Example:
        Template("Hello {name}!")
    """

    text: str

    @staticmethod
    def guard(node: object) -> TypeIs["Template"]:
        """Type guard for Template nodes."""
        return isinstance(node, Template)


@dataclass(frozen=True, slots=True)
class Group:
    """Keyed branches of a single message.

    Attributes:
        children: Branch templates keyed by string (read-only mapping)
        default_child_key: Branch used when no selector applies; ``"*"`` if
                           present, else ``"n"`` if present, else None

    Example:
        Group.from_children({"0": Template("no items"), "n": Template("{n} items")})
    """

    children: Mapping[str, Template]
    default_child_key: str | None = None

    def __post_init__(self) -> None:
        """Validate group invariants."""
        if self.default_child_key is not None and self.default_child_key not in self.children:
            msg = f"default_child_key {self.default_child_key!r} is not a child key"
            raise ValueError(msg)

    @classmethod
    def from_children(cls, children: Mapping[str, Template]) -> "Group":
        """Create a group, deriving its default branch from the child keys."""
        frozen = MappingProxyType(dict(children))
        default = next((k for k in DEFAULT_BRANCH_ORDER if k in frozen), None)
        return cls(children=frozen, default_child_key=default)

    @property
    def is_empty(self) -> bool:
        """True if the group has no branches (treated as a missing key)."""
        return not self.children

    @property
    def default_child(self) -> Template | None:
        """Default branch template, if the group has one."""
        if self.default_child_key is None:
            return None
        return self.children[self.default_child_key]

    @staticmethod
    def guard(node: object) -> TypeIs["Group"]:
        """Type guard for Group nodes."""
        return isinstance(node, Group)


type TranslationNode = Template | Group


def _build_child(key: str, name: str, value: object) -> Template:
    """Build a group branch; branches must be leaves."""
    match value:
        case Template():
            return value
        case str():
            return Template(value)
        case Group() | Mapping():
            msg = f"Nested groups are not supported: '{key}' -> '{name}'"
            raise TypeError(msg)
        case _:
            msg = f"Branch '{key}' -> '{name}' must be a string, got {type(value).__name__}"
            raise TypeError(msg)


def build_node(key: str, value: object) -> TranslationNode:
    """Convert deserialized data into a translation node.

    Args:
        key: Top-level key (used in error messages)
        value: ``str``, mapping of ``str | int`` to ``str``, or an existing node

    Returns:
        Template or Group

    Raises:
        TypeError: If the value (or a branch) has an unsupported type,
                   or a branch is itself a mapping

    Example:
        >>> build_node("items", {0: "no items", "n": "{n} items"})
        Group(children=mappingproxy({'0': Template(text='no items'), ...}), default_child_key='n')
    """
    match value:
        case Template() | Group():
            return value
        case str():
            return Template(value)
        case Mapping():
            children: dict[str, Template] = {}
            for raw_name, child in value.items():
                if isinstance(raw_name, bool) or not isinstance(raw_name, (str, int)):
                    msg = f"Branch keys of '{key}' must be str or int, got {raw_name!r}"
                    raise TypeError(msg)
                name = str(raw_name)
                children[name] = _build_child(key, name, child)
            return Group.from_children(children)
        case _:
            msg = f"Value of '{key}' must be a string or mapping, got {type(value).__name__}"
            raise TypeError(msg)
