"""Immutable message store snapshot.

A MessageStore is built once from deserialized data and never mutated.
Locale switching replaces the whole snapshot (see Translator.replace), so a
resolution already holding a reference to the old snapshot completes
against consistent data.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .nodes import Group, TranslationNode, build_node

__all__ = ["MessageStore"]


class MessageStore(Mapping[str, TranslationNode]):
    """Read-only mapping from top-level keys to translation nodes.

    Keys are flat: ``"checkout.title"`` is one key, not a path.

    Example:
        >>> store = MessageStore.from_mapping({
        ...     "greeting": "Hello {name}!",
        ...     "items": {0: "no items", 1: "one item", "n": "{count} items"},
        ... })
        >>> store.get("greeting")
        Template(text='Hello {name}!')
        >>> store.get("nope") is None
        True
    """

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Mapping[str, TranslationNode] | None = None) -> None:
        """Wrap already-built nodes. Use from_mapping() for raw data."""
        self._nodes: Mapping[str, TranslationNode] = MappingProxyType(dict(nodes or {}))

    @classmethod
    def from_mapping(cls, data: "Mapping[str, object] | MessageStore") -> "MessageStore":
        """Build a store from deserialized data.

        Args:
            data: Mapping of key to ``str`` / mapping / node, or a MessageStore
                  (returned unchanged, snapshots are immutable)

        Returns:
            New MessageStore

        Raises:
            TypeError: If data is not a mapping, a key is not a string, or a
                       value cannot be converted (see build_node)
        """
        if isinstance(data, MessageStore):
            return data
        if not isinstance(data, Mapping):
            msg = f"Message store data must be a mapping, got {type(data).__name__}"
            raise TypeError(msg)

        nodes: dict[str, TranslationNode] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                msg = f"Translation keys must be strings, got {key!r}"
                raise TypeError(msg)
            nodes[key] = build_node(key, value)
        return cls(nodes)

    def __getitem__(self, key: str) -> TranslationNode:
        return self._nodes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"MessageStore(keys={len(self._nodes)})"

    def get(self, key: str, default: None = None) -> TranslationNode | None:  # type: ignore[override]
        """Look up a key, treating empty groups as missing."""
        node = self._nodes.get(key)
        if node is None or (Group.guard(node) and node.is_empty):
            return default
        return node

    def replacing(self, updates: Mapping[str, TranslationNode]) -> "MessageStore":
        """Return a new snapshot with some nodes swapped (self is unchanged)."""
        return MessageStore({**self._nodes, **updates})
