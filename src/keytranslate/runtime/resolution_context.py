"""Resolution context for alias expansion.

Provides the stateful context passed through the alias expander while it
follows ``{{key}}`` chains: the current key stack for cycle detection, a
depth limit, and memos of finished expansions.

Thread Safety:
    ResolutionContext is created per expansion pass for full isolation.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from keytranslate.constants import MAX_DEPTH

__all__ = ["ResolutionContext"]


@dataclass(slots=True)
class ResolutionContext:
    """Explicit context for one alias expansion pass.

    Performance: Uses both list (for ordered path) and set (for O(1) lookup)
    to optimize cycle detection while preserving path information for errors.

    Successes and cycle failures do not depend on how a key was reached, so
    they are memoized for the whole pass. Depth failures do: a key that ran
    out of depth at stack depth d also fails at any depth >= d, but may
    expand fine from a shallower start. Only that threshold is remembered.

    Attributes:
        stack: Keys currently being expanded, outermost first
        max_depth: Maximum alias chain length (prevents stack overflow)
        resolved: Memo of key -> fully expanded text
        cyclic: Keys whose expansion reaches an alias cycle
        too_deep: Key -> smallest stack depth at which it ran out of depth
        _seen: Set for O(1) membership checking (internal)
    """

    stack: list[str] = field(default_factory=list)
    max_depth: int = MAX_DEPTH
    resolved: dict[str, str] = field(default_factory=dict)
    cyclic: set[str] = field(default_factory=set)
    too_deep: dict[str, int] = field(default_factory=dict)
    _seen: set[str] = field(default_factory=set)

    def push(self, key: str) -> None:
        """Push key onto the expansion stack."""
        self.stack.append(key)
        self._seen.add(key)

    def pop(self) -> str:
        """Pop key from the expansion stack."""
        key = self.stack.pop()
        self._seen.discard(key)
        return key

    def contains(self, key: str) -> bool:
        """Check if key is on the stack (cycle detection).

        Performance: O(1) set lookup instead of O(N) list scan.
        """
        return key in self._seen

    @property
    def depth(self) -> int:
        """Current expansion depth."""
        return len(self.stack)

    def is_depth_exceeded(self, key: str | None = None) -> bool:
        """Check if expanding key from the current depth would exceed the limit."""
        limit = self.max_depth if key is None else self.too_deep.get(key, self.max_depth)
        return self.depth >= limit

    def mark_too_deep(self, key: str) -> None:
        """Record that key ran out of depth when expanded at the current depth."""
        self.too_deep[key] = min(self.depth, self.too_deep.get(key, self.depth))

    def get_cycle_path(self, key: str) -> list[str]:
        """Get the cycle path for error reporting, starting at the repeated key."""
        start = self.stack.index(key) if key in self._seen else 0
        return [*self.stack[start:], key]
