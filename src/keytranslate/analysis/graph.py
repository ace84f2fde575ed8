"""Graph algorithms for alias dependency analysis.

Builds the ``{{key}}`` reference graph of a message store and finds cycles
in it with an iterative depth-first search.

Python 3.13+.
"""

from collections.abc import Mapping
from enum import Enum, auto

from keytranslate.introspection import extract_aliases
from keytranslate.store.nodes import Group, TranslationNode

__all__ = ["build_alias_graph", "detect_cycles"]


class _Color(Enum):
    """DFS node state."""

    GREY = auto()  # On the current path
    BLACK = auto()  # Fully explored


def build_alias_graph(nodes: Mapping[str, TranslationNode]) -> dict[str, set[str]]:
    """Map each key to the keys its templates alias.

    Group entries contribute only their default branch, since that is the
    only text an alias to the group can inline.

    Args:
        nodes: Store contents

    Returns:
        Adjacency mapping; targets may include keys absent from the store.

    Example:
        >>> build_alias_graph({"footer": Template("Need help? {{support}}")})
        {'footer': {'support'}}
    """
    graph: dict[str, set[str]] = {}
    for key, node in nodes.items():
        template = node.default_child if Group.guard(node) else node
        graph[key] = set(extract_aliases(template)) if template is not None else set()
    return graph


def detect_cycles(dependencies: Mapping[str, set[str]]) -> list[list[str]]:
    """Detect all cycles in a dependency graph using iterative DFS.

    Uses an explicit stack instead of recursion so long alias chains cannot
    raise RecursionError.

    Args:
        dependencies: Mapping from node to the set of nodes it references.
                      Example: {"a": {"b"}, "b": {"a"}}

    Returns:
        List of cycles, each a path that starts and ends with the same node.
        A cycle is reported once regardless of where the search entered it.

    Example:
        >>> detect_cycles({"a": {"b"}, "b": {"c"}, "c": {"a"}})
        [['a', 'b', 'c', 'a']]

    Complexity:
        Time: O(V + E) where V = nodes, E = edges
        Space: O(V) for colors and the current path
    """
    color: dict[str, _Color] = {}
    cycles: list[list[str]] = []
    seen_cycles: set[frozenset[str]] = set()

    for root in sorted(dependencies):
        if root in color:
            continue

        path: list[str] = [root]
        color[root] = _Color.GREY
        # One iterator of pending neighbours per path entry
        pending = [iter(sorted(dependencies.get(root, ())))]

        while pending:
            neighbour = next(pending[-1], None)
            if neighbour is None:
                color[path.pop()] = _Color.BLACK
                pending.pop()
                continue

            state = color.get(neighbour)
            if state is _Color.GREY:
                cycle = [*path[path.index(neighbour) :], neighbour]
                members = frozenset(cycle)
                if members not in seen_cycles:
                    seen_cycles.add(members)
                    cycles.append(cycle)
            elif state is None and neighbour in dependencies:
                color[neighbour] = _Color.GREY
                path.append(neighbour)
                pending.append(iter(sorted(dependencies[neighbour])))

    return cycles
