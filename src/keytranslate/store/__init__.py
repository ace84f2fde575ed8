"""Message store package.

Provides the translation node variants and the immutable store snapshot.

Python 3.13+.
"""

from .message_store import MessageStore
from .nodes import Group, Template, TranslationNode, build_node

__all__ = [
    "Group",
    "MessageStore",
    "Template",
    "TranslationNode",
    "build_node",
]
