"""Store validation.

Python 3.13+.
"""

from .store import validate_store

__all__ = ["validate_store"]
