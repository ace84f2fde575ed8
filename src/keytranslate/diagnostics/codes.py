"""Diagnostic codes and data structures.

Defines error codes, error categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for translation errors.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``; log aggregation receives
    plain strings (``"missing"``, ``"alias"``) rather than the
    ``"ErrorCategory.X"`` repr that a plain ``Enum`` would produce.

    Categories:
        MISSING: Key absent from the store
        SELECTION: Group reached but no branch could be selected
        ALIAS: Dangling or cyclic ``{{key}}`` reference
        CALL: Translation call with a non-string key or unusable arguments
    """

    MISSING = "missing"
    SELECTION = "selection"
    ALIAS = "alias"
    CALL = "call"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing key, branch, selector, bad call arguments)
        2000-2999: Alias errors (dangling, cyclic, depth)
        5100-5199: Validation warnings (store-level structural checks)
    """

    # Lookup errors (1000-1999)
    KEY_NOT_FOUND = 1001
    PLURAL_BRANCH_NOT_FOUND = 1002
    SUBKEY_BRANCH_NOT_FOUND = 1003
    SELECTOR_REQUIRED = 1004
    INVALID_KEY = 1005
    INVALID_ARGUMENTS = 1006

    # Alias errors (2000-2999)
    ALIAS_NOT_FOUND = 2001
    ALIAS_NO_DEFAULT_BRANCH = 2002
    CYCLIC_ALIAS = 2003
    ALIAS_DEPTH_EXCEEDED = 2004

    # Validation warnings (5100-5199)
    VALIDATION_EMPTY_GROUP = 5101
    VALIDATION_NO_DEFAULT_BRANCH = 5102
    VALIDATION_UNDEFINED_ALIAS = 5103
    VALIDATION_ALIAS_TO_GROUP = 5104
    VALIDATION_CIRCULAR_ALIAS = 5105


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        key: Translation key the error refers to
        selector: Selector value in effect (repr form), if any
        severity: Error severity level
        resolution_path: Alias chain at time of error (for cycles)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    key: str | None = None
    selector: str | None = None
    severity: Literal["error", "warning"] = "error"
    resolution_path: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[KEY_NOT_FOUND]: Translation key 'hello' not found
              --> key: hello
              = help: Check that the key is present in the message store

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
