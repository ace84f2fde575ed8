"""Translation exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
None of them escape ``Translator.__call__``: the facade collects them and
applies the missing-translation policy instead.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "CyclicAliasError",
    "InvalidCallError",
    "MissingBranchError",
    "MissingKeyError",
    "MissingPluralBranchError",
    "MissingSelectorError",
    "MissingSubkeyBranchError",
    "TranslationError",
    "UnresolvedAliasError",
]


class TranslationError(Exception):
    """Base exception for all translation errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    category: ErrorCategory = ErrorCategory.MISSING

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TranslationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def key(self) -> str | None:
        """Translation key the error refers to, if known."""
        return self.diagnostic.key if self.diagnostic is not None else None


class MissingKeyError(TranslationError):
    """Top-level key absent from the message store.

    Also raised for keys mapping to a group with no children.
    """


class MissingBranchError(TranslationError):
    """Group node reached but no branch could be selected."""

    category = ErrorCategory.SELECTION


class MissingPluralBranchError(MissingBranchError):
    """Numeric selector matched no child and the group has no ``"n"`` branch."""


class MissingSubkeyBranchError(MissingBranchError):
    """Sub-key selector matched no child and the group has no ``"*"`` branch."""


class MissingSelectorError(MissingBranchError):
    """No selector supplied and the group has neither ``"*"`` nor ``"n"``."""


class UnresolvedAliasError(TranslationError):
    """A ``{{key}}`` reference could not be expanded.

    The reference is left verbatim in the template text.
    """

    category = ErrorCategory.ALIAS


class CyclicAliasError(UnresolvedAliasError):
    """Alias chain revisits a key (or exceeds the depth limit).

    Example:
        a = "{{b}}", b = "{{a}}"  <- Infinite expansion!
    """


class InvalidCallError(TranslationError):
    """Translation call the resolver cannot interpret.

    A non-string key, or a selector/args argument of an unsupported type.
    The call still returns a value: ``{???}`` for a bad key, otherwise the
    message resolved with the offending arguments dropped.
    """

    category = ErrorCategory.CALL
