"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def key_not_found(key: str) -> Diagnostic:
        """Translation key not found in the store.

        Args:
            key: The key that was requested

        Returns:
            Diagnostic for KEY_NOT_FOUND
        """
        msg = f"Translation key '{key}' not found"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_FOUND,
            message=msg,
            hint="Check that the key is present in the message store",
            key=key,
        )

    @staticmethod
    def plural_branch_not_found(key: str, selector_key: str, count: object) -> Diagnostic:
        """No plural branch for the computed selector key.

        Args:
            key: The group's translation key
            selector_key: Child key computed from the count
            count: The numeric selector supplied by the caller

        Returns:
            Diagnostic for PLURAL_BRANCH_NOT_FOUND
        """
        msg = f"No branch '{selector_key}' (count {count!r}) and no 'n' fallback in '{key}'"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_BRANCH_NOT_FOUND,
            message=msg,
            hint=f"Add an 'n' branch to '{key}' to cover every count",
            key=key,
            selector=repr(count),
        )

    @staticmethod
    def subkey_branch_not_found(key: str, subkey: str) -> Diagnostic:
        """No sub-key branch for the requested name.

        Args:
            key: The group's translation key
            subkey: Sub-key requested by the caller

        Returns:
            Diagnostic for SUBKEY_BRANCH_NOT_FOUND
        """
        msg = f"No branch '{subkey}' and no '*' fallback in '{key}'"
        return Diagnostic(
            code=DiagnosticCode.SUBKEY_BRANCH_NOT_FOUND,
            message=msg,
            hint=f"Add a '*' branch to '{key}' or request an existing sub-key",
            key=key,
            selector=repr(subkey),
        )

    @staticmethod
    def selector_required(key: str) -> Diagnostic:
        """Group reached without a selector and without a default branch.

        Args:
            key: The group's translation key

        Returns:
            Diagnostic for SELECTOR_REQUIRED
        """
        msg = f"'{key}' needs a count or sub-key: it has no '*' or 'n' branch"
        return Diagnostic(
            code=DiagnosticCode.SELECTOR_REQUIRED,
            message=msg,
            hint="Pass a number or sub-key as the second argument",
            key=key,
        )

    @staticmethod
    def invalid_key(key: object) -> Diagnostic:
        """Translation key is not a string.

        Args:
            key: The value passed as key

        Returns:
            Diagnostic for INVALID_KEY
        """
        msg = f"Translation key must be a string, got {type(key).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY,
            message=msg,
            hint="Pass the key as the first argument, e.g. t('greeting')",
        )

    @staticmethod
    def invalid_arguments(key: str, detail: str) -> Diagnostic:
        """Selector/args arguments that fit neither call slot.

        Args:
            key: Translation key of the call
            detail: What was wrong with the arguments

        Returns:
            Diagnostic for INVALID_ARGUMENTS
        """
        msg = f"Ignoring arguments for '{key}': {detail}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENTS,
            message=msg,
            hint="Pass a number or sub-key, then a mapping or sequence of args",
            key=key,
        )

    @staticmethod
    def alias_not_found(owner: str, alias: str) -> Diagnostic:
        """Alias references a key that does not exist.

        Args:
            owner: Key whose template contains the alias
            alias: The referenced key

        Returns:
            Diagnostic for ALIAS_NOT_FOUND
        """
        msg = f"Alias '{{{{{alias}}}}}' in '{owner}' references an unknown key"
        return Diagnostic(
            code=DiagnosticCode.ALIAS_NOT_FOUND,
            message=msg,
            hint=f"Define '{alias}' or remove the reference",
            key=owner,
        )

    @staticmethod
    def alias_no_default_branch(owner: str, alias: str) -> Diagnostic:
        """Alias targets a group that has no default branch.

        Args:
            owner: Key whose template contains the alias
            alias: The referenced group key

        Returns:
            Diagnostic for ALIAS_NO_DEFAULT_BRANCH
        """
        msg = f"Alias '{{{{{alias}}}}}' in '{owner}' targets a group with no '*' or 'n' branch"
        return Diagnostic(
            code=DiagnosticCode.ALIAS_NO_DEFAULT_BRANCH,
            message=msg,
            hint=f"Add a '*' or 'n' branch to '{alias}'",
            key=owner,
        )

    @staticmethod
    def cyclic_alias(path: list[str]) -> Diagnostic:
        """Alias chain revisits a key.

        Args:
            path: Keys forming the cycle, ending with the repeated key

        Returns:
            Diagnostic for CYCLIC_ALIAS
        """
        msg = f"Cyclic alias: {' -> '.join(path)}"
        return Diagnostic(
            code=DiagnosticCode.CYCLIC_ALIAS,
            message=msg,
            hint="Break the cycle; an alias cannot (indirectly) reference itself",
            key=path[0] if path else None,
            resolution_path=tuple(path),
        )

    @staticmethod
    def alias_depth_exceeded(owner: str, max_depth: int) -> Diagnostic:
        """Alias chain longer than the depth limit.

        Args:
            owner: Key where expansion started
            max_depth: Configured maximum depth

        Returns:
            Diagnostic for ALIAS_DEPTH_EXCEEDED
        """
        msg = f"Alias chain from '{owner}' exceeds maximum depth ({max_depth})"
        return Diagnostic(
            code=DiagnosticCode.ALIAS_DEPTH_EXCEEDED,
            message=msg,
            hint="Shorten the chain of {{key}} references",
            key=owner,
        )
