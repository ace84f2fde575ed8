"""Validation result for message store checks.

Store data that cannot be represented at all (wrong value types, nested
groups) is rejected with TypeError when the store is built. Everything that
is representable but suspicious is reported here as a warning.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import DiagnosticCode

__all__ = [
    "ValidationResult",
    "ValidationWarning",
]


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured warning from store validation.

    Attributes:
        code: Warning code
        message: Human-readable warning message
        context: Additional context (e.g., the offending key)
    """

    code: DiagnosticCode
    message: str
    context: str | None = None

    def format(self) -> str:
        """Format warning as a single line."""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code.name}]: {self.message}{context}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable result of validating a message store.

    Attributes:
        warnings: Structural warnings, in store key order

    Example:
        >>> result = ValidationResult.clean()
        >>> result.is_clean
        True
        >>> result.warning_count
        0
    """

    warnings: tuple[ValidationWarning, ...]

    @property
    def is_clean(self) -> bool:
        """True if no warnings were produced."""
        return not self.warnings

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    def codes(self) -> frozenset[DiagnosticCode]:
        """Distinct warning codes present in this result."""
        return frozenset(w.code for w in self.warnings)

    @staticmethod
    def clean() -> "ValidationResult":
        """Create a result with no warnings."""
        return ValidationResult(warnings=())

    def format(self) -> str:
        """Format validation result as human-readable string.

        Returns:
            One line per warning, or a pass message.
        """
        if not self.warnings:
            return "Validation passed: no warnings"

        lines = [f"Warnings ({len(self.warnings)}):"]
        lines.extend(f"  {warning.format()}" for warning in self.warnings)
        return "\n".join(lines)
