"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# C0 control characters except TAB, plus DEL.
_CONTROL_CHARS = {c: f"\\x{c:02x}" for c in (*range(0x00, 0x09), *range(0x0A, 0x20), 0x7F)}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Translation keys and message text are
    user data, so control characters are escaped before output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate every text field (message, key, selector, path,
            hint) to max_content_length, in every output format
        color: Wrap the severity in ANSI color codes (rust format only)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.key_not_found("hello")
        >>> print(formatter.format(diagnostic))
        error[KEY_NOT_FOUND]: Translation key 'hello' not found
          --> key: hello
          = help: Check that the key is present in the message store

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        KEY_NOT_FOUND: Translation key 'hello' not found
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by blank lines
        """
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Format a ValidationResult with all of its warnings.

        Args:
            result: ValidationResult to format

        Returns:
            Formatted string with summary and details
        """
        if result.is_clean:
            return "Validation passed"

        parts = [f"Validation found {result.warning_count} warning(s)", "", "Warnings:"]
        parts.extend(f"  {self._clean(warning.format())}" for warning in result.warnings)
        return "\n".join(parts)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[CYCLIC_ALIAS]: Cyclic alias: a -> b -> a
              --> key: a
              = path: a -> b -> a
              = help: Break the cycle; an alias cannot (indirectly) reference itself
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._clean(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.key is not None:
            parts.append(f"  --> key: {self._clean(diagnostic.key)}")

        if diagnostic.selector is not None:
            parts.append(f"  = selector: {self._clean(diagnostic.selector)}")

        if diagnostic.resolution_path:
            path = " -> ".join(diagnostic.resolution_path)
            parts.append(f"  = path: {self._clean(path)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            KEY_NOT_FOUND: Translation key 'hello' not found
        """
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "KEY_NOT_FOUND", "code_value": 1001, "message": "...", "severity": "error"}
        """
        data: dict[str, str | int | list[str] | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.key is not None:
            data["key"] = self._maybe_sanitize(diagnostic.key)

        if diagnostic.selector is not None:
            data["selector"] = self._maybe_sanitize(diagnostic.selector)

        if diagnostic.resolution_path:
            data["resolution_path"] = [
                self._maybe_sanitize(step) for step in diagnostic.resolution_path
            ]

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        # json.dumps escapes control characters itself
        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        """Escape control characters, then truncate if sanitizing."""
        return self._maybe_sanitize(text.translate(_CONTROL_CHARS))

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
