"""Diagnostic system for translation errors.

Provides structured error diagnostics with codes, hints and alias paths.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    CyclicAliasError,
    InvalidCallError,
    MissingBranchError,
    MissingKeyError,
    MissingPluralBranchError,
    MissingSelectorError,
    MissingSubkeyBranchError,
    TranslationError,
    UnresolvedAliasError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult, ValidationWarning

__all__ = [
    "CyclicAliasError",
    "InvalidCallError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "MissingBranchError",
    "MissingKeyError",
    "MissingPluralBranchError",
    "MissingSelectorError",
    "MissingSubkeyBranchError",
    "OutputFormat",
    "TranslationError",
    "UnresolvedAliasError",
    "ValidationResult",
    "ValidationWarning",
]
