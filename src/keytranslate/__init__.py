"""KeyTranslate - compact key-based message resolution.

Resolves translation keys against an in-memory message store: plain
templates, plural groups (exact count, then "n"), single-level sub-key
groups (exact name, then "*"), {placeholder} interpolation to a string or
a segment list, and {{key}} alias expansion.

Public API:
    Translator - Translation function bound to a swappable message store
    TranslatorConfig - Frozen resolution options
    MessageStore - Immutable store snapshot
    resolve_aliases - Standalone {{key}} alias expansion
    validate_store - Structural checks for translation data
    cldr_pluralizer - Babel-backed pluralize function for CLDR-keyed groups

Exceptions (collected, never raised by translation calls):
    TranslationError - Base exception class
    MissingKeyError - Key absent from the store
    MissingBranchError - No usable group branch (plural, sub-key, selector)
    UnresolvedAliasError - Dangling or cyclic alias
    InvalidCallError - Non-string key or unusable call arguments

Submodules:
    keytranslate.store - Template/Group nodes and MessageStore
    keytranslate.runtime - Selector, interpolator, alias expander, Translator
    keytranslate.diagnostics - Error types, codes and formatting
    keytranslate.introspection - Placeholder and alias extraction
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    InvalidCallError,
    MissingBranchError,
    MissingKeyError,
    TranslationError,
    UnresolvedAliasError,
)
from .runtime import Translator, TranslatorConfig, cldr_pluralizer, resolve_aliases
from .store import MessageStore
from .validation import validate_store

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("keytranslate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidCallError",
    "MessageStore",
    "MissingBranchError",
    "MissingKeyError",
    "TranslationError",
    "Translator",
    "TranslatorConfig",
    "UnresolvedAliasError",
    "__version__",
    "cldr_pluralizer",
    "resolve_aliases",
    "validate_store",
]
