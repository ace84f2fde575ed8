"""Shared constants for KeyTranslate.

This module provides centralized configuration constants used across
store, runtime and validation packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Reserved keys: Fallback branch keys and reserved placeholder names
- Depth limits: Recursion protection for alias expansion
- Fallback markers: Debug sentinel for missing translations
- Logging limits: Truncation of user-controlled text in log records

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reserved keys
    "PLURAL_FALLBACK_KEY",
    "SUBKEY_FALLBACK_KEY",
    "DEFAULT_BRANCH_ORDER",
    "RESERVED_COUNT_NAMES",
    # Depth limits
    "MAX_DEPTH",
    # Fallback markers
    "DEBUG_MARKER",
    "FALLBACK_DEBUG_MISSING",
    "FALLBACK_INVALID",
    # Logging limits
    "LOG_TRUNCATE_WARNING",
    "LOG_TRUNCATE_DEBUG",
]

# ============================================================================
# RESERVED KEYS
# ============================================================================

# Plural groups: children keyed by stringified integers plus this fallback.
PLURAL_FALLBACK_KEY: str = "n"

# Sub-key groups: children keyed by arbitrary names plus this fallback.
SUBKEY_FALLBACK_KEY: str = "*"

# Order in which a group's default branch is chosen when no selector applies.
# Used both by selection without a selector and by alias targets.
DEFAULT_BRANCH_ORDER: tuple[str, ...] = (SUBKEY_FALLBACK_KEY, PLURAL_FALLBACK_KEY)

# Placeholder names that expose the active numeric selector inside a leaf.
RESERVED_COUNT_NAMES: tuple[str, ...] = ("n", "count")

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum alias chain length ({{a}} -> {{b}} -> ...).
# A chain of 100+ aliases is almost certainly a design error.
# This limit prevents RecursionError while allowing reasonable nesting.
MAX_DEPTH: int = 100

# ============================================================================
# FALLBACK MARKERS
# ============================================================================

# Delimiter wrapped around a missing key in debug mode.
DEBUG_MARKER: str = "@@"

# Format string for the debug sentinel, e.g. @@checkout.title@@
FALLBACK_DEBUG_MISSING: str = DEBUG_MARKER + "{key}" + DEBUG_MARKER

# Result of a call that cannot be resolved at all (non-string key).
FALLBACK_INVALID: str = "{???}"

# ============================================================================
# LOGGING LIMITS
# ============================================================================

# Warnings show more context as they're surfaced to users.
# Debug messages are high-volume, shorter keeps logs manageable.
LOG_TRUNCATE_WARNING: int = 100
LOG_TRUNCATE_DEBUG: int = 50
