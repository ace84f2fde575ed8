"""Translator configuration.

Provides a single frozen dataclass that encapsulates all resolution
options. Translator builds one from its keyword arguments and exposes it
read-only as ``translator.config``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .selector import Pluralizer

__all__ = ["TranslatorConfig"]


@dataclass(frozen=True, slots=True)
class TranslatorConfig:
    """Immutable configuration for Translator.

    All fields have defaults; ``TranslatorConfig()`` gives plain string
    output, numeric-exact/"n" plural selection and the key itself for
    missing translations.

    Attributes:
        debug: Wrap missing keys as ``@@key@@`` and log one warning per
            failed resolution (default: False).
        use_key_for_missing_translation: Return the raw key for missing
            translations; takes precedence over ``debug`` (default: False).
        array_mode: Plain calls return a list of segments instead of a
            string (default: False).
        resolve_aliases: Expand ``{{key}}`` aliases whenever the store is
            loaded or replaced (default: False).
        pluralize: Custom function mapping a count to a group child key,
            replacing the integer-portion default (default: None).

    Example:
        >>> config = TranslatorConfig(debug=True, array_mode=True)
        >>> config.debug
        True
    """

    debug: bool = False
    use_key_for_missing_translation: bool = False
    array_mode: bool = False
    resolve_aliases: bool = False
    pluralize: Pluralizer | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            TypeError: If pluralize is neither callable nor None.
        """
        if self.pluralize is not None and not callable(self.pluralize):
            msg = f"pluralize must be callable, got {type(self.pluralize).__name__}"
            raise TypeError(msg)
