"""Translator - Main API for key-based message resolution.

Python 3.13+. Indirect dependency: Babel (only via the opt-in CLDR pluralizer).
"""

import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING

from keytranslate.constants import (
    FALLBACK_DEBUG_MISSING,
    FALLBACK_INVALID,
    LOG_TRUNCATE_DEBUG,
    LOG_TRUNCATE_WARNING,
)
from keytranslate.diagnostics import (
    ErrorTemplate,
    InvalidCallError,
    MissingBranchError,
    MissingKeyError,
    TranslationError,
    ValidationResult,
)
from keytranslate.introspection import introspect_node
from keytranslate.store.message_store import MessageStore
from keytranslate.store.nodes import TranslationNode
from keytranslate.validation import validate_store

from .aliases import expand_aliases, log_alias_errors
from .config import TranslatorConfig
from .interpolator import interpolate
from .request import ResolutionRequest
from .selector import Pluralizer, select

if TYPE_CHECKING:
    from keytranslate.introspection import MessageIntrospection

__all__ = ["Translator"]

logger = logging.getLogger(__name__)

type TranslationResult = str | list[object]


class Translator:
    """Translation function bound to a message store.

    Main public API. An instance is called like a function:

        t(key)                    plain message
        t(key, {"name": "Ana"})   named args (or a list for {0}, {1}, ...)
        t(key, 5)                 plural group, count exposed as {n}/{count}
        t(key, "submit")          sub-key group
        t(key, 5, {"who": "Ana"}) selector plus args

    The second argument is a selector only when the key holds a group;
    for a plain template it is the interpolation args.

    Translation calls never raise. A missing translation resolves to the
    key itself, or ``@@key@@`` plus one logged warning when ``debug`` is set
    and ``use_key_for_missing_translation`` is not. A non-string key gives
    ``{???}``; unusable selector/args arguments are dropped and logged.

    Thread Safety:
        Resolution only reads the current store snapshot, taken once per
        call, so concurrent calls need no locking. replace() (and assigning
        ``keys``) builds the new snapshot under a writer lock and publishes
        it with a single reference swap; calls in flight finish against the
        snapshot they started with.

    Examples:
        >>> t = Translator({
        ...     "greeting": "Hello {name}!",
        ...     "items": {0: "no items", 1: "one item", "n": "{count} items"},
        ...     "button": {"*": "Click me", "submit": "Send"},
        ... })
        >>> t("greeting", {"name": "World"})
        'Hello World!'
        >>> t("items", 5)
        '5 items'
        >>> t("button", "submit")
        'Send'
        >>> t.arr("greeting", {"name": Bold("World")})
        ['Hello ', Bold('World'), '!']
        >>>
        >>> # Locale switch: swap the whole store
        >>> t.keys = {"greeting": "Hola {name}!"}
    """

    __slots__ = ("_config", "_store", "_write_lock")

    def __init__(
        self,
        keys: "Mapping[str, object] | MessageStore | None" = None,
        /,
        *,
        debug: bool = False,
        use_key_for_missing_translation: bool = False,
        array_mode: bool = False,
        resolve_aliases: bool = False,
        pluralize: Pluralizer | None = None,
    ) -> None:
        """Initialize translator with a message store.

        Args:
            keys: Deserialized translations (key -> str | {branch: str}) or a
                  MessageStore [positional-only]
            debug: Wrap missing keys as @@key@@ and log a warning for each
            use_key_for_missing_translation: Return the bare key for missing
                  translations (takes precedence over debug)
            array_mode: Plain calls return segment lists instead of strings
            resolve_aliases: Expand {{key}} aliases on every store load
            pluralize: Custom count -> branch key function (see
                  runtime.plural_rules.cldr_pluralizer)

        Raises:
            TypeError: If keys cannot be converted into a store, or
                       pluralize is not callable
        """
        self._config = TranslatorConfig(
            debug=debug,
            use_key_for_missing_translation=use_key_for_missing_translation,
            array_mode=array_mode,
            resolve_aliases=resolve_aliases,
            pluralize=pluralize,
        )
        self._write_lock = threading.Lock()
        self._store = self._load(keys)

        logger.info(
            "Translator initialized: %d keys (debug=%s, array_mode=%s, resolve_aliases=%s)",
            len(self._store),
            debug,
            array_mode,
            resolve_aliases,
        )

    @classmethod
    def from_config(
        cls,
        keys: "Mapping[str, object] | MessageStore | None",
        config: TranslatorConfig,
    ) -> "Translator":
        """Create a translator from a prepared configuration object.

        Example:
            >>> config = TranslatorConfig(debug=True)
            >>> t = Translator.from_config({"hello": "Hello"}, config)
            >>> t.config.debug
            True
        """
        return cls(
            keys,
            debug=config.debug,
            use_key_for_missing_translation=config.use_key_for_missing_translation,
            array_mode=config.array_mode,
            resolve_aliases=config.resolve_aliases,
            pluralize=config.pluralize,
        )

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> Translator({"hello": "Hello"})
            Translator(keys=1, array_mode=False)
        """
        return f"Translator(keys={len(self._store)}, array_mode={self._config.array_mode})"

    @property
    def config(self) -> TranslatorConfig:
        """Resolution options (read-only)."""
        return self._config

    @property
    def keys(self) -> MessageStore:
        """Current message store snapshot.

        Assigning replaces the whole store (see replace()).
        """
        return self._store

    @keys.setter
    def keys(self, keys: "Mapping[str, object] | MessageStore") -> None:
        self.replace(keys)

    def replace(self, keys: "Mapping[str, object] | MessageStore") -> None:
        """Swap in a new message store, e.g. on locale switch.

        The new snapshot is fully built (aliases expanded when configured)
        before it becomes visible. No partial updates: to change a few keys,
        merge them into a complete mapping first.

        Args:
            keys: Complete replacement data or MessageStore

        Raises:
            TypeError: If keys cannot be converted into a store. The current
                       store stays in place.
        """
        with self._write_lock:
            store = self._load(keys)
            self._store = store
        logger.debug("Message store replaced: %d keys", len(store))

    def _load(self, keys: "Mapping[str, object] | MessageStore | None") -> MessageStore:
        """Build a snapshot from caller data."""
        store = MessageStore.from_mapping(keys if keys is not None else {})
        if self._config.resolve_aliases:
            store, errors = expand_aliases(store)
            log_alias_errors(errors, debug=self._config.debug)
        return store

    def __call__(
        self, key: str, selector_or_args: object = None, args: object = None
    ) -> TranslationResult:
        """Translate key; output mode follows the ``array_mode`` option."""
        result, _ = self._resolve(key, selector_or_args, args, self._config.array_mode)
        return result

    def arr(self, key: str, selector_or_args: object = None, args: object = None) -> list[object]:
        """Translate key to a segment list, regardless of ``array_mode``.

        Placeholder values are inserted unstringified between literal
        segments: ``[literal, value, literal, ..., literal]``.
        """
        result, _ = self._resolve(key, selector_or_args, args, True)
        return result  # type: ignore[return-value]

    def text(self, key: str, selector_or_args: object = None, args: object = None) -> str:
        """Translate key to a string, regardless of ``array_mode``."""
        result, _ = self._resolve(key, selector_or_args, args, False)
        return result  # type: ignore[return-value]

    def format(
        self,
        key: str,
        selector_or_args: object = None,
        args: object = None,
        *,
        as_sequence: bool | None = None,
    ) -> tuple[TranslationResult, tuple[TranslationError, ...]]:
        """Translate key and report what went wrong.

        Same resolution as calling the translator, but also returns the
        errors that were absorbed into the fallback.

        Args:
            key: Translation key
            selector_or_args: Selector for groups, args for templates
            args: Interpolation args when a selector is given
            as_sequence: Output mode; None follows ``array_mode``

        Returns:
            Tuple of (result, errors)
            - result: Translation or missing-translation fallback
            - errors: MissingKeyError, MissingBranchError and/or InvalidCallError
              instances absorbed into the result (empty on success)

        Example:
            >>> result, errors = t.format("nope")
            >>> result
            'nope'
            >>> type(errors[0]).__name__
            'MissingKeyError'
        """
        mode = self._config.array_mode if as_sequence is None else as_sequence
        return self._resolve(key, selector_or_args, args, mode)

    def _resolve(
        self,
        key: str,
        selector_or_args: object,
        args: object,
        as_sequence: bool,
    ) -> tuple[TranslationResult, tuple[TranslationError, ...]]:
        """Lookup, selection and interpolation against one store snapshot."""
        if not isinstance(key, str):
            invalid = InvalidCallError(ErrorTemplate.invalid_key(key))
            logger.warning("Invalid translation key: %s", type(key).__name__)
            return ([FALLBACK_INVALID] if as_sequence else FALLBACK_INVALID), (invalid,)

        store = self._store
        node = store.get(key)
        if node is None:
            error = MissingKeyError(ErrorTemplate.key_not_found(key))
            return self._missing(key, error, as_sequence), (error,)

        errors: list[TranslationError] = []
        try:
            request = ResolutionRequest.build(key, node, selector_or_args, args)
        except InvalidCallError as call_error:
            logger.warning(
                "Invalid translation call: %s",
                call_error.diagnostic.message if call_error.diagnostic is not None else call_error,
            )
            errors.append(call_error)
            request = self._recover_request(key, node, selector_or_args)

        try:
            template = select(
                node, request.selector, key=key, pluralize=self._config.pluralize
            )
        except MissingBranchError as error:
            errors.append(error)
            return self._missing(key, error, as_sequence), tuple(errors)

        result = interpolate(
            template, request.args, as_sequence=as_sequence, count=request.count
        )
        return result, tuple(errors)

    @staticmethod
    def _recover_request(
        key: str, node: TranslationNode, selector_or_args: object
    ) -> ResolutionRequest:
        """Keep the second argument when only the third was unusable."""
        try:
            return ResolutionRequest.build(key, node, selector_or_args)
        except InvalidCallError:
            return ResolutionRequest(key=key)

    def _missing(
        self, key: str, error: TranslationError, as_sequence: bool
    ) -> TranslationResult:
        """Apply the missing-translation policy (exactly one path fires)."""
        config = self._config
        if config.use_key_for_missing_translation:
            fallback = key
            logger.debug("Missing translation %r, returning key", key[:LOG_TRUNCATE_DEBUG])
        elif config.debug:
            fallback = FALLBACK_DEBUG_MISSING.format(key=key)
            # repr() escapes control characters (prevents log injection)
            logger.warning(
                "Missing translation %s: %s",
                repr(key[:LOG_TRUNCATE_WARNING]),
                error.diagnostic.message if error.diagnostic is not None else error,
            )
        else:
            fallback = key
            logger.debug("Missing translation %r", key[:LOG_TRUNCATE_DEBUG])
        return [fallback] if as_sequence else fallback

    def has_key(self, key: str) -> bool:
        """Check if key resolves to something (empty groups do not).

        Args:
            key: Translation key

        Returns:
            True if the current store holds a usable node for key
        """
        return self._store.get(key) is not None

    def get_keys(self) -> list[str]:
        """Get all keys of the current store.

        Returns:
            List of translation keys, in store order
        """
        return list(self._store)

    def introspect(self, key: str) -> "MessageIntrospection":
        """Get placeholder, branch and alias data for a key.

        Args:
            key: Translation key

        Returns:
            MessageIntrospection for the key

        Raises:
            KeyError: If key doesn't exist

        Example:
            >>> t = Translator({"items": {"0": "none", "n": "{count} in {place}"}})
            >>> t.introspect("items").placeholders
            frozenset({'count', 'place'})
        """
        node = self._store.get(key)
        if node is None:
            msg = f"Translation key '{key}' not found"
            raise KeyError(msg)
        return introspect_node(key, node)

    def validate(self) -> ValidationResult:
        """Validate the current store (see validation.validate_store)."""
        return validate_store(self._store)
