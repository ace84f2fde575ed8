"""Placeholder interpolation.

Substitutes ``{name}`` and ``{0}`` tokens in a leaf template with argument
values, producing either a string or a sequence of segments.

Token grammar:
    {123}         positional, 0-based index into a sequence of args
    {identifier}  named, looked up in a mapping of args
    {{key}}       alias span, always literal here (see runtime.aliases)

Sequence mode keeps placeholder values unstringified so callers can compose
rich UI fragments (widgets, markup objects) without string escaping issues:

    >>> interpolate("Hi {name}!", {"name": Bold("Ana")}, as_sequence=True)
    ['Hi ', Bold('Ana'), '!']

Python 3.13+. Zero external dependencies.
"""

import functools
import logging
import re
from collections.abc import Mapping, Sequence
from decimal import Decimal

from keytranslate.constants import LOG_TRUNCATE_DEBUG, RESERVED_COUNT_NAMES
from keytranslate.store.nodes import Template

__all__ = ["InterpolationArgs", "interpolate", "scan_template"]

logger = logging.getLogger(__name__)

type InterpolationArgs = Mapping[str, object] | Sequence[object]

# Alias spans are matched first so "{{support}}" never yields a "{support}" token.
_TOKEN_PATTERN = re.compile(r"\{\{[^{}]*\}\}|\{(?P<token>\d+|[A-Za-z_]\w*)\}")

# Sentinel for "token has no value" (None is a legitimate argument value)
_MISSING = object()


@functools.lru_cache(maxsize=1024)
def scan_template(text: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split template text at placeholder boundaries.

    Args:
        text: Template text

    Returns:
        (literals, tokens) with ``len(literals) == len(tokens) + 1``.
        Leading/trailing literals are empty strings when the text starts or
        ends with a placeholder.

    Example:
        >>> scan_template("{count} items in {0}")
        (('', ' items in ', ''), ('count', '0'))
    """
    literals: list[str] = []
    tokens: list[str] = []
    buffer: list[str] = []
    position = 0

    for match in _TOKEN_PATTERN.finditer(text):
        token = match.group("token")
        if token is None:
            # Alias span: literal text, stays in the current segment
            continue
        buffer.append(text[position : match.start()])
        literals.append("".join(buffer))
        buffer.clear()
        tokens.append(token)
        position = match.end()

    buffer.append(text[position:])
    literals.append("".join(buffer))
    return tuple(literals), tuple(tokens)


def _lookup(
    token: str,
    args: InterpolationArgs | None,
    count: int | float | Decimal | None,
) -> object:
    """Resolve one token, returning _MISSING if it has no value."""
    if token.isdigit():
        if isinstance(args, Sequence) and not isinstance(args, str):
            index = int(token)
            if index < len(args):
                return args[index]
        return _MISSING

    if isinstance(args, Mapping) and token in args:
        return args[token]
    if count is not None and token in RESERVED_COUNT_NAMES:
        return count
    return _MISSING


def interpolate(
    template: Template | str,
    args: InterpolationArgs | None = None,
    *,
    as_sequence: bool = False,
    count: int | float | Decimal | None = None,
) -> str | list[object]:
    """Substitute placeholder tokens with argument values.

    Args:
        template: Leaf template (or its raw text)
        args: Mapping for named tokens, or ordered sequence for positional tokens
        as_sequence: Return a list of segments instead of a string
        count: Active numeric selector, exposed as ``{n}`` and ``{count}``
               unless the args mapping supplies those names itself

    Returns:
        String mode: literal text with ``str()`` of each value spliced in.
        Sequence mode: ``[literal, value, literal, ..., literal]`` with
        ``2k + 1`` elements for ``k`` placeholders.

        A token without a value is kept as its literal ``{token}`` text
        (in sequence mode, that text fills the placeholder slot).

    Example:
        >>> interpolate("Hello {name}!", {"name": "World"})
        'Hello World!'
        >>> interpolate("{count} items", count=5)
        '5 items'
        >>> interpolate("{0} and {1}", ["a", "b"], as_sequence=True)
        ['', 'a', ' and ', 'b', '']
    """
    text = template.text if Template.guard(template) else template
    literals, tokens = scan_template(text)

    if not tokens:
        return [text] if as_sequence else text

    values: list[object] = []
    for token in tokens:
        value = _lookup(token, args, count)
        if value is _MISSING:
            logger.debug("No value for placeholder {%s} in %r", token, text[:LOG_TRUNCATE_DEBUG])
            value = f"{{{token}}}"
        values.append(value)

    if as_sequence:
        segments: list[object] = [literals[0]]
        for value, literal in zip(values, literals[1:], strict=True):
            segments.append(value)
            segments.append(literal)
        return segments

    parts = [literals[0]]
    for value, literal in zip(values, literals[1:], strict=True):
        parts.append(str(value))
        parts.append(literal)
    return "".join(parts)
