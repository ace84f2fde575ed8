"""Per-call resolution request.

The facade accepts ``t(key, second, third)`` where the second argument is
either a selector or interpolation args. Which one it is depends on the
node the key resolves to, so the request is built only after lookup:

    Group node     second = selector (number or sub-key), third = args;
                   a mapping/sequence second argument is args, no selector
    Template node  second = args; a numeric second argument is the count
                   instead (exposed as {n}/{count}) and third supplies args

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from keytranslate.diagnostics import ErrorTemplate, InvalidCallError
from keytranslate.store.nodes import Group, TranslationNode

from .interpolator import InterpolationArgs
from .selector import Number, Selector, is_numeric_selector

__all__ = ["ResolutionRequest"]


def _is_args(value: object) -> bool:
    return isinstance(value, Mapping) or (
        isinstance(value, Sequence) and not isinstance(value, (str, bytes))
    )


@dataclass(frozen=True, slots=True)
class ResolutionRequest:
    """Disambiguated arguments of one resolution call.

    Attributes:
        key: Translation key
        selector: Count or sub-key used for branch selection (Group nodes)
        count: Numeric value exposed to the template as {n} and {count}
        args: Interpolation arguments (mapping or sequence)
    """

    key: str
    selector: Selector | None = None
    count: Number | None = None
    args: InterpolationArgs | None = None

    @classmethod
    def build(
        cls,
        key: str,
        node: TranslationNode,
        selector_or_args: object = None,
        args: object = None,
    ) -> "ResolutionRequest":
        """Interpret positional call arguments against the resolved node.

        Args:
            key: Translation key
            node: Node found in the store for key
            selector_or_args: Second call argument
            args: Third call argument

        Returns:
            ResolutionRequest with selector/count/args assigned

        Raises:
            InvalidCallError: If an argument has a type that fits neither
                slot, or args are given twice. The facade reports the error and
                retries without the third argument, then with none.

        Example:
            >>> ResolutionRequest.build("items", items_group, 5)
            ResolutionRequest(key='items', selector=5, count=5, args=None)
            >>> ResolutionRequest.build("greeting", template, {"name": "Ana"})
            ResolutionRequest(key='greeting', selector=None, count=None, args={'name': 'Ana'})
        """
        if args is not None and not _is_args(args):
            detail = f"args must be a mapping or sequence, got {type(args).__name__}"
            raise InvalidCallError(ErrorTemplate.invalid_arguments(key, detail))

        second = selector_or_args
        if is_numeric_selector(second):
            selector = second if Group.guard(node) else None
            return cls(key=key, selector=selector, count=second, args=args)  # type: ignore[arg-type]

        if isinstance(second, str):
            # A sub-key only means something to a group
            selector = second if Group.guard(node) else None
            return cls(key=key, selector=selector, args=args)  # type: ignore[arg-type]

        if second is None:
            return cls(key=key, args=args)  # type: ignore[arg-type]

        if _is_args(second):
            if args is not None:
                detail = "args given twice (second and third argument)"
                raise InvalidCallError(ErrorTemplate.invalid_arguments(key, detail))
            return cls(key=key, args=second)  # type: ignore[arg-type]

        detail = (
            "second argument must be a number, sub-key string, mapping or sequence, "
            f"got {type(second).__name__}"
        )
        raise InvalidCallError(ErrorTemplate.invalid_arguments(key, detail))
