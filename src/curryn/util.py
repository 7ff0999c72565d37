import inspect
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Tuple

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD
)


@dataclass(frozen=True)
class Unbound:
    """
    Context value meaning "call the function without a receiver"
    """
    def __repr__(self) -> str:
        return 'UNBOUND'

    def __reduce__(self) -> str:
        return 'UNBOUND'


UNBOUND = Unbound()


def apply_with_context(
    f: Callable[..., Any],
    context: Any,
    args: Tuple[Any, ...],
    kwargs: Mapping[str, Any]
) -> Any:
    """
    Call `f` with `args` and `kwargs`, passing `context` as the first
    positional argument unless it is `UNBOUND`

    Example:
        >>> apply_with_context(max, UNBOUND, (1, 2), {})
        2
        >>> apply_with_context(str.join, '-', (['a', 'b'],), {})
        'a-b'

    Args:
        f: The function to call
        context: The receiver of the call, or `UNBOUND`
        args: Positional arguments
        kwargs: Keyword arguments

    Return:
        The result of calling `f`
    """
    if context is UNBOUND:
        return f(*args, **kwargs)
    return f(context, *args, **kwargs)


def arity(n: int) -> inspect.Signature:
    """
    Build a signature declaring `n` positional-only parameters
    named ``a0``, ``a1``, ...

    Example:
        >>> str(arity(2))
        '(a0, a1, /)'
    """
    return inspect.Signature([
        inspect.Parameter(f'a{i}', inspect.Parameter.POSITIONAL_ONLY)
        for i in range(n)
    ])


def arity_of(f: Callable[..., Any]) -> int:
    """
    Count the positional parameters of `f` that have no default.
    Bound methods don't count their receiver

    Example:
        >>> def f(a, b, c=None, *args, d, **kwargs):
        ...     pass
        >>> arity_of(f)
        2

    Args:
        f: The function to inspect

    Return:
        Number of required positional parameters of `f`
    """
    count = 0
    for parameter in inspect.signature(f).parameters.values():
        if parameter.kind not in _POSITIONAL:
            break
        if parameter.default is not inspect.Parameter.empty:
            break
        count += 1
    return count


__all__ = ['UNBOUND', 'apply_with_context', 'arity', 'arity_of']
