from dataclasses import dataclass
from typing import Iterable

from typing_extensions import TypeGuard

from .protocols import Tagged


@dataclass(frozen=True)
class Placeholder:
    """
    Marker for an argument slot that should be left open when
    calling a curried function. Use the module level instance `__`
    rather than creating new instances

    Example:
        >>> from curryn import __, curry_n
        >>> subtract = curry_n(2, lambda a, b: a - b)
        >>> subtract(__, 1)(10)
        9
    """
    __placeholder__ = True

    def __repr__(self) -> str:
        return '__'

    def __reduce__(self) -> str:
        return '__'


__ = Placeholder()
PLACEHOLDER = __


def is_placeholder(value: object) -> TypeGuard[Tagged]:
    """
    Check whether `value` is a placeholder. Detection is by the
    ``__placeholder__`` tag rather than identity, so placeholders
    from another copy of this module are recognized too

    Example:
        >>> is_placeholder(__)
        True
        >>> is_placeholder(None)
        False

    Args:
        value: The value to check

    Return:
        `True` if `value` is tagged as a placeholder, `False` otherwise
    """
    return getattr(value, '__placeholder__', False) is True


def count_placeholders(args: Iterable[object]) -> int:
    return sum(1 for arg in args if is_placeholder(arg))


__all__ = [
    'Placeholder', '__', 'PLACEHOLDER', 'is_placeholder', 'count_placeholders'
]
