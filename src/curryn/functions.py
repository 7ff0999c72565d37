import functools
import inspect
import types
from typing import (
    Any, Callable, Dict, Generic, Optional, Tuple, TypeVar, Union
)

from .placeholder import count_placeholders, is_placeholder
from .protocols import Variadic
from .util import UNBOUND, apply_with_context, arity, arity_of

B = TypeVar('B')

Arguments = Tuple[Any, ...]

_METADATA = functools.WRAPPER_ASSIGNMENTS + ('__wrapped__', )


def merge(initial: Arguments, current: Arguments) -> Arguments:
    """
    Combine the arguments of an earlier partial application with the
    arguments of a later call. Placeholders in `initial` are filled,
    left to right, with consecutive elements of `current`. Whatever is
    left of `current` is appended at the end. If `current` runs out
    before every placeholder is filled, the remaining slots get `None`

    Example:
        >>> from curryn import __
        >>> merge((__, 2, __), (1, 3, 4))
        (1, 2, 3, 4)
        >>> merge((1, 2), (3,))
        (1, 2, 3)
        >>> merge((__, __), (1,))
        (1, None)

    Args:
        initial: Arguments saved by the earlier call
        current: Arguments of the later call

    Return:
        The merged argument tuple
    """
    combined = []
    current_index = 0
    for value in initial:
        if is_placeholder(value):
            if current_index < len(current):
                combined.append(current[current_index])
            else:
                combined.append(None)
            current_index += 1
        else:
            combined.append(value)
    return tuple(combined) + tuple(current[current_index:])


class Curried(Generic[B]):
    """
    A function that is called once `length` non-placeholder arguments
    have been supplied, possibly over several calls. Until then,
    calling it gives back a new `Curried` awaiting the missing
    arguments. Looked up on an instance, it binds the instance as
    next argument, like a plain function does. Use `curry_n` or
    `curry` to create instances
    """
    length: int
    _f: Variadic[B]
    _context: Any
    _pending: Tuple[Arguments, ...]
    _keywords: Dict[str, Any]
    __signature__: inspect.Signature

    def __init__(
        self,
        length: int,
        f: Variadic[B],
        context: Any = UNBOUND,
        pending: Tuple[Arguments, ...] = (),
        keywords: Optional[Dict[str, Any]] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        if metadata is None:
            functools.update_wrapper(self, f)
        else:
            self.__dict__.update(metadata)
        self.length = length
        self._f = f
        self._context = context
        self._pending = pending
        self._keywords = {} if keywords is None else keywords
        self.__signature__ = arity(length)

    def __repr__(self) -> str:
        if not self._pending:
            return f'curry_n({self.length}, {self._f!r})'
        return (
            f'curry_n({self.length}, {self._f!r}, '
            f'pending={self._pending!r})'
        )

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def _metadata(self) -> Dict[str, Any]:
        return {
            name: self.__dict__[name]
            for name in _METADATA if name in self.__dict__
        }

    def _resolve(self, args: Arguments) -> Arguments:
        for initial in reversed(self._pending):
            args = merge(initial, args)
        return args

    def __call__(self, *args: Any, **kwargs: Any) -> Union[B, 'Curried[B]']:
        keywords = {**self._keywords, **kwargs}
        shortfall = self.length - len(args) + count_placeholders(args)
        if shortfall <= 0:
            return apply_with_context(
                self._f, self._context, self._resolve(args), keywords
            )
        return Curried(
            shortfall,
            self._f,
            self._context,
            self._pending + (args, ),
            keywords,
            self._metadata()
        )


def curry(f: Callable[..., B]) -> Curried[B]:
    """
    Get a version of ``f`` that can be partially applied, with arity
    taken from the number of positional parameters of ``f`` that
    have no default

    Example:
        >>> @curry
        ... def add(a, b, c=0):
        ...     return a + b + c
        >>> add(1)(2)
        3
        >>> add(1)(2, 3)
        6

    Args:
        f: The function to curry
    Return:
        Curried version of ``f``
    """
    return Curried(arity_of(f), f)


@curry
def curry_n(length: int, f: Callable[..., B],
            context: Any = UNBOUND) -> Curried[B]:
    """
    Get a curried version of ``f`` with arity ``length``. Arguments
    can be supplied one or several at a time, and `curryn.__` can be
    used to leave a slot open to be filled by a later call. ``f`` is
    called as soon as ``length`` non-placeholder arguments have been
    supplied, with any extra arguments passed along. ``curry_n`` is
    itself curried, so ``curry_n(2)(f)`` is the same as ``curry_n(2, f)``

    Example:
        >>> from curryn import __
        >>> f = curry_n(3, lambda a, b, c: a * 100 + b * 10 + c)
        >>> f(1)(2)(3)
        123
        >>> f(1, 2)(3)
        123
        >>> f(__, 2)(__, 3)(1)
        123

    Args:
        length: The number of arguments to wait for
        f: The function to curry
        context: Passed as first argument to ``f`` if given, \
            without counting towards ``length``
    Return:
        Curried version of ``f``
    """
    return Curried(length, f, context)


__all__ = ['curry', 'curry_n', 'merge', 'Curried']
