from typing import Any, Sequence, Tuple, Union

from .placeholder import Placeholder, __

try:
    from hypothesis.strategies import (
        SearchStrategy,
        booleans,
        composite,
        floats,
        integers,
        just,
        lists,
        one_of,
        text
    )
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use curryn.hypothesis_strategies, '
        'install curryn with \n\n\tpip install curryn[test]'
    )

CallPlan = Tuple[Tuple[Any, ...], ...]


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(
        integers(), booleans(), text(), floats(allow_nan=allow_nan)
    )


def arities(max_value: int = 6) -> SearchStrategy[int]:
    """
    Create a search strategy that produces arities of curried functions

    Args:
        max_value: the largest arity to produce
    Return:
        Search strategy that produces ints from 0 to `max_value`
    """
    return integers(min_value=0, max_value=max_value)


def placeholders() -> SearchStrategy[Placeholder]:
    """
    Create a search strategy that produces the placeholder `curryn.__`

    Return:
        Search strategy that always produces `curryn.__`
    """
    return just(__)


def call_plans(arguments: Sequence[Any]) -> SearchStrategy[CallPlan]:
    """
    Create a search strategy that produces ways of supplying `arguments`
    to a function curried with arity ``len(arguments)``: a tuple of
    argument tuples that, passed one call at a time, calls the
    function with exactly `arguments`. Calls mix several arguments per
    call with placeholders deferring some of them to later calls

    Example:
        >>> call_plans((1, 2, 3)).example()
        ((__, 2), (__, 3), (1,))
    Args:
        arguments: the arguments the curried function should receive
    Return:
        Search strategy that produces call plans for `arguments`
    """
    @composite
    def _(draw) -> CallPlan:
        # values still missing, in the order the next call fills them
        remaining = list(arguments)
        if not remaining:
            return ((), )
        calls = []
        while remaining:
            window = draw(integers(min_value=1, max_value=len(remaining)))
            supplied = draw(
                lists(booleans(), min_size=window, max_size=window)
            )
            supplied[draw(integers(min_value=0, max_value=window - 1))] = True
            call = tuple(
                value if supply else __
                for value, supply in zip(remaining, supplied)
            )
            deferred = [
                value for value, supply in zip(remaining, supplied)
                if not supply
            ]
            calls.append(call)
            remaining = deferred + remaining[window:]
        return tuple(calls)

    return _()


__all__ = ['anything', 'arities', 'placeholders', 'call_plans']
