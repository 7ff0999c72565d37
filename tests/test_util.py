import inspect
import pickle
from dataclasses import FrozenInstanceError

import pytest
from hypothesis import given
from hypothesis.strategies import lists

from curryn import UNBOUND, __, curry_n
from curryn.hypothesis_strategies import anything, arities
from curryn.util import Unbound, apply_with_context, arity, arity_of


def test_apply_without_context():
    assert apply_with_context(max, UNBOUND, (1, 3, 2), {}) == 3
    assert apply_with_context(sorted, UNBOUND, ([2, 1], ), {
        'reverse': True
    }) == [2, 1]


def test_apply_with_context():
    assert apply_with_context(str.join, '-', (['a', 'b'], ), {}) == 'a-b'
    assert apply_with_context(lambda *args: args, None, (1, ), {}) == (None, 1)


@given(arities())
def test_arity(n):
    signature = arity(n)
    assert len(signature.parameters) == n
    assert all(
        p.kind is inspect.Parameter.POSITIONAL_ONLY
        for p in signature.parameters.values()
    )


def test_arity_of():
    def f(a, b, c=None, *args, d, **kwargs):
        pass

    assert arity_of(f) == 2
    assert arity_of(lambda: None) == 0
    assert arity_of(lambda *args: None) == 0
    assert arity_of(curry_n(4, f)) == 4
    assert arity_of(curry_n(4, f)(1, __)) == 3


@given(lists(anything(), max_size=4))
def test_context_is_stable_across_chain(args):
    marker = object()
    f = curry_n(len(args) + 1, lambda *xs: xs, context=marker)
    assert f(*args)(None) == (marker, *args, None)


def test_unbound_is_singleton():
    assert pickle.loads(pickle.dumps(UNBOUND)) is UNBOUND
    assert repr(UNBOUND) == 'UNBOUND'


def test_unbound_is_frozen():
    with pytest.raises(FrozenInstanceError):
        UNBOUND.context = None
    assert Unbound() == UNBOUND
