from hypothesis import given
from hypothesis.strategies import data, lists

from curryn import __, count_placeholders, is_placeholder
from curryn.hypothesis_strategies import (
    anything, arities, call_plans, placeholders
)


@given(placeholders())
def test_placeholders(p):
    assert is_placeholder(p)


@given(arities(max_value=3))
def test_arities(n):
    assert 0 <= n <= 3


@given(call_plans(()))
def test_empty_call_plan(plan):
    assert plan == ((), )


@given(lists(anything(allow_nan=False), min_size=1, max_size=6), data())
def test_call_plans_supply_every_argument(args, data):
    plan = data.draw(call_plans(args))
    supplied = sum(len(call) - count_placeholders(call) for call in plan)
    assert supplied == len(args)
    assert all(call and call != (__, ) * len(call) for call in plan)
