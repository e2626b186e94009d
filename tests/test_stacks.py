from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import PushSwap, is_sorted

int_lists = st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), max_size=30)


def test_initial_state():
    ps = PushSwap([3, 1, 2])
    assert ps.a == [3, 1, 2]
    assert ps.b == []
    assert ps.ops == []


def test_sa_swaps_top_two():
    ps = PushSwap([1, 2, 3])
    ps.sa()
    assert ps.a == [2, 1, 3]
    assert ps.ops == ["sa"]


def test_ra_and_rra_move_ends():
    ps = PushSwap([1, 2, 3])
    ps.ra()
    assert ps.a == [2, 3, 1]
    ps.rra()
    ps.rra()
    assert ps.a == [3, 1, 2]
    assert ps.ops == ["ra", "rra", "rra"]


def test_pb_then_pa_restores():
    ps = PushSwap([5, 6, 7])
    ps.pb()
    assert ps.b == [5]
    assert ps.a == [6, 7]
    ps.pa()
    assert ps.a == [5, 6, 7]
    assert ps.b == []
    assert ps.ops == ["pb", "pa"]


def test_push_from_empty_is_noop_but_logged():
    ps = PushSwap([1])
    ps.pa()
    assert ps.a == [1]
    assert ps.b == []
    assert ps.ops == ["pa"]


@pytest.mark.parametrize("op", ["sa", "ra", "rra"])
def test_single_element_ops_are_noops(op):
    ps = PushSwap([9])
    getattr(ps, op)()
    assert ps.a == [9]
    assert ps.ops == [op]


def test_ss_logs_individual_swaps_too():
    ps = PushSwap([1, 2])
    ps.pb()
    ps.pb()
    ps.ss()
    assert ps.ops == ["pb", "pb", "sa", "sb", "ss"]
    assert ps.b == [1, 2]


def test_rr_and_rrr_act_on_both():
    ps = PushSwap([1, 2, 3, 4])
    ps.pb()
    ps.pb()
    before_a, before_b = list(ps.a), list(ps.b)
    ps.rr()
    ps.rrr()
    assert ps.a == before_a
    assert ps.b == before_b
    assert ps.ops[-2:] == ["rr", "rrr"]


def test_rb_rrb_on_b():
    ps = PushSwap([1, 2, 3])
    ps.pb()
    ps.pb()
    ps.pb()
    ps.rb()
    assert ps.b[-1] == 3
    ps.rrb()
    assert ps.b == [3, 2, 1]


def test_is_sorted_cases():
    assert is_sorted([1, 2, 3])
    assert is_sorted([])
    assert is_sorted([4])
    assert not is_sorted([2, 1])


@given(int_lists)
def test_rotate_round_trip(values):
    ps = PushSwap(values)
    ps.ra()
    ps.rra()
    assert ps.a == values


@given(int_lists)
def test_swap_twice_is_identity(values):
    ps = PushSwap(values)
    ps.sa()
    ps.sa()
    assert ps.a == values


@given(int_lists, st.lists(st.sampled_from(
    ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]), max_size=40))
def test_ops_preserve_elements(values, ops):
    ps = PushSwap(values)
    for op in ops:
        getattr(ps, op)()
    assert Counter(ps.a + ps.b) == Counter(values)


@given(int_lists)
def test_push_all_reverses_into_b(values):
    ps = PushSwap(values)
    for _ in values:
        ps.pb()
    assert ps.a == []
    assert ps.b == values[::-1]
    assert len(ps.ops) == len(values)


@given(int_lists)
def test_is_sorted_matches_sorted(values):
    assert is_sorted(sorted(values))
    assert is_sorted(values) == (values == sorted(values))