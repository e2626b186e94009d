"""Sorting strategies that produce the instruction list for a stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stacks import PushSwap, is_sorted


def sort_three(ps: PushSwap) -> None:
    """Sort the three numbers of stack a in place."""
    first, second, third = ps.a[:3]
    if first > second > third:
        ps.ra()
        ps.sa()
    elif first > second and second < third and first < third:
        ps.sa()
    elif first < second and first > third and second > third:
        ps.rra()
    elif second > first and second > third and third > first:
        ps.rra()
        ps.sa()
    elif first > second and first > third and second < third:
        ps.ra()


def sort_four(ps: PushSwap) -> None:
    """Sort the four numbers of stack a, parking the smallest in b."""
    smallest = min(ps.a)
    if ps.a[0] == smallest:
        ps.pb()
    elif ps.a[1] == smallest:
        ps.sa()
        ps.pb()
    elif ps.a[2] == smallest:
        ps.rra()
        ps.rra()
        ps.pb()
    else:
        ps.rra()
        ps.pb()
    sort_three(ps)
    ps.pa()


def sort_five(ps: PushSwap) -> None:
    """Sort the five numbers of stack a."""
    ps.pb()
    sort_four(ps)
    parked = ps.b[0]
    a = ps.a
    if parked < a[1] or parked > a[3]:
        ps.pa()
        if ps.a[0] > ps.a[-1]:
            ps.ra()
        elif ps.a[0] > ps.a[1]:
            ps.sa()
    elif a[1] < parked < a[2]:
        ps.ra()
        ps.pa()
        ps.sa()
        ps.rra()
    elif a[2] < parked < a[3]:
        ps.rra()
        ps.pa()
        ps.ra()
        ps.ra()


def find_target(value: int, b: Sequence[int]) -> int:
    """Return the 1-based position in ``b`` that ``value`` should be pushed onto.

    ``b`` is kept in descending order up to rotation; the target is the
    largest number below ``value``, or the maximum of ``b`` when ``value``
    is outside its range.
    """
    if not b:
        raise ValueError("stack b is empty")
    largest = max(b)
    if value < min(b) or value > largest:
        return b.index(largest) + 1
    if b[0] < value < b[-1]:
        return 1
    last = len(b) - 1
    pos = 0
    while pos < last and value > b[pos]:
        pos += 1
    while pos < last and value < b[pos]:
        pos += 1
    return pos + 1


def move_cost(index: int, target: int, size_a: int, size_b: int) -> int:
    """Estimated rotations to bring position ``index`` of a and ``target`` of b to the top."""
    cost_a = index if index <= size_a // 2 else size_a - index
    cost_b = target if target <= size_b // 2 else size_b - target
    return cost_a + cost_b


def _candidates(ps: PushSwap) -> Iterable[tuple[int, int, int]]:
    size_a, size_b = len(ps.a), len(ps.b)
    for index, value in enumerate(ps.a, start=1):
        target = find_target(value, ps.b)
        yield move_cost(index, target, size_a, size_b), index, target


def cheapest_to_top(ps: PushSwap) -> None:
    """Rotate both stacks so the cheapest number of a and its target in b are on top."""
    _, index, target = min(_candidates(ps), key=lambda item: item[0])
    want_a = ps.a[index - 1]
    want_b = ps.b[target - 1]
    up_a = index <= len(ps.a) // 2
    up_b = target <= len(ps.b) // 2

    while ps.a[0] != want_a or ps.b[0] != want_b:
        a_off = ps.a[0] != want_a
        b_off = ps.b[0] != want_b
        if up_a and up_b:
            if a_off and b_off:
                ps.rr()
            elif a_off:
                ps.ra()
            else:
                ps.rb()
        elif not up_a and not up_b:
            if a_off and b_off:
                ps.rrr()
            elif a_off:
                ps.rra()
            else:
                ps.rrb()
        elif up_a:
            if a_off:
                ps.ra()
            if ps.b[0] != want_b:
                ps.rrb()
        else:
            if a_off:
                ps.rra()
            if ps.b[0] != want_b:
                ps.rb()


def max_to_top(ps: PushSwap) -> None:
    """Rotate stack b until its largest number is on top."""
    if not ps.b:
        return
    largest = max(ps.b)
    index = ps.b.index(largest) + 1
    rotate = ps.rb if index <= len(ps.b) // 2 else ps.rrb
    while ps.b[0] != largest:
        rotate()


def sort_big(ps: PushSwap) -> None:
    """Sort a by pushing the cheapest number into a descending b, then back."""
    ps.pb()
    ps.pb()
    while ps.a:
        cheapest_to_top(ps)
        ps.pb()
    max_to_top(ps)
    while ps.b:
        ps.pa()


def push_swap(numbers: Iterable[int]) -> list[str]:
    """Return the instructions that sort ``numbers`` (top first) into ascending order."""
    ps = PushSwap(numbers)
    if is_sorted(ps.a):
        return ps.ops
    count = len(ps.a)
    if count == 2:
        ps.sa()
    elif count == 3:
        sort_three(ps)
    elif count == 4:
        sort_four(ps)
    elif count == 5:
        sort_five(ps)
    else:
        sort_big(ps)
    return ps.ops