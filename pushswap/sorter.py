"""Sorting stack ``a`` with the cheapest-insertion strategy."""

from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple

from .operations import Operation, Stacks
from .parsing import InputError


class _Position(NamedTuple):
    index: int
    above_median: bool


_Marks = Dict[int, _Position]


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease from first to last."""
    items = list(values)
    return all(low <= high for low, high in zip(items, items[1:]))


def _is_rotated_sorted(values: Iterable[int]) -> bool:
    items = list(values)
    if len(items) < 2:
        return True
    descents = sum(x > y for x, y in zip(items, items[1:] + items[:1]))
    return descents <= 1


def _mark(stack: Iterable[int], marks: _Marks) -> None:
    """Record each value's index and whether it lies in the upper half."""
    items = list(stack)
    median = len(items) // 2
    for index, value in enumerate(items):
        marks[value] = _Position(index, index <= median)


def _rotate_to_top(stacks: Stacks, name: str, value: int, marks: _Marks) -> None:
    """Rotate one stack until ``value`` is on top, in the recorded direction."""
    if name == "a":
        stack, forward, backward = stacks.a, Operation.RA, Operation.RRA
    else:
        stack, forward, backward = stacks.b, Operation.RB, Operation.RRB
    operation = forward if marks[value].above_median else backward
    while stack[0] != value:
        stacks.apply(operation)


def sort_three(stacks: Stacks) -> None:
    """Order the top three elements of ``a`` with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("stack a needs at least three elements")
    first, second, third = list(stacks.a)[:3]
    if first > second and second < third and first < third:
        operations = (Operation.SA,)
    elif first > second > third:
        operations = (Operation.SA, Operation.RRA)
    elif first > second and second < third and first > third:
        operations = (Operation.RA,)
    elif first < second and second > third and first < third:
        operations = (Operation.SA, Operation.RA)
    elif first < second and second > third and first > third:
        operations = (Operation.RRA,)
    else:
        operations = ()
    for operation in operations:
        stacks.apply(operation)


def _push_back_cheapest(stacks: Stacks, marks: _Marks) -> None:
    a, b = stacks.a, stacks.b
    if not a or not b:
        raise ValueError("both stacks must be non-empty")

    lowest = min(a)
    targets = {value: min((x for x in a if x > value), default=lowest) for value in b}
    _mark(a, marks)
    _mark(b, marks)
    len_a, len_b = len(a), len(b)

    def cost(value: int) -> int:
        own = marks[value]
        total = own.index if own.above_median else len_b - own.index
        target = marks[targets[value]]
        total += target.index if target.above_median else len_a - target.index
        return total

    cheap = min(b, key=cost)
    target = targets[cheap]
    cheap_up = marks[cheap].above_median
    target_up = marks[target].above_median
    while a[0] != target and b[0] != cheap:
        if cheap_up and target_up:
            stacks.apply(Operation.RR)
        elif not cheap_up and not target_up:
            stacks.apply(Operation.RRR)
        else:
            break
    _mark(a, marks)
    _mark(b, marks)
    _rotate_to_top(stacks, "b", cheap, marks)
    _rotate_to_top(stacks, "a", target, marks)
    stacks.apply(Operation.PA)


def push_back_cheapest(stacks: Stacks) -> None:
    """Move the element of ``b`` that is cheapest to place into its slot in ``a``."""
    _push_back_cheapest(stacks, {})


def _sort_almost_sorted(stacks: Stacks, marks: _Marks) -> None:
    a = stacks.a
    if not a:
        return
    if not _is_rotated_sorted(a):
        raise ValueError("stack a is not a rotation of a sorted sequence")
    lowest = min(a)
    if lowest not in marks:
        _mark(a, marks)
    _rotate_to_top(stacks, "a", lowest, marks)
    while not is_sorted(a):
        if a[0] > a[1]:
            stacks.apply(Operation.SA)
        else:
            stacks.apply(Operation.RA)


def sort_almost_sorted(stacks: Stacks) -> None:
    """Bring the smallest element of a rotated sorted ``a`` to the top."""
    marks: _Marks = {}
    _mark(stacks.a, marks)
    _sort_almost_sorted(stacks, marks)


def sort_stacks(stacks: Stacks) -> List[Operation]:
    """Sort ``a`` into ascending order; return the operations used.

    Raises InputError when ``a`` is empty and ValueError on repeated values.
    """
    a = stacks.a
    size = len(a)
    if size == 0:
        raise InputError("stack a is empty")
    values = [*a, *stacks.b]
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    start = len(stacks.history)
    if size == 2 and not is_sorted(a):
        stacks.apply(Operation.SA)
    elif size == 3:
        sort_three(stacks)
    elif size > 3:
        while len(a) > 3 and not is_sorted(a):
            stacks.apply(Operation.PB)
        sort_three(stacks)
        marks: _Marks = {}
        while stacks.b:
            _push_back_cheapest(stacks, marks)
        _sort_almost_sorted(stacks, marks)
    return list(stacks.history[start:])


def solve(values: Iterable[int]) -> List[Operation]:
    """Return the operations that sort ``values`` (top first)."""
    return sort_stacks(Stacks(values))