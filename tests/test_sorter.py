import itertools
import random

import pytest

from pushswap.operations import Operation, Stacks
from pushswap.parsing import InputError
from pushswap.sorter import (
    is_sorted,
    push_back_cheapest,
    solve,
    sort_almost_sorted,
    sort_stacks,
    sort_three,
)


def _replay(values, operations):
    stacks = Stacks(values)
    for operation in operations:
        stacks.apply(operation)
    return stacks


def _cyclic_sorted(values):
    items = list(values)
    start = items.index(min(items))
    rotated = items[start:] + items[:start]
    return rotated == sorted(items)


def test_is_sorted():
    assert is_sorted([1, 2, 3])
    assert is_sorted([])
    assert not is_sorted([2, 1])


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_orders(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.history) <= 2


@pytest.mark.parametrize(
    "values, expected",
    [
        ([2, 1, 3], [Operation.SA]),
        ([3, 2, 1], [Operation.SA, Operation.RRA]),
        ([3, 1, 2], [Operation.RA]),
    ],
)
def test_sort_three_operations(values, expected):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.history == expected


def test_sort_three_needs_three():
    with pytest.raises(ValueError):
        sort_three(Stacks([2, 1]))


def test_push_back_cheapest_keeps_cyclic_order():
    stacks = Stacks([1, 5, 9])
    stacks.b.extend([4, 7])
    push_back_cheapest(stacks)
    assert len(stacks.b) == 1
    assert _cyclic_sorted(stacks.a)
    push_back_cheapest(stacks)
    assert not stacks.b
    assert sorted(stacks.a) == [1, 4, 5, 7, 9]
    assert _cyclic_sorted(stacks.a)


def test_sort_almost_sorted():
    stacks = Stacks([3, 4, 5, 1, 2])
    sort_almost_sorted(stacks)
    assert list(stacks.a) == [1, 2, 3, 4, 5]


def test_sort_almost_sorted_rejects_unordered():
    with pytest.raises(ValueError):
        sort_almost_sorted(Stacks([2, 1, 3]))


@pytest.mark.parametrize("size", [4, 5])
def test_solve_all_permutations(size):
    for values in itertools.permutations(range(size)):
        assert _replay(values, solve(values)).is_solved()


@pytest.mark.parametrize("size", [10, 50, 100])
def test_solve_random(size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    stacks = _replay(values, solve(values))
    assert stacks.is_solved()
    assert sorted(values) == list(stacks.a)


@pytest.mark.parametrize("size", range(1, 7))
def test_solve_sorted_input_needs_nothing(size):
    assert solve(range(size)) == []


def test_solve_two():
    assert solve([2, 1]) == [Operation.SA]


def test_solve_empty():
    with pytest.raises(InputError):
        solve([])


def test_sort_stacks_duplicates():
    with pytest.raises(ValueError):
        sort_stacks(Stacks([1, 2, 1, 3]))


def test_sort_stacks_returns_history():
    stacks = Stacks([5, 3, 1, 4, 2])
    operations = sort_stacks(stacks)
    assert stacks.is_solved()
    assert operations == stacks.history