"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Deque, Dict, Iterable, List, Union


class Operation(str, Enum):
    """An instruction, spelled the way it is printed and read."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: Deque[int]) -> None:
    """Exchange the two top elements; do nothing with fewer than two."""
    if len(stack) < 2:
        return
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)


def _push(source: Deque[int], destination: Deque[int]) -> None:
    """Move the top of ``source`` onto ``destination``; do nothing if empty."""
    if source:
        destination.appendleft(source.popleft())


def _rotate(stack: Deque[int]) -> None:
    """Send the top element to the bottom."""
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: Deque[int]) -> None:
    """Bring the bottom element to the top."""
    if len(stack) >= 2:
        stack.rotate(1)


_Handler = Callable[[Deque[int], Deque[int]], None]


def _both(action: Callable[[Deque[int]], None]) -> _Handler:
    def handler(a: Deque[int], b: Deque[int]) -> None:
        action(a)
        action(b)

    return handler


_HANDLERS: Dict[Operation, _Handler] = {
    Operation.SA: lambda a, b: _swap(a),
    Operation.SB: lambda a, b: _swap(b),
    Operation.SS: _both(_swap),
    Operation.PA: lambda a, b: _push(b, a),
    Operation.PB: lambda a, b: _push(a, b),
    Operation.RA: lambda a, b: _rotate(a),
    Operation.RB: lambda a, b: _rotate(b),
    Operation.RR: _both(_rotate),
    Operation.RRA: lambda a, b: _reverse_rotate(a),
    Operation.RRB: lambda a, b: _reverse_rotate(b),
    Operation.RRR: _both(_reverse_rotate),
}


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is its first element.

    Every applied operation is appended to ``history``.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.history: List[Operation] = []

    def apply(self, operation: Union[Operation, str]) -> Operation:
        """Perform one operation; raise ValueError for an unknown name."""
        op = Operation(operation)
        _HANDLERS[op](self.a, self.b)
        self.history.append(op)
        return op

    def is_solved(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order."""
        if self.b:
            return False
        items = list(self.a)
        return all(low <= high for low, high in zip(items, items[1:]))

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"