"""Stacks of integers and the two-stack machine that records its moves."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import pairwise
from operator import attrgetter
from typing import Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One element of a stack, with the bookkeeping the sorter needs."""

    value: int
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target: Node | None = None


class Stack:
    """A stack of nodes whose top is the first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def top(self) -> Node | None:
        """Return the node on top, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def values(self) -> list[int]:
        """Return the values from top to bottom."""
        return [node.value for node in self._nodes]

    def is_sorted(self) -> bool:
        """Tell whether values never decrease from top to bottom."""
        return all(upper.value <= lower.value for upper, lower in pairwise(self._nodes))

    def find_min(self) -> Node | None:
        """Return the first node holding the smallest value."""
        return min(self._nodes, key=attrgetter("value"), default=None)

    def find_max(self) -> Node | None:
        """Return the first node holding the largest value."""
        return max(self._nodes, key=attrgetter("value"), default=None)

    def swap(self) -> None:
        """Exchange the two top nodes; do nothing with fewer than two."""
        if len(self._nodes) < 2:
            return
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        self._nodes.rotate(1)

    def push_from(self, other: Stack) -> None:
        """Take the top node of ``other`` and put it on top of this stack."""
        if other._nodes:
            self._nodes.appendleft(other._nodes.popleft())


class Machine:
    """Two stacks, ``a`` and ``b``, and the list of moves applied to them."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.moves: list[str] = []

    def _record(self, name: str) -> None:
        self.moves.append(name)

    def sa(self) -> None:
        self.a.swap()
        self._record("sa")

    def sb(self) -> None:
        self.b.swap()
        self._record("sb")

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self._record("ss")

    def pa(self) -> None:
        self.a.push_from(self.b)
        self._record("pa")

    def pb(self) -> None:
        self.b.push_from(self.a)
        self._record("pb")

    def ra(self) -> None:
        self.a.rotate()
        self._record("ra")

    def rb(self) -> None:
        self.b.rotate()
        self._record("rb")

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._record("rr")

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._record("rra")

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._record("rrb")

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._record("rrr")