"""The turk sorting strategy: cost-driven moves between stacks ``a`` and ``b``."""

from __future__ import annotations

from operator import attrgetter
from typing import Callable, Iterable

from .stack import Machine, Node, Stack


def update_positions(stack: Stack) -> None:
    """Record each node's index and whether it lies in the upper half."""
    median = len(stack) // 2
    for index, node in enumerate(stack):
        node.index = index
        node.above_median = index <= median


def _set_target_a(stack_a: Stack, stack_b: Stack) -> None:
    for node in stack_a:
        smaller = [candidate for candidate in stack_b if candidate.value < node.value]
        if smaller:
            node.target = max(smaller, key=attrgetter("value"))
        else:
            node.target = stack_b.find_max()


def _set_target_b(stack_a: Stack, stack_b: Stack) -> None:
    for node in stack_b:
        larger = [candidate for candidate in stack_a if candidate.value > node.value]
        if larger:
            node.target = min(larger, key=attrgetter("value"))
        else:
            node.target = stack_a.find_min()


def _cost_analysis_a(stack_a: Stack, stack_b: Stack) -> None:
    len_a = len(stack_a)
    len_b = len(stack_b)
    for node in stack_a:
        cost = node.index if node.above_median else len_a - node.index
        target = node.target
        cost += target.index if target.above_median else len_b - target.index
        node.push_cost = cost


def set_cheapest(stack: Stack) -> None:
    """Flag the first node with the lowest push cost."""
    cheapest = min(stack, key=attrgetter("push_cost"), default=None)
    if cheapest is not None:
        cheapest.cheapest = True


def init_nodes_a(stack_a: Stack, stack_b: Stack) -> None:
    """Prepare the nodes of ``a`` for a move to ``b``."""
    update_positions(stack_a)
    update_positions(stack_b)
    _set_target_a(stack_a, stack_b)
    _cost_analysis_a(stack_a, stack_b)
    set_cheapest(stack_a)


def init_nodes_b(stack_a: Stack, stack_b: Stack) -> None:
    """Prepare the nodes of ``b`` for a move back to ``a``."""
    update_positions(stack_a)
    update_positions(stack_b)
    _set_target_b(stack_a, stack_b)


def get_cheapest(stack: Iterable[Node]) -> Node | None:
    """Return the first node flagged as cheapest, or None."""
    return next((node for node in stack if node.cheapest), None)


def prep_for_push(machine: Machine, node: Node, stack_name: str) -> None:
    """Rotate stack ``stack_name`` until ``node`` is on top."""
    if stack_name == "a":
        stack, forward, backward = machine.a, machine.ra, machine.rra
    elif stack_name == "b":
        stack, forward, backward = machine.b, machine.rb, machine.rrb
    else:
        raise ValueError(f"unknown stack name: {stack_name!r}")
    while stack.top() is not node:
        if node.above_median:
            forward()
        else:
            backward()


def sort_three(machine: Machine) -> None:
    """Sort a stack ``a`` of three values with at most two moves."""
    stack = machine.a
    if len(stack) < 2:
        return
    biggest = stack.find_max()
    first, second, *_ = stack
    if biggest is first:
        machine.ra()
    elif biggest is second:
        machine.rra()
    first, second, *_ = stack
    if first.value > second.value:
        machine.sa()


def _rotate_together(machine: Machine, cheapest: Node, move: Callable[[], None]) -> None:
    while machine.b.top() is not cheapest.target and machine.a.top() is not cheapest:
        move()
    update_positions(machine.a)
    update_positions(machine.b)


def _move_a_to_b(machine: Machine) -> None:
    cheapest = get_cheapest(machine.a)
    target = cheapest.target
    if cheapest.above_median and target.above_median:
        _rotate_together(machine, cheapest, machine.rr)
    elif not cheapest.above_median and not target.above_median:
        _rotate_together(machine, cheapest, machine.rrr)
    prep_for_push(machine, cheapest, "a")
    prep_for_push(machine, target, "b")
    machine.pb()


def _min_on_top(machine: Machine) -> None:
    stack = machine.a
    while stack.top().value != stack.find_min().value:
        if stack.find_min().above_median:
            machine.ra()
        else:
            machine.rra()


def sort_stack(machine: Machine) -> None:
    """Sort stack ``a`` of more than three values, using ``b`` as scratch."""
    remaining = len(machine.a)
    for _ in range(2):
        wanted = remaining > 3 and not machine.a.is_sorted()
        remaining -= 1
        if wanted:
            machine.pb()
    while True:
        wanted = remaining > 3 and not machine.a.is_sorted()
        remaining -= 1
        if not wanted:
            break
        init_nodes_a(machine.a, machine.b)
        _move_a_to_b(machine)
    sort_three(machine)
    while machine.b:
        init_nodes_b(machine.a, machine.b)
        prep_for_push(machine, machine.b.top().target, "a")
        machine.pa()
    update_positions(machine.a)
    _min_on_top(machine)


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves that sort ``values`` into ascending order."""
    machine = Machine(values)
    if not machine.a.is_sorted():
        if len(machine.a) == 2:
            machine.sa()
        elif len(machine.a) == 3:
            sort_three(machine)
        else:
            sort_stack(machine)
    return machine.moves