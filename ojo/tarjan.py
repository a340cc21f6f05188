"""Tarjan's algorithm for strongly connected components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

from .dfs import EdgeVisit, RetreatVisit, RootVisit, Status
from .graph import Graph
from .partition import Partition


@dataclass
class _NodeState:
    index: int
    lowlink: int
    on_stack: bool = True


def tarjan(graph: Graph) -> Partition:
    """Partition ``graph`` into strongly connected components in topological order."""
    stack: list[Hashable] = []
    states: dict[Hashable, _NodeState] = {}
    components: list[set[Hashable]] = []

    def enter(u: Hashable) -> None:
        index = len(states)
        states[u] = _NodeState(index, index)
        stack.append(u)

    for visit in graph.dfs():
        if isinstance(visit, RetreatVisit):
            state = states[visit.u]
            if visit.parent is not None:
                parent_state = states[visit.parent]
                parent_state.lowlink = min(parent_state.lowlink, state.lowlink)
            if state.lowlink == state.index:
                # visit.u roots a component made of everything above it on the stack.
                component: set[Hashable] = set()
                while True:
                    v = stack.pop()
                    states[v].on_stack = False
                    component.add(v)
                    if v == visit.u:
                        break
                components.append(component)
        elif isinstance(visit, RootVisit):
            enter(visit.node)
        elif isinstance(visit, EdgeVisit):
            if visit.status is Status.NEW:
                enter(visit.dst)
            elif states[visit.dst].on_stack:
                src_state = states[visit.src]
                src_state.lowlink = min(src_state.lowlink, states[visit.dst].index)

    components.reverse()
    return Partition(graph, components)