"""Partitions of a graph's nodes, viewed as a graph on the parts."""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator

from .graph import Graph


class Partition(Graph):
    """A partition of the nodes of a graph.

    The partition is itself a graph: its nodes are the indices of the parts,
    and there is an edge from part ``i`` to part ``j`` (with ``i != j``) for
    every edge of the underlying graph leading from a node in ``i`` to a node
    in ``j``. When the parts are strongly connected components produced by
    Tarjan's algorithm, they are listed in topological order.
    """

    def __init__(self, graph: Graph, sets: Iterable[set[Hashable]]) -> None:
        self.sets: list[set[Hashable]] = list(sets)
        self._node_map: dict[Hashable, int] = {
            u: i for i, component in enumerate(self.sets) for u in component
        }
        self._edges: dict[int, list[int]] = {i: [] for i in range(len(self.sets))}
        self._back_edges: dict[int, list[int]] = {i: [] for i in range(len(self.sets))}
        for u in graph.nodes():
            u_idx = self._node_map[u]
            for v in graph.out_neighbors(u):
                v_idx = self._node_map[v]
                if u_idx != v_idx:
                    self._edges[u_idx].append(v_idx)
                    self._back_edges[v_idx].append(u_idx)

    def num_components(self) -> int:
        """The number of parts."""
        return len(self.sets)

    def parts(self) -> Iterator[set[Hashable]]:
        """Iterate over the parts in order."""
        return iter(self.sets)

    def part(self, i: int) -> set[Hashable]:
        """The part with index ``i``."""
        return self.sets[i]

    def index_of(self, u: Hashable) -> int:
        """The index of the part containing ``u``; raises ``KeyError`` for unknown nodes."""
        return self._node_map[u]

    def nodes(self) -> Iterator[int]:
        return iter(range(self.num_components()))

    def out_edges(self, u: int) -> Iterator[int]:
        return iter(self._edges[u])

    def in_edges(self, u: int) -> Iterator[int]:
        return iter(self._back_edges[u])