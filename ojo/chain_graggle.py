"""Decomposition of a graph into chains of singly-linked nodes."""

from __future__ import annotations

from itertools import islice
from typing import Hashable, Iterable, Iterator

from .graph import Graph

_MISSING = object()


def _on_chain(graph: Graph, node: Hashable) -> bool:
    # Assumes ``node`` is not on a cycle: it is on a chain exactly when it has
    # at most one in-neighbor and at most one out-neighbor.
    return (
        len(list(islice(graph.out_edges(node), 2))) <= 1
        and len(list(islice(graph.in_edges(node), 2))) <= 1
    )


def _chain_first(graph: Graph, node: Hashable) -> Hashable:
    """Follow a chain backwards to its first node."""
    if not _on_chain(graph, node):
        return node
    current = node
    while True:
        prev = next(iter(graph.in_neighbors(current)), _MISSING)
        if prev is _MISSING or not _on_chain(graph, prev):
            return current
        current = prev


def _collect_chain(graph: Graph, first: Hashable) -> list[Hashable]:
    chain = [first]
    if not _on_chain(graph, first):
        return chain
    current = first
    while True:
        nxt = next(iter(graph.out_neighbors(current)), _MISSING)
        if nxt is _MISSING or not _on_chain(graph, nxt):
            return chain
        chain.append(nxt)
        current = nxt


class ChainGraggle(Graph):
    """A graph whose nodes are the chains of another graph.

    A chain is a maximal sequence of nodes, each having exactly one
    in-neighbor (the previous one) and one out-neighbor (the next one).
    Every chain, possibly of length one, collapses to a single node here,
    identified by its index. Nodes lying in strongly connected components of
    more than one node always form chains of length one.
    """

    def __init__(
        self,
        chains: Iterable[tuple[Hashable, ...]],
        edges: dict[int, set[int]],
        clusters: Iterable[set[int]],
    ) -> None:
        self._chains = [tuple(ch) for ch in chains]
        self._edges = {u: set(vs) for u, vs in edges.items()}
        self._clusters = [set(c) for c in clusters]
        self._back_edges: dict[int, set[int]] = {}
        for u, vs in self._edges.items():
            for v in vs:
                self._back_edges.setdefault(v, set()).add(u)

    @classmethod
    def from_graph(cls, graph: Graph) -> ChainGraggle:
        """Decompose ``graph`` into chains."""
        sccs = graph.tarjan()

        singles = {u for part in sccs.parts() if len(part) == 1 for u in part}
        others = [u for part in sccs.parts() if len(part) > 1 for u in part]

        chains: list[tuple[Hashable, ...]] = [(u,) for u in others]
        node_part: dict[Hashable, int] = {u: i for i, u in enumerate(others)}

        while singles:
            first = _chain_first(graph, next(iter(singles)))
            chain = _collect_chain(graph, first)
            for v in chain:
                singles.discard(v)
                node_part[v] = len(chains)
            chains.append(tuple(chain))

        edges: dict[int, set[int]] = {}
        for u in graph.nodes():
            for v in graph.out_neighbors(u):
                u_idx = node_part[u]
                v_idx = node_part[v]
                if u_idx != v_idx:
                    edges.setdefault(u_idx, set()).add(v_idx)

        clusters = [
            {node_part[u] for u in part} for part in sccs.parts() if len(part) > 1
        ]
        return cls(chains, edges, clusters)

    def num_chains(self) -> int:
        """The number of chains."""
        return len(self._chains)

    def chain(self, i: int) -> tuple[Hashable, ...]:
        """The nodes of the chain with index ``i``, in order."""
        return self._chains[i]

    def clusters(self) -> Iterator[set[int]]:
        """Iterate over the strongly connected components of more than one node, as chain indices."""
        return iter(self._clusters)

    def nodes(self) -> Iterator[int]:
        return iter(range(len(self._chains)))

    def out_edges(self, u: int) -> Iterator[int]:
        return iter(sorted(self._edges.get(u, ())))

    def in_edges(self, u: int) -> Iterator[int]:
        return iter(sorted(self._back_edges.get(u, ())))