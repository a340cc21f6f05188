"""Directed graph interface and the generic algorithms built on it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import chain, pairwise
from typing import TYPE_CHECKING, Any, Callable, Hashable, Iterable, Iterator, Optional

from .dfs import Dfs, EdgeVisit, RetreatVisit, RootVisit, Status

if TYPE_CHECKING:
    from .partition import Partition


def edge_target(edge: Any) -> Hashable:
    """Return the node an edge points to.

    An edge with a ``target`` attribute points there; any other edge is the
    target node itself.
    """
    return getattr(edge, "target", edge)


class Graph(ABC):
    """A directed graph given by its nodes and the edges into and out of each node."""

    @abstractmethod
    def nodes(self) -> Iterable[Hashable]:
        """Iterate over all nodes."""

    @abstractmethod
    def out_edges(self, u: Hashable) -> Iterable[Any]:
        """Iterate over the edges leaving ``u``."""

    @abstractmethod
    def in_edges(self, u: Hashable) -> Iterable[Any]:
        """Iterate over the edges entering ``u``; each edge's target is the source node."""

    def out_neighbors(self, u: Hashable) -> Iterator[Hashable]:
        return (edge_target(e) for e in self.out_edges(u))

    def in_neighbors(self, u: Hashable) -> Iterator[Hashable]:
        return (edge_target(e) for e in self.in_edges(u))

    def dfs(self) -> Dfs:
        """Depth-first search over the whole graph."""
        return Dfs(self, self.nodes())

    def dfs_from(self, root: Hashable) -> Dfs:
        """Depth-first search over everything reachable from ``root``."""
        return Dfs(self, [root])

    def has_path(self, u: Hashable, v: Hashable) -> bool:
        """Whether a non-empty path leads from ``u`` to ``v``."""
        return any(
            isinstance(visit, EdgeVisit) and visit.dst == v for visit in self.dfs_from(u)
        )

    def tarjan(self) -> Partition:
        """Strongly connected components, in topological order."""
        from .tarjan import tarjan

        return tarjan(self)

    def weak_components(self) -> Partition:
        """Components of the graph when edge directions are ignored."""
        from .partition import Partition

        components: list[set[Hashable]] = []
        current: set[Hashable] = set()
        for visit in self.doubled().dfs():
            if isinstance(visit, EdgeVisit):
                current.add(visit.dst)
            elif isinstance(visit, RootVisit):
                if current:
                    components.append(current)
                    current = set()
                current.add(visit.node)
        if current:
            components.append(current)
        return Partition(self, components)

    def doubled(self) -> Doubled:
        """This graph with every edge present in both directions."""
        return Doubled(self)

    def node_filtered(self, predicate: Callable[[Hashable], bool]) -> NodeFiltered:
        """The subgraph induced by the nodes satisfying ``predicate``."""
        return NodeFiltered(self, predicate)

    def edge_filtered(self, predicate: Callable[[Hashable, Any], bool]) -> EdgeFiltered:
        """The subgraph keeping the edges ``e`` at ``u`` for which ``predicate(u, e)`` holds."""
        return EdgeFiltered(self, predicate)

    def topo_sort(self) -> Optional[list[Hashable]]:
        """A topological sort of the nodes, or ``None`` if the graph has a cycle."""
        visiting: set[Hashable] = set()
        order: list[Hashable] = []
        for visit in self.dfs():
            if isinstance(visit, EdgeVisit):
                if visit.dst in visiting:
                    return None
                if visit.status is Status.NEW:
                    visiting.add(visit.dst)
            elif isinstance(visit, RetreatVisit):
                order.append(visit.u)
                visiting.remove(visit.u)
            else:
                assert not visiting
                visiting.add(visit.node)
        order.reverse()
        return order

    def linear_order(self) -> Optional[list[Hashable]]:
        """The unique topological sort, or ``None`` if there is none or it is not unique."""
        order = self.topo_sort()
        if order is None:
            return None
        # A topological sort is unique exactly when each node has an edge to the next.
        for u, v in pairwise(order):
            if v not in self.out_neighbors(u):
                return None
        return order

    def neighbor_set(self, nodes: Iterable[Hashable]) -> set[Hashable]:
        """All nodes adjacent, in either direction, to some node of ``nodes``."""
        result: set[Hashable] = set()
        for u in nodes:
            result.update(self.out_neighbors(u))
            result.update(self.in_neighbors(u))
        return result


class AdjacencyGraph(Graph):
    """A graph stored as adjacency lists, keeping nodes and edges in insertion order."""

    def __init__(self, nodes: Iterable[Hashable] = ()) -> None:
        self._out: dict[Hashable, list[Hashable]] = {}
        self._in: dict[Hashable, list[Hashable]] = {}
        for u in nodes:
            self._add_node(u)

    def _add_node(self, u: Hashable) -> None:
        if u not in self._out:
            self._out[u] = []
            self._in[u] = []

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """Add an edge from ``u`` to ``v``, adding either node if it is missing."""
        self._add_node(u)
        self._add_node(v)
        self._out[u].append(v)
        self._in[v].append(u)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[Hashable, Hashable]]) -> AdjacencyGraph:
        """Build a graph from ``(source, target)`` pairs."""
        g = cls()
        for u, v in edges:
            g.add_edge(u, v)
        return g

    def nodes(self) -> Iterator[Hashable]:
        return iter(list(self._out))

    def out_edges(self, u: Hashable) -> Iterator[Hashable]:
        return iter(self._out[u])

    def in_edges(self, u: Hashable) -> Iterator[Hashable]:
        return iter(self._in[u])


class NodeFiltered(Graph):
    """The subgraph of ``graph`` induced by the nodes satisfying ``predicate``."""

    def __init__(self, graph: Graph, predicate: Callable[[Hashable], bool]) -> None:
        self._graph = graph
        self._predicate = predicate

    def nodes(self) -> Iterator[Hashable]:
        return (u for u in self._graph.nodes() if self._predicate(u))

    def out_edges(self, u: Hashable) -> Iterator[Any]:
        return (e for e in self._graph.out_edges(u) if self._predicate(edge_target(e)))

    def in_edges(self, u: Hashable) -> Iterator[Any]:
        return (e for e in self._graph.in_edges(u) if self._predicate(edge_target(e)))


class EdgeFiltered(Graph):
    """The subgraph of ``graph`` keeping the edges accepted by ``predicate(node, edge)``."""

    def __init__(self, graph: Graph, predicate: Callable[[Hashable, Any], bool]) -> None:
        self._graph = graph
        self._predicate = predicate

    def nodes(self) -> Iterable[Hashable]:
        return self._graph.nodes()

    def out_edges(self, u: Hashable) -> Iterator[Any]:
        return (e for e in self._graph.out_edges(u) if self._predicate(u, e))

    def in_edges(self, u: Hashable) -> Iterator[Any]:
        return (e for e in self._graph.in_edges(u) if self._predicate(u, e))


class Doubled(Graph):
    """``graph`` with every edge present in both directions."""

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    def nodes(self) -> Iterable[Hashable]:
        return self._graph.nodes()

    def out_edges(self, u: Hashable) -> Iterator[Any]:
        return chain(self._graph.out_edges(u), self._graph.in_edges(u))

    def in_edges(self, u: Hashable) -> Iterator[Any]:
        return self.out_edges(u)