"""Non-recursive depth-first search that reports every edge it traverses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Hashable, Iterable, Iterator, NamedTuple, Optional, Union

if TYPE_CHECKING:
    from .graph import Graph


class Status(Enum):
    """Whether the destination of a traversed edge was seen for the first time."""

    NEW = "new"
    REPEATED = "repeated"


@dataclass(frozen=True)
class EdgeVisit:
    """The search followed the edge from ``src`` to ``dst``."""

    src: Hashable
    dst: Hashable
    status: Status


@dataclass(frozen=True)
class RetreatVisit:
    """The search finished with ``u`` and returned to ``parent`` (``None`` for a root)."""

    u: Hashable
    parent: Optional[Hashable]


@dataclass(frozen=True)
class RootVisit:
    """The search started a new tree at ``node``."""

    node: Hashable


Visit = Union[EdgeVisit, RetreatVisit, RootVisit]

_END = object()


class _Frame(NamedTuple):
    node: Hashable
    edges: Iterator[Any]


class Dfs:
    """Iterator over the visits of a depth-first search of ``graph``.

    Roots are taken from ``roots`` in order, skipping those already visited.
    The search keeps its own stack, so deep graphs do not exhaust the
    interpreter's recursion limit.
    """

    def __init__(self, graph: Graph, roots: Iterable[Hashable]) -> None:
        self._graph = graph
        self._roots = iter(roots)
        self._visited: set[Hashable] = set()
        self._stack: list[_Frame] = []

    def __iter__(self) -> Dfs:
        return self

    def _enter(self, node: Hashable) -> None:
        self._stack.append(_Frame(node, iter(self._graph.out_edges(node))))
        self._visited.add(node)

    def __next__(self) -> Visit:
        from .graph import edge_target

        if self._stack:
            frame = self._stack[-1]
            edge = next(frame.edges, _END)
            if edge is not _END:
                dst = edge_target(edge)
                if dst in self._visited:
                    status = Status.REPEATED
                else:
                    self._enter(dst)
                    status = Status.NEW
                return EdgeVisit(frame.node, dst, status)
            self._stack.pop()
            parent = self._stack[-1].node if self._stack else None
            return RetreatVisit(frame.node, parent)

        for root in self._roots:
            if root not in self._visited:
                self._enter(root)
                return RootVisit(root)
        raise StopIteration