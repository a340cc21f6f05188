import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ojo.graph import AdjacencyGraph
from ojo.partition import Partition


def graph(spec: str) -> AdjacencyGraph:
    pairs = []
    for item in spec.split(","):
        u, v = item.split("-")
        pairs.append((int(u), int(v)))
    size = max(max(p) for p in pairs) + 1
    g = AdjacencyGraph(range(size))
    for u, v in pairs:
        g.add_edge(u, v)
    return g


@st.composite
def graph_and_sets(draw):
    size = draw(st.integers(1, 19))
    edges = draw(
        st.lists(
            st.tuples(st.integers(0, size - 1), st.integers(0, size - 1)),
            min_size=1,
            max_size=39,
        )
    )
    g = AdjacencyGraph(range(size))
    for u, v in edges:
        g.add_edge(u, v)
    labels = draw(st.lists(st.integers(0, 4), min_size=size, max_size=size))
    groups: dict[int, set[int]] = {}
    for node, label in enumerate(labels):
        groups.setdefault(label, set()).add(node)
    return g, list(groups.values())


def test_pinned_chain_partition():
    g = graph("0-1, 1-2")
    p = Partition(g, [{0, 1}, {2}])
    assert list(p.out_edges(0)) == [1]
    assert list(p.in_edges(1)) == [0]
    assert list(p.out_edges(1)) == []


def test_duplicate_crossing_edges_are_kept():
    g = graph("0-2, 1-2")
    p = Partition(g, [{0, 1}, {2}])
    assert list(p.out_edges(p.index_of(0))) == [p.index_of(2), p.index_of(2)]


def test_accessors():
    g = graph("0-1, 1-2, 2-3")
    sets = [{0}, {1, 2}, {3}]
    p = Partition(g, sets)
    assert p.num_components() == 3
    assert list(p.parts()) == sets
    assert p.part(1) == {1, 2}
    assert p.index_of(2) == 1
    assert p.index_of(3) == 2
    assert list(p.nodes()) == [0, 1, 2]


def test_index_of_unknown_node():
    p = Partition(graph("0-1"), [{0}, {1}])
    with pytest.raises(KeyError):
        p.index_of(7)


def test_part_out_of_range():
    p = Partition(graph("0-1"), [{0, 1}])
    with pytest.raises(IndexError):
        p.part(1)


def test_missing_node_in_sets_raises():
    with pytest.raises(KeyError):
        Partition(graph("0-1"), [{0}])


def test_single_part_has_no_edges():
    p = Partition(graph("0-1, 1-0"), [{0, 1}])
    assert list(p.out_edges(0)) == []
    assert list(p.in_edges(0)) == []


@settings(max_examples=60)
@given(graph_and_sets())
def test_edges_mirror_crossing_edges(data):
    g, sets = data
    p = Partition(g, sets)
    crossing = [
        (p.index_of(u), p.index_of(v))
        for u in g.nodes()
        for v in g.out_neighbors(u)
        if p.index_of(u) != p.index_of(v)
    ]
    forward = sorted((i, j) for i in p.nodes() for j in p.out_edges(i))
    backward = sorted((j, i) for i in p.nodes() for j in p.in_edges(i))
    assert forward == sorted(crossing)
    assert backward == forward
    for i in p.nodes():
        assert i not in list(p.out_edges(i))
    for i, part in enumerate(p.parts()):
        for u in part:
            assert p.index_of(u) == i