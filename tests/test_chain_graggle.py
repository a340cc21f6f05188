from hypothesis import given, settings
from hypothesis import strategies as st

from ojo.chain_graggle import ChainGraggle
from ojo.graph import AdjacencyGraph


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
def arb_graph(draw):
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
        if u != v:
            g.add_edge(u, v)
    return g


def chain_index(decomp: ChainGraggle) -> dict:
    return {u: i for i in decomp.nodes() for u in decomp.chain(i)}


def test_diamond():
    decomp = ChainGraggle.from_graph(graph("0-1, 0-2, 1-3, 2-3"))
    assert decomp.num_chains() == 4
    for i in decomp.nodes():
        assert len(decomp.chain(i)) == 1


def test_straight_line_is_one_chain():
    decomp = ChainGraggle.from_graph(graph("0-1, 1-2, 2-3"))
    assert decomp.num_chains() == 1
    assert decomp.chain(0) == (0, 1, 2, 3)
    assert list(decomp.out_edges(0)) == []
    assert list(decomp.clusters()) == []


def test_chain_stops_at_branch():
    decomp = ChainGraggle.from_graph(graph("0-1, 1-2, 2-3, 2-4"))
    chains = {decomp.chain(i) for i in decomp.nodes()}
    assert chains == {(0, 1), (2,), (3,), (4,)}


def test_cycle_becomes_cluster():
    decomp = ChainGraggle.from_graph(graph("0-1, 1-0, 1-2"))
    index = chain_index(decomp)
    clusters = list(decomp.clusters())
    assert clusters == [{index[0], index[1]}]
    assert index[0] != index[1]
    assert index[2] in list(decomp.out_edges(index[1]))
    assert index[1] in list(decomp.in_edges(index[2]))


@settings(max_examples=80)
@given(arb_graph())
def test_chains_partition_nodes(g):
    decomp = ChainGraggle.from_graph(g)
    chain_nodes = [u for i in decomp.nodes() for u in decomp.chain(i)]
    assert len(chain_nodes) == len(set(chain_nodes))
    assert sorted(chain_nodes) == sorted(g.nodes())


@settings(max_examples=80)
@given(arb_graph())
def test_edges_follow_original(g):
    decomp = ChainGraggle.from_graph(g)
    index = chain_index(decomp)
    for u in g.nodes():
        for v in g.out_neighbors(u):
            if index[u] != index[v]:
                assert index[v] in list(decomp.out_edges(index[u]))
    for i in decomp.nodes():
        for j in decomp.out_edges(i):
            assert i != j
            assert any(
                index[v] == j for u in decomp.chain(i) for v in g.out_neighbors(u)
            )
            assert i in list(decomp.in_edges(j))


@settings(max_examples=80)
@given(arb_graph())
def test_chain_links_are_edges(g):
    decomp = ChainGraggle.from_graph(g)
    for i in decomp.nodes():
        chain = decomp.chain(i)
        for u, v in zip(chain, chain[1:]):
            assert list(g.out_neighbors(u)) == [v]
            assert list(g.in_neighbors(v)) == [u]


@settings(max_examples=80)
@given(arb_graph())
def test_clusters_match_large_components(g):
    decomp = ChainGraggle.from_graph(g)
    index = chain_index(decomp)
    expected = [
        {index[u] for u in part} for part in g.tarjan().parts() if len(part) > 1
    ]
    assert list(decomp.clusters()) == expected
    for cluster in decomp.clusters():
        for i in cluster:
            assert len(decomp.chain(i)) == 1