from ojo.dfs import Dfs, EdgeVisit, RetreatVisit, RootVisit, Status
from ojo.graph import AdjacencyGraph


def graph(spec):
    pairs = []
    for part in spec.split(","):
        u, v = part.split("-")
        pairs.append((int(u.strip()), int(v.strip())))
    size = max(max(u, v) for u, v in pairs) + 1
    g = AdjacencyGraph(range(size))
    for u, v in pairs:
        g.add_edge(u, v)
    return g


def test_visit_order():
    g = graph("0-1, 0-3, 0-2")
    assert list(g.dfs()) == [
        RootVisit(0),
        EdgeVisit(0, 1, Status.NEW),
        RetreatVisit(1, 0),
        EdgeVisit(0, 3, Status.NEW),
        RetreatVisit(3, 0),
        EdgeVisit(0, 2, Status.NEW),
        RetreatVisit(2, 0),
        RetreatVisit(0, None),
    ]


def test_repeat_visit():
    g = graph("0-1, 0-2, 1-2")
    assert list(g.dfs()) == [
        RootVisit(0),
        EdgeVisit(0, 1, Status.NEW),
        EdgeVisit(1, 2, Status.NEW),
        RetreatVisit(2, 1),
        RetreatVisit(1, 0),
        EdgeVisit(0, 2, Status.REPEATED),
        RetreatVisit(0, None),
    ]


def test_multiple_roots():
    g = graph("0-1, 2-1")
    assert list(g.dfs()) == [
        RootVisit(0),
        EdgeVisit(0, 1, Status.NEW),
        RetreatVisit(1, 0),
        RetreatVisit(0, None),
        RootVisit(2),
        EdgeVisit(2, 1, Status.REPEATED),
        RetreatVisit(2, None),
    ]


def test_dfs_from_only_reaches_descendants():
    g = graph("0-1, 1-2, 3-0")
    visits = list(g.dfs_from(1))
    assert visits == [
        RootVisit(1),
        EdgeVisit(1, 2, Status.NEW),
        RetreatVisit(2, 1),
        RetreatVisit(1, None),
    ]


def test_dfs_explicit_roots_skip_visited():
    g = graph("0-1, 1-2")
    visits = list(Dfs(g, [1, 2, 0]))
    roots = [v.node for v in visits if isinstance(v, RootVisit)]
    assert roots == [1, 0]


def test_self_loop_is_repeated():
    g = graph("0-0")
    assert list(g.dfs()) == [
        RootVisit(0),
        EdgeVisit(0, 0, Status.REPEATED),
        RetreatVisit(0, None),
    ]


def test_dfs_is_its_own_iterator():
    d = graph("0-1").dfs()
    assert iter(d) is d
    assert next(d) == RootVisit(0)