# ojo

Building blocks for a version control system that stores a file as a graph
of lines rather than as a sequence of lines.

- **Line diffs** (`ojo.diff`): a patience-style diff built on the longest
  strictly increasing subsequence (`ojo.lis`).
- **Graph algorithms** (`ojo.graph`, `ojo.dfs`, `ojo.tarjan`,
  `ojo.partition`): non-recursive depth-first search, topological sort,
  linear orders, strongly and weakly connected components, and filtered or
  doubled views of a graph.
- **Chain decomposition** (`ojo.chain_graggle`): `ChainGraggle` collapses
  runs of nodes that each have one predecessor and one successor into single
  chains.
- **Patches** (`ojo.ids`, `ojo.change`, `ojo.patch`): content-addressed
  patches. The id of a patch is the SHA-256 hash of its YAML serialisation.
- **Errors** (`ojo.error`): every exception is a subclass of `OjoError`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Diffing lines

```python
from ojo.diff import diff, Keep, New, Delete

a = ["one", "two", "three"]
b = ["one", "three", "four"]
for line in diff(a, b):
    print(line)
```

The result is a list of `Keep(a_index, b_index)`, `Delete(index)` and
`New(index)` entries. Each line of `a` appears once as a `Keep` or a
`Delete`, and each line of `b` appears once as a `Keep` or a `New`, in
increasing order. `diff_ends(a, a_offset, b, b_offset)` is the simpler diff
that matches only the common prefix and suffix.

`longest_increasing_subsequence(seq)` in `ojo.lis` returns the indices of a
longest strictly increasing subsequence of `seq`.

## Graphs

```python
from ojo.graph import AdjacencyGraph

g = AdjacencyGraph.from_edges([(0, 1), (1, 3), (3, 2)])
g.topo_sort()       # [0, 1, 3, 2]
g.linear_order()    # [0, 1, 3, 2]; None when the order is not unique
g.has_path(0, 2)    # True

sccs = g.tarjan()   # a Partition; components come in topological order
for part in sccs.parts():
    print(part)
```

To use your own graph, subclass `ojo.graph.Graph` and implement `nodes`,
`out_edges` and `in_edges`. An edge is its target node, or any object with a
`target` attribute. The other methods then work on it: `dfs`, `dfs_from`,
`has_path`, `tarjan`, `weak_components`, `topo_sort`, `linear_order`,
`neighbor_set`, and the views `doubled`, `node_filtered` and
`edge_filtered`.

`Graph.dfs()` returns a `Dfs` iterator. It yields `RootVisit`, `EdgeVisit`
(with a `Status` of `NEW` or `REPEATED`) and `RetreatVisit` records.

A `Partition` is also a graph. Its nodes are the indices of the parts, and
its edges run between parts. `ChainGraggle.from_graph(graph)` works in the
same way: its nodes are chain indices, and `chain(i)` gives the original
nodes of a chain.

## Patches

```python
import io
from ojo.ids import NodeId
from ojo.change import Changes, NewNode
from ojo.patch import UnidentifiedPatch, Patch

changes = Changes([NewNode(id=NodeId.cur(0), contents=b"hello")])
draft = UnidentifiedPatch.create("someone@example.com", "first line", changes)

buf = io.BytesIO()
patch = draft.write_out(buf)        # the id is the hash of the bytes written
again = Patch.from_bytes(buf.getvalue())
assert again.id == patch.id
print(patch.id.to_base64())
```

`PatchId.cur()` is a placeholder id that stands for "this patch". Writing
the patch out replaces it with the real id. `PatchId.to_base64()` and
`PatchId.from_base64()` convert an id to and from its URL-safe base64 form,
which begins with `P`.

## What this package does not do

This package has no repository. It does not store branches or apply and
unapply patches, it keeps nothing on disk, and it has no command-line tool.
It also has no tools for resolving a graph interactively into an ordered
file. `ojo.error` defines exceptions such as `UnknownBranch` and
`RepoExists` for such uses, but no code in the package raises them.