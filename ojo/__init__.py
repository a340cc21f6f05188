"""Line diffs, graph algorithms, chain decomposition and hashed patches for graph-based version control."""

__version__ = "0.1.1"

__all__ = [
    "lis",
    "diff",
    "dfs",
    "graph",
    "partition",
    "tarjan",
    "chain_graggle",
    "error",
    "ids",
    "change",
    "patch",
]