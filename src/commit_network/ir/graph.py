"""Commit graph IR: wraps the bounded commit list in a networkx DiGraph.

Edges run child → parent and exist only for parents inside the commit
window; references to commits outside the window are remembered in
`missing_parents` but never become nodes.
"""

from __future__ import annotations

import networkx as nx

from commit_network.ir.model import CommitNode, NetworkGraph


class CommitGraphIR:
    """Lookup structure over a NetworkGraph's commits.

    Each node carries the CommitNode under ``data`` and its list position
    under ``row``.
    """

    def __init__(self, digraph: nx.DiGraph, network: NetworkGraph, missing_parents: set[str]) -> None:
        self.digraph = digraph
        self.network = network
        self.missing_parents = missing_parents

    @classmethod
    def from_network(cls, network: NetworkGraph) -> CommitGraphIR:
        digraph: nx.DiGraph = nx.DiGraph()
        for row, commit in enumerate(network.commits):
            # First occurrence wins when the input repeats a sha.
            if commit.sha not in digraph:
                digraph.add_node(commit.sha, data=commit, row=row)

        missing: set[str] = set()
        for commit in network.commits:
            for order, parent_sha in enumerate(commit.parent_shas):
                if parent_sha in digraph:
                    if not digraph.has_edge(commit.sha, parent_sha):
                        digraph.add_edge(commit.sha, parent_sha, order=order)
                else:
                    missing.add(parent_sha)

        return cls(digraph=digraph, network=network, missing_parents=missing)

    def commit(self, sha: str) -> CommitNode | None:
        if sha not in self.digraph:
            return None
        return self.digraph.nodes[sha]["data"]

    def row(self, sha: str) -> int | None:
        """List position of the first commit carrying `sha`."""
        if sha not in self.digraph:
            return None
        return self.digraph.nodes[sha]["row"]

    def resolved_parents(self, commit: CommitNode) -> list[str]:
        """Parents of `commit` that lie inside the window, in declared order."""
        return [p for p in commit.parent_shas if p in self.digraph]

    def is_dag(self) -> bool:
        return nx.is_directed_acyclic_graph(self.digraph)
