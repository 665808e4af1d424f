"""Intermediate representation: input model and commit graph."""

from commit_network.ir.graph import CommitGraphIR
from commit_network.ir.model import BranchInfo, CommitNode, NetworkGraph

__all__ = [
    "BranchInfo",
    "CommitGraphIR",
    "CommitNode",
    "NetworkGraph",
]
