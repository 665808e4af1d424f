"""Lane assignment: one column per branch, claimed along primary-parent chains."""

from __future__ import annotations

import logging

from commit_network.ir.graph import CommitGraphIR
from commit_network.ir.model import BranchInfo

logger = logging.getLogger(__name__)


def branch_lane_order(branches: tuple[BranchInfo, ...] | list[BranchInfo]) -> dict[str, int]:
    """Number branches: default branches first, then the rest, each in input order."""
    lanes: dict[str, int] = {}
    next_lane = 0
    for branch in branches:
        if branch.is_default and branch.name not in lanes:
            lanes[branch.name] = next_lane
            next_lane += 1
    for branch in branches:
        if branch.name not in lanes:
            lanes[branch.name] = next_lane
            next_lane += 1
    return lanes


def walk_primary_chain(gir: CommitGraphIR, tip_sha: str) -> list[str]:
    """Commits reachable from `tip_sha` through first parents, inside the window.

    Stops at a root, at a parent outside the window, or on a revisit.
    """
    chain: list[str] = []
    visited: set[str] = set()
    current: str | None = tip_sha
    while current is not None and current not in visited:
        commit = gir.commit(current)
        if commit is None:
            break
        visited.add(current)
        chain.append(current)
        current = commit.primary_parent
    return chain


class LaneAssignment:
    def __init__(
        self,
        branch_lanes: dict[str, int],
        lanes: dict[str, int],
        owners: dict[str, str],
        orphans: list[str],
    ) -> None:
        self.branch_lanes = branch_lanes
        self.lanes = lanes
        self.owners = owners
        self.orphans = orphans

    @classmethod
    def assign(cls, gir: CommitGraphIR) -> LaneAssignment:
        network = gir.network
        branch_lanes = branch_lane_order(network.branches)

        lanes: dict[str, int] = {}
        owners: dict[str, str] = {}

        # Precedence order (default first) decides who claims a shared ancestor.
        for branch in sorted(network.branches, key=lambda b: branch_lanes[b.name]):
            lane = branch_lanes[branch.name]
            for sha in walk_primary_chain(gir, branch.sha):
                if sha in lanes:
                    break
                lanes[sha] = lane
                owners[sha] = branch.name

        orphans: list[str] = []
        for commit in network.commits:
            if commit.sha not in lanes:
                lanes[commit.sha] = 0
                owners[commit.sha] = network.default_branch
                orphans.append(commit.sha)

        logger.debug(
            "Assigned %d commits to %d branch lanes (%d orphaned to %r).",
            len(lanes),
            len(branch_lanes),
            len(orphans),
            network.default_branch,
        )
        return cls(branch_lanes=branch_lanes, lanes=lanes, owners=owners, orphans=orphans)

    def lane_of(self, sha: str) -> int:
        return self.lanes.get(sha, 0)

    def owner_of(self, sha: str, default: str) -> str:
        return self.owners.get(sha, default)
