"""Tests for layout/lanes.py: branch lane numbering and primary-parent claims."""

from __future__ import annotations

from commit_network.ir import BranchInfo, CommitGraphIR, CommitNode, NetworkGraph
from commit_network.layout import LaneAssignment, branch_lane_order, walk_primary_chain

# ─── Helpers ──────────────────────────────────────────────────────────────────


def make_commit(sha: str, *parents: str) -> CommitNode:
    return CommitNode(sha=sha, parent_shas=tuple(parents))


def make_gir(commits: list[CommitNode], branches: list[BranchInfo], default: str = "main") -> CommitGraphIR:
    network = NetworkGraph(branches=tuple(branches), commits=tuple(commits), default_branch=default)
    return CommitGraphIR.from_network(network)


# ─── branch_lane_order ───────────────────────────────────────────────────────


class TestBranchLaneOrder:
    def test_default_gets_lane_zero(self):
        lanes = branch_lane_order([BranchInfo("a", "1"), BranchInfo("main", "2", True), BranchInfo("b", "3")])
        assert lanes == {"main": 0, "a": 1, "b": 2}

    def test_declared_order_without_default(self):
        lanes = branch_lane_order([BranchInfo("x", "1"), BranchInfo("y", "2")])
        assert lanes == {"x": 0, "y": 1}

    def test_empty(self):
        assert branch_lane_order([]) == {}

    def test_lanes_are_dense(self):
        branches = [BranchInfo(f"b{i}", str(i), i == 3) for i in range(6)]
        lanes = branch_lane_order(branches)
        assert sorted(lanes.values()) == list(range(6))


# ─── walk_primary_chain ──────────────────────────────────────────────────────


class TestWalkPrimaryChain:
    def test_follows_first_parent_only(self):
        gir = make_gir([make_commit("M", "A", "F"), make_commit("F", "A"), make_commit("A")], [])
        assert walk_primary_chain(gir, "M") == ["M", "A"]

    def test_stops_at_window_edge(self):
        gir = make_gir([make_commit("A", "B"), make_commit("B", "OUTSIDE")], [])
        assert walk_primary_chain(gir, "A") == ["A", "B"]

    def test_dangling_tip_yields_nothing(self):
        gir = make_gir([make_commit("A")], [])
        assert walk_primary_chain(gir, "NOT_LOADED") == []

    def test_terminates_on_cycle(self):
        gir = make_gir([make_commit("A", "B"), make_commit("B", "C"), make_commit("C", "A")], [])
        assert walk_primary_chain(gir, "A") == ["A", "B", "C"]

    def test_self_parent(self):
        gir = make_gir([make_commit("A", "A")], [])
        assert walk_primary_chain(gir, "A") == ["A"]


# ─── LaneAssignment ──────────────────────────────────────────────────────────


class TestLaneAssignment:
    def test_linear_history_single_lane(self):
        gir = make_gir(
            [make_commit("A", "B"), make_commit("B", "C"), make_commit("C")],
            [BranchInfo("main", "A", True)],
        )
        la = LaneAssignment.assign(gir)
        assert la.lanes == {"A": 0, "B": 0, "C": 0}
        assert set(la.owners.values()) == {"main"}
        assert la.orphans == []

    def test_feature_branch_gets_next_lane(self):
        gir = make_gir(
            [make_commit("A", "B", "C"), make_commit("C", "B"), make_commit("B")],
            [BranchInfo("main", "A", True), BranchInfo("feature", "C")],
        )
        la = LaneAssignment.assign(gir)
        assert la.lane_of("A") == 0
        assert la.lane_of("B") == 0
        assert la.lane_of("C") == 1
        assert la.owner_of("C", "main") == "feature"

    def test_default_claims_shared_history_even_when_listed_later(self):
        gir = make_gir(
            [make_commit("F", "B"), make_commit("A", "B"), make_commit("B")],
            [BranchInfo("feature", "F"), BranchInfo("main", "A", True)],
        )
        la = LaneAssignment.assign(gir)
        assert la.owner_of("B", "main") == "main"
        assert la.lane_of("B") == 0
        assert la.lane_of("F") == 1

    def test_first_declared_wins_between_non_default_branches(self):
        gir = make_gir(
            [make_commit("X", "S"), make_commit("Y", "S"), make_commit("S")],
            [BranchInfo("x", "X"), BranchInfo("y", "Y")],
            default="x",
        )
        la = LaneAssignment.assign(gir)
        assert la.owner_of("S", "?") == "x"
        assert la.lane_of("Y") == 1

    def test_merge_parent_only_reachable_commit_is_orphaned(self):
        # "F" is reachable only as A's second parent and no branch points at it.
        gir = make_gir(
            [make_commit("A", "B", "F"), make_commit("F", "B"), make_commit("B")],
            [BranchInfo("main", "A", True)],
        )
        la = LaneAssignment.assign(gir)
        assert la.lane_of("F") == 0
        assert la.owner_of("F", "?") == "main"
        assert la.orphans == ["F"]

    def test_orphans_attributed_to_default_branch_name(self):
        gir = make_gir([make_commit("A"), make_commit("B")], [], default="trunk")
        la = LaneAssignment.assign(gir)
        assert la.lanes == {"A": 0, "B": 0}
        assert la.owners == {"A": "trunk", "B": "trunk"}

    def test_dangling_branch_tip_keeps_its_lane_number(self):
        gir = make_gir(
            [make_commit("A", "B"), make_commit("C", "B"), make_commit("B")],
            [BranchInfo("main", "A", True), BranchInfo("gone", "ZZZ"), BranchInfo("topic", "C")],
        )
        la = LaneAssignment.assign(gir)
        assert la.branch_lanes["gone"] == 1
        assert la.lane_of("C") == 2
        assert max(la.lanes.values()) == 2

    def test_cyclic_input_terminates(self):
        gir = make_gir(
            [make_commit("A", "B"), make_commit("B", "A")],
            [BranchInfo("main", "A", True), BranchInfo("other", "B")],
        )
        la = LaneAssignment.assign(gir)
        assert la.lanes == {"A": 0, "B": 0}

    def test_every_commit_gets_a_lane(self):
        commits = [make_commit("A", "B"), make_commit("Q", "OUT"), make_commit("B"), make_commit("R", "B")]
        gir = make_gir(commits, [BranchInfo("main", "A", True)])
        la = LaneAssignment.assign(gir)
        assert set(la.lanes) == {"A", "B", "Q", "R"}
        assert all(lane >= 0 for lane in la.lanes.values())
