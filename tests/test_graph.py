"""Tests for commit_network.ir: input model, JSON field mapping, and CommitGraphIR."""

import pytest

from commit_network.ir import BranchInfo, CommitGraphIR, CommitNode, NetworkGraph


def _commit(sha: str, *parents: str, date: str = "2024-03-01 10:00", branches: tuple[str, ...] = ()) -> CommitNode:
    return CommitNode(sha=sha, message=f"commit {sha}", date=date, parent_shas=tuple(parents), branches=branches)


def _network(commits: list[CommitNode], branches: list[BranchInfo] | None = None, default: str = "main") -> NetworkGraph:
    return NetworkGraph(branches=tuple(branches or []), commits=tuple(commits), default_branch=default)


class TestCommitNode:
    def test_short_sha_derived_from_sha(self):
        c = CommitNode(sha="0123456789abcdef")
        assert c.short_sha == "0123456"

    def test_explicit_short_sha_kept(self):
        c = CommitNode(sha="0123456789abcdef", short_sha="0123")
        assert c.short_sha == "0123"

    def test_primary_parent(self):
        assert _commit("A", "B", "C").primary_parent == "B"
        assert _commit("A").primary_parent is None

    def test_is_merge(self):
        assert _commit("A", "B", "C").is_merge
        assert not _commit("A", "B").is_merge

    def test_frozen(self):
        c = _commit("A")
        with pytest.raises(AttributeError):
            c.sha = "B"  # type: ignore[misc]


class TestFromDict:
    def test_camel_case_fields(self):
        c = CommitNode.from_dict(
            {
                "sha": "abcdef1234",
                "shortSha": "abcdef1",
                "message": "Fix bug",
                "authorLogin": "octocat",
                "authorAvatarUrl": "https://example.com/a.png",
                "date": "2024-03-01 10:00",
                "parentShas": ["p1", "p2"],
                "branches": ["main"],
            }
        )
        assert c.author_login == "octocat"
        assert c.author_avatar_url == "https://example.com/a.png"
        assert c.parent_shas == ("p1", "p2")
        assert c.branches == ("main",)

    def test_optional_fields_default(self):
        c = CommitNode.from_dict({"sha": "abcdef1234"})
        assert c.short_sha == "abcdef1"
        assert c.parent_shas == ()
        assert c.branches == ()
        assert c.message == ""

    def test_missing_sha_raises(self):
        with pytest.raises(ValueError, match="sha"):
            CommitNode.from_dict({"message": "no sha"})

    def test_wrong_parent_type_raises(self):
        with pytest.raises(ValueError, match="parentShas"):
            CommitNode.from_dict({"sha": "abc", "parentShas": "def"})

    def test_branch_is_default_must_be_bool(self):
        with pytest.raises(ValueError, match="isDefault"):
            BranchInfo.from_dict({"name": "main", "sha": "abc", "isDefault": "yes"})

    def test_network_round_trip_shape(self):
        data = {
            "branches": [{"name": "main", "sha": "A", "isDefault": True}],
            "commits": [{"sha": "A", "parentShas": []}],
            "defaultBranch": "main",
        }
        network = NetworkGraph.from_dict(data)
        assert network.branches[0].is_default
        assert network.to_dict()["branches"] == data["branches"]
        assert network.to_dict()["defaultBranch"] == "main"

    def test_network_default_branch_fallback(self):
        network = NetworkGraph.from_dict({"branches": [], "commits": []})
        assert network.default_branch == "main"

    def test_network_not_an_object(self):
        with pytest.raises(ValueError):
            NetworkGraph.from_dict([])  # type: ignore[arg-type]


class TestContentHash:
    def test_equal_content_equal_hash(self):
        a = _network([_commit("A", "B"), _commit("B")])
        b = _network([_commit("A", "B"), _commit("B")])
        assert a is not b
        assert a.content_hash() == b.content_hash()

    def test_different_content_different_hash(self):
        a = _network([_commit("A", "B"), _commit("B")])
        b = _network([_commit("A"), _commit("B")])
        assert a.content_hash() != b.content_hash()

    def test_branch_index(self):
        network = _network([], [BranchInfo("feature", "X"), BranchInfo("main", "Y", True)])
        assert network.branch_index("main") == 1
        assert network.branch_index("feature") == 0
        assert network.branch_index("missing") == -1


class TestCommitGraphIR:
    def test_nodes_and_rows(self):
        gir = CommitGraphIR.from_network(_network([_commit("A", "B"), _commit("B")]))
        assert gir.row("A") == 0
        assert gir.row("B") == 1
        assert gir.commit("B").sha == "B"

    def test_unknown_lookups(self):
        gir = CommitGraphIR.from_network(_network([_commit("A")]))
        assert gir.commit("Z") is None
        assert gir.row("Z") is None

    def test_repeated_sha_keeps_first_row(self):
        gir = CommitGraphIR.from_network(_network([_commit("A"), _commit("B"), _commit("A")]))
        assert gir.row("A") == 0

    def test_missing_parents_collected(self):
        gir = CommitGraphIR.from_network(_network([_commit("A", "B", "GONE"), _commit("B", "OLD")]))
        assert gir.digraph.number_of_edges() == 1
        assert gir.missing_parents == {"GONE", "OLD"}

    def test_resolved_parents_keep_order(self):
        network = _network([_commit("M", "C", "X", "B"), _commit("C"), _commit("B")])
        gir = CommitGraphIR.from_network(network)
        assert gir.resolved_parents(network.commits[0]) == ["C", "B"]

    def test_resolved_parents_keep_duplicates(self):
        network = _network([_commit("M", "B", "B"), _commit("B")])
        gir = CommitGraphIR.from_network(network)
        assert gir.resolved_parents(network.commits[0]) == ["B", "B"]

    def test_cycle_detected(self):
        gir = CommitGraphIR.from_network(_network([_commit("A", "B"), _commit("B", "A")]))
        assert not gir.is_dag()

    def test_linear_history_is_dag(self):
        gir = CommitGraphIR.from_network(_network([_commit("A", "B"), _commit("B", "C"), _commit("C")]))
        assert gir.is_dag()
