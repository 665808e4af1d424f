"""Input data structures for the commit network.

These types mirror the JSON the REST backend serves: a bounded,
newest-first commit list plus the branch tips that point into it.
`from_dict` accepts the camelCase field names of that payload and
`to_dict` produces them again.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Any

SHORT_SHA_LENGTH = 7


def _require_str(data: dict[str, Any], key: str, where: str, default: str | None = None) -> str:
    value = data.get(key, default)
    if value is None:
        raise ValueError(f"{where}: missing required field '{key}'")
    if not isinstance(value, str):
        raise ValueError(f"{where}: field '{key}' must be a string, got {type(value).__name__}")
    return value


def _str_list(data: dict[str, Any], key: str, where: str) -> tuple[str, ...]:
    value = data.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{where}: field '{key}' must be a list of strings")
    return tuple(value)


@dataclass(frozen=True)
class CommitNode:
    sha: str
    short_sha: str = ""
    message: str = ""
    author_login: str = ""
    author_avatar_url: str = ""
    date: str = ""
    parent_shas: tuple[str, ...] = ()
    branches: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.short_sha:
            object.__setattr__(self, "short_sha", self.sha[:SHORT_SHA_LENGTH])

    @property
    def primary_parent(self) -> str | None:
        return self.parent_shas[0] if self.parent_shas else None

    @property
    def is_merge(self) -> bool:
        return len(self.parent_shas) > 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CommitNode:
        if not isinstance(data, dict):
            raise ValueError(f"commit entry must be an object, got {type(data).__name__}")
        sha = _require_str(data, "sha", "commit")
        where = f"commit {sha[:SHORT_SHA_LENGTH]}"
        return cls(
            sha=sha,
            short_sha=_require_str(data, "shortSha", where, default=""),
            message=_require_str(data, "message", where, default=""),
            author_login=_require_str(data, "authorLogin", where, default=""),
            author_avatar_url=_require_str(data, "authorAvatarUrl", where, default=""),
            date=_require_str(data, "date", where, default=""),
            parent_shas=_str_list(data, "parentShas", where),
            branches=_str_list(data, "branches", where),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sha": self.sha,
            "shortSha": self.short_sha,
            "message": self.message,
            "authorLogin": self.author_login,
            "authorAvatarUrl": self.author_avatar_url,
            "date": self.date,
            "parentShas": list(self.parent_shas),
            "branches": list(self.branches),
        }


@dataclass(frozen=True)
class BranchInfo:
    name: str
    sha: str
    is_default: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BranchInfo:
        if not isinstance(data, dict):
            raise ValueError(f"branch entry must be an object, got {type(data).__name__}")
        name = _require_str(data, "name", "branch")
        is_default = data.get("isDefault", False)
        if not isinstance(is_default, bool):
            raise ValueError(f"branch {name}: field 'isDefault' must be a boolean")
        return cls(name=name, sha=_require_str(data, "sha", f"branch {name}"), is_default=is_default)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "sha": self.sha, "isDefault": self.is_default}


@dataclass(frozen=True)
class NetworkGraph:
    """Branch tips plus a bounded commit list, newest first.

    Commit order is trusted as the vertical order; nothing downstream
    re-sorts it.
    """

    branches: tuple[BranchInfo, ...] = ()
    commits: tuple[CommitNode, ...] = ()
    default_branch: str = "main"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NetworkGraph:
        if not isinstance(data, dict):
            raise ValueError(f"network graph must be an object, got {type(data).__name__}")
        branches = data.get("branches") or []
        commits = data.get("commits") or []
        if not isinstance(branches, list):
            raise ValueError("network graph: field 'branches' must be a list")
        if not isinstance(commits, list):
            raise ValueError("network graph: field 'commits' must be a list")
        return cls(
            branches=tuple(BranchInfo.from_dict(b) for b in branches),
            commits=tuple(CommitNode.from_dict(c) for c in commits),
            default_branch=_require_str(data, "defaultBranch", "network graph", default="main"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "branches": [b.to_dict() for b in self.branches],
            "commits": [c.to_dict() for c in self.commits],
            "defaultBranch": self.default_branch,
        }

    def content_hash(self) -> str:
        """Stable digest of the graph content, usable as a cache key."""
        canonical = json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha1(canonical.encode("utf-8")).hexdigest()

    def branch_index(self, name: str) -> int:
        """Declared position of a branch, or -1 when no branch has that name."""
        for i, branch in enumerate(self.branches):
            if branch.name == name:
                return i
        return -1
