"""Layout types shared by the engine and the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field

from commit_network.types import ConnectorKind


@dataclass(frozen=True)
class Point:
    """A 2D point in pixel coordinates."""

    x: int
    y: int


@dataclass(frozen=True)
class PathCommand:
    """One SVG-style path command: M/L take one point, Q takes control + end."""

    op: str
    points: tuple[Point, ...]


@dataclass
class ParentConnector:
    """A drawn edge from a commit to one of its in-window parents."""

    parent_sha: str
    x: int
    y: int
    color: str
    kind: ConnectorKind
    path: list[PathCommand] = field(default_factory=list)

    def svg_path(self) -> str:
        parts: list[str] = []
        for cmd in self.path:
            coords = ", ".join(f"{p.x} {p.y}" for p in cmd.points)
            parts.append(f"{cmd.op} {coords}")
        return " ".join(parts)


@dataclass
class PositionedCommit:
    """A commit placed on the canvas, with everything a tooltip needs."""

    sha: str
    short_sha: str
    message: str
    author_login: str
    author_avatar_url: str
    date: str
    date_label: str
    lane: int
    row: int
    x: int
    y: int
    color: str
    lane_branch_name: str
    branches: tuple[str, ...] = ()
    parent_connectors: list[ParentConnector] = field(default_factory=list)

    @property
    def has_halo(self) -> bool:
        """Branch tips get a ring around the dot."""
        return bool(self.branches)


@dataclass(frozen=True)
class LegendEntry:
    branch_name: str
    color: str
    is_default: bool


@dataclass(frozen=True)
class TimelineTick:
    label: str
    y: int


@dataclass
class LayoutResult:
    """Self-contained layout output; renderers need nothing else."""

    nodes: list[PositionedCommit]
    branch_legend: list[LegendEntry]
    timeline_ticks: list[TimelineTick]
    canvas_width: int
    canvas_height: int

    def find_node(self, sha: str) -> PositionedCommit | None:
        """Hover lookup by full sha or short sha."""
        for node in self.nodes:
            if node.sha == sha or node.short_sha == sha:
                return node
        return None
