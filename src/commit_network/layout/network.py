"""Lane-based commit network layout engine.

Phases:
  1. Lane assignment (branch precedence, primary-parent claims)
  2. Coordinate assignment (lane → x, list index → y)
  3. Connector routing (straight / branch curve / merge curve)
  4. Timeline compaction
  5. Canvas extent and branch legend
"""

from __future__ import annotations

import logging

from commit_network.config import DEFAULT_LAYOUT, LayoutConfig
from commit_network.ir.graph import CommitGraphIR
from commit_network.ir.model import NetworkGraph
from commit_network.layout.connectors import route_connector
from commit_network.layout.lanes import LaneAssignment
from commit_network.layout.timeline import compact_timeline, format_date_label
from commit_network.layout.types import LayoutResult, LegendEntry, ParentConnector, Point, PositionedCommit

logger = logging.getLogger(__name__)


# ─── Colours ─────────────────────────────────────────────────────────────────


def branch_color(network: NetworkGraph, branch_name: str, config: LayoutConfig = DEFAULT_LAYOUT) -> str:
    """Colour of a branch by its declared position; undeclared names get the first colour."""
    index = network.branch_index(branch_name)
    return config.color_for(index if index >= 0 else 0)


def build_legend(network: NetworkGraph, config: LayoutConfig = DEFAULT_LAYOUT) -> list[LegendEntry]:
    return [
        LegendEntry(branch_name=b.name, color=config.color_for(i), is_default=b.is_default)
        for i, b in enumerate(network.branches)
    ]


# ─── Coordinates ─────────────────────────────────────────────────────────────


def lane_x(lane: int, config: LayoutConfig = DEFAULT_LAYOUT) -> int:
    return config.left_padding + lane * config.lane_spacing


def row_y(row: int, config: LayoutConfig = DEFAULT_LAYOUT) -> int:
    return config.top_padding + row * config.row_spacing


def canvas_extent(max_lane: int, commit_count: int, config: LayoutConfig = DEFAULT_LAYOUT) -> tuple[int, int]:
    width = config.left_padding + (max_lane + 1) * config.lane_spacing + config.right_margin
    height = config.top_padding + commit_count * config.row_spacing + config.bottom_margin
    return width, height


# ─── NetworkLayout Engine ────────────────────────────────────────────────────


class NetworkLayout:
    """Commit network layout engine.

    Stateless: every call rebuilds all working maps from the input graph.
    """

    def __init__(self, config: LayoutConfig = DEFAULT_LAYOUT) -> None:
        self.config = config

    def layout(self, network: NetworkGraph) -> LayoutResult:
        config = self.config
        gir = CommitGraphIR.from_network(network)
        if not gir.is_dag():
            logger.debug("Commit graph contains a cycle; lane walks stop on revisit.")
        la = LaneAssignment.assign(gir)

        colors: dict[str, str] = {}
        points: dict[str, Point] = {}
        for row, commit in enumerate(network.commits):
            if gir.row(commit.sha) != row:
                continue
            owner = la.owner_of(commit.sha, network.default_branch)
            colors[commit.sha] = branch_color(network, owner, config)
            points[commit.sha] = Point(lane_x(la.lane_of(commit.sha), config), row_y(row, config))

        nodes: list[PositionedCommit] = []
        for row, commit in enumerate(network.commits):
            lane = la.lane_of(commit.sha)
            if gir.row(commit.sha) == row:
                here = points[commit.sha]
            else:
                # A repeated sha keeps its own row; connectors still target the first one.
                here = Point(lane_x(lane, config), row_y(row, config))

            connectors: list[ParentConnector] = []
            for parent_sha in gir.resolved_parents(commit):
                parent = points[parent_sha]
                kind, path = route_connector(here, parent, config)
                connectors.append(
                    ParentConnector(
                        parent_sha=parent_sha,
                        x=parent.x,
                        y=parent.y,
                        color=colors[parent_sha],
                        kind=kind,
                        path=path,
                    )
                )

            nodes.append(
                PositionedCommit(
                    sha=commit.sha,
                    short_sha=commit.short_sha,
                    message=commit.message,
                    author_login=commit.author_login,
                    author_avatar_url=commit.author_avatar_url,
                    date=commit.date,
                    date_label=format_date_label(commit.date),
                    lane=lane,
                    row=row,
                    x=here.x,
                    y=here.y,
                    color=colors[commit.sha],
                    lane_branch_name=la.owner_of(commit.sha, network.default_branch),
                    branches=commit.branches,
                    parent_connectors=connectors,
                )
            )

        if gir.missing_parents:
            logger.debug("Skipped connectors to %d parents outside the commit window.", len(gir.missing_parents))

        max_lane = max((n.lane for n in nodes), default=0)
        width, height = canvas_extent(max_lane, len(nodes), config)

        return LayoutResult(
            nodes=nodes,
            branch_legend=build_legend(network, config),
            timeline_ticks=compact_timeline(nodes),
            canvas_width=width,
            canvas_height=height,
        )
