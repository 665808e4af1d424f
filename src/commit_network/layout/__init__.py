"""Layout engine public API."""

from __future__ import annotations

from commit_network.layout.cache import LayoutCache, cache_key
from commit_network.layout.connectors import connector_kind, route_connector
from commit_network.layout.engine import full_layout, full_layout_with_config
from commit_network.layout.lanes import LaneAssignment, branch_lane_order, walk_primary_chain
from commit_network.layout.network import (
    NetworkLayout,
    branch_color,
    build_legend,
    canvas_extent,
    lane_x,
    row_y,
)
from commit_network.layout.timeline import compact_timeline, format_date_label
from commit_network.layout.types import (
    LayoutResult,
    LegendEntry,
    ParentConnector,
    PathCommand,
    Point,
    PositionedCommit,
    TimelineTick,
)

__all__ = [
    "LaneAssignment",
    "LayoutCache",
    "LayoutResult",
    "LegendEntry",
    "NetworkLayout",
    "ParentConnector",
    "PathCommand",
    "Point",
    "PositionedCommit",
    "TimelineTick",
    "branch_color",
    "branch_lane_order",
    "build_legend",
    "cache_key",
    "canvas_extent",
    "compact_timeline",
    "connector_kind",
    "format_date_label",
    "full_layout",
    "full_layout_with_config",
    "lane_x",
    "route_connector",
    "row_y",
    "walk_primary_chain",
]
