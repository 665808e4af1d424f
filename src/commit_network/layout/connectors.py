"""Connector routing between a commit and its parents."""

from __future__ import annotations

from commit_network.config import DEFAULT_LAYOUT, LayoutConfig
from commit_network.layout.types import PathCommand, Point
from commit_network.types import ConnectorKind


def connector_kind(child_x: int, parent_x: int) -> ConnectorKind:
    if child_x == parent_x:
        return ConnectorKind.Straight
    if parent_x < child_x:
        return ConnectorKind.Branch
    return ConnectorKind.Merge


def route_connector(
    child: Point,
    parent: Point,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> tuple[ConnectorKind, list[PathCommand]]:
    """Pick the connector shape and build its path.

    Curved connectors leave the child vertically for `curve_run` pixels, then
    bend with a quadratic curve whose control point sits `curve_lift` above
    the parent row, landing `curve_offset` short of the parent on the side
    the connector comes from. The bend size is fixed regardless of how many
    lanes are crossed.
    """
    kind = connector_kind(child.x, parent.x)
    if kind is ConnectorKind.Straight:
        return kind, [
            PathCommand("M", (child,)),
            PathCommand("L", (parent,)),
        ]

    offset = config.curve_offset if kind is ConnectorKind.Branch else -config.curve_offset
    run_end = Point(child.x, child.y + config.curve_run)
    control = Point(child.x, parent.y - config.curve_lift)
    bend_end = Point(parent.x + offset, parent.y)
    return kind, [
        PathCommand("M", (child,)),
        PathCommand("L", (run_end,)),
        PathCommand("Q", (control, bend_end)),
        PathCommand("L", (parent,)),
    ]
