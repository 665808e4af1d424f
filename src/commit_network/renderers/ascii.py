"""ASCII/Unicode text renderer for the commit network.

Pixel geometry is discarded: each commit gets a text row (with a connector
row between consecutive commits) and each lane a column.
"""

from __future__ import annotations

from commit_network.layout.types import LayoutResult, PositionedCommit
from commit_network.renderers.canvas import Canvas
from commit_network.renderers.charset import CharSet, glyphs_for

LANE_WIDTH: int = 2
ROW_HEIGHT: int = 2
LABEL_GAP: int = 2


def _text_row(node: PositionedCommit) -> int:
    return node.row * ROW_HEIGHT


def _gutter_width(result: LayoutResult) -> int:
    widest = max((len(t.label) for t in result.timeline_ticks), default=0)
    return widest + LABEL_GAP if widest else 0


def _describe(node: PositionedCommit, show_message: bool) -> str:
    parts = [node.short_sha]
    if node.branches:
        parts.append(f"({', '.join(node.branches)})")
    if show_message and node.message:
        parts.append(node.message)
    return " ".join(parts)


def _paint_connectors(canvas: Canvas, result: LayoutResult, gutter: int) -> None:
    by_sha: dict[str, PositionedCommit] = {}
    for node in result.nodes:
        by_sha.setdefault(node.sha, node)

    for node in result.nodes:
        cc = gutter + node.lane * LANE_WIDTH
        cr = _text_row(node)
        for conn in node.parent_connectors:
            parent = by_sha.get(conn.parent_sha)
            if parent is None:
                continue
            pc = gutter + parent.lane * LANE_WIDTH
            pr = _text_row(parent)
            if pc == cc:
                canvas.vline(cc, cr, pr)
                continue
            # Vertical run in the child's lane, jog on the row next to the
            # parent, then a one-cell entry into the parent.
            jog = pr - 1 if pr > cr else pr + 1
            canvas.vline(cc, cr, jog)
            canvas.hline(jog, cc, pc)
            canvas.vline(pc, jog, pr)


class AsciiRenderer:
    """ASCII/Unicode text renderer."""

    def __init__(self, unicode: bool = True, show_messages: bool = True) -> None:
        self.unicode = unicode
        self.show_messages = show_messages

    def render(self, result: LayoutResult) -> str:
        if not result.nodes:
            return ""

        cs = CharSet.Unicode if self.unicode else CharSet.Ascii
        glyphs = glyphs_for(cs)

        gutter = _gutter_width(result)
        max_lane = max(n.lane for n in result.nodes)
        label_col = gutter + max_lane * LANE_WIDTH + 1 + LABEL_GAP
        descriptions = [_describe(n, self.show_messages) for n in result.nodes]
        width = label_col + max(len(d) for d in descriptions) + 1
        height = (max(n.row for n in result.nodes) + 1) * ROW_HEIGHT
        canvas = Canvas(width, height, cs)

        row_of_y = {n.y: _text_row(n) for n in result.nodes}
        for tick in result.timeline_ticks:
            row = row_of_y.get(tick.y)
            if row is not None:
                canvas.write_str(0, row, tick.label)

        for node, text in zip(result.nodes, descriptions):
            glyph = glyphs.branch_tip if node.has_halo else glyphs.commit
            canvas.set(gutter + node.lane * LANE_WIDTH, _text_row(node), glyph)
            canvas.write_str(label_col, _text_row(node), text)

        _paint_connectors(canvas, result, gutter)
        return canvas.to_string()
