"""SVG renderer: legend, timeline column, connectors and commit dots."""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from commit_network.config import DEFAULT_RENDER, RenderConfig
from commit_network.layout.types import LayoutResult, PositionedCommit

LEGEND_HEIGHT: int = 24
LEGEND_ITEM_GAP: int = 16
CHAR_WIDTH: int = 7  # rough width of one legend character at 12px


def _tooltip(node: PositionedCommit) -> str:
    lines = [node.short_sha, node.message, f"{node.author_login} • {node.date}"]
    if node.branches:
        lines.append(", ".join(node.branches))
    return escape("\n".join(line for line in lines if line))


class SvgRenderer:
    """Renders a LayoutResult as a standalone SVG document."""

    def __init__(self, config: RenderConfig = DEFAULT_RENDER) -> None:
        self.config = config

    def _legend(self, result: LayoutResult) -> list[str]:
        out = ['<g class="branch-legend">']
        x = 8
        for entry in result.branch_legend:
            label = entry.branch_name + (" (default)" if entry.is_default else "")
            out.append(f'<circle cx="{x + 5}" cy="12" r="5" fill={quoteattr(entry.color)}/>')
            out.append(f'<text x="{x + 14}" y="16" font-size="12">{escape(label)}</text>')
            x += 14 + len(label) * CHAR_WIDTH + LEGEND_ITEM_GAP
        out.append("</g>")
        return out

    def _timeline(self, result: LayoutResult) -> list[str]:
        right = self.config.timeline_width - 8
        out = ['<g class="timeline">']
        for tick in result.timeline_ticks:
            out.append(
                f'<text x="{right}" y="{tick.y + 4}" font-size="11" text-anchor="end">{escape(tick.label)}</text>'
            )
        out.append("</g>")
        return out

    def _graph(self, result: LayoutResult) -> list[str]:
        cfg = self.config
        out = [f'<g class="graph" transform="translate({cfg.timeline_width},0)">', '<g class="graph-connections">']
        for node in result.nodes:
            for conn in node.parent_connectors:
                out.append(
                    f'<path d="{conn.svg_path()}" stroke={quoteattr(conn.color)} '
                    f'stroke-width="{cfg.stroke_width}" fill="none"/>'
                )
        out.append("</g>")
        out.append('<g class="graph-nodes">')
        for node in result.nodes:
            out.append(f'<g data-sha={quoteattr(node.sha)}>')
            out.append(
                f'<circle cx="{node.x}" cy="{node.y}" r="{cfg.node_radius}" fill={quoteattr(node.color)}>'
                f"<title>{_tooltip(node)}</title></circle>"
            )
            if node.has_halo:
                out.append(
                    f'<circle cx="{node.x}" cy="{node.y}" r="{cfg.halo_radius}" fill="none" '
                    f'stroke={quoteattr(node.color)} stroke-width="1.5" opacity="0.5"/>'
                )
            out.append("</g>")
        out.append("</g>")
        out.append("</g>")
        return out

    def render(self, result: LayoutResult) -> str:
        width = self.config.timeline_width + result.canvas_width
        height = LEGEND_HEIGHT + result.canvas_height
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}" font-family="sans-serif">',
        ]
        parts.extend(self._legend(result))
        parts.append(f'<g transform="translate(0,{LEGEND_HEIGHT})">')
        parts.extend(self._timeline(result))
        parts.extend(self._graph(result))
        parts.append("</g>")
        parts.append("</svg>")
        return "\n".join(parts) + "\n"
