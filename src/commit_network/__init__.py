"""commit-network: lane-based layout and rendering of GitHub commit networks."""

from commit_network.config import DEFAULT_LAYOUT, DEFAULT_RENDER, LayoutConfig, RenderConfig
from commit_network.ir.model import BranchInfo, CommitNode, NetworkGraph
from commit_network.layout import LayoutResult, full_layout_with_config
from commit_network.parsers import parse
from commit_network.renderers import AsciiRenderer, SvgRenderer
from commit_network.types import OutputFormat

__all__ = [
    "BranchInfo",
    "CommitNode",
    "LayoutConfig",
    "LayoutResult",
    "NetworkGraph",
    "OutputFormat",
    "RenderConfig",
    "layout_network",
    "render_json",
    "render_network",
]


def layout_network(network: NetworkGraph, config: LayoutConfig = DEFAULT_LAYOUT) -> LayoutResult:
    """Lay out a NetworkGraph; never raises for dangling or unknown references."""
    return full_layout_with_config(network, config)


def render_network(
    network: NetworkGraph,
    output_format: OutputFormat = OutputFormat.Text,
    layout_config: LayoutConfig = DEFAULT_LAYOUT,
    render_config: RenderConfig = DEFAULT_RENDER,
) -> str:
    """Lay out a NetworkGraph and render it as text or SVG.

    Args:
        network: The branch tips and bounded commit list.
        output_format: OutputFormat.Text or OutputFormat.Svg.
        layout_config: Geometry and palette for the layout engine.
        render_config: Charset and drawing options for the renderer.

    Returns:
        The rendered string, or empty string for text output of an empty graph.
    """
    result = layout_network(network, layout_config)
    if output_format is OutputFormat.Svg:
        return SvgRenderer(render_config).render(result)
    return AsciiRenderer(unicode=render_config.unicode, show_messages=render_config.show_messages).render(result)


def render_json(src: str, output_format: OutputFormat = OutputFormat.Text, unicode: bool = True) -> str:
    """Parse a JSON network document and render it.

    Raises:
        ValueError: If the input cannot be parsed.
    """
    network = parse(src)
    return render_network(network, output_format, render_config=RenderConfig(unicode=unicode))
