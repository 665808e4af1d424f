"""Layout engine convenience functions."""

from __future__ import annotations

from commit_network.config import DEFAULT_LAYOUT, LayoutConfig
from commit_network.ir.model import NetworkGraph
from commit_network.layout.network import NetworkLayout
from commit_network.layout.types import LayoutResult


def full_layout(network: NetworkGraph) -> LayoutResult:
    """Run the layout pipeline with default geometry."""
    return full_layout_with_config(network, DEFAULT_LAYOUT)


def full_layout_with_config(network: NetworkGraph, config: LayoutConfig) -> LayoutResult:
    """Run the layout pipeline with custom geometry or palette."""
    engine = NetworkLayout(config)
    return engine.layout(network)
