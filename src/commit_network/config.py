"""Centralized configuration for commit-network."""

from __future__ import annotations

from dataclasses import dataclass

# GitHub-style branch colours; the default branch usually lands on green.
BRANCH_COLORS: tuple[str, ...] = (
    "#1a7f37",
    "#0969da",
    "#8250df",
    "#bf3989",
    "#cf222e",
    "#bc4c00",
)


@dataclass(frozen=True)
class LayoutConfig:
    """Geometry and palette for the layout engine (pixels)."""

    lane_spacing: int = 28
    row_spacing: int = 28
    left_padding: int = 20
    top_padding: int = 25
    right_margin: int = 20
    bottom_margin: int = 25
    # Connector curve: vertical run out of the child, lift of the control
    # point above the parent row, horizontal offset where the bend lands.
    curve_run: int = 8
    curve_lift: int = 4
    curve_offset: int = 8
    palette: tuple[str, ...] = BRANCH_COLORS

    def color_for(self, index: int) -> str:
        """Palette colour for a branch index, cycling when branches outnumber colours."""
        if not self.palette:
            return "#000000"
        return self.palette[index % len(self.palette)]


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for the rendering collaborators."""

    unicode: bool = True
    node_radius: int = 5
    halo_radius: int = 8
    stroke_width: int = 2
    timeline_width: int = 60
    show_messages: bool = True


@dataclass(frozen=True)
class FetchConfig:
    """Configuration for the GitHub REST fetcher."""

    api_url: str = "https://api.github.com"
    timeout: float = 10.0
    max_commits: int = 50
    per_page_limit: int = 100
    message_limit: int = 72
    token_env: str = "GITHUB_TOKEN"


DEFAULT_LAYOUT = LayoutConfig()
DEFAULT_RENDER = RenderConfig()
DEFAULT_FETCH = FetchConfig()
