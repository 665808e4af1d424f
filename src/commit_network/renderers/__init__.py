"""Renderers for laid-out commit networks."""

from commit_network.renderers.ascii import AsciiRenderer
from commit_network.renderers.base import Renderer
from commit_network.renderers.svg import SvgRenderer

__all__ = ["AsciiRenderer", "Renderer", "SvgRenderer"]
