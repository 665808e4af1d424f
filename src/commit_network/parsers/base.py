"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from commit_network.ir.model import NetworkGraph


class Parser(Protocol):
    """Protocol that all network document parsers must implement."""

    def parse(self, src: str) -> NetworkGraph:
        """Parse source text into a NetworkGraph."""
        ...
