"""Shared type definitions for commit-network.

Small enums used across the layout engine and renderers.
"""

from __future__ import annotations

from enum import Enum


class ConnectorKind(Enum):
    Straight = "straight"  # parent in the same lane
    Branch = "branch"  # parent lane left of the child
    Merge = "merge"  # parent lane right of the child


class OutputFormat(Enum):
    Text = "text"
    Svg = "svg"

    @classmethod
    def default(cls) -> OutputFormat:
        return cls.Text
