"""Glyph sets for the text renderer: commit dots and line junctions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Junction keys are (up, down, left, right).
JunctionKey = tuple[bool, bool, bool, bool]


class CharSet(Enum):
    Unicode = "unicode"
    Ascii = "ascii"


@dataclass(frozen=True)
class Glyphs:
    commit: str
    branch_tip: str
    horizontal: str
    vertical: str
    junctions: dict[JunctionKey, str] = field(default_factory=dict)


_UNICODE = Glyphs(
    commit="●",
    branch_tip="◉",
    horizontal="─",
    vertical="│",
    junctions={
        (False, True, False, True): "┌",
        (False, True, True, False): "┐",
        (True, False, False, True): "└",
        (True, False, True, False): "┘",
        (True, True, False, True): "├",
        (True, True, True, False): "┤",
        (False, True, True, True): "┬",
        (True, False, True, True): "┴",
        (True, True, True, True): "┼",
    },
)

# Plain ASCII has no corner or tee glyphs; every junction is "+".
_ASCII = Glyphs(commit="*", branch_tip="@", horizontal="-", vertical="|")


def glyphs_for(cs: CharSet) -> Glyphs:
    return _UNICODE if cs is CharSet.Unicode else _ASCII


@dataclass(frozen=True)
class Arms:
    """Which arms of a line cell are active."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def merge(self, other: Arms) -> Arms:
        return Arms(
            up=self.up or other.up,
            down=self.down or other.down,
            left=self.left or other.left,
            right=self.right or other.right,
        )

    def to_char(self, cs: CharSet) -> str:
        g = glyphs_for(cs)
        vertical = self.up or self.down
        horizontal = self.left or self.right
        if not vertical and not horizontal:
            return " "
        if not vertical:
            return g.horizontal
        if not horizontal:
            return g.vertical
        return g.junctions.get((self.up, self.down, self.left, self.right), "+")
