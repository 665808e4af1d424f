"""Canvas: 2D character grid for the text renderer."""

from __future__ import annotations

from commit_network.renderers.charset import Arms, CharSet


class Canvas:
    """A 2D character grid onto which the network is painted.

    Line cells are stored as Arms so crossing connectors merge into
    junction characters; text and glyph cells override them.
    """

    def __init__(self, width: int, height: int, charset: CharSet) -> None:
        self.width = width
        self.height = height
        self.charset = charset
        self.cells: list[list[str]] = [[" "] * width for _ in range(height)]
        self.arms: dict[tuple[int, int], Arms] = {}

    def get(self, col: int, row: int) -> str:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.cells[row][col]
        return " "

    def set(self, col: int, row: int, c: str) -> None:
        if 0 <= row < self.height and 0 <= col < self.width:
            self.cells[row][col] = c
            self.arms.pop((col, row), None)

    def add_arms(self, col: int, row: int, arms: Arms) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            return
        existing = self.arms.get((col, row))
        if existing is None:
            if self.cells[row][col] != " ":
                # Glyphs and text win over lines.
                return
            existing = Arms()
        merged = existing.merge(arms)
        self.arms[(col, row)] = merged
        self.cells[row][col] = merged.to_char(self.charset)

    def hline(self, row: int, x1: int, x2: int) -> None:
        lo, hi = (x1, x2) if x1 <= x2 else (x2, x1)
        for col in range(lo, hi + 1):
            self.add_arms(col, row, Arms(left=col > lo, right=col < hi))

    def vline(self, col: int, y1: int, y2: int) -> None:
        lo, hi = (y1, y2) if y1 <= y2 else (y2, y1)
        for row in range(lo, hi + 1):
            self.add_arms(col, row, Arms(up=row > lo, down=row < hi))

    def write_str(self, col: int, row: int, s: str) -> None:
        for i, ch in enumerate(s):
            c = col + i
            if c >= self.width or row >= self.height:
                break
            self.set(c, row, ch)

    def to_string(self) -> str:
        lines = []
        for row in self.cells:
            line = "".join(row).rstrip()
            lines.append(line)
        out = "\n".join(lines)
        trimmed = out.rstrip("\n")
        return trimmed + "\n"
