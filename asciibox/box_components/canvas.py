from typing import List

from .core import GLYPHS


class Canvas:

    def __init__(self, width: int = 0, height: int = 0, background: str = GLYPHS.blank):
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.background = background
        self.grid = [[background for _ in range(self.width)] for _ in range(self.height)]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def set(self, x: int, y: int, char: str) -> bool:
        # Cells outside the grid are dropped, never wrapped around.
        if not self.contains(x, y):
            return False
        self.grid[y][x] = char
        return True

    def get(self, x: int, y: int) -> str:
        if self.contains(x, y):
            return self.grid[y][x]
        return self.background

    def hline(self, y: int, x0: int, x1: int, char: str) -> None:
        for x in range(x0, x1):
            self.set(x, y, char)

    def vline(self, x: int, y0: int, y1: int, char: str) -> None:
        for y in range(y0, y1):
            self.set(x, y, char)

    def write(self, x: int, y: int, text: str) -> None:
        for offset, char in enumerate(text):
            self.set(x + offset, y, char)

    def paste(self, other: "Canvas", x: int, y: int) -> None:
        for row_index, row in enumerate(other.grid):
            for col_index, char in enumerate(row):
                self.set(x + col_index, y + row_index, char)

    def rows(self) -> List[List[str]]:
        return [list(row) for row in self.grid]

    def render(self) -> str:
        return "\n".join("".join(row) for row in self.grid)
