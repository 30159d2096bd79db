from typing import List, Optional

from rich.console import Console

from .box_components import Element
from .errors import ConfigurationError


class Screen:
    """Renders a root element and writes the resulting grid out."""

    def __init__(self, body: Element) -> None:
        if not isinstance(body, Element):
            raise ConfigurationError("body must be an Element instance.")
        self.body = body

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.body.render()]

    def render(self) -> str:
        return "\n".join(self.rows())

    def frame(self) -> str:
        # One line per row, then a trailing blank line.
        return "".join(f"{row}\n" for row in self.rows()) + "\n"

    def draw(self, console: Optional[Console] = None) -> None:
        console = console or Console(soft_wrap=True)
        # ``out`` skips markup, emoji and wrapping so the grid is written verbatim.
        console.out(self.frame(), end="", highlight=False)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Screen({type(self.body).__name__}, {self.body.height}x{self.body.width})"
