import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Tuple, Type

from .canvas import Canvas
from .core import Display, FlexAlign
from .helpers import div_trunc, largest_in_list

if TYPE_CHECKING:
    from .element import Element

logger = logging.getLogger(__name__)

Placement = Tuple["Element", int, int]


class Layout(ABC):
    """Places the children of a container inside its border and padding.

    ``placements`` returns ``(child, x, y)`` offsets; ``apply`` renders each
    child and pastes its grid into the parent canvas, dropping cells that fall
    outside the canvas.
    """

    def __init__(self, element: "Element") -> None:
        self._element = element

    @abstractmethod
    def placements(self) -> List[Placement]:
        """Return ``(child, x, y)`` for every child that is painted."""

    def apply(self, canvas: Canvas) -> None:
        origin_x, origin_y = self._element.children_origin()
        for child, x, y in self.placements():
            canvas.paste(child.render_canvas(), origin_x + x, origin_y + y)


class BlockLayout(Layout):

    def placements(self) -> List[Placement]:
        result: List[Placement] = []
        current_y = 0
        for child in self._element.children:
            result.append((child, 0, current_y))
            current_y += child.height
        return result


class InlineLayout(Layout):

    def placements(self) -> List[Placement]:
        element = self._element
        content_width = element.content_width
        content_height = element.content_height

        result: List[Placement] = []
        row_width = 0
        rows_height = 0
        row_heights: List[int] = []

        for index, child in enumerate(element.children):
            child_width = child.width
            child_height = child.height

            if content_width - row_width >= child_width:
                result.append((child, row_width, rows_height))
                row_width += child_width
                row_heights.append(child_height)
                continue

            rows_height += largest_in_list(row_heights)
            row_heights = [child_height]

            if content_height - rows_height < child_height:
                logger.debug(
                    "Inline layout stopped at child %d of %d: no room for a new row",
                    index + 1,
                    len(element.children),
                )
                break

            result.append((child, 0, rows_height))
            row_width = child_width

        return result


class FlexLayout(Layout):

    def placements(self) -> List[Placement]:
        element = self._element
        children = element.children
        justify = element.justify_content
        free_space = element.content_width - sum(child.width for child in children)

        result: List[Placement] = []
        current_x = 0
        for index, child in enumerate(children):
            gap = self._main_offset(free_space, index, len(children))
            cross = self._cross_offset(element.content_height - child.height)
            result.append((child, current_x + gap, cross))

            current_x += child.width
            if justify in (FlexAlign.SPACE_APART, FlexAlign.SPACE_BETWEEN):
                current_x += gap
        return result

    def _main_offset(self, free_space: int, index: int, count: int) -> int:
        justify = self._element.justify_content
        if justify is FlexAlign.FLEX_END:
            return free_space
        if justify is FlexAlign.CENTER:
            return div_trunc(free_space, 2)
        if justify is FlexAlign.SPACE_APART:
            return div_trunc(free_space, count - 1) if index > 0 else 0
        if justify is FlexAlign.SPACE_BETWEEN:
            return div_trunc(free_space, count + 1)
        return 0

    def _cross_offset(self, free_space: int) -> int:
        align = self._element.align_items
        if align is FlexAlign.FLEX_END:
            return free_space
        if align is FlexAlign.CENTER:
            return div_trunc(free_space, 2)
        # SPACE_APART and SPACE_BETWEEN have no cross-axis meaning.
        return 0


LAYOUTS: Dict[Display, Type[Layout]] = {
    Display.BLOCK: BlockLayout,
    Display.INLINE: InlineLayout,
    Display.FLEX: FlexLayout,
}


def layout_for(element: "Element") -> Layout:
    return LAYOUTS[element.display](element)
