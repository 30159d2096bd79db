from typing import Iterable, List, Optional, Tuple, Union

from ..errors import ConfigurationError, StateLockedError
from .canvas import Canvas
from .core import (
    GLYPHS,
    Border,
    Display,
    FlexAlign,
    Margin,
    Padding,
    coerce_enum,
    expand_sides,
)
from .helpers import clamp, largest_in_list
from .layout import layout_for


def _check_size(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer.")
    return value


def _check_spacing(values: Tuple[object, ...], name: str) -> Tuple[int, int, int, int]:
    sides = expand_sides(values, name)
    for value in sides:
        _check_size(value, name)
        if value < 0:
            raise ConfigurationError(f"{name} must not be negative.")
    return sides


class Element:
    """A box that lays out child elements on a character grid.

    The total size of an element is its content size plus padding, margin and
    border on each axis, clamped between the min and max bounds. A content
    dimension that was never set explicitly is inferred from the children.

    Padding, margin and display are locked once a child has been inserted.
    Every ``set_*`` method returns the element so calls can be chained.
    """

    def __init__(self, height: Optional[int] = None, width: Optional[int] = None) -> None:
        if height is not None and width is None:
            width = height

        self.border = Border()
        self.padding = Padding()
        self.margin = Margin()
        self.display = Display.BLOCK
        self.justify_content = FlexAlign.FLEX_START
        self.align_items = FlexAlign.FLEX_START
        self.fill = False

        self._content_height = 0 if height is None else _check_size(height, "height")
        self._content_width = 0 if width is None else _check_size(width, "width")
        self.height_explicit = height is not None
        self.width_explicit = width is not None

        self.min_height = 0
        self.min_width = 0
        self.max_height: Optional[int] = None
        self.max_width: Optional[int] = None

        self.children: List["Element"] = []
        self.canvas = Canvas()

    # Box model

    @property
    def content_height(self) -> int:
        if self.height_explicit:
            return self._content_height
        return self.intrinsic_height()

    @property
    def content_width(self) -> int:
        if self.width_explicit:
            return self._content_width
        return self.intrinsic_width()

    @property
    def height(self) -> int:
        total = (
            self.content_height
            + self.padding.vertical
            + self.margin.vertical
            + self.border.vertical
        )
        return clamp(total, self.min_height, self.max_height)

    @property
    def width(self) -> int:
        total = (
            self.content_width
            + self.padding.horizontal
            + self.margin.horizontal
            + self.border.horizontal
        )
        return clamp(total, self.min_width, self.max_width)

    @property
    def inner_height(self) -> int:
        extra = self.padding.vertical + self.margin.vertical + self.border.vertical
        return max(self.height - extra, 0)

    @property
    def inner_width(self) -> int:
        extra = self.padding.horizontal + self.margin.horizontal + self.border.horizontal
        return max(self.width - extra, 0)

    def children_origin(self) -> Tuple[int, int]:
        # Margin is not part of the children's offset.
        x = int(self.border.left) + self.padding.left
        y = int(self.border.top) + self.padding.top
        return x, y

    def content_origin(self) -> Tuple[int, int]:
        x, y = self.children_origin()
        return self.margin.left + x, self.margin.top + y

    # Intrinsic sizing

    def intrinsic_height(self) -> int:
        if self.display is Display.INLINE:
            height = self._inline_rows_height()
        elif self.display is Display.FLEX:
            height = largest_in_list(child.height for child in self.children)
        else:
            height = sum(child.height for child in self.children)
        return clamp(height, self.min_height, self.max_height)

    def intrinsic_width(self) -> int:
        if self.display is Display.BLOCK:
            width = largest_in_list(child.width for child in self.children)
        else:
            width = sum(child.width for child in self.children)
        return clamp(width, self.min_width, self.max_width)

    def _inline_rows_height(self) -> int:
        if self.max_width is None:
            return largest_in_list(child.height for child in self.children)

        height = 0
        row_width = 0
        row_heights: List[int] = []
        for child in self.children:
            child_width = child.width
            if row_heights and row_width + child_width > self.max_width:
                height += largest_in_list(row_heights)
                row_width = 0
                row_heights = []
            row_width += child_width
            row_heights.append(child.height)
        return height + largest_in_list(row_heights)

    # Setters

    def set_height(self, height: int) -> "Element":
        self._content_height = _check_size(height, "height")
        self.height_explicit = True
        return self

    def set_width(self, width: int) -> "Element":
        self._content_width = _check_size(width, "width")
        self.width_explicit = True
        return self

    def set_min_height(self, height: int) -> "Element":
        self.min_height = _check_size(height, "min_height")
        return self

    def set_max_height(self, height: Optional[int]) -> "Element":
        self.max_height = None if height is None else _check_size(height, "max_height")
        return self

    def set_min_width(self, width: int) -> "Element":
        self.min_width = _check_size(width, "min_width")
        return self

    def set_max_width(self, width: Optional[int]) -> "Element":
        self.max_width = None if width is None else _check_size(width, "max_width")
        return self

    def set_justify_content(self, justify_content: Union[FlexAlign, str]) -> "Element":
        self.justify_content = coerce_enum(FlexAlign, justify_content, "justify_content")
        return self

    def set_align_items(self, align_items: Union[FlexAlign, str]) -> "Element":
        self.align_items = coerce_enum(FlexAlign, align_items, "align_items")
        return self

    def set_fill(self, fill: bool = True) -> "Element":
        if not isinstance(fill, bool):
            raise ConfigurationError("fill must be a boolean value.")
        self.fill = fill
        return self

    def set_border(self, *sides: bool) -> "Element":
        if not sides:
            sides = (True,)
        for side in sides:
            if not isinstance(side, bool):
                raise ConfigurationError("border sides must be boolean values.")
        self.border = Border(*expand_sides(sides, "border"))
        return self

    def set_padding(self, *values: int) -> "Element":
        sides = _check_spacing(values, "padding")
        self._ensure_unlocked("padding")
        self.padding = Padding(*sides)
        return self

    def set_margin(self, *values: int) -> "Element":
        sides = _check_spacing(values, "margin")
        self._ensure_unlocked("margin")
        self.margin = Margin(*sides)
        return self

    def set_display(self, display: Union[Display, str]) -> "Element":
        value = coerce_enum(Display, display, "display")
        self._ensure_unlocked("display")
        self.display = value
        return self

    def _ensure_unlocked(self, name: str) -> None:
        if self.children:
            raise StateLockedError(f"{name} cannot be set after inserting a child")

    # Children

    def insert_child(self, child: "Element") -> "Element":
        if not isinstance(child, Element):
            raise ConfigurationError("child must be an Element instance.")
        self.children.append(child)
        return self

    def insert_children(self, children: Iterable["Element"]) -> "Element":
        children = list(children)
        for child in children:
            if not isinstance(child, Element):
                raise ConfigurationError("children must be Element instances.")
        self.children.extend(children)
        return self

    # Painting

    def render_canvas(self) -> Canvas:
        background = GLYPHS.fill if self.fill else GLYPHS.blank
        self.canvas = Canvas(width=self.width, height=self.height, background=background)
        self._draw_border(self.canvas)
        self._paint_content(self.canvas)
        return self.canvas

    def render(self) -> List[List[str]]:
        return self.render_canvas().rows()

    def _draw_border(self, canvas: Canvas) -> None:
        margin = self.margin
        top = margin.top
        bottom = canvas.height - margin.bottom
        left = margin.left
        right = canvas.width - margin.right
        char = GLYPHS.border

        if self.border.top:
            canvas.hline(top, left, right, char)
        if self.border.right:
            canvas.vline(right - 1, top, bottom, char)
        if self.border.bottom:
            canvas.hline(bottom - 1, left, right, char)
        if self.border.left:
            canvas.vline(left, top, bottom, char)

    def _paint_content(self, canvas: Canvas) -> None:
        layout_for(self).apply(canvas)
