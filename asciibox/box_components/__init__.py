from .core import Border, Display, FlexAlign, Glyphs, GLYPHS, Margin, Padding, TextAlign, WordCase
from .canvas import Canvas
from .element import Element
from .layout import BlockLayout, FlexLayout, InlineLayout, Layout, layout_for
from .text import TextElement
from .lists import ListElement, SortedListElement, UnsortedListElement

__all__ = [
    "Border",
    "Padding",
    "Margin",
    "Display",
    "FlexAlign",
    "TextAlign",
    "WordCase",
    "Glyphs",
    "GLYPHS",
    "Canvas",
    "Element",
    "Layout",
    "BlockLayout",
    "InlineLayout",
    "FlexLayout",
    "layout_for",
    "TextElement",
    "ListElement",
    "SortedListElement",
    "UnsortedListElement",
]
