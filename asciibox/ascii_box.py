from .box_components import (
    GLYPHS,
    Border,
    Canvas,
    Display,
    Element,
    FlexAlign,
    Margin,
    Padding,
    SortedListElement,
    TextAlign,
    TextElement,
    UnsortedListElement,
    WordCase,
)
from .screen import Screen

__all__ = [
    "Element",
    "TextElement",
    "SortedListElement",
    "UnsortedListElement",
    "Display",
    "FlexAlign",
    "TextAlign",
    "WordCase",
    "Border",
    "Padding",
    "Margin",
    "GLYPHS",
    "Canvas",
    "Screen",
]
