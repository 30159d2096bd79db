from .ascii_box import *
from .errors import *
from .logging_config import setup_logging

__version__ = "0.1.0"
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
    "setup_logging",
    "BoxError",
    "ConfigurationError",
    "StateLockedError",
    "UnsupportedChildError",
    "CapacityExceededError",
]
