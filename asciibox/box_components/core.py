from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Type, TypeVar, Union

from ..errors import ConfigurationError


class Display(Enum):

    BLOCK = "block"
    INLINE = "inline"
    FLEX = "flex"


class FlexAlign(Enum):

    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_APART = "space-apart"


class TextAlign(Enum):

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class WordCase(Enum):

    NORMAL = "normal"
    TITLE = "title"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NOEDIT = "noedit"


@dataclass(frozen=True)
class Glyphs:

    border: str = "#"
    fill: str = "#"
    blank: str = " "


GLYPHS = Glyphs()


@dataclass(frozen=True)
class Border:

    top: bool = False
    right: bool = False
    bottom: bool = False
    left: bool = False

    @property
    def horizontal(self) -> int:
        return int(self.left) + int(self.right)

    @property
    def vertical(self) -> int:
        return int(self.top) + int(self.bottom)


@dataclass(frozen=True)
class Padding:

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


@dataclass(frozen=True)
class Margin:

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def expand_sides(values: Sequence[T], name: str) -> Tuple[T, T, T, T]:
    """Expand CSS-style shorthand into ``(top, right, bottom, left)``.

    One value applies to every side, two values are ``(top/bottom,
    right/left)`` and four values are given clockwise from the top.
    """
    if len(values) == 1:
        value = values[0]
        return value, value, value, value
    if len(values) == 2:
        vertical, horizontal = values
        return vertical, horizontal, vertical, horizontal
    if len(values) == 4:
        top, right, bottom, left = values
        return top, right, bottom, left
    raise ConfigurationError(f"{name} takes 1, 2 or 4 values, got {len(values)}.")


def coerce_enum(enum_cls: Type[E], value: Union[E, str], name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.lower().strip().replace("_", "-")
        try:
            return enum_cls(key)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown {name}: {value}") from exc
    raise ConfigurationError(f"{name} must be a {enum_cls.__name__} or a string.")
