import logging
from abc import ABC, abstractmethod

from ..errors import ConfigurationError
from .helpers import clamp, split_words
from .text import TextElement

logger = logging.getLogger(__name__)


class ListElement(TextElement, ABC):
    """A text element holding one single-row item per ``add_item`` call.

    Items never wrap: words that would overflow the content width are cut
    off, and items beyond the element's height are ignored.
    """

    # Extra columns reserved for the marker when estimating the width.
    width_overhead = 0
    # Columns the marker occupies before the first word is checked.
    marker_width = 0

    @abstractmethod
    def marker(self) -> str:
        """Return the marker for the next item."""

    def add_item(self, item: str) -> "ListElement":
        if not isinstance(item, str):
            raise ConfigurationError("item must be a string.")

        if not self.height_explicit:
            self._content_height += 1

        capacity = clamp(self._content_height, self.min_height, self.max_height)
        if len(self.lines) >= capacity:
            logger.debug("List is full at %d item(s), ignoring %r", capacity, item)
            return self

        words = split_words(item)
        if not self.width_explicit:
            estimate = len(item) + len(words) + self.width_overhead
            self._content_width = max(self._content_width, estimate)

        limit = clamp(self._content_width, self.min_width, self.max_width)
        row = [self.marker()]
        used = self.marker_width
        for word in words:
            if used + len(word) > limit:
                logger.debug("Truncated list item %r to %d column(s)", item, limit)
                break
            row.append(word)
            used += len(word) + 1

        self.lines.append(row)
        return self


class SortedListElement(ListElement):

    width_overhead = 2
    marker_width = 2

    def marker(self) -> str:
        return f"{len(self.lines) + 1}."


class UnsortedListElement(ListElement):

    width_overhead = 1
    marker_width = 1

    def marker(self) -> str:
        return "-"
