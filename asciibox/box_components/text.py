import logging
from collections import deque
from typing import Deque, Iterable, List, Optional, Union

from ..errors import ConfigurationError, StateLockedError, UnsupportedChildError
from .canvas import Canvas
from .core import TextAlign, WordCase, coerce_enum
from .element import Element
from .helpers import capitalise, div_trunc, extra_space_in_row, split_words

logger = logging.getLogger(__name__)

SENTENCE_ENDINGS = (".", "!", "?")


def apply_word_case(words: Iterable[str], word_case: WordCase) -> List[str]:
    result: List[str] = []
    for word in words:
        if word_case is WordCase.NORMAL:
            if not result or result[-1].endswith(SENTENCE_ENDINGS):
                word = capitalise(word)
        elif word_case is WordCase.TITLE:
            word = capitalise(word)
        elif word_case is WordCase.UPPERCASE:
            word = word.upper()
        elif word_case is WordCase.LOWERCASE:
            word = word.lower()
        result.append(word)
    return result


class TextElement(Element):
    """A leaf element that flows words into rows.

    Text is split on single spaces, case-transformed and greedily wrapped to
    the element's inner width when it is set. Words that do not fit in the
    remaining rows are dropped. A text element never accepts children.
    """

    def __init__(self, height: Optional[int] = None, width: Optional[int] = None) -> None:
        super().__init__(height, width)
        self.lines: List[List[str]] = []
        self.text_align = TextAlign.LEFT
        self.word_case = WordCase.NOEDIT

    def intrinsic_height(self) -> int:
        return self._content_height

    def intrinsic_width(self) -> int:
        return self._content_width

    def set_text_align(self, text_align: Union[TextAlign, str]) -> "TextElement":
        self.text_align = coerce_enum(TextAlign, text_align, "text_align")
        return self

    def set_word_case(self, word_case: Union[WordCase, str]) -> "TextElement":
        value = coerce_enum(WordCase, word_case, "word_case")
        if self.lines:
            raise StateLockedError("word case cannot be set after setting text")
        self.word_case = value
        return self

    def set_text(self, text: str) -> "TextElement":
        if not isinstance(text, str):
            raise ConfigurationError("text must be a string.")
        if not text.strip():
            return self

        words = apply_word_case(split_words(text), self.word_case)
        self._infer_text_size(len(text))
        self.lines.extend(self._wrap(words))
        return self

    def _infer_text_size(self, length: int) -> None:
        if not self.width_explicit:
            if length < self.min_width:
                width = self.min_width
            elif self.max_width is not None and length > self.max_width:
                width = self.max_width
            else:
                width = (
                    length
                    + self.padding.horizontal
                    + self.margin.horizontal
                    + self.border.horizontal
                )
            self.set_width(width)

        if not self.height_explicit:
            total = self.height
            if total < self.min_height:
                height = self.min_height
            elif self.max_height is not None and total > self.max_height:
                height = self.max_height
            else:
                # Rough estimate only; wrapping may need more rows.
                height = length // max(self._content_width, 1)
            self.set_height(height)

    def _wrap(self, words: List[str]) -> List[List[str]]:
        width = self.inner_width
        rows_left = self.inner_height - len(self.lines)
        pending: Deque[str] = deque(words)
        rows: List[List[str]] = []

        while pending and len(rows) < rows_left:
            row: List[str] = []
            used = 0
            while pending and used + len(pending[0]) <= width:
                word = pending.popleft()
                row.append(word)
                used += len(word) + 1
            rows.append(row)

        if pending:
            logger.debug("Dropped %d word(s) that did not fit in %d row(s)", len(pending), len(rows))
        return rows

    def insert_child(self, child: Element) -> "TextElement":
        raise UnsupportedChildError("This element cannot have sub-elements")

    def insert_children(self, children: Iterable[Element]) -> "TextElement":
        raise UnsupportedChildError("This element cannot have sub-elements")

    def _row_offset(self, row: List[str]) -> int:
        if self.text_align is TextAlign.RIGHT:
            return extra_space_in_row(row, self.inner_width)
        if self.text_align is TextAlign.CENTER:
            return div_trunc(extra_space_in_row(row, self.inner_width), 2)
        return 0

    def _paint_content(self, canvas: Canvas) -> None:
        origin_x, origin_y = self.content_origin()
        for index, row in enumerate(self.lines):
            x = origin_x + self._row_offset(row)
            for word in row:
                canvas.write(x, origin_y + index, word)
                x += len(word) + 1
