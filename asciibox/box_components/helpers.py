from typing import Iterable, List, Optional, Sequence


def clamp(value: int, lower: int, upper: Optional[int]) -> int:
    # The lower bound is applied first, so an inverted pair yields ``upper``.
    value = max(lower, value)
    if upper is not None:
        value = min(value, upper)
    return value


def div_trunc(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero, so negative free space splits symmetrically."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def largest_in_list(values: Iterable[int]) -> int:
    return max(values, default=0)


def extra_space_in_row(row: Sequence[str], content_width: int) -> int:
    used = sum(len(word) for word in row) + len(row) - 1
    return content_width - used


def capitalise(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def split_words(text: str) -> List[str]:
    words = text.split(" ")
    while words and not words[-1]:
        words.pop()
    return words
