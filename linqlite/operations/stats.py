from __future__ import annotations
import typing
import math
from ..types import *
from ..defaults import default_selector, MIN_SENTINEL, MAX_SENTINEL
from ..errors import EmptySequenceError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

# max() and min() start from MIN_SENTINEL / MAX_SENTINEL and fold over the
# projected values, so an empty source returns the seed instead of raising.
# pass strict=True to get EmptySequenceError instead. a nan value wins and sticks.


def _is_nan(value) -> bool:
    return isinstance(value, float) and math.isnan(value)


def sum(source: Iterable[T], selector: NumericSelector[T] = default_selector) -> Union[int, float]:
    """calc sum, in source order. 0 for an empty sequence."""
    total = 0
    for item in source:
        total += selector(item)
    return total


def average(source: Iterable[T], selector: NumericSelector[T] = default_selector) -> float:
    """calc average. an empty sequence gives nan."""
    total, n = 0, 0
    for item in source:
        total += selector(item)
        n += 1
    if n == 0:
        return math.nan
    return total / n


def max(source: Iterable[T], selector: NumericSelector[T] = default_selector,
        strict: bool = False) -> Union[int, float]:
    """find maximum projected value. empty: MIN_SENTINEL, or EmptySequenceError when strict."""
    result = MIN_SENTINEL
    seen_any = False
    for item in source:
        value = selector(item)
        if value > result or _is_nan(value):
            result = value
        seen_any = True
    if strict and not seen_any:
        raise EmptySequenceError("cannot find maximum of empty sequence")
    return result


def min(source: Iterable[T], selector: NumericSelector[T] = default_selector,
        strict: bool = False) -> Union[int, float]:
    """find minimum projected value. empty: MAX_SENTINEL, or EmptySequenceError when strict."""
    result = MAX_SENTINEL
    seen_any = False
    for item in source:
        value = selector(item)
        if value < result or _is_nan(value):
            result = value
        seen_any = True
    if strict and not seen_any:
        raise EmptySequenceError("cannot find minimum of empty sequence")
    return result


def min_max(source: Iterable[T], selector: NumericSelector[T] = default_selector,
            strict: bool = False) -> MinMax:
    """both extremes in a single pass"""
    low, high = MAX_SENTINEL, MIN_SENTINEL
    seen_any = False
    for item in source:
        value = selector(item)
        if value < low or _is_nan(value):
            low = value
        if value > high or _is_nan(value):
            high = value
        seen_any = True
    if strict and not seen_any:
        raise EmptySequenceError("cannot find minimum and maximum of empty sequence")
    return MinMax(low, high)


class _StatsOperations(Generic[T]):
    def sum(self: 'Enumerable[T]', selector: NumericSelector[T] = default_selector) -> Union[int, float]:
        """calc sum"""
        return sum(self._source, selector)

    def average(self: 'Enumerable[T]', selector: NumericSelector[T] = default_selector) -> float:
        """calc average"""
        return average(self._source, selector)

    def max(self: 'Enumerable[T]', selector: NumericSelector[T] = default_selector,
            strict: bool = False) -> Union[int, float]:
        """find maximum"""
        return max(self._source, selector, strict)

    def min(self: 'Enumerable[T]', selector: NumericSelector[T] = default_selector,
            strict: bool = False) -> Union[int, float]:
        """find minimum"""
        return min(self._source, selector, strict)

    def min_max(self: 'Enumerable[T]', selector: NumericSelector[T] = default_selector,
                strict: bool = False) -> MinMax:
        return min_max(self._source, selector, strict)
