from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def zip(first: Iterable[T], second: Iterable[U], result_selector: Callable[[T, U], V]) -> LazySequence[V]:
    """
    pair elements positionally. stops as soon as either side runs out, so the
    result is as long as the shorter sequence.
    """
    def zip_iter():
        first_iterator = iter(first)
        second_iterator = iter(second)
        while True:
            try:
                left = next(first_iterator)
                right = next(second_iterator)
            except StopIteration:
                return
            yield result_selector(left, right)
    return LazySequence(zip_iter, "zip")


class _ZipOperations(Generic[T]):
    def zip(self: 'Enumerable[T]', other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Enumerable[V]':
        """zip two sequences with custom result selector"""
        return self._wrap(zip(self._source, self._unwrap(other), result_selector))
