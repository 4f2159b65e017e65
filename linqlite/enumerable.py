from __future__ import annotations

from .types import *

# --- operation mixins ---
from .operations.core import _CoreOperations
from .operations.set import _SetOperations
from .operations.zip import _ZipOperations
from .operations.terminal import _TerminalOperations
from .operations.stats import _StatsOperations


class Enumerable(
    _CoreOperations[T],
    _SetOperations[T],
    _ZipOperations[T],
    _TerminalOperations[T],
    _StatsOperations[T]
):
    """
    a fluent, linq-inspired wrapper over any python iterable.

    transformation methods return a new Enumerable over a lazy stage and never
    touch the receiver; terminal methods return plain values. an Enumerable is
    itself iterable, so it can go anywhere a sequence is accepted.
    """

    def __init__(self, source: Iterable[T]):
        self._source = self._unwrap(source)

    @staticmethod
    def _unwrap(sequence: Iterable[U]) -> Iterable[U]:
        """strip Enumerable layers down to the raw sequence"""
        while isinstance(sequence, Enumerable):
            sequence = sequence._source
        return sequence

    def _wrap(self, sequence: Iterable[U]) -> 'Enumerable[U]':
        return Enumerable(sequence)

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"Enumerable({type(self._source).__name__})"
