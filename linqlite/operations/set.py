from __future__ import annotations
import typing
from ..types import *
from ..defaults import default_comparer, default_hash

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

# two families of set operations:
#   comparer-based: a per-traversal list scanned linearly, o(n^2) worst case, exact.
#   hash-based: a per-traversal set of hash keys, o(n), and elements whose hashes
#     collide are treated as the same element (only the first survives).


def _contains_by(items: List[T], candidate: T, comparer: Comparer[T]) -> bool:
    for existing in items:
        if comparer(existing, candidate):
            return True
    return False


# --- distinct ---

def distinct(source: Iterable[T], comparer: Comparer[T] = default_comparer) -> LazySequence[T]:
    """return distinct elements. preserves order of first appearance."""
    def distinct_iter():
        seen = []
        for item in source:
            if not _contains_by(seen, item, comparer):
                seen.append(item)
                yield item
    return LazySequence(distinct_iter, "distinct")


def distinct_hash(source: Iterable[T], hash_: Hasher[T] = default_hash) -> LazySequence[T]:
    """hash-keyed distinct. colliding hashes coalesce."""
    def distinct_hash_iter():
        seen = set()
        for item in source:
            key = hash_(item)
            if key not in seen:
                seen.add(key)
                yield item
    return LazySequence(distinct_hash_iter, "distinct_hash")


# --- difference ---

def except_(first: Iterable[T], second: Iterable[T],
            comparer: Comparer[T] = default_comparer) -> LazySequence[T]:
    """return elements from the first sequence not in the second (set difference)."""
    def except_iter():
        excluded = list(second)
        for item in first:
            if not _contains_by(excluded, item, comparer):
                yield item
    return LazySequence(except_iter, "except")


def except_hash(first: Iterable[T], second: Iterable[T],
                hash_: Hasher[T] = default_hash) -> LazySequence[T]:
    def except_hash_iter():
        excluded = {hash_(item) for item in second}
        for item in first:
            if hash_(item) not in excluded:
                yield item
    return LazySequence(except_hash_iter, "except_hash")


# --- intersection ---

def intersect(first: Iterable[T], second: Iterable[T],
              comparer: Comparer[T] = default_comparer) -> LazySequence[T]:
    """return the order-preserving intersection of two sequences."""
    def intersect_iter():
        included = list(second)
        for item in first:
            if _contains_by(included, item, comparer):
                yield item
    return LazySequence(intersect_iter, "intersect")


def intersect_hash(first: Iterable[T], second: Iterable[T],
                   hash_: Hasher[T] = default_hash) -> LazySequence[T]:
    def intersect_hash_iter():
        included = {hash_(item) for item in second}
        for item in first:
            if hash_(item) in included:
                yield item
    return LazySequence(intersect_hash_iter, "intersect_hash")


# --- union ---

def union(first: Iterable[T], second: Iterable[T],
          comparer: Comparer[T] = default_comparer) -> LazySequence[T]:
    """
    return the order-preserving union of two sequences.
    'first' is yielded before 'second', and 'second' is not pulled until
    'first' is exhausted.
    """
    def union_iter():
        seen = []
        for sequence in (first, second):
            for item in sequence:
                if not _contains_by(seen, item, comparer):
                    seen.append(item)
                    yield item
    return LazySequence(union_iter, "union")


def union_hash(first: Iterable[T], second: Iterable[T],
               hash_: Hasher[T] = default_hash) -> LazySequence[T]:
    def union_hash_iter():
        seen = set()
        for sequence in (first, second):
            for item in sequence:
                key = hash_(item)
                if key not in seen:
                    seen.add(key)
                    yield item
    return LazySequence(union_hash_iter, "union_hash")


class _SetOperations(Generic[T]):
    def distinct(self: 'Enumerable[T]', comparer: Comparer[T] = default_comparer) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        return self._wrap(distinct(self._source, comparer))

    def distinct_hash(self: 'Enumerable[T]', hash_: Hasher[T] = default_hash) -> 'Enumerable[T]':
        return self._wrap(distinct_hash(self._source, hash_))

    def except_(self: 'Enumerable[T]', other: Iterable[T],
                comparer: Comparer[T] = default_comparer) -> 'Enumerable[T]':
        """return elements from the first sequence not in the second (set difference)."""
        return self._wrap(except_(self._source, self._unwrap(other), comparer))

    def except_hash(self: 'Enumerable[T]', other: Iterable[T],
                    hash_: Hasher[T] = default_hash) -> 'Enumerable[T]':
        return self._wrap(except_hash(self._source, self._unwrap(other), hash_))

    def intersect(self: 'Enumerable[T]', other: Iterable[T],
                  comparer: Comparer[T] = default_comparer) -> 'Enumerable[T]':
        """return the order-preserving intersection of two sequences."""
        return self._wrap(intersect(self._source, self._unwrap(other), comparer))

    def intersect_hash(self: 'Enumerable[T]', other: Iterable[T],
                       hash_: Hasher[T] = default_hash) -> 'Enumerable[T]':
        return self._wrap(intersect_hash(self._source, self._unwrap(other), hash_))

    def union(self: 'Enumerable[T]', other: Iterable[T],
              comparer: Comparer[T] = default_comparer) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        return self._wrap(union(self._source, self._unwrap(other), comparer))

    def union_hash(self: 'Enumerable[T]', other: Iterable[T],
                   hash_: Hasher[T] = default_hash) -> 'Enumerable[T]':
        return self._wrap(union_hash(self._source, self._unwrap(other), hash_))
