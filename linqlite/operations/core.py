from __future__ import annotations
import typing
from itertools import chain, islice, takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


# --- projection and filtering ---

def select(source: Iterable[T], selector: Selector[T, U]) -> LazySequence[U]:
    """project each element to a new form"""
    def select_iter():
        for item in source:
            yield selector(item)
    return LazySequence(select_iter, "select")


def select_with_index(source: Iterable[T], selector: IndexedSelector[T, U]) -> LazySequence[U]:
    """project each element to a new form, passing its zero-based index as well"""
    def select_with_index_iter():
        for index, item in enumerate(source):
            yield selector(item, index)
    return LazySequence(select_with_index_iter, "select_with_index")


def select_many(source: Iterable[T], selector: Selector[T, Iterable[U]]) -> LazySequence[U]:
    """project every element to a sequence and flatten, outer order first"""
    def select_many_iter():
        for item in source:
            yield from selector(item)
    return LazySequence(select_many_iter, "select_many")


def where(source: Iterable[T], predicate: Predicate[T]) -> LazySequence[T]:
    """filter elements based on a predicate"""
    def where_iter():
        for item in source:
            if predicate(item):
                yield item
    return LazySequence(where_iter, "where")


def where_with_index(source: Iterable[T], predicate: IndexedPredicate[T]) -> LazySequence[T]:
    """filter elements with a predicate that also receives the element's index"""
    def where_with_index_iter():
        for index, item in enumerate(source):
            if predicate(item, index):
                yield item
    return LazySequence(where_with_index_iter, "where_with_index")


# --- slicing ---

def take(source: Iterable[T], count: int) -> LazySequence[T]:
    """
    yield at most 'count' elements.
    the upstream is never pulled past the last yielded element, and take(src, 0)
    does not pull at all.
    """
    # islice stops without pulling the element after the last one it yields
    return LazySequence(lambda: islice(source, max(count, 0)), "take")


def skip(source: Iterable[T], count: int) -> LazySequence[T]:
    """drop the first 'count' elements"""
    return LazySequence(lambda: islice(source, max(count, 0), None), "skip")


def take_while(source: Iterable[T], predicate: Predicate[T]) -> LazySequence[T]:
    """take elements while predicate is true, stop for good at the first failure"""
    # itertools.takewhile is the most efficient implementation for this
    return LazySequence(lambda: takewhile(predicate, source), "take_while")


def take_while_with_index(source: Iterable[T], predicate: IndexedPredicate[T]) -> LazySequence[T]:
    def take_while_with_index_iter():
        for index, item in enumerate(source):
            if not predicate(item, index):
                return
            yield item
    return LazySequence(take_while_with_index_iter, "take_while_with_index")


def skip_while(source: Iterable[T], predicate: Predicate[T]) -> LazySequence[T]:
    """skip elements while predicate is true, then yield the rest unchecked"""
    # dropwhile never re-checks the predicate after the first failure
    return LazySequence(lambda: dropwhile(predicate, source), "skip_while")


def skip_while_with_index(source: Iterable[T], predicate: IndexedPredicate[T]) -> LazySequence[T]:
    def skip_while_with_index_iter():
        iterator = iter(source)
        # the predicate only runs inside the dropped prefix
        for index, item in enumerate(iterator):
            if not predicate(item, index):
                yield item
                break
        yield from iterator
    return LazySequence(skip_while_with_index_iter, "skip_while_with_index")


# --- reshaping ---

def reverse(source: Iterable[T]) -> LazySequence[T]:
    """
    inverts the order of the elements in a sequence.
    the whole source is buffered, once per traversal, when iteration starts.
    """
    def reverse_iter():
        buffer = list(source)
        for index in range(len(buffer) - 1, -1, -1):
            yield buffer[index]
    return LazySequence(reverse_iter, "reverse")


def concat(first: Iterable[T], second: Iterable[T]) -> LazySequence[T]:
    """all of 'first', then all of 'second'"""
    # itertools.chain only calls iter(second) once first is exhausted
    return LazySequence(lambda: chain(first, second), "concat")


def default_if_empty(source: Iterable[T], default_value: T) -> LazySequence[T]:
    """returns the elements of a sequence, or the default value in a singleton sequence if it is empty"""
    def default_if_empty_iter():
        is_empty = True
        for item in source:
            is_empty = False
            yield item
        if is_empty:
            yield default_value
    return LazySequence(default_if_empty_iter, "default_if_empty")


def undefined_if_empty(source: Iterable[T]) -> LazySequence[T]:
    """like default_if_empty, with UNDEFINED as the default"""
    return default_if_empty(source, UNDEFINED)


def assert_type(source: Iterable[Any], type_filter: Type[U] = None) -> LazySequence[U]:
    """
    narrows the static element type. nothing is checked at runtime: the
    elements are re-yielded as they are.
    """
    def assert_type_iter():
        yield from source
    return LazySequence(assert_type_iter, "assert_type")


class _CoreOperations(Generic[T]):
    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        return self._wrap(select(self._source, selector))

    def select_with_index(self: 'Enumerable[T]', selector: IndexedSelector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        return self._wrap(select_with_index(self._source, selector))

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        return self._wrap(select_many(self._source, selector))

    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        return self._wrap(where(self._source, predicate))

    def where_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        return self._wrap(where_with_index(self._source, predicate))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        return self._wrap(take(self._source, count))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        return self._wrap(skip(self._source, count))

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        return self._wrap(take_while(self._source, predicate))

    def take_while_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        return self._wrap(take_while_with_index(self._source, predicate))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        return self._wrap(skip_while(self._source, predicate))

    def skip_while_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        return self._wrap(skip_while_with_index(self._source, predicate))

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        return self._wrap(reverse(self._source))

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order"""
        return self._wrap(concat(self._source, self._unwrap(other)))

    def default_if_empty(self: 'Enumerable[T]', default_value: T) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        return self._wrap(default_if_empty(self._source, default_value))

    def undefined_if_empty(self: 'Enumerable[T]') -> 'Enumerable[T]':
        return self._wrap(undefined_if_empty(self._source))

    def assert_type(self: 'Enumerable[Any]', type_filter: Type[U] = None) -> 'Enumerable[U]':
        """treat the elements as 'type_filter' for type checkers; a runtime no-op"""
        return self._wrap(assert_type(self._source, type_filter))
