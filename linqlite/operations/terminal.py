from __future__ import annotations
import typing
from collections.abc import Sequence
import numpy as np
import pandas as pd
from ..types import *
from ..defaults import default_predicate, default_comparer
from ..errors import EmptySequenceError, MultipleMatchError, IndexOutOfRangeError

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

# marks "no element found" internally, so that UNDEFINED stays a legal element
_MISSING = object()


# --- folding ---

def aggregate(source: Iterable[T], accumulator: Accumulator[T, T]) -> T:
    """fold left to right, seeded with the first element"""
    iterator = iter(source)
    result = next(iterator, _MISSING)
    if result is _MISSING:
        raise EmptySequenceError("cannot aggregate empty sequence without seed")
    for item in iterator:
        result = accumulator(result, item)
    return result


def aggregate_with_seed(source: Iterable[T], seed: U, accumulator: Accumulator[U, T]) -> U:
    """fold left to right from an explicit seed. an empty source returns the seed."""
    result = seed
    for item in source:
        result = accumulator(result, item)
    return result


# --- quantifiers ---

def all(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """check if all elements satisfy condition. true for an empty sequence."""
    for item in source:
        if not predicate(item):
            return False
    return True


def any(source: Iterable[T], predicate: Predicate[T] = default_predicate) -> bool:
    """check if any element satisfies condition. without a predicate: is the sequence non-empty."""
    for item in source:
        if predicate(item):
            return True
    return False


def contains(source: Iterable[T], value: T, comparer: Comparer[T] = default_comparer) -> bool:
    for item in source:
        if comparer(item, value):
            return True
    return False


def count(source: Iterable[T], predicate: Predicate[T] = default_predicate) -> int:
    """count elements"""
    total = 0
    for item in source:
        if predicate(item):
            total += 1
    return total


# --- element extraction ---

def _find_first(source, predicate):
    for item in source:
        if predicate(item):
            return item
    return _MISSING


def _find_last(source, predicate):
    if isinstance(source, Sequence):
        for index in range(len(source) - 1, -1, -1):
            if predicate(source[index]):
                return source[index]
        return _MISSING
    found = _MISSING
    for item in source:
        if predicate(item):
            found = item
    return found


def _find_single(source, predicate):
    found = _MISSING
    for item in source:
        if predicate(item):
            if found is not _MISSING:
                raise MultipleMatchError()
            found = item
    return found


def first(source: Iterable[T], predicate: Predicate[T] = default_predicate) -> T:
    """get first element"""
    found = _find_first(source, predicate)
    if found is _MISSING:
        raise EmptySequenceError("no element satisfies the condition")
    return found


def first_or_undefined(source: Iterable[T], predicate: Predicate[T] = default_predicate) -> Union[T, Any]:
    """get first element or UNDEFINED"""
    found = _find_first(source, predicate)
    return UNDEFINED if found is _MISSING else found


def last(source: Iterable[T], predicate: Predicate[T] = default_predicate) -> T:
    """get last element"""
    found = _find_last(source, predicate)
    if found is _MISSING:
        raise EmptySequenceError("no element satisfies the condition")
    return found


def last_or_undefined(source: Iterable[T], predicate: Predicate[T] = default_predicate) -> Union[T, Any]:
    found = _find_last(source, predicate)
    return UNDEFINED if found is _MISSING else found


def single(source: Iterable[T], predicate: Predicate[T] = default_predicate) -> T:
    """
    get the only matching element.
    raises EmptySequenceError on no match and MultipleMatchError as soon as a
    second match turns up.
    """
    found = _find_single(source, predicate)
    if found is _MISSING:
        raise EmptySequenceError("sequence contains no matching elements")
    return found


def single_or_undefined(source: Iterable[T], predicate: Predicate[T] = default_predicate) -> Union[T, Any]:
    """like single(), but no match gives UNDEFINED. more than one match still raises."""
    found = _find_single(source, predicate)
    return UNDEFINED if found is _MISSING else found


def _element_at(source, index):
    if index < 0:
        raise IndexOutOfRangeError(index)
    if isinstance(source, Sequence):
        if len(source) == 0:
            raise EmptySequenceError()
        if index >= len(source):
            raise IndexOutOfRangeError(index)
        return source[index]
    position = -1
    for position, item in enumerate(source):
        if position == index:
            return item
    if position < 0:
        raise EmptySequenceError()
    raise IndexOutOfRangeError(index)


def element_at(source: Iterable[T], index: int) -> T:
    """
    get the element at a zero-based position.
    a negative index or one at or past the end raises IndexOutOfRangeError;
    an empty source raises EmptySequenceError.
    """
    return _element_at(source, index)


def element_at_or_undefined(source: Iterable[T], index: int) -> Union[T, Any]:
    try:
        return _element_at(source, index)
    except (IndexOutOfRangeError, EmptySequenceError):
        return UNDEFINED


# --- comparison ---

def sequence_equal(first: Iterable[T], second: Iterable[T], comparer: Comparer[T] = default_comparer) -> bool:
    """true only when both sequences end together and every pair compares equal"""
    first_iterator = iter(first)
    second_iterator = iter(second)
    while True:
        left = next(first_iterator, _MISSING)
        right = next(second_iterator, _MISSING)
        if left is _MISSING or right is _MISSING:
            return left is right
        if not comparer(left, right):
            return False


# --- materialization ---

def to_list(source: Iterable[T]) -> List[T]:
    """convert to list"""
    return list(source)


to_array = to_list


def to_set(source: Iterable[T]) -> Set[T]:
    """convert to set"""
    return set(source)


def to_dict(source: Iterable[T], key_selector: KeySelector[T, K],
            value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
    """convert to dictionary. later keys overwrite earlier ones."""
    val_sel = value_selector if value_selector else lambda item: item
    return {key_selector(item): val_sel(item) for item in source}


def to_numpy(source: Iterable[T]) -> np.ndarray:
    """convert to numpy array"""
    return np.array(list(source))


def to_series(source: Iterable[T]) -> pd.Series:
    """convert to pandas series"""
    return pd.Series(list(source))


class _TerminalOperations(Generic[T]):
    def aggregate(self: 'Enumerable[T]', accumulator: Accumulator[T, T]) -> T:
        """applies accumulator function over sequence"""
        return aggregate(self._source, accumulator)

    def aggregate_with_seed(self: 'Enumerable[T]', seed: U, accumulator: Accumulator[U, T]) -> U:
        return aggregate_with_seed(self._source, seed, accumulator)

    def all(self: 'Enumerable[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(self._source, predicate)

    def any(self: 'Enumerable[T]', predicate: Predicate[T] = default_predicate) -> bool:
        """check if any element satisfies condition"""
        return any(self._source, predicate)

    def contains(self: 'Enumerable[T]', value: T, comparer: Comparer[T] = default_comparer) -> bool:
        return contains(self._source, value, comparer)

    def count(self: 'Enumerable[T]', predicate: Predicate[T] = default_predicate) -> int:
        """count elements"""
        return count(self._source, predicate)

    def first(self: 'Enumerable[T]', predicate: Predicate[T] = default_predicate) -> T:
        """get first element"""
        return first(self._source, predicate)

    def first_or_undefined(self: 'Enumerable[T]', predicate: Predicate[T] = default_predicate) -> Union[T, Any]:
        return first_or_undefined(self._source, predicate)

    def last(self: 'Enumerable[T]', predicate: Predicate[T] = default_predicate) -> T:
        return last(self._source, predicate)

    def last_or_undefined(self: 'Enumerable[T]', predicate: Predicate[T] = default_predicate) -> Union[T, Any]:
        return last_or_undefined(self._source, predicate)

    def single(self: 'Enumerable[T]', predicate: Predicate[T] = default_predicate) -> T:
        """get single element, erroring if not exactly one"""
        return single(self._source, predicate)

    def single_or_undefined(self: 'Enumerable[T]', predicate: Predicate[T] = default_predicate) -> Union[T, Any]:
        return single_or_undefined(self._source, predicate)

    def element_at(self: 'Enumerable[T]', index: int) -> T:
        return element_at(self._source, index)

    def element_at_or_undefined(self: 'Enumerable[T]', index: int) -> Union[T, Any]:
        return element_at_or_undefined(self._source, index)

    def sequence_equal(self: 'Enumerable[T]', other: Iterable[T], comparer: Comparer[T] = default_comparer) -> bool:
        return sequence_equal(self._source, self._unwrap(other), comparer)

    def to_list(self: 'Enumerable[T]') -> List[T]:
        """convert to list"""
        return to_list(self._source)

    to_array = to_list

    def to_set(self: 'Enumerable[T]') -> Set[T]:
        return to_set(self._source)

    def to_dict(self: 'Enumerable[T]', key_selector: KeySelector[T, K],
                value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        return to_dict(self._source, key_selector, value_selector)

    def to_numpy(self: 'Enumerable[T]') -> np.ndarray:
        """convert to numpy array"""
        return to_numpy(self._source)

    def to_series(self: 'Enumerable[T]') -> pd.Series:
        """convert to pandas series"""
        return to_series(self._source)
