import logging
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple
)

logger = logging.getLogger(__name__)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
IndexedPredicate = Callable[[T, int], bool]
Selector = Callable[[T], U]
IndexedSelector = Callable[[T, int], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], bool]
Hasher = Callable[[T], Any]
Accumulator = Callable[[U, T], U]
NumericSelector = Callable[[T], Union[int, float]]


class _Undefined:
    """the 'no result' marker returned by the *_or_undefined family"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class MinMax(NamedTuple):
    """result of a single-pass min_max"""
    min: Union[int, float]
    max: Union[int, float]


class LazySequence(Generic[T]):
    """
    a re-iterable lazy stage.

    holds a factory that builds a fresh iterator for every traversal, so any
    per-traversal state (indices, counters, seen sets) lives in the generator
    and never in the stage itself.
    """

    def __init__(self, iterator_func: Callable[[], Iterator[T]], name: str = "stage"):
        self._iterator_func = iterator_func
        self._name = name

    def __iter__(self) -> Iterator[T]:
        logger.debug(f"starting traversal of lazy {self._name}")
        return self._iterator_func()

    def __repr__(self) -> str:
        return f"LazySequence({self._name})"
