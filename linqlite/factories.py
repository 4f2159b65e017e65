import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable


def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """wrap any iterable. nothing is copied or traversed."""
    from .enumerable import Enumerable
    return Enumerable(data)


def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(range(start, start + count))


def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    def repeat_iter():
        for _ in range(count):
            yield item
    return Enumerable(LazySequence(repeat_iter, "repeat"))


def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(())


def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """
    generate a sequence by calling generator_func, fresh on every traversal.
    with count=None the sequence is infinite; bound it with take() or take_while().
    """
    from .enumerable import Enumerable
    def generate_iter():
        produced = 0
        while count is None or produced < count:
            yield generator_func()
            produced += 1
    return Enumerable(LazySequence(generate_iter, "generate"))


# --- aliases ---
linq = from_iterable
L = from_iterable
