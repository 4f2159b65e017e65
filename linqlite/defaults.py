"""
named default policies, substituted whenever a caller omits an optional function.

default_hash keys elements by their own value, so only equal values coalesce.
elements that are not hashable need an explicit hash or comparer. this is a
precondition and is not checked.
"""
import math
from numbers import Number
from typing import Any, Union

# running-extremum seeds for max() and min(). an empty source returns the seed
# unchanged, so max([]) == MIN_SENTINEL and min([]) == MAX_SENTINEL.
MIN_SENTINEL: float = -math.inf
MAX_SENTINEL: float = math.inf


def default_predicate(element: Any) -> bool:
    return True


def default_comparer(first: Any, second: Any) -> bool:
    return first == second


def default_hash(element: Any) -> Any:
    return element


def default_selector(element: Any) -> Union[int, float]:
    """numeric coercion of the element itself"""
    if isinstance(element, Number):
        return element
    return float(element)
