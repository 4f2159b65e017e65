"""
free-function form of every query operation.

several names (all, any, sum, max, min, zip) shadow builtins on purpose, so
import the module rather than its names:

    from linqlite import operations as ops
    ops.sum(ops.where(data, lambda x: x > 2))
"""

from .core import (
    select,
    select_with_index,
    select_many,
    where,
    where_with_index,
    take,
    skip,
    take_while,
    take_while_with_index,
    skip_while,
    skip_while_with_index,
    reverse,
    concat,
    default_if_empty,
    undefined_if_empty,
    assert_type,
)
from .set import (
    distinct,
    distinct_hash,
    except_,
    except_hash,
    intersect,
    intersect_hash,
    union,
    union_hash,
)
from .zip import zip
from .terminal import (
    aggregate,
    aggregate_with_seed,
    all,
    any,
    contains,
    count,
    first,
    first_or_undefined,
    last,
    last_or_undefined,
    single,
    single_or_undefined,
    element_at,
    element_at_or_undefined,
    sequence_equal,
    to_list,
    to_array,
    to_set,
    to_dict,
    to_numpy,
    to_series,
)
from .stats import sum, average, max, min, min_max

__all__ = [
    # transformations
    "select", "select_with_index", "select_many", "where", "where_with_index",
    "take", "skip", "take_while", "take_while_with_index", "skip_while",
    "skip_while_with_index", "reverse", "concat", "default_if_empty",
    "undefined_if_empty", "assert_type",
    "distinct", "distinct_hash", "except_", "except_hash", "intersect",
    "intersect_hash", "union", "union_hash", "zip",
    # terminals
    "aggregate", "aggregate_with_seed", "all", "any", "contains", "count",
    "first", "first_or_undefined", "last", "last_or_undefined", "single",
    "single_or_undefined", "element_at", "element_at_or_undefined",
    "sequence_equal", "to_list", "to_array", "to_set", "to_dict", "to_numpy",
    "to_series", "sum", "average", "max", "min", "min_max",
]
