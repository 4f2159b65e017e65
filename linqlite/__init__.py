r"""
'   .__  .__                .__  .__  __
'   |  | |__| ____   ______ |  | |__|/  |_  ____
'   |  | |  |/    \ / ____/ |  | |  \   __\/ __ \
'   |  |_|  |   |  < <_|  | |  |_|  ||  | \  ___/
'   |____/__|___|  /\__   | |____/__||__|  \___  >
'                \/    |__|                    \/
"""
import logging

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    linq,
    L
)

# expose the free-function operations as a namespace
from . import operations

# expose supporting values
from .types import UNDEFINED, LazySequence, MinMax
from .defaults import (
    default_predicate,
    default_comparer,
    default_hash,
    default_selector,
    MIN_SENTINEL,
    MAX_SENTINEL
)
from .errors import (
    LinqLiteError,
    EmptySequenceError,
    MultipleMatchError,
    IndexOutOfRangeError
)

# applications configure handlers; the library stays silent by default
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "linq",
    "L",
    "operations",
    "UNDEFINED",
    "LazySequence",
    "MinMax",
    "default_predicate",
    "default_comparer",
    "default_hash",
    "default_selector",
    "MIN_SENTINEL",
    "MAX_SENTINEL",
    "LinqLiteError",
    "EmptySequenceError",
    "MultipleMatchError",
    "IndexOutOfRangeError"
]
