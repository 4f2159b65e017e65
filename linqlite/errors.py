from typing import Optional


class LinqLiteError(Exception):
    """base class for every error raised by linqlite itself"""
    pass


class EmptySequenceError(LinqLiteError, ValueError):
    """raised when an operation needs an element and the sequence has none that qualify"""

    def __init__(self, message: str = "sequence contains no elements"):
        super().__init__(message)


class MultipleMatchError(LinqLiteError, ValueError):
    """raised by single() and single_or_undefined() on a second matching element"""

    def __init__(self, message: str = "sequence contains more than one matching element"):
        super().__init__(message)


class IndexOutOfRangeError(LinqLiteError, IndexError):
    """raised by element_at() for a negative index or one at or past the end"""

    def __init__(self, index: int, message: Optional[str] = None):
        self.index = index
        super().__init__(message or f"index {index} is out of range")
