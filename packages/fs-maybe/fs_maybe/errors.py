"""Exceptions raised by fs-maybe."""


class AbsentValueError(Exception):
    """Raised when a value is forced out of a Nothing.

    Only `from_just` raises this. Callers who need a total extraction should use
    `from_maybe`, `match` or `unbox` instead.
    """
