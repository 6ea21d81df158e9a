"""Tiered Debugging module"""

import typing as t
from functools import wraps
from tiered_debug import TieredDebug

debug = TieredDebug(level=1)
"""Package-wide tiered debug instance. Set ``debug.level`` (1-5) to trace"""


def begin_end(begin: int = 2, end: int = 3) -> t.Callable:
    """Decorator to log the beginning and end of a function or method call

    :param begin: Debug level for the BEGIN message
    :param end: Debug level for the END message
    """
    mmap = {
        1: debug.lv1,
        2: debug.lv2,
        3: debug.lv3,
        4: debug.lv4,
        5: debug.lv5,
    }

    def decorator(func: t.Callable) -> t.Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            mmap[begin](f'BEGIN CALL: {func.__qualname__}()')
            result = func(*args, **kwargs)
            mmap[end](f'END CALL: {func.__qualname__}()')
            return result

        return wrapper

    return decorator
