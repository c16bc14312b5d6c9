"""Wall-clock timing for the conversion entry points."""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Log how long a whole conversion call took.

    Applied to ``convert`` and ``convert_file``, where the measured span
    covers decode, mode conversion and encode together, including file
    open/close for ``convert_file``. Emits one INFO line,
    ``[PROFILE] <qualname> took <seconds>s``, whether the call returns or
    raises, so failed conversions are timed as well.
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_time = time.perf_counter() - start_time
            logger.info(f"[PROFILE] {func.__qualname__} took {elapsed_time:.3f}s")

    return wrapper
