"""
fungi - functional programming utilities.

Operations on lists, lazy producers materialized with ``take``, and an
Either monad for chaining computations that can fail.

Example:
    >>> from fungi import Numbers, Ok, bind, fold, map_list, take
    >>> map_list(take(Numbers(), 4), lambda i: i * i)
    [0, 1, 4, 9]
    >>> fold(lambda item, acc: acc + item, 0, [1, 2, 3, 4])
    10
    >>> bind(Ok(15), lambda a: (a + 22, None))
    Ok(37)
"""

from fungi.either import Either, Err, Ok, bind, do, result
from fungi.errors import (
    ErrorCategory,
    FungiError,
    InvalidCountError,
    ValidationError,
    categorize_error,
)
from fungi.iterable import Iterable, Numbers, take
from fungi.lists import filter_list, fold, includes, map_dict, map_list
from fungi.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
    reset_logging,
)
from fungi.settings import FungiSettings

__version__ = "0.1.0"

__all__ = [
    # Lists
    "map_list",
    "map_dict",
    "fold",
    "filter_list",
    "includes",
    # Iterables
    "Iterable",
    "Numbers",
    "take",
    # Either
    "Either",
    "Ok",
    "Err",
    "result",
    "do",
    "bind",
    # Errors
    "ErrorCategory",
    "FungiError",
    "ValidationError",
    "InvalidCountError",
    "categorize_error",
    # Ambient
    "FungiSettings",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "reset_logging",
]
