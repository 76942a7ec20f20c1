"""Fallible values for optresult.

- Result/Ok/Err: success-or-error sum type
- returns_result/Propagation: early return of an Err, Python's ``?``
- UnwrapError: forcing a Result open on the wrong variant
"""

from .errors import Propagation, UnwrapError
from .result import Err, Ok, Result, returns_result

__all__ = [
    # Result type
    "Result", "Ok", "Err",
    # Early return
    "returns_result", "Propagation",
    # Exceptions
    "UnwrapError",
]
