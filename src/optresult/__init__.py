"""optresult - chain fallible steps over optional values and sequences.

Python already spells "maybe a value" as ``T | None``; optresult adds the
fallible side (Result/Ok/Err) and two combinators that keep chains linear:

- try_map(value, f): apply a function that may fail to an optional value
- flip_option / flip_results / flip_options: invert nesting, first failure wins

Quick Start:
    >>> from optresult import Err, Ok, Result, flip_results, returns_result, try_map
    >>>
    >>> try_map(None, lambda x: Ok(x + 1))
    Ok(None)
    >>> try_map(42, lambda x: Ok(x + 1))
    Ok(43)
    >>> flip_results([Ok(1), Err("bad"), Err("worse")])
    Err('bad')

Early return, Python's ``?``:
    >>> @returns_result
    ... def step() -> Result[int | None, str]:
    ...     x = try_map(42, lambda x: Ok(x + 1)).propagate()
    ...     x = try_map(x, lambda _: Err("oh noes")).propagate()
    ...     return Ok(x)
    >>> step()
    Err('oh noes')
"""

from __future__ import annotations

__version__ = "0.1.0"

# Combinators
from .combinators import flip_option, flip_options, flip_results, try_map

# Result type
from .foundation.errors import Err, Ok, Propagation, Result, UnwrapError, returns_result

__all__ = [
    "__version__",
    # Combinators
    "try_map",
    "flip_option",
    "flip_results",
    "flip_options",
    # Result type
    "Result",
    "Ok",
    "Err",
    "returns_result",
    # Exceptions
    "Propagation",
    "UnwrapError",
]
