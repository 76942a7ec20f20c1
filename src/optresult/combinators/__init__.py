"""Combinators over optional values, Results, and sequences of either.

- try_map: fallible map over ``T | None``
- flip_option / flip_results / flip_options: invert nesting, first failure wins
"""

from .flip import flip_option, flip_options, flip_results
from .try_map import try_map

__all__ = [
    "try_map",
    "flip_option",
    "flip_results",
    "flip_options",
]
