"""Fallible map over an optional value."""

from __future__ import annotations

from typing import Callable, TypeVar

from ..foundation.errors import Ok, Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


def try_map(value: T | None, f: Callable[[T], Result[U, E]]) -> Result[U | None, E]:
    """Apply a function that may fail to an optional value.

    None → Ok(None) without calling f. Otherwise f(value) is called exactly
    once: Ok(y) → Ok(y), Err(e) → Err(e), the very Err that f returned.

    f receives the caller's object itself, not a copy, and should not hold
    on to it after returning.

    The result is fallible-of-optional, so chaining needs the Ok unwrapped
    first; inside a @returns_result function use propagate():

        >>> from optresult import Ok, Result, returns_result, try_map
        >>> @returns_result
        ... def chain() -> Result[int | None, str]:
        ...     x = try_map(42, lambda x: Ok(x + 1)).propagate()
        ...     x = try_map(x, lambda x: Ok(x + 1)).propagate()
        ...     return Ok(x)
        >>> chain()
        Ok(44)

    Note:
        An f returning Ok(None) reads as Ok(absent): ``T | None`` has no
        spelling for "present None".
    """
    if value is None:
        return Ok(None)
    return f(value)  # type: ignore[return-value]
