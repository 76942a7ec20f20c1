"""Flip: swap the nesting order of optional/fallible/collection wrappers.

Three instantiations, one rule: scan left to right, the first failure wins,
nothing past it is looked at.

    flip_option   Result[T, E] | None       → Result[T | None, E]
    flip_results  Iterable[Result[T, E]]    → Result[list[T], E]
    flip_options  Iterable[T | None]        → list[T] | None

The two sequence flips share _scan; they differ only in the classifier
that decides which element plays "failure" (an Err, or None).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from ..foundation.errors import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")
E = TypeVar("E")
A = TypeVar("A")

# Classifier: element → (is_failure, payload). Payload is the unwrapped value
# on success, or whatever the caller should receive on failure.
Classifier = Callable[[A], tuple[bool, object]]


def _scan(items: Iterable[A], classify: Classifier[A]) -> tuple[bool, object]:
    """Single pass over items. Returns (True, values) or (False, first failure payload)."""
    values: list[object] = []
    for item in items:
        failed, payload = classify(item)
        if failed:
            return False, payload
        values.append(payload)
    return True, values


def _classify_result(r: Result[T, E]) -> tuple[bool, object]:
    # The failing Err is handed back whole so the caller returns the same object
    return (False, r.unwrap()) if r.is_ok() else (True, r)


def _classify_optional(v: T | None) -> tuple[bool, object]:
    return v is None, v


def flip_option(value: Result[T, E] | None) -> Result[T | None, E]:
    """Turn an optional Result inside out.

    None → Ok(None); Ok(x) → Ok(x); Err(e) → Err(e).

    With ``T | None`` as the optional type, Present(Ok(x)) and Ok(Present(x))
    have the same spelling, so a present Result is returned as-is.
    """
    return Ok(None) if value is None else value  # type: ignore[return-value]


def flip_results(items: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Sequence of Results → Result of list, stopping at the first Err.

    Example:
        >>> flip_results([Ok(1), Ok(2)])
        Ok([1, 2])
        >>> flip_results([Err("first"), Ok(2), Err("second")])
        Err('first')
        >>> flip_results([])
        Ok([])
    """
    done, payload = _scan(items, _classify_result)
    return Ok(payload) if done else payload  # type: ignore[return-value]


def flip_options(items: Iterable[T | None]) -> list[T] | None:
    """Sequence of optionals → optional list, None at the first None.

    Example:
        >>> flip_options([1, 2])
        [1, 2]
        >>> flip_options([1, None, 3]) is None
        True
        >>> flip_options([])
        []
    """
    done, payload = _scan(items, _classify_optional)
    return payload if done else None  # type: ignore[return-value]
