"""Result/Either sum type: the fallible half of optresult.

Python has a built-in "no value" (None) but no built-in "success or error",
so this module supplies the latter:
- Ok/Err constructors over a single slotted Result class
- Inspection and extraction: is_ok, unwrap, unwrap_or, ok, err, ...
- Functor: map, map_err
- Early return: propagate() + @returns_result, the equivalent of Rust's ``?``

There is deliberately no flat_map/and_then. Chains over optional values go
through try_map and the flip family in optresult.combinators.

Performance notes:
- Uses __slots__ for minimal memory footprint
- Direct attribute access (no method calls) in hot paths
"""

from __future__ import annotations

from contextvars import ContextVar
from functools import wraps
from typing import TYPE_CHECKING, Callable, Generic, ParamSpec, TypeVar

from .errors import Propagation, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
P = ParamSpec("P")

# Sentinel for faster Ok/Err construction
_OK = True
_ERR = False

# Number of @returns_result frames on the current call path
_returns_result_depth: ContextVar[int] = ContextVar("returns_result_depth", default=0)


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Exactly one variant is active and a Result is never mutated after
    construction. Every operation returns a new Result or the same object.

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("fail").map(lambda x: x * 2).unwrap_err()
        'fail'
        >>> match Err("boom"):
        ...     case Result(True, v): print("value", v)
        ...     case Result(False, e): print("error", e)
        error boom
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_is_ok", "_value")

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─── Value Extraction ──────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value. Raises UnwrapError on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(f"unwrap() on Err: {self._value!r}")

    def unwrap_err(self) -> E:
        """Extract Err value. Raises UnwrapError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(f"unwrap_err() on Ok: {self._value!r}")

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute from error via f."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom error message."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(f"{msg}: {self._value!r}")

    def propagate(self) -> T:
        """Extract Ok value, or leave the enclosing @returns_result function with this Err.

        Example:
            >>> @returns_result
            ... def halve(n: int) -> Result[int, str]:
            ...     even = (Ok(n) if n % 2 == 0 else Err("odd")).propagate()
            ...     return Ok(even // 2)
            >>> halve(3)
            Err('odd')
        """
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        p = Propagation(self)  # type: ignore[arg-type]
        if _returns_result_depth.get() == 0:
            raise UnwrapError(f"propagate() on {self!r} outside @returns_result") from p
        raise p

    # ─── Functor Operations ────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Ok value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Err value. Signature: Result[T,E] → (E→F) → Result[T,F]"""
        return Result(f(self._value), _ERR) if not self._is_ok else self  # type: ignore[arg-type,return-value]

    # ─── Inspection & Utilities ──────────────────────────────────────────

    def ok(self) -> T | None:
        """Value if Ok, None if Err."""
        return self._value if self._is_ok else None  # type: ignore[return-value]

    def err(self) -> E | None:
        """Error if Err, None if Ok."""
        return self._value if not self._is_ok else None  # type: ignore[return-value]

    # ─── Pattern Matching ────────────────────────────────────────────────

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive pattern match. Forces handling both Ok and Err."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Ok, nothing if Err."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Early Return
# ═══════════════════════════════════════════════════════════════════════════════


def returns_result(fn: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """Let propagate() inside fn return its Err from fn.

    Only Propagation is intercepted, and its Err is returned as-is. Any other
    exception raised by fn passes through untouched.

    Example:
        >>> @returns_result
        ... def total(a: Result[int, str], b: Result[int, str]) -> Result[int, str]:
        ...     return Ok(a.propagate() + b.propagate())
        >>> total(Ok(1), Err("no b"))
        Err('no b')
    """
    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        token = _returns_result_depth.set(_returns_result_depth.get() + 1)
        try:
            return fn(*args, **kwargs)
        except Propagation as p:
            return p.result  # type: ignore[return-value]
        finally:
            _returns_result_depth.reset(token)

    return wrapper
