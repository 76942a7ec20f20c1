"""Exceptions raised when a Result is taken apart on the wrong variant.

The combinators themselves never raise: errors travel as Err values. These
exceptions only appear when a caller forces a variant out of a Result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .result import Result


class UnwrapError(RuntimeError):
    """Raised by unwrap()/unwrap_err()/expect() on the other variant.

    Subclasses RuntimeError so callers catching the plain panic keep working.
    Also raised by propagate() when no @returns_result frame is active, chained
    from the Propagation it would otherwise have carried.
    """


class Propagation(BaseException):
    """Carries an Err out of the current call, Python's stand-in for Rust's ``?``.

    Raised by Result.propagate() and turned back into a returned Err by the
    @returns_result decorator. The carried result is the original Err object,
    never copied or re-wrapped.

    Control flow like GeneratorExit: derives from BaseException so an
    ``except Exception`` between propagate() and the decorator does not
    swallow the early return.
    """

    def __init__(self, result: Result[object, object]) -> None:
        super().__init__(result)
        self.result = result
