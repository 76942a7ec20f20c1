"""Tests for the flip family: nesting inversion with first-failure-wins."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from optresult import Err, Ok, Result, flip_option, flip_options, flip_results, returns_result, try_map


def tracked(items: list[object], seen: list[object]) -> Iterator[object]:
    """Yield items, recording each one as it is pulled."""
    for item in items:
        seen.append(item)
        yield item


# ═════════════════════════════════════════════════════════════════════════════
# Optional of Result
# ═════════════════════════════════════════════════════════════════════════════


def test_flip_option_absent() -> None:
    """None → Ok(None)."""
    assert flip_option(None) == Ok(None)


def test_flip_option_present_ok() -> None:
    """Present Ok(5) → Ok(5)."""
    assert flip_option(Ok(5)) == Ok(5)


def test_flip_option_present_err() -> None:
    """Present Err("e") → the same Err."""
    failure: Result[int, str] = Err("e")
    assert flip_option(failure) is failure


# ═════════════════════════════════════════════════════════════════════════════
# Sequence of Results
# ═════════════════════════════════════════════════════════════════════════════


def test_flip_results_all_ok_preserves_order() -> None:
    """Every Ok unwrapped, same order and length."""
    values = [43, 101, 100, 2, 43, 10001]
    assert flip_results([Ok(v) for v in values]) == Ok(values)


def test_flip_results_first_err_wins() -> None:
    """The lowest-index Err is returned; later ones never surface."""
    first: Result[int, str] = Err("heatenings")

    result = flip_results([first, Ok(2), Err("other")])

    assert result is first
    assert result.unwrap_err() == "heatenings"


def test_flip_results_err_in_middle() -> None:
    """An Err after some Oks still wins over everything."""
    assert flip_results([Ok(1), Ok(2), Err("mid"), Ok(4)]) == Err("mid")


def test_flip_results_empty() -> None:
    """[] → Ok([])."""
    assert flip_results([]) == Ok([])


def test_flip_results_stops_at_first_err() -> None:
    """Elements past the first Err are not pulled from the iterable."""
    seen: list[object] = []
    items: list[object] = [Ok(1), Err("stop"), Ok(3), Err("late")]

    assert flip_results(tracked(items, seen)) == Err("stop")
    assert seen == items[:2]


def test_flip_results_output_is_fresh_list() -> None:
    """The output list is built anew, never the caller's container."""
    items = (Ok(1), Ok(2))

    out = flip_results(items).unwrap()

    assert isinstance(out, list)
    assert out == [1, 2]


def test_flip_results_keeps_none_values() -> None:
    """Ok(None) is a success like any other."""
    assert flip_results([Ok(None), Ok(1)]) == Ok([None, 1])


# ═════════════════════════════════════════════════════════════════════════════
# Sequence of Optionals
# ═════════════════════════════════════════════════════════════════════════════


def test_flip_options_all_present() -> None:
    """[1, 2] → [1, 2]."""
    assert flip_options([1, 2]) == [1, 2]


@pytest.mark.parametrize("items", [[None], [None, 1], [1, None], [1, 2, None, 4]])
def test_flip_options_any_absent(items: list[int | None]) -> None:
    """Any None makes the whole result None."""
    assert flip_options(items) is None


def test_flip_options_empty() -> None:
    """[] → [] (present, empty)."""
    result = flip_options([])
    assert result == []
    assert result is not None


def test_flip_options_falsy_values_are_present() -> None:
    """0, "" and False are values, not absence."""
    assert flip_options([0, "", False]) == [0, "", False]


def test_flip_options_stops_at_first_absent() -> None:
    """Elements past the first None are not pulled from the iterable."""
    seen: list[object] = []

    assert flip_options(tracked([1, None, 3], seen)) is None
    assert seen == [1, None]


def test_flip_options_fresh_list() -> None:
    """The caller's list is never returned or mutated."""
    items = [1, 2]
    out = flip_options(items)

    assert out == items
    assert out is not items


# ═════════════════════════════════════════════════════════════════════════════
# Composition with try_map
# ═════════════════════════════════════════════════════════════════════════════


def parse(s: str) -> Result[int, str]:
    return Ok(int(s)) if s.isdigit() else Err(f"not a number: {s}")


@returns_result
def total(raw: list[str | None]) -> Result[int | None, str]:
    """Sum the inputs when all are given; None if any is missing."""
    present = flip_options(raw)
    numbers = try_map(present, lambda xs: flip_results([parse(s) for s in xs])).propagate()
    return Ok(sum(numbers) if numbers is not None else None)


def test_composition_success() -> None:
    """flip_options then try_map(flip_results) over all-good input."""
    assert total(["1", "2", "3"]) == Ok(6)


def test_composition_absent() -> None:
    """Absence short-circuits before any parsing."""
    assert total(["1", None, "x"]) == Ok(None)


def test_composition_first_error() -> None:
    """The first parse error is the chain's result."""
    assert total(["1", "x", "y"]) == Err("not a number: x")
