"""Examples of chaining fallible steps over optional values.

Demonstrates:
- try_map chains with early return (propagate + @returns_result)
- Parsing optional input with pydantic validation
- flip_results / flip_options / flip_option on realistic inputs
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Annotated

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .combinators import flip_option, flip_options, flip_results, try_map
from .foundation.errors import Err, Ok, Result, returns_result
from .runtime.observability.logging import get_logger, log_context


# ═════════════════════════════════════════════════════════════════════════════
# Example 1: try_map Chain
# ═════════════════════════════════════════════════════════════════════════════


@returns_result
def try_main() -> Result[int | None, str]:
    """Four try_map steps from 42; the third fails, so the fourth never runs."""
    x = try_map(42, lambda x: Ok(x + 1)).propagate()
    x = try_map(x, lambda x: Ok(x + 1)).propagate()
    x = try_map(x, lambda _: Err("oh noes")).propagate()
    x = try_map(x, lambda x: Ok(x + 1)).propagate()
    return Ok(x)


@returns_result
def try_main_ok() -> Result[int | None, str]:
    """Same chain with every step succeeding."""
    x: int | None = 42
    for _ in range(3):
        x = try_map(x, lambda x: Ok(x + 1)).propagate()
    return Ok(x)


def example_chain() -> None:
    """The chain stops at the first Err and returns it unchanged."""
    assert try_main() == Err("oh noes")
    assert try_main_ok() == Ok(45)


# ═════════════════════════════════════════════════════════════════════════════
# Example 2: Optional Input, Fallible Parse
# ═════════════════════════════════════════════════════════════════════════════

Port = Annotated[int, Field(ge=1, le=65535)]
_port_adapter: TypeAdapter[int] = TypeAdapter(Port)


class ListenerConfig(BaseModel):
    """Raw listener config as read from a file: every field optional text."""
    host: str | None = None
    port: str | None = None
    admin_port: str | None = None


def parse_port(raw: str) -> Result[int, str]:
    """Validate a TCP port with pydantic."""
    try:
        return Ok(_port_adapter.validate_python(raw.strip()))
    except ValidationError as e:
        return Err(f"invalid port {raw!r}: {e.errors()[0]['msg']}")


def example_optional_port() -> None:
    """A missing port stays missing; a bad port is an error; a good one parses."""
    assert try_map(ListenerConfig().port, parse_port) == Ok(None)
    assert try_map(ListenerConfig(port="8080").port, parse_port) == Ok(8080)
    assert try_map(ListenerConfig(port="99999").port, parse_port).is_err()


# ═════════════════════════════════════════════════════════════════════════════
# Example 3: flip_option
# ═════════════════════════════════════════════════════════════════════════════


def example_flip_option() -> None:
    """Parse only when the admin port is configured, then flip the nesting."""
    def admin_port(cfg: ListenerConfig) -> Result[int | None, str]:
        return flip_option(parse_port(cfg.admin_port) if cfg.admin_port is not None else None)

    assert admin_port(ListenerConfig()) == Ok(None)
    assert admin_port(ListenerConfig(admin_port="9000")) == Ok(9000)
    assert admin_port(ListenerConfig(admin_port="x")).is_err()


# ═════════════════════════════════════════════════════════════════════════════
# Example 4: flip_results
# ═════════════════════════════════════════════════════════════════════════════


def example_flip_results() -> None:
    """All ports parse, or the first bad one is reported."""
    assert flip_results([parse_port(s) for s in ["80", "443", "8080"]]) == Ok([80, 443, 8080])

    result = flip_results([parse_port(s) for s in ["80", "http", "0"]])
    assert result.is_err() and "'http'" in result.unwrap_err()

    # A generator is not advanced past the first Err
    seen: list[str] = []

    def lazily(raws: list[str]) -> Iterator[Result[int, str]]:
        for s in raws:
            seen.append(s)
            yield parse_port(s)

    assert flip_results(lazily(["22", "ssh", "2222"])).is_err()
    assert seen == ["22", "ssh"]


# ═════════════════════════════════════════════════════════════════════════════
# Example 5: flip_options
# ═════════════════════════════════════════════════════════════════════════════


def credentials(env: Mapping[str, str]) -> list[str] | None:
    """User, password and host together, or nothing at all."""
    return flip_options([env.get("DB_USER"), env.get("DB_PASSWORD"), env.get("DB_HOST")])


def example_flip_options() -> None:
    """Collect required optional fields."""
    assert credentials({"DB_USER": "app", "DB_PASSWORD": "s3cret", "DB_HOST": "db"}) == ["app", "s3cret", "db"]
    assert credentials({"DB_USER": "app", "DB_HOST": "db"}) is None


# ═════════════════════════════════════════════════════════════════════════════
# Runner
# ═════════════════════════════════════════════════════════════════════════════

EXAMPLES = {
    "chain": example_chain,
    "optional_port": example_optional_port,
    "flip_option": example_flip_option,
    "flip_results": example_flip_results,
    "flip_options": example_flip_options,
}


def run_all_examples() -> int:
    """Run every example, logging each outcome. Returns the number that failed."""
    log, failed = get_logger("optresult.examples"), 0
    for name, example in EXAMPLES.items():
        with log_context(example=name):
            try:
                example()
            except AssertionError as e:
                failed += 1
                log.error("example failed", detail=str(e) or "assertion failed")
            else:
                log.info("example passed")
    log.info("examples finished", total=len(EXAMPLES), failed=failed)
    return failed


if __name__ == "__main__":
    raise SystemExit(1 if run_all_examples() else 0)
