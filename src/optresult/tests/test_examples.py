"""Tests for the bundled examples and the ``python -m optresult`` runner."""

from __future__ import annotations

import io

import orjson
import pytest

from optresult import Err, Ok
from optresult import __main__ as cli
from optresult import examples
from optresult.runtime.observability.logging import configure_logging


def test_try_main_fails_with_oh_noes() -> None:
    """The four-step chain fails at its third step."""
    assert examples.try_main() == Err("oh noes")


def test_try_main_ok() -> None:
    """Three successful +1 steps from 42."""
    assert examples.try_main_ok() == Ok(45)


@pytest.mark.parametrize(("raw", "expected"), [("80", Ok(80)), (" 8080 ", Ok(8080)), ("65535", Ok(65535))])
def test_parse_port_ok(raw: str, expected: object) -> None:
    """Valid ports parse, surrounding whitespace ignored."""
    assert examples.parse_port(raw) == expected


@pytest.mark.parametrize("raw", ["0", "65536", "http", ""])
def test_parse_port_err(raw: str) -> None:
    """Invalid ports are Err with the offending input quoted."""
    result = examples.parse_port(raw)
    assert result.is_err()
    assert repr(raw) in result.unwrap_err()


def test_credentials() -> None:
    """All three fields or None."""
    assert examples.credentials({"DB_USER": "u", "DB_PASSWORD": "p", "DB_HOST": "h"}) == ["u", "p", "h"]
    assert examples.credentials({}) is None


def test_run_all_examples_logs_each() -> None:
    """Every example passes and is logged with its name."""
    out = io.StringIO()
    configure_logging("json", output=out)

    assert examples.run_all_examples() == 0

    records = [orjson.loads(line) for line in out.getvalue().splitlines()]
    passed = [r["example"] for r in records if r["event"] == "example passed"]
    assert passed == list(examples.EXAMPLES)
    assert records[-1]["event"] == "examples finished"
    assert records[-1]["failed"] == 0


def test_run_all_examples_counts_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    """A failing example is logged as an error and counted."""
    def broken() -> None:
        raise AssertionError("nope")

    monkeypatch.setitem(examples.EXAMPLES, "broken", broken)
    out = io.StringIO()
    configure_logging("json", output=out)

    assert examples.run_all_examples() == 1
    errors = [r for r in map(orjson.loads, out.getvalue().splitlines()) if r["level"] == "error"]
    assert len(errors) == 1
    assert (errors[0]["example"], errors[0]["detail"]) == ("broken", "nope")


def test_main_uses_settings(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """python -m optresult honours OPTRESULT_LOG_FORMAT and exits 0."""
    monkeypatch.setenv("OPTRESULT_LOG_FORMAT", "json")

    assert cli.main() == 0

    lines = capsys.readouterr().out.splitlines()
    assert orjson.loads(lines[-1])["event"] == "examples finished"
