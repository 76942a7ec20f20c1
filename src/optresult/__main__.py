"""Run the bundled examples: ``python -m optresult``.

Logging follows OPTRESULT_LOG_* settings. Exit status is the number of
failed examples, capped at 1.
"""

from __future__ import annotations

from .examples import run_all_examples
from .runtime.observability.logging import configure_from_settings


def main() -> int:
    configure_from_settings()
    return 1 if run_all_examples() else 0


if __name__ == "__main__":
    raise SystemExit(main())
