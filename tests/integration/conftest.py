from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from quire.cli import create_app


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def _clean_log_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("QUIRE_DEBUG", raising=False)
    monkeypatch.delenv("QUIRE_LOG_LEVEL", raising=False)


@pytest.fixture
def quire_cli(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code.

    Output and errors go through the shared console fixture, so tests read
    them with capsys.
    """

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        """Run CLI app and return exit code (0 if no SystemExit)."""

        try:
            app(args)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
