"""Shared pytest fixtures for regcheck tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI installs a handler bound to CliRunner's temporary stderr;
    leaving it in place would leak into later tests.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    reg = logging.getLogger("regcheck")
    reg_level = reg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    reg.setLevel(reg_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's REGCHECK_* environment out of the tests."""
    import os

    for key in list(os.environ):
        if key.startswith("REGCHECK_"):
            monkeypatch.delenv(key)


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp directory so no regcheck.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test
    classes.  Tests that need the path can request ``tmp_path`` directly.
    """
    monkeypatch.chdir(tmp_path)


def pytest_make_parametrize_id(config: pytest.Config, val: object, argname: str) -> str | None:
    """Give huge ints a short test id; str() on them exceeds Python's digit limit."""
    if isinstance(val, int) and not isinstance(val, bool) and val.bit_length() > 64:
        return f"{argname}-int{val.bit_length()}bits{'-neg' if val < 0 else ''}"
    return None
