"""Shared pytest fixtures for fluentval tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from fluentval.validators.string import StringValidator


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI reconfigures logging on every invocation; this keeps handlers
    bound to CliRunner's temporary streams from leaking between tests.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("fluentval")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so config
    discovery never picks up a stray ``fluentval.toml``.
    """
    monkeypatch.delenv("FLUENTVAL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_validator() -> StringValidator:
    """The reference validator: not empty, at most 20 chars, not "foo"."""
    return StringValidator().not_empty().max_length(20).not_equals("foo")
