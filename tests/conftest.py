# topmark:header:start
#
#   project      : StyleMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the StyleMark test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `stylemark.config.model.MutableRuleConfig` (mutable),
      then `freeze()` into a `RuleConfig` for engine and API calls.
    - Do **not** mutate a frozen `RuleConfig`. If you need to tweak one, call
      `RuleConfig.thaw()`, edit the returned builder, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from stylemark.config import logging
from stylemark.config.model import MutableRuleConfig

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stylemark.config.model import RuleConfig

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture(autouse=True)
def restore_stylemark_logging() -> Iterator[None]:
    """Restore TRACE logging after each test.

    CLI invocations reconfigure the root logger for the verbosity they were given
    and bind its handler to the runner's temporary stderr.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated temporary project directory.

    Configuration discovery starts at the working directory, so tests that rely
    on discovery (or on its absence) must not run from the repository root.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory. It contains an empty ``src/``
            directory and no configuration file.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "src").mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> RuleConfig:
    """Return a frozen `RuleConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Field values set on the mutable builder before freezing
            (for example ``indent_width=2`` or ``disabled_rules=["LineTooLong"]``).

    Returns:
        RuleConfig: An immutable configuration snapshot for use in tests.
    """
    m: MutableRuleConfig = MutableRuleConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def write_source(directory: Path, name: str, text: str) -> Path:
    """Write ``text`` verbatim (no newline translation) and return the path."""
    path: Path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path
