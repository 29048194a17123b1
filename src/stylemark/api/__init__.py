# topmark:header:start
#
#   project      : StyleMark
#   file         : __init__.py
#   file_relpath : src/stylemark/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public StyleMark API (stable surface).

This module exposes a small, typed API for integrations that want to run
StyleMark programmatically without going through the CLI.

Configuration contract
----------------------
- ``config=None`` means the built-in defaults. Unlike the CLI, the API never
  discovers configuration files on its own.
- A plain **mapping** mirroring the ``stylemark.toml`` shape is merged over the
  defaults and validated.
- A frozen [`RuleConfig`][stylemark.config.model.RuleConfig] is used as is.

```python
from stylemark import api

report = api.check_text("main =\\n    1\\n", config={"rules": {"indent_width": 2}})
run = api.check_paths(["src"], jobs=4)
```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from stylemark.config.logging import get_logger
from stylemark.config.model import MutableRuleConfig, RuleConfig
from stylemark.constants import STRING_SOURCE_NAME
from stylemark.engine import FileReport, RunResult, check_source, run_files
from stylemark.file_resolver import resolve_file_list
from stylemark.source.model import SourceFile

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from stylemark.config.logging import StylemarkLogger

logger: StylemarkLogger = get_logger(__name__)

__all__ = [
    "FileReport",
    "RunResult",
    "check_paths",
    "check_text",
    "to_config",
]


def to_config(config: RuleConfig | Mapping[str, Any] | None) -> RuleConfig:
    """Normalize the ``config`` argument of the public functions.

    Raises:
        InvalidConfigError: If a mapping holds invalid values.
    """
    if isinstance(config, RuleConfig):
        return config
    draft: MutableRuleConfig = MutableRuleConfig.from_defaults()
    if isinstance(config, Mapping):
        draft = draft.merge_with(MutableRuleConfig.from_toml_dict(config, source="<api>"))
    return draft.freeze()


def check_text(
    text: str | bytes,
    *,
    path: str = STRING_SOURCE_NAME,
    config: RuleConfig | Mapping[str, Any] | None = None,
) -> FileReport:
    """Check source text held in memory.

    Args:
        text: Source text, or UTF-8 bytes.
        path: Display path used in diagnostics.
        config: Configuration (see module docs).

    Returns:
        FileReport: Sorted diagnostics for the text.

    Raises:
        EncodingError: If ``text`` is not valid UTF-8 text.
        InvalidConfigError: If ``config`` is invalid.
    """
    return check_source(SourceFile.from_text(text, path=path), to_config(config))


def check_paths(
    paths: Iterable[str | Path],
    *,
    config: RuleConfig | Mapping[str, Any] | None = None,
    jobs: int = 1,
    timeout: float | None = None,
) -> RunResult:
    """Check files and directories the same way the CLI does.

    Unreadable or undecodable files do not raise; they are reported as skipped
    in the result.

    Args:
        paths: Files and directories to check.
        config: Configuration (see module docs).
        jobs: Maximum number of worker threads.
        timeout: Whole-run time limit in seconds.

    Returns:
        RunResult: One report per resolved file; ``exit_code`` gives the CLI status.

    Raises:
        InvalidConfigError: If ``config`` is invalid.
    """
    resolved: RuleConfig = to_config(config)
    files: list[Path] = resolve_file_list(paths, resolved)
    logger.debug("API check of %d file(s)", len(files))
    return run_files(files, resolved, jobs=jobs, timeout=timeout)
