# topmark:header:start
#
#   project      : StyleMark
#   file         : file_resolver.py
#   file_relpath : src/stylemark/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the files to check from command-line paths and file patterns.

Semantics:
  1. Explicit file paths are always checked, whatever the patterns say.
  2. Directories are walked recursively; a file found this way is kept when it
     matches *any* include pattern and *no* exclude pattern. Patterns use
     gitwildmatch syntax (``.gitignore`` style) and are matched against the path
     relative to the directory argument.
  3. Paths that do not exist are kept in the list so that reading them fails and
     they are reported as skipped.
  4. The result keeps argument order, each directory walk is sorted, and
     duplicates are dropped.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from stylemark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from stylemark.config.logging import StylemarkLogger
    from stylemark.config.model import RuleConfig

logger: StylemarkLogger = get_logger(__name__)


def _walk_directory(root: Path, include: PathSpec, exclude: PathSpec) -> Iterator[Path]:
    for path in sorted(root.rglob("*")):
        if not path.is_file():
            continue
        rel: str = path.relative_to(root).as_posix()
        if not include.match_file(rel):
            logger.trace("Not included: %s", path)
            continue
        if exclude.match_file(rel):
            logger.trace("Excluded: %s", path)
            continue
        yield path


def resolve_file_list(paths: Iterable[str | Path], config: RuleConfig) -> list[Path]:
    """Return the files to check for the given command-line paths.

    Args:
        paths: Files and directories named on the command line.
        config: Configuration providing ``include_patterns`` and ``exclude_patterns``.

    Returns:
        list[Path]: Files to check, in a deterministic order.
    """
    include: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(config.include_patterns))
    exclude: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(config.exclude_patterns))

    seen: set[Path] = set()
    out: list[Path] = []

    def add(path: Path) -> None:
        if path not in seen:
            seen.add(path)
            out.append(path)

    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            for found in _walk_directory(p, include, exclude):
                add(found)
        else:
            if not p.exists():
                logger.warning("No such file or directory: %s", p)
            add(p)

    logger.debug("Resolved %d file(s) to check", len(out))
    logger.trace("Files to check: %s", out)
    return out
