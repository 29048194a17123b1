# topmark:header:start
#
#   project      : StyleMark
#   file         : loaders.py
#   file_relpath : src/stylemark/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, discover and render TOML configuration sources.

Configuration may come from:
- a ``stylemark.toml`` file (tables at the top level), or
- a ``pyproject.toml`` file (tables nested under ``[tool.stylemark]``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Unlike discovery in multi-layer tools, only the *nearest* configuration file
found walking up from the starting directory is used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from stylemark.config.keys import Toml
from stylemark.config.logging import get_logger
from stylemark.config.model import MutableRuleConfig
from stylemark.constants import PYPROJECT_TOML_NAME, STYLEMARK_TOML_NAME
from stylemark.core.errors import InvalidConfigError

if TYPE_CHECKING:
    from stylemark.config.logging import StylemarkLogger
    from stylemark.config.model import RuleConfig

logger: StylemarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``stylemark.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        InvalidConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise InvalidConfigError(
            f"cannot read configuration: {e.strerror or e}", source=str(path)
        ) from e
    except (TomlkitParseError, UnicodeDecodeError) as e:
        raise InvalidConfigError(f"malformed TOML: {e}", source=str(path)) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _extract_tool_section(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the ``[tool.stylemark]`` table of a parsed pyproject, if present."""
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return None
    section: Any = tool.get(Toml.SECTION_TOOL_STYLEMARK)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise InvalidConfigError(
            f"[{Toml.SECTION_TOOL}.{Toml.SECTION_TOOL_STYLEMARK}] must be a table",
            source=str(path),
        )
    return cast("TomlTable", section)


def load_config_file(path: Path) -> MutableRuleConfig:
    """Load one configuration file into a configuration layer.

    A ``pyproject.toml`` file contributes its ``[tool.stylemark]`` table; any
    other file name is read as a ``stylemark.toml`` document.

    Args:
        path: Configuration file to read.

    Returns:
        MutableRuleConfig: The configuration layer defined by the file.

    Raises:
        InvalidConfigError: If the file cannot be read, parsed or validated.
    """
    logger.debug("Loading configuration from %s", path)
    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        section: TomlTable | None = _extract_tool_section(data, path)
        if section is None:
            logger.info(
                "No [%s.%s] table in %s; using defaults",
                Toml.SECTION_TOOL,
                Toml.SECTION_TOOL_STYLEMARK,
                path,
            )
            return MutableRuleConfig(sources=[str(path)])
        data = section
    return MutableRuleConfig.from_toml_dict(data, source=str(path))


def _has_tool_section(path: Path) -> bool:
    try:
        return _extract_tool_section(load_toml_dict(path), path) is not None
    except InvalidConfigError as e:
        # A broken pyproject that never mentions us is not our business.
        logger.debug("Ignoring unreadable %s during discovery: %s", path, e)
        return False


def discover_config_file(start: Path) -> Path | None:
    """Return the nearest configuration file, walking up from ``start``.

    In each directory ``stylemark.toml`` wins over a ``pyproject.toml``; the
    latter only counts when it has a ``[tool.stylemark]`` table.

    Args:
        start: Directory (or file) where discovery starts.

    Returns:
        Path | None: The configuration file to use, or None if none was found.
    """
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent
    while True:
        candidate: Path = cur / STYLEMARK_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        candidate = cur / PYPROJECT_TOML_NAME
        if candidate.is_file() and _has_tool_section(candidate):
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        parent: Path = cur.parent
        if parent == cur:
            return None
        cur = parent


def resolve_config(
    *,
    config_file: Path | None = None,
    discover: bool = True,
    start: Path | None = None,
    overrides: MutableRuleConfig | None = None,
) -> RuleConfig:
    """Merge all configuration layers and freeze the result.

    Layers, lowest to highest precedence: built-in defaults, the discovered
    configuration file, the explicit ``config_file`` and ``overrides``.

    Args:
        config_file: Explicit configuration file (``--config``).
        discover: Whether to look for a configuration file (``--no-config`` disables it).
        start: Directory where discovery starts (defaults to the working directory).
        overrides: Highest-precedence layer (command-line flags).

    Returns:
        RuleConfig: The validated, immutable configuration.

    Raises:
        InvalidConfigError: If a source cannot be loaded or the result is invalid.
    """
    draft: MutableRuleConfig = MutableRuleConfig.from_defaults()
    if discover:
        found: Path | None = discover_config_file(start or Path.cwd())
        explicit: Path | None = config_file.resolve() if config_file is not None else None
        if found is not None and found != explicit:
            draft = draft.merge_with(load_config_file(found))
        elif found is None:
            logger.info("No configuration file found; using defaults")
    if config_file is not None:
        draft = draft.merge_with(load_config_file(config_file))
    if overrides is not None:
        draft = draft.merge_with(overrides)
    return draft.freeze()


def render_config_toml(config: RuleConfig) -> str:
    """Render the effective configuration as a ``stylemark.toml`` document."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    if config.sources:
        doc.add(tomlkit.comment(f"Sources: {', '.join(config.sources)}"))
    else:
        doc.add(tomlkit.comment("Sources: built-in defaults"))
    for section, values in config.to_toml_dict().items():
        table = tomlkit.table()
        for key, value in values.items():
            table.add(key, value)
        doc.add(section, table)
    return tomlkit.dumps(doc)
