# topmark:header:start
#
#   project      : StyleMark
#   file         : model.py
#   file_relpath : src/stylemark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `RuleConfig`: an immutable, process-wide snapshot read by the rule engine.
    - `MutableRuleConfig`: a mutable builder used while merging configuration
      layers; it is validated and frozen into a `RuleConfig` once, before any
      worker starts.

Merge policy:
    Layers are merged from lowest to highest precedence (defaults, discovered
    file, explicit ``--config`` file, CLI flags). A value that a layer leaves
    unset (``None``) never overrides a lower layer.

Scope:
    TOML discovery and I/O live in `stylemark.config.loaders`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from stylemark.config.keys import Toml
from stylemark.config.logging import get_logger
from stylemark.core.errors import InvalidConfigError
from stylemark.rules.ids import RuleId

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stylemark.config.logging import StylemarkLogger

logger: StylemarkLogger = get_logger(__name__)

DEFAULT_MAX_LINE_LENGTH: int = 80
# The style guide switched between 2 and 4 spaces across revisions; 4 matches
# the formatter output that most projects check in.
DEFAULT_INDENT_WIDTH: int = 4
MAX_INDENT_WIDTH: int = 8
DEFAULT_INCLUDE_PATTERNS: tuple[str, ...] = ("*.elm",)
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = ("elm-stuff/",)


@dataclass(frozen=True)
class RuleConfig:
    """Immutable runtime configuration.

    Attributes:
        max_line_length (int): Longest allowed line, in characters.
        indent_width (int): Width of one indentation step, in spaces.
        require_trailing_newline (bool): Whether a final line terminator is required.
        require_default_case (bool): Whether case expressions need a catch-all branch.
        disabled_rules (frozenset[str]): Rule ids that are not evaluated.
        include_patterns (tuple[str, ...]): gitwildmatch patterns selecting files
            when walking directories.
        exclude_patterns (tuple[str, ...]): gitwildmatch patterns removing files
            when walking directories.
        sources (tuple[str, ...]): Configuration files that contributed, in merge order.
    """

    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    indent_width: int = DEFAULT_INDENT_WIDTH
    require_trailing_newline: bool = True
    require_default_case: bool = True
    disabled_rules: frozenset[str] = frozenset()
    include_patterns: tuple[str, ...] = DEFAULT_INCLUDE_PATTERNS
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    sources: tuple[str, ...] = ()

    def is_rule_enabled(self, rule_id: str) -> bool:
        """Return True unless ``rule_id`` was disabled."""
        return rule_id not in self.disabled_rules

    def thaw(self) -> MutableRuleConfig:
        """Return a mutable copy of this configuration."""
        return MutableRuleConfig(
            max_line_length=self.max_line_length,
            indent_width=self.indent_width,
            require_trailing_newline=self.require_trailing_newline,
            require_default_case=self.require_default_case,
            disabled_rules=sorted(self.disabled_rules),
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            sources=list(self.sources),
        )

    def to_toml_dict(self) -> dict[str, Any]:
        """Return the configuration in its TOML shape (``stylemark.toml`` layout)."""
        return {
            Toml.SECTION_RULES: {
                Toml.KEY_MAX_LINE_LENGTH: self.max_line_length,
                Toml.KEY_INDENT_WIDTH: self.indent_width,
                Toml.KEY_REQUIRE_TRAILING_NEWLINE: self.require_trailing_newline,
                Toml.KEY_REQUIRE_DEFAULT_CASE: self.require_default_case,
                Toml.KEY_DISABLE: sorted(self.disabled_rules),
            },
            Toml.SECTION_FILES: {
                Toml.KEY_INCLUDE: list(self.include_patterns),
                Toml.KEY_EXCLUDE: list(self.exclude_patterns),
            },
        }


def _get_int(table: Mapping[str, Any], key: str, source: str) -> int | None:
    value: Any = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; ``max_line_length = true`` is a mistake.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(f"'{key}' must be an integer, got {value!r}", source=source)
    return value


def _get_bool(table: Mapping[str, Any], key: str, source: str) -> bool | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise InvalidConfigError(f"'{key}' must be true or false, got {value!r}", source=source)
    return value


def _get_str_list(table: Mapping[str, Any], key: str, source: str) -> list[str] | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidConfigError(f"'{key}' must be a list of strings, got {value!r}", source=source)
    return list(value)


def _get_table(data: Mapping[str, Any], key: str, source: str) -> Mapping[str, Any]:
    value: Any = data.get(key, {})
    if not isinstance(value, Mapping):
        raise InvalidConfigError(f"[{key}] must be a table", source=source)
    return value


def _warn_unknown_keys(table: Mapping[str, Any], known: Iterable[str], where: str) -> None:
    for key in table:
        if key not in known:
            logger.warning("Ignoring unknown configuration key '%s' in %s", key, where)


@dataclass
class MutableRuleConfig:
    """Mutable configuration builder.

    Every field defaults to ``None`` (unset) so that layers can be merged without
    losing information about which layer actually set a value.
    """

    max_line_length: int | None = None
    indent_width: int | None = None
    require_trailing_newline: bool | None = None
    require_default_case: bool | None = None
    disabled_rules: list[str] | None = None
    include_patterns: list[str] | None = None
    exclude_patterns: list[str] | None = None
    sources: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableRuleConfig:
        """Return a builder holding the built-in defaults."""
        return RuleConfig().thaw()

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any], *, source: str) -> MutableRuleConfig:
        """Build a configuration layer from a parsed ``stylemark.toml`` table.

        Unknown sections and keys are ignored with a warning; values of the wrong
        type are rejected.

        Args:
            data: Parsed TOML table (already un-nested from ``[tool.stylemark]``).
            source: Name of the configuration source, used in messages.

        Returns:
            MutableRuleConfig: The layer; unset keys stay ``None``.

        Raises:
            InvalidConfigError: If a value has the wrong type.
        """
        _warn_unknown_keys(data, (Toml.SECTION_RULES, Toml.SECTION_FILES), source)
        rules_tbl: Mapping[str, Any] = _get_table(data, Toml.SECTION_RULES, source)
        files_tbl: Mapping[str, Any] = _get_table(data, Toml.SECTION_FILES, source)
        _warn_unknown_keys(
            rules_tbl,
            (
                Toml.KEY_MAX_LINE_LENGTH,
                Toml.KEY_INDENT_WIDTH,
                Toml.KEY_REQUIRE_TRAILING_NEWLINE,
                Toml.KEY_REQUIRE_DEFAULT_CASE,
                Toml.KEY_DISABLE,
            ),
            f"{source} [{Toml.SECTION_RULES}]",
        )
        _warn_unknown_keys(
            files_tbl, (Toml.KEY_INCLUDE, Toml.KEY_EXCLUDE), f"{source} [{Toml.SECTION_FILES}]"
        )

        draft = cls(
            max_line_length=_get_int(rules_tbl, Toml.KEY_MAX_LINE_LENGTH, source),
            indent_width=_get_int(rules_tbl, Toml.KEY_INDENT_WIDTH, source),
            require_trailing_newline=_get_bool(
                rules_tbl, Toml.KEY_REQUIRE_TRAILING_NEWLINE, source
            ),
            require_default_case=_get_bool(rules_tbl, Toml.KEY_REQUIRE_DEFAULT_CASE, source),
            disabled_rules=_get_str_list(rules_tbl, Toml.KEY_DISABLE, source),
            include_patterns=_get_str_list(files_tbl, Toml.KEY_INCLUDE, source),
            exclude_patterns=_get_str_list(files_tbl, Toml.KEY_EXCLUDE, source),
            sources=[source],
        )
        logger.debug("Configuration layer from %s: %s", source, draft)
        return draft

    def merge_with(self, other: MutableRuleConfig) -> MutableRuleConfig:
        """Return a new builder where values set in ``other`` override this one.

        Disabled rules accumulate across layers instead of replacing each other.

        Args:
            other: Higher-precedence layer.

        Returns:
            MutableRuleConfig: The merged layer.
        """

        def pick(mine: Any, theirs: Any) -> Any:
            return mine if theirs is None else theirs

        return MutableRuleConfig(
            max_line_length=pick(self.max_line_length, other.max_line_length),
            indent_width=pick(self.indent_width, other.indent_width),
            require_trailing_newline=pick(
                self.require_trailing_newline, other.require_trailing_newline
            ),
            require_default_case=pick(self.require_default_case, other.require_default_case),
            disabled_rules=(
                self.disabled_rules
                if other.disabled_rules is None
                else [*(self.disabled_rules or []), *other.disabled_rules]
            ),
            include_patterns=pick(self.include_patterns, other.include_patterns),
            exclude_patterns=pick(self.exclude_patterns, other.exclude_patterns),
            sources=[*self.sources, *other.sources],
        )

    def apply_overrides(
        self,
        *,
        max_line_length: int | None = None,
        indent_width: int | None = None,
        disabled_rules: Iterable[str] | None = None,
        include_patterns: Iterable[str] | None = None,
        exclude_patterns: Iterable[str] | None = None,
    ) -> MutableRuleConfig:
        """Apply command-line overrides in place and return ``self``.

        Disabled rules are appended; include/exclude patterns replace the current
        ones when given.
        """
        if max_line_length is not None:
            self.max_line_length = max_line_length
        if indent_width is not None:
            self.indent_width = indent_width
        if disabled_rules:
            self.disabled_rules = [*(self.disabled_rules or []), *disabled_rules]
        if include_patterns:
            self.include_patterns = list(include_patterns)
        if exclude_patterns:
            self.exclude_patterns = list(exclude_patterns)
        return self

    def freeze(self) -> RuleConfig:
        """Validate and return the immutable `RuleConfig`.

        Unset values fall back to the built-in defaults.

        Raises:
            InvalidConfigError: If a value is out of range or a rule id is unknown.
        """
        defaults = RuleConfig()
        max_line_length: int = (
            defaults.max_line_length if self.max_line_length is None else self.max_line_length
        )
        indent_width: int = (
            defaults.indent_width if self.indent_width is None else self.indent_width
        )
        if max_line_length < 1:
            raise InvalidConfigError(
                f"'{Toml.KEY_MAX_LINE_LENGTH}' must be at least 1, got {max_line_length}"
            )
        if not 1 <= indent_width <= MAX_INDENT_WIDTH:
            raise InvalidConfigError(
                f"'{Toml.KEY_INDENT_WIDTH}' must be between 1 and {MAX_INDENT_WIDTH}, "
                f"got {indent_width}"
            )
        disabled: frozenset[str] = frozenset(self.disabled_rules or ())
        unknown: list[str] = sorted(disabled - RuleId.all_ids())
        if unknown:
            raise InvalidConfigError(
                f"Unknown rule id(s) in '{Toml.KEY_DISABLE}': {', '.join(unknown)} "
                f"(known: {', '.join(sorted(RuleId.all_ids()))})"
            )

        config = RuleConfig(
            max_line_length=max_line_length,
            indent_width=indent_width,
            require_trailing_newline=(
                defaults.require_trailing_newline
                if self.require_trailing_newline is None
                else self.require_trailing_newline
            ),
            require_default_case=(
                defaults.require_default_case
                if self.require_default_case is None
                else self.require_default_case
            ),
            disabled_rules=disabled,
            include_patterns=(
                defaults.include_patterns
                if self.include_patterns is None
                else tuple(self.include_patterns)
            ),
            exclude_patterns=(
                defaults.exclude_patterns
                if self.exclude_patterns is None
                else tuple(self.exclude_patterns)
            ),
            sources=tuple(self.sources),
        )
        logger.trace("Frozen configuration: %s", config)
        return config
