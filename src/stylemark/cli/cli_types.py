# topmark:header:start
#
#   project      : StyleMark
#   file         : cli_types.py
#   file_relpath : src/stylemark/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the StyleMark CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import click
from click.shell_completion import CompletionItem

if TYPE_CHECKING:
    from collections.abc import Mapping

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Accept the value of an ``Enum`` member, case-insensitively.

    ``--format JSON`` and ``--format json`` both yield ``OutputFormat.JSON``.
    Members are matched on their ``value``, which must be a string.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.by_value: Mapping[str, E] = {str(m.value).lower(): m for m in enum_cls}

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> E:
        if isinstance(value, self.enum_cls):
            return value
        member: E | None = self.by_value.get(str(value).lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.by_value)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self, ctx: click.Context, param: click.Parameter, incomplete: str
    ) -> list[CompletionItem]:
        prefix: str = incomplete.lower()
        return [CompletionItem(v) for v in self.by_value if v.startswith(prefix)]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
