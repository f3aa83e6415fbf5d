# topmark:header:start
#
#   project      : ShebangScan
#   file         : cli_types.py
#   file_relpath : src/shebangscan/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for ShebangScan commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable).
      NDJSON: One JSON object per line (machine-readable).
      MARKDOWN: A Markdown document with tables.

    Notes:
      - Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"

    @property
    def is_machine(self) -> bool:
        """Whether this is a JSON or NDJSON format."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.choices: list[str] = [str(member.value) for member in enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string (case-insensitive) to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {str(member.value).lower(): member for member in self.enum_cls}
        key: str = str(value).lower()
        if key in lookup:
            return lookup[key]
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_SHEBANGSCAN_COMPLETE=bash_source shebangscan)"`
        Zsh: `eval "$(_SHEBANGSCAN_COMPLETE=zsh_source shebangscan)"`
        """
        from click.shell_completion import CompletionItem

        prefix: str = (incomplete or "").lower()
        return [CompletionItem(choice) for choice in self.choices if choice.lower().startswith(prefix)]
