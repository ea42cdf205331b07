# Copyright 2025 Canonical Ltd.
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program; if not, write to the Free Software Foundation,
# Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.

"""The command hierarchy consumed by the completion rules generator."""

from __future__ import annotations

import argparse
import dataclasses
import enum
from pathlib import Path
from typing import cast

import craft_cli
from typing_extensions import Self

from craft_completion.errors import InvalidCommandError

CompletionRules = dict[str, list[str]]
"""Command paths (or ``<path>*<flag>`` patterns) mapped to their completion candidates."""


class NodeKind(enum.Flag):
    """What a command node may hold besides its name."""

    plain = 0
    options = enum.auto()
    subcommands = enum.auto()
    arguments = enum.auto()


def _get_usage(action: argparse.Action) -> str:
    """Get the symbolic name of the value an argparse action consumes."""
    metavar = action.metavar
    if isinstance(metavar, tuple):
        metavar = metavar[0]
    if isinstance(metavar, str):
        return metavar
    if not action.option_strings and action.type is Path:
        return "PATH"
    return action.dest.upper()


@dataclasses.dataclass(frozen=True)
class Value:
    """The value an option takes."""

    usage: str
    """The symbolic name of the value, like ``FILE``."""


@dataclasses.dataclass(frozen=True)
class Option:
    """A flag accepted by a command."""

    long: str
    """The long form of the flag, e.g. ``--output``."""

    short: str | None = None
    """The short form of the flag, e.g. ``-o``, if any."""

    value: Value | None = None
    """The value expected after the flag; None for plain switches."""

    @classmethod
    def from_action(cls, action: argparse.Action) -> Self:
        """Convert an argparse optional Action into an Option."""
        flags = cast("list[str]", action.option_strings)
        if not flags:
            raise InvalidCommandError(f"Argument {action.dest!r} is not an option.")

        long = next((flag for flag in flags if flag.startswith("--")), flags[0])
        short = next((flag for flag in flags if flag != long and not flag.startswith("--")), None)
        value = None if action.nargs == 0 else Value(_get_usage(action))
        return cls(long=long, short=short, value=value)

    @classmethod
    def from_global_argument(cls, argument: craft_cli.GlobalArgument) -> Self:
        """Convert a craft-cli GlobalArgument into an Option."""
        value = Value(argument.name.upper()) if argument.type == "option" else None
        return cls(long=argument.long_option, short=argument.short_option, value=value)


@dataclasses.dataclass(frozen=True)
class Argument:
    """A positional parameter of a command."""

    usage: str
    """The symbolic name of the parameter, like ``FILE`` or ``BAR_PATH``."""

    @classmethod
    def from_action(cls, action: argparse.Action) -> Self:
        """Convert an argparse positional Action into an Argument."""
        if action.option_strings:
            raise InvalidCommandError(
                f"Argument {action.dest!r} is an option, not a positional parameter."
            )
        return cls(usage=_get_usage(action))


@dataclasses.dataclass
class CommandNode:
    """A command in the hierarchy, with its options, arguments and sub-commands.

    If ``kind`` is not given it is inferred from what the node holds.
    """

    name: str
    """The identifier in the command line, like "build" or "pack"."""

    options: list[Option] = dataclasses.field(default_factory=list)
    arguments: list[Argument] = dataclasses.field(default_factory=list)
    subcommands: dict[str, CommandNode] = dataclasses.field(default_factory=dict)

    aliases: list[str] = dataclasses.field(default_factory=list)
    """Other names the sub-commands of this node can be invoked with."""

    kind: NodeKind | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidCommandError(f"Bad command name: {self.name!r}.")
        for key, subcommand in self.subcommands.items():
            if key != subcommand.name:
                raise InvalidCommandError(
                    f"Sub-command {subcommand.name!r} of {self.name!r} is registered as {key!r}."
                )

        if self.kind is None:
            kind = NodeKind.plain
            if self.options:
                kind |= NodeKind.options
            if self.subcommands:
                kind |= NodeKind.subcommands
            if self.arguments:
                kind |= NodeKind.arguments
            self.kind = kind

    @property
    def supports_options(self) -> bool:
        return NodeKind.options in cast(NodeKind, self.kind)

    @property
    def supports_subcommands(self) -> bool:
        return NodeKind.subcommands in cast(NodeKind, self.kind)

    @property
    def supports_arguments(self) -> bool:
        return NodeKind.arguments in cast(NodeKind, self.kind)
