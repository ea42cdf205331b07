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

"""Build command hierarchies out of argument parsers and craft-cli dispatchers."""

import argparse
import logging
from typing import Any

import craft_cli

from craft_completion.models import Argument, CommandNode, NodeKind, Option

logger = logging.getLogger(__name__)


def node_from_parser(name: str, parser: argparse.ArgumentParser) -> CommandNode:
    """Describe an argument parser (and its sub-parsers) as a command node.

    Sub-parser aliases are collected in the returned node, as they are valid names
    for its sub-commands.

    :param name: The name the command is invoked with.
    :param parser: The parser filled with the command's arguments.
    """
    logger.debug("Inspecting the arguments of command %r", name)
    kind = NodeKind.options
    options: list[Option] = []
    arguments: list[Argument] = []
    subcommands: dict[str, CommandNode] = {}
    aliases: list[str] = []

    # reason: argparse does not expose the declared actions publicly
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            kind |= NodeKind.subcommands
            # the canonical name is always registered before the aliases
            seen_parsers: set[int] = set()
            for subname, subparser in action._name_parser_map.items():
                if id(subparser) in seen_parsers:
                    aliases.append(subname)
                    continue
                seen_parsers.add(id(subparser))
                subcommands[subname] = node_from_parser(subname, subparser)
        elif action.option_strings:
            option = Option.from_action(action)
            options.append(option)
            # other long forms, like the --no-* flag of BooleanOptionalAction
            options.extend(
                Option(flag, value=option.value)
                for flag in action.option_strings
                if flag.startswith("--") and flag != option.long
            )
        else:
            kind |= NodeKind.arguments
            arguments.append(Argument.from_action(action))

    return CommandNode(
        name,
        options=options,
        arguments=arguments,
        subcommands=subcommands,
        aliases=aliases,
        kind=kind,
    )


def node_from_dispatcher(
    shell_cmd: str, dispatcher: craft_cli.Dispatcher, app_config: dict[str, Any] | None = None
) -> CommandNode:
    """Describe a craft-cli application as a command node.

    The global arguments become the options of the root node, and each command
    becomes a sub-command with the parameters it declares in ``fill_parser``.

    :param shell_cmd: The name of the binary the application is run as.
    :param dispatcher: The populated dispatcher of the application.
    :param app_config: The config the application instantiates its commands with.
    """
    options = [Option.from_global_argument(arg) for arg in dispatcher.global_arguments]

    subcommands: dict[str, CommandNode] = {}
    for name, cmd_cls in dispatcher.commands.items():
        parser = argparse.ArgumentParser(prog=name)
        cmd = cmd_cls(app_config)
        cmd.fill_parser(parser)  # type: ignore[arg-type]
        # reason: the help/error capabilities of _CustomArgumentParser are not needed
        # to inspect the command parameters
        subcommands[name] = node_from_parser(name, parser)

    return CommandNode(
        shell_cmd,
        options=options,
        subcommands=subcommands,
        kind=NodeKind.options | NodeKind.subcommands,
    )
