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

"""Generate the completion rules for a command hierarchy and merge extra rules in."""

from __future__ import annotations

import logging
import pathlib
from collections.abc import Sequence
from typing import NamedTuple

from craft_completion.keywords import resolve_usage
from craft_completion.models import CommandNode, CompletionRules
from craft_completion.rulesfile import load_rules_file, validate_rules

logger = logging.getLogger(__name__)


class RulesConfig(NamedTuple):
    """Tunables for the generated completion rules."""

    short_flags: bool = True
    """Whether short flags (e.g. ``-q``) are offered too, both as candidates and as
      patterns to complete their values (defaults to True)."""


def generate_rules(
    node: CommandNode,
    path_prefix: Sequence[str] = (),
    *,
    config: RulesConfig = RulesConfig(),  # noqa: B008 (immutable default)
) -> CompletionRules:
    """Generate the completion rules for a command and all its sub-commands.

    :param node: The command to generate the rules for.
    :param path_prefix: The names of the commands above ``node`` in the hierarchy.
    :param config: How the rules should be generated.
    :return: The rules keyed by command path, without any empty entry.
    """
    command_path = " ".join([*path_prefix, node.name])
    logger.debug("Generating completion rules for %r", command_path)

    candidates: list[str] = []
    rules: CompletionRules = {command_path: candidates}

    if node.supports_options:
        for option in node.options:
            flags = [option.long]
            if option.short and config.short_flags:
                flags.append(option.short)
            candidates.extend(flags)

            if option.value is None:
                continue
            keywords = resolve_usage(option.value.usage)
            if keywords:
                for flag in flags:
                    rules[f"{command_path}*{flag}"] = list(keywords)

    if node.supports_subcommands:
        subcommand_prefix = [*path_prefix, node.name]
        for name, subcommand in node.subcommands.items():
            candidates.append(name)
            rules.update(generate_rules(subcommand, subcommand_prefix, config=config))
        candidates.extend(node.aliases)
    elif node.supports_arguments and node.arguments:
        # only the first positional is completed
        candidates.extend(resolve_usage(node.arguments[0].usage))

    # filter out the commands without options, sub-commands or argument hints
    return {pattern: values for pattern, values in rules.items() if values}


def merge_rules(
    generated: dict[str, list[str]], overrides: dict[str, list[str]]
) -> CompletionRules:
    """Merge extra completion rules into the generated ones.

    Candidates for a command path already present are appended after the generated
    ones (nothing is deduplicated); new command paths are added at the end, in the
    order found in ``overrides``. Neither of the given tables is modified.

    :param generated: The rules produced by :func:`generate_rules`.
    :param overrides: The extra rules to merge in.
    :return: A new table with the merged rules.
    """
    merged = validate_rules(generated)
    for pattern, extra in validate_rules(overrides).items():
        merged.setdefault(pattern, []).extend(extra)
    return merged


def build_rules(
    node: CommandNode,
    *,
    overrides: dict[str, list[str]] | None = None,
    overrides_file: pathlib.Path | None = None,
    config: RulesConfig = RulesConfig(),  # noqa: B008 (immutable default)
) -> CompletionRules:
    """Build the final completion rules for a command line application.

    :param node: The root command of the application.
    :param overrides: Extra rules to merge into the generated ones.
    :param overrides_file: A YAML file with extra rules, merged before ``overrides``.
    :param config: How the rules should be generated.
    :return: The completion rules, ready to be rendered into a shell script.
    """
    rules = generate_rules(node, config=config)

    if overrides_file is not None:
        logger.debug("Merging completion rules from %r", str(overrides_file))
        rules = merge_rules(rules, load_rules_file(overrides_file))
    if overrides is not None:
        rules = merge_rules(rules, overrides)

    logger.debug("Built %d completion rules for %r", len(rules), node.name)
    return rules
