#
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

"""Shell completion rules for command line applications."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("craft-completion")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "dev"


# names included here only to be exposed as external API
from .errors import CompletionError, InvalidCommandError, InvalidRulesError
from .introspect import node_from_dispatcher, node_from_parser
from .keywords import Placeholder, resolve_usage
from .models import Argument, CommandNode, CompletionRules, NodeKind, Option, Value
from .rules import RulesConfig, build_rules, generate_rules, merge_rules
from .rulesfile import dump_rules, load_rules_file, validate_rules

__all__ = [
    "Argument",
    "CommandNode",
    "CompletionError",
    "CompletionRules",
    "InvalidCommandError",
    "InvalidRulesError",
    "NodeKind",
    "Option",
    "Placeholder",
    "RulesConfig",
    "Value",
    "build_rules",
    "dump_rules",
    "generate_rules",
    "load_rules_file",
    "merge_rules",
    "node_from_dispatcher",
    "node_from_parser",
    "resolve_usage",
    "validate_rules",
]
