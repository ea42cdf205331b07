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

"""Tests for the command hierarchy models."""

import argparse
import pathlib

import pytest
from craft_cli import GlobalArgument

from craft_completion.errors import InvalidCommandError
from craft_completion.models import Argument, CommandNode, NodeKind, Option, Value

# -- tests for the command node


@pytest.mark.parametrize(
    ("node", "expected"),
    [
        pytest.param(CommandNode("test"), NodeKind.plain, id="plain"),
        pytest.param(CommandNode("test", options=[Option("--foo")]), NodeKind.options, id="opts"),
        pytest.param(
            CommandNode("test", arguments=[Argument("FILE")]), NodeKind.arguments, id="args"
        ),
        pytest.param(
            CommandNode(
                "test", options=[Option("--foo")], subcommands={"bar": CommandNode("bar")}
            ),
            NodeKind.options | NodeKind.subcommands,
            id="opts-and-subcommands",
        ),
    ],
)
def test_node_kind_inferred(node, expected):
    assert node.kind == expected


def test_node_kind_explicit():
    """An explicit kind is kept even if the node holds nothing."""
    node = CommandNode("test", kind=NodeKind.options | NodeKind.subcommands)

    assert node.supports_options
    assert node.supports_subcommands
    assert not node.supports_arguments


def test_node_kind_capabilities():
    node = CommandNode("test", arguments=[Argument("FILE")], kind=NodeKind.arguments)

    assert not node.supports_options
    assert not node.supports_subcommands
    assert node.supports_arguments


@pytest.mark.parametrize("name", ["", None, 42])
def test_node_bad_name(name):
    with pytest.raises(InvalidCommandError) as exc_info:
        CommandNode(name)

    assert str(exc_info.value) == f"Bad command name: {name!r}."
    assert exc_info.value.retcode == 2


def test_node_subcommand_registered_with_other_name():
    with pytest.raises(InvalidCommandError) as exc_info:
        CommandNode("app", subcommands={"foo": CommandNode("bar")})

    assert str(exc_info.value) == "Sub-command 'bar' of 'app' is registered as 'foo'."


# -- tests for the options and arguments built from argparse


def _get_action(*args, **kwargs) -> argparse.Action:
    parser = argparse.ArgumentParser(add_help=False)
    return parser.add_argument(*args, **kwargs)


@pytest.mark.parametrize(
    ("args", "kwargs", "expected"),
    [
        pytest.param(
            ["--all", "-a"], {"action": "store_true"}, Option("--all", "-a"), id="switch"
        ),
        pytest.param(["-a", "--all"], {"action": "count"}, Option("--all", "-a"), id="short-first"),
        pytest.param(["-v"], {"action": "store_true"}, Option("-v"), id="only-short"),
        pytest.param(
            ["--output"], {}, Option("--output", value=Value("OUTPUT")), id="default-metavar"
        ),
        pytest.param(
            ["--output", "-o"],
            {"metavar": "OUTPUT_FILE"},
            Option("--output", "-o", Value("OUTPUT_FILE")),
            id="metavar",
        ),
        pytest.param(
            ["--size"],
            {"nargs": 2, "metavar": ("WIDTH", "HEIGHT")},
            Option("--size", value=Value("WIDTH")),
            id="tuple-metavar",
        ),
        pytest.param(
            ["--source"],
            {"type": pathlib.Path},
            Option("--source", value=Value("SOURCE")),
            id="path-option",
        ),
    ],
)
def test_option_from_action(args, kwargs, expected):
    assert Option.from_action(_get_action(*args, **kwargs)) == expected


def test_option_from_positional_action():
    with pytest.raises(InvalidCommandError):
        Option.from_action(_get_action("path"))


@pytest.mark.parametrize(
    ("args", "kwargs", "expected"),
    [
        pytest.param(["src"], {}, Argument("SRC"), id="default"),
        pytest.param(["src"], {"metavar": "SRC_DIR"}, Argument("SRC_DIR"), id="metavar"),
        pytest.param(["src"], {"type": pathlib.Path}, Argument("PATH"), id="path-type"),
        pytest.param(
            ["src"], {"type": pathlib.Path, "metavar": "FILE"}, Argument("FILE"), id="path-metavar"
        ),
    ],
)
def test_argument_from_action(args, kwargs, expected):
    assert Argument.from_action(_get_action(*args, **kwargs)) == expected


def test_argument_from_optional_action():
    with pytest.raises(InvalidCommandError):
        Argument.from_action(_get_action("--foo"))


# -- tests for the options built from craft-cli global arguments


def test_option_from_global_flag():
    argument = GlobalArgument("quiet", "flag", "-q", "--quiet", "Be quiet")

    assert Option.from_global_argument(argument) == Option("--quiet", "-q")


def test_option_from_global_option():
    argument = GlobalArgument("project_dir", "option", None, "--project-dir", "Where")

    assert Option.from_global_argument(argument) == Option(
        "--project-dir", value=Value("PROJECT_DIR")
    )
