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

"""Read and write completion rules as YAML.

The format is the one used by the `completely` tool: a mapping of command paths
(or ``<path>*<flag>`` patterns) to the list of candidates to offer there::

    app update:
    - --quiet
    - $(app list)
    app*--output:
    - <file>
"""

import pathlib
from collections.abc import Mapping, Sequence
from typing import Annotated

import pydantic
import yaml

from craft_completion.errors import InvalidRulesError

_RULES_ADAPTER = pydantic.TypeAdapter(dict[str, list[str]])
_RULES_FILE_ADAPTER = pydantic.TypeAdapter(
    dict[str, Annotated[list[str], pydantic.Field(min_length=1)]]
)


def validate_rules(rules: object) -> dict[str, list[str]]:
    """Check that a rule table maps command paths to lists of candidates.

    :param rules: The table to check.
    :return: A copy of the table.
    """
    try:
        validated = _RULES_ADAPTER.validate_python(rules, strict=True)
    except pydantic.ValidationError as exc:
        raise InvalidRulesError(
            "Bad completion rules: expected a mapping of command paths to lists of candidates.",
            details=str(exc),
        ) from exc
    return {pattern: list(candidates) for pattern, candidates in validated.items()}


def load_rules_file(path: pathlib.Path) -> dict[str, list[str]]:
    """Load completion rules from a YAML file.

    An empty file holds no rules.

    :param path: The file to read.
    :return: The rules, in the order they appear in the file.
    """
    try:
        content = path.read_text()
    except OSError as exc:
        raise InvalidRulesError(
            f"Cannot read completion rules file {str(path)!r}.", details=str(exc)
        ) from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise InvalidRulesError(
            f"Invalid YAML in completion rules file {str(path)!r}.", details=str(exc)
        ) from exc

    if data is None:
        return {}

    try:
        return _RULES_FILE_ADAPTER.validate_python(data, strict=True)
    except pydantic.ValidationError as exc:
        raise InvalidRulesError(
            f"Bad completion rules in file {str(path)!r}.", details=str(exc)
        ) from exc


def dump_rules(rules: Mapping[str, Sequence[str]]) -> str:
    """Serialize completion rules to YAML, keeping their order."""
    return yaml.safe_dump(
        {pattern: list(candidates) for pattern, candidates in rules.items()},
        sort_keys=False,
        default_flow_style=False,
    )
