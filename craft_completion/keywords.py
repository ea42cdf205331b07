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

"""Infer completion placeholders from value usage names."""

import enum


class Placeholder(enum.Enum):
    """A completion directive understood by the shell script renderer."""

    file = "<file>"
    directory = "<directory>"
    hostname = "<hostname>"
    user = "<user>"


# Checked in order; a usage matches a family if it is the name itself or ends
# with an underscore followed by the name (so "PROFILE" is not a "FILE").
_USAGE_FAMILIES: tuple[tuple[str, tuple[Placeholder, ...]], ...] = (
    ("FILE", (Placeholder.file,)),
    ("DIR", (Placeholder.directory,)),
    ("PATH", (Placeholder.file, Placeholder.directory)),
    ("HOST", (Placeholder.hostname,)),
    ("USER", (Placeholder.user,)),
)


def resolve_usage(usage: str) -> list[str]:
    """Get the placeholders to offer for a value with the given usage name.

    :param usage: The symbolic name of the value, like ``FILE`` or ``OUTPUT_DIR``.
    :return: The placeholder keywords (possibly none) in a fixed order.
    """
    for family, placeholders in _USAGE_FAMILIES:
        if usage == family or usage.endswith(f"_{family}"):
            return [placeholder.value for placeholder in placeholders]
    return []
