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

"""Error classes."""

__all__ = [
    "CompletionError",
    "InvalidCommandError",
    "InvalidRulesError",
]

from craft_cli import CraftError


class CompletionError(CraftError):
    """Base class for all the errors raised while building completion rules."""


class InvalidCommandError(CompletionError):
    """A command node in the hierarchy is malformed."""

    def __init__(self, message: str, *, details: str | None = None) -> None:
        super().__init__(
            message,
            details=details,
            resolution="Ensure every command in the hierarchy has a non-empty name.",
            retcode=2,
        )


class InvalidRulesError(CompletionError):
    """A completion rule table (or the file it was read from) has the wrong shape."""

    def __init__(self, message: str, *, details: str | None = None) -> None:
        super().__init__(
            message,
            details=details,
            resolution=(
                "Completion rules must map each command path to a list of candidates, "
                "e.g. 'app update: [--quiet]'."
            ),
            retcode=2,
        )
