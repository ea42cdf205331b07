#
# Copyright 2021-2025 Canonical Ltd.
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

"""Generic fixtures for the whole test suite."""

import logging
import textwrap

import pytest


@pytest.fixture
def rules_file(tmp_path):
    """Provide a helper to write a YAML completion rules file."""

    def _write(content: str):
        path = tmp_path / "completion.yaml"
        path.write_text(textwrap.dedent(content))
        return path

    return _write


@pytest.fixture
def debug_logs(caplog):
    """Capture the debug messages logged by craft_completion."""
    caplog.set_level(logging.DEBUG, logger="craft_completion")
    return caplog
