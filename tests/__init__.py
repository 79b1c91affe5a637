# __init__.py -- The tests for repodir
# Copyright (C) 2024 The repodir authors
#
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later
# repodir is dual-licensed under the Apache License, Version 2.0 and the GNU
# General Public License as published by the Free Software Foundation; version 2.0
# or (at your option) any later version. You can redistribute it and/or
# modify it under the terms of either of these two licenses.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# You should have received a copy of the licenses; if not, see
# <http://www.gnu.org/licenses/> for a copy of the GNU General Public License
# and <http://www.apache.org/licenses/LICENSE-2.0> for a copy of the Apache
# License, Version 2.0.
#

"""Tests for repodir."""

__all__ = ["TestCase", "test_suite"]

import os
import unittest
from unittest import TestCase as _TestCase

_ISOLATED_ENV = {
    "HOME": "/nonexistent",
    "XDG_CONFIG_HOME": "/nonexistent/.config",
    "GIT_CONFIG_NOSYSTEM": "1",
}
_CLEARED_ENV = ("GIT_CONFIG_GLOBAL", "GIT_CONFIG_SYSTEM", "GIT_TRACE", "REPODIR_BASE_PATH")


class TestCase(_TestCase):
    """TestCase that keeps the user's configuration out of the way."""

    def setUp(self) -> None:
        super().setUp()
        self.overrideEnv(_ISOLATED_ENV)
        for name in _CLEARED_ENV:
            self.overrideEnv({name: None})

    def overrideEnv(self, values: dict[str, str | None]) -> None:
        """Set environment variables for the duration of the test.

        Args:
          values: Mapping of variable names to values; None unsets
        """
        for name, value in values.items():
            self.addCleanup(self._restoreEnv, name, os.environ.get(name))
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value

    @staticmethod
    def _restoreEnv(name: str, value: str | None) -> None:
        if value is None:
            os.environ.pop(name, None)
        else:
            os.environ[name] = value


def self_test_suite() -> unittest.TestSuite:
    names = [
        "__main__",
        "cli",
        "clone",
        "config",
        "location",
        "log_utils",
    ]
    module_names = ["tests.test_" + name for name in names]
    loader = unittest.TestLoader()
    return loader.loadTestsFromNames(module_names)


def test_suite() -> unittest.TestSuite:
    return self_test_suite()
