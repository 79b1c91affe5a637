# test___main__.py -- Tests for __main__.py
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

"""Tests for __main__.py module entry point."""

import subprocess
import sys

from . import TestCase


class MainModuleTests(TestCase):
    """Tests for the __main__.py module entry point."""

    def test_main_module_help_flag(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "repodir", "--help"],
            capture_output=True,
            text=True,
        )
        self.assertEqual(0, result.returncode)
        self.assertTrue(result.stdout.startswith("usage: repodir"))
        self.assertIn("--base-path", result.stdout)

    def test_main_module_no_args(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "repodir"],
            capture_output=True,
            text=True,
        )
        self.assertEqual(2, result.returncode)
        self.assertTrue(result.stderr.startswith("usage: repodir"))

    def test_main_module_dry_run(self) -> None:
        result = subprocess.run(
            [
                sys.executable,
                "-m",
                "repodir",
                "--base-path",
                "/srv/code",
                "--dry-run",
                "work",
                "git@github.com:/foo/bar.git",
            ],
            capture_output=True,
            text=True,
        )
        self.assertEqual(0, result.returncode)
        self.assertEqual("/srv/code/work/github.com/foo/bar\n", result.stdout)
