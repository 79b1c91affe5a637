# clone.py -- Run git clone for a repository location
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

"""Clone handling.

The actual cloning is left to the system git. By default the git process is
started and left alone: repodir neither waits for it nor looks at its exit
status.
"""

__all__ = [
    "CloneFailed",
    "CloneSpawnError",
    "clone_command",
    "spawn_clone",
]

import logging
import subprocess
from collections.abc import Sequence

from dulwich.client import find_git_command

logger = logging.getLogger(__name__)


class CloneSpawnError(Exception):
    """The git executable could not be started."""

    def __init__(self, argv: Sequence[str], error: OSError) -> None:
        """Initialize a CloneSpawnError.

        Args:
          argv: Command line that failed to start
          error: Error raised while starting it
        """
        self.argv = list(argv)
        self.error = error
        super().__init__(f"Unable to run {argv[0]}: {error.strerror or error}")


class CloneFailed(Exception):
    """git clone exited with a non-zero status."""

    def __init__(self, argv: Sequence[str], returncode: int) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"{' '.join(argv)} exited with status {returncode}")


def clone_command(
    location: str, target: str, git_command: Sequence[str] | None = None
) -> list[str]:
    """Build the command line for cloning location into target.

    Args:
      location: Repository location, passed to git unmodified
      target: Directory to clone into
      git_command: Command to run git; defaults to the system git
    Returns: argument list suitable for subprocess.Popen
    """
    if git_command is None:
        git_command = find_git_command()
    return [*git_command, "clone", location, target]


def spawn_clone(
    location: str,
    target: str,
    wait: bool = False,
    git_command: Sequence[str] | None = None,
) -> "subprocess.Popen[bytes]":
    """Start cloning a repository.

    Args:
      location: Repository location, passed to git unmodified
      target: Directory to clone into
      wait: Wait for git to finish and check its exit status
      git_command: Command to run git; defaults to the system git
    Returns: the git process
    Raises:
      CloneSpawnError: if git could not be started
      CloneFailed: if wait is set and git exited with a non-zero status
    """
    argv = clone_command(location, target, git_command)
    logger.debug("Running %r", argv)
    try:
        proc = subprocess.Popen(argv)
    except OSError as e:
        raise CloneSpawnError(argv, e) from e
    if wait:
        returncode = proc.wait()
        if returncode != 0:
            raise CloneFailed(argv, returncode)
    return proc
