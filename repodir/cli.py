#
# repodir - Clone repositories into a tree mirroring their origin
# Copyright (C) 2024 The repodir authors
# vim: expandtab
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

"""Command-line interface for repodir.

    repodir [--base-path PATH] [--wait] [--dry-run] TYPE REPO

clones REPO into PATH/TYPE/<host>/<path>, e.g.::

    $ repodir work git@github.com:jelmer/dulwich.git

clones into ~/code/work/github.com/jelmer/dulwich.
"""

__all__ = ["main"]

import argparse
import logging
import signal
import sys
import types
from collections.abc import Sequence

from . import __version__
from .clone import CloneFailed, CloneSpawnError, spawn_clone
from .config import DEFAULT_BASE_PATH, load_settings
from .location import build_target_path, normalize_location
from .log_utils import default_logging_config

logger = logging.getLogger(__name__)


def signal_int(signal: int, frame: types.FrameType | None) -> None:
    """Handle interrupt signal by exiting.

    Args:
      signal: Signal number
      frame: Current stack frame
    """
    sys.exit(1)


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repodir",
        description="Clone a repository into a directory named after its location",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s " + ".".join(map(str, __version__)),
    )
    parser.add_argument(
        "--base-path",
        type=str,
        help=f"Base path for repositories (default: {DEFAULT_BASE_PATH})",
    )
    parser.add_argument(
        "--wait",
        action="store_true",
        default=None,
        help="Wait for git to finish and report its exit status",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the target directory without cloning",
    )
    parser.add_argument("type", metavar="TYPE", help="Type of repository")
    parser.add_argument("repo", metavar="REPO", help="URL or path of the repository")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the repodir CLI.

    Args:
      argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
      Exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _make_parser().parse_args(argv)

    default_logging_config()

    try:
        settings = load_settings(base_path=args.base_path, wait=args.wait)
    except ValueError as e:
        logger.fatal("Invalid configuration: %s", e)
        return 1

    target = build_target_path(
        settings.base_path, args.type, normalize_location(args.repo)
    )
    logger.debug("Target directory for %s: %s", args.repo, target)

    if args.dry_run:
        sys.stdout.write(target + "\n")
        return 0

    logger.info("Cloning into %s", target)
    try:
        spawn_clone(args.repo, target, wait=settings.wait)
    except (CloneSpawnError, CloneFailed) as e:
        logger.fatal("%s", e)
        return 1
    return 0


def _main() -> None:
    signal.signal(signal.SIGINT, signal_int)

    sys.exit(main())


if __name__ == "__main__":
    _main()
