# log_utils.py -- Logging utilities for repodir
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

"""Logging utilities for repodir.

The repodir modules can be used as a library, so the package logger gets a
null handler and nothing is printed unless the application configures
logging. The command-line interface does so with
:func:`default_logging_config`, which honors git's GIT_TRACE variable.
"""

import logging
import os
import sys
from collections.abc import Mapping

getLogger = logging.getLogger

TRACE_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

_NULL_HANDLER = logging.NullHandler()
_REPODIR_LOGGER = getLogger("repodir")
_REPODIR_LOGGER.addHandler(_NULL_HANDLER)


def _get_trace_target(env: Mapping[str, str] | None = None) -> str | int | None:
    """Get the trace target from the GIT_TRACE environment variable.

    Returns:
      - None if tracing is disabled
      - 2 for stderr ("1", "2" or "true")
      - an absolute path to a file or directory
    """
    if env is None:
        env = os.environ
    value = env.get("GIT_TRACE", "")
    if value.lower() in ("1", "2", "true"):
        return 2
    if os.path.isabs(value):
        return value
    # "", "0", "false" and anything git doesn't understand either
    return None


def _configure_logging_from_trace(env: Mapping[str, str] | None = None) -> bool:
    """Configure logging based on GIT_TRACE.

    Returns: True if tracing was configured, False otherwise
    """
    target = _get_trace_target(env)
    if target is None:
        return False
    if target == 2:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format=TRACE_FORMAT)
        return True
    assert isinstance(target, str)
    if os.path.isdir(target):
        target = os.path.join(target, f"trace.{os.getpid()}")
    try:
        logging.basicConfig(
            level=logging.DEBUG, filename=target, filemode="a", format=TRACE_FORMAT
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Failed to open GIT_TRACE file {target}: {e}\n")
        return False
    return True


def default_logging_config(env: Mapping[str, str] | None = None) -> None:
    """Set up logging for the repodir command.

    Traces at debug level when GIT_TRACE asks for it, otherwise writes
    plain informational messages to stderr.
    """
    remove_null_handler()
    if not _configure_logging_from_trace(env):
        logging.basicConfig(level=logging.INFO, stream=sys.stderr, format="%(message)s")


def remove_null_handler() -> None:
    """Remove the null handler from the repodir logger."""
    _REPODIR_LOGGER.removeHandler(_NULL_HANDLER)
