# config.py -- Settings for repodir
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

"""Settings for repodir.

Settings are looked up, in order, in explicit arguments (usually command-line
options), the environment and the user's git configuration::

    [repodir]
        basePath = ~/src
        wait = true
"""

__all__ = [
    "BASE_PATH_ENV",
    "CONFIG_SECTION",
    "DEFAULT_BASE_PATH",
    "Settings",
    "load_settings",
]

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dulwich.config import Config, StackedConfig

logger = logging.getLogger(__name__)

DEFAULT_BASE_PATH = "~/code"
BASE_PATH_ENV = "REPODIR_BASE_PATH"
CONFIG_SECTION = (b"repodir",)


@dataclass(frozen=True)
class Settings:
    """Resolved settings."""

    base_path: str
    wait: bool = False


def _config_base_path(config: Config) -> str | None:
    try:
        value = config.get(CONFIG_SECTION, b"basePath")
    except KeyError:
        return None
    return os.fsdecode(value)


def load_settings(
    base_path: str | None = None,
    wait: bool | None = None,
    config: Config | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve settings.

    Args:
      base_path: Explicit base path, overriding everything else
      wait: Explicit wait setting, overriding the git configuration
      config: Git configuration; defaults to the user and system config
      environ: Environment variables (defaults to os.environ)
    Returns: Settings, with "~" in the base path expanded
    """
    if environ is None:
        environ = os.environ
    if config is None:
        config = StackedConfig.default()

    if base_path is None:
        base_path = environ.get(BASE_PATH_ENV) or None
        if base_path is not None:
            logger.debug("Base path from %s: %s", BASE_PATH_ENV, base_path)
    if base_path is None:
        base_path = _config_base_path(config)
        if base_path is not None:
            logger.debug("Base path from repodir.basePath: %s", base_path)
    if base_path is None:
        base_path = DEFAULT_BASE_PATH

    if wait is None:
        wait = config.get_boolean(CONFIG_SECTION, b"wait", False)

    return Settings(base_path=os.path.expanduser(base_path), wait=wait)
