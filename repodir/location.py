# location.py -- Map repository locations to local paths
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

"""Map repository locations to relative paths.

A location is whatever a user would pass to ``git clone``: a URL with any
scheme, an rsync/scp style ``[user@]host:path`` reference, or a plain path.
Structured locations are turned into ``host/path`` so that clones end up in a
tree that mirrors where they came from::

    https://github.com/jelmer/dulwich.git  ->  github.com/jelmer/dulwich.git
    git@github.com:jelmer/dulwich.git      ->  github.com/jelmer/dulwich.git

Anything else is used as-is.
"""

__all__ = [
    "LOCATION_PARSERS",
    "build_target_path",
    "normalize_location",
    "parse_scp_location",
    "parse_url_location",
    "strip_git_suffix",
]

import logging
import os
import re
from collections.abc import Callable, Sequence
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

# The host needs at least two characters, so that drive letters such as
# "C:\foo" are never taken for a host.
_SCP_LOCATION_RE = re.compile(r"(?:.+@)?(\w[\w\-\.]+):(.+)")

GIT_SUFFIX = ".git"


def _netloc_host(netloc: str) -> str:
    """Strip userinfo and port from a netloc, keeping the host as written."""
    host = netloc.rpartition("@")[2]
    if host.startswith("[") and "]" in host:
        # IPv6 literal; keep the brackets
        return host[: host.index("]") + 1]
    return host.partition(":")[0]


def parse_url_location(location: str) -> str | None:
    """Parse a URL-style location.

    Any scheme is accepted, but the URL has to be hierarchical: either
    ``scheme://host/path`` or ``scheme:/path``. ``foo:bar`` has a valid
    scheme but is left to :func:`parse_scp_location`.

    Args:
      location: Location to parse
    Returns: ``host`` followed by the URL path without a leading slash, or
      None if location is not a URL
    """
    try:
        parsed = urlsplit(location)
    except ValueError:
        # e.g. an unbalanced IPv6 literal
        return None
    if not parsed.scheme:
        return None
    if not parsed.netloc and not parsed.path.startswith("/"):
        return None
    return (_netloc_host(parsed.netloc) + parsed.path).lstrip("/")


def parse_scp_location(location: str) -> str | None:
    """Parse an scp-style location, e.g. ``git@github.com:jelmer/dulwich``.

    Args:
      location: Location to parse
    Returns: ``host/path`` without a leading slash, or None if location
      does not contain a ``host:path`` reference
    """
    m = _SCP_LOCATION_RE.search(location)
    if m is None:
        return None
    host, path = m.groups()
    return f"{host}/{path.lstrip('/')}".lstrip("/")


LOCATION_PARSERS: Sequence[Callable[[str], str | None]] = (
    parse_url_location,
    parse_scp_location,
)


def normalize_location(location: str) -> str:
    """Convert a repository location into a relative path.

    The parsers in LOCATION_PARSERS are tried in order and the first one
    that recognizes the location wins. If none does, the location itself
    is returned.

    Note that a trailing ".git" is kept; see :func:`build_target_path`.

    Args:
      location: URL, scp-style reference or path of a repository
    Returns: relative path segment for the repository
    """
    for parser in LOCATION_PARSERS:
        path = parser(location)
        if path is not None:
            logger.debug("%s recognized %r as %r", parser.__name__, location, path)
            return path
    logger.debug("Using location %r verbatim", location)
    return location


def strip_git_suffix(path: str) -> str:
    """Remove trailing ".git" suffixes from a path."""
    while path.endswith(GIT_SUFFIX):
        path = path[: -len(GIT_SUFFIX)]
    return path


def build_target_path(base_path: str, category: str, segment: str) -> str:
    """Determine the directory a repository should be cloned into.

    Args:
      base_path: Directory under which all clones live; "~" is expanded
      category: Grouping directory directly below base_path
      segment: Normalized location, as returned by normalize_location
    Returns: base_path/category/segment, without a trailing ".git"
    """
    # An absolute segment would make os.path.join discard base and category.
    segment = strip_git_suffix(segment).lstrip("/" + os.sep)
    return os.path.join(os.path.expanduser(base_path), category, segment)
