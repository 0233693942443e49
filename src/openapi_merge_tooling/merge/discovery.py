"""Discover spec files under a root directory.

Every regular file counts; files that are not specs fail later in the loader
and are skipped there.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from openapi_merge_tooling.helpers import relative_posix
from openapi_merge_tooling.merge.errors import DiscoveryError

log = logging.getLogger(__name__)


def _raise_walk_error(err: OSError) -> None:
    msg = f"Exception while listing files in spec root directory: {err.filename}"
    raise DiscoveryError(msg) from err


def discover_spec_files(root_dir: Path) -> list[str]:
    """Return all files beneath root_dir as sorted POSIX paths relative to root_dir.

    Raises DiscoveryError if root_dir is missing, not a directory, or any directory
    below it cannot be listed.
    """
    root = Path(root_dir)
    if not root.is_dir():
        msg = f"Spec root directory not found or not a directory: {root}"
        raise DiscoveryError(msg)

    found: list[str] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        for name in filenames:
            found.append(relative_posix(Path(dirpath) / name, root))
    found.sort()
    log.debug("Discovered %d file(s) under %s", len(found), root)
    return found
