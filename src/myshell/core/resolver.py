"""Search-path lookup for executables."""

from __future__ import annotations

import os
import stat
from collections.abc import Mapping

PATH_SEPARATOR = ":"
EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def search_path_from_env(environ: Mapping[str, str] | None = None) -> list[str]:
    """Read ``PATH`` now and split it into directories, skipping empty entries."""

    env = os.environ if environ is None else environ
    return [entry for entry in env.get("PATH", "").split(PATH_SEPARATOR) if entry]


def is_executable(path: str) -> bool:
    try:
        info = os.stat(path)
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(info.st_mode) and bool(info.st_mode & EXECUTABLE_BITS)


def resolve(name: str, search_path: list[str]) -> str | None:
    """Return the first executable ``directory/name`` in path order.

    A name containing a slash is checked as given and never searched.
    """

    if not name:
        return None
    if "/" in name:
        return name if is_executable(name) else None

    for directory in search_path:
        candidate = f"{directory.rstrip('/')}/{name}"
        if is_executable(candidate):
            return candidate
    return None
