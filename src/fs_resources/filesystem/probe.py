"""Single-path queries and the pre-condition checks built on them.

Every query re-reads the live filesystem; nothing is cached. By default a
symbolic link is reported as a link, never as what it points at, so a link
to a missing target still exists and a link to a directory is not a
directory. Operands named directly by a caller (a listing root, a
destination directory, a parent) are resolved with ``follow_links=True``.
"""

import os
import stat
from pathlib import Path
from typing import Optional, Union

from fs_resources.core import get_logger
from fs_resources.core.exceptions import (
    NotADirectoryPathError,
    ParentNotFoundError,
    PathExistsError,
    PathNotFoundError,
    ResourceIOError,
)

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


def _stat(path: Path, follow_links: bool = False) -> Optional[os.stat_result]:
    """Return the stat result for path, or None when nothing is there.

    Raises:
        ResourceIOError: If the query itself fails (e.g. permission denied)
    """
    try:
        return os.stat(path, follow_symlinks=follow_links)
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as e:
        error_msg = f"Failed to query '{path}': {e}"
        logger.error(error_msg, path=str(path), error=str(e))
        raise ResourceIOError(error_msg) from e


def exists(path: PathLike) -> bool:
    """Check whether anything, including a dangling link, is present at path."""
    return _stat(Path(path)) is not None


def is_directory(path: PathLike, follow_links: bool = False) -> bool:
    """Check whether path is a directory.

    Args:
        path: Path to check
        follow_links: Treat a link to a directory as a directory

    Returns:
        True if path is a directory
    """
    st = _stat(Path(path), follow_links)
    return st is not None and stat.S_ISDIR(st.st_mode)


def is_symbolic_link(path: PathLike) -> bool:
    """Check whether path is a symbolic link."""
    st = _stat(Path(path))
    return st is not None and stat.S_ISLNK(st.st_mode)


def is_hidden(path: PathLike) -> bool:
    """Check whether path is hidden by the leading-dot convention."""
    name = Path(path).name
    return name.startswith(".") and name not in (".", "..")


def require_exists(path: Path) -> None:
    """Raise PathNotFoundError unless path exists."""
    if not exists(path):
        raise PathNotFoundError(f"'{path}' could not be found")


def require_directory(path: Path) -> None:
    """Raise unless path exists and resolves to a directory.

    Raises:
        PathNotFoundError: If path does not exist
        NotADirectoryPathError: If path exists but is not a directory
    """
    require_exists(path)
    if not is_directory(path, follow_links=True):
        raise NotADirectoryPathError(f"'{path}' is not a directory")


def require_absent(path: Path) -> None:
    """Raise PathExistsError if path exists."""
    if exists(path):
        raise PathExistsError(f"'{path}' exists")


def require_parent(path: Path) -> None:
    """Raise ParentNotFoundError unless the parent of path is a directory."""
    parent = path.parent
    if not is_directory(parent, follow_links=True):
        raise ParentNotFoundError(
            f"parent directory '{parent}' of '{path}' could not be found"
        )
