"""Recursive directory enumeration.

``list_entries`` is the only enumeration primitive in the package: size
computation, removal and copying all walk trees through it so that hidden
and link filtering behave the same everywhere.
"""

import sys
from pathlib import Path

from fs_resources.core import get_logger
from fs_resources.core.exceptions import ResourceIOError
from fs_resources.filesystem.probe import (
    PathLike,
    is_directory,
    is_hidden,
    is_symbolic_link,
    require_directory,
)
from fs_resources.schemas import ListingOptions

logger = get_logger(__name__)

UNLIMITED_DEPTH = sys.maxsize


def _keep(entry: Path, options: ListingOptions) -> bool:
    """Apply the visibility and link filters to a single entry."""
    if is_hidden(entry) and not options.include_hidden:
        return False
    if is_symbolic_link(entry) and not options.include_symbolic_links:
        return False
    return True


def _children(path: Path) -> list[Path]:
    """Direct children of path in native directory order."""
    try:
        return list(path.iterdir())
    except OSError as e:
        error_msg = f"Failed to read directory '{path}': {e}"
        logger.error(error_msg, path=str(path), error=str(e))
        raise ResourceIOError(error_msg) from e


def _walk(root: Path, depth: int, options: ListingOptions) -> list[Path]:
    """Pre-order walk driven by an explicit stack of child iterators.

    Tree depth is bounded by the filesystem, not by the interpreter's
    recursion limit.
    """
    entries: list[Path] = []
    if depth < 1:
        return entries

    stack = [(iter(_children(root)), depth)]
    while stack:
        children, remaining = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            continue
        if not _keep(child, options):
            continue
        entries.append(child)
        # Links are never descended into, even when they are listed
        if remaining > 1 and is_directory(child):
            stack.append((iter(_children(child)), remaining - 1))

    return entries


def list_entries(
    path: PathLike,
    depth: int = 1,
    options: ListingOptions | None = None,
) -> list[Path]:
    """List the entries below a directory, parents before their children.

    Depth counts levels below the root: ``depth=1`` yields direct children
    only, ``depth=0`` (or less) yields nothing. The root itself is never
    part of the result. Order within a directory is the native order of the
    filesystem; sort the result if a deterministic order is required.

    Args:
        path: Directory to enumerate
        depth: Number of levels to descend, UNLIMITED_DEPTH for the whole tree
        options: Hidden/link filters, ListingOptions() when omitted

    Returns:
        Entries in pre-order (depth-first, parent before children)

    Raises:
        PathNotFoundError: If path does not exist
        NotADirectoryPathError: If path is not a directory
        ResourceIOError: If a directory cannot be read
    """
    root = Path(path)
    options = options or ListingOptions()

    require_directory(root)

    entries = _walk(root, depth, options)
    logger.debug(
        "Directory entries listed",
        path=str(root),
        depth=depth,
        include_hidden=options.include_hidden,
        include_symbolic_links=options.include_symbolic_links,
        entry_count=len(entries),
    )
    return entries
