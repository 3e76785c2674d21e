"""Remove, create, copy, move and rename resources.

Every operation checks its pre-conditions before it changes anything and
raises the matching error if one fails. Recursive copies and directory moves
are not atomic: if a step fails partway, the entries handled so far stay on
disk and the failure surfaces as ResourceIOError naming that step.
"""

import os
import shutil
from pathlib import Path
from typing import BinaryIO

from fs_resources.core import get_logger, get_tracer, settings
from fs_resources.core.exceptions import ResourceIOError, ValidationError
from fs_resources.filesystem.probe import (
    PathLike,
    exists,
    is_directory,
    require_absent,
    require_directory,
    require_exists,
    require_parent,
)
from fs_resources.filesystem.walker import UNLIMITED_DEPTH, list_entries
from fs_resources.schemas import ListingOptions

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def _io_failure(action: str, path: Path, e: OSError) -> ResourceIOError:
    error_msg = f"Failed to {action} '{path}': {e}"
    logger.error(error_msg, path=str(path), error=str(e))
    return ResourceIOError(error_msg)


def _delete(path: Path) -> None:
    """Delete one file, link or empty directory."""
    try:
        if is_directory(path):
            path.rmdir()
        else:
            path.unlink()
    except OSError as e:
        raise _io_failure("delete", path, e) from e


def remove_entries(path: PathLike) -> None:
    """Remove everything below a directory, leaving the directory empty.

    Hidden entries and links are included; links are removed, not followed.
    Entries are deleted deepest first so no directory is removed while it
    still has children.

    Raises:
        PathNotFoundError: If path does not exist
        NotADirectoryPathError: If path is not a directory
        ResourceIOError: If an entry cannot be deleted
    """
    path = Path(path)
    entries = list_entries(path, UNLIMITED_DEPTH, ListingOptions.all_inclusive())
    for entry in reversed(entries):
        _delete(entry)

    logger.info("Directory entries removed", path=str(path), entry_count=len(entries))


def remove(path: PathLike) -> None:
    """Remove a resource; directories are removed with all their contents.

    Raises:
        PathNotFoundError: If path does not exist
        ResourceIOError: If anything cannot be deleted
    """
    path = Path(path)
    require_exists(path)

    with tracer.start_as_current_span("remove") as span:
        span.set_attribute("fs.path", str(path))
        if is_directory(path):
            remove_entries(path)
        _delete(path)

    logger.info("Resource removed", path=str(path))


def create(path: PathLike, source: BinaryIO) -> Path:
    """Create a new file from a binary stream.

    The stream is read to its end but not closed; the caller owns it.

    Args:
        path: File to create
        source: Readable binary stream providing the content

    Returns:
        The created path

    Raises:
        PathExistsError: If path exists
        ParentNotFoundError: If the parent directory does not exist
        ResourceIOError: If writing fails
    """
    path = Path(path)
    require_absent(path)
    require_parent(path)

    try:
        with path.open("xb") as target:
            shutil.copyfileobj(source, target, settings.hash_chunk_size)
    except OSError as e:
        raise _io_failure("create", path, e) from e

    logger.info("Resource created", path=str(path))
    return path


def _is_within(path: Path, root: Path, follow_links: bool = True) -> bool:
    """Whether path is root or lies below it.

    Without follow_links, a link in the final segment of either path is
    compared as the link itself, not as its target.
    """
    if follow_links:
        resolved, resolved_root = path.resolve(), root.resolve()
    else:
        resolved = path.parent.resolve() / path.name
        resolved_root = root.parent.resolve() / root.name
    return resolved == resolved_root or resolved_root in resolved.parents


def _copy_node(source: Path, target: Path) -> None:
    """Copy a single node: directories are created empty, files byte for byte."""
    try:
        if is_directory(source, follow_links=True):
            target.mkdir()
        else:
            shutil.copyfile(source, target)
    except OSError as e:
        raise _io_failure(f"copy '{source}' as", target, e) from e


def _clear_target(target: Path, keep_files: bool) -> None:
    """Remove an existing target so a replacement can take its place.

    With keep_files, a non-directory target is left for the caller to
    overwrite in place.
    """
    if not exists(target):
        return
    if keep_files and not is_directory(target):
        return
    remove(target)


def copy_as(path: PathLike, target: PathLike, replace_existing: bool = False) -> Path:
    """Copy a resource to the given target path.

    A directory is copied recursively: the directory node is created first,
    then every entry below the source is copied to the same relative
    location under the target. Hidden entries are copied; links are not.

    Args:
        path: Resource to copy
        target: Path of the copy
        replace_existing: Replace the target if it exists

    Returns:
        The target path

    Raises:
        PathNotFoundError: If path does not exist
        ParentNotFoundError: If the target's parent directory does not exist
        PathExistsError: If target exists and replace_existing is False
        ValidationError: If target is path itself, lies inside it or contains it
        ResourceIOError: If a copy step fails
    """
    path, target = Path(path), Path(target)
    require_exists(path)
    require_parent(target)
    if not replace_existing:
        require_absent(target)
    if _is_within(target, path):
        raise ValidationError(f"'{path}' cannot be copied into itself as '{target}'")
    if _is_within(path, target, follow_links=False):
        raise ValidationError(f"'{path}' lies inside '{target}' and cannot replace it")

    logger.info("Copying resource", path=str(path), target=str(target))

    with tracer.start_as_current_span("copy_as") as span:
        span.set_attribute("fs.path", str(path))
        span.set_attribute("fs.target", str(target))

        if replace_existing:
            _clear_target(target, keep_files=False)
        _copy_node(path, target)

        if is_directory(path, follow_links=True):
            entries = list_entries(path, UNLIMITED_DEPTH, ListingOptions.default())
            for entry in entries:
                _copy_node(entry, target / entry.relative_to(path))
            span.set_attribute("fs.entry_count", len(entries))

    return target


def copy_to(
    path: PathLike, directory: PathLike, replace_existing: bool = False
) -> Path:
    """Copy a resource into a directory, keeping its name.

    Raises:
        PathNotFoundError: If path or directory does not exist
        NotADirectoryPathError: If directory is not a directory
    """
    path, directory = Path(path), Path(directory)
    require_exists(path)
    require_directory(directory)
    return copy_as(path, directory / path.name, replace_existing)


def move_as(path: PathLike, target: PathLike, replace_existing: bool = False) -> Path:
    """Move a resource to the given target path.

    A file or link is moved with a single rename. A directory is copied to
    the target and then removed at the source; this is not atomic, and a
    failure in between leaves both trees on disk.

    Args:
        path: Resource to move
        target: New path of the resource
        replace_existing: Replace the target if it exists

    Returns:
        The target path

    Raises:
        PathNotFoundError: If path does not exist
        PathExistsError: If target exists and replace_existing is False
        ParentNotFoundError: If the target's parent directory does not exist
        ValidationError: If path is target or lies inside it
        ResourceIOError: If a step fails
    """
    path, target = Path(path), Path(target)
    require_exists(path)
    if not replace_existing:
        require_absent(target)
    require_parent(target)
    if _is_within(path, target, follow_links=False):
        raise ValidationError(f"'{path}' lies inside '{target}' and cannot replace it")

    logger.info("Moving resource", path=str(path), target=str(target))

    with tracer.start_as_current_span("move_as") as span:
        span.set_attribute("fs.path", str(path))
        span.set_attribute("fs.target", str(target))

        if is_directory(path):
            copy_as(path, target, replace_existing)
            remove(path)
            return target

        if replace_existing:
            _clear_target(target, keep_files=True)
        try:
            shutil.move(os.fspath(path), os.fspath(target))
        except OSError as e:
            raise _io_failure(f"move '{path}' as", target, e) from e

    return target


def move_to(
    path: PathLike, directory: PathLike, replace_existing: bool = False
) -> Path:
    """Move a resource into a directory, keeping its name.

    Raises:
        PathNotFoundError: If path or directory does not exist
        NotADirectoryPathError: If directory is not a directory
    """
    path, directory = Path(path), Path(directory)
    require_exists(path)
    require_directory(directory)
    return move_as(path, directory / path.name, replace_existing)


def rename_to(path: PathLike, new_name: str) -> Path:
    """Rename a resource within its parent directory.

    Args:
        path: Resource to rename
        new_name: New final path segment

    Returns:
        The renamed path

    Raises:
        PathNotFoundError: If path does not exist
        ValidationError: If new_name is not a plain name
        PathExistsError: If a sibling named new_name exists
        ResourceIOError: If the rename fails
    """
    path = Path(path)
    require_exists(path)
    if new_name in ("", ".", "..") or os.sep in new_name or (
        os.altsep and os.altsep in new_name
    ):
        raise ValidationError(f"'{new_name}' is not a valid name")

    target = path.parent / new_name
    require_absent(target)

    try:
        path.rename(target)
    except OSError as e:
        raise _io_failure(f"rename '{path}' as", target, e) from e

    logger.info("Resource renamed", path=str(path), target=str(target))
    return target
