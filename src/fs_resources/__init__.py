"""Filesystem resource operations with strict failure contracts.

This package provides one set of operations over files and directories:
existence and type queries, recursive enumeration, size computation,
content-type detection, content hashing, and remove/copy/move/rename.
Every recursive operation is built on a single enumeration primitive,
``list_entries``, so hidden-file and link filtering behave the same
everywhere.

Key Features:
    - Depth-limited, filtered directory enumeration
    - Recursive size, removal and copy
    - Content-type sniffing and chunked content hashing
    - Explicit error for every failed pre-condition
    - CLI interface

Usage:
    >>> from fs_resources import CapacityUnit, list_entries, size
    >>> entries = list_entries("/data/path", depth=2)
    >>> size("/data/path", CapacityUnit.MEGABYTE)
    Decimal('12.34')
"""

__version__ = "0.1.0"

from .core.exceptions import (
    FSResourcesError,
    NotADirectoryPathError,
    ParentNotFoundError,
    PathExistsError,
    PathNotFoundError,
    ResourceIOError,
    ValidationError,
)
from .filesystem import (
    UNLIMITED_DEPTH,
    content_hash,
    content_type,
    copy_as,
    copy_to,
    create,
    exists,
    format_size,
    is_directory,
    is_hidden,
    is_symbolic_link,
    list_entries,
    move_as,
    move_to,
    remove,
    remove_entries,
    rename_to,
    size,
    size_in_bytes,
    to_hex,
)
from .schemas import CapacityUnit, DigestAlgorithm, ListingOptions

__all__ = [
    # Value types
    "CapacityUnit",
    "DigestAlgorithm",
    "ListingOptions",
    # Errors
    "FSResourcesError",
    "NotADirectoryPathError",
    "ParentNotFoundError",
    "PathExistsError",
    "PathNotFoundError",
    "ResourceIOError",
    "ValidationError",
    # Queries
    "exists",
    "is_directory",
    "is_hidden",
    "is_symbolic_link",
    # Enumeration and size
    "UNLIMITED_DEPTH",
    "list_entries",
    "size_in_bytes",
    "size",
    "format_size",
    # Content
    "content_type",
    "content_hash",
    "to_hex",
    # Mutations
    "remove",
    "remove_entries",
    "create",
    "copy_as",
    "copy_to",
    "move_as",
    "move_to",
    "rename_to",
]
