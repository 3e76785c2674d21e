"""Filesystem resource operations."""

from .content import content_hash, content_type, to_hex
from .mutations import (
    copy_as,
    copy_to,
    create,
    move_as,
    move_to,
    remove,
    remove_entries,
    rename_to,
)
from .probe import exists, is_directory, is_hidden, is_symbolic_link
from .size import format_size, size, size_in_bytes
from .walker import UNLIMITED_DEPTH, list_entries

__all__ = [
    "exists",
    "is_directory",
    "is_hidden",
    "is_symbolic_link",
    "UNLIMITED_DEPTH",
    "list_entries",
    "size_in_bytes",
    "size",
    "format_size",
    "content_type",
    "content_hash",
    "to_hex",
    "remove",
    "remove_entries",
    "create",
    "copy_as",
    "copy_to",
    "move_as",
    "move_to",
    "rename_to",
]
