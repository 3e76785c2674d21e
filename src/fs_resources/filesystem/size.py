"""Content size of files and directory trees."""

import os
from decimal import ROUND_HALF_UP, Decimal, localcontext
from pathlib import Path

from fs_resources.core import get_logger, get_tracer
from fs_resources.core.exceptions import ResourceIOError, ValidationError
from fs_resources.filesystem.probe import PathLike, is_directory, require_exists
from fs_resources.filesystem.walker import UNLIMITED_DEPTH, list_entries
from fs_resources.schemas import CapacityUnit, ListingOptions

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def _file_size(path: Path) -> int:
    try:
        return os.stat(path).st_size
    except OSError as e:
        error_msg = f"Failed to read size of '{path}': {e}"
        logger.error(error_msg, path=str(path), error=str(e))
        raise ResourceIOError(error_msg) from e


def size_in_bytes(path: PathLike) -> int:
    """Get the content size of a resource in bytes.

    A directory's size is the sum of the sizes of every file below it;
    directory nodes themselves count as zero.

    Args:
        path: File or directory to measure

    Returns:
        Size in bytes, 0 for an empty directory

    Raises:
        PathNotFoundError: If path does not exist
        ResourceIOError: If a size cannot be read
    """
    path = Path(path)
    require_exists(path)

    if not is_directory(path, follow_links=True):
        return _file_size(path)

    with tracer.start_as_current_span("size_in_bytes") as span:
        span.set_attribute("fs.path", str(path))
        total_bytes = sum(
            _file_size(entry)
            for entry in list_entries(path, UNLIMITED_DEPTH, ListingOptions.default())
            if not is_directory(entry)
        )

    logger.debug("Directory size calculated", path=str(path), total_bytes=total_bytes)
    return total_bytes


def size(
    path: PathLike, unit: CapacityUnit = CapacityUnit.BYTE, scale: int = 2
) -> Decimal:
    """Get the content size of a resource in the given unit.

    Args:
        path: File or directory to measure
        unit: Capacity unit to express the size in
        scale: Number of decimal digits, rounded half-up

    Returns:
        Size as a Decimal with exactly ``scale`` decimal digits

    Raises:
        ValidationError: If scale is negative
        PathNotFoundError: If path does not exist
    """
    if scale < 0:
        raise ValidationError(f"scale must not be negative, got: {scale}")

    total_bytes = size_in_bytes(path)
    quantum = Decimal(1).scaleb(-scale)
    # Units are powers of two, so the quotient is exact with this precision
    # and quantize has room for every requested digit
    with localcontext() as context:
        context.prec = len(str(total_bytes)) + max(scale, int(unit).bit_length()) + 1
        return (Decimal(total_bytes) / Decimal(int(unit))).quantize(
            quantum, rounding=ROUND_HALF_UP
        )


def format_size(total_bytes: int) -> str:
    """Render a byte count in the largest unit that keeps it at or above one."""
    unit = CapacityUnit.BYTE
    for candidate in CapacityUnit:
        if total_bytes >= candidate:
            unit = candidate

    if unit is CapacityUnit.BYTE:
        return f"{total_bytes} bytes"
    return f"{total_bytes / unit:.2f} {unit.name}"
