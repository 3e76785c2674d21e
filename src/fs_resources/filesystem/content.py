"""Content-type detection and content hashing for files.

Directories have neither a content type nor a content hash; both queries
return None for them instead of failing.
"""

import hashlib
import mimetypes
from pathlib import Path
from typing import Optional

import filetype

from fs_resources.core import get_logger, settings
from fs_resources.core.exceptions import ResourceIOError
from fs_resources.filesystem.probe import PathLike, is_directory, require_exists
from fs_resources.schemas import DigestAlgorithm

logger = get_logger(__name__)


def to_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex, two digits per byte."""
    return data.hex()


def content_type(path: PathLike) -> Optional[str]:
    """Detect the MIME type of a file.

    The leading bytes are matched against known signatures first; when no
    signature matches, the file name is used as a hint.

    Args:
        path: File to inspect

    Returns:
        MIME type string, or None for directories and undetectable content

    Raises:
        PathNotFoundError: If path does not exist
        ResourceIOError: If the file cannot be read
    """
    path = Path(path)
    require_exists(path)

    if is_directory(path, follow_links=True):
        return None

    try:
        with path.open("rb") as handle:
            header = handle.read(settings.sniff_bytes)
    except OSError as e:
        error_msg = f"Failed to read '{path}' for content type detection: {e}"
        logger.error(error_msg, path=str(path), error=str(e))
        raise ResourceIOError(error_msg) from e

    kind = filetype.guess(header)
    if kind is not None:
        mime_type = kind.mime
    else:
        mime_type, _ = mimetypes.guess_type(path.as_posix())

    logger.debug("Content type detected", path=str(path), content_type=mime_type)
    return mime_type


def content_hash(
    path: PathLike, algorithm: DigestAlgorithm = DigestAlgorithm.SHA_256
) -> Optional[str]:
    """Calculate the hex digest of a file's content.

    Content is streamed through the digest in fixed-size chunks, so memory
    use does not grow with file size.

    Args:
        path: File to hash
        algorithm: Digest algorithm to use

    Returns:
        Lowercase hex digest, or None for directories

    Raises:
        PathNotFoundError: If path does not exist
        ResourceIOError: If the file cannot be read
    """
    path = Path(path)
    require_exists(path)

    if is_directory(path, follow_links=True):
        return None

    digest = hashlib.new(DigestAlgorithm(algorithm).value)
    try:
        with path.open("rb") as handle:
            for chunk in iter(lambda: handle.read(settings.hash_chunk_size), b""):
                digest.update(chunk)
    except OSError as e:
        error_msg = f"Failed to read '{path}' for hashing: {e}"
        logger.error(error_msg, path=str(path), error=str(e))
        raise ResourceIOError(error_msg) from e

    return digest.hexdigest()
