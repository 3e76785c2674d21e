"""Exception hierarchy for fs-resources."""


class FSResourcesError(Exception):
    """Base exception for all fs-resources errors."""

    pass


class ValidationError(FSResourcesError):
    """Raised when an argument is rejected before touching the filesystem."""

    pass


class PathNotFoundError(FSResourcesError):
    """Raised when a path is not found."""

    pass


class NotADirectoryPathError(FSResourcesError):
    """Raised when a path expected to be a directory is not one."""

    pass


class PathExistsError(FSResourcesError):
    """Raised when a target path exists and exclusivity was required."""

    pass


class ParentNotFoundError(FSResourcesError):
    """Raised when the parent directory of a target path is absent."""

    pass


class ResourceIOError(FSResourcesError):
    """Raised when an underlying filesystem or stream operation fails."""

    pass
