"""Value types shared by the filesystem operations."""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


class ListingOptions(BaseModel):
    """Filters applied at every level of a directory enumeration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    include_hidden: bool = Field(
        default=True, description="Include entries whose name starts with a dot"
    )
    include_symbolic_links: bool = Field(
        default=False, description="Include symbolic links (they are never followed)"
    )

    @classmethod
    def default(cls) -> "ListingOptions":
        """Hidden entries included, symbolic links excluded."""
        return cls()

    @classmethod
    def all_inclusive(cls) -> "ListingOptions":
        """Every entry, used where enumeration must be exhaustive."""
        return cls(include_hidden=True, include_symbolic_links=True)


class CapacityUnit(IntEnum):
    """Binary capacity units, valued in bytes."""

    BYTE = 1
    KILOBYTE = 1024
    MEGABYTE = 1024**2
    GIGABYTE = 1024**3
    TERABYTE = 1024**4
    PETABYTE = 1024**5


class DigestAlgorithm(str, Enum):
    """Hash algorithms supported for content hashing."""

    SHA_256 = "sha256"
    SHA_512 = "sha512"
