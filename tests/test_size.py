"""Tests for size calculation."""

from decimal import Decimal

import pytest

from fs_resources.core.exceptions import PathNotFoundError, ValidationError
from fs_resources.filesystem.size import format_size, size, size_in_bytes
from fs_resources.filesystem.walker import UNLIMITED_DEPTH, list_entries
from fs_resources.filesystem.probe import is_directory
from fs_resources.schemas import CapacityUnit


class TestSizeInBytes:
    """Test byte size of files and directory trees."""

    def test_missing_path(self, temp_dir):
        """Test error when the path does not exist."""
        with pytest.raises(PathNotFoundError):
            size_in_bytes(temp_dir / "missing.txt")

    def test_file(self, sample_file_structure):
        """Test the size of a single file."""
        assert size_in_bytes(sample_file_structure / "file2.txt") == 800

    def test_empty_file(self, temp_dir):
        """Test that an empty file has size 0."""
        (temp_dir / "empty").touch()
        assert size_in_bytes(temp_dir / "empty") == 0

    def test_empty_directory(self, temp_dir):
        """Test that an empty directory has size 0."""
        (temp_dir / "empty").mkdir()
        assert size_in_bytes(temp_dir / "empty") == 0

    def test_directory_is_recursive_sum(self, sample_file_structure):
        """Test that a directory sums all files below it."""
        assert size_in_bytes(sample_file_structure) == 8 + 800 + 400

    def test_nested_bytes(self, temp_dir):
        """Test a small tree of raw bytes."""
        root = temp_dir / "a"
        (root / "b").mkdir(parents=True)
        (root / "file_a.bin").write_bytes(bytes([1, 2, 3]))
        (root / "b" / "file_b.bin").write_bytes(bytes([4, 5, 6]))

        assert size_in_bytes(root) == 6

    def test_directory_equals_sum_of_file_entries(self, deep_file_structure):
        """Test size against the enumeration it is built on."""
        expected = sum(
            size_in_bytes(entry)
            for entry in list_entries(deep_file_structure, UNLIMITED_DEPTH)
            if not is_directory(entry)
        )

        assert size_in_bytes(deep_file_structure) == expected == 22

    def test_links_are_not_counted(self, deep_file_structure):
        """Test that linked content outside the tree is excluded."""
        assert size_in_bytes(deep_file_structure / "linked_dir") == 100
        assert size_in_bytes(deep_file_structure) == 22


class TestSize:
    """Test unit conversion."""

    def test_kilobytes(self, temp_dir):
        """Test 2048 + 512 bytes is 2.50 kilobytes."""
        root = temp_dir / "dir"
        root.mkdir()
        (root / "a.bin").write_bytes(bytes(i % 256 for i in range(2048)))
        (root / "b.bin").write_bytes(bytes(i % 256 for i in range(512)))

        result = size(root, CapacityUnit.KILOBYTE)

        assert result == Decimal("2.50")
        assert str(result) == "2.50"

    def test_bytes_default(self, sample_file_structure):
        """Test the default unit and scale."""
        assert size(sample_file_structure) == Decimal("1208.00")

    def test_half_up_rounding(self, temp_dir):
        """Test that halves round up."""
        path = temp_dir / "file.bin"
        path.write_bytes(b"\x00" * 1280)  # 1.25 KiB

        assert size(path, CapacityUnit.KILOBYTE, scale=1) == Decimal("1.3")
        assert size(path, CapacityUnit.KILOBYTE, scale=0) == Decimal("1")

    def test_scale_zero(self, temp_dir):
        """Test rounding to whole units."""
        path = temp_dir / "file.bin"
        path.write_bytes(b"\x00" * 1536)  # 1.5 KiB

        assert size(path, CapacityUnit.KILOBYTE, scale=0) == Decimal("2")

    def test_negative_scale(self, sample_file_structure):
        """Test that a negative scale is rejected."""
        with pytest.raises(ValidationError):
            size(sample_file_structure, CapacityUnit.BYTE, scale=-1)

    def test_large_scale(self, temp_dir):
        """Test that scale is not limited by the default decimal precision."""
        path = temp_dir / "file.bin"
        path.write_bytes(b"\x00" * 2560)

        result = size(path, CapacityUnit.KILOBYTE, scale=30)

        assert result == Decimal("2.5")
        assert str(result) == "2." + "5" + "0" * 29

    def test_small_fraction_of_large_unit(self, temp_dir):
        """Test that one byte in petabytes keeps every digit."""
        path = temp_dir / "file.bin"
        path.write_bytes(b"\x00")

        result = size(path, CapacityUnit.PETABYTE, scale=60)

        assert result == Decimal("0.00000000000000088817841970012523233890533447265625")
        assert result.as_tuple().exponent == -60

    def test_missing_path(self, temp_dir):
        """Test error when the path does not exist."""
        with pytest.raises(PathNotFoundError):
            size(temp_dir / "missing.txt", CapacityUnit.BYTE)


class TestFormatSize:
    """Test human-readable rendering."""

    @pytest.mark.parametrize(
        "total_bytes,expected",
        [
            (0, "0 bytes"),
            (512, "512 bytes"),
            (2560, "2.50 KILOBYTE"),
            (3 * 1024**2, "3.00 MEGABYTE"),
            (1024**5, "1.00 PETABYTE"),
        ],
    )
    def test_format_size(self, total_bytes, expected):
        """Test unit selection."""
        assert format_size(total_bytes) == expected
