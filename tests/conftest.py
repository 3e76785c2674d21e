"""Test configuration and fixtures for fs-resources."""

import os

import pytest


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def sample_file_structure(temp_dir):
    """Create a sample file structure for testing path operations."""
    root = temp_dir / "sample"
    root.mkdir()

    # Create some test files
    (root / "file1.txt").write_text("content1")
    (root / "file2.txt").write_text("content2" * 100)

    # Create subdirectory with files
    subdir = root / "subdir"
    subdir.mkdir()
    (subdir / "file3.txt").write_text("content3" * 50)

    return root


@pytest.fixture
def deep_file_structure(temp_dir):
    """Create a three-level tree with a hidden file and a symbolic link."""
    root = temp_dir / "deep"
    (root / "level1" / "level2" / "level3").mkdir(parents=True)

    (root / "top.bin").write_bytes(b"\x01\x02\x03")
    (root / ".hidden").write_bytes(b"secret")
    (root / "level1" / "one.bin").write_bytes(b"\x04\x05")
    (root / "level1" / "level2" / "two.bin").write_bytes(b"\x06")
    (root / "level1" / "level2" / "level3" / "three.bin").write_bytes(b"\x07" * 10)

    outside = temp_dir / "outside"
    outside.mkdir()
    (outside / "target.bin").write_bytes(b"\x00" * 100)
    os.symlink(outside / "target.bin", root / "link.bin")
    os.symlink(outside, root / "linked_dir")

    return root
