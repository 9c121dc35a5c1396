"""Tests for local file reading and glob expansion."""

from pathlib import Path

import pytest

from release_uploader.infrastructure.file_ops import (
    expand_glob,
    read_local_file,
)


@pytest.mark.asyncio
async def test_read_local_file(tmp_path):
    """Test a regular file is read with its size."""
    path = tmp_path / "out.bin"
    path.write_bytes(b"abcde")

    local_file = await read_local_file(path)

    assert local_file.path == path
    assert local_file.size == 5
    assert local_file.data == b"abcde"


@pytest.mark.asyncio
async def test_read_directory_returns_none(tmp_path):
    """Test directories are not read."""
    assert await read_local_file(tmp_path) is None


@pytest.mark.asyncio
async def test_read_missing_file_raises(tmp_path):
    """Test a missing path is an error, not a skipped non-file."""
    with pytest.raises(FileNotFoundError):
        await read_local_file(tmp_path / "dist" / "typo.tar.gz")


def test_expand_glob_sorted_and_recursive(tmp_path):
    """Test ** descends into subdirectories and results are sorted."""
    (tmp_path / "b.zip").write_text("b")
    (tmp_path / "a.zip").write_text("a")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "c.zip").write_text("c")

    matches = expand_glob(str(tmp_path / "**" / "*.zip"))

    assert matches == [
        tmp_path / "a.zip",
        tmp_path / "b.zip",
        tmp_path / "nested" / "c.zip",
    ]
    assert all(isinstance(m, Path) for m in matches)


def test_expand_glob_no_matches(tmp_path):
    """Test an unmatched pattern yields an empty list."""
    assert expand_glob(str(tmp_path / "*.none")) == []
