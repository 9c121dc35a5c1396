"""Local filesystem access for uploads."""

import glob
import stat
from pathlib import Path

import aiofiles
import aiofiles.os

from release_uploader.domain.types import LocalFile


async def read_local_file(path: Path) -> LocalFile | None:
    """Read a regular file fully using async file I/O.

    The size is taken from the same stat call that decides whether the
    path is a regular file.

    Args:
        path: File to read

    Returns:
        File contents, or None when the path exists but is not a
        regular file (a directory, for example)

    Raises:
        FileNotFoundError: If the path does not exist
        OSError: If the path cannot be stat'ed or read

    """
    st = await aiofiles.os.stat(path)
    if not stat.S_ISREG(st.st_mode):
        return None
    async with aiofiles.open(path, mode="rb") as f:
        data = await f.read()
    return LocalFile(path=path, size=st.st_size, data=data)


def expand_glob(pattern: str) -> list[Path]:
    """Expand a glob pattern into sorted paths.

    ``**`` matches across directories. Directories may be part of the
    result; the uploader skips them.

    Args:
        pattern: Glob pattern relative to the working directory

    Returns:
        Matching paths, sorted

    """
    return [Path(match) for match in sorted(glob.glob(pattern, recursive=True))]
