"""Scoped working directory changes.

The working directory is process-wide state. change_directory() does not
serialize concurrent callers: two threads changing directory at the same
time will observe each other's changes.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from pathkit.filesystem import get_filesystem
from pathkit.path import Path

logger = logging.getLogger(__name__)


@contextmanager
def change_directory(target_dir: Path | str) -> Generator[Path]:
    """Change directory for the duration of a with block.

    This context manager handles directory changes safely by:
    1. Saving the original directory
    2. Changing to the target directory
    3. Restoring the original directory on exit (even if exception raised)

    Args:
        target_dir: Directory to change to

    Yields:
        The new current directory as reported by the filesystem adapter

    Raises:
        FileNotFoundError: If target_dir does not exist
        NotADirectoryError: If target_dir is not a directory

    Example:
        with change_directory("build") as cwd:
            # Path.current() == cwd
            pass
        # Automatically restored to original directory
    """
    filesystem = get_filesystem()
    target = target_dir.string if isinstance(target_dir, Path) else target_dir
    original_dir = filesystem.get_cwd()

    try:
        filesystem.set_cwd(target)
        logger.debug("changed directory %s -> %s", original_dir, target)
        yield Path.current()

    finally:
        filesystem.set_cwd(original_dir)
