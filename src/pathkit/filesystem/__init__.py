"""Filesystem adapters and the process-wide active adapter.

Path values resolve the adapter at call time through get_filesystem(). Tests
swap in a FakeFilesystem with use_filesystem() or set_filesystem().
"""

from collections.abc import Generator
from contextlib import contextmanager

from pathkit.filesystem.abc import Filesystem
from pathkit.filesystem.fake import FakeFilesystem
from pathkit.filesystem.real import RealFilesystem

_active: Filesystem | None = None


def get_filesystem() -> Filesystem:
    """Return the active adapter, creating a RealFilesystem on first use."""
    global _active
    if _active is None:
        _active = RealFilesystem()
    return _active


def set_filesystem(filesystem: Filesystem | None) -> None:
    """Install filesystem as the active adapter; None restores the default."""
    global _active
    _active = filesystem


@contextmanager
def use_filesystem(filesystem: Filesystem) -> Generator[Filesystem]:
    """Install filesystem for the duration of a with block.

    The previously active adapter is restored on exit, even if the block
    raises.

    Example:
        with use_filesystem(FakeFilesystem(files={"/a.txt": "hi"})):
            assert Path("/a.txt").read_text() == "hi"
    """
    global _active
    previous = _active
    _active = filesystem
    try:
        yield filesystem
    finally:
        _active = previous


__all__ = [
    "FakeFilesystem",
    "Filesystem",
    "RealFilesystem",
    "get_filesystem",
    "set_filesystem",
    "use_filesystem",
]
