"""Lazy depth-first directory enumeration."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pathkit.filesystem import get_filesystem

if TYPE_CHECKING:
    from pathkit.path import Path

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    directory: "Path"
    names: list[str] = field(default_factory=list)


class DirectoryEnumerator(Iterator["Path"]):
    """Iterate every entry below a directory, parents before their children.

    Entries are yielded as root + relative path, in sorted order within each
    directory. A directory is listed only when the iteration reaches its
    first child, so skip_descendants() called right after a directory is
    yielded prevents it from being read at all. Symbolic links to
    directories are yielded but not followed.

    A root that does not exist or is not a directory yields nothing.

    Example:
        entries = Path("src").iterate_children()
        for entry in entries:
            if entry.last_component == "__pycache__":
                entries.skip_descendants()
    """

    def __init__(self, root: "Path", *, skip_hidden: bool = False) -> None:
        self._skip_hidden = skip_hidden
        self._stack: list[_Frame] = []
        self._pending: "Path | None" = None
        self._started = False
        self._root = root

    @property
    def level(self) -> int:
        """Depth of the most recently yielded entry; 1 for direct children."""
        return len(self._stack)

    def skip_descendants(self) -> None:
        """Do not descend into the most recently yielded entry."""
        self._pending = None

    def __iter__(self) -> "DirectoryEnumerator":
        return self

    def __next__(self) -> "Path":
        if not self._started:
            self._started = True
            if get_filesystem().is_directory(self._root.string):
                self._push(self._root)

        if self._pending is not None:
            self._push(self._pending)
            self._pending = None

        while self._stack:
            frame = self._stack[-1]
            if not frame.names:
                self._stack.pop()
                continue

            child = frame.directory + frame.names.pop(0)
            filesystem = get_filesystem()
            if filesystem.is_directory(child.string) and not filesystem.is_symlink(child.string):
                self._pending = child
            return child

        raise StopIteration

    def _push(self, directory: "Path") -> None:
        names = get_filesystem().list_directory(directory.string)
        if self._skip_hidden:
            names = [name for name in names if not name.startswith(".")]
        logger.debug("enumerating %s (%d entries)", directory, len(names))
        self._stack.append(_Frame(directory=directory, names=names))
