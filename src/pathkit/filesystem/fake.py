"""Fake Filesystem implementation for testing.

FakeFilesystem is an in-memory implementation that models directories,
regular files and symbolic links without touching the disk, enabling fast
tests of code that works with Path values.
"""

import errno
import fnmatch
import os
import posixpath
from dataclasses import dataclass, replace
from typing import Literal

from pathkit import lexical
from pathkit.filesystem.abc import Filesystem
from pathkit.filesystem.patterns import expand_braces

_MAX_SYMLINK_DEPTH = 40
_MAGIC_CHARACTERS = frozenset("*?[")

NodeKind = Literal["directory", "file", "symlink"]


@dataclass(frozen=True)
class _Node:
    kind: NodeKind
    content: bytes = b""
    target: str = ""
    mode: str = "rw"


def _error(code: int, path: str) -> OSError:
    # OSError picks the matching subclass (FileNotFoundError, ...) from errno
    return OSError(code, os.strerror(code), path)


class FakeFilesystem(Filesystem):
    """In-memory fake implementation of filesystem operations.

    Constructor Injection:
    - Initial files, directories and symlinks are provided via constructor
    - Missing parent directories of injected entries are created implicitly
    - Mutations performed through the interface are applied to the in-memory
      tree and recorded for assertions

    Permissions are modelled per path as a subset of "rwx". Files default to
    "rw" and directories to "rwx". Hard links are modelled as copies.

    Examples:
        >>> fs = FakeFilesystem(
        ...     files={"/project/setup.cfg": "[metadata]\\n"},
        ...     directories=["/project/src"],
        ...     symlinks={"/project/latest": "src"},
        ...     cwd="/project",
        ... )
        >>> fs.is_directory("latest")
        True
        >>> fs.list_directory("/project")
        ['latest', 'setup.cfg', 'src']
    """

    def __init__(
        self,
        *,
        files: dict[str, bytes | str] | None = None,
        directories: list[str] | None = None,
        symlinks: dict[str, str] | None = None,
        permissions: dict[str, str] | None = None,
        cwd: str = "/",
        home: str = "/home/user",
        user_homes: dict[str, str] | None = None,
        temporary: str = "/tmp",
        case_sensitive: bool = True,
    ) -> None:
        """Initialize fake with a predetermined directory tree.

        Args:
            files: Mapping of absolute file path to content
            directories: Absolute directory paths to create
            symlinks: Mapping of absolute link path to link content (target)
            permissions: Mapping of absolute path to a subset of "rwx"
            cwd: Initial working directory; created if missing
            home: Home directory reported by home_directory(); created if missing
            user_homes: Mapping of user name to the directory user_home_directory()
                reports; users not listed are unknown
            temporary: Temporary directory; created if missing
            case_sensitive: Value reported by is_case_sensitive()
        """
        self._nodes: dict[str, _Node] = {lexical.SEPARATOR: _Node(kind="directory", mode="rwx")}
        self._home = home
        self._user_homes = dict(user_homes or {})
        self._temporary = temporary
        self._case_sensitive = case_sensitive
        self._operations: list[tuple[str, ...]] = []

        for directory in [cwd, home, temporary, *(directories or [])]:
            self._insert(directory, _Node(kind="directory", mode="rwx"))
        for path, content in (files or {}).items():
            data = content.encode("utf-8") if isinstance(content, str) else content
            self._insert(path, _Node(kind="file", content=data))
        for path, target in (symlinks or {}).items():
            self._insert(path, _Node(kind="symlink", target=target, mode="rwx"))
        for path, mode in (permissions or {}).items():
            key = posixpath.normpath(path)
            self._nodes[key] = replace(self._nodes[key], mode=mode)

        self._cwd = posixpath.normpath(cwd)

    # ------------------------------------------------------------------
    # Test assertion helpers
    # ------------------------------------------------------------------

    @property
    def operations(self) -> list[tuple[str, ...]]:
        """Get the list of mutating operations that were performed.

        Returns (operation, *paths) tuples, e.g. ("create_directory", "/a").

        This property is for test assertions only.
        """
        return self._operations.copy()

    # ------------------------------------------------------------------
    # Tree helpers
    # ------------------------------------------------------------------

    def _insert(self, path: str, node: _Node) -> None:
        key = posixpath.normpath(path)
        parent = posixpath.dirname(key)
        while parent not in self._nodes:
            self._nodes[parent] = _Node(kind="directory", mode="rwx")
            parent = posixpath.dirname(parent)
        self._nodes[key] = node

    def _absolute(self, path: str) -> str:
        if not path:
            return self._cwd
        return posixpath.normpath(posixpath.join(self._cwd, path))

    def _resolve(self, path: str, *, follow_last: bool = True) -> str:
        """Resolve symlinks in path, optionally leaving the last component alone."""
        current_path = self._absolute(path)
        for _ in range(_MAX_SYMLINK_DEPTH):
            parts = lexical.split_components(current_path)[1:]
            current = lexical.SEPARATOR
            for index, part in enumerate(parts):
                candidate = posixpath.join(current, part)
                node = self._nodes.get(candidate)
                is_last = index == len(parts) - 1
                if node is not None and node.kind == "symlink" and (follow_last or not is_last):
                    target = posixpath.join(current, node.target)
                    current_path = posixpath.normpath(posixpath.join(target, *parts[index + 1 :]))
                    break
                current = candidate
            else:
                return current
        raise _error(errno.ELOOP, path)

    def _lookup(self, path: str, *, follow_last: bool = True) -> _Node | None:
        try:
            return self._nodes.get(self._resolve(path, follow_last=follow_last))
        except OSError:
            return None

    def _require_parent_directory(self, path: str, key: str) -> None:
        parent = self._lookup(posixpath.dirname(key))
        if parent is None:
            raise _error(errno.ENOENT, path)
        if parent.kind != "directory":
            raise _error(errno.ENOTDIR, path)
        if "w" not in parent.mode:
            raise _error(errno.EACCES, path)

    def _subtree(self, key: str) -> list[str]:
        prefix = key.rstrip(lexical.SEPARATOR) + lexical.SEPARATOR
        return [name for name in self._nodes if name == key or name.startswith(prefix)]

    def _directory_key(self, path: str) -> str:
        key = self._resolve(path)
        node = self._nodes.get(key)
        if node is None:
            raise _error(errno.ENOENT, path)
        if node.kind != "directory":
            raise _error(errno.ENOTDIR, path)
        return key

    # ------------------------------------------------------------------
    # Process environment
    # ------------------------------------------------------------------

    def get_cwd(self) -> str:
        return self._cwd

    def set_cwd(self, path: str) -> None:
        self._cwd = self._directory_key(path)
        self._operations.append(("set_cwd", self._cwd))

    def home_directory(self) -> str:
        return self._home

    def user_home_directory(self, user: str) -> str | None:
        return self._user_homes.get(user)

    def temporary_directory(self) -> str:
        return self._temporary

    def is_case_sensitive(self, path: str) -> bool:
        return self._case_sensitive

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def exists(self, path: str) -> bool:
        return self._lookup(path) is not None

    def is_directory(self, path: str) -> bool:
        node = self._lookup(path)
        return node is not None and node.kind == "directory"

    def is_file(self, path: str) -> bool:
        node = self._lookup(path)
        return node is not None and node.kind != "directory"

    def is_symlink(self, path: str) -> bool:
        node = self._lookup(path, follow_last=False)
        return node is not None and node.kind == "symlink"

    def is_readable(self, path: str) -> bool:
        node = self._lookup(path)
        return node is not None and "r" in node.mode

    def is_writable(self, path: str) -> bool:
        node = self._lookup(path)
        return node is not None and "w" in node.mode

    def is_executable(self, path: str) -> bool:
        node = self._lookup(path)
        return node is not None and "x" in node.mode

    def is_deletable(self, path: str) -> bool:
        if self._lookup(path, follow_last=False) is None:
            return False
        parent = self._lookup(posixpath.dirname(self._resolve(path, follow_last=False)))
        return parent is not None and "w" in parent.mode and "x" in parent.mode

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_directory(self, path: str, *, parents: bool) -> None:
        key = self._resolve(path, follow_last=False)
        existing = self._lookup(path)
        if key in self._nodes or existing is not None:
            if parents and existing is not None and existing.kind == "directory":
                return
            raise _error(errno.EEXIST, path)

        if parents and self._lookup(posixpath.dirname(key)) is None:
            self.create_directory(posixpath.dirname(key), parents=True)
        self._require_parent_directory(path, key)

        self._nodes[key] = _Node(kind="directory", mode="rwx")
        self._operations.append(("create_directory", key))

    def remove(self, path: str) -> None:
        key = self._resolve(path, follow_last=False)
        if key not in self._nodes:
            raise _error(errno.ENOENT, path)
        if key == lexical.SEPARATOR:
            raise _error(errno.EBUSY, path)

        for name in self._subtree(key):
            del self._nodes[name]
        self._operations.append(("remove", key))

    def move(self, source: str, destination: str) -> None:
        source_key = self._resolve(source, follow_last=False)
        destination_key = self._resolve(destination, follow_last=False)
        if source_key not in self._nodes:
            raise _error(errno.ENOENT, source)
        if destination_key in self._nodes:
            raise _error(errno.EEXIST, destination)
        self._require_parent_directory(destination, destination_key)

        for name in self._subtree(source_key):
            self._nodes[destination_key + name[len(source_key) :]] = self._nodes.pop(name)
        self._operations.append(("move", source_key, destination_key))

    def copy(self, source: str, destination: str) -> None:
        source_key = self._resolve(source, follow_last=False)
        destination_key = self._resolve(destination, follow_last=False)
        if source_key not in self._nodes:
            raise _error(errno.ENOENT, source)
        if destination_key in self._nodes:
            raise _error(errno.EEXIST, destination)
        self._require_parent_directory(destination, destination_key)

        for name in self._subtree(source_key):
            self._nodes[destination_key + name[len(source_key) :]] = self._nodes[name]
        self._operations.append(("copy", source_key, destination_key))

    def hardlink(self, source: str, destination: str) -> None:
        node = self._lookup(source)
        if node is None:
            raise _error(errno.ENOENT, source)
        if node.kind == "directory":
            raise _error(errno.EPERM, source)
        destination_key = self._resolve(destination, follow_last=False)
        if destination_key in self._nodes:
            raise _error(errno.EEXIST, destination)
        self._require_parent_directory(destination, destination_key)

        self._nodes[destination_key] = node
        self._operations.append(("hardlink", self._resolve(source), destination_key))

    def symlink(self, path: str, target: str) -> None:
        key = self._resolve(path, follow_last=False)
        if key in self._nodes:
            raise _error(errno.EEXIST, path)
        self._require_parent_directory(path, key)

        self._nodes[key] = _Node(kind="symlink", target=target, mode="rwx")
        self._operations.append(("symlink", key, target))

    def read_symlink(self, path: str) -> str:
        node = self._lookup(path, follow_last=False)
        if node is None:
            raise _error(errno.ENOENT, path)
        if node.kind != "symlink":
            raise _error(errno.EINVAL, path)
        return node.target

    # ------------------------------------------------------------------
    # Contents
    # ------------------------------------------------------------------

    def read_bytes(self, path: str) -> bytes:
        node = self._lookup(path)
        if node is None:
            raise _error(errno.ENOENT, path)
        if node.kind == "directory":
            raise _error(errno.EISDIR, path)
        if "r" not in node.mode:
            raise _error(errno.EACCES, path)
        return node.content

    def write_bytes(self, path: str, data: bytes) -> None:
        key = self._resolve(path, follow_last=False)
        existing = self._nodes.get(key)
        if existing is not None and existing.kind == "directory":
            raise _error(errno.EISDIR, path)
        self._require_parent_directory(path, key)

        mode = existing.mode if existing is not None and existing.kind == "file" else "rw"
        self._nodes[key] = _Node(kind="file", content=data, mode=mode)
        self._operations.append(("write_bytes", key))

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def list_directory(self, path: str) -> list[str]:
        key = self._directory_key(path)
        return sorted(
            posixpath.basename(name)
            for name in self._nodes
            if name != key and posixpath.dirname(name) == key
        )

    def list_directory_recursive(self, path: str) -> list[str]:
        key = self._directory_key(path)
        return sorted(posixpath.relpath(name, key) for name in self._subtree(key) if name != key)

    def glob(self, pattern: str) -> list[str]:
        matches: set[str] = set()
        for expanded in expand_braces(pattern):
            expanded = lexical.expand_tilde(expanded, self._home, self.user_home_directory)
            for match in self._glob_one(expanded):
                if self.is_directory(match) and not match.endswith(lexical.SEPARATOR):
                    match += lexical.SEPARATOR
                matches.add(match)
        return sorted(matches)

    def _glob_one(self, pattern: str) -> list[str]:
        components = lexical.split_components(pattern)
        if not components:
            return []

        if components[0] == lexical.SEPARATOR:
            candidates = [lexical.SEPARATOR]
            components = components[1:]
        else:
            candidates = [""]

        for component in components:
            next_candidates: list[str] = []
            for candidate in candidates:
                directory = candidate or lexical.CURRENT
                if not _MAGIC_CHARACTERS.intersection(component):
                    joined = posixpath.join(candidate, component)
                    if self._lookup(joined, follow_last=False) is not None:
                        next_candidates.append(joined)
                    continue
                if not self.is_directory(directory):
                    continue
                for name in self.list_directory(directory):
                    if name.startswith(".") and not component.startswith("."):
                        continue
                    if fnmatch.fnmatchcase(name, component):
                        next_candidates.append(posixpath.join(candidate, name))
            candidates = next_candidates

        return candidates
