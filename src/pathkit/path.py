"""Immutable path values.

A Path wraps a raw string exactly as given. Lexical operations (joining,
normalization, decomposition) are computed from that string alone and always
return a new Path. Filesystem operations delegate to the active Filesystem
adapter (see pathkit.filesystem) and let its errors propagate unchanged.

Equality, ordering and hashing use the raw string only: Path("a") and
Path("./a") name the same file but are not equal. Use matches() to compare
normalized forms.
"""

import urllib.parse
from collections.abc import Sequence
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from pathkit import lexical
from pathkit.config import get_config
from pathkit.filesystem import get_filesystem

if TYPE_CHECKING:
    from pathkit.enumerator import DirectoryEnumerator


def _raw(value: "Path | str") -> str:
    if isinstance(value, Path):
        return value.string
    return value


@dataclass(frozen=True, order=True)
class Path:
    """A filesystem path as an immutable string value.

    Construction never validates or normalizes: any string, including the
    empty string, is a valid Path.

    Examples:
        >>> Path("a/b/c") + "../d/e"
        Path('a/b/d/e')
        >>> Path("/a/b/c.d").components
        ['/', 'a', 'b', 'c.d']
        >>> Path("a/..").matches(".")
        True
    """

    string: str = ""

    separator: ClassVar[str] = lexical.SEPARATOR

    def __post_init__(self) -> None:
        # Path(None) is accepted as "no path"
        if self.string is None:
            object.__setattr__(self, "string", "")

    @classmethod
    def from_components(cls, components: Sequence[str]) -> "Path":
        """Create a Path by joining components with the separator.

        An empty sequence yields "."; a leading "/" component is not doubled.
        """
        return cls(lexical.join_components(list(components)))

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"Path({self.string!r})"

    def __fspath__(self) -> str:
        return self.string

    def __hash__(self) -> int:
        return hash(self.string)

    @property
    def url(self) -> str:
        """The file:// URL of the absolute path; directories end with "/"."""
        absolute = self.absolute().string
        if self.is_directory() and not absolute.endswith(self.separator):
            absolute += self.separator
        return "file://" + urllib.parse.quote(absolute)

    # ------------------------------------------------------------------
    # Joining
    # ------------------------------------------------------------------

    def __add__(self, other: "Path | str") -> "Path":
        if not isinstance(other, (Path, str)):
            return NotImplemented
        return Path(lexical.append(self.string, _raw(other)))

    def __radd__(self, other: str) -> "Path":
        if not isinstance(other, str):
            return NotImplemented
        return Path(lexical.append(other, self.string))

    __truediv__ = __add__
    __rtruediv__ = __radd__

    def joinpath(self, *fragments: "Path | str") -> "Path":
        """Append each fragment in turn."""
        result = self
        for fragment in fragments:
            result = result + fragment
        return result

    @property
    def parent(self) -> "Path":
        """The lexical parent, i.e. self + "..". The parent of "/" is "/"."""
        return self + lexical.PARENT

    # ------------------------------------------------------------------
    # Predicates and decomposition
    # ------------------------------------------------------------------

    @property
    def is_absolute(self) -> bool:
        return self.string.startswith(self.separator)

    @property
    def is_relative(self) -> bool:
        return not self.is_absolute

    @property
    def last_component(self) -> str:
        return lexical.last_component(self.string)

    @property
    def last_component_without_extension(self) -> str:
        """The last component with its extension removed.

        All-dot components and hidden files without a further dot have no
        extension, so Path("a/..") yields "..".
        """
        stem, _ = lexical.split_extension(self.last_component)
        return stem

    @property
    def extension(self) -> str | None:
        """The text after the last dot of the last component, or None."""
        _, extension = lexical.split_extension(self.last_component)
        return extension

    @property
    def components(self) -> list[str]:
        return lexical.split_components(self.string)

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def normalize(self) -> "Path":
        """Expand "~" and resolve ".", ".." and repeated separators lexically."""
        filesystem = get_filesystem()
        return Path(
            lexical.normalize(
                self.string, filesystem.home_directory(), filesystem.user_home_directory
            )
        )

    def absolute(self) -> "Path":
        """The normalized absolute path, resolving relative paths against the cwd."""
        if self.is_absolute:
            return self.normalize()

        filesystem = get_filesystem()
        expanded = Path(
            lexical.expand_tilde(
                self.string, filesystem.home_directory(), filesystem.user_home_directory
            )
        )
        if expanded.is_absolute:
            return expanded.normalize()

        return (Path.current() + self).normalize()

    def abbreviate(self) -> "Path":
        """Replace a leading home directory with "~"."""
        filesystem = get_filesystem()
        case_sensitive = get_config().case_sensitive
        if case_sensitive is None:
            case_sensitive = filesystem.is_case_sensitive(self.string)
        return Path(
            lexical.abbreviate(
                self.string, filesystem.home_directory(), case_sensitive=case_sensitive
            )
        )

    def matches(self, other: "Path | str") -> bool:
        """True if the paths are equal or normalize to equal paths."""
        other_path = Path(_raw(other))
        return self == other_path or self.normalize() == other_path.normalize()

    # ------------------------------------------------------------------
    # Process environment
    # ------------------------------------------------------------------

    @classmethod
    def current(cls) -> "Path":
        """The current working directory of the process."""
        return cls(get_filesystem().get_cwd())

    @classmethod
    def set_current(cls, path: "Path | str") -> None:
        """Change the current working directory of the process."""
        get_filesystem().set_cwd(_raw(path))

    @classmethod
    def home(cls) -> "Path":
        return cls(get_filesystem().home_directory())

    @classmethod
    def temporary(cls) -> "Path":
        return cls(get_filesystem().temporary_directory())

    @classmethod
    def process_unique_temporary(cls) -> "Path":
        """A temporary directory unique to this process, created on first use."""
        from pathkit.temporary import process_unique_temporary

        return process_unique_temporary()

    @classmethod
    def unique_temporary(cls) -> "Path":
        """A freshly created temporary directory, unique for each call."""
        from pathkit.temporary import unique_temporary

        return unique_temporary()

    def chdir(self) -> AbstractContextManager["Path"]:
        """Make this path the working directory for the duration of a with block.

        Example:
            with Path("/usr/bin").chdir():
                assert Path.current() == Path("/usr/bin")
        """
        from pathkit.working_directory import change_directory

        return change_directory(self)

    # ------------------------------------------------------------------
    # File info
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        return get_filesystem().exists(self.string)

    def is_directory(self) -> bool:
        """True for a directory or a symlink to one; False if missing."""
        return get_filesystem().is_directory(self.normalize().string)

    def is_file(self) -> bool:
        """True for anything that exists and is not a directory; False if missing."""
        return get_filesystem().is_file(self.normalize().string)

    def is_symlink(self) -> bool:
        return get_filesystem().is_symlink(self.string)

    def is_readable(self) -> bool:
        return get_filesystem().is_readable(self.string)

    def is_writable(self) -> bool:
        return get_filesystem().is_writable(self.string)

    def is_executable(self) -> bool:
        return get_filesystem().is_executable(self.string)

    def is_deletable(self) -> bool:
        return get_filesystem().is_deletable(self.string)

    # ------------------------------------------------------------------
    # File manipulation
    # ------------------------------------------------------------------

    def mkdir(self, *, parents: bool = False) -> None:
        """Create the directory.

        Without parents, fails with FileNotFoundError if the parent is missing
        and with FileExistsError if anything already exists at this path.
        """
        get_filesystem().create_directory(self.string, parents=parents)

    def mkpath(self) -> None:
        """Create the directory and any missing intermediate directories."""
        get_filesystem().create_directory(self.string, parents=True)

    def mkintermediatedirs(self) -> None:
        """Create every directory up to, but not including, the last component."""
        Path.from_components(self.components[:-1]).mkpath()

    def delete(self) -> None:
        """Delete the file or directory; directories are removed recursively."""
        get_filesystem().remove(self.string)

    def move(self, destination: "Path | str") -> None:
        """Move to destination, which names the new location itself."""
        get_filesystem().move(self.string, _raw(destination))

    def copy(self, destination: "Path | str") -> None:
        """Copy to destination, recursively for directories."""
        get_filesystem().copy(self.string, _raw(destination))

    def link(self, destination: "Path | str") -> None:
        """Create a hard link at destination referring to this path."""
        get_filesystem().hardlink(self.string, _raw(destination))

    def symlink(self, destination: "Path | str") -> None:
        """Create a symbolic link at this path pointing to destination."""
        get_filesystem().symlink(self.string, _raw(destination))

    def symlink_destination(self) -> "Path":
        """The path this symbolic link refers to.

        A relative link target is re-rooted against the directory containing
        the link, so the result is usable from the current directory.
        """
        destination = Path(get_filesystem().read_symlink(self.string))
        if destination.is_relative:
            return self + lexical.PARENT + destination
        return destination

    # ------------------------------------------------------------------
    # Contents
    # ------------------------------------------------------------------

    def read_bytes(self) -> bytes:
        return get_filesystem().read_bytes(self.string)

    def read_text(self, encoding: str | None = None) -> str:
        """Read and decode the file, using the configured encoding by default."""
        return self.read_bytes().decode(encoding or get_config().encoding)

    def read_bytes_or_none(self) -> bytes | None:
        """Like read_bytes(), but None if the file does not exist."""
        try:
            return self.read_bytes()
        except FileNotFoundError:
            return None

    def read_text_or_none(self, encoding: str | None = None) -> str | None:
        """Like read_text(), but None if the file does not exist."""
        try:
            return self.read_text(encoding)
        except FileNotFoundError:
            return None

    def write_bytes(self, data: bytes, *, create_parents: bool = False) -> None:
        """Replace the file contents atomically.

        With create_parents, missing intermediate directories are created first.
        """
        target = self.normalize()
        if create_parents:
            target.mkintermediatedirs()
        get_filesystem().write_bytes(target.string, data)

    def write_text(
        self, text: str, encoding: str | None = None, *, create_parents: bool = False
    ) -> None:
        """Encode text with the configured encoding by default and write it."""
        self.write_bytes(
            text.encode(encoding or get_config().encoding), create_parents=create_parents
        )

    # ------------------------------------------------------------------
    # Traversing
    # ------------------------------------------------------------------

    def children(self) -> list["Path"]:
        """Paths of the immediate children of this directory.

        Raises:
            FileNotFoundError: If this path does not exist
            NotADirectoryError: If this path is not a directory
        """
        return [self + name for name in get_filesystem().list_directory(self.string)]

    def recursive_children(self) -> list["Path"]:
        """Paths of every file, directory and symlink below this directory."""
        return [self + name for name in get_filesystem().list_directory_recursive(self.string)]

    def iterate_children(self, *, skip_hidden: bool = False) -> "DirectoryEnumerator":
        """Lazily enumerate this directory depth-first.

        Call skip_descendants() on the returned enumerator to avoid descending
        into the most recently yielded directory.
        """
        from pathkit.enumerator import DirectoryEnumerator

        return DirectoryEnumerator(self, skip_hidden=skip_hidden)

    @staticmethod
    def glob_pattern(pattern: str) -> list["Path"]:
        """Paths matching a shell pattern; "~" and "{a,b}" are expanded."""
        return [Path(match) for match in get_filesystem().glob(pattern)]

    def glob(self, pattern: str) -> list["Path"]:
        """Paths matching pattern relative to this path."""
        return Path.glob_pattern((self + pattern).string)
