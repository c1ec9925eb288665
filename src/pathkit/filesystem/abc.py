"""Filesystem adapter interface.

The Path value type never talks to the OS directly. Every metadata query,
mutation, read, write and listing goes through a Filesystem implementation.

Architecture:
- Filesystem: Abstract base class defining the interface
- RealFilesystem: Production implementation over os, shutil and glob
- FakeFilesystem: In-memory implementation for tests

All paths crossing this interface are plain strings. Failures are raised as
the built-in OSError subclasses (FileNotFoundError, FileExistsError,
PermissionError, NotADirectoryError, ...) with errno and filename set.
"""

from abc import ABC, abstractmethod


class Filesystem(ABC):
    """Abstract interface for filesystem operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    # ------------------------------------------------------------------
    # Process environment
    # ------------------------------------------------------------------

    @abstractmethod
    def get_cwd(self) -> str:
        """Get the current working directory of the process."""
        ...

    @abstractmethod
    def set_cwd(self, path: str) -> None:
        """Change the current working directory of the process.

        Raises:
            FileNotFoundError: If path does not exist
            NotADirectoryError: If path is not a directory
        """
        ...

    @abstractmethod
    def home_directory(self) -> str:
        """Get the home directory of the invoking user."""
        ...

    @abstractmethod
    def user_home_directory(self, user: str) -> str | None:
        """Get the home directory of user, or None if the user is unknown."""
        ...

    @abstractmethod
    def temporary_directory(self) -> str:
        """Get the temporary directory for the current user."""
        ...

    @abstractmethod
    def is_case_sensitive(self, path: str) -> bool:
        """Check whether the filesystem holding path compares names case-sensitively."""
        ...

    # ------------------------------------------------------------------
    # Metadata queries
    #
    # Predicates return False both when the path is missing and when it
    # exists with the wrong type or permissions. They never raise.
    # ------------------------------------------------------------------

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a file, directory or symlink target exists at path."""
        ...

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Check if path is a directory or a symlink to one."""
        ...

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Check if path exists and is not a directory (symlinks are followed)."""
        ...

    @abstractmethod
    def is_symlink(self, path: str) -> bool:
        """Check if path itself is a symbolic link."""
        ...

    @abstractmethod
    def is_readable(self, path: str) -> bool:
        """Check if the process may read path."""
        ...

    @abstractmethod
    def is_writable(self, path: str) -> bool:
        """Check if the process may write path."""
        ...

    @abstractmethod
    def is_executable(self, path: str) -> bool:
        """Check if the process may execute path."""
        ...

    @abstractmethod
    def is_deletable(self, path: str) -> bool:
        """Check if the process may remove path from its parent directory."""
        ...

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @abstractmethod
    def create_directory(self, path: str, *, parents: bool) -> None:
        """Create a directory.

        Args:
            path: Directory to create
            parents: Create missing intermediate directories. When True, an
                existing directory at path is not an error.

        Raises:
            FileExistsError: If path exists and parents is False
            FileNotFoundError: If the parent is missing and parents is False
            NotADirectoryError: If an intermediate component is not a directory
        """
        ...

    @abstractmethod
    def remove(self, path: str) -> None:
        """Remove a file, symlink or directory (recursively).

        Raises:
            FileNotFoundError: If nothing exists at path
        """
        ...

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """Move source to destination, which names the new location itself."""
        ...

    @abstractmethod
    def copy(self, source: str, destination: str) -> None:
        """Copy source to destination, recursively for directories.

        Raises:
            FileExistsError: If destination already exists
        """
        ...

    @abstractmethod
    def hardlink(self, source: str, destination: str) -> None:
        """Create a hard link at destination referring to source."""
        ...

    @abstractmethod
    def symlink(self, path: str, target: str) -> None:
        """Create a symbolic link at path whose content is target."""
        ...

    @abstractmethod
    def read_symlink(self, path: str) -> str:
        """Return the content of the symbolic link at path, unresolved.

        Raises:
            FileNotFoundError: If path does not exist
            OSError: If path is not a symbolic link (errno EINVAL)
        """
        ...

    # ------------------------------------------------------------------
    # Contents
    # ------------------------------------------------------------------

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Read the whole file at path.

        Raises:
            FileNotFoundError: If path does not exist
            IsADirectoryError: If path is a directory
        """
        ...

    @abstractmethod
    def write_bytes(self, path: str, data: bytes) -> None:
        """Replace the contents of the file at path atomically.

        Raises:
            FileNotFoundError: If the parent directory does not exist
            IsADirectoryError: If path is a directory
        """
        ...

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    @abstractmethod
    def list_directory(self, path: str) -> list[str]:
        """List the names of the immediate children of path, sorted.

        Raises:
            FileNotFoundError: If path does not exist
            NotADirectoryError: If path is not a directory
        """
        ...

    @abstractmethod
    def list_directory_recursive(self, path: str) -> list[str]:
        """List every descendant of path as a path relative to it, sorted.

        Symlinked directories are listed but not descended into.

        Raises:
            FileNotFoundError: If path does not exist
            NotADirectoryError: If path is not a directory
        """
        ...

    @abstractmethod
    def glob(self, pattern: str) -> list[str]:
        """Expand a shell-style pattern against the filesystem.

        Leading "~" and "{a,b}" alternatives are expanded before matching.
        Directories are reported with a trailing separator. The result is
        sorted and free of duplicates; no match yields an empty list.
        """
        ...
