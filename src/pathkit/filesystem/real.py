"""Production filesystem implementation.

This module provides the real Filesystem implementation that performs actual
OS calls via os, shutil, glob and tempfile. Errors raised by those calls
propagate unchanged.
"""

import contextlib
import errno
import glob
import logging
import os
import shutil
import stat
import sys
import tempfile

from pathkit import lexical
from pathkit.filesystem.abc import Filesystem
from pathkit.filesystem.patterns import expand_braces

logger = logging.getLogger(__name__)

# ============================================================================
# Production Implementation
# ============================================================================


def _raise_walk_error(error: OSError) -> None:
    raise error


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class RealFilesystem(Filesystem):
    """Production implementation using the os, shutil and glob modules.

    All operations act on the real filesystem of the running process.
    """

    # ------------------------------------------------------------------
    # Process environment
    # ------------------------------------------------------------------

    def get_cwd(self) -> str:
        """Get the current working directory via os.getcwd()."""
        return os.getcwd()

    def set_cwd(self, path: str) -> None:
        """Change the current working directory via os.chdir()."""
        logger.debug("chdir %s", path)
        os.chdir(path)

    def home_directory(self) -> str:
        """Get the home directory from $HOME or the user database."""
        return os.path.expanduser("~")

    def user_home_directory(self, user: str) -> str | None:
        """Look up the home directory of user in the user database."""
        tilde = lexical.HOME + user
        expanded = os.path.expanduser(tilde)
        if expanded == tilde:
            return None
        return expanded

    def temporary_directory(self) -> str:
        """Get the temporary directory chosen by tempfile."""
        return tempfile.gettempdir()

    def is_case_sensitive(self, path: str) -> bool:
        """Probe case-sensitivity using the nearest existing ancestor of path.

        Linux filesystems are assumed to be case-sensitive. Elsewhere the
        case-swapped name of an existing component is looked up; if it
        refers to the same file, the filesystem folds case.
        """
        if sys.platform.startswith("linux"):
            return True

        probe = os.path.abspath(path)
        while True:
            name = os.path.basename(probe)
            parent = os.path.dirname(probe)
            if name and name != name.swapcase() and os.path.lexists(probe):
                swapped = os.path.join(parent, name.swapcase())
                if not os.path.lexists(swapped):
                    return True
                return not os.path.samefile(probe, swapped)
            if parent == probe:
                return True
            probe = parent

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def exists(self, path: str) -> bool:
        """Check existence, following symlinks."""
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        """Check for a directory, following symlinks."""
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        """Check for an existing non-directory, following symlinks."""
        return os.path.exists(path) and not os.path.isdir(path)

    def is_symlink(self, path: str) -> bool:
        """Check whether path itself is a symbolic link."""
        return os.path.islink(path)

    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK)

    def is_writable(self, path: str) -> bool:
        return os.access(path, os.W_OK)

    def is_executable(self, path: str) -> bool:
        return os.access(path, os.X_OK)

    def is_deletable(self, path: str) -> bool:
        """Check that the parent directory permits unlinking path.

        Requires write and search permission on the parent. When the parent
        has the sticky bit set, only the owner of the file, the owner of the
        directory or the superuser may remove it.
        """
        if not os.path.lexists(path):
            return False

        parent = os.path.dirname(os.path.abspath(path))
        if not os.access(parent, os.W_OK | os.X_OK):
            return False

        parent_status = os.stat(parent)
        if not parent_status.st_mode & stat.S_ISVTX:
            return True

        uid = os.geteuid()
        return uid == 0 or uid == parent_status.st_uid or uid == os.lstat(path).st_uid

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_directory(self, path: str, *, parents: bool) -> None:
        logger.debug("mkdir %s (parents=%s)", path, parents)
        if parents:
            os.makedirs(path, exist_ok=True)
        else:
            os.mkdir(path)

    def remove(self, path: str) -> None:
        """Remove path; directories are removed recursively, symlinks are not followed."""
        logger.debug("remove %s", path)
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)

    def move(self, source: str, destination: str) -> None:
        """Move source to destination, refusing to overwrite."""
        logger.debug("move %s -> %s", source, destination)
        if os.path.lexists(destination):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), destination)
        shutil.move(source, destination)

    def copy(self, source: str, destination: str) -> None:
        """Copy source to destination, preserving symlinks and metadata."""
        logger.debug("copy %s -> %s", source, destination)
        if os.path.lexists(destination):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), destination)

        if os.path.islink(source):
            os.symlink(os.readlink(source), destination)
        elif os.path.isdir(source):
            shutil.copytree(source, destination, symlinks=True)
        else:
            shutil.copy2(source, destination)

    def hardlink(self, source: str, destination: str) -> None:
        logger.debug("link %s -> %s", destination, source)
        os.link(source, destination)

    def symlink(self, path: str, target: str) -> None:
        logger.debug("symlink %s -> %s", path, target)
        os.symlink(target, path)

    def read_symlink(self, path: str) -> str:
        return os.readlink(path)

    # ------------------------------------------------------------------
    # Contents
    # ------------------------------------------------------------------

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as handle:
            return handle.read()

    def write_bytes(self, path: str, data: bytes) -> None:
        """Write data to a temporary sibling file, then rename it over path.

        An existing file keeps its permission bits; a new file gets the
        default permissions allowed by the process umask.
        """
        logger.debug("write %s (%d bytes)", path, len(data))
        if os.path.isdir(path):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)

        directory = os.path.dirname(path) or lexical.CURRENT
        if not os.path.exists(directory):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        if not os.path.isdir(directory):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)

        if os.path.exists(path):
            mode = stat.S_IMODE(os.stat(path).st_mode)
        else:
            mode = 0o666 & ~_current_umask()

        fd, temporary = tempfile.mkstemp(
            dir=directory, prefix=f".{os.path.basename(path)}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.chmod(temporary, mode)
            os.replace(temporary, path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(temporary)
            raise

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def list_directory(self, path: str) -> list[str]:
        return sorted(os.listdir(path))

    def list_directory_recursive(self, path: str) -> list[str]:
        # os.walk reports a missing or non-directory root silently
        os.listdir(path)

        results: list[str] = []
        for root, directories, files in os.walk(path, onerror=_raise_walk_error):
            for name in [*directories, *files]:
                results.append(os.path.relpath(os.path.join(root, name), path))
        return sorted(results)

    def glob(self, pattern: str) -> list[str]:
        home = self.home_directory()
        matches: set[str] = set()
        for expanded in expand_braces(pattern):
            for match in glob.glob(
                lexical.expand_tilde(expanded, home, self.user_home_directory)
            ):
                if os.path.isdir(match) and not match.endswith(lexical.SEPARATOR):
                    match += lexical.SEPARATOR
                matches.add(match)
        return sorted(matches)
