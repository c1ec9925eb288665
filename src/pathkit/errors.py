"""Filesystem error categories.

Filesystem operations raise the built-in OSError subclasses unchanged. This
module lets callers branch on the category of such an error without matching
on errno values themselves.
"""

import errno
import os
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathkit.path import Path


class ErrorKind(Enum):
    """Category of a failed filesystem operation."""

    NOT_FOUND = "not-found"
    ALREADY_EXISTS = "already-exists"
    NO_PERMISSION = "no-permission"
    NOT_A_DIRECTORY = "not-a-directory"
    IS_A_DIRECTORY = "is-a-directory"
    NOT_EMPTY = "not-empty"
    IO = "io"


_ERRNO_KINDS = {
    errno.ENOENT: ErrorKind.NOT_FOUND,
    errno.EEXIST: ErrorKind.ALREADY_EXISTS,
    errno.EACCES: ErrorKind.NO_PERMISSION,
    errno.EPERM: ErrorKind.NO_PERMISSION,
    errno.EROFS: ErrorKind.NO_PERMISSION,
    errno.ENOTDIR: ErrorKind.NOT_A_DIRECTORY,
    errno.EISDIR: ErrorKind.IS_A_DIRECTORY,
    errno.ENOTEMPTY: ErrorKind.NOT_EMPTY,
}


def classify_error(error: OSError) -> ErrorKind:
    """Return the category of an OSError raised by a filesystem adapter.

    The errno is consulted first; errors raised without one fall back to the
    exception type.
    """
    if error.errno is not None and error.errno in _ERRNO_KINDS:
        return _ERRNO_KINDS[error.errno]

    if isinstance(error, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(error, FileExistsError):
        return ErrorKind.ALREADY_EXISTS
    if isinstance(error, PermissionError):
        return ErrorKind.NO_PERMISSION
    if isinstance(error, NotADirectoryError):
        return ErrorKind.NOT_A_DIRECTORY
    if isinstance(error, IsADirectoryError):
        return ErrorKind.IS_A_DIRECTORY
    return ErrorKind.IO


def error_path(error: OSError) -> "Path | None":
    """Return the offending path recorded on an OSError, if any."""
    from pathkit.path import Path

    if error.filename is None:
        return None
    return Path(os.fsdecode(error.filename))
