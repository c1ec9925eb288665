"""Tests for filesystem error classification."""

import errno

import pytest

from pathkit import ErrorKind, FakeFilesystem, Path, classify_error, error_path


@pytest.mark.parametrize(
    ("code", "kind"),
    [
        (errno.ENOENT, ErrorKind.NOT_FOUND),
        (errno.EEXIST, ErrorKind.ALREADY_EXISTS),
        (errno.EACCES, ErrorKind.NO_PERMISSION),
        (errno.EPERM, ErrorKind.NO_PERMISSION),
        (errno.ENOTDIR, ErrorKind.NOT_A_DIRECTORY),
        (errno.EISDIR, ErrorKind.IS_A_DIRECTORY),
        (errno.ENOTEMPTY, ErrorKind.NOT_EMPTY),
        (errno.EIO, ErrorKind.IO),
    ],
)
def test_classify_by_errno(code: int, kind: ErrorKind) -> None:
    """Test that the errno decides the category."""
    assert classify_error(OSError(code, "message", "/x")) is kind


def test_classify_without_errno_uses_type() -> None:
    """Test the fallback to the exception type when no errno is set."""
    assert classify_error(FileNotFoundError("gone")) is ErrorKind.NOT_FOUND
    assert classify_error(FileExistsError("there")) is ErrorKind.ALREADY_EXISTS
    assert classify_error(PermissionError("no")) is ErrorKind.NO_PERMISSION
    assert classify_error(OSError("other")) is ErrorKind.IO


def test_error_path() -> None:
    """Test that the offending path is recovered from the error."""
    error = OSError(errno.ENOENT, "No such file or directory", "/missing/file")
    assert error_path(error) == Path("/missing/file")


def test_error_path_bytes_filename() -> None:
    """Test that bytes filenames are decoded."""
    error = OSError(errno.ENOENT, "No such file or directory", b"/missing")
    assert error_path(error) == Path("/missing")


def test_error_path_without_filename() -> None:
    """Test that errors without a filename have no path."""
    assert error_path(OSError("boom")) is None


def test_classify_fake_filesystem_errors(fake_fs: FakeFilesystem) -> None:
    """Test that errors from the fake adapter classify like real ones."""
    with pytest.raises(OSError) as exc_info:
        Path("/missing/child").mkdir()
    assert classify_error(exc_info.value) is ErrorKind.NOT_FOUND
    assert error_path(exc_info.value) == Path("/missing/child")
