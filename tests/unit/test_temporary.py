"""Tests for temporary directory helpers."""

from pathkit import FakeFilesystem, Path


def test_process_unique_temporary_is_stable(fake_fs: FakeFilesystem) -> None:
    """Test that the process directory is created once and reused."""
    first = Path.process_unique_temporary()
    second = Path.process_unique_temporary()

    assert first == second
    assert first.is_directory()
    assert first.parent == Path("/tmp")
    assert first.last_component.startswith("pathkit-")


def test_unique_temporary_is_fresh_each_call(fake_fs: FakeFilesystem) -> None:
    """Test that each call creates a new subdirectory of the process directory."""
    first = Path.unique_temporary()
    second = Path.unique_temporary()

    assert first != second
    assert first.is_directory()
    assert second.is_directory()
    assert first.parent == Path.process_unique_temporary()
    assert second.parent == Path.process_unique_temporary()
