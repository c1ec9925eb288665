"""Tests for lazy depth-first directory enumeration."""

from pathkit import FakeFilesystem, Path
from pathkit.filesystem import use_filesystem


def _tree() -> FakeFilesystem:
    return FakeFilesystem(
        files={"/r/a/x": "", "/r/b": "", "/r/.hidden/y": ""},
        symlinks={"/r/link": "a"},
    )


def test_depth_first_order() -> None:
    """Test that parents come before children and siblings are sorted."""
    with use_filesystem(_tree()):
        entries = list(Path("/r").iterate_children())

    assert entries == [
        Path("/r/.hidden"),
        Path("/r/.hidden/y"),
        Path("/r/a"),
        Path("/r/a/x"),
        Path("/r/b"),
        Path("/r/link"),
    ]


def test_symlinked_directories_are_not_followed() -> None:
    """Test that a link to a directory is yielded without its contents."""
    with use_filesystem(_tree()):
        entries = list(Path("/r").iterate_children())

    assert Path("/r/link/x") not in entries


def test_skip_hidden() -> None:
    """Test that hidden entries and their subtrees are omitted."""
    with use_filesystem(_tree()):
        entries = list(Path("/r").iterate_children(skip_hidden=True))

    assert entries == [Path("/r/a"), Path("/r/a/x"), Path("/r/b"), Path("/r/link")]


def test_skip_descendants() -> None:
    """Test that skip_descendants prunes the last yielded directory."""
    seen: list[Path] = []
    with use_filesystem(_tree()):
        enumerator = Path("/r").iterate_children()
        for entry in enumerator:
            seen.append(entry)
            if entry.last_component in (".hidden", "a"):
                enumerator.skip_descendants()

    assert seen == [Path("/r/.hidden"), Path("/r/a"), Path("/r/b"), Path("/r/link")]


def test_skip_descendants_on_file_is_harmless() -> None:
    """Test that skipping after a file changes nothing."""
    seen: list[Path] = []
    with use_filesystem(_tree()):
        enumerator = Path("/r").iterate_children(skip_hidden=True)
        for entry in enumerator:
            seen.append(entry)
            if entry.last_component == "x":
                enumerator.skip_descendants()

    assert seen == [Path("/r/a"), Path("/r/a/x"), Path("/r/b"), Path("/r/link")]


def test_level() -> None:
    """Test that level reports the depth of the last yielded entry."""
    levels: dict[str, int] = {}
    with use_filesystem(_tree()):
        enumerator = Path("/r").iterate_children()
        for entry in enumerator:
            levels[entry.last_component] = enumerator.level

    assert levels == {".hidden": 1, "y": 2, "a": 1, "x": 2, "b": 1, "link": 1}


def test_relative_root() -> None:
    """Test that entries keep the root as given."""
    fs = FakeFilesystem(cwd="/w", files={"/w/d/f": ""})
    with use_filesystem(fs):
        assert list(Path("d").iterate_children()) == [Path("d/f")]


def test_missing_root_yields_nothing(fake_fs: FakeFilesystem) -> None:
    """Test that a nonexistent root produces an empty iteration."""
    assert list(Path("/missing").iterate_children()) == []


def test_file_root_yields_nothing() -> None:
    """Test that a regular file as root produces an empty iteration."""
    with use_filesystem(FakeFilesystem(files={"/f": ""})):
        assert list(Path("/f").iterate_children()) == []


def test_exhausted_enumerator_stays_exhausted(fake_fs: FakeFilesystem) -> None:
    """Test that next() keeps raising StopIteration after the end."""
    enumerator = Path("/home").iterate_children()

    assert list(enumerator) == [Path("/home/user")]
    assert list(enumerator) == []
