"""Tests for the pathkit command line interface."""

import pytest
from click.testing import CliRunner

from pathkit import FakeFilesystem, PathkitConfig, set_config, set_filesystem
from pathkit.cli.cli import cli
from pathkit.config import load_config


def _lines(output: str) -> list[str]:
    return output.splitlines()


def test_help() -> None:
    """Test that -h is accepted as a help flag."""
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"])

    assert result.exit_code == 0
    assert "join" in result.output
    assert "glob" in result.output


def test_join() -> None:
    """Test joining fragments lexically."""
    runner = CliRunner()
    result = runner.invoke(cli, ["join", "a/b/c", "../d/e", "f"])

    assert result.exit_code == 0
    assert result.output == "a/b/d/e/f\n"


def test_join_requires_fragment() -> None:
    """Test that join without fragments is a usage error."""
    runner = CliRunner()
    result = runner.invoke(cli, ["join", "a"])

    assert result.exit_code == 2


def test_normalize(fake_fs: FakeFilesystem) -> None:
    """Test normalization with tilde expansion."""
    runner = CliRunner()
    result = runner.invoke(cli, ["normalize", "~/src/../notes"])

    assert result.exit_code == 0
    assert result.output == "/home/user/notes\n"


def test_abbreviate(fake_fs: FakeFilesystem) -> None:
    """Test abbreviating the home directory."""
    runner = CliRunner()
    result = runner.invoke(cli, ["abbreviate", "/home/user/src"])

    assert result.exit_code == 0
    assert result.output == "~/src\n"


def test_absolute(fake_fs: FakeFilesystem) -> None:
    """Test resolving against the current directory."""
    runner = CliRunner()
    result = runner.invoke(cli, ["absolute", "src/../lib"])

    assert result.exit_code == 0
    assert result.output == "/work/lib\n"


def test_components() -> None:
    """Test printing one component per line."""
    runner = CliRunner()
    result = runner.invoke(cli, ["components", "/usr/local/bin"])

    assert result.exit_code == 0
    assert _lines(result.output) == ["/", "usr", "local", "bin"]


def test_info(fake_fs: FakeFilesystem) -> None:
    """Test the info table for an existing file."""
    fake_fs.write_bytes("/work/setup.cfg", b"[metadata]\n")

    runner = CliRunner()
    result = runner.invoke(cli, ["info", "setup.cfg"])

    assert result.exit_code == 0
    assert "/work/setup.cfg" in result.output
    assert "cfg" in result.output
    assert "exists" in result.output
    assert "yes" in result.output


def test_info_symlink(fake_fs: FakeFilesystem) -> None:
    """Test that the info table shows where a symlink points."""
    fake_fs.write_bytes("/work/target.txt", b"")
    fake_fs.symlink("/work/link", "target.txt")

    runner = CliRunner()
    result = runner.invoke(cli, ["info", "/work/link"])

    assert result.exit_code == 0
    assert "symlink destination" in result.output
    assert "/work/target.txt" in result.output


def test_ls() -> None:
    """Test listing immediate children."""
    set_filesystem(FakeFilesystem(cwd="/w", files={"/w/d/b": "", "/w/d/a/x": ""}))

    runner = CliRunner()
    result = runner.invoke(cli, ["ls", "d"])

    assert result.exit_code == 0
    assert _lines(result.output) == ["d/a", "d/b"]


def test_ls_recursive(fake_fs: FakeFilesystem) -> None:
    """Test listing every entry below a directory."""
    fake_fs.create_directory("/work/d/a", parents=True)
    fake_fs.write_bytes("/work/d/a/x", b"")

    runner = CliRunner()
    result = runner.invoke(cli, ["ls", "--recursive", "d"])

    assert result.exit_code == 0
    assert _lines(result.output) == ["d/a", "d/a/x"]


def test_ls_missing(fake_fs: FakeFilesystem) -> None:
    """Test that a missing directory is reported without a traceback."""
    runner = CliRunner()
    result = runner.invoke(cli, ["ls", "/missing"])

    assert result.exit_code == 1
    assert "Error (not-found)" in result.output


def test_ls_file(fake_fs: FakeFilesystem) -> None:
    """Test that listing a file is reported as not a directory."""
    fake_fs.write_bytes("/work/f", b"")

    runner = CliRunner()
    result = runner.invoke(cli, ["ls", "f"])

    assert result.exit_code == 1
    assert "Error (not-a-directory)" in result.output


def test_walk_with_skip(fake_fs: FakeFilesystem) -> None:
    """Test depth-first walking with pruned directories."""
    for path in ["/work/src/pkg/mod.py", "/work/src/.git/HEAD", "/work/src/build/out"]:
        fake_fs.create_directory(path.rsplit("/", 1)[0], parents=True)
        fake_fs.write_bytes(path, b"")

    runner = CliRunner()
    result = runner.invoke(cli, ["walk", "src", "--skip", ".git", "--skip", "build"])

    assert result.exit_code == 0
    assert _lines(result.output) == [".git", "build", "pkg", "  mod.py"]


def test_walk_skip_hidden(fake_fs: FakeFilesystem) -> None:
    """Test that --skip-hidden omits dot entries."""
    fake_fs.create_directory("/work/src/.git", parents=True)
    fake_fs.write_bytes("/work/src/main.py", b"")

    runner = CliRunner()
    result = runner.invoke(cli, ["walk", "src", "--skip-hidden"])

    assert result.exit_code == 0
    assert _lines(result.output) == ["main.py"]


def test_walk_missing(fake_fs: FakeFilesystem) -> None:
    """Test that walking a missing directory fails cleanly."""
    runner = CliRunner()
    result = runner.invoke(cli, ["walk", "nope"])

    assert result.exit_code == 1
    assert "Error (not-found)" in result.output


def test_glob(fake_fs: FakeFilesystem) -> None:
    """Test glob with brace expansion."""
    for name in ["a.py", "b.toml", "c.md"]:
        fake_fs.write_bytes(f"/work/{name}", b"")

    runner = CliRunner()
    result = runner.invoke(cli, ["glob", "*.{py,toml}"])

    assert result.exit_code == 0
    assert _lines(result.output) == ["a.py", "b.toml"]


class TestConfig:
    """Test the config subcommands."""

    def test_show(self, fake_fs: FakeFilesystem) -> None:
        set_config(PathkitConfig(encoding="latin-1", case_sensitive=False))

        runner = CliRunner()
        result = runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 0
        assert "file=/home/user/.pathkit/pathkit.toml" in result.output
        assert "encoding=latin-1" in result.output
        assert "case_sensitive=false" in result.output
        assert "debug=false" in result.output

    def test_show_auto_case_sensitivity(self, fake_fs: FakeFilesystem) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 0
        assert "case_sensitive=(auto)" in result.output

    def test_set(self, fake_fs: FakeFilesystem) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "set", "encoding", "latin-1"])

        assert result.exit_code == 0
        assert "Set encoding=latin-1" in result.output
        assert load_config(environ={}).encoding == "latin-1"

    def test_set_boolean(self, fake_fs: FakeFilesystem) -> None:
        runner = CliRunner()
        runner.invoke(cli, ["config", "set", "encoding", "latin-1"])
        result = runner.invoke(cli, ["config", "set", "case_sensitive", "false"])

        assert result.exit_code == 0
        saved = load_config(environ={})
        assert saved.case_sensitive is False
        assert saved.encoding == "latin-1"

    def test_set_auto(self, fake_fs: FakeFilesystem) -> None:
        runner = CliRunner()
        runner.invoke(cli, ["config", "set", "case_sensitive", "true"])
        result = runner.invoke(cli, ["config", "set", "case_sensitive", "auto"])

        assert result.exit_code == 0
        assert load_config(environ={}).case_sensitive is None

    def test_set_invalid_value(self, fake_fs: FakeFilesystem) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "set", "encoding", "no-such-codec"])

        assert result.exit_code == 1
        assert "Error: Unknown encoding" in result.output

    def test_set_unknown_key(self, fake_fs: FakeFilesystem) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "set", "colour", "red"])

        assert result.exit_code == 2

    def test_set_does_not_persist_environment(
        self, fake_fs: FakeFilesystem, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PATHKIT_ENCODING", "utf-16")

        runner = CliRunner()
        result = runner.invoke(cli, ["config", "set", "debug", "true"])

        assert result.exit_code == 0
        saved = load_config(environ={})
        assert saved.encoding == "utf-8"
        assert saved.debug is True
