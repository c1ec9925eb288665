"""Shared fixtures: every test starts with default config and the real adapter."""

import pathlib
from collections.abc import Generator

import pytest

from pathkit.config import ENV_CASE_SENSITIVE, ENV_DEBUG, ENV_ENCODING, PathkitConfig, set_config
from pathkit.filesystem import FakeFilesystem, RealFilesystem, set_filesystem


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Reset the active adapter and config around each test."""
    for name in (ENV_ENCODING, ENV_CASE_SENSITIVE, ENV_DEBUG):
        monkeypatch.delenv(name, raising=False)
    set_filesystem(None)
    set_config(PathkitConfig())
    yield
    set_filesystem(None)
    set_config(None)


@pytest.fixture
def fake_fs() -> FakeFilesystem:
    """An empty in-memory filesystem installed as the active adapter."""
    fs = FakeFilesystem(cwd="/work", home="/home/user")
    set_filesystem(fs)
    return fs


@pytest.fixture
def real_fs(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> RealFilesystem:
    """The real adapter, with the working directory moved to tmp_path."""
    monkeypatch.chdir(tmp_path)
    fs = RealFilesystem()
    set_filesystem(fs)
    return fs


@pytest.fixture
def home(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:
    """A fresh home directory exported as $HOME."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir
