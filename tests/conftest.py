"""Shared test fixtures for DStat tests."""

import os
import socket

import pytest

from dstat.tally import TypeTally


def make_files(directory, count, prefix="file"):
    for i in range(count):
        (directory / f"{prefix}{i}.txt").write_text("x")


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path_factory):
    """Keep user config files and DSTAT_* variables out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("DSTAT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def empty_dir(tmp_path):
    """An empty directory."""
    d = tmp_path / "empty"
    d.mkdir()
    return d


@pytest.fixture
def three_files_dir(tmp_path):
    """A directory holding three regular files."""
    d = tmp_path / "three"
    d.mkdir()
    make_files(d, 3)
    return d


@pytest.fixture
def file_and_subdir(tmp_path):
    """One regular file and one subdirectory."""
    d = tmp_path / "pair"
    d.mkdir()
    (d / "a.txt").write_text("a")
    (d / "sub").mkdir()
    return d


@pytest.fixture
def mixed_dir(tmp_path):
    """Two files, a subdirectory, two symlinks, a FIFO and (where possible) a socket."""
    d = tmp_path / "mixed"
    d.mkdir()
    make_files(d, 2)
    (d / "sub").mkdir()
    (d / "nested_is_not_counted").mkdir()
    (d / "nested_is_not_counted" / "deep.txt").write_text("deep")
    os.symlink(d / "file0.txt", d / "link_to_file")
    os.symlink(d / "sub", d / "link_to_dir")
    os.mkfifo(d / "pipe")
    return d


@pytest.fixture
def unix_socket(tmp_path):
    """Bind a unix socket inside tmp_path; skip where that is impossible."""
    path = tmp_path / "s.sock"
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.bind(str(path))
    except OSError as e:
        sock.close()
        pytest.skip(f"cannot bind unix socket: {e}")
    yield path
    sock.close()


@pytest.fixture
def sample_tally():
    """A tally with a distinct value in every counter."""
    return TypeTally(
        regular=12, directory=1, symlink=3, block=0, char=2, fifo=1, socket=5, whiteout=0, unknown=7
    )


@pytest.fixture
def make_dir(tmp_path):
    """Factory: ``make_dir(name, files=0, dirs=0)`` builds and returns a directory."""

    def _make(name, files=0, dirs=0):
        d = tmp_path / name
        d.mkdir()
        make_files(d, files)
        for i in range(dirs):
            (d / f"dir{i}").mkdir()
        return d

    return _make
