"""Filesystem checks, directory watching and child-process helpers."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import sys
import time
from pathlib import Path

RELOAD_TIME = 10
PATH_MAX = 4096

_RED = "\033[31m"
_BLUE = "\033[34m"
_GREEN = "\033[32m"
_RESET = "\033[0m"
_CLEAR_SCREEN = "\033[H\033[2J"


class PathKind(enum.Enum):
    """What kind of filesystem entry :func:`exists` should accept."""

    ANY = "any"
    FILE = "file"
    DIR = "dir"


class ChildExitError(Exception):
    """A child program finished with a non-zero exit status."""

    def __init__(self, file: str, returncode: int) -> None:
        super().__init__(f"{file} exited with exit code {returncode}")
        self.file = file
        self.returncode = returncode


def _emit(colour: str, label: str, message: str) -> None:
    print(f"{_RESET}{colour}[{label}] {message}{_RESET}", file=sys.stderr)


def debug(message: str) -> None:
    """Print a debug message when HOTRELOAD_DEBUG is set in the environment."""
    if os.environ.get("HOTRELOAD_DEBUG"):
        _emit(_BLUE, "DEBUG", message)


def info(message: str) -> None:
    """Print an informational message to stderr."""
    _emit(_GREEN, "INFO", message)


def error(message: str) -> None:
    """Print an error message to stderr."""
    _emit(_RED, "ERROR", message)


def exists(path: str | os.PathLike, kind: PathKind) -> bool:
    """Return whether ``path`` exists and is of the requested kind."""
    if not isinstance(kind, PathKind):
        raise ValueError(f"invalid path kind: {kind!r}")
    try:
        st = os.stat(path)
    except OSError as exc:
        error(f"stat: {exc.strerror}")
        return False

    import stat as _stat

    is_dir = _stat.S_ISDIR(st.st_mode)
    is_file = not is_dir and _stat.S_ISREG(st.st_mode)
    debug(f"path={path} \t is_dir={int(is_dir)} \t is_file={int(is_file)}")

    if kind is PathKind.DIR:
        return is_dir
    if kind is PathKind.FILE:
        return is_file
    return is_dir or is_file


class DirectoryWatcher:
    """Watches a directory tree for created, deleted, moved or modified entries."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        if not self.path.is_dir():
            raise NotADirectoryError(f"{self.path} is not a directory")
        self._snapshot = self._scan()

    def _scan(self) -> dict[str, tuple[bool, int, int]]:
        snapshot: dict[str, tuple[bool, int, int]] = {}
        for root, dirs, files in os.walk(self.path):
            for name in [*dirs, *files]:
                full = os.path.join(root, name)
                try:
                    st = os.lstat(full)
                except OSError:
                    continue
                snapshot[full] = (name in dirs, st.st_mtime_ns, st.st_size)
        return snapshot

    def changed(self) -> bool:
        """Return True if anything in the tree changed since the last check."""
        current = self._scan()
        if current != self._snapshot:
            self._snapshot = current
            debug("File modified")
            return True
        return False


def add_watch_recursive(path: str | os.PathLike) -> DirectoryWatcher:
    """Start watching ``path`` and all directories below it."""
    return DirectoryWatcher(path)


def run(file: str, continuous: bool) -> None:
    """Run ``file``; when ``continuous``, rerun it every RELOAD_TIME seconds.

    Raises FileNotFoundError if ``file`` is not a regular file and
    ChildExitError if the program exits with a non-zero status.
    """
    if not exists(file, PathKind.FILE):
        error(f'File "{file}" does not exist or is not a valid file')
        raise FileNotFoundError(file)

    while True:
        sys.stdout.write(_CLEAR_SCREEN)
        sys.stdout.flush()
        try:
            completed = subprocess.run([file], executable=os.path.abspath(file))
            status = completed.returncode
        except OSError as exc:
            error(f"execv: {exc.strerror}")
            status = exc.errno or 1

        info(f"Child exited with exit status {status if status >= 0 else 0}")
        if status > 0:
            error(f"{file} exited with exit code {status}. Exiting..")
            raise ChildExitError(file, status)

        if not continuous:
            return

        print("\n...............................................")
        for remaining in range(RELOAD_TIME, 0, -1):
            print(remaining, flush=True)
            time.sleep(1)
        print("...............................................\n")


def kill_child(process) -> None:
    """Forcefully kill a child process and reap it."""
    process.kill()
    waiter = getattr(process, "join", None) or process.wait
    waiter()


def split_string(src: str | None, delim: str) -> list[str]:
    """Split ``src`` on any character of ``delim``, dropping empty tokens."""
    if src is None:
        return []
    if not delim:
        return [src] if src else []
    pattern = "[" + re.escape(delim) + "]"
    tokens = [token for token in re.split(pattern, src) if token]
    for token in tokens:
        debug(f"token = {token}")
    return tokens