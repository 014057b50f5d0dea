"""Command line: rebuild and restart a program whenever a directory changes."""

from __future__ import annotations

import getopt
import multiprocessing
import sys
import time
from dataclasses import dataclass, field

from hotreload.utils import (
    PATH_MAX,
    ChildExitError,
    PathKind,
    add_watch_recursive,
    debug,
    error,
    exists,
    info,
    kill_child,
    run,
    split_string,
)

POLL_INTERVAL = 0.1


@dataclass
class ArgOptions:
    """Include and exclude path lists given on the command line."""

    exclude_list: list[str] = field(default_factory=list)
    include_list: list[str] = field(default_factory=list)


def _validate_paths(paths: list[str]) -> None:
    for path in paths:
        if len(path) >= PATH_MAX:
            error("Path is too big")


def parse_args(argv: list[str]) -> ArgOptions:
    """Parse ``-e`` and ``-i`` options; the later of the two wins."""
    try:
        options, _ = getopt.gnu_getopt(list(argv), "e:i:")
    except getopt.GetoptError as exc:
        error(f"Unknown option: {exc.opt}")
        raise SystemExit(1) from exc

    opts = ArgOptions()
    for flag, value in options:
        if flag == "-e":
            opts.exclude_list = split_string(value, ",")
            _validate_paths(opts.exclude_list)
            opts.include_list = []
        elif flag == "-i":
            opts.include_list = split_string(value, ",")
            _validate_paths(opts.include_list)
            opts.exclude_list = []
    return opts


def _run_target(target: str) -> None:
    try:
        run(target, True)
    except ChildExitError as exc:
        sys.exit(exc.returncode)
    except FileNotFoundError:
        sys.exit(1)


def main(argv: list[str] | None = None) -> int:
    """Watch a directory, rebuild on change and keep the target running."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        info("Usage: hot-reload <dir to watch> <build script> <target binary>")
        return 1

    watch_dir, build_script, target_binary = args

    if not exists(watch_dir, PathKind.DIR):
        error(f'Directory "{watch_dir}" does not exist')
        return 1
    if not exists(build_script, PathKind.FILE):
        error(f'File "{build_script}" does not exist')
        return 1
    if not exists(target_binary, PathKind.FILE):
        error(f'File "{target_binary}" does not exist')
        return 1

    watcher = add_watch_recursive(watch_dir)
    modified = True
    child = None
    try:
        while True:
            if modified:
                if child is not None:
                    debug("KILLING PREVIOUS BINARY")
                    kill_child(child)
                    child = None
                debug("File modified. Running build_script")
                try:
                    run(build_script, False)
                except FileNotFoundError:
                    return 1
                except ChildExitError as exc:
                    return exc.returncode

            if child is None:
                child = multiprocessing.Process(
                    target=_run_target, args=(target_binary,), daemon=True
                )
                child.start()

            modified = watcher.changed()
            if not modified:
                time.sleep(POLL_INTERVAL)
    except KeyboardInterrupt:
        return 130
    finally:
        if child is not None and child.is_alive():
            kill_child(child)


if __name__ == "__main__":
    sys.exit(main())