# hotreload

A small development helper that watches a directory tree, runs your build
script whenever something inside it changes, and then restarts the program
the build produces.

## Usage

```
hot-reload <dir to watch> <build script> <target binary>
```

The same command is available as `python -m hotreload.cli`.

- `<dir to watch>` must be an existing directory. Every file and subdirectory
  below it is watched.
- `<build script>` must be an existing, executable regular file. It is run
  once at start-up and again after each change.
- `<target binary>` must be an existing, executable regular file. It is
  started in a background process after a successful build and run again,
  with a ten-second countdown between runs, until a change triggers a rebuild.

If the wrong number of arguments is given, or one of the paths does not exist
or is of the wrong kind, `hot-reload` prints a message and exits with
status 1.

Before each run of the build script or of the target, the terminal is
cleared. If the build script exits with a non-zero status, `hot-reload` stops
and exits with that same status. If the target exits with a non-zero status,
its background runner stops repeating it, while `hot-reload` keeps watching;
the next change rebuilds and starts the target again. When a change is
detected, the running target is killed before the build script is run again.
Pressing Ctrl-C stops `hot-reload` with status 130 and kills the target.

Messages go to standard error, coloured by level: `[INFO]` in green and
`[ERROR]` in red. `[DEBUG]` messages, in blue, are printed only when the
environment variable `HOTRELOAD_DEBUG` is set to a non-empty value.

## Using it from Python

The building blocks live in `hotreload.utils`:

```python
from hotreload.utils import PathKind, exists, split_string, add_watch_recursive

exists("src", PathKind.DIR)          # True if "src" is a directory
split_string("a,b,,c", ",")          # ["a", "b", "c"]

watcher = add_watch_recursive("src")  # a DirectoryWatcher
if watcher.changed():
    print("something under src/ changed")
```

- `exists(path, kind)` checks a path against `PathKind.ANY`, `PathKind.FILE`
  or `PathKind.DIR`; a missing path gives `False`.
- `DirectoryWatcher(path)` raises `NotADirectoryError` if `path` is not a
  directory. `changed()` reports whether any entry below it was created,
  deleted, renamed, or had its modification time or size change since the
  previous call.
- `run(file, continuous)` runs a program, raising `FileNotFoundError` if it is
  not a regular file and `ChildExitError` (with `file` and `returncode`) if it
  exits with a non-zero status. With `continuous` true it repeats the program
  with a ten-second countdown between runs.
- `kill_child(process)` kills a `subprocess.Popen` or
  `multiprocessing.Process` and waits for it.
- `info`, `error` and `debug` print coloured messages to standard error.

The command-line entry point is `hotreload.cli.main`, which takes an optional
argument list in place of `sys.argv[1:]` and returns the exit status.
`hotreload.cli.parse_args(argv)` parses `-e` (exclude) and `-i` (include)
options, each a comma-separated list of paths, into an `ArgOptions` with
`exclude_list` and `include_list`; whichever of the two is given last wins
and clears the other, and an unknown option exits with status 1.

## What it does not do

- `hot-reload` itself takes no options: include and exclude lists parsed by
  `parse_args` are not applied to what is watched.
- Changes are found by scanning the tree every 0.1 seconds, not through
  operating-system change notifications.
- No arguments can be passed to the build script or the target.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```