"""Watch a directory, rerun a build script on change and restart the target program."""

__version__ = "1.0.0"
__all__ = ["__version__"]