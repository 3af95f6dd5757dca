"""Console and file input/output on displayable values."""

from __future__ import annotations

import sys
from collections.abc import Mapping


def to_display(value: object) -> str:
    """Render a value as text the way the interpreter shows it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        items = ", ".join(f"{to_display(k)}: {to_display(v)}" for k, v in value.items())
        return "{" + items + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(to_display(item) for item in value) + "]"
    return str(value)


def print_values(*args: object) -> None:
    """Write the values separated by single spaces, then a newline, to standard output."""
    sys.stdout.write(" ".join(to_display(arg) for arg in args) + "\n")
    sys.stdout.flush()


def input_line(prompt: object = None) -> str:
    """Show ``prompt`` if given and read one line from standard input, without its newline."""
    if prompt is not None:
        sys.stdout.write(to_display(prompt))
        sys.stdout.flush()
    line = sys.stdin.readline()
    return line[:-1] if line.endswith("\n") else line


def _require_filename(function: str, filename: object, what: str) -> str:
    if not isinstance(filename, str):
        raise TypeError(f"{function} requires {what}")
    return filename


def read_file(filename: str) -> str:
    """Return the whole content of a text file."""
    name = _require_filename("readFile", filename, "a filename argument")
    try:
        with open(name, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            return handle.read()
    except OSError as error:
        raise OSError(f"Could not open file: {name}") from error


def _store(name: str, content: object, mode: str, message: str) -> bool:
    try:
        with open(name, mode, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            handle.write(to_display(content))
    except OSError as error:
        raise OSError(f"{message}: {name}") from error
    return True


def write_file(filename: str, content: object) -> bool:
    """Replace the file's content with the displayed form of ``content``."""
    name = _require_filename("writeFile", filename, "filename and content arguments")
    return _store(name, content, "w", "Could not open file for writing")


def append_file(filename: str, content: object) -> bool:
    """Append the displayed form of ``content`` to the file, creating it if needed."""
    name = _require_filename("appendFile", filename, "filename and content arguments")
    return _store(name, content, "a", "Could not open file for appending")