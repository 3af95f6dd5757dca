"""Process and environment helpers: wall time, CPU time, exit and environment lookup."""

from __future__ import annotations

import os
import time as _time


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def time() -> int:
    """Whole seconds since the Unix epoch."""
    return int(_time.time())


def clock() -> float:
    """Processor time used by this process, in seconds."""
    return _time.process_time()


def exit(code: object = 0) -> None:
    """Terminate the program; a code that is not a number means 0."""
    raise SystemExit(int(code) if _is_number(code) else 0)


def getenv(name: str) -> str | None:
    """The value of environment variable ``name``, or ``None`` when it is unset."""
    if not isinstance(name, str):
        raise TypeError("getenv requires a string argument")
    return os.environ.get(name)