"""Randomness from the ``getrandom`` system call, with a file fallback."""

from __future__ import annotations

import errno
import os
import sys

from osrandom import use_file
from osrandom.error import Error
from osrandom.lazy import LazyBool
from osrandom.util import Buffer, sys_fill_exact

_GETRANDOM_GOOD = LazyBool()


def _probe() -> bool:
    getrandom = getattr(os, "getrandom", None)
    if getrandom is None:
        return False
    try:
        getrandom(0, 0)
    except OSError as exc:
        if exc.errno == errno.ENOSYS:
            return False
        # Some seccomp-sandboxed Linux systems block the call with EPERM.
        if exc.errno == errno.EPERM and sys.platform.startswith("linux"):
            return False
    return True


def getrandom_available() -> bool:
    """Report whether ``getrandom`` exists and the kernel supports it.

    The result of the first check is cached.
    """
    return _GETRANDOM_GOOD.unsync_init(_probe)


def _fill_tail(view: memoryview) -> int:
    data = os.getrandom(len(view), 0)
    count = len(data)
    if 0 < count <= len(view):
        view[:count] = data
    return count


def fill_getrandom(dest: Buffer) -> None:
    """Fill ``dest`` completely using ``getrandom`` with no flags."""
    if not hasattr(os, "getrandom"):
        raise Error.UNSUPPORTED
    view = memoryview(dest).cast("B")
    if view.readonly:
        raise TypeError("buffer must be writable")
    sys_fill_exact(view, _fill_tail)


def fill_inner(dest: Buffer) -> None:
    """Fill ``dest`` via ``getrandom``, or from ``/dev/urandom`` if unavailable."""
    if getrandom_available():
        fill_getrandom(dest)
    else:
        use_file.fill_inner(dest)