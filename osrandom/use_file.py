"""Randomness read from the ``/dev/urandom`` device file."""

from __future__ import annotations

import errno
import os
import select
import sys
import threading

from osrandom.error import Error
from osrandom.util import Buffer, last_os_error, sys_fill_exact

FILE_PATH = "/dev/urandom"
RANDOM_PATH = "/dev/random"

_fd: int | None = None
_fd_lock = threading.Lock()


def _is_linux() -> bool:
    return sys.platform.startswith("linux") or hasattr(sys, "getandroidapilevel")


def _raise_unless_interrupted(exc: OSError) -> None:
    err = last_os_error(exc.errno or 0)
    if err.raw_os_error() != errno.EINTR:
        raise err from exc


def open_readonly(path: str) -> int:
    """Open ``path`` read-only and close-on-exec, retrying when interrupted."""
    flags = os.O_RDONLY | getattr(os, "O_CLOEXEC", 0)
    while True:
        try:
            return os.open(path, flags)
        except OSError as exc:
            _raise_unless_interrupted(exc)


def wait_until_rng_ready(path: str = RANDOM_PATH) -> None:
    """Block until ``path`` (normally ``/dev/random``) is readable.

    Polling rather than reading avoids draining the kernel's entropy
    estimate while still waiting for the pool to be initialised.
    """
    fd = open_readonly(path)
    try:
        poller = select.poll()
        poller.register(fd, select.POLLIN)
        while True:
            try:
                poller.poll()
                return
            except OSError as exc:
                _raise_unless_interrupted(exc)
    finally:
        os.close(fd)


def _open_fd() -> int:
    if _is_linux():
        wait_until_rng_ready(RANDOM_PATH)
    return open_readonly(FILE_PATH)


def _get_fd() -> int:
    global _fd
    fd = _fd
    if fd is not None:
        return fd
    with _fd_lock:
        if _fd is None:
            _fd = _open_fd()
        return _fd


def _read_into(fd: int, view: memoryview) -> int:
    if hasattr(os, "readv"):
        return os.readv(fd, [view])
    data = os.read(fd, len(view))
    count = len(data)
    if 0 < count <= len(view):
        view[:count] = data
    return count


def fill_inner(dest: Buffer) -> None:
    """Fill ``dest`` completely with bytes read from ``/dev/urandom``.

    The device is opened once and kept open; a failed open is retried on
    the next call.
    """
    view = memoryview(dest).cast("B")
    if view.readonly:
        raise TypeError("buffer must be writable")
    if not len(view):
        return
    fd = _get_fd()
    sys_fill_exact(view, lambda tail: _read_into(fd, tail))


__all__ = ["Error", "FILE_PATH", "RANDOM_PATH", "open_readonly", "wait_until_rng_ready", "fill_inner"]