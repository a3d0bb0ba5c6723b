"""Public entry points for obtaining random data from the system."""

from __future__ import annotations

import operator

from osrandom import backends
from osrandom.util import Buffer


def fill(dest: Buffer) -> None:
    """Fill the writable buffer ``dest`` with random bytes.

    Raises :class:`osrandom.error.Error` on any failure, including partial
    reads; the contents of ``dest`` are then unspecified. An empty buffer
    succeeds without consulting the system.
    """
    view = memoryview(dest).cast("B")
    if view.readonly:
        raise TypeError("buffer must be writable")
    if len(view):
        backends.fill_inner(view)


def fill_uninit(size: int) -> bytes:
    """Return ``size`` fresh random bytes."""
    size = operator.index(size)
    if size < 0:
        raise ValueError("size must not be negative")
    buf = bytearray(size)
    if size:
        backends.fill_inner(buf)
    return bytes(buf)


def u32() -> int:
    """Return a random unsigned 32-bit integer."""
    return backends.inner_u32()


def u64() -> int:
    """Return a random unsigned 64-bit integer."""
    return backends.inner_u64()