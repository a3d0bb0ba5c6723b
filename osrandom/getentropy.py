"""Randomness from the system entropy source, requested in small chunks."""

from __future__ import annotations

import os

from osrandom.util import Buffer, last_os_error

MAX_CHUNK = 256


def fill_inner(dest: Buffer) -> None:
    """Fill ``dest`` in chunks of at most 256 bytes, as ``getentropy`` allows."""
    view = memoryview(dest).cast("B")
    if view.readonly:
        raise TypeError("buffer must be writable")
    for start in range(0, len(view), MAX_CHUNK):
        chunk = view[start:start + MAX_CHUNK]
        try:
            data = os.urandom(len(chunk))
        except OSError as exc:
            raise last_os_error(exc.errno or 0) from exc
        chunk[:] = data