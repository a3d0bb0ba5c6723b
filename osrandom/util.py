"""Helpers shared by the randomness backends."""

from __future__ import annotations

import errno as _errno
import sys
from typing import Callable, Union

from osrandom.error import Error

_U32_MAX = 0xFFFFFFFF
_U64_MAX = 0xFFFFFFFFFFFFFFFF

Buffer = Union[bytearray, memoryview]


def truncate(val: int) -> int:
    """Return the lower 32 bits of an unsigned 64-bit value."""
    if not 0 <= val <= _U64_MAX:
        raise ValueError(f"{val} is not an unsigned 64-bit value")
    return val & _U32_MAX


def last_os_error(errno: int) -> Error:
    """Turn a positive ``errno`` into an ``Error``.

    A non-positive value gives ``Error.ERRNO_NOT_POSITIVE``.
    """
    if errno > 0:
        return Error.from_neg_error_code(-errno)
    return Error.ERRNO_NOT_POSITIVE


def sys_fill_exact(buf: Buffer, sys_fill: Callable[[memoryview], int]) -> None:
    """Fill ``buf`` completely by calling ``sys_fill`` repeatedly.

    ``sys_fill`` receives a writable view of the still-unfilled tail and
    returns how many bytes it wrote, or raises ``OSError``. Interrupted calls
    are retried; any other OS failure is raised as ``Error``. A result of
    zero, a negative count or one beyond the view raises ``Error.UNEXPECTED``.
    """
    view = memoryview(buf).cast("B")
    if view.readonly:
        raise TypeError("buffer must be writable")
    while len(view):
        try:
            written = sys_fill(view)
        except OSError as exc:
            err = last_os_error(exc.errno or 0)
            if err.raw_os_error() == _errno.EINTR:
                continue
            raise err from exc
        if written <= 0 or written > len(view):
            raise Error.UNEXPECTED
        view = view[written:]


def _inner_uint(fill_uninit: Callable[[int], bytes], size: int) -> int:
    data = fill_uninit(size)
    if len(data) != size:
        raise Error.UNEXPECTED
    return int.from_bytes(data, sys.byteorder)


def inner_u32(fill_uninit: Callable[[int], bytes]) -> int:
    """Build a native-endian ``u32`` from four bytes produced by ``fill_uninit``."""
    return _inner_uint(fill_uninit, 4)


def inner_u64(fill_uninit: Callable[[int], bytes]) -> int:
    """Build a native-endian ``u64`` from eight bytes produced by ``fill_uninit``."""
    return _inner_uint(fill_uninit, 8)