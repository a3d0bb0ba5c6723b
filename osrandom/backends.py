"""Selection of the randomness backend for the running platform."""

from __future__ import annotations

import enum
import os
import sys
from typing import Callable, Optional

from osrandom import getentropy, syscall, use_file, util
from osrandom.error import Error
from osrandom.util import Buffer

CustomFill = Callable[[memoryview], None]


class Backend(enum.Enum):
    """Source of random bytes used by :func:`fill_inner`."""

    CUSTOM = "custom"
    GETRANDOM = "getrandom"
    USE_FILE = "use_file"
    GETENTROPY = "getentropy"
    WINDOWS = "windows"
    UNSUPPORTED = "unsupported"


_PLATFORMS: tuple[tuple[tuple[str, ...], Backend], ...] = (
    (
        ("linux", "android", "freebsd", "dragonfly", "cygwin", "sunos", "gnu", "netbsd"),
        Backend.GETRANDOM,
    ),
    (("haiku", "aix", "redox", "qnx"), Backend.USE_FILE),
    (("darwin", "openbsd", "emscripten"), Backend.GETENTROPY),
    (("win32",), Backend.WINDOWS),
)

_custom: Optional[CustomFill] = None


def detect_backend(platform_name: Optional[str] = None) -> Backend:
    """Return the backend for ``platform_name`` (default: ``sys.platform``).

    A registered custom backend takes precedence over every platform.
    """
    if _custom is not None:
        return Backend.CUSTOM
    name = sys.platform if platform_name is None else platform_name
    name = name.lower()
    for prefixes, backend in _PLATFORMS:
        if name.startswith(prefixes):
            return backend
    return Backend.UNSUPPORTED


def set_custom(func: CustomFill) -> None:
    """Register ``func`` as the source of random bytes.

    ``func`` receives a writable byte view that it must fill completely, and
    raises :class:`Error` on failure. It is never called with an empty view.
    """
    if not callable(func):
        raise TypeError("custom backend must be callable")
    global _custom
    _custom = func


def clear_custom() -> None:
    """Remove a registered custom backend, returning to platform detection."""
    global _custom
    _custom = None


def _fill_custom(view: memoryview) -> None:
    func = _custom
    if func is None:
        raise Error.UNSUPPORTED
    func(view)


def _fill_windows(view: memoryview) -> None:
    # The system CSPRNG on Windows 10 and later does not fail at runtime.
    view[:] = os.urandom(len(view))


def _fill_unsupported(view: memoryview) -> None:
    raise Error.UNSUPPORTED


_FILLERS: dict[Backend, Callable[[memoryview], None]] = {
    Backend.CUSTOM: _fill_custom,
    Backend.GETRANDOM: syscall.fill_inner,
    Backend.USE_FILE: use_file.fill_inner,
    Backend.GETENTROPY: getentropy.fill_inner,
    Backend.WINDOWS: _fill_windows,
    Backend.UNSUPPORTED: _fill_unsupported,
}


def fill_inner(dest: Buffer) -> None:
    """Fill ``dest`` completely using the backend for this platform."""
    view = memoryview(dest).cast("B")
    if view.readonly:
        raise TypeError("buffer must be writable")
    _FILLERS[detect_backend()](view)


def _random_bytes(size: int) -> bytes:
    buf = bytearray(size)
    if size:
        fill_inner(buf)
    return bytes(buf)


def inner_u32() -> int:
    """Return a random unsigned 32-bit integer from the active backend."""
    return util.inner_u32(_random_bytes)


def inner_u64() -> int:
    """Return a random unsigned 64-bit integer from the active backend."""
    return util.inner_u64(_random_bytes)