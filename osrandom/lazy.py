"""Lazily initialised cached values that tolerate racing initialisers."""

from __future__ import annotations

import sys
from typing import Callable


class LazyUsize:
    """An unsigned integer computed on first use and then cached.

    Concurrent first callers may each run their initialiser; any of their
    results may be kept. An initialiser returning ``UNINIT`` signals failure:
    the value is returned but not cached, so the next call retries.
    """

    UNINIT = sys.maxsize * 2 + 1

    def __init__(self) -> None:
        self._value = self.UNINIT

    def unsync_init(self, init: Callable[[], int]) -> int:
        """Return the cached value, running ``init`` if none is cached yet."""
        value = self._value
        if value != self.UNINIT:
            return value
        value = init()
        self._value = value
        return value


class LazyBool:
    """A boolean computed on first use and then cached."""

    def __init__(self) -> None:
        self._inner = LazyUsize()

    def unsync_init(self, init: Callable[[], bool]) -> bool:
        """Return the cached flag, running ``init`` if none is cached yet."""
        return self._inner.unsync_init(lambda: int(bool(init()))) != 0