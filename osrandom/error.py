"""Error type shared by every randomness backend."""

from __future__ import annotations

import os

_U16_MAX = 0xFFFF


class Error(Exception):
    """Failure to obtain random bytes from the system.

    An error carries a non-zero integer code. Negative codes are OS errors
    (the negated ``errno``); codes from ``INTERNAL_START`` are internal
    conditions, and codes from ``CUSTOM_START`` are user-defined.
    """

    INTERNAL_START = 1 << 16
    CUSTOM_START = 1 << 17

    UNSUPPORTED: Error
    ERRNO_NOT_POSITIVE: Error
    UNEXPECTED: Error

    def __init__(self, code: int) -> None:
        if not isinstance(code, int) or isinstance(code, bool):
            raise TypeError("error code must be an integer")
        if code == 0:
            raise ValueError("error code must be non-zero")
        super().__init__(code)
        self.code = code

    @classmethod
    def from_neg_error_code(cls, code: int) -> Error:
        """Build an error from a negative OS error code.

        Non-negative codes are not OS errors and give ``Error.UNEXPECTED``.
        """
        if code < 0:
            return cls(code)
        return cls.UNEXPECTED

    @classmethod
    def new_custom(cls, n: int) -> Error:
        """Build an error from a custom code in the range 0..=65535."""
        return cls(cls.CUSTOM_START + _check_u16(n))

    @classmethod
    def new_internal(cls, n: int) -> Error:
        """Build an error from an internal code in the range 0..=65535."""
        return cls(cls.INTERNAL_START + _check_u16(n))

    def raw_os_error(self) -> int | None:
        """Return the positive OS ``errno`` if this error came from the OS."""
        if self.code >= 0:
            return None
        return -self.code

    def internal_desc(self) -> str | None:
        """Return the description of a known internal error, if any."""
        return _INTERNAL_DESCRIPTIONS.get(self.code)

    def to_os_error(self) -> OSError:
        """Convert into an ``OSError``, keeping the errno of OS errors."""
        errno = self.raw_os_error()
        if errno is not None:
            return OSError(errno, os.strerror(errno))
        return OSError(str(self))

    def __str__(self) -> str:
        errno = self.raw_os_error()
        if errno is not None:
            return f"{os.strerror(errno)} (os error {errno})"
        desc = self.internal_desc()
        if desc is not None:
            return desc
        return f"Unknown Error: {self.code}"

    def __repr__(self) -> str:
        errno = self.raw_os_error()
        if errno is not None:
            return f"Error(os_error={errno}, description={os.strerror(errno)!r})"
        desc = self.internal_desc()
        if desc is not None:
            return f"Error(internal_code={self.code}, description={desc!r})"
        return f"Error(unknown_code={self.code})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


def _check_u16(n: int) -> int:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("error code offset must be an integer")
    if not 0 <= n <= _U16_MAX:
        raise ValueError(f"error code offset {n} is outside 0..={_U16_MAX}")
    return n


Error.UNSUPPORTED = Error.new_internal(0)
Error.ERRNO_NOT_POSITIVE = Error.new_internal(1)
Error.UNEXPECTED = Error.new_internal(2)

_INTERNAL_DESCRIPTIONS = {
    Error.UNSUPPORTED.code: "getrandom: this target is not supported",
    Error.ERRNO_NOT_POSITIVE.code: "errno: did not return a positive value",
    Error.UNEXPECTED.code: "unexpected situation",
}