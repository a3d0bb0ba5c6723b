"""Random bytes and integers from the operating system's random source."""

__version__ = "0.3.3"
__all__ = ["api", "backends", "error", "getentropy", "lazy", "syscall", "use_file", "util"]