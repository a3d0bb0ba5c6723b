# osrandom

A small library for reading random data from the operating system's
random number source. Use it to seed generators and to make keys and
nonces.

## Installing

```
pip install osrandom
```

## Usage

```python
from osrandom.api import fill, fill_uninit, u32, u64

buf = bytearray(32)
fill(buf)                # fills buf in place with random bytes

key = fill_uninit(16)    # returns 16 fresh random bytes

seed32 = u32()           # random integer in [0, 2**32), native byte order
seed64 = u64()           # random integer in [0, 2**64), native byte order
```

`fill` takes any writable buffer (a `bytearray` or a writable
`memoryview`); a read-only buffer raises `TypeError`. `fill_uninit`
raises `ValueError` for a negative size. An empty request succeeds at
once and makes no call to the system.

## Backends

`osrandom.backends.detect_backend()` picks a `Backend` from
`sys.platform`:

| Platform prefix | Backend | Where the bytes come from |
|---|---|---|
| `linux`, `android`, `freebsd`, `dragonfly`, `cygwin`, `sunos`, `gnu`, `netbsd` | `GETRANDOM` | `os.getrandom`; if that is missing or the kernel answers `ENOSYS` (or `EPERM` on Linux), `/dev/urandom` |
| `haiku`, `aix`, `redox`, `qnx` | `USE_FILE` | `/dev/urandom`, opened once and kept open |
| `darwin`, `openbsd`, `emscripten` | `GETENTROPY` | the system entropy source, in chunks of at most 256 bytes |
| `win32` | `WINDOWS` | the system random generator |
| anything else | `UNSUPPORTED` | every request raises `Error.UNSUPPORTED` |

You can pass a platform name, e.g. `detect_backend("openbsd7")`, to see
which backend it would get. Before the `/dev/urandom` file is first
opened on Linux, `use_file.wait_until_rng_ready()` polls `/dev/random`
until the kernel pool is ready. Whether `getrandom` works is checked
once and then cached (`syscall.getrandom_available()`).

### Custom backends

```python
from osrandom.backends import set_custom, clear_custom
from osrandom.error import Error

def my_source(dest: memoryview) -> None:
    ...  # write len(dest) bytes into dest, or raise Error.new_custom(n)

set_custom(my_source)
try:
    ...
finally:
    clear_custom()
```

While a custom backend is set, `detect_backend()` returns
`Backend.CUSTOM` on every platform.

## Errors

Every failure raises `osrandom.error.Error`, a subclass of `Exception`.
This includes a partial or empty read.

- `raw_os_error()` returns the positive `errno` when the error came
  from the OS, and `None` otherwise.
- `internal_desc()` describes the library's own errors:
  `Error.UNSUPPORTED`, `Error.ERRNO_NOT_POSITIVE` and `Error.UNEXPECTED`.
- `Error.new_custom(n)` makes an error for a custom backend, with
  `n` in `0..=65535`.
- `to_os_error()` turns the error into an `OSError`, keeping the errno
  of OS errors.

## What it does not do

- There is no command-line program. The package is a library only.
- The backends are the ones in the table above. No backend reads a CPU
  random-number instruction, and none targets WebAssembly or firmware
  environments. On those platforms, plug in your own source with
  `set_custom`.

## Running the tests

```
pip install -e ".[test]"
pytest
```