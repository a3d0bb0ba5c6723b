import errno
import os
import pickle

import pytest

from osrandom.error import Error


def test_from_neg_error_code_is_os_error():
    err = Error.from_neg_error_code(-errno.ENOENT)
    assert err.raw_os_error() == errno.ENOENT
    assert err == Error(-errno.ENOENT)


@pytest.mark.parametrize("value", [0, 1, errno.EINTR])
def test_from_non_negative_code_is_unexpected(value):
    assert Error.from_neg_error_code(value) == Error.UNEXPECTED


def test_internal_constants_codes():
    assert Error.INTERNAL_START == 1 << 16
    assert Error.CUSTOM_START == 1 << 17
    assert Error(Error.INTERNAL_START) == Error.UNSUPPORTED
    assert Error(Error.INTERNAL_START + 1) == Error.ERRNO_NOT_POSITIVE
    assert Error(Error.INTERNAL_START + 2) == Error.UNEXPECTED
    assert Error.new_internal(1) == Error.ERRNO_NOT_POSITIVE


def test_internal_descriptions():
    assert str(Error.UNSUPPORTED) == "getrandom: this target is not supported"
    assert str(Error.ERRNO_NOT_POSITIVE) == "errno: did not return a positive value"
    assert str(Error.UNEXPECTED) == "unexpected situation"
    assert Error.UNEXPECTED.raw_os_error() is None


def test_custom_error():
    err = Error.new_custom(142)
    assert err == Error(Error.CUSTOM_START + 142)
    assert err.raw_os_error() is None
    assert err.internal_desc() is None
    assert str(err) == f"Unknown Error: {Error.CUSTOM_START + 142}"
    assert "unknown_code" in repr(err)


def test_new_internal_matches_constants():
    assert Error.new_internal(0) == Error.UNSUPPORTED
    assert Error.new_internal(2) == Error.UNEXPECTED


@pytest.mark.parametrize("n", [-1, 1 << 16])
def test_custom_out_of_range(n):
    with pytest.raises(ValueError):
        Error.new_custom(n)


def test_zero_code_rejected():
    with pytest.raises(ValueError):
        Error(0)


def test_os_error_display_and_repr():
    err = Error.from_neg_error_code(-errno.ENOENT)
    text = str(err)
    assert text.startswith(os.strerror(errno.ENOENT))
    assert text.endswith(f"(os error {errno.ENOENT})")
    assert f"os_error={errno.ENOENT}" in repr(err)


def test_internal_repr():
    err = Error.new_internal(0)
    assert f"internal_code={Error.INTERNAL_START}" in repr(err)


def test_to_os_error_keeps_errno():
    oserr = Error.from_neg_error_code(-errno.EACCES).to_os_error()
    assert oserr.errno == errno.EACCES


def test_to_os_error_internal():
    oserr = Error.UNSUPPORTED.to_os_error()
    assert oserr.errno is None
    assert str(oserr) == "getrandom: this target is not supported"


def test_equality_and_hash():
    a = Error.new_custom(7)
    b = Error.new_custom(7)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Error.new_custom(8)
    assert len({a, b, Error.UNEXPECTED}) == 2


def test_can_be_raised_and_caught():
    err = Error.new_internal(0)
    assert err == Error.UNSUPPORTED
    with pytest.raises(Error, match="this target is not supported") as info:
        raise err
    assert info.value is err
    assert info.value.raw_os_error() is None
    assert info.value.internal_desc() == "getrandom: this target is not supported"


def test_pickle_round_trip():
    err = Error.from_neg_error_code(-errno.EPERM)
    restored = pickle.loads(pickle.dumps(err))
    assert restored == err
    assert restored.raw_os_error() == errno.EPERM