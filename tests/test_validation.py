import pytest

from blowfishlab import (
    Blowfish,
    BlowfishError,
    InvalidBlockLength,
    InvalidKeyLength,
    decrypt_block,
    encrypt_block,
    new_cipher,
)
from blowfishlab.cipher.validator import check_block, check_key, validate_key


@pytest.mark.parametrize("length", [0, 1, 3, 57, 64])
def test_bad_key_length_rejected(length):
    with pytest.raises(InvalidKeyLength) as excinfo:
        new_cipher(b"\x00" * length)
    assert excinfo.value.length == length
    assert str(length) in str(excinfo.value)


@pytest.mark.parametrize("length", [4, 56])
def test_key_length_boundaries_accepted(length):
    cipher = new_cipher(b"\x5a" * length)
    assert isinstance(cipher, Blowfish)


def test_errors_are_value_errors():
    assert issubclass(InvalidKeyLength, BlowfishError)
    assert issubclass(InvalidBlockLength, BlowfishError)
    assert issubclass(BlowfishError, ValueError)


def test_key_must_be_bytes():
    with pytest.raises(TypeError):
        new_cipher("not bytes")


@pytest.mark.parametrize("length", [0, 7, 9, 16])
def test_bad_block_length_rejected(length):
    cipher = new_cipher(b"blockkey")
    with pytest.raises(InvalidBlockLength) as excinfo:
        decrypt_block(cipher, b"\x00" * length)
    assert excinfo.value.length == length
    with pytest.raises(InvalidBlockLength):
        encrypt_block(cipher, b"\x00" * length)


def test_block_must_be_bytes():
    cipher = new_cipher(b"blockkey")
    with pytest.raises(TypeError):
        cipher.encrypt_block("abcdefgh")


def test_validate_key_collects_errors():
    ok, errs = validate_key(b"abc")
    assert not ok
    assert errs and "minimum" in errs[0]

    ok, errs = validate_key(b"x" * 57)
    assert not ok
    assert "maximum" in errs[0]

    ok, errs = validate_key(12345)
    assert not ok
    assert "bytes-like" in errs[0]

    assert validate_key(b"good key") == (True, [])


def test_check_helpers_return_bytes():
    assert check_key(bytearray(b"abcd")) == b"abcd"
    assert check_block(memoryview(b"12345678")) == b"12345678"


def test_class_constants():
    assert Blowfish.block_size == 8
    assert Blowfish.min_key_size == 4
    assert Blowfish.max_key_size == 56


def test_cipher_has_no_rekey():
    cipher = Blowfish(b"first key")
    with pytest.raises(AttributeError):
        cipher.key = b"second key"
