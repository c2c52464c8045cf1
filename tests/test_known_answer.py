import pytest

from blowfishlab import new_cipher
from blowfishlab.cipher.spec import KnownAnswerVector
from blowfishlab.cipher.vectors import (
    ECB_VECTORS,
    REFERENCE_VECTORS,
    VARIABLE_KEY_VECTORS,
    all_vectors,
)
from blowfishlab.evaluation.known_answer import run_known_answer_tests


def _ids(vectors):
    return [f"{v.source}:{v.key}:{v.plaintext}" for v in vectors]


@pytest.mark.parametrize("vec", ECB_VECTORS, ids=_ids(ECB_VECTORS))
def test_ecb_vectors(vec):
    cipher = new_cipher(vec.key_bytes)
    assert cipher.encrypt_block(vec.plaintext_bytes) == vec.ciphertext_bytes
    assert cipher.decrypt_block(vec.ciphertext_bytes) == vec.plaintext_bytes


@pytest.mark.parametrize("vec", VARIABLE_KEY_VECTORS, ids=_ids(VARIABLE_KEY_VECTORS))
def test_variable_key_length_vectors(vec):
    cipher = new_cipher(vec.key_bytes)
    assert cipher.encrypt_block(vec.plaintext_bytes) == vec.ciphertext_bytes
    assert cipher.decrypt_block(vec.ciphertext_bytes) == vec.plaintext_bytes


def test_reference_vector_words():
    vec = REFERENCE_VECTORS[0]
    cipher = new_cipher(vec.key_bytes)
    l, r = cipher.encrypt_words(0x6518A1F5, 0xC8D9B63C)
    assert (l, r) == (0xDAC63686, 0x1D70BD8A)
    assert cipher.decrypt_words(l, r) == (0x6518A1F5, 0xC8D9B63C)


@pytest.mark.parametrize(
    "key, plaintext, ciphertext",
    [
        ("0000000000000000", "0000000000000000", "4EF997456198DD78"),
        ("FFFFFFFFFFFFFFFF", "FFFFFFFFFFFFFFFF", "51866FD5B85ECB8A"),
        ("1111111111111111", "0123456789ABCDEF", "7D0CC630AFDA1EC7"),
        ("0000000000000000", "FFFFFFFFFFFFFFFF", "014933E0CDAFF6E4"),
    ],
)
def test_headline_vectors(key, plaintext, ciphertext):
    cipher = new_cipher(bytes.fromhex(key))
    assert cipher.encrypt_block(bytes.fromhex(plaintext)).hex().upper() == ciphertext


def test_ecb_table_matches_cipher_for_all_ones_plaintext():
    row = next(v for v in ECB_VECTORS if v.key == "00" * 8 and v.plaintext == "ff" * 8)
    assert row.ciphertext == "014933e0cdaff6e4"
    assert new_cipher(bytes(8)).encrypt_block(b"\xff" * 8).hex() == row.ciphertext


def test_vector_tables_complete():
    assert len(ECB_VECTORS) == 34
    assert [len(v.key_bytes) for v in VARIABLE_KEY_VECTORS] == list(range(4, 25))
    assert len(all_vectors()) == 34 + 21 + 1


def test_run_known_answer_tests_all_pass():
    result = run_known_answer_tests()
    assert result.is_perfect, result.failures
    assert result.total_vectors == len(all_vectors())
    assert result.summary().startswith("[PASS]")


def test_run_known_answer_tests_records_mismatch():
    good = ECB_VECTORS[0]
    bad = KnownAnswerVector(key=good.key, plaintext=good.plaintext, ciphertext="0000000000000000", source="bogus")
    result = run_known_answer_tests([good, bad])
    assert result.passed == 1
    assert result.failed == 1
    failure = result.failures[0]
    assert failure.vector_index == 1
    assert failure.source == "bogus"
    assert failure.got_hex == "4ef997456198dd78"
    assert failure.error is None
    assert result.to_dict()["is_perfect"] is False


def test_vector_model_normalizes_hex():
    vec = KnownAnswerVector(key="01 23 45 67", plaintext="AABBCCDDEEFF0011", ciphertext="aabbccddeeff0011")
    assert vec.key == "01234567"
    assert vec.plaintext == vec.ciphertext


@pytest.mark.parametrize(
    "fields",
    [
        {"key": "010203", "plaintext": "00" * 8, "ciphertext": "00" * 8},
        {"key": "01" * 57, "plaintext": "00" * 8, "ciphertext": "00" * 8},
        {"key": "01020304", "plaintext": "00" * 7, "ciphertext": "00" * 8},
        {"key": "0102030g", "plaintext": "00" * 8, "ciphertext": "00" * 8},
    ],
)
def test_vector_model_rejects_bad_fields(fields):
    with pytest.raises(ValueError):
        KnownAnswerVector(**fields)
