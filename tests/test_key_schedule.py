import dataclasses
import logging

import pytest

from blowfishlab import Blowfish, schedule_key
from blowfishlab.cipher import key_schedule
from blowfishlab.cipher.constants import P_ARRAY, S_BOXES
from blowfishlab.cipher.feistel import encrypt_words
from blowfishlab.cipher.key_schedule import key_words
from blowfishlab.cipher.state import CipherState, WorkingState


def test_key_words_wrap_cyclically():
    words = key_words(b"\x01\x02\x03\x04\x05")
    assert len(words) == 18
    assert words[:3] == [0x01020304, 0x05010203, 0x04050102]


def test_key_words_big_endian():
    assert key_words(b"\xde\xad\xbe\xef", count=2) == [0xDEADBEEF, 0xDEADBEEF]


def test_repeated_key_gives_same_state():
    # "abcd" and "abcdabcd" fold into identical P-array words.
    assert Blowfish(b"abcd").fingerprint() == Blowfish(b"abcdabcd").fingerprint()


def test_schedule_is_idempotent():
    key = b"schedule me twice"
    first = schedule_key(key)
    second = schedule_key(key)
    assert first == second
    assert first.to_bytes() == second.to_bytes()
    assert first.fingerprint() == second.fingerprint()


def test_different_keys_give_different_states():
    assert schedule_key(b"key-one").fingerprint() != schedule_key(b"key-two").fingerprint()


def test_schedule_overwrites_every_entry():
    state = schedule_key(b"\x00" * 8)
    assert state.p_array != P_ARRAY
    for scheduled, initial in zip(state.s_boxes, S_BOXES):
        assert scheduled != initial


def test_schedule_leaves_constants_untouched():
    p_before = tuple(P_ARRAY)
    s_before = tuple(tuple(box) for box in S_BOXES)
    schedule_key(b"mutation check")
    assert P_ARRAY == p_before
    assert S_BOXES == s_before


def test_working_state_copies_tables():
    a = WorkingState.from_constants()
    b = WorkingState.from_constants()
    a.p_array[0] ^= 0xFFFFFFFF
    a.s_boxes[3][255] = 0
    assert b.p_array[0] == P_ARRAY[0]
    assert b.s_boxes[3][255] == S_BOXES[3][255]


def test_schedule_runs_521_encryptions(monkeypatch):
    calls = []

    def counting(state, left, right):
        calls.append(1)
        return encrypt_words(state, left, right)

    monkeypatch.setattr(key_schedule, "encrypt_words", counting)
    schedule_key(b"count me")
    assert len(calls) == 9 + 4 * 128


def test_first_pair_uses_partially_built_state():
    key = b"\x01\x02\x03\x04"
    working = WorkingState.from_constants()
    for i, word in enumerate(key_words(key)):
        working.p_array[i] ^= word
    expected = encrypt_words(working, 0, 0)

    state = schedule_key(key)
    assert state.p_array[:2] == expected


def test_cipher_state_is_frozen():
    state = schedule_key(b"frozen")
    assert isinstance(state, CipherState)
    assert isinstance(state.p_array, tuple)
    assert all(isinstance(box, tuple) for box in state.s_boxes)
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.p_array = ()


def test_cipher_state_checks_shape():
    with pytest.raises(ValueError):
        CipherState(p_array=(0,) * 17, s_boxes=tuple((0,) * 256 for _ in range(4)))
    with pytest.raises(ValueError):
        CipherState(p_array=(0,) * 18, s_boxes=tuple((0,) * 255 for _ in range(4)))


def test_repr_hides_subkeys():
    cipher = Blowfish(b"secret key")
    text = repr(cipher) + repr(cipher.state)
    assert f"{cipher.state.p_array[0]:08x}" not in text
    assert "fingerprint=" in text


def test_schedule_logs_length_not_key(caplog):
    key = b"log-sensitive-key"
    with caplog.at_level(logging.DEBUG, logger="blowfishlab.cipher.key_schedule"):
        schedule_key(key)
    assert "17-byte key" in caplog.text
    assert key.decode() not in caplog.text
    assert key.hex() not in caplog.text
