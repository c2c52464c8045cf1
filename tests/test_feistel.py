from types import SimpleNamespace

from blowfishlab.cipher.constants import P_ARRAY, S_BOXES
from blowfishlab.cipher.feistel import MASK32, decrypt_words, encrypt_words, round_function
from blowfishlab.cipher.state import WorkingState


def _counting_boxes():
    # S_k[i] == i for every box, so F only mixes the input bytes.
    return [list(range(256)) for _ in range(4)]


def test_round_function_on_initial_tables():
    # ((0xd1310ba6 + 0x4b7a70e9) ^ 0xe93d5a68) + 0x3a39ce37 mod 2^32
    assert round_function(S_BOXES, 0) == 0x2FCFF51E


def test_round_function_byte_order():
    boxes = _counting_boxes()
    # a=1 goes to S0, d=4 to S3: ((1 + 2) ^ 3) + 4
    assert round_function(boxes, 0x01020304) == 4
    # ((4 + 3) ^ 2) + 1
    assert round_function(boxes, 0x04030201) == 6


def test_round_function_wraps_mod_2_32():
    boxes = [[0xFFFFFFFF] * 256 for _ in range(4)]
    # (0xFFFFFFFF + 0xFFFFFFFF) mod 2^32 = 0xFFFFFFFE; ^ 0xFFFFFFFF = 1; + 0xFFFFFFFF wraps to 0
    assert round_function(boxes, 0x12345678) == 0


def test_round_function_output_is_32_bit():
    state = WorkingState.from_constants()
    for x in (0, 1, 0x7FFFFFFF, 0x80000000, MASK32):
        assert 0 <= round_function(state.s_boxes, x) <= MASK32


def test_encrypt_with_zero_tables_only_swaps_halves():
    # With zero S-boxes and P-array, F is 0 and every XOR is a no-op:
    # 16 round swaps cancel and the undo-swap exchanges the halves.
    state = SimpleNamespace(p_array=[0] * 18, s_boxes=[[0] * 256 for _ in range(4)])
    assert encrypt_words(state, 0x11111111, 0x22222222) == (0x22222222, 0x11111111)
    assert decrypt_words(state, 0x22222222, 0x11111111) == (0x11111111, 0x22222222)


def test_output_whitening_uses_last_two_subkeys():
    p = [0] * 18
    p[16] = 0x0000FFFF
    p[17] = 0xFFFF0000
    state = SimpleNamespace(p_array=p, s_boxes=[[0] * 256 for _ in range(4)])
    # R ^= P[16], L ^= P[17] after the undo-swap.
    assert encrypt_words(state, 0, 0) == (0xFFFF0000, 0x0000FFFF)
    assert decrypt_words(state, 0xFFFF0000, 0x0000FFFF) == (0, 0)


def test_decrypt_inverts_encrypt_on_unkeyed_tables():
    state = WorkingState.from_constants()
    for l, r in [(0, 0), (MASK32, MASK32), (0xDEADBEEF, 0x01234567)]:
        assert decrypt_words(state, *encrypt_words(state, l, r)) == (l, r)


def test_unkeyed_tables_are_not_identity():
    state = WorkingState.from_constants()
    assert encrypt_words(state, 0, 0) != (0, 0)
    assert list(state.p_array) == list(P_ARRAY)
