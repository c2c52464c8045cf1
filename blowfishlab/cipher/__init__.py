from .blowfish import Blowfish, decrypt_block, encrypt_block, new_cipher
from .errors import BlowfishError, InvalidBlockLength, InvalidKeyLength
from .key_schedule import schedule_key
from .state import CipherState

__all__ = [
    "Blowfish",
    "new_cipher",
    "encrypt_block",
    "decrypt_block",
    "schedule_key",
    "CipherState",
    "BlowfishError",
    "InvalidKeyLength",
    "InvalidBlockLength",
]
