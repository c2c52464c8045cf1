from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .validator import BLOCK_BYTES, MAX_KEY_BYTES, MIN_KEY_BYTES


class BlowfishSpec(BaseModel):
    """Parameters for the evaluation harness.

    Blowfish itself is fixed at a 64-bit block and 16 rounds; only the key
    size varies. The harness uses this to size random keys.
    """

    name: str = Field(default="Blowfish", min_length=3, max_length=80)
    key_size_bits: int = Field(default=128, ge=MIN_KEY_BYTES * 8, le=MAX_KEY_BYTES * 8)
    block_size_bits: int = Field(default=BLOCK_BYTES * 8, ge=64, le=64)
    rounds: int = Field(default=16, ge=16, le=16)
    seed: int = Field(default=1337, description="Used for deterministic test vectors")

    @field_validator("key_size_bits")
    @classmethod
    def _key_size(cls, v: int) -> int:
        if v % 8 != 0:
            raise ValueError("key_size_bits must be a multiple of 8")
        return v

    @property
    def key_size_bytes(self) -> int:
        return self.key_size_bits // 8

    @property
    def block_size_bytes(self) -> int:
        return self.block_size_bits // 8


class KnownAnswerVector(BaseModel):
    """One published (key, plaintext, ciphertext) triple, hex encoded."""

    key: str
    plaintext: str
    ciphertext: str
    source: str = Field(default="")

    @field_validator("key", "plaintext", "ciphertext")
    @classmethod
    def _hex(cls, v: str) -> str:
        v = v.replace(" ", "").lower()
        try:
            bytes.fromhex(v)
        except ValueError as exc:
            raise ValueError(f"not a hex string: {v!r}") from exc
        return v

    @field_validator("key")
    @classmethod
    def _key_len(cls, v: str) -> str:
        n = len(v) // 2
        if not MIN_KEY_BYTES <= n <= MAX_KEY_BYTES:
            raise ValueError(f"key must be {MIN_KEY_BYTES}..{MAX_KEY_BYTES} bytes, got {n}")
        return v

    @field_validator("plaintext", "ciphertext")
    @classmethod
    def _block_len(cls, v: str) -> str:
        if len(v) != BLOCK_BYTES * 2:
            raise ValueError(f"block must be {BLOCK_BYTES} bytes")
        return v

    @property
    def key_bytes(self) -> bytes:
        return bytes.fromhex(self.key)

    @property
    def plaintext_bytes(self) -> bytes:
        return bytes.fromhex(self.plaintext)

    @property
    def ciphertext_bytes(self) -> bytes:
        return bytes.fromhex(self.ciphertext)
