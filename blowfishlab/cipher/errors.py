from __future__ import annotations


class BlowfishError(ValueError):
    """Base class for rejected cipher inputs."""


class InvalidKeyLength(BlowfishError):
    def __init__(self, length: int, *, min_len: int = 4, max_len: int = 56):
        self.length = length
        super().__init__(f"Key must be {min_len}..{max_len} bytes, got {length}")


class InvalidBlockLength(BlowfishError):
    def __init__(self, length: int, *, block_len: int = 8):
        self.length = length
        super().__init__(f"Block must be {block_len} bytes, got {length}")
