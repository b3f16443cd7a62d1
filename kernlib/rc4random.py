"""Deterministic pseudo-random byte generator built on the RC4 keystream."""

from __future__ import annotations

_MASK_32 = 0xFFFFFFFF


class Rc4Random:
    """RC4-based generator seeded with a 32-bit unsigned integer.

    The seed's four little-endian bytes form the RC4 key.  The output is
    fine for non-cryptographic use only.
    """

    def __init__(self, seed: int = 0) -> None:
        self._s: list[int] = []
        self._i = 0
        self._j = 0
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reinitialize the generator with SEED."""
        key = (seed & _MASK_32).to_bytes(4, "little")
        s = list(range(256))
        j = 0
        for i in range(256):
            j = (j + s[i] + key[i % len(key)]) & 0xFF
            s[i], s[j] = s[j], s[i]
        self._s = s
        self._i = self._j = 0

    def bytes(self, size: int) -> bytes:
        """Return the next SIZE bytes of the keystream."""
        if size < 0:
            raise ValueError("size must not be negative")
        s = self._s
        i, j = self._i, self._j
        out = bytearray(size)
        for position in range(size):
            i = (i + 1) & 0xFF
            j = (j + s[i]) & 0xFF
            s[i], s[j] = s[j], s[i]
            out[position] = s[(s[i] + s[j]) & 0xFF]
        self._i, self._j = i, j
        return bytes(out)

    def ulong(self) -> int:
        """Return a pseudo-random unsigned 32-bit integer."""
        return int.from_bytes(self.bytes(4), "little")