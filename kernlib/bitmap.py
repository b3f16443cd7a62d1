"""Fixed-size array of bits with range queries and free-run searches."""

from __future__ import annotations

from typing import Iterator, Optional

# Bits per storage element; the on-disk form is a sequence of
# little-endian elements of this width.
ELEMENT_BITS = 32
_ELEMENT_BYTES = ELEMENT_BITS // 8


class Bitmap:
    """An array of SIZE bits, all initially false."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._bits = 0

    # -- internals --------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"bit index {index} out of range for {self._size} bits")

    def _check_range(self, start: int, count: int) -> None:
        if start < 0 or count < 0:
            raise ValueError("start and count must not be negative")
        if start > self._size or start + count > self._size:
            raise ValueError(
                f"range {start}+{count} exceeds bitmap of {self._size} bits"
            )

    @staticmethod
    def _mask(start: int, count: int) -> int:
        return ((1 << count) - 1) << start

    # -- size -------------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[bool]:
        return (bool(self._bits >> index & 1) for index in range(self._size))

    def __repr__(self) -> str:
        text = "".join("1" if bit else "0" for bit in self)
        return f"Bitmap({self._size}, {text!r})"

    # -- single bits ------------------------------------------------------

    def set(self, index: int, value: bool) -> None:
        """Set bit INDEX to VALUE."""
        if value:
            self.mark(index)
        else:
            self.reset(index)

    def mark(self, index: int) -> None:
        """Set bit INDEX to true."""
        self._check_index(index)
        self._bits |= 1 << index

    def reset(self, index: int) -> None:
        """Set bit INDEX to false."""
        self._check_index(index)
        self._bits &= ~(1 << index)

    def flip(self, index: int) -> None:
        """Toggle bit INDEX."""
        self._check_index(index)
        self._bits ^= 1 << index

    def test(self, index: int) -> bool:
        """Return the value of bit INDEX."""
        self._check_index(index)
        return bool(self._bits >> index & 1)

    # -- multiple bits ----------------------------------------------------

    def set_all(self, value: bool) -> None:
        """Set every bit to VALUE."""
        self.set_multiple(0, self._size, value)

    def set_multiple(self, start: int, count: int, value: bool) -> None:
        """Set the COUNT bits starting at START to VALUE."""
        self._check_range(start, count)
        mask = self._mask(start, count)
        if value:
            self._bits |= mask
        else:
            self._bits &= ~mask

    def count(self, start: int, count: int, value: bool) -> int:
        """Return how many of the COUNT bits from START equal VALUE."""
        self._check_range(start, count)
        ones = (self._bits & self._mask(start, count)).bit_count()
        return ones if value else count - ones

    def contains(self, start: int, count: int, value: bool) -> bool:
        """Return True if any of the COUNT bits from START equals VALUE."""
        self._check_range(start, count)
        mask = self._mask(start, count)
        segment = self._bits & mask
        return segment != 0 if value else segment != mask

    def any(self, start: int, count: int) -> bool:
        """Return True if any bit in the range is true."""
        return self.contains(start, count, True)

    def none(self, start: int, count: int) -> bool:
        """Return True if no bit in the range is true."""
        return not self.contains(start, count, True)

    def all(self, start: int, count: int) -> bool:
        """Return True if every bit in the range is true."""
        return not self.contains(start, count, False)

    # -- searching --------------------------------------------------------

    def scan(self, start: int, count: int, value: bool) -> Optional[int]:
        """Return the first index at or after START of COUNT bits all equal
        to VALUE, or None if there is no such run."""
        if not 0 <= start <= self._size:
            raise ValueError(f"start {start} out of range for {self._size} bits")
        if count < 0:
            raise ValueError("count must not be negative")
        if count > self._size:
            return None
        for index in range(start, self._size - count + 1):
            if not self.contains(index, count, not value):
                return index
        return None

    def scan_and_flip(self, start: int, count: int, value: bool) -> Optional[int]:
        """Like scan(), but also set the run found to the opposite of VALUE."""
        index = self.scan(start, count, value)
        if index is not None:
            self.set_multiple(index, count, not value)
        return index

    # -- serialization ----------------------------------------------------

    def file_size(self) -> int:
        """Return the number of bytes needed to store the bitmap."""
        elements = (self._size + ELEMENT_BITS - 1) // ELEMENT_BITS
        return elements * _ELEMENT_BYTES

    def to_bytes(self) -> bytes:
        """Return the stored form: little-endian 32-bit words, bit 0 first."""
        return self._bits.to_bytes(self.file_size(), "little")

    def load_bytes(self, data: bytes) -> None:
        """Replace the contents with the stored form in DATA.

        Bits beyond the bitmap's size are discarded.  Raises ValueError if
        DATA is shorter than file_size().
        """
        size = self.file_size()
        if size == 0:
            return
        if len(data) < size:
            raise ValueError(f"need {size} bytes, got {len(data)}")
        value = int.from_bytes(bytes(data[:size]), "little")
        self._bits = value & ((1 << self._size) - 1)

    def dump(self) -> str:
        """Return the stored form as hexadecimal, 16 bytes per line."""
        raw = self.to_bytes()
        lines = []
        for offset in range(0, len(raw), 16):
            chunk = raw[offset : offset + 16]
            lines.append(f"{offset:08x}  " + " ".join(f"{b:02x}" for b in chunk))
        return "\n".join(lines)