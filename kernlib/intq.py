"""Bounded circular byte queue shared between producers and consumers."""

from __future__ import annotations

import threading

DEFAULT_CAPACITY = 64


class InterruptQueue:
    """A circular buffer of CAPACITY slots holding up to CAPACITY - 1 bytes.

    getc() waits while the queue is empty and putc() waits while it is full.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._buf = bytearray(capacity)
        self._head = 0
        self._tail = 0
        self._cond = threading.Condition()

    def _next(self, pos: int) -> int:
        return (pos + 1) % len(self._buf)

    def _is_empty(self) -> bool:
        return self._head == self._tail

    def _is_full(self) -> bool:
        return self._next(self._head) == self._tail

    def empty(self) -> bool:
        """Return True if the queue holds no bytes."""
        with self._cond:
            return self._is_empty()

    def full(self) -> bool:
        """Return True if no more bytes fit."""
        with self._cond:
            return self._is_full()

    def __len__(self) -> int:
        with self._cond:
            return (self._head - self._tail) % len(self._buf)

    def getc(self) -> int:
        """Remove and return the oldest byte, waiting for one if empty."""
        with self._cond:
            while self._is_empty():
                self._cond.wait()
            byte = self._buf[self._tail]
            self._tail = self._next(self._tail)
            self._cond.notify_all()
            return byte

    def putc(self, byte: int) -> None:
        """Append BYTE, waiting for room if the queue is full."""
        if not 0 <= byte <= 0xFF:
            raise ValueError("byte must be in range 0..255")
        with self._cond:
            while self._is_full():
                self._cond.wait()
            self._buf[self._head] = byte
            self._head = self._next(self._head)
            self._cond.notify_all()