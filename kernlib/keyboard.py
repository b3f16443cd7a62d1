"""Translation of PC keyboard scancodes (set 1) into characters."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence, Tuple

from kernlib.chars import to_lower
from kernlib.intq import InterruptQueue

Keymap = Sequence[Tuple[int, str]]

# Keys that give the same character with or without Shift
# (letter case is handled separately).
INVARIANT_KEYMAP: Keymap = (
    (0x01, "\x1b"),
    (0x0E, "\b"),
    (0x0F, "\tQWERTYUIOP"),
    (0x1C, "\r"),
    (0x1E, "ASDFGHJKL"),
    (0x2C, "ZXCVBNM"),
    (0x37, "*"),
    (0x39, " "),
    (0x53, "\x7f"),
)

UNSHIFTED_KEYMAP: Keymap = (
    (0x02, "1234567890-="),
    (0x1A, "[]"),
    (0x27, ";'`"),
    (0x2B, "\\"),
    (0x33, ",./"),
)

SHIFTED_KEYMAP: Keymap = (
    (0x02, "!@#$%^&*()_+"),
    (0x1A, "{}"),
    (0x27, ':"~'),
    (0x2B, "|"),
    (0x33, "<>?"),
)

_PREFIX = 0xE0
_RELEASE = 0x80
_CAPS_LOCK = 0x3A
_DELETE = 0x7F

_LEFT_SHIFT, _RIGHT_SHIFT = 0x2A, 0x36
_LEFT_ALT, _RIGHT_ALT = 0x38, 0xE038
_LEFT_CTRL, _RIGHT_CTRL = 0x1D, 0xE01D
_MODIFIERS = frozenset(
    {_LEFT_SHIFT, _RIGHT_SHIFT, _LEFT_ALT, _RIGHT_ALT, _LEFT_CTRL, _RIGHT_CTRL}
)


def map_key(keymap: Keymap, scancode: int) -> Optional[int]:
    """Return the character code KEYMAP gives SCANCODE, or None."""
    for first, chars in keymap:
        if first <= scancode < first + len(chars):
            return ord(chars[scancode - first])
    return None


class Keyboard:
    """Keyboard state: modifier keys, Caps Lock and a buffer of typed keys.

    ON_REBOOT is called when Ctrl+Alt+Del is pressed.
    """

    def __init__(self, on_reboot: Optional[Callable[[], None]] = None) -> None:
        self.on_reboot = on_reboot
        self.buffer = InterruptQueue()
        self.caps_lock = False
        self.key_count = 0
        self._held: set[int] = set()
        self._pending_prefix = False

    def _down(self, *codes: int) -> bool:
        return any(code in self._held for code in codes)

    def handle_scancode(self, code: int) -> Optional[int]:
        """Process one scancode, including any 0xe0 prefix in its high byte.

        Returns the character put in the buffer, or None.
        """
        if code < 0:
            raise ValueError("scancode must not be negative")
        shift = self._down(_LEFT_SHIFT, _RIGHT_SHIFT)
        alt = self._down(_LEFT_ALT, _RIGHT_ALT)
        ctrl = self._down(_LEFT_CTRL, _RIGHT_CTRL)

        release = bool(code & _RELEASE)
        code &= ~_RELEASE

        if code == _CAPS_LOCK:
            if not release:
                self.caps_lock = not self.caps_lock
            return None

        c = map_key(INVARIANT_KEYMAP, code)
        if c is None:
            c = map_key(SHIFTED_KEYMAP if shift else UNSHIFTED_KEYMAP, code)
        if c is None:
            if code in _MODIFIERS:
                if release:
                    self._held.discard(code)
                else:
                    self._held.add(code)
            return None

        if release:
            return None
        if c == _DELETE and ctrl and alt:
            if self.on_reboot is not None:
                self.on_reboot()
            return None

        if ctrl and 0x40 <= c < 0x60:
            c -= 0x40
        elif shift == self.caps_lock:
            c = to_lower(c)  # type: ignore[assignment]

        if alt:
            c += 0x80

        if self.buffer.full():
            return None
        self.key_count += 1
        self.buffer.putc(c)
        return c

    def feed(self, data: Iterable[int]) -> bytes:
        """Process a stream of scancode bytes; return the characters buffered.

        A 0xe0 prefix is joined to the byte that follows it, even across calls.
        """
        typed = bytearray()
        for byte in data:
            if self._pending_prefix:
                self._pending_prefix = False
                code = (_PREFIX << 8) | byte
            elif byte == _PREFIX:
                self._pending_prefix = True
                continue
            else:
                code = byte
            c = self.handle_scancode(code)
            if c is not None:
                typed.append(c)
        return bytes(typed)

    def stats(self) -> str:
        """Return a line reporting how many keys have been buffered."""
        return f"Keyboard: {self.key_count} keys pressed"