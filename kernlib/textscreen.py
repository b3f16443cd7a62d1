"""An 80x25 character-cell text display with cursor and scrolling."""

from __future__ import annotations

from typing import Callable, Optional, Union

from kernlib.rounding import round_up

COLUMNS = 80
ROWS = 25
GRAY_ON_BLACK = 0x07
TAB_WIDTH = 8


class TextScreen:
    """A text display interpreting newline, form feed, backspace, carriage
    return, tab and bell in the conventional ways.

    ON_BEEP is called for the bell character.
    """

    def __init__(self, on_beep: Optional[Callable[[], None]] = None) -> None:
        self.on_beep = on_beep
        self._chars = [bytearray(b" " * COLUMNS) for _ in range(ROWS)]
        self._attrs = [bytearray([GRAY_ON_BLACK] * COLUMNS) for _ in range(ROWS)]
        self._cx = 0
        self._cy = 0

    def _clear_row(self, y: int) -> None:
        self._chars[y][:] = b" " * COLUMNS
        self._attrs[y][:] = bytes([GRAY_ON_BLACK] * COLUMNS)

    def _cls(self) -> None:
        for y in range(ROWS):
            self._clear_row(y)
        self._cx = self._cy = 0

    def _newline(self) -> None:
        self._cx = 0
        self._cy += 1
        if self._cy >= ROWS:
            self._cy = ROWS - 1
            self._chars.append(self._chars.pop(0))
            self._attrs.append(self._attrs.pop(0))
            self._clear_row(ROWS - 1)

    def putc(self, c: Union[int, str]) -> None:
        """Write one character, given as a code or a one-character string."""
        if isinstance(c, str):
            if len(c) != 1:
                raise ValueError("expected a single character")
            c = ord(c)
        if c == ord("\n"):
            self._newline()
        elif c == ord("\f"):
            self._cls()
        elif c == ord("\b"):
            if self._cx > 0:
                self._cx -= 1
        elif c == ord("\r"):
            self._cx = 0
        elif c == ord("\t"):
            self._cx = round_up(self._cx + 1, TAB_WIDTH)
            if self._cx >= COLUMNS:
                self._newline()
        elif c == ord("\a"):
            if self.on_beep is not None:
                self.on_beep()
        else:
            self._chars[self._cy][self._cx] = c & 0xFF
            self._attrs[self._cy][self._cx] = GRAY_ON_BLACK
            self._cx += 1
            if self._cx >= COLUMNS:
                self._newline()

    def write(self, text: str) -> None:
        """Write every character of TEXT."""
        for ch in text:
            self.putc(ch)

    def cursor(self) -> tuple[int, int]:
        """Return the cursor position as (column, row)."""
        return self._cx, self._cy

    def cell(self, x: int, y: int) -> tuple[str, int]:
        """Return the character and attribute at column X, row Y."""
        if not (0 <= x < COLUMNS and 0 <= y < ROWS):
            raise IndexError(f"cell ({x}, {y}) off screen")
        return chr(self._chars[y][x]), self._attrs[y][x]

    def row_text(self, y: int) -> str:
        """Return the full text of row Y."""
        if not 0 <= y < ROWS:
            raise IndexError(f"row {y} off screen")
        return self._chars[y].decode("latin-1")

    def lines(self) -> list[str]:
        """Return every row with trailing spaces removed."""
        return [self.row_text(y).rstrip(" ") for y in range(ROWS)]