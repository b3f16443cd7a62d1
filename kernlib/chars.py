"""ASCII character classification and case mapping.

Each function accepts either an integer code or a one-character string.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def is_lower(c: Char) -> bool:
    """True for 'a' through 'z'."""
    code = _code(c)
    return ord("a") <= code <= ord("z")


def is_upper(c: Char) -> bool:
    """True for 'A' through 'Z'."""
    code = _code(c)
    return ord("A") <= code <= ord("Z")


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    return is_lower(c) or is_upper(c)


def is_digit(c: Char) -> bool:
    """True for '0' through '9'."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_xdigit(c: Char) -> bool:
    """True for hexadecimal digits of either case."""
    code = _code(c)
    return is_digit(code) or ord("a") <= code <= ord("f") or ord("A") <= code <= ord("F")


def is_space(c: Char) -> bool:
    """True for space, form feed, newline, carriage return and both tabs."""
    return _code(c) in (0x20, 0x0C, 0x0A, 0x0D, 0x09, 0x0B)


def is_blank(c: Char) -> bool:
    """True for space and horizontal tab."""
    return _code(c) in (0x20, 0x09)


def is_graph(c: Char) -> bool:
    """True for printable characters other than space."""
    return 32 < _code(c) < 127


def is_print(c: Char) -> bool:
    """True for printable characters including space."""
    return 32 <= _code(c) < 127


def is_cntrl(c: Char) -> bool:
    """True for control characters and DEL."""
    code = _code(c)
    return 0 <= code < 32 or code == 127


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) < 128


def is_punct(c: Char) -> bool:
    """True for printable characters that are neither alphanumeric nor space."""
    return is_print(c) and not is_alnum(c) and not is_space(c)


def _convert(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Map an upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    return _convert(c, code - ord("A") + ord("a") if is_upper(code) else code)


def to_upper(c: Char) -> Char:
    """Map a lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    return _convert(c, code - ord("a") + ord("A") if is_lower(code) else code)