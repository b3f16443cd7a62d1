"""64-bit integer division built from a 64-by-32-bit divide primitive."""

from __future__ import annotations

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _check_unsigned64(value: int, name: str) -> None:
    if not 0 <= value <= _MASK_64:
        raise ValueError(f"{name} must be an unsigned 64-bit integer")


def _check_signed64(value: int, name: str) -> None:
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"{name} must be a signed 64-bit integer")


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def divl(n: int, d: int) -> int:
    """Divide 64-bit N by 32-bit D, yielding a 32-bit quotient.

    Raises ZeroDivisionError for D of zero and OverflowError if the
    quotient does not fit in 32 bits.
    """
    _check_unsigned64(n, "n")
    if not 0 <= d <= _MASK_32:
        raise ValueError("d must be an unsigned 32-bit integer")
    if d == 0:
        raise ZeroDivisionError("division by zero")
    q = n // d
    if q > _MASK_32:
        raise OverflowError("quotient does not fit in 32 bits")
    return q


def nlz(x: int) -> int:
    """Return the number of leading zero bits in nonzero 32-bit X."""
    if not 0 < x <= _MASK_32:
        raise ValueError("x must be a nonzero unsigned 32-bit integer")
    n = 0
    for limit, shift in ((0x0000FFFF, 16), (0x00FFFFFF, 8), (0x0FFFFFFF, 4), (0x3FFFFFFF, 2)):
        if x <= limit:
            n += shift
            x = (x << shift) & _MASK_32
    if x <= 0x7FFFFFFF:
        n += 1
    return n


def udiv64(n: int, d: int) -> int:
    """Return the quotient of unsigned 64-bit N by unsigned 64-bit D."""
    _check_unsigned64(n, "n")
    _check_unsigned64(d, "d")
    if d == 0:
        raise ZeroDivisionError("division by zero")
    if d >> 32 == 0:
        b = 1 << 32
        n1 = n >> 32
        n0 = n & _MASK_32
        return (divl(b * (n1 % d) + n0, d) + b * (n1 // d)) & _MASK_64
    if n < d:
        return 0
    s = nlz(d >> 32)
    q = divl(n >> 1, ((d << s) & _MASK_64) >> 32) >> (31 - s)
    remainder = (n - ((q - 1) * d)) & _MASK_64
    return q - 1 if remainder < d else q


def umod64(n: int, d: int) -> int:
    """Return the remainder of unsigned N by D, truncated to 32 bits."""
    return (n - d * udiv64(n, d)) & _MASK_32


def sdiv64(n: int, d: int) -> int:
    """Return the quotient of signed 64-bit N by D, rounded toward zero."""
    _check_signed64(n, "n")
    _check_signed64(d, "d")
    q_abs = udiv64(abs(n) & _MASK_64, abs(d) & _MASK_64)
    q = q_abs if (n < 0) == (d < 0) else -q_abs
    return _to_signed(q, 64)


def smod64(n: int, d: int) -> int:
    """Return the remainder of signed N by D, truncated to 32 bits.

    The remainder takes the sign of N.
    """
    remainder = _to_signed(n - d * sdiv64(n, d), 64)
    return _to_signed(remainder, 32)