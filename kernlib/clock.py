"""Real-time clock decoding and programmable interval timer settings."""

from __future__ import annotations

from typing import Callable

PIT_HZ = 1193180
"""Input clock of the interval timer, in cycles per second."""

DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

RTC_REG_SEC = 0
RTC_REG_MIN = 2
RTC_REG_HOUR = 4
RTC_REG_MDAY = 7
RTC_REG_MON = 8
RTC_REG_YEAR = 9

_SECONDS_PER_DAY = 24 * 60 * 60
_MASK_16 = 0xFFFF
_MASK_32 = 0xFFFFFFFF


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def bcd_to_bin(value: int) -> int:
    """Return the integer encoded by the BCD byte VALUE (0x59 means 59)."""
    if not 0 <= value <= 0xFF:
        raise ValueError("value must be a byte")
    return (value & 0x0F) + (value >> 4) * 10


def cmos_fields_to_epoch(
    sec: int, minute: int, hour: int, mday: int, mon: int, year: int
) -> int:
    """Convert clock fields to seconds since 1970, as the clock driver does.

    YEAR counts years since 1900, taken to be past 2000 when below 70.
    The result is an unsigned 32-bit count.
    """
    if not 0 <= mon <= len(DAYS_PER_MONTH):
        raise ValueError(f"month {mon} out of range")
    if year < 70:
        year += 100
    year -= 70

    days = year * 365 + _trunc_div(year - 1, 4)
    days += sum(DAYS_PER_MONTH[:mon])
    if mon > 2 and year % 4 == 0:
        days += 1
    days += mday - 1

    total = days * _SECONDS_PER_DAY + hour * 60 * 60 + minute * 60 + sec
    return total & _MASK_32


def read_rtc_time(read_register: Callable[[int], int]) -> int:
    """Read the clock through READ_REGISTER and return seconds since 1970.

    READ_REGISTER takes a CMOS register index and returns its BCD byte.
    The fields are read again until the seconds are stable across a read.
    """
    while True:
        sec = bcd_to_bin(read_register(RTC_REG_SEC))
        minute = bcd_to_bin(read_register(RTC_REG_MIN))
        hour = bcd_to_bin(read_register(RTC_REG_HOUR))
        mday = bcd_to_bin(read_register(RTC_REG_MDAY))
        mon = bcd_to_bin(read_register(RTC_REG_MON))
        year = bcd_to_bin(read_register(RTC_REG_YEAR))
        if sec == bcd_to_bin(read_register(RTC_REG_SEC)):
            return cmos_fields_to_epoch(sec, minute, hour, mday, mon, year)


def pit_counter(frequency: int) -> int:
    """Return the 16-bit counter that makes the timer run at FREQUENCY Hz.

    Frequencies below 19 give 0 (counted as 65536 by the timer); those
    above the input clock give 2.
    """
    if frequency < 19:
        return 0
    if frequency > PIT_HZ:
        return 2
    return ((PIT_HZ + frequency // 2) // frequency) & _MASK_16


def pit_control_byte(channel: int, mode: int) -> int:
    """Return the control byte selecting CHANNEL (0 or 2) in MODE (2 or 3)."""
    if channel not in (0, 2):
        raise ValueError("channel must be 0 or 2")
    if mode not in (2, 3):
        raise ValueError("mode must be 2 or 3")
    return (channel << 6) | 0x30 | (mode << 1)