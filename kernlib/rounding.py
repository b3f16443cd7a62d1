"""Integer rounding helpers for non-negative values and positive steps."""

from __future__ import annotations


def _check(x: int, step: int) -> None:
    if x < 0:
        raise ValueError("x must not be negative")
    if step < 1:
        raise ValueError("step must be at least 1")


def round_up(x: int, step: int) -> int:
    """Return X rounded up to the nearest multiple of STEP."""
    _check(x, step)
    return (x + step - 1) // step * step


def div_round_up(x: int, step: int) -> int:
    """Return X divided by STEP, rounded up."""
    _check(x, step)
    return (x + step - 1) // step


def round_down(x: int, step: int) -> int:
    """Return X rounded down to the nearest multiple of STEP."""
    _check(x, step)
    return x // step * step