import pytest

from kernlib.arithmetic import divl, nlz, sdiv64, smod64, udiv64, umod64

U64_MAX = 18446744073709551615
INT64_MAX = 9223372036854775807
INT64_MIN = -INT64_MAX - 1

UNSIGNED_CASES = [
    (0, 1),
    (1, 1),
    (100, 7),
    (U64_MAX, 1),
    (U64_MAX, 3),
    (U64_MAX, 0xFFFFFFFF),
    (U64_MAX, 0x100000000),
    (U64_MAX, U64_MAX),
    (U64_MAX - 1, U64_MAX),
    (0x123456789ABCDEF0, 0x1_0000_0001),
    (0xFEDCBA9876543210, 0x8000_0000_0000_0001),
    (0xFFFF_FFFF_0000_0000, 0xFFFF_FFFF_0000_0001),
    (5, 0x1_0000_0000),
]


@pytest.mark.parametrize("x", [1, 2, 3, 0xFF, 0xFFFF, 0x10000, 0x7FFFFFFF, 0x80000000, 0xFFFFFFFF])
def test_nlz_matches_bit_length(x):
    assert nlz(x) == 32 - x.bit_length()


def test_nlz_rejects_zero():
    with pytest.raises(ValueError):
        nlz(0)


def test_divl_quotient():
    assert divl(100, 7) == 100 // 7


def test_divl_overflow():
    with pytest.raises(OverflowError):
        divl(1 << 32, 1)


def test_divl_zero():
    with pytest.raises(ZeroDivisionError):
        divl(5, 0)


@pytest.mark.parametrize("n,d", UNSIGNED_CASES)
def test_udiv64_invariant(n, d):
    q = udiv64(n, d)
    assert q * d <= n < (q + 1) * d


@pytest.mark.parametrize("n,d", [(n, d) for n, d in UNSIGNED_CASES if d <= 0xFFFFFFFF])
def test_umod64_small_divisor(n, d):
    r = umod64(n, d)
    assert 0 <= r < d
    assert udiv64(n, d) * d + r == n


def test_umod64_truncates_to_32_bits():
    n = (1 << 40) + 5
    d = 1 << 41
    assert umod64(n, d) == n & 0xFFFFFFFF


def test_udiv64_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        udiv64(1, 0)


def test_udiv64_rejects_out_of_range():
    with pytest.raises(ValueError):
        udiv64(-1, 1)
    with pytest.raises(ValueError):
        udiv64(1 << 64, 1)


@pytest.mark.parametrize(
    "n,d",
    [(7, 2), (-7, 2), (7, -2), (-7, -2), (INT64_MAX, 3), (INT64_MIN, 3), (-1, INT64_MAX), (0, -5)],
)
def test_sdiv64_truncates_toward_zero(n, d):
    q = sdiv64(n, d)
    assert abs(q) * abs(d) <= abs(n) < (abs(q) + 1) * abs(d)
    if q != 0:
        assert (q < 0) == ((n < 0) != (d < 0))


def test_sdiv64_min_by_minus_one_wraps():
    assert sdiv64(INT64_MIN, -1) == INT64_MIN


@pytest.mark.parametrize("n,d", [(7, 2), (-7, 2), (7, -2), (-7, -2), (-100, 9), (100, -9)])
def test_smod64_relation(n, d):
    r = smod64(n, d)
    assert sdiv64(n, d) * d + r == n
    assert abs(r) < abs(d)
    assert r == 0 or (r < 0) == (n < 0)


def test_sdiv64_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        sdiv64(1, 0)