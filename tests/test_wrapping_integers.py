import random

import pytest

from minnow.wrapping_integers import Wrap32

UINT32_MAX = 2**32 - 1
INT32_MAX = 2**31 - 1
ISN = Wrap32(19)


def _checkpoints(lo, hi):
    points = list(range(lo, hi, 1009))
    points.extend([lo, lo + 1, hi - 1, hi - 2])
    return points


def test_compare_low_numbers():
    assert (Wrap32(3) != Wrap32(1)) is True
    assert (Wrap32(3) == Wrap32(1)) is False


def test_compare_random():
    rng = random.Random(1234)
    for _ in range(2000):
        n = rng.getrandbits(32)
        diff = rng.getrandbits(8)
        m = (n + diff) & UINT32_MAX
        assert (Wrap32(n) == Wrap32(m)) == (n == m)
        assert (Wrap32(n) != Wrap32(m)) == (n != m)


def test_wrap_cases():
    assert Wrap32.wrap(3 * (1 << 32), Wrap32(0)) == Wrap32(0)
    assert Wrap32.wrap(3 * (1 << 32) + 17, Wrap32(15)) == Wrap32(32)
    assert Wrap32.wrap(7 * (1 << 32) - 2, Wrap32(15)) == Wrap32(13)


@pytest.mark.parametrize(
    "raw, zero, checkpoint, expected",
    [
        (1, 0, 0, 1),
        (1, 0, UINT32_MAX, (1 << 32) + 1),
        (UINT32_MAX - 1, 0, 3 * (1 << 32), 3 * (1 << 32) - 2),
        (UINT32_MAX - 10, 0, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 10, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 0, 0, UINT32_MAX),
        (16, 16, 0, 0),
        (15, 16, 0, UINT32_MAX),
        (0, INT32_MAX, 0, INT32_MAX + 2),
        (UINT32_MAX, INT32_MAX, 0, 1 << 31),
        (UINT32_MAX, 1 << 31, 0, UINT32_MAX >> 1),
        (0, 1, 1, UINT32_MAX),
    ],
)
def test_unwrap_cases(raw, zero, checkpoint, expected):
    assert Wrap32(raw).unwrap(Wrap32(zero), checkpoint) == expected


@pytest.mark.parametrize("value", [0, 1])
def test_extra_small_values(value):
    for checkpoint in _checkpoints(0, 100000):
        assert Wrap32.wrap(value, ISN).unwrap(ISN, checkpoint) == value


@pytest.mark.parametrize(
    "value",
    [UINT32_MAX - 1, UINT32_MAX, UINT32_MAX + 1, UINT32_MAX + 2],
)
def test_extra_near_first_wrap(value):
    for checkpoint in _checkpoints(UINT32_MAX - 100000, UINT32_MAX + 100000):
        assert Wrap32.wrap(value, ISN).unwrap(ISN, checkpoint) == value


@pytest.mark.parametrize(
    "value",
    [2 * UINT32_MAX - 1, 2 * UINT32_MAX, 2 * UINT32_MAX + 1, 2 * UINT32_MAX + 2],
)
def test_extra_near_second_wrap(value):
    for checkpoint in _checkpoints(2 * UINT32_MAX - 100000, 2 * UINT32_MAX + 100000):
        assert Wrap32.wrap(value, ISN).unwrap(ISN, checkpoint) == value


@pytest.mark.parametrize("base", [UINT32_MAX, 2 * UINT32_MAX])
def test_extra_values_around_checkpoint(base):
    for i in _checkpoints(-100000, 100000):
        assert Wrap32.wrap(base + i, ISN).unwrap(ISN, base) == base + i


def test_roundtrip_random():
    rng = random.Random(4321)
    big_offset = (1 << 31) - 1
    for _ in range(3000):
        isn = Wrap32(rng.randint(0, UINT32_MAX))
        val = rng.randint(big_offset, 1 << 63)
        offset = rng.randint(0, (1 << 31) - 1)
        for value in (
            val,
            val + 1,
            val - 1,
            val + offset,
            val - offset,
            val + big_offset,
            val - big_offset,
        ):
            assert Wrap32.wrap(value, isn).unwrap(isn, val) == value


def test_add_wraps_around():
    assert Wrap32(UINT32_MAX) + 1 == Wrap32(0)
    assert Wrap32(5) + 3 == Wrap32(8)


@pytest.mark.parametrize("raw", [-1, 1 << 32])
def test_out_of_range_raw_value(raw):
    with pytest.raises(ValueError):
        Wrap32(raw)