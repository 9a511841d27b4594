"""Bit manipulation helpers, set-bit counting and Euclid's GCD."""

from __future__ import annotations


def get_bit(n: int, position: int) -> int:
    """Return the bit of ``n`` at ``position`` as 0 or 1."""
    return (n >> position) & 1


def set_bit(n: int, position: int) -> int:
    """Return ``n`` with the bit at ``position`` set."""
    return n | (1 << position)


def clear_bit(n: int, position: int) -> int:
    """Return ``n`` with the bit at ``position`` cleared."""
    return n & ~(1 << position)


def update_bit(n: int, position: int, value: int) -> int:
    """Return ``n`` with the bit at ``position`` replaced by ``value``."""
    return (n & ~(1 << position)) | (value << position)


def clear_last_bits(n: int, count: int) -> int:
    """Return ``n`` with its lowest ``count`` bits cleared."""
    return n & (-1 << count)


def clear_bit_range(n: int, low: int, high: int) -> int:
    """Return ``n`` with bits ``low`` through ``high`` (inclusive) cleared."""
    mask = (-1 << (high + 1)) | ((1 << low) - 1)
    return n & mask


def _require_unsigned(n: int) -> None:
    if n < 0:
        raise ValueError("set bits are counted for non-negative integers only")


def count_set_bits(n: int) -> int:
    """Count the set bits of ``n`` by inspecting each bit in turn."""
    _require_unsigned(n)
    total = 0
    while n > 0:
        total += n & 1
        n >>= 1
    return total


def count_set_bits_fast(n: int) -> int:
    """Count the set bits of ``n`` by repeatedly clearing the lowest one."""
    _require_unsigned(n)
    total = 0
    while n > 0:
        n &= n - 1
        total += 1
    return total


def gcd(m: int, n: int) -> int:
    """Greatest common divisor by Euclid's remainder algorithm."""
    while m % n != 0:
        m, n = n, m % n
    return n