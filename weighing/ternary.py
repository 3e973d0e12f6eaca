# -*- coding: utf-8 -*-
"""
weighing/ternary.py
Base-3 helpers for the static strategy.

A code's digit at position i (0 = rightmost) describes round i:
0 = coin off the scale, 1 = coin on the left pan, 2 = coin on the right pan.
The complement swaps 1 and 2, i.e. it is the outcome pattern of the same
coin being light instead of heavy.
"""

from __future__ import annotations
from typing import Iterable, Optional

import numpy as np

__all__ = [
    "digit",
    "complement",
    "to_digits",
    "from_digits",
    "complement_codes",
    "m_complement",
    "saturated_count",
    "min_weighings",
    "lower_bound",
]


def digit(x: int, pos: int) -> int:
    return (x // 3 ** pos) % 3


def complement(x: int) -> int:
    """Base-3 complement: 1s become 2s and vice versa. complement(5) == 7."""
    s, c = 0, 1
    while x:
        r = x % 3
        if r == 1:
            s += 2 * c
        elif r == 2:
            s += c
        x //= 3
        c *= 3
    return s


def to_digits(codes: Iterable[int], k: int) -> np.ndarray:
    """(k, n) digit matrix; row 0 is the most significant digit (first round)."""
    arr = np.asarray(list(codes), dtype=np.int64)
    powers = 3 ** np.arange(k - 1, -1, -1, dtype=np.int64)
    return (arr[None, :] // powers[:, None]) % 3


def from_digits(digits: np.ndarray) -> np.ndarray:
    k = digits.shape[0]
    powers = 3 ** np.arange(k - 1, -1, -1, dtype=np.int64)
    return (np.asarray(digits, dtype=np.int64) * powers[:, None]).sum(axis=0)


def complement_codes(codes: Iterable[int], k: int) -> np.ndarray:
    return from_digits((3 - to_digits(codes, k)) % 3)


def m_complement(m: int, code: int, k: int) -> Optional[int]:
    """
    Where m has a non-zero digit, code must have a zero digit; that digit is
    set to the complement of m's digit. Other digits of code are kept.
    Returns None on a conflict.
    Example: m = 5 = (0 1 2), code = 9 = (1 0 0) -> 16 = (1 2 1)
    """
    s, c = 0, 1
    for _ in range(k):
        r, rh = m % 3, code % 3
        if r == 0:
            s += rh * c
        elif rh != 0:
            return None
        else:
            s += (2 if r == 1 else 1) * c
        m //= 3
        code //= 3
        c *= 3
    return s


def saturated_count(k: int) -> int:
    """Largest coin count solvable with k fixed weighings: (3^k - 1)/2 - 1."""
    return (3 ** k - 1) // 2 - 1


def min_weighings(n_coins: int) -> int:
    k = 2
    while saturated_count(k) < n_coins:
        k += 1
    return k


def lower_bound(n_coins: int) -> int:
    """ceil(log3(2n + 1)): weighings needed to separate 2n+1 hypotheses."""
    k, cap = 0, 1
    while cap < 2 * n_coins + 1:
        k += 1
        cap *= 3
    return k
