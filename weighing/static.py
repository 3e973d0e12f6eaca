# -*- coding: utf-8 -*-
"""
weighing/static.py
Static (non-adaptive) strategy built from base-3 "heavy codes".

Coin j is placed on the left pan in round i if digit i of its heavy code
is 1, on the right pan if it is 2, and stays off the scale if it is 0. The
observed outcome pattern then equals the heavy code of the fake coin (heavy
fake) or its complement (light fake); all-balanced means no fake coin.

The saturated case n = (3^k - 1)/2 - 1 is constructed recursively (see
base_codes); other counts start from the closest smaller saturated table
and add one coin at a time (add_code).
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Sequence, Set, Tuple

import numpy as np

from . import config
from .errors import CodeSearchExhausted, CodeTableInconsistent, DecodeError
from .possibilities import Outcome
from .ternary import (
    complement, complement_codes, m_complement, min_weighings, saturated_count, to_digits,
)

__all__ = [
    "BASE_CODES_K2",
    "StaticResult",
    "missing",
    "base_codes",
    "add_code",
    "build_codes",
    "weighings",
    "verify_unique",
    "solve_static",
]

LOGGER = logging.getLogger(__name__)

# 3 coins / 2 weighings: (0 1), (2 2), (1 0)
BASE_CODES_K2: Tuple[int, ...] = (1, 8, 3)

_OUTCOME_DIGIT = {Outcome.BALANCED: 0, Outcome.LEFT_HEAVY: 1, Outcome.RIGHT_HEAVY: 2}


def _used(codes: Sequence[int]) -> Set[int]:
    used = set(int(c) for c in codes)
    used.update(complement(int(c)) for c in codes)
    return used


def missing(codes: Sequence[int], limit: int) -> int:
    """Smallest value in 1..limit that is neither a code nor a complement."""
    used = _used(codes)
    for m in range(1, limit + 1):
        if m not in used:
            return m
    raise CodeSearchExhausted(f"no free code below {limit + 1} for {len(codes)} codes")


@lru_cache(maxsize=None)
def base_codes(k: int) -> Tuple[int, ...]:
    """
    Heavy codes for the saturated case with k weighings, extending the
    (k-1) solution b (size n) by
      1. a leading digit 0
      2. a leading digit 1
      3. a leading digit 2
      4. the code (2, 0, ..., 0)
      5. (0, m) and (1, complement(m)) for the smallest free m in b
    which gives 3n + 3 codes.
    """
    if k < 2:
        raise ValueError(f"static tables need at least 2 weighings, got k={k}")
    if k == 2:
        return BASE_CODES_K2
    b = list(base_codes(k - 1))
    c = 3 ** (k - 1)
    m = missing(b, c - 1)
    codes = b + [x + c for x in b] + [x + 2 * c for x in b] + [2 * c, m, c + complement(m)]
    LOGGER.debug("base codes k=%d: %d codes (missing m=%d)", k, len(codes), m)
    return tuple(sorted(codes))


def add_code(codes: Sequence[int], k: int) -> List[int]:
    """
    Add one coin to a table of k-digit codes: take the smallest free m for
    which some existing code can absorb complement digits where m is
    non-zero (ternary.m_complement) without colliding, rewrite that code and
    append m. Returns the new sorted table.
    """
    used = _used(codes)
    for m in range(1, 3 ** k):
        if m in used:
            continue
        for j, code in enumerate(codes):
            t = m_complement(m, int(code), k)
            if t is not None and t not in used:
                out = [int(c) for c in codes]
                out[j] = t
                out.append(m)
                LOGGER.debug("add code m=%d, code[%d] %d -> %d", m, j, code, t)
                return sorted(out)
    raise CodeSearchExhausted(f"cannot add a coin to {len(codes)} codes with {k} weighings")


def build_codes(n_coins: int) -> Tuple[int, List[int]]:
    """(k, heavy codes) for n_coins, coin i getting the i-th code."""
    k = min_weighings(n_coins)
    if saturated_count(k) == n_coins:
        return k, list(base_codes(k))
    codes = list(base_codes(k - 1))
    while len(codes) < n_coins:
        codes = add_code(codes, k)
    return k, codes


def weighings(codes: Sequence[int], k: int) -> List[Tuple[Tuple[int, ...], Tuple[int, ...]]]:
    """Pans for rounds k-1 down to 0 (coins numbered from 1)."""
    rounds = []
    for i, row in enumerate(to_digits(codes, k)):
        left = tuple(int(c) for c in np.flatnonzero(row == 1) + 1)
        right = tuple(int(c) for c in np.flatnonzero(row == 2) + 1)
        if not left or len(left) != len(right):
            raise CodeTableInconsistent(
                f"round {i + 1}: {len(left)} coins left vs {len(right)} coins right"
            )
        rounds.append((left, right))
    return rounds


def verify_unique(codes: Sequence[int], k: int) -> None:
    arr = np.asarray(list(codes), dtype=np.int64)
    if np.any(arr <= 0) or np.any(arr >= 3 ** k):
        raise CodeTableInconsistent(f"codes out of range 1..{3 ** k - 1}: {arr.tolist()}")
    both = np.concatenate([arr, complement_codes(arr, k)])
    if np.unique(both).size != both.size:
        raise CodeTableInconsistent("codes and their complements are not pairwise distinct")


@dataclass
class StaticResult:
    n_coins: int
    depth: int
    codes: Dict[int, int]
    weighings: List[Tuple[Tuple[int, ...], Tuple[int, ...]]] = field(default_factory=list)
    elapsed: float = 0.0

    def heavy_code(self, coin: int) -> int:
        return self.codes[coin]

    def light_code(self, coin: int) -> int:
        return complement(self.codes[coin])

    def digit_table(self, light: bool = False) -> np.ndarray:
        """(depth, n_coins) digits, one row per round."""
        values = [self.light_code(c) if light else self.codes[c] for c in sorted(self.codes)]
        return to_digits(values, self.depth)

    def identify(self, outcomes: Sequence[Outcome]) -> int:
        """Decode one outcome per round into a hypothesis (0, +coin, -coin)."""
        if len(outcomes) != self.depth:
            raise DecodeError(f"expected {self.depth} outcomes, got {len(outcomes)}")
        value = 0
        for o in outcomes:
            value = 3 * value + _OUTCOME_DIGIT[Outcome(o)]
        if value == 0:
            return 0
        for coin, code in self.codes.items():
            if code == value:
                return coin
            if complement(code) == value:
                return -coin
        raise DecodeError(f"outcome pattern {value} matches no coin")


def solve_static(n_coins: int) -> StaticResult:
    n = config.validate_n_coins(n_coins)
    t0 = time.perf_counter()
    k, codes = build_codes(n)
    verify_unique(codes, k)
    rounds = weighings(codes, k)
    elapsed = time.perf_counter() - t0
    LOGGER.info("static strategy for %d coins: %d weighings (%.3fs)", n, k, elapsed)
    return StaticResult(
        n_coins=n,
        depth=k,
        codes={i + 1: int(c) for i, c in enumerate(codes)},
        weighings=rounds,
        elapsed=elapsed,
    )
