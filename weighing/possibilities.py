# -*- coding: utf-8 -*-
"""
weighing/possibilities.py
Possibility sets: the fake-coin hypotheses still consistent with the
weighings done so far.

A hypothesis is a signed coin number: 0 = no fake coin, +k = coin k is
heavy, -k = coin k is light. Coins are numbered 1..n.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Dict, Iterable, Sequence, Tuple

import numpy as np

__all__ = [
    "Outcome",
    "OUTCOME_ORDER",
    "PossibilitySet",
    "classify_outcome",
    "outcome_signs",
]


class Outcome(IntEnum):
    """Result of one weighing; the value is the sign of (left - right)."""

    LEFT_HEAVY = 1
    BALANCED = 0
    RIGHT_HEAVY = -1

    @property
    def symbol(self) -> str:
        return {1: "+", 0: "=", -1: "-"}[int(self)]


# heavy, balanced, light
OUTCOME_ORDER: Tuple[Outcome, Outcome, Outcome] = (
    Outcome.LEFT_HEAVY, Outcome.BALANCED, Outcome.RIGHT_HEAVY,
)


def _as_pan(coins: Iterable[int]) -> np.ndarray:
    return np.asarray(list(coins), dtype=np.int64)


def outcome_signs(hypotheses: np.ndarray, left: Sequence[int], right: Sequence[int]) -> np.ndarray:
    """Vectorised weighing: sign of the scale for every hypothesis."""
    hyps = np.asarray(hypotheses, dtype=np.int64)
    coins = np.abs(hyps)
    on_left = np.isin(coins, _as_pan(left)).astype(np.int64)
    on_right = np.isin(coins, _as_pan(right)).astype(np.int64)
    return np.sign(hyps) * (on_left - on_right)


def classify_outcome(hypothesis: int, left: Sequence[int], right: Sequence[int]) -> Outcome:
    sign = outcome_signs(np.array([hypothesis], dtype=np.int64), left, right)
    return Outcome(int(sign[0]))


class PossibilitySet:
    """Ordered, immutable collection of distinct hypotheses."""

    __slots__ = ("_hyps",)

    def __init__(self, hypotheses: Iterable[int]):
        src = hypotheses if isinstance(hypotheses, np.ndarray) else list(hypotheses)
        hyps = np.array(src, dtype=np.int64).reshape(-1)
        if np.unique(hyps).size != hyps.size:
            raise ValueError("hypotheses must be distinct")
        hyps.setflags(write=False)
        self._hyps = hyps

    @classmethod
    def initial(cls, n_coins: int) -> "PossibilitySet":
        """{0, +1, ..., +n, -1, ..., -n}"""
        coins = np.arange(1, n_coins + 1, dtype=np.int64)
        return cls(np.concatenate([np.zeros(1, dtype=np.int64), coins, -coins]))

    @property
    def hypotheses(self) -> np.ndarray:
        return self._hyps

    def size(self) -> int:
        return int(self._hyps.size)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self):
        return (int(h) for h in self._hyps)

    def __contains__(self, hypothesis) -> bool:
        return bool(np.any(self._hyps == int(hypothesis)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PossibilitySet):
            return NotImplemented
        return np.array_equal(self._hyps, other._hyps)

    def __hash__(self):
        return hash(self._hyps.tobytes())

    def __repr__(self) -> str:
        return f"PossibilitySet({self._hyps.tolist()})"

    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(int(h) for h in self._hyps)

    def weigh(self, left: Sequence[int], right: Sequence[int]) -> Dict[Outcome, "PossibilitySet"]:
        """Split into three disjoint subsets, one per outcome; order is kept."""
        signs = outcome_signs(self._hyps, left, right)
        return {o: PossibilitySet(self._hyps[signs == int(o)]) for o in OUTCOME_ORDER}
