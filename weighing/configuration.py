# -*- coding: utf-8 -*-
"""
weighing/configuration.py
Classify a possibility set into coin roles.

  EQUAL  - genuine in every surviving hypothesis
  MORE   - may be heavy, never light
  LESS   - may be light, never heavy
  DOUBLE - may be heavy or light
  all_equal - the "no fake coin" hypothesis survives

Only two kinds are reachable. The initial set is type A (every coin DOUBLE,
all_equal). Weighing a type A set yields two type B sets (the unbalanced
outcomes) and one type A set (balanced); weighing a type B set yields three
type B sets.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Tuple

import numpy as np

from .errors import UnreachableConfiguration
from .possibilities import PossibilitySet

__all__ = ["Configuration", "classify", "KIND_A", "KIND_B"]

KIND_A = "A"
KIND_B = "B"


@dataclass(frozen=True)
class Configuration:
    equal: Tuple[int, ...]
    more: Tuple[int, ...]
    less: Tuple[int, ...]
    double: Tuple[int, ...]
    all_equal: bool

    @property
    def num_possibilities(self) -> int:
        return len(self.more) + len(self.less) + 2 * len(self.double) + int(self.all_equal)

    @property
    def kind(self) -> str:
        if not self.more and not self.less and self.all_equal:
            return KIND_A
        if not self.double and not self.all_equal:
            return KIND_B
        raise UnreachableConfiguration(f"cannot handle this configuration: {self.describe()}")

    def swapped(self) -> "Configuration":
        """Same configuration with the MORE and LESS roles exchanged."""
        return replace(self, more=self.less, less=self.more)

    def describe(self) -> str:
        return (f"==: {int(self.all_equal)} N=: {list(self.equal)} N+: {list(self.more)} "
                f"N-: {list(self.less)} N+-: {list(self.double)}")


def _coins(mask: np.ndarray) -> Tuple[int, ...]:
    return tuple(int(c) for c in np.flatnonzero(mask) + 1)


def classify(possibilities: PossibilitySet, n_coins: int) -> Configuration:
    hyps = possibilities.hypotheses
    heavy = np.zeros(n_coins + 1, dtype=bool)
    light = np.zeros(n_coins + 1, dtype=bool)
    heavy[hyps[hyps > 0]] = True
    light[-hyps[hyps < 0]] = True
    heavy, light = heavy[1:], light[1:]
    cfg = Configuration(
        equal=_coins(~heavy & ~light),
        more=_coins(heavy & ~light),
        less=_coins(light & ~heavy),
        double=_coins(heavy & light),
        all_equal=bool(np.any(hyps == 0)),
    )
    cfg.kind  # raises for anything but type A / type B
    return cfg
