# -*- coding: utf-8 -*-
"""
weighing/selection.py
Choose the coins for the two pans so that the three outcomes split the
possibility set as evenly as possible (sizes differ by at most one, except
for the first weighing of a non-saturated instance).

Type A:
  left  = n coins from N+-
  right = n coins from N+-, or n-1 coins from N+- plus one coin from N=
Type B (see split_counts):
  left  = n1 coins from N+, n2 coins from N-
  right = (|N+| - n1) coins from N+, k coins from N-, l coins from N=
  l < 0 means -l coins from N= go on the left instead.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Tuple

from .configuration import Configuration, KIND_A
from .errors import SelectorInfeasible

__all__ = ["Selection", "select", "select_a", "select_b", "split_counts"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    left: Tuple[int, ...]
    right: Tuple[int, ...]

    @property
    def size(self) -> int:
        return len(self.left)


def select_a(cfg: Configuration) -> Selection:
    m = len(cfg.double)
    borrow = 0
    if m % 3 == 0:
        n = m // 3
    elif m % 3 == 1:
        if cfg.equal:
            n = (m + 2) // 3
            borrow = 1
        else:
            n = (m - 1) // 3
    else:
        n = (m + 1) // 3
    if n == 0:
        raise SelectorInfeasible(f"type A selection is empty for |N+-|={m}")

    left = cfg.double[:n]
    if borrow:
        right = cfg.double[n:2 * n - 1] + cfg.equal[:1]
    else:
        right = cfg.double[n:2 * n]
    return Selection(left=left, right=right)


def split_counts(n_more: int, n_less: int) -> Tuple[int, int, int, int]:
    """
    Closed form for (n1, n2, k, l) in the type B split.

    n1 / n2: coins from N+ / N- on the left pan
    k:       coins from N- on the right pan
    l:       coins from N= on the right pan (negative: on the left pan)
    Any of n1, n2, k may come out negative; the caller then retries with
    N+ and N- exchanged.
    """
    total = n_more + n_less
    l = 0
    odd = n_more % 2 == 1
    if total % 3 == 0:
        if odd:
            l = 2
            n1 = (n_more + 1) // 2
            n2 = (n_less - n1 + 2) // 3
        else:
            n1 = n_more // 2
            n2 = (n_less - n1) // 3
    elif total % 3 == 1:
        if odd:
            l = 1
            n1 = (n_more + 1) // 2
            n2 = (n_less - n1 + 1) // 3
        else:
            n1 = n_more // 2
            n2 = (n_less - n1 - 1) // 3
    else:
        if odd:
            l = -1
            n1 = (n_more - 1) // 2
            n2 = (n_less - n1 - 1) // 3
        else:
            n1 = n_more // 2
            n2 = (n_less - n1 + 1) // 3
    k = 2 * n1 + n2 - n_more - l
    return n1, n2, k, l


def _assemble_b(cfg: Configuration, n1: int, n2: int, k: int, l: int) -> Selection:
    n_more, n_less, n_equal = len(cfg.more), len(cfg.less), len(cfg.equal)
    if n1 > n_more or n2 + k > n_less or max(l, -l) > n_equal:
        raise SelectorInfeasible(
            f"type B split (n1={n1}, n2={n2}, k={k}, l={l}) exceeds groups "
            f"|N+|={n_more} |N-|={n_less} |N=|={n_equal}"
        )
    left = cfg.more[:n1] + cfg.less[:n2] + (cfg.equal[:-l] if l < 0 else ())
    right = cfg.more[n1:] + cfg.less[n2:n2 + k] + (cfg.equal[:l] if l > 0 else ())
    if not left or len(left) != len(right):
        raise SelectorInfeasible(f"type B split gives pans of {len(left)} and {len(right)} coins")
    return Selection(left=left, right=right)


def select_b(cfg: Configuration) -> Selection:
    for attempt in (cfg, cfg.swapped()):
        n1, n2, k, l = split_counts(len(attempt.more), len(attempt.less))
        if n1 >= 0 and n2 >= 0 and k >= 0:
            if attempt is not cfg:
                LOGGER.debug("type B split uses N+/N- exchanged (|N+|=%d, |N-|=%d)",
                             len(cfg.more), len(cfg.less))
            return _assemble_b(attempt, n1, n2, k, l)
    raise SelectorInfeasible(f"no non-negative type B split for {cfg.describe()}")


def select(cfg: Configuration) -> Selection:
    """Dispatch on the configuration kind (raises for unreachable kinds)."""
    if cfg.kind == KIND_A:
        return select_a(cfg)
    return select_b(cfg)
