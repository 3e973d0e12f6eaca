# -*- coding: utf-8 -*-
"""
weighing/sequential.py
Adaptive (decision-tree) strategy.

Every node weighs the coins chosen by selection.select, splits the
possibility set into the three outcome sets and recurses into each of them
(heavy, balanced, light) until at most one hypothesis survives. The depth of
the tree is the worst-case number of weighings.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from . import config
from .configuration import classify
from .errors import SelectorInfeasible
from .possibilities import OUTCOME_ORDER, Outcome, PossibilitySet
from .selection import select

__all__ = [
    "DecisionNode",
    "WeighingEvent",
    "WeighingTrace",
    "SequentialResult",
    "solve",
    "solve_sequential",
]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeighingEvent:
    path: Tuple[Outcome, ...]          # outcomes leading to this weighing
    left: Tuple[int, ...]
    right: Tuple[int, ...]
    sizes: Tuple[int, int, int]        # heavy, balanced, light

    @property
    def level(self) -> int:
        return len(self.path)


class WeighingTrace:
    """Collects weighing events in pre-order while the tree is built."""

    def __init__(self):
        self.events: List[WeighingEvent] = []

    def record(self, event: WeighingEvent) -> None:
        self.events.append(event)

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[WeighingEvent]:
        return iter(self.events)


@dataclass
class DecisionNode:
    size: int
    depth: int = 0
    left: Tuple[int, ...] = ()
    right: Tuple[int, ...] = ()
    children: Dict[Outcome, "DecisionNode"] = field(default_factory=dict)
    hypotheses: Tuple[int, ...] = ()

    @classmethod
    def leaf(cls, possibilities: PossibilitySet) -> "DecisionNode":
        return cls(size=possibilities.size(), hypotheses=possibilities.as_tuple())

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def resolved(self) -> Optional[int]:
        """The identified hypothesis of a leaf, None for contradictions and inner nodes."""
        if self.is_leaf and len(self.hypotheses) == 1:
            return self.hypotheses[0]
        return None

    @property
    def sizes(self) -> Tuple[int, ...]:
        return tuple(self.children[o].size for o in OUTCOME_ORDER) if self.children else ()

    def child(self, outcome: Outcome) -> "DecisionNode":
        return self.children[Outcome(outcome)]

    def count_weighings(self) -> int:
        if self.is_leaf:
            return 0
        return 1 + sum(c.count_weighings() for c in self.children.values())


@dataclass
class SequentialResult:
    n_coins: int
    depth: int
    root: DecisionNode
    trace: WeighingTrace
    elapsed: float = 0.0


def solve(possibilities: PossibilitySet, n_coins: int,
          trace: Optional[WeighingTrace] = None,
          path: Tuple[Outcome, ...] = ()) -> DecisionNode:
    if possibilities.size() <= 1:
        return DecisionNode.leaf(possibilities)

    cfg = classify(possibilities, n_coins)
    sel = select(cfg)
    parts = possibilities.weigh(sel.left, sel.right)
    sizes = tuple(parts[o].size() for o in OUTCOME_ORDER)
    if max(sizes) == possibilities.size():
        raise SelectorInfeasible(f"weighing {sel.left} | {sel.right} does not split {possibilities!r}")

    if trace is not None:
        trace.record(WeighingEvent(path=path, left=sel.left, right=sel.right, sizes=sizes))
    LOGGER.debug("%s%s | %s -> %s", "".join(o.symbol for o in path), sel.left, sel.right, sizes)

    children = {o: solve(parts[o], n_coins, trace, path + (o,)) for o in OUTCOME_ORDER}
    return DecisionNode(
        size=possibilities.size(),
        depth=1 + max(c.depth for c in children.values()),
        left=sel.left,
        right=sel.right,
        children=children,
    )


def solve_sequential(n_coins: int) -> SequentialResult:
    n = config.validate_n_coins(n_coins)
    t0 = time.perf_counter()
    trace = WeighingTrace()
    root = solve(PossibilitySet.initial(n), n, trace)
    elapsed = time.perf_counter() - t0
    LOGGER.info("sequential strategy for %d coins: %d weighings (%d nodes, %.3fs)",
                n, root.depth, len(trace), elapsed)
    return SequentialResult(n_coins=n, depth=root.depth, root=root, trace=trace, elapsed=elapsed)
