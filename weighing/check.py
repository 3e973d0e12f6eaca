# -*- coding: utf-8 -*-
"""
weighing/check.py
Cross-check solved strategies by playing every hypothesis through them.
"""

from __future__ import annotations
import logging
from typing import List, Tuple

from .errors import DecodeError, VerificationError
from .possibilities import Outcome, PossibilitySet, classify_outcome
from .sequential import DecisionNode, SequentialResult
from .static import StaticResult

__all__ = ["simulate", "cross_check_sequential", "cross_check_static"]

LOGGER = logging.getLogger(__name__)


def simulate(root: DecisionNode, hypothesis: int) -> Tuple[DecisionNode, Tuple[Outcome, ...]]:
    """Follow the decision tree as if `hypothesis` were true; return the leaf and the outcomes seen."""
    node = root
    path: List[Outcome] = []
    while not node.is_leaf:
        outcome = classify_outcome(hypothesis, node.left, node.right)
        path.append(outcome)
        node = node.child(outcome)
    return node, tuple(path)


def cross_check_sequential(result: SequentialResult) -> int:
    checked = 0
    for h in PossibilitySet.initial(result.n_coins):
        leaf, path = simulate(result.root, h)
        if leaf.hypotheses != (h,):
            raise VerificationError(f"hypothesis {h:+d} ends in leaf {leaf.hypotheses} after {len(path)} weighings")
        if len(path) > result.depth:
            raise VerificationError(f"hypothesis {h:+d} needs {len(path)} weighings, depth is {result.depth}")
        checked += 1
    LOGGER.info("[check] sequential n=%d: %d hypotheses identified", result.n_coins, checked)
    return checked


def cross_check_static(result: StaticResult) -> int:
    checked = 0
    for h in PossibilitySet.initial(result.n_coins):
        outcomes = [classify_outcome(h, left, right) for left, right in result.weighings]
        try:
            got = result.identify(outcomes)
        except DecodeError as exc:
            raise VerificationError(f"hypothesis {h:+d} cannot be decoded: {exc}") from exc
        if got != h:
            raise VerificationError(f"hypothesis {h:+d} decodes as {got:+d}")
        checked += 1
    LOGGER.info("[check] static n=%d: %d hypotheses identified", result.n_coins, checked)
    return checked
