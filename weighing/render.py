# -*- coding: utf-8 -*-
"""
weighing/render.py
Text rendering of solved strategies.

Sequential:
    ( 1  2  3  4 |  5  6  7  8) [8, 9, 8]
        +( 1  2  5 |  3  4  6) [3, 2, 3]
            +( 1 |  2) [1, 1, 1]  1+,  6-,  2+
Each line shows the pans, the sizes of the heavy/balanced/light outcome
sets and, when a branch is decided, its verdict: "3+" coin 3 heavy, "3-"
coin 3 light, "==" no fake coin, "--" impossible.
"""

from __future__ import annotations
from typing import List, Sequence

from .possibilities import OUTCOME_ORDER
from .sequential import DecisionNode, SequentialResult
from .static import StaticResult

__all__ = ["format_hypothesis", "format_pans", "format_sequential", "format_static", "format_summary"]

_INDENT = "    "


def format_hypothesis(node: DecisionNode) -> str:
    if node.size == 0:
        return " --"
    if node.size > 1:
        return "   "
    h = node.hypotheses[0]
    if h == 0:
        return " =="
    return f"{abs(h):2d}{'+' if h > 0 else '-'}"


def _vector(coins: Sequence[int]) -> str:
    return " ".join(f"{c:2d}" for c in coins)


def format_pans(left: Sequence[int], right: Sequence[int]) -> str:
    return f"({_vector(left)} | {_vector(right)})"


def _walk(node: DecisionNode, level: int, prefix: str, lines: List[str]) -> None:
    if node.is_leaf:
        return
    children = [node.children[o] for o in OUTCOME_ORDER]
    sizes = ", ".join(str(c.size) for c in children)
    line = f"{_INDENT * (level + 1)}{prefix}{format_pans(node.left, node.right)} [{sizes}] "
    if any(c.size <= 1 for c in children):
        line += ", ".join(format_hypothesis(c) for c in children)
    lines.append(line.rstrip())
    for o, child in zip(OUTCOME_ORDER, children):
        _walk(child, level + 1, o.symbol, lines)


def format_sequential(result: SequentialResult) -> str:
    lines: List[str] = []
    _walk(result.root, 0, "", lines)
    return "\n".join(lines)


def format_static(result: StaticResult) -> str:
    coins = sorted(result.codes)
    lines = [" ".join(f"{c:2d}" for c in coins), "", "+"]
    for row in result.digit_table():
        lines.append(" ".join(f"{int(d):2d}" for d in row))
    lines.append("-")
    for row in result.digit_table(light=True):
        lines.append(" ".join(f"{int(d):2d}" for d in row))
    lines.append("")
    for left, right in result.weighings:
        lines.append(format_pans(left, right))
    return "\n".join(lines)


def format_summary(depth: int, elapsed: float) -> str:
    return f"Required {depth} weighings. Time: {int(elapsed)} seconds."
