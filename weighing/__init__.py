# -*- coding: utf-8 -*-
"""Optimal strategies for the one-fake-coin balance puzzle (sequential and static)."""

from .errors import (
    WeighingError,
    InvalidCoinCount,
    UnreachableConfiguration,
    SelectorInfeasible,
    CodeSearchExhausted,
    CodeTableInconsistent,
    VerificationError,
    DecodeError,
)
from .possibilities import Outcome, PossibilitySet
from .sequential import SequentialResult, solve_sequential
from .static import StaticResult, solve_static

__all__ = [
    "WeighingError",
    "InvalidCoinCount",
    "UnreachableConfiguration",
    "SelectorInfeasible",
    "CodeSearchExhausted",
    "CodeTableInconsistent",
    "VerificationError",
    "DecodeError",
    "Outcome",
    "PossibilitySet",
    "SequentialResult",
    "StaticResult",
    "solve_sequential",
    "solve_static",
]
