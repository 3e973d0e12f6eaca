# -*- coding: utf-8 -*-
"""
weighing/errors.py
Exception taxonomy for the solvers.

All failures raised by the core derive from ``WeighingError``. Apart from
``InvalidCoinCount`` (bad caller input) and ``DecodeError`` (impossible
outcome pattern handed to a decoder) they signal a broken invariant in the
algorithms and are never retried.
"""

from __future__ import annotations


class WeighingError(RuntimeError):
    """Base class; the CLI maps it to a non-zero exit status."""

    exit_code = 1


class InvalidCoinCount(WeighingError, ValueError):
    """Fewer than three coins were requested."""

    exit_code = 2


class UnreachableConfiguration(WeighingError):
    """The possibility set classifies as neither type A nor type B."""


class SelectorInfeasible(WeighingError):
    """No non-negative pan split exists, even after exchanging MORE and LESS."""


class CodeSearchExhausted(WeighingError):
    """The static builder ran out of candidate codes."""


class CodeTableInconsistent(WeighingError):
    """A code table decodes into an empty or unbalanced weighing."""


class VerificationError(WeighingError):
    """A solved strategy failed to identify some hypothesis."""


class DecodeError(WeighingError, ValueError):
    """An outcome pattern matches no coin of a static code table."""


__all__ = [
    "WeighingError",
    "InvalidCoinCount",
    "UnreachableConfiguration",
    "SelectorInfeasible",
    "CodeSearchExhausted",
    "CodeTableInconsistent",
    "VerificationError",
    "DecodeError",
]
