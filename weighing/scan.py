# -*- coding: utf-8 -*-
"""
weighing/scan.py
Depth table over a range of coin counts.

Columns:
  n, lower_bound (ceil(log3(2n+1))), min_weighings (smallest k with
  n <= (3^k-1)/2 - 1), saturated, sequential_depth, sequential_nodes,
  static_depth
"""

from __future__ import annotations
import logging
import os
from typing import Dict, List, Optional, Sequence

from . import config
from .check import cross_check_sequential, cross_check_static
from .sequential import solve_sequential
from .static import solve_static
from .ternary import lower_bound, min_weighings, saturated_count
from .utils_io import ensure_dir, make_run_tag, safe_tag, write_csv

__all__ = ["SCAN_FIELDS", "scan_depths", "write_scan_csv"]

LOGGER = logging.getLogger(__name__)

SCAN_FIELDS = [
    "n", "lower_bound", "min_weighings", "saturated",
    "sequential_depth", "sequential_nodes", "static_depth",
]


def scan_depths(n_min: int, n_max: int, modes: Optional[Sequence[str]] = None,
                verify: bool = False) -> List[Dict]:
    n_min = config.validate_n_coins(n_min)
    if n_max < n_min:
        raise ValueError(f"n_max must be >= n_min, got {n_min}..{n_max}")
    modes = [config.normalize_mode(m) for m in (modes or ("sequential", "static"))]

    rows: List[Dict] = []
    for n in range(n_min, n_max + 1):
        k = min_weighings(n)
        row: Dict = {
            "n": n,
            "lower_bound": lower_bound(n),
            "min_weighings": k,
            "saturated": int(saturated_count(k) == n),
            "sequential_depth": "",
            "sequential_nodes": "",
            "static_depth": "",
        }
        if "sequential" in modes:
            res = solve_sequential(n)
            if verify:
                cross_check_sequential(res)
            row["sequential_depth"] = res.depth
            row["sequential_nodes"] = len(res.trace)
        if "static" in modes:
            res_s = solve_static(n)
            if verify:
                cross_check_static(res_s)
            row["static_depth"] = res_s.depth
        rows.append(row)
        LOGGER.debug("[scan] n=%d -> %s", n, row)
    LOGGER.info("[scan] n=%d..%d modes=%s: %d rows", n_min, n_max, ",".join(modes), len(rows))
    return rows


def write_scan_csv(rows: List[Dict], out_csv_dir: str, run_tag: Optional[str] = None) -> str:
    ensure_dir(out_csv_dir)
    if run_tag is None:
        lo = rows[0]["n"] if rows else 0
        hi = rows[-1]["n"] if rows else 0
        run_tag = make_run_tag(lo, hi, add_timestamp=False)
    else:
        run_tag = safe_tag(run_tag)
    path = os.path.join(out_csv_dir, f"{run_tag}.csv")
    return write_csv(path, rows, fieldnames=SCAN_FIELDS)
