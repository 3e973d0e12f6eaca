# -*- coding: utf-8 -*-
"""
weighing/utils_io.py
扫描结果的 I/O：目录、通配展开、CSV 读写（数值列转 int）、run_tag。
"""

from __future__ import annotations
import csv
import datetime
import glob
import os
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

PathLike = Union[str, Path]


def ensure_dir(p: PathLike) -> Path:
    p = Path(p)
    p.mkdir(parents=True, exist_ok=True)
    return p


def expand_globs(patterns: Optional[Iterable[PathLike]]) -> List[str]:
    """通配展开；无匹配的条目原样保留（读取时再跳过），结果去重保序。"""
    hits: List[str] = []
    for pat in patterns or ():
        hits.extend(sorted(glob.glob(str(pat))) or [str(pat)])
    return list(dict.fromkeys(hits))


def to_int(x) -> Optional[int]:
    """CSV 单元格 -> int；空串 / None / 非数值返回 None。"""
    if x is None:
        return None
    if isinstance(x, int):
        return x
    s = str(x).strip()
    if not s:
        return None
    try:
        return int(float(s))
    except ValueError:
        return None


def read_rows(csv_paths: Iterable[PathLike], int_fields: Sequence[str] = ()) -> List[Dict]:
    """
    读取多个 CSV（支持通配）为 dict 行。
    int_fields 中的列转为 int（空值为 None）；每行附带来源 run_tag（文件名去扩展名）。
    """
    rows: List[Dict] = []
    for path in expand_globs(csv_paths):
        if not os.path.isfile(path):
            continue
        run = os.path.splitext(os.path.basename(path))[0]
        with open(path, "r", newline="", encoding="utf-8") as f:
            for row in csv.DictReader(f):
                for key in int_fields:
                    row[key] = to_int(row.get(key))
                row["run"] = run
                rows.append(row)
    return rows


def write_csv(path: PathLike, rows: Sequence[Dict], fieldnames: Sequence[str]) -> str:
    """按给定列顺序写出（多余键忽略）；rows 为空时只写表头。"""
    path = str(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(fieldnames), extrasaction="ignore")
        w.writeheader()
        w.writerows(rows)
    return path


def safe_tag(s: str) -> str:
    """run_tag 只保留字母、数字、'-'、'_'。"""
    s = re.sub(r"[^0-9A-Za-z_-]+", "_", s.strip())
    return s.strip("_") or "scan"


def make_run_tag(n_min: int, n_max: int, add_timestamp: bool = True, suffix: str = "") -> str:
    """
    scan_n{n_min}-{n_max}[_时间戳][_suffix]
    复用同一区间时用 add_timestamp=False，文件名固定、便于覆盖比较。
    """
    parts = [f"scan_n{n_min}-{n_max}"]
    if add_timestamp:
        parts.append(datetime.datetime.now().strftime("%Y-%m-%d_%H-%M"))
    if suffix:
        parts.append(safe_tag(suffix))
    return "_".join(parts)
