# -*- coding: utf-8 -*-
from __future__ import annotations
import os
from typing import Dict, Iterable, List, Optional

import numpy as np
import matplotlib as mpl
import matplotlib.pyplot as plt
from matplotlib import colors as mcolors, ticker as mticker

from .static import StaticResult
from .utils_io import ensure_dir, read_rows

# ---------------- 样式 ----------------
_STYLES = {
    "default": {"figure.dpi":120,"savefig.dpi":170,"font.size":10,"axes.titlesize":11,"axes.labelsize":10,
                "legend.fontsize":9,"xtick.labelsize":9,"ytick.labelsize":9,"axes.spines.top":False,
                "axes.spines.right":False,"axes.grid":True,"grid.alpha":0.25,"lines.linewidth":1.3,
                "lines.markersize":4.5,"legend.frameon":False},
    "ieee":    {"figure.dpi":120,"savefig.dpi":200,"font.size":9,"axes.titlesize":10,"axes.labelsize":9,
                "legend.fontsize":8,"xtick.labelsize":8,"ytick.labelsize":8,"axes.spines.top":False,
                "axes.spines.right":False,"axes.grid":True,"grid.alpha":0.25,"lines.linewidth":1.2,
                "lines.markersize":4.0,"legend.frameon":False},
}
def apply_style(style:str="default"): mpl.rcParams.update(_STYLES.get(style,_STYLES["default"]))

# ---------------- 工具 ----------------
def _unique_path(path:str)->str:
    if not os.path.exists(path): return path
    b,e = os.path.splitext(path); i=1
    while True:
        cand=f"{b}_{i}{e}"
        if not os.path.exists(cand): return cand
        i+=1

def _series(rows: List[dict], field: str) -> Dict[int, int]:
    """{n: value}；空值跳过，多个 CSV 含同一 n 时取最大深度。"""
    out: Dict[int, int] = {}
    for r in rows:
        n, v = r["n"], r[field]
        if n is not None and v is not None:
            out[n] = max(out.get(n, v), v)
    return out

# ---------------- 深度扫描 ----------------
_SCAN_INT_FIELDS = ("n", "lower_bound", "sequential_depth", "static_depth")

def plot_depth_scan(csv_paths: Iterable[str], out_dir: str = "./out_fig", style: str = "default") -> List[str]:
    """
    scan CSV -> 阶梯图：sequential / static 深度与信息论下界随 n 的变化。
    返回写出的 PNG 路径列表（无数据时为空）。
    """
    apply_style(style)
    rows = read_rows(csv_paths, int_fields=_SCAN_INT_FIELDS)
    if not rows:
        return []
    ensure_dir(out_dir)

    fig, ax = plt.subplots(figsize=(5.0, 3.2))
    labels = {
        "lower_bound": ("ceil(log3(2n+1))", dict(linestyle="--", color="0.5")),
        "sequential_depth": ("sequential", dict(marker="o")),
        "static_depth": ("static", dict(marker="x")),
    }
    drawn = 0
    for field, (label, kw) in labels.items():
        s = _series(rows, field)
        if not s:
            continue
        xs = np.array(sorted(s), dtype=int)
        ys = np.array([s[x] for x in xs], dtype=int)
        ax.step(xs, ys, where="post", label=label, **kw)
        drawn += 1
    if not drawn:
        plt.close(fig)
        return []
    ax.set_xlabel("coins n")
    ax.set_ylabel("weighings")
    ax.set_title("Worst-case weighings vs. number of coins")
    ax.yaxis.set_major_locator(mticker.MaxNLocator(integer=True))
    ax.legend()
    fig.tight_layout()
    path = _unique_path(os.path.join(out_dir, "depth_scan.png"))
    fig.savefig(path)
    plt.close(fig)
    return [path]

# ---------------- 静态编码表 ----------------
def plot_code_table(result: StaticResult, out_dir: str = "./out_fig", style: str = "default",
                    title: Optional[str] = None) -> str:
    """heavy-code 数字矩阵热图：行 = 称量轮次，列 = 硬币；0 不上秤，1 左盘，2 右盘。"""
    apply_style(style)
    ensure_dir(out_dir)
    table = result.digit_table()
    cmap = mcolors.ListedColormap(["#f0f0f0", "#d62728", "#1f77b4"])
    fig, ax = plt.subplots(figsize=(max(3.0, 0.3 * result.n_coins + 1.0), 0.5 * result.depth + 1.2))
    ax.imshow(table, cmap=cmap, vmin=0, vmax=2, aspect="auto")
    ax.set_xticks(np.arange(result.n_coins))
    ax.set_xticklabels([str(c) for c in sorted(result.codes)])
    ax.set_yticks(np.arange(result.depth))
    ax.set_yticklabels([f"#{i + 1}" for i in range(result.depth)])
    ax.grid(False)
    ax.set_xlabel("coin")
    ax.set_ylabel("weighing")
    ax.set_title(title or f"Static heavy codes, n={result.n_coins}")
    fig.tight_layout()
    path = _unique_path(os.path.join(out_dir, f"codes_n{result.n_coins}.png"))
    fig.savefig(path)
    plt.close(fig)
    return path
