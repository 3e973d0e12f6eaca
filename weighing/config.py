# -*- coding: utf-8 -*-
"""
weighing/config.py
全局轻量配置：默认硬币数、求解模式、日志级别、输出目录等。
"""

from __future__ import annotations
from pathlib import Path
import os

from typing import List, Optional

from .errors import InvalidCoinCount

# 默认硬币数（与经典 12 枚问题一致）
DEFAULT_N_COINS = int(os.getenv("COIN_N_COINS", "12"))

# 求解模式（sequential|static）
DEFAULT_MODE = os.getenv("COIN_MODE", "sequential")

# 日志级别（logging_setup.setup_logging 使用）
LOG_LEVEL = os.getenv("COIN_LOG_LEVEL", "INFO")

# 求解后是否对全部假设做交叉校验
VERIFY_DEFAULT = os.getenv("COIN_VERIFY", "1") != "0"

# 视觉风格（viz.apply_style 支持的枚举）
DEFAULT_STYLE = os.getenv("COIN_STYLE", "ieee")

# 结果根目录（各 CLI 可覆盖）
RESULTS_ROOT = Path(os.getenv("COIN_RESULTS_ROOT", "./results")).resolve()
OUT_CSV_DEFAULT = RESULTS_ROOT / "out_csv"
OUT_FIG_DEFAULT = RESULTS_ROOT / "figs"

# 扫描区间默认值
SCAN_N_MIN = int(os.getenv("COIN_SCAN_MIN", "3"))
SCAN_N_MAX = int(os.getenv("COIN_SCAN_MAX", "40"))

# 少于 3 枚硬币无法用两臂天平区分方向
MIN_COINS = 3

# -------------------------
# 参数规范化 / 校验
# -------------------------

_MODE_CHOICES = {"sequential", "static"}
_MODE_ALIASES = {
    "seq": "sequential",
    "dynamic": "sequential",
    "adaptive": "sequential",
    "tree": "sequential",
    "s": "static",
    "fixed": "static",
    "non-adaptive": "static",
    "nonadaptive": "static",
}


def normalize_mode(mode: Optional[str]) -> str:
    m = (mode or DEFAULT_MODE).strip().lower().replace("_", "-")
    m = _MODE_ALIASES.get(m, m)
    if m not in _MODE_CHOICES:
        raise ValueError(f"mode must be one of {sorted(_MODE_CHOICES)}, got '{mode}'")
    return m


def normalize_modes(modes: Optional[str]) -> List[str]:
    """逗号分隔的模式列表 -> 去重后的规范名（保持顺序）。"""
    raw = [s for s in str(modes or "sequential,static").split(",") if s.strip()]
    out: List[str] = []
    for s in raw:
        m = normalize_mode(s)
        if m not in out:
            out.append(m)
    return out


def validate_n_coins(n_coins) -> int:
    try:
        n = int(n_coins)
    except (TypeError, ValueError) as exc:
        raise InvalidCoinCount(f"number of coins must be an integer, got {n_coins!r}") from exc
    if n != n_coins and not isinstance(n_coins, str):
        raise InvalidCoinCount(f"number of coins must be an integer, got {n_coins!r}")
    if n < MIN_COINS:
        raise InvalidCoinCount(f"there must be at least {MIN_COINS} coins, got {n}")
    return n


__all__ = [
    "DEFAULT_N_COINS",
    "DEFAULT_MODE",
    "LOG_LEVEL",
    "VERIFY_DEFAULT",
    "DEFAULT_STYLE",
    "RESULTS_ROOT",
    "OUT_CSV_DEFAULT",
    "OUT_FIG_DEFAULT",
    "SCAN_N_MIN",
    "SCAN_N_MAX",
    "MIN_COINS",
    "normalize_mode",
    "normalize_modes",
    "validate_n_coins",
]
