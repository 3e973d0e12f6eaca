# -*- coding: utf-8 -*-
"""
weighing/logging_setup.py
基础日志配置：在 CLI 入口处调用 setup_logging(level="INFO")
"""

import logging, sys
from typing import Optional

from . import config

def setup_logging(level: Optional[str] = None):
    lvl = getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stdout
    )
    logging.getLogger().setLevel(lvl)

def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "weighing")
