import importlib
import logging

import pytest

from weighing import config, logging_setup
from weighing.errors import InvalidCoinCount


@pytest.mark.parametrize(
    "raw, expected",
    [("seq", "sequential"), ("Dynamic", "sequential"), ("static", "static"),
     ("non_adaptive", "static"), (" fixed ", "static")],
)
def test_normalize_mode_aliases(raw, expected):
    assert config.normalize_mode(raw) == expected


def test_normalize_mode_rejects_unknown():
    with pytest.raises(ValueError):
        config.normalize_mode("greedy")


def test_normalize_modes_dedups_in_order():
    assert config.normalize_modes("static,seq,sequential") == ["static", "sequential"]
    assert config.normalize_modes(None) == ["sequential", "static"]


def test_validate_n_coins():
    assert config.validate_n_coins(12) == 12
    assert config.validate_n_coins("12") == 12
    for bad in (2, 0, -5, 12.5, None, "twelve"):
        with pytest.raises(InvalidCoinCount):
            config.validate_n_coins(bad)


def test_invalid_coin_count_is_a_value_error():
    with pytest.raises(ValueError):
        config.validate_n_coins(1)


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("COIN_N_COINS", "39")
    monkeypatch.setenv("COIN_VERIFY", "0")
    monkeypatch.setenv("COIN_RESULTS_ROOT", str(tmp_path))
    try:
        cfg = importlib.reload(config)
        assert cfg.DEFAULT_N_COINS == 39
        assert cfg.VERIFY_DEFAULT is False
        assert cfg.OUT_CSV_DEFAULT == tmp_path.resolve() / "out_csv"
    finally:
        monkeypatch.undo()
        importlib.reload(config)
    assert config.DEFAULT_N_COINS == 12


def test_setup_logging_sets_root_level():
    root = logging.getLogger()
    old = root.level
    try:
        logging_setup.setup_logging("debug")
        assert root.level == logging.DEBUG
        logging_setup.setup_logging("WARNING")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(old)
    assert logging_setup.get_logger().name == "weighing"
