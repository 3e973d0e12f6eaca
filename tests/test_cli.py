import os

import matplotlib

matplotlib.use("Agg")

import pytest

from scripts import coin_cli


def test_seq_prints_strategy_and_summary(capsys):
    assert coin_cli.main(["seq", "-n", "12"]) == 0
    out = capsys.readouterr().out
    assert "Weigh strategy for 12 coins:" in out
    assert "    ( 1  2  3  4 |  5  6  7  8) [8, 9, 8]" in out
    assert "Required 3 weighings." in out


def test_static_quiet_prints_only_summary(capsys):
    assert coin_cli.main(["static", "-n", "5", "-q"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("Required 3 weighings.")
    assert "(" not in out


def test_static_code_table_figure(tmp_path, capsys):
    assert coin_cli.main(["static", "-n", "12", "--fig-dir", str(tmp_path), "--no-verify"]) == 0
    assert (tmp_path / "codes_n12.png").exists()
    assert "Required 3 weighings." in capsys.readouterr().out


@pytest.mark.parametrize("cmd", ["seq", "static"])
def test_too_few_coins_exit_code(cmd):
    with pytest.raises(SystemExit) as exc:
        coin_cli.main([cmd, "-n", "2"])
    assert exc.value.code == 2


def test_scan_then_plot(tmp_path, capsys):
    out_csv = tmp_path / "csv"
    assert coin_cli.main(["scan", "--n-min", "3", "--n-max", "6", "--out-csv", str(out_csv),
                          "--run-tag", "unit", "--verify"]) == 0
    csv_path = out_csv / "unit.csv"
    assert csv_path.exists()
    assert f"scan CSV: {csv_path}" in capsys.readouterr().out

    figs = tmp_path / "figs"
    assert coin_cli.main(["plot", str(out_csv / "*.csv"), "--out-dir", str(figs)]) == 0
    assert os.listdir(figs) == ["depth_scan.png"]


def test_scan_bad_range_exit_code(tmp_path):
    with pytest.raises(SystemExit) as exc:
        coin_cli.main(["scan", "--n-min", "9", "--n-max", "4", "--out-csv", str(tmp_path)])
    assert exc.value.code == 2


def test_verbosity_flag_anywhere():
    argv = ["seq", "-v", "2", "-n", "4"]
    assert coin_cli._preparse_global_flags(argv) == 2
    assert argv == ["seq", "-n", "4"]
    argv = ["--verbosity=0", "static"]
    assert coin_cli._preparse_global_flags(argv) == 0
    assert argv == ["static"]
    assert coin_cli._preparse_global_flags([]) == 1


def test_log_level_mapping():
    assert coin_cli._log_level(0) == "WARNING"
    assert coin_cli._log_level(1) == "INFO"
    assert coin_cli._log_level(2) == "DEBUG"
    assert coin_cli._log_level(2, quiet=True) == "WARNING"
