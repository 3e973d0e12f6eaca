import os

import matplotlib

matplotlib.use("Agg")

import pytest

from weighing.scan import SCAN_FIELDS, scan_depths, write_scan_csv
from weighing.static import solve_static
from weighing.utils_io import expand_globs, make_run_tag, read_rows, safe_tag, to_int
from weighing.viz import plot_code_table, plot_depth_scan


def test_scan_rows():
    rows = scan_depths(3, 13, verify=True)
    assert [r["n"] for r in rows] == list(range(3, 14))
    by_n = {r["n"]: r for r in rows}
    assert by_n[12]["saturated"] == 1
    assert by_n[12]["sequential_depth"] == 3 and by_n[12]["static_depth"] == 3
    assert by_n[12]["sequential_nodes"] == 13
    assert by_n[13]["sequential_depth"] == 4 and by_n[13]["lower_bound"] == 3
    assert by_n[3]["sequential_depth"] == by_n[3]["min_weighings"] == 2


def test_scan_single_mode_leaves_other_columns_empty():
    rows = scan_depths(5, 6, modes=["static"])
    assert all(r["sequential_depth"] == "" for r in rows)
    assert [r["static_depth"] for r in rows] == [3, 3]


def test_scan_rejects_bad_ranges():
    with pytest.raises(ValueError):
        scan_depths(10, 5)
    with pytest.raises(ValueError):
        scan_depths(3, 5, modes=["bogus"])


def test_scan_csv_and_plots(tmp_path):
    rows = scan_depths(3, 15)
    csv_path = write_scan_csv(rows, str(tmp_path / "csv"))
    assert os.path.basename(csv_path) == make_run_tag(3, 15, add_timestamp=False) + ".csv"
    loaded = read_rows([csv_path], int_fields=("n", "static_depth"))
    assert len(loaded) == 13
    assert [k for k in loaded[0] if k != "run"] == SCAN_FIELDS
    assert loaded[0]["run"] == "scan_n3-15"
    assert loaded[-1]["n"] == 15 and loaded[-1]["static_depth"] == 4

    figs = plot_depth_scan([csv_path], out_dir=str(tmp_path / "figs"), style="ieee")
    assert len(figs) == 1 and os.path.exists(figs[0])
    # second run must not overwrite the first figure
    again = plot_depth_scan([csv_path], out_dir=str(tmp_path / "figs"))
    assert again[0] != figs[0]


def test_plot_depth_scan_without_rows(tmp_path):
    assert plot_depth_scan([], out_dir=str(tmp_path)) == []


def test_plot_code_table(tmp_path):
    path = plot_code_table(solve_static(12), out_dir=str(tmp_path))
    assert os.path.basename(path) == "codes_n12.png"
    assert os.path.getsize(path) > 0


def test_io_helpers(tmp_path):
    (tmp_path / "b.csv").write_text("n\n1\n")
    (tmp_path / "a.csv").write_text("n\n2\n")
    pattern = str(tmp_path / "*.csv")
    missing = str(tmp_path / "none.csv")
    assert expand_globs([pattern, pattern, missing]) == [
        str(tmp_path / "a.csv"), str(tmp_path / "b.csv"), missing,
    ]
    assert [r["n"] for r in read_rows([pattern, missing], int_fields=("n",))] == [2, 1]
    assert [to_int(x) for x in ("3", " 4.0 ", "", None, "x", 5)] == [3, 4, None, None, None, 5]
    assert safe_tag(" my run/1 ") == "my_run_1"
    assert make_run_tag(3, 9, add_timestamp=False, suffix="seq only") == "scan_n3-9_seq_only"
