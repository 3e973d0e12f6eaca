# -*- coding: utf-8 -*-
"""Unified CLI for coin-weighing strategies.
Commands: seq, static, scan, plot.
"""
from __future__ import annotations
import sys, argparse, logging, time
from pathlib import Path
from typing import List, Optional

# Ensure in-repo execution works without PYTHONPATH tweaks.
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from weighing import config as _config
from weighing import logging_setup
from weighing.errors import WeighingError

LOGGER = logging.getLogger("coin_cli")


# --- global flag pre-parser so --verbosity can appear anywhere ---
def _preparse_global_flags(argv: List[str]) -> int:
    """Extract --verbosity/-v from argv regardless of position; remove it from argv and return level."""
    v = None
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok.startswith("--verbosity="):
            try:
                v = int(tok.split("=", 1)[1])
            except ValueError:
                v = 1
            argv.pop(i)
            continue
        if tok in ("--verbosity", "-v"):
            argv.pop(i)
            if i < len(argv):
                try:
                    v = int(argv[i])
                    argv.pop(i)
                except ValueError:
                    # malformed value; keep the token, fall back to INFO
                    v = 1
            else:
                v = 1
            continue
        i += 1
    if v is None:
        v = 1
    return max(0, min(2, v))


def _log_level(verbosity: int, quiet: bool = False) -> str:
    if quiet or verbosity <= 0:
        return "WARNING"
    return "INFO" if verbosity == 1 else "DEBUG"


def _echo(text: str, quiet: bool) -> None:
    if not quiet:
        print(text)


# ---------------- commands ----------------
def cmd_seq(args) -> int:
    from weighing.check import cross_check_sequential
    from weighing.render import format_sequential, format_summary
    from weighing.sequential import solve_sequential

    _echo(f"Weigh strategy for {args.n} coins:\n", args.quiet)
    t0 = time.time()
    res = solve_sequential(args.n)
    if args.verify:
        cross_check_sequential(res)
    _echo(format_sequential(res), args.quiet)
    print("\n" + format_summary(res.depth, time.time() - t0))
    return res.depth


def cmd_static(args) -> int:
    from weighing.check import cross_check_static
    from weighing.render import format_static, format_summary
    from weighing.static import solve_static

    _echo(f"Static weigh strategy for {args.n} coins:\n", args.quiet)
    t0 = time.time()
    res = solve_static(args.n)
    if args.verify:
        cross_check_static(res)
    _echo(format_static(res), args.quiet)
    if args.fig_dir:
        from weighing.viz import plot_code_table
        path = plot_code_table(res, out_dir=args.fig_dir, style=args.style)
        LOGGER.info("[static] code table figure: %s", path)
    print("\n" + format_summary(res.depth, time.time() - t0))
    return res.depth


def cmd_scan(args) -> int:
    from weighing.scan import scan_depths, write_scan_csv

    modes = _config.normalize_modes(args.modes)
    logging.info(f"[scan] n={args.n_min}..{args.n_max}, modes={','.join(modes)}, verify={args.verify}")
    rows = scan_depths(args.n_min, args.n_max, modes=modes, verify=args.verify)
    path = write_scan_csv(rows, str(args.out_csv), run_tag=args.run_tag)
    print("  scan CSV:", path)
    return len(rows)


def cmd_plot(args) -> int:
    from weighing.utils_io import expand_globs
    from weighing.viz import plot_depth_scan

    csvs = expand_globs(args.csv)
    paths = plot_depth_scan(csvs, out_dir=str(args.out_dir), style=args.style)
    if not paths:
        LOGGER.warning("[plot] no rows to plot in %s", csvs)
    for p in paths:
        print("  figure:", p)
    return len(paths)


# ---------------- parser ----------------
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Shortest weighings to find one fake coin (heavy or light) among n coins")
    sub = ap.add_subparsers(dest="cmd", required=True)

    def _solve_opts(p):
        p.add_argument("-n", "--n", type=int, default=_config.DEFAULT_N_COINS, help="number of coins (>= 3)")
        p.add_argument("-q", "--quiet", action="store_true", help="print only the number of weighings")
        p.add_argument("--no-verify", dest="verify", action="store_false",
                       default=_config.VERIFY_DEFAULT, help="skip cross-checking every hypothesis")

    p = sub.add_parser("seq", help="sequential (decision tree) strategy")
    _solve_opts(p)
    p.set_defaults(func=cmd_seq)

    p = sub.add_parser("static", help="static strategy from base-3 heavy codes")
    _solve_opts(p)
    p.add_argument("--fig-dir", type=str, default=None, help="also draw the code table into this directory")
    p.add_argument("--style", type=str, default=_config.DEFAULT_STYLE)
    p.set_defaults(func=cmd_static)

    p = sub.add_parser("scan", help="depth table for a range of coin counts")
    p.add_argument("--n-min", type=int, default=_config.SCAN_N_MIN)
    p.add_argument("--n-max", type=int, default=_config.SCAN_N_MAX)
    p.add_argument("--modes", type=str, default="sequential,static", help="comma list: sequential,static")
    p.add_argument("--out-csv", type=str, default=str(_config.OUT_CSV_DEFAULT))
    p.add_argument("--run-tag", type=str, default=None)
    p.add_argument("--verify", action="store_true", help="cross-check every solved strategy")
    p.set_defaults(func=cmd_scan)

    p = sub.add_parser("plot", help="plot depth vs. coins from scan CSVs")
    p.add_argument("csv", nargs="+", help="scan CSV paths or globs")
    p.add_argument("--out-dir", type=str, default=str(_config.OUT_FIG_DEFAULT))
    p.add_argument("--style", type=str, default=_config.DEFAULT_STYLE)
    p.set_defaults(func=cmd_plot)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    verbosity = _preparse_global_flags(argv)
    args = build_parser().parse_args(argv)
    logging_setup.setup_logging(_log_level(verbosity, getattr(args, "quiet", False)))
    LOGGER.debug("Command line: %s", " ".join(argv))
    try:
        args.func(args)
    except WeighingError as exc:
        LOGGER.error("[%s] %s", args.cmd, exc)
        sys.exit(exc.exit_code)
    except ValueError as exc:
        LOGGER.error("[%s] invalid argument: %s", args.cmd, exc)
        sys.exit(2)
    return 0


if __name__ == "__main__":
    main()
