from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from ..io.load_results import latest_results, load_results
from ..metrics.summarize import (
    SummaryConfig,
    describe_metrics,
    filter_rows,
    leaderboard,
    metric_correlations,
    tier_summary,
)
from ..plots.chart import plot_histograms, plot_margin_by_agent, plot_scatter, plot_tier_ppg, plot_top_bar

HISTOGRAM_COLS = ["ppg", "strength_wilson_lcb", "avg_margin", "avg_ms_per_move", "nodes_per_move"]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="othello-analysis analyze", description="Tables and figures from an Othello league CSV.")
    src = ap.add_argument_group("input")
    src.add_argument("--csv", type=Path, default=None, help="Results CSV. Defaults to the newest one in --results-dir.")
    src.add_argument("--results-dir", type=Path, default=Path("data/results"))
    src.add_argument("--pattern", default="league_results_*.csv")

    rank = ap.add_argument_group("ranking")
    rank.add_argument("--metric", default="strength_wilson_lcb", help="Leaderboard column, e.g. ppg or avg_margin")
    rank.add_argument("--top", type=int, default=20)
    rank.add_argument("--min-games", type=int, default=0)
    rank.add_argument("--max-ms", type=float, default=None, help="Drop entrants slower than this per move")

    out = ap.add_argument_group("figures")
    out.add_argument("--outdir", type=Path, default=Path("data/figures"))
    out.add_argument("--show", action="store_true", help="Open the figures instead of saving them")
    out.add_argument("--no-plots", action="store_true")
    return ap


def _section(title: str, table: pd.DataFrame, **to_string) -> None:
    if table.empty:
        return
    print(f"\n=== {title} ===")
    print(table.to_string(**to_string))


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = args.csv or latest_results(args.results_dir, pattern=args.pattern)
    df = load_results(csv_path)
    print(f"\nLoaded {csv_path} ({len(df)} entrants)")

    cfg = SummaryConfig(
        metric=args.metric,  # type: ignore[arg-type]
        top_n=args.top,
        min_games=args.min_games,
        max_avg_ms_per_move=args.max_ms,
    )
    tiers = tier_summary(df)

    _section(f"Leaderboard by {cfg.metric}", leaderboard(df, cfg), float_format="{:.3f}".format)
    _section("By difficulty", tiers, float_format="{:.3f}".format)
    _section("Metric summary", describe_metrics(df))
    _section("Strongest correlations", metric_correlations(df), index=False)

    if args.no_plots:
        return 0

    shown = filter_rows(df, cfg)
    figures = plot_histograms(shown, args.outdir, HISTOGRAM_COLS, show=args.show)
    for path in (
        plot_scatter(shown, args.outdir, x="avg_ms_per_move", y=cfg.metric, show=args.show),
        plot_top_bar(shown, args.outdir, metric=cfg.metric, top_n=cfg.top_n, show=args.show),
        plot_margin_by_agent(shown, args.outdir, show=args.show),
        plot_tier_ppg(tiers, args.outdir, show=args.show),
    ):
        if path is not None:
            figures.append(path)

    if not args.show:
        print(f"\nSaved {len(figures)} figures to {args.outdir.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
