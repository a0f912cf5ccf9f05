from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd

from ..io.load_results import TIERS

MetricKey = Literal[
    "strength_wilson_lcb",
    "ppg",
    "avg_margin",
    "avg_ms_per_move",
    "nodes_per_move",
    "wins",
    "points",
]

LOWER_IS_BETTER = frozenset({"avg_ms_per_move", "nodes_per_move"})

LEADERBOARD_COLS = [
    "name", "tier",
    "games", "wins", "draws", "losses",
    "ppg", "strength_wilson_lcb", "avg_margin",
    "avg_ms_per_move", "nodes_per_move", "avg_depth",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0
    max_avg_ms_per_move: float | None = None


def _need(df: pd.DataFrame, *cols: str) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Results have no column(s) {missing}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    keep = pd.Series(True, index=df.index)
    if cfg.min_games > 0:
        _need(df, "games")
        keep &= df["games"].fillna(0) >= cfg.min_games
    if cfg.max_avg_ms_per_move is not None:
        _need(df, "avg_ms_per_move")
        keep &= df["avg_ms_per_move"].fillna(float("inf")) <= cfg.max_avg_ms_per_move
    return df.loc[keep].copy()


def leaderboard(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """Filtered entrants best-first on `cfg.metric`, indexed by rank from 1."""
    _need(df, "name", cfg.metric)
    ranked = filter_rows(df, cfg).sort_values(
        cfg.metric, ascending=cfg.metric in LOWER_IS_BETTER, kind="stable"
    )
    out = ranked[[c for c in LEADERBOARD_COLS if c in ranked.columns]].head(cfg.top_n)
    out.index = pd.RangeIndex(1, len(out) + 1, name="rk")
    return out


def tier_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Easy vs Medium vs Hard: entrant count, games and mean performance per tier."""
    _need(df, "name", "tier")
    columns = {"agents": ("name", "count")}
    for col, how in (("games", "sum"), ("ppg", "mean"), ("avg_margin", "mean"), ("avg_ms_per_move", "mean")):
        if col in df.columns:
            columns[col] = (col, how)
    out = df.groupby("tier").agg(**columns)
    return out.reindex([t for t in TIERS if t in out.index])


def describe_metrics(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes("number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.25, 0.5, 0.75]).T


def metric_correlations(df: pd.DataFrame, top_k: int = 10) -> pd.DataFrame:
    """Strongest pairwise Pearson correlations, each unordered pair once."""
    num = df.select_dtypes("number")
    num = num.loc[:, num.nunique() > 1]
    if num.shape[1] < 2:
        return pd.DataFrame(columns=["a", "b", "corr"])

    corr = num.corr()
    cols = list(corr.columns)
    pairs = pd.DataFrame(
        [(a, b, corr.at[a, b]) for i, a in enumerate(cols) for b in cols[i + 1:]],
        columns=["a", "b", "corr"],
    ).dropna()
    strongest = pairs["corr"].abs().sort_values(ascending=False).index[:top_k]
    return pairs.loc[strongest].reset_index(drop=True)
