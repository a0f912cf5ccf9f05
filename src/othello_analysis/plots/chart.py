from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> List[Path]:
    written: List[Path] = []
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]

    for c in num_cols:
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=20)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("agents")
        out = _finish(fig, outdir, f"hist_{c}.png", show=show)
        if out is not None:
            written.append(out)
    return written


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool) -> Path | None:
    if x not in df.columns or y not in df.columns:
        return None
    if not (pd.api.types.is_numeric_dtype(df[x]) and pd.api.types.is_numeric_dtype(df[y])):
        return None

    fig = plt.figure()
    plt.scatter(df[x], df[y], alpha=0.7)
    if "name" in df.columns:
        for _, row in df.iterrows():
            plt.annotate(str(row["name"]), (row[x], row[y]), fontsize=7, alpha=0.8)
    plt.title(f"{y} vs {x}")
    plt.xlabel(x)
    plt.ylabel(y)
    return _finish(fig, outdir, f"scatter_{y}_vs_{x}.png", show=show)


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Path | None:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig = plt.figure(figsize=(10, 5))
    plt.bar(top["name"].astype(str), top[metric].astype(float))
    plt.title(f"Top {min(top_n, len(top))}: {metric}")
    plt.xlabel("agent")
    plt.ylabel(metric)
    plt.xticks(rotation=45, ha="right")
    return _finish(fig, outdir, f"top_{top_n}_{metric}.png", show=show)


def plot_margin_by_agent(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Average final disc margin per agent; bars below zero lose on discs."""
    if "name" not in df.columns or "avg_margin" not in df.columns:
        return None

    ranked = df[["name", "avg_margin"]].dropna().sort_values("avg_margin")
    colors = ["tab:green" if v >= 0 else "tab:red" for v in ranked["avg_margin"]]

    fig = plt.figure(figsize=(9, 5))
    plt.barh(ranked["name"].astype(str), ranked["avg_margin"].astype(float), color=colors)
    plt.axvline(0, color="black", linewidth=0.8)
    plt.title("Average disc margin per game")
    plt.xlabel("discs (own - opponent)")
    return _finish(fig, outdir, "margin_by_agent.png", show=show)


def plot_tier_ppg(tiers: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Mean points per game of each difficulty tier, from tier_summary()."""
    if tiers.empty or "ppg" not in tiers.columns:
        return None

    fig = plt.figure(figsize=(6, 4))
    plt.bar(tiers.index.astype(str), tiers["ppg"].astype(float), color="tab:blue")
    for x, (n, v) in enumerate(zip(tiers["agents"], tiers["ppg"])):
        plt.annotate(f"n={n}", (x, v), ha="center", va="bottom", fontsize=8)
    plt.ylim(0, 1.05)
    plt.title("Points per game by difficulty")
    plt.ylabel("ppg")
    return _finish(fig, outdir, "tier_ppg.png", show=show)
