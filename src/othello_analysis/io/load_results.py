from __future__ import annotations

import re
from pathlib import Path

import pandas as pd

from othello.scripts.league_core import CSV_COLUMNS

NUMERIC_COLS = tuple(c for c in CSV_COLUMNS if c != "name")
TIERS = ("Easy", "Medium", "Hard", "Other")

_TIER_PREFIX = re.compile(r"^(Easy|Medium|Hard)\b")


def agent_tier(name: str) -> str:
    """'Hard minimax d2' -> 'Hard'. League entrants are named after the difficulty they play."""
    m = _TIER_PREFIX.match(name)
    return m.group(1) if m else "Other"


def load_results(csv_path: Path | str) -> pd.DataFrame:
    """
    One row per league entrant, numeric columns coerced, plus two derived
    columns: `tier` (from the entrant name) and `nodes_per_move`.
    """
    path = Path(csv_path)
    if not path.is_file():
        raise FileNotFoundError(f"No results CSV at {path}")

    df = pd.read_csv(path, skipinitialspace=True).rename(columns=str.strip)
    if "name" not in df.columns:
        raise ValueError(f"{path.name} has no 'name' column (found {list(df.columns)})")

    for col in NUMERIC_COLS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    df["name"] = df["name"].fillna("").astype(str).str.strip()
    df = df.loc[df["name"] != ""].reset_index(drop=True)

    df["tier"] = df["name"].map(agent_tier)
    if {"nodes", "moves"} <= set(df.columns):
        df["nodes_per_move"] = df["nodes"] / df["moves"].where(df["moves"] > 0)
    return df


def latest_results(results_dir: Path | str, pattern: str = "league_results_*.csv") -> Path:
    folder = Path(results_dir)
    # league file names end in a sortable timestamp
    candidates = sorted(folder.glob(pattern)) if folder.is_dir() else []
    if not candidates:
        raise FileNotFoundError(f"No {pattern} under {folder}")
    return candidates[-1]
