# file: src/dbnomics_bib/coverage.py
"""
Time coverage per series for a DBnomics long table.

Answers the "which series actually has data, and from when" question before
plotting series that come from different providers:
- start_all / end_all: full period range returned
- start_data / end_data: range of non-missing values
- n_obs: number of non-missing values
"""

from __future__ import annotations

import pandas as pd

REQUIRED_COLUMNS = ("provider_code", "dataset_code", "series_code", "period", "value")

SUMMARY_COLUMNS = [
    "series_code",
    "provider",
    "dataset",
    "start_all",
    "end_all",
    "start_data",
    "end_data",
    "n_obs",
]


def summarize_coverage(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per series_code with period ranges and observation counts.

    Args:
        df: DBnomics table with columns provider_code, dataset_code,
            series_code, period, value

    Returns:
        DataFrame with SUMMARY_COLUMNS, sorted by series_code

    Raises:
        ValueError: Missing columns or unparseable periods
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    work = df.loc[:, list(REQUIRED_COLUMNS)].copy()
    work["period"] = pd.to_datetime(work["period"], errors="raise")

    summary = work.groupby("series_code", sort=True).agg(
        provider=("provider_code", "first"),
        dataset=("dataset_code", "first"),
        start_all=("period", "min"),
        end_all=("period", "max"),
    )

    observed = work[work["value"].notna()]
    with_data = observed.groupby("series_code").agg(
        start_data=("period", "min"),
        end_data=("period", "max"),
        n_obs=("value", "size"),
    )

    summary = summary.join(with_data, how="left")
    summary["n_obs"] = summary["n_obs"].fillna(0).astype(int)

    return summary.reset_index()[SUMMARY_COLUMNS]
