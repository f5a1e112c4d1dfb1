"""
Coverage summary over a DBnomics long table, and .bib file output
"""

import numpy as np
import pandas as pd
import pytest

from src.dbnomics_bib.bibfile import append_bib_entries
from src.dbnomics_bib.coverage import SUMMARY_COLUMNS, summarize_coverage


@pytest.fixture
def unemployment_df():
    """Two series from different providers, AMECO with leading gaps"""
    ameco = pd.DataFrame({
        "provider_code": "AMECO",
        "dataset_code": "ZUTN",
        "series_code": "EA19.1.0.0.0.ZUTN",
        "period": pd.to_datetime(["2000-01-01", "2001-01-01", "2002-01-01", "2003-01-01"]),
        "value": [np.nan, 8.9, 8.5, np.nan],
    })
    eurostat = pd.DataFrame({
        "provider_code": "Eurostat",
        "dataset_code": "une_rt_q",
        "series_code": "Q.SA.Y15-24.PC_ACT.T.EA19",
        "period": pd.to_datetime(["2001-01-01", "2001-04-01", "2001-07-01"]),
        "value": [17.1, 17.0, 16.8],
    })
    return pd.concat([ameco, eurostat], ignore_index=True)


class TestSummarizeCoverage:
    def test_one_row_per_series(self, unemployment_df):
        summary = summarize_coverage(unemployment_df)

        assert list(summary.columns) == SUMMARY_COLUMNS
        assert len(summary) == 2
        assert list(summary["series_code"]) == sorted(unemployment_df["series_code"].unique())

    def test_ranges_and_counts(self, unemployment_df):
        summary = summarize_coverage(unemployment_df).set_index("series_code")
        ameco = summary.loc["EA19.1.0.0.0.ZUTN"]

        assert ameco["provider"] == "AMECO"
        assert ameco["dataset"] == "ZUTN"
        assert ameco["start_all"] == pd.Timestamp("2000-01-01")
        assert ameco["end_all"] == pd.Timestamp("2003-01-01")
        assert ameco["start_data"] == pd.Timestamp("2001-01-01")
        assert ameco["end_data"] == pd.Timestamp("2002-01-01")
        assert ameco["n_obs"] == 2

        eurostat = summary.loc["Q.SA.Y15-24.PC_ACT.T.EA19"]
        assert eurostat["n_obs"] == 3

    def test_series_without_values(self, unemployment_df):
        df = unemployment_df.copy()
        df.loc[df["provider_code"] == "Eurostat", "value"] = np.nan

        summary = summarize_coverage(df).set_index("series_code")
        eurostat = summary.loc["Q.SA.Y15-24.PC_ACT.T.EA19"]

        assert eurostat["n_obs"] == 0
        assert pd.isna(eurostat["start_data"])

    @pytest.mark.fail_loud
    def test_missing_columns_raise(self, unemployment_df):
        with pytest.raises(ValueError, match="series_code"):
            summarize_coverage(unemployment_df.drop(columns=["series_code"]))

    @pytest.mark.fail_loud
    def test_invalid_period_raises(self, unemployment_df):
        df = unemployment_df.astype({"period": "object"})
        df.loc[0, "period"] = "INVALID"

        with pytest.raises((ValueError, TypeError)):
            summarize_coverage(df)


class TestAppendBibEntries:
    def test_creates_file_and_parents(self, tmp_path):
        target = tmp_path / "refs" / "data.bib"

        result = append_bib_entries(["@misc{A-1,\n}"], target)

        assert result == target
        assert target.read_text(encoding="utf-8") == "@misc{A-1,\n}\n"

    def test_appends_with_blank_line(self, tmp_path):
        target = tmp_path / "data.bib"
        append_bib_entries(["@misc{A-1,\n}"], target)
        append_bib_entries(["@misc{B-2,\n}", "@misc{C-3,\n}"], target)

        assert target.read_text(encoding="utf-8") == (
            "@misc{A-1,\n}\n\n@misc{B-2,\n}\n\n@misc{C-3,\n}\n"
        )
        assert not (tmp_path / "data.bib.tmp").exists()

    def test_empty_entries_raise(self, tmp_path):
        with pytest.raises(ValueError):
            append_bib_entries(["  "], tmp_path / "data.bib")
