# file: src/dbnomics_bib/ids.py
"""
Parse DBnomics ids of the form PROVIDER/DATASET[/SERIES].
"""

from __future__ import annotations

from .models import CitationRequest


def parse_series_id(series_id: str) -> CitationRequest:
    """
    "ECB/MIR/M.EE.B.A2C.A.R.A.2250.EUR.N" -> series request
    "IMF/BOP"                            -> dataset request
    """
    parts = [part.strip() for part in series_id.strip().strip("/").split("/")]
    if len(parts) not in (2, 3) or not all(parts):
        raise ValueError(
            f"Expected PROVIDER/DATASET or PROVIDER/DATASET/SERIES, got {series_id!r}"
        )
    provider, dataset = parts[0], parts[1]
    series = parts[2] if len(parts) == 3 else None
    return CitationRequest(provider=provider, dataset=dataset, series=series)
