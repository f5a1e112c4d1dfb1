# file: src/dbnomics_bib/models.py
"""
Data structures passed between the client, the builder and the formatters.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Dict, Optional

# Field order of a rendered misc entry
ENTRY_FIELDS = ("title", "url", "language", "year", "author", "urldate", "type", "note")


@dataclass(frozen=True)
class CitationRequest:
    """Identifies one DBnomics dataset, or one series inside it."""
    provider: str
    dataset: str
    series: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("provider", "dataset"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")
        if self.series is not None and (not isinstance(self.series, str) or not self.series.strip()):
            raise ValueError(f"series must be a non-empty string or None, got {self.series!r}")

    @property
    def is_series(self) -> bool:
        return self.series is not None

    @property
    def level(self) -> str:
        return "series" if self.is_series else "dataset"

    @property
    def code(self) -> str:
        """Code shown in parentheses after the title."""
        return self.series if self.series is not None else self.dataset


@dataclass(frozen=True)
class SeriesOrDatasetMetadata:
    title: str
    updated_at: date


@dataclass(frozen=True)
class CitationRecord:
    key: str
    title: str
    url: str
    year: str
    author: str
    urldate: str
    note: str
    language: str = "english"
    type: str = "Dataset"

    def fields(self) -> Dict[str, str]:
        """Entry fields in output order (the key is not a field)."""
        values = asdict(self)
        return {name: values[name] for name in ENTRY_FIELDS}
