# file: src/dbnomics_bib/builder.py
"""
Build bibliography entries for DBnomics series and datasets.

Usage:
    from src.dbnomics_bib import build_citation

    # Series-level entry (BibLaTeX by default)
    print(build_citation("ECB", "MIR", "M.EE.B.A2C.A.R.A.2250.EUR.N"))

    # Dataset-level entry as BibTeX
    print(build_citation("IMF", "BOP", format="bibtex"))

    # Raw record, e.g. to render yourself later
    record = build_citation("IMF", "BOP", format="record")
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Dict, Mapping, Optional, Union

import requests

from .client import MetadataClient
from .config import CitationConfig
from .errors import DependencyMissingError
from .formatters import DEFAULT_FORMATTERS, Formatter
from .models import CitationRecord, CitationRequest, SeriesOrDatasetMetadata

logger = logging.getLogger(__name__)

RECORD_FORMAT = "record"
KNOWN_FORMATS = ("biblatex", "bibtex", RECORD_FORMAT)
DEFAULT_FORMAT = "biblatex"

CitationOutput = Union[str, CitationRecord]


def make_record(
    request: CitationRequest,
    metadata: SeriesOrDatasetMetadata,
    today: date,
    config: Optional[CitationConfig] = None,
) -> CitationRecord:
    """
    Assemble a CitationRecord. Pure: same inputs, same record.

    year/urldate come from ``today`` (the access date), not from the data.
    """
    config = config or CitationConfig()
    urldate = today.strftime("%Y-%m-%d")
    last_update = metadata.updated_at.strftime("%Y-%m-%d")

    return CitationRecord(
        key=f"{request.dataset}-{urldate}".replace("_", "-"),
        title=f"{metadata.title} ({request.code})",
        url=config.page_url(request.provider, request.dataset, request.series),
        year=today.strftime("%Y"),
        author=request.provider,
        urldate=urldate,
        note=f"Accessed {urldate}, {request.level} last updated {last_update}.",
        language=config.language,
        type=config.entry_type,
    )


class CitationBuilder:
    """
    request -> fetch -> record -> render, one network call per build.

    Transport (MetadataClient) and text formatters are handed in at
    construction; a format whose formatter was not supplied fails before
    any request is sent.
    """

    def __init__(
        self,
        client: Optional[MetadataClient] = None,
        formatters: Optional[Mapping[str, Formatter]] = None,
        today: Callable[[], date] = date.today,
    ):
        self.client = client or MetadataClient()
        self.formatters: Dict[str, Formatter] = dict(
            DEFAULT_FORMATTERS if formatters is None else formatters
        )
        self.today = today

    @property
    def config(self) -> CitationConfig:
        return self.client.config

    def supported_formats(self) -> tuple[str, ...]:
        return tuple(name for name in KNOWN_FORMATS if name == RECORD_FORMAT or name in self.formatters)

    def _formatter_for(self, format: str) -> Optional[Formatter]:
        if format not in KNOWN_FORMATS:
            raise ValueError(f"Unknown format {format!r}. Expected one of {KNOWN_FORMATS}")
        if format == RECORD_FORMAT:
            return None
        formatter = self.formatters.get(format)
        if formatter is None:
            raise DependencyMissingError(f"No formatter available for {format!r}")
        return formatter

    def build_record(self, request: CitationRequest) -> CitationRecord:
        metadata = self.client.fetch(request)
        return make_record(request, metadata, self.today(), self.config)

    def render(self, record: CitationRecord, format: str = DEFAULT_FORMAT) -> CitationOutput:
        formatter = self._formatter_for(format)
        if formatter is None:
            return record
        return formatter(record)

    def build(self, request: CitationRequest, format: str = DEFAULT_FORMAT) -> CitationOutput:
        formatter = self._formatter_for(format)
        record = self.build_record(request)
        logger.info("[cite] %s -> %s (%s)", request.code, record.key, format)
        return record if formatter is None else formatter(record)


def build_citation(
    provider: str,
    dataset: str,
    series: Optional[str] = None,
    format: str = DEFAULT_FORMAT,
    *,
    config: Optional[CitationConfig] = None,
    session: Optional[requests.Session] = None,
) -> CitationOutput:
    """
    Generate a citation for a DBnomics series (``series`` given) or dataset.

    Args:
        provider: DBnomics provider code (e.g. "ECB")
        dataset: Dataset code (e.g. "MIR")
        series: Series code (e.g. "M.EE.B.A2C.A.R.A.2250.EUR.N"); None cites the dataset
        format: "biblatex" (default), "bibtex", or "record" for the raw CitationRecord
        config: Endpoint / timeout settings (default: public DBnomics, no timeout)
        session: requests Session to reuse (default: a fresh no-retry session)

    Returns:
        Entry text, or a CitationRecord for format="record"
    """
    request = CitationRequest(provider=provider, dataset=dataset, series=series)
    builder = CitationBuilder(client=MetadataClient(config=config, session=session))
    return builder.build(request, format=format)
