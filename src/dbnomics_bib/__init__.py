"""
DBnomics bibliography helper

Cite the data you fetch:
1. config - Endpoints and timeout from env / .env
2. client - One GET against the series or dataset metadata endpoint
3. builder - Metadata -> CitationRecord -> BibTeX / BibLaTeX
4. coverage - Period ranges and observation counts per series
"""

from .builder import CitationBuilder, build_citation, make_record
from .client import MetadataClient, create_session, parse_metadata
from .config import CitationConfig, load_config
from .coverage import summarize_coverage
from .errors import (
    CitationError,
    DependencyMissingError,
    MalformedResponseError,
    TransportError,
    UnexpectedStatusError,
)
from .formatters import to_biblatex, to_bibtex
from .ids import parse_series_id
from .models import CitationRecord, CitationRequest, SeriesOrDatasetMetadata

__all__ = [
    "CitationBuilder",
    "build_citation",
    "make_record",
    "MetadataClient",
    "create_session",
    "parse_metadata",
    "CitationConfig",
    "load_config",
    "summarize_coverage",
    "CitationError",
    "DependencyMissingError",
    "MalformedResponseError",
    "TransportError",
    "UnexpectedStatusError",
    "to_biblatex",
    "to_bibtex",
    "parse_series_id",
    "CitationRecord",
    "CitationRequest",
    "SeriesOrDatasetMetadata",
]
