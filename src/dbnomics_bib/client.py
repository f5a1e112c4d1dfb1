# file: src/dbnomics_bib/client.py
"""
Fetch series / dataset metadata from the DBnomics API.

One request per lookup:
- GET the series-level or dataset-level endpoint
- Require HTTP 200 exactly
- Pull title + updated_at out of the nested docs object
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import pandas as pd
import requests
from requests.adapters import HTTPAdapter

from .config import CitationConfig
from .errors import MalformedResponseError, TransportError, UnexpectedStatusError
from .models import CitationRequest, SeriesOrDatasetMetadata

logger = logging.getLogger(__name__)

USER_AGENT = "dbnomics-bib/0.1"


def create_session() -> requests.Session:
    """Create a session that never retries; callers own retry policy."""
    session = requests.Session()
    session.headers.update({"Accept": "application/json", "User-Agent": USER_AGENT})
    session.mount("https://", HTTPAdapter(max_retries=0))
    return session


def _extract_docs(payload: Any, level: str, *, request_url: str) -> dict:
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"DBnomics payload is not a JSON object. type={type(payload).__name__} url={request_url}"
        )

    container = payload.get(level)
    if not isinstance(container, dict):
        raise MalformedResponseError(f"DBnomics payload has no '{level}' object. url={request_url}")

    docs = container.get("docs")
    # Some endpoints wrap a single doc in a list
    if isinstance(docs, list) and len(docs) == 1:
        docs = docs[0]
    if not isinstance(docs, dict):
        raise MalformedResponseError(f"DBnomics payload has no '{level}.docs' object. url={request_url}")
    return docs


def parse_metadata(payload: Any, level: str, *, request_url: str = "") -> SeriesOrDatasetMetadata:
    """
    Turn a decoded DBnomics response into metadata.

    Args:
        payload: Decoded JSON body
        level: "series" or "dataset" (the top-level key holding docs)
        request_url: Used only in error messages

    Raises:
        MalformedResponseError: Missing docs, empty title, or unparseable updated_at
    """
    docs = _extract_docs(payload, level, request_url=request_url)

    title = docs.get("title")
    if not isinstance(title, str) or not title.strip():
        raise MalformedResponseError(f"DBnomics {level} docs missing 'title'. url={request_url}")

    raw_updated = docs.get("updated_at")
    if not isinstance(raw_updated, str) or not raw_updated.strip():
        raise MalformedResponseError(f"DBnomics {level} docs missing 'updated_at'. url={request_url}")

    try:
        updated = pd.to_datetime(raw_updated, errors="raise")
    except (ValueError, TypeError, OverflowError) as e:
        raise MalformedResponseError(
            f"DBnomics {level} 'updated_at' is not a date: {raw_updated!r}. url={request_url}"
        ) from e
    if pd.isna(updated):
        raise MalformedResponseError(f"DBnomics {level} 'updated_at' is empty. url={request_url}")

    return SeriesOrDatasetMetadata(title=title.strip(), updated_at=updated.date())


class MetadataClient:
    """
    Thin wrapper over a requests Session for the two metadata endpoints.

    The session is injected so tests (and callers with their own adapters)
    can supply one; by default a no-retry session is created.
    """

    def __init__(
        self,
        config: Optional[CitationConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or CitationConfig()
        self.session = session if session is not None else create_session()

    def endpoint_url(self, request: CitationRequest) -> str:
        if request.is_series:
            return self.config.series_endpoint(request.provider, request.dataset, request.series)
        return self.config.dataset_endpoint(request.provider, request.dataset)

    def fetch(self, request: CitationRequest) -> SeriesOrDatasetMetadata:
        url = self.endpoint_url(request)
        logger.info("[dbnomics] GET %s", url)

        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise TransportError(f"DBnomics request failed: {e}. url={url}") from e

        if response.status_code != 200:
            logger.warning("[dbnomics] %s -> HTTP %s", url, response.status_code)
            raise UnexpectedStatusError(response.status_code, url)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"DBnomics response is not valid JSON. url={url}") from e

        metadata = parse_metadata(payload, request.level, request_url=url)
        logger.info(
            "[dbnomics] %s %s: title=%r updated=%s",
            request.level,
            request.code,
            metadata.title,
            metadata.updated_at.isoformat(),
        )
        return metadata
