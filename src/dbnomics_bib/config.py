# file: src/dbnomics_bib/config.py
"""
Configuration for DBnomics citation lookups.

Defaults point at the public DBnomics API. Overrides live in env (prod) /
.env (local) so a mirror or a recorded fixture server can be swapped in.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CitationConfig:
    # Endpoints
    api_base_url: str = "https://api.db.nomics.world"
    site_base_url: str = "https://db.nomics.world"
    api_version: str = "v22"

    # Entry defaults
    language: str = "english"
    entry_type: str = "Dataset"

    # Transport (None = wait for the server, no client-side timeout)
    timeout: Optional[float] = None

    def series_endpoint(self, provider: str, dataset: str, series: str) -> str:
        return f"{self.api_base_url}/{self.api_version}/series/{provider}/{dataset}/{series}"

    def dataset_endpoint(self, provider: str, dataset: str) -> str:
        return f"{self.api_base_url}/{self.api_version}/datasets/{provider}/{dataset}"

    def page_url(self, provider: str, dataset: str, series: Optional[str] = None) -> str:
        url = f"{self.site_base_url}/{provider}/{dataset}"
        if series:
            url = f"{url}/{series}"
        return url


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"DBNOMICS_TIMEOUT must be a number of seconds, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"DBNOMICS_TIMEOUT must be positive, got {value}")
    return value


def load_config(timeout: Optional[float] = None) -> CitationConfig:
    """
    Load configuration from environment.

    Reads DBNOMICS_API_URL, DBNOMICS_SITE_URL and DBNOMICS_TIMEOUT from the
    .env file (searched upward from CWD) or the process environment.
    An explicit ``timeout`` argument wins over DBNOMICS_TIMEOUT.
    """
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)
        logger.debug("Loaded .env via find_dotenv: %s", dotenv_path)

    defaults = CitationConfig()
    env_timeout = _parse_timeout(os.getenv("DBNOMICS_TIMEOUT"))

    return CitationConfig(
        api_base_url=os.getenv("DBNOMICS_API_URL", defaults.api_base_url).rstrip("/"),
        site_base_url=os.getenv("DBNOMICS_SITE_URL", defaults.site_base_url).rstrip("/"),
        timeout=timeout if timeout is not None else env_timeout,
    )
