# file: src/dbnomics_bib/errors.py
"""
Failure taxonomy for citation lookups.

Every error is fatal for the call that raised it: nothing here retries or
returns a partial entry. Callers own any retry policy.
"""

from __future__ import annotations


class CitationError(RuntimeError):
    """Base class for all citation lookup failures."""


class DependencyMissingError(CitationError):
    """A formatter or transport capability is not available."""


class TransportError(CitationError):
    """Network unreachable, DNS failure, timeout or similar."""


class UnexpectedStatusError(CitationError):
    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"DBnomics returned HTTP {status_code} (expected 200). url={url}")


class MalformedResponseError(CitationError, ValueError):
    """Body is not JSON or lacks the expected docs fields."""
