"""Stubbed DBnomics responses and sessions (no network)."""

from datetime import date
from unittest.mock import MagicMock

FIXED_DAY = date(2024, 5, 1)


def make_response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def make_session(response):
    session = MagicMock()
    session.get.return_value = response
    return session
