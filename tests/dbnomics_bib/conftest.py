"""Shared DBnomics payload fixtures."""

import pytest


@pytest.fixture
def series_payload():
    return {
        "series": {
            "docs": {
                "provider_code": "ECB",
                "dataset_code": "MIR",
                "series_code": "M.EE.B.A2C.A.R.A.2250.EUR.N",
                "title": "MFI interest rates",
                "updated_at": "2024-04-30T23:30:00Z",
            }
        }
    }


@pytest.fixture
def dataset_payload():
    return {
        "dataset": {
            "docs": {
                "code": "BOP",
                "title": "Balance of Payments",
                "updated_at": "2024-03-15",
            }
        }
    }
