"""
Shared test configuration and fixtures.
"""

import os

os.environ.setdefault('monobank__api_url', 'https://api.monobank.test/bank/currency')
os.environ.setdefault('NODE_ENV', 'test')

import pytest

from domain.models.currency import RateSnapshot

USD, EUR, UAH, GBP, PLN = 840, 978, 980, 826, 985

MONOBANK_RATES = [
    {'currencyCodeA': USD, 'currencyCodeB': EUR, 'date': 1728105373, 'rateBuy': 0.85, 'rateSell': 0.86},
    {'currencyCodeA': EUR, 'currencyCodeB': USD, 'date': 1728105373, 'rateBuy': 1.15, 'rateSell': 1.16},
    {'currencyCodeA': USD, 'currencyCodeB': UAH, 'date': 1728105373, 'rateBuy': 27.0, 'rateSell': 27.5},
    {'currencyCodeA': EUR, 'currencyCodeB': UAH, 'date': 1728105373, 'rateBuy': 32.0, 'rateSell': 32.5},
    {'currencyCodeA': GBP, 'currencyCodeB': UAH, 'date': 1728105373, 'rateBuy': 37.0, 'rateSell': 37.5},
]


@pytest.fixture
def monobank_rates():
    return [dict(record) for record in MONOBANK_RATES]


@pytest.fixture
def rate_snapshot(monobank_rates):
    return RateSnapshot.from_list(monobank_rates)
