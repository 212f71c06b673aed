"""
Pytest fixtures for the cooperative explorer tests.

Provides the packaged sample catalog and a small record factory so tests
can build cooperatives with only the attributes they care about.
"""

import pytest

from coop_explorer.catalog import CatalogStore
from coop_explorer.schema import Cooperative


def _coop(**overrides) -> Cooperative:
    raw = {
        "id": "t1",
        "name": "Test Coop",
        "official_name": "Test Coop Cooperative",
        "district": "Toledo",
        "gps": "16.20;-88.81",
        "sector": "Fisheries",
        "value_chain": "Producer",
        "buyer": "Belize Sea Co.",
        "members": 10,
        "capacity": 100,
        "capacity_unit": "tons",
        "product": "Fin fish",
        "certifications": [],
        "export_history": ["Local"],
        "fdi_priority": "Blue Economy",
        "esg": [],
        "partners": [],
        "contact": "test@coop.bz",
    }
    raw.update(overrides)
    return Cooperative.from_dict(raw)


@pytest.fixture
def make_coop():
    return _coop


@pytest.fixture(scope="session")
def catalog() -> CatalogStore:
    return CatalogStore.default()


@pytest.fixture
def records(catalog):
    return list(catalog.all_records())
