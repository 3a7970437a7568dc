import os
import sys

import pytest

repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from medtransfer.directory.models import Company, Driver
from medtransfer.transfers.schema import Transfer


@pytest.fixture
def drivers():
    return [
        Driver(id="d1", name="Juan Perez", dni="20111222", cost_per_km=3.0, fixed_rate=400.0, waiting_hour_cost=100.0),
        Driver(id="d2", name="Ana Gomez", dni="27333444"),
    ]


@pytest.fixture
def companies():
    return [
        Company(id="c1", name="ACME", cuit="30-1-9", cost_per_km=5.0, fixed_rate=1000.0, waiting_hour_cost=300.0),
        Company(id="c2", name="Salud Sur", cuit="30-2-9", cost_per_km=10.0, fixed_rate=800.0, waiting_hour_cost=200.0),
    ]


@pytest.fixture
def make_transfer():
    def _make(**overrides):
        fields = dict(
            date="2025-03-10",
            patient_name="Maria Lopez",
            driver_id="d1",
            company_id="c1",
            origin_address="Av. Rivadavia 100",
            origin_city="CABA",
            destination_address="Hospital Italiano",
            destination_city="CABA",
            km=30.0,
        )
        fields.update(overrides)
        return Transfer(**fields)

    return _make
