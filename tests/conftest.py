"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import pytest
from unittest.mock import patch

from config.engine import EngineConfig
from data.seed import PRODUCTION_RECORDS, HISTORY_ENTRIES
from models.history import HistoryEntry
from models.production import ProductionRecord
from services.production_service import ProductionService
from tests.factories import ProductionRecordFactory, HistoryEntryFactory


# ===================
# ENGINE FIXTURES
# ===================

@pytest.fixture
def engine_config() -> EngineConfig:
    """Default engine configuration (threshold 3, 49 units/pallet, shifts A-F)."""
    return EngineConfig()


@pytest.fixture
def make_record():
    """
    Build a ProductionRecord from factory overrides.

    Usage:
        def test_something(make_record):
            record = make_record(produced=300, remaining=1)
    """
    def _make(**overrides) -> ProductionRecord:
        return ProductionRecord.model_validate(ProductionRecordFactory.create(**overrides))
    return _make


@pytest.fixture
def seed_records() -> list[ProductionRecord]:
    """The three seed product runs."""
    return [ProductionRecord.model_validate(raw) for raw in PRODUCTION_RECORDS]


@pytest.fixture
def history_entries() -> list[HistoryEntry]:
    """A small history with repeated dates, shifts and weights."""
    raw = [
        HistoryEntryFactory.create(date="2025-03-08", shift="A", product="Papas Clásicas", weight=180),
        HistoryEntryFactory.create(date="2025-03-08", shift="B", product="Papas Sabor Queso",
                                   weight=150, target=200, produced=185),
        HistoryEntryFactory.create(date="2025-03-07", shift="F", product="Chicharrones",
                                   weight=100, target=300, produced=275),
        HistoryEntryFactory.create(date="2025-03-07", shift="A", product="Papas Clásicas",
                                   weight=180, produced=120),
    ]
    return [HistoryEntry.model_validate(entry) for entry in raw]


# ===================
# SERVICE FIXTURES
# ===================

@pytest.fixture
def production_service(engine_config) -> ProductionService:
    """ProductionService over the seed data."""
    return ProductionService(
        records=PRODUCTION_RECORDS,
        history=HISTORY_ENTRIES,
        config=engine_config,
    )


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client(production_service):
    """
    Create FastAPI test client backed by the seed data.

    Usage:
        def test_endpoint(test_client):
            response = test_client.get("/api/production")
            assert response.status_code == 200
    """
    from fastapi.testclient import TestClient
    from main import app

    with patch("services.production_service._production_service", production_service):
        yield TestClient(app)
