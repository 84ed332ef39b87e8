"""
Tests for pallet_service: read-only pallet accounting.
"""

from config.engine import EngineConfig
from services.pallet_service import pallet_status, fill_percent


class TestFillPercent:

    def test_half_full(self):
        assert fill_percent(28, 56) == 50

    def test_rounds_half_up(self):
        # 1 / 8 = 12.5%
        assert fill_percent(1, 8) == 13

    def test_over_capacity_not_clamped(self):
        assert fill_percent(60, 50) == 120

    def test_large_counts(self):
        assert fill_percent(10**30, 10**28) == 10_000
        assert fill_percent(10**400, 1) == 10**402


class TestPalletStatus:
    """Tests for pallet status view."""

    def test_counts_copied(self, seed_records, engine_config):
        status = pallet_status(seed_records[0], engine_config)

        assert status.total == 6
        assert status.completed == 3
        assert status.remaining == 3
        assert status.current_pallet == 28
        assert status.is_balanced is True

    def test_default_capacity(self, seed_records, engine_config):
        status = pallet_status(seed_records[1], engine_config)

        assert status.capacity == 49
        assert status.units_to_next_pallet == 7
        # 42 / 49 = 85.7%
        assert status.current_fill_pct == 86

    def test_configured_capacity(self, make_record):
        record = make_record(current_pallet=30)
        status = pallet_status(record, EngineConfig(pallet_capacity=60))

        assert status.capacity == 60
        assert status.units_to_next_pallet == 30
        assert status.current_fill_pct == 50

    def test_overfilled_pallet(self, make_record, engine_config):
        status = pallet_status(make_record(current_pallet=55), engine_config)

        assert status.units_to_next_pallet == 0
        assert status.current_fill_pct == 112

    def test_unbalanced_after_mutation_reported_not_fixed(self, make_record, engine_config):
        record = make_record(total=6, completed=3)
        record.pallets.completed = 5

        status = pallet_status(record, engine_config)

        assert status.is_balanced is False
        assert status.completed == 5
        assert status.remaining == 3
        assert status.total == 6
        # Source record untouched
        assert record.pallets.remaining == 3
