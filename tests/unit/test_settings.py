"""
Tests for settings and engine configuration.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from config.engine import EngineConfig
from config.settings import Settings
from models.shift import Shift


class TestEngineConfig:

    def test_defaults(self):
        config = EngineConfig()

        assert config.alert_threshold == 3
        assert config.pallet_capacity == 49
        assert config.shift_codes == ["A", "B", "C", "D", "E", "F"]

    def test_frozen(self):
        config = EngineConfig()
        with pytest.raises(PydanticValidationError):
            config.alert_threshold = 5

    @pytest.mark.parametrize("overrides", [
        {"alert_threshold": -1},
        {"pallet_capacity": 0},
        {"shifts": ()},
        {"shifts": ("A", "A")},
        {"shifts": ("A", "G")},
    ])
    def test_invalid(self, overrides):
        with pytest.raises(PydanticValidationError):
            EngineConfig(**overrides)


class TestSettings:

    def test_engine_config_from_env(self, monkeypatch):
        monkeypatch.setenv("ALERT_THRESHOLD", "5")
        monkeypatch.setenv("PALLET_CAPACITY", "60")
        monkeypatch.setenv("SHIFTS", '["C", "A"]')

        config = Settings(_env_file=None).engine_config

        assert config.alert_threshold == 5
        assert config.pallet_capacity == 60
        assert config.shifts == (Shift.C, Shift.A)

    def test_defaults(self, monkeypatch):
        for name in ("ALERT_THRESHOLD", "PALLET_CAPACITY", "SHIFTS", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.engine_config == EngineConfig()
        assert settings.is_production is False
