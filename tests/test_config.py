"""Tests for configuration models."""
import pytest
from pydantic import ValidationError

from nobet.models.config import RosterConfig
from nobet.models.validated import ValidatedRosterConfig


class TestRosterConfig:
    """Tests for the dataclass config."""

    def test_defaults(self):
        cfg = RosterConfig()
        assert cfg.class_name == "1D Sınıfı"
        assert (cfg.year, cfg.month) == (2025, 8)

    def test_dict_roundtrip_ignores_unknown(self):
        cfg = RosterConfig.from_dict({"year": 2026, "month": 0, "unknown": 1})
        assert cfg.year == 2026
        assert cfg.month == 0
        assert RosterConfig.from_dict(cfg.to_dict()) == cfg


class TestValidatedRosterConfig:
    """Tests for pydantic validation."""

    @pytest.mark.parametrize("month", [-1, 12])
    def test_month_range(self, month):
        with pytest.raises(ValidationError):
            ValidatedRosterConfig(month=month)

    def test_blank_class_name(self):
        with pytest.raises(ValidationError):
            ValidatedRosterConfig(class_name="   ")

    def test_log_level_normalized(self):
        assert ValidatedRosterConfig(log_level="debug").log_level == "DEBUG"

    def test_month_name(self):
        assert ValidatedRosterConfig(month=0).month_name == "Ocak"

    def test_validate_assignment(self):
        cfg = ValidatedRosterConfig()
        with pytest.raises(ValidationError):
            cfg.month = 12

    def test_dataclass_roundtrip(self):
        cfg = ValidatedRosterConfig(class_name=" 2B ", year=2026, month=4)
        dc = cfg.to_dataclass()
        assert isinstance(dc, RosterConfig)
        assert dc.class_name == "2B"
        assert ValidatedRosterConfig.from_dataclass(dc) == cfg
