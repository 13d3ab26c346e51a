"""
Pydantic Validated Models
=========================
Validation layer for roster settings at the CLI and UI boundaries.

Usage:
    from nobet.models.validated import ValidatedRosterConfig

    config = ValidatedRosterConfig(class_name="1D Sınıfı", year=2026, month=0)
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .dates import MONTH_NAMES


class ValidatedRosterConfig(BaseModel):
    """
    Pydantic-validated roster configuration.

    Can be converted to/from the dataclass RosterConfig.
    """

    model_config = ConfigDict(validate_assignment=True)

    class_name: str = Field(default="1D Sınıfı", min_length=1, max_length=100)
    year: int = Field(default=2025, ge=1, le=9999, description="Calendar year")
    month: int = Field(default=8, ge=0, le=11, description="Zero-based month (0 = Ocak)")

    store_path: str = Field(default="data/nobet.db")
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default="logs/nobet.log")

    @field_validator("class_name")
    @classmethod
    def strip_class_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("class_name must not be blank")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return v

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month]

    def to_dataclass(self):
        """Convert to dataclass RosterConfig."""
        from nobet.models.config import RosterConfig

        return RosterConfig(
            class_name=self.class_name,
            year=self.year,
            month=self.month,
            store_path=self.store_path,
            log_level=self.log_level,
            log_file=self.log_file,
        )

    @classmethod
    def from_dataclass(cls, config) -> "ValidatedRosterConfig":
        """Create from dataclass RosterConfig."""
        return cls(**config.to_dict())
