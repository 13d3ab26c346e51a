"""Application configuration."""
from dataclasses import dataclass
from typing import Dict, Optional

from .rules import RULES


@dataclass
class RosterConfig:
    """Settings for one roster run."""

    class_name: str = RULES.default_class_name
    year: int = RULES.default_year
    month: int = RULES.default_month  # 0-11

    # Storage
    store_path: str = "data/nobet.db"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = "logs/nobet.log"

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            "class_name": self.class_name,
            "year": self.year,
            "month": self.month,
            "store_path": self.store_path,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "RosterConfig":
        """Create from dictionary, ignoring unknown keys."""
        cfg = cls()
        for key, value in d.items():
            if hasattr(cfg, key):
                setattr(cfg, key, value)
        return cfg
