"""Engine settings and their on-disk persistence."""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.models import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class ScoringSettings:
    """Tunable engine knobs."""

    # Weight for a dimension that declares no default and has no configured weight
    default_weight: float = 0.1

    # Score used for leads of an unknown sub-vertical that carry no score of their own
    fallback_score: int = 50

    # Upper bound on the estimated conversion probability
    conversion_cap: float = 0.85

    # Thread pool size for batch scoring (1 = sequential)
    max_workers: int = 1

    updated_at: datetime = field(default_factory=datetime.now)

    def validate(self) -> "ScoringSettings":
        if not 0 <= self.default_weight <= 1:
            raise ConfigurationError(f"default_weight must be within [0, 1], got {self.default_weight}")
        if not 0 <= self.fallback_score <= 100:
            raise ConfigurationError(f"fallback_score must be within [0, 100], got {self.fallback_score}")
        if not 0 < self.conversion_cap <= 1:
            raise ConfigurationError(f"conversion_cap must be within (0, 1], got {self.conversion_cap}")
        if self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {self.max_workers}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "default_weight": self.default_weight,
            "fallback_score": self.fallback_score,
            "conversion_cap": self.conversion_cap,
            "max_workers": self.max_workers,
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoringSettings":
        try:
            settings = cls(
                default_weight=float(data.get("default_weight", 0.1)),
                fallback_score=int(data.get("fallback_score", 50)),
                conversion_cap=float(data.get("conversion_cap", 0.85)),
                max_workers=int(data.get("max_workers", 1)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid scoring settings: {e}") from e
        if data.get("updated_at"):
            try:
                settings.updated_at = datetime.fromisoformat(data["updated_at"])
            except (TypeError, ValueError):
                logger.warning(f"Ignoring malformed updated_at: {data['updated_at']!r}")
        return settings.validate()


class ScoringSettingsManager:
    """Load, update and persist scoring settings."""

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = settings_path or Path.home() / ".vertical-lead-engine" / "scoring_settings.json"
        self.settings = self._load_settings()

    def _load_settings(self) -> ScoringSettings:
        if not self.settings_path.exists():
            return ScoringSettings()
        try:
            with open(self.settings_path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading scoring settings: {e}")
            return ScoringSettings()
        if not isinstance(data, dict):
            logger.error(f"Error loading scoring settings: expected an object in {self.settings_path}")
            return ScoringSettings()
        return ScoringSettings.from_dict(data)

    def save_settings(self):
        """Save settings to file."""
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_path, 'w') as f:
            json.dump(self.settings.to_dict(), f, indent=2)
        logger.info(f"Saved scoring settings to {self.settings_path}")

    def update(self, **changes: Any) -> ScoringSettings:
        """Apply changes, validate, then persist. Unknown keys are rejected."""
        current = self.settings.to_dict()
        for key, value in changes.items():
            if key not in current or key == "updated_at":
                raise ConfigurationError(f"Unknown setting '{key}'")
            if value is not None:
                current[key] = value
        current["updated_at"] = None
        updated = ScoringSettings.from_dict(current)
        updated.updated_at = datetime.now()
        self.settings = updated
        self.save_settings()
        return updated

    def reset(self) -> ScoringSettings:
        """Restore and save the default settings."""
        self.settings = ScoringSettings()
        self.save_settings()
        return self.settings
