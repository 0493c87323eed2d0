"""Read-only store of industry and sub-vertical configuration."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .industries import BASE_COLUMNS, INDUSTRIES
from .models import ConfigurationError, FieldSpec, Industry, SubVertical

logger = logging.getLogger(__name__)


class IndustryConfigStore:
    """Validated, immutable view over the industry configuration.

    All validation happens here, at load time, so the scoring path can trust
    weights and thresholds without re-checking them per lead.
    """

    _default: Optional["IndustryConfigStore"] = None

    def __init__(self, industries: Iterable[Dict[str, Any]]):
        self._industries: Dict[str, Industry] = {}
        for raw in industries:
            if not isinstance(raw, dict):
                raise ConfigurationError(f"industry entries must be objects, got {type(raw).__name__}")
            industry = Industry.from_dict(raw)
            if industry.id in self._industries:
                raise ConfigurationError(f"duplicate industry '{industry.id}'")
            self._industries[industry.id] = industry
        self._base_columns = [FieldSpec.from_dict(c, "base columns") for c in BASE_COLUMNS]
        logger.debug(
            f"Loaded {len(self._industries)} industries, "
            f"{sum(len(i.sub_verticals) for i in self._industries.values())} sub-verticals"
        )

    @classmethod
    def default(cls) -> "IndustryConfigStore":
        """Store built from the packaged industry definitions (cached)."""
        if cls._default is None:
            cls._default = cls(INDUSTRIES)
        return cls._default

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "IndustryConfigStore":
        """Load configuration from a JSON file.

        The document is either a list of industries or an object with an
        ``industries`` key holding that list (or a keyed object of industries).
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read industry config {path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("industries", data)
        if isinstance(data, dict):
            data = list(data.values())
        if not isinstance(data, list):
            raise ConfigurationError(f"{path}: expected a list of industries")

        logger.info(f"Loading industry config from {path}")
        return cls(data)

    @property
    def industries(self) -> List[Industry]:
        return list(self._industries.values())

    def get_industry(self, industry_id: str) -> Optional[Industry]:
        """Get an industry by ID."""
        return self._industries.get(industry_id)

    def get_sub_vertical(self, industry_id: str, sub_vertical_id: str) -> Optional[SubVertical]:
        """Get a sub-vertical, or None when either ID is unknown."""
        industry = self._industries.get(industry_id)
        if industry is None:
            return None
        return industry.sub_verticals.get(sub_vertical_id)

    def get_scoring_weights(self, industry_id: str, sub_vertical_id: str) -> Dict[str, float]:
        """Get a copy of a sub-vertical's configured weights."""
        sv = self.get_sub_vertical(industry_id, sub_vertical_id)
        return dict(sv.scoring_weights) if sv else {}

    def all_sub_verticals(self) -> List[Dict[str, Any]]:
        """Flattened list of sub-verticals with their industry attached."""
        result = []
        for industry in self._industries.values():
            for sv in industry.sub_verticals.values():
                result.append({
                    "industry_id": industry.id,
                    "industry_name": industry.name,
                    "industry_color": industry.color,
                    "sub_vertical": sv,
                })
        return result

    def columns_for(self, industry_id: str, sub_vertical_id: str) -> List[FieldSpec]:
        """Base system columns followed by the sub-vertical's own columns."""
        sv = self.get_sub_vertical(industry_id, sub_vertical_id)
        if sv is None:
            return []
        own = {c.key for c in sv.columns}
        return [c for c in self._base_columns if c.key not in own] + list(sv.columns)
