"""Declarative models for industries, sub-verticals and their qualification rules."""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


FIELD_TYPES = {"text", "number", "currency", "date", "boolean", "select", "multiselect"}

# Flat criteria bounds such as minMonthlyRevenue or maxAge
BOUND_KEY = re.compile(r"^(min|max)([A-Z]\w*)$")


class ConfigurationError(ValueError):
    """Raised when industry configuration or engine settings are malformed."""


def _require_str(data: Dict[str, Any], key: str, context: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"{context}: '{key}' must be a non-empty string")
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class FieldSpec:
    """One column of a sub-vertical's lead schema."""

    key: str
    label: str
    type: str = "text"
    options: List[str] = field(default_factory=list)
    sortable: bool = True
    system: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any], context: str) -> "FieldSpec":
        """Build a field from its JSON form."""
        key = _require_str(data, "key", context)
        field_type = data.get("type", "text")
        if field_type not in FIELD_TYPES:
            raise ConfigurationError(f"{context}: field '{key}' has unknown type '{field_type}'")
        options = data.get("options", [])
        if not isinstance(options, list):
            raise ConfigurationError(f"{context}: options for '{key}' must be a list")
        return cls(
            key=key,
            label=data.get("label", key),
            type=field_type,
            options=list(options),
            sortable=bool(data.get("sortable", True)),
            system=bool(data.get("system", False)),
        )


@dataclass(frozen=True)
class Threshold:
    """Inclusive numeric bounds a lead field must respect to qualify."""

    min: Optional[float] = None
    max: Optional[float] = None

    def violation(self, value: float) -> Optional[str]:
        """Return 'min' or 'max' when the value falls outside the bounds."""
        if self.min is not None and value < self.min:
            return "min"
        if self.max is not None and value > self.max:
            return "max"
        return None


@dataclass(frozen=True)
class QualificationCriteria:
    """Required fields, numeric thresholds and descriptive disqualifiers."""

    required_fields: List[str] = field(default_factory=list)
    preferred_fields: List[str] = field(default_factory=list)
    thresholds: Dict[str, Threshold] = field(default_factory=dict)
    disqualifiers: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], context: str) -> "QualificationCriteria":
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(f"{context}: qualificationCriteria must be an object")

        lists = {}
        for key in ("requiredFields", "preferredFields", "disqualifiers"):
            value = data.get(key, [])
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigurationError(f"{context}: '{key}' must be a list of strings")
            lists[key] = list(value)

        raw_thresholds = data.get("thresholds", {})
        if not isinstance(raw_thresholds, dict):
            raise ConfigurationError(f"{context}: 'thresholds' must be an object")

        # Flat bounds merge underneath the thresholds object
        merged: Dict[str, Any] = {}
        for key, bound in data.items():
            match = BOUND_KEY.match(key)
            if match is None:
                continue
            side, name = match.groups()
            field_key = name[0].lower() + name[1:]
            merged.setdefault(field_key, {})[side] = bound
        for field_key, bounds in raw_thresholds.items():
            if not isinstance(bounds, dict):
                raise ConfigurationError(f"{context}: threshold for '{field_key}' must be an object")
            merged[field_key] = {**merged.get(field_key, {}), **bounds}

        thresholds: Dict[str, Threshold] = {}
        for field_key, bounds in merged.items():
            if not isinstance(bounds, dict):
                raise ConfigurationError(f"{context}: threshold for '{field_key}' must be an object")
            low, high = bounds.get("min"), bounds.get("max")
            for bound in (low, high):
                if bound is not None and not _is_number(bound):
                    raise ConfigurationError(
                        f"{context}: threshold for '{field_key}' must be numeric, got {bound!r}"
                    )
            if low is not None and high is not None and low > high:
                raise ConfigurationError(f"{context}: threshold for '{field_key}' has min > max")
            thresholds[field_key] = Threshold(min=low, max=high)

        return cls(
            required_fields=lists["requiredFields"],
            preferred_fields=lists["preferredFields"],
            thresholds=thresholds,
            disqualifiers=lists["disqualifiers"],
        )


@dataclass(frozen=True)
class SubVertical:
    """A sub-vertical: lead schema, dimension weights and qualification criteria."""

    id: str
    name: str
    description: str = ""
    lead_types: List[str] = field(default_factory=list)
    columns: List[FieldSpec] = field(default_factory=list)
    scoring_weights: Dict[str, float] = field(default_factory=dict)
    qualification: QualificationCriteria = field(default_factory=QualificationCriteria)

    def column(self, key: str) -> Optional[FieldSpec]:
        """Look up a column by key."""
        for spec in self.columns:
            if spec.key == key:
                return spec
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], industry_id: str) -> "SubVertical":
        """Build and validate a sub-vertical."""
        sv_id = _require_str(data, "id", f"industry '{industry_id}'")
        context = f"{industry_id}/{sv_id}"

        raw_weights = data.get("scoringWeights", {}) or {}
        if not isinstance(raw_weights, dict):
            raise ConfigurationError(f"{context}: scoringWeights must be an object")
        weights: Dict[str, float] = {}
        for dim, weight in raw_weights.items():
            if not _is_number(weight):
                raise ConfigurationError(f"{context}: weight for '{dim}' must be a number, got {weight!r}")
            if weight < 0 or weight > 1:
                raise ConfigurationError(f"{context}: weight for '{dim}' must be within [0, 1]")
            weights[dim] = float(weight)

        columns = [FieldSpec.from_dict(col, context) for col in data.get("columns", [])]
        keys = [c.key for c in columns]
        if len(keys) != len(set(keys)):
            raise ConfigurationError(f"{context}: duplicate column keys")

        return cls(
            id=sv_id,
            name=data.get("name", sv_id),
            description=data.get("description", ""),
            lead_types=list(data.get("leadTypes", [])),
            columns=columns,
            scoring_weights=weights,
            qualification=QualificationCriteria.from_dict(data.get("qualificationCriteria"), context),
        )


@dataclass(frozen=True)
class Industry:
    """An industry and its sub-verticals."""

    id: str
    name: str
    icon: str = ""
    color: str = ""
    description: str = ""
    sub_verticals: Dict[str, SubVertical] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Industry":
        """Build and validate an industry and its sub-verticals."""
        industry_id = _require_str(data, "id", "industry")
        raw_subs = data.get("subVerticals", {})
        # Accept either a list or the keyed-object form used by the dashboard config
        if isinstance(raw_subs, dict):
            raw_subs = list(raw_subs.values())
        if not isinstance(raw_subs, list):
            raise ConfigurationError(f"industry '{industry_id}': subVerticals must be a list or object")

        sub_verticals: Dict[str, SubVertical] = {}
        for raw in raw_subs:
            sv = SubVertical.from_dict(raw, industry_id)
            if sv.id in sub_verticals:
                raise ConfigurationError(f"industry '{industry_id}': duplicate sub-vertical '{sv.id}'")
            sub_verticals[sv.id] = sv

        return cls(
            id=industry_id,
            name=data.get("name", industry_id),
            icon=data.get("icon", ""),
            color=data.get("color", ""),
            description=data.get("description", ""),
            sub_verticals=sub_verticals,
        )
