"""Result types produced by the scoring engine."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List


class LeadStatus(Enum):
    """Recommended pipeline status for a scored lead."""

    HOT = "Hot"
    WARM = "Warm"
    NEW = "New"
    COLD = "Cold"


@dataclass(frozen=True)
class Grade:
    """Letter grade shown next to a score."""

    letter: str
    label: str
    color: str

    def to_dict(self) -> Dict[str, str]:
        return {"letter": self.letter, "label": self.label, "color": self.color}


@dataclass(frozen=True)
class DimensionScore:
    """Sub-score for one scoring axis along with the weight it was combined with."""

    key: str
    label: str
    score: int
    weight: float
    default_weight: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "label": self.label,
            "weight": self.weight,
            "defaultWeight": self.default_weight,
        }


@dataclass(frozen=True)
class QualificationFlag:
    """Advisory note about a missing field or a disqualifying condition."""

    type: str  # missing, disqualifier, warning
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "field": self.field, "message": self.message}


@dataclass(frozen=True)
class ContextualBoost:
    """Additive seasonal multiplier, e.g. 0.08 means +8%."""

    multiplier: float = 0.0
    reasons: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"multiplier": self.multiplier, "reasons": list(self.reasons)}


@dataclass(frozen=True)
class NextAction:
    """Recommended next step for a rep working the lead."""

    action: str
    priority: str  # urgent, high, medium, low
    icon: str

    def to_dict(self) -> Dict[str, str]:
        return {"action": self.action, "priority": self.priority, "icon": self.icon}


@dataclass
class ScoreResult:
    """Full scoring output for a single lead."""

    score: int
    grade: Grade
    recommended_status: LeadStatus
    conversion_probability: int
    dimensions: Dict[str, DimensionScore]
    qualification_flags: List[QualificationFlag]
    boost: ContextualBoost
    next_best_action: NextAction
    scored_at: datetime
    raw_score: float = 0.0
    is_fallback: bool = False

    @property
    def disqualified(self) -> bool:
        return any(f.type == "disqualifier" for f in self.qualification_flags)

    def breakdown(self) -> Dict[str, Dict[str, Any]]:
        return {key: dim.to_dict() for key, dim in self.dimensions.items()}

    def to_dict(self) -> Dict[str, Any]:
        """Render the camelCase output contract consumed by dashboards."""
        return {
            "score": self.score,
            "grade": self.grade.to_dict(),
            "recommendedStatus": self.recommended_status.value,
            "conversionProbability": self.conversion_probability,
            "scoreBreakdown": self.breakdown(),
            "qualificationFlags": [f.to_dict() for f in self.qualification_flags],
            "boost": self.boost.to_dict(),
            "nextBestAction": self.next_best_action.to_dict(),
            "scoredAt": self.scored_at.isoformat(),
        }
