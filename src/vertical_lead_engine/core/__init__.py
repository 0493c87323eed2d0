"""Core scoring engine for vertical lead scoring."""

from .models import (
    ContextualBoost,
    DimensionScore,
    Grade,
    LeadStatus,
    NextAction,
    QualificationFlag,
    ScoreResult,
)
from .strategies import Dimension, ScoringStrategy, STRATEGIES, get_strategy, registered_pairs
from .boost import compute_contextual_boost
from .grading import estimate_conversion, get_lead_grade, get_recommended_status, recommend_next_action
from .qualification import check_qualification_flags
from .settings import ScoringSettings, ScoringSettingsManager
from .engine import LeadScoringEngine, score_lead
from .batch import score_batch

__all__ = [
    "ContextualBoost",
    "DimensionScore",
    "Grade",
    "LeadStatus",
    "NextAction",
    "QualificationFlag",
    "ScoreResult",
    "Dimension",
    "ScoringStrategy",
    "STRATEGIES",
    "get_strategy",
    "registered_pairs",
    "compute_contextual_boost",
    "estimate_conversion",
    "get_lead_grade",
    "get_recommended_status",
    "recommend_next_action",
    "check_qualification_flags",
    "ScoringSettings",
    "ScoringSettingsManager",
    "LeadScoringEngine",
    "score_lead",
    "score_batch",
]
