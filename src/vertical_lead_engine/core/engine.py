"""Lead scoring engine - combines dimension scores into a single 0-100 score."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from ..config.store import IndustryConfigStore
from .boost import compute_contextual_boost
from .grading import REVIEW, estimate_conversion, get_lead_grade, get_recommended_status, recommend_next_action
from .models import ContextualBoost, DimensionScore, ScoreResult
from .qualification import check_qualification_flags
from .scorers.common import clamp, number
from .settings import ScoringSettings
from .strategies import STRATEGIES, ScoringStrategy

logger = logging.getLogger(__name__)


class LeadScoringEngine:
    """Scores leads for any registered (industry, sub-vertical) pair."""

    def __init__(
        self,
        config_store: Optional[IndustryConfigStore] = None,
        settings: Optional[ScoringSettings] = None,
        strategies: Optional[Mapping[str, Mapping[str, ScoringStrategy]]] = None,
    ):
        self.config_store = config_store or IndustryConfigStore.default()
        self.settings = settings or ScoringSettings()
        self.strategies = strategies if strategies is not None else STRATEGIES

    def get_strategy(self, industry_id: str, sub_vertical_id: str) -> Optional[ScoringStrategy]:
        """Get the scoring strategy for a pair."""
        return self.strategies.get(industry_id, {}).get(sub_vertical_id)

    def score(
        self,
        lead: Dict[str, Any],
        industry_id: str,
        sub_vertical_id: str,
        reference_date: Optional[datetime] = None,
    ) -> ScoreResult:
        """Score one lead. Never raises for missing or malformed lead data."""
        reference_date = reference_date or datetime.now()
        lead = lead or {}

        strategy = self.get_strategy(industry_id, sub_vertical_id)
        if strategy is None:
            logger.debug(f"No scoring strategy for {industry_id}/{sub_vertical_id}, using fallback")
            return self._fallback(lead, industry_id, reference_date)

        configured = self.config_store.get_scoring_weights(industry_id, sub_vertical_id)
        dimensions: Dict[str, DimensionScore] = {}
        weighted_sum = 0.0
        total_weight = 0.0

        for dimension in strategy.dimensions:
            sub_score = clamp(dimension.scorer(lead, reference_date))
            default_weight = dimension.default_weight
            if default_weight is None:
                default_weight = self.settings.default_weight
            # Presence, not truthiness: a configured 0 switches the dimension off
            weight = configured[dimension.key] if dimension.key in configured else default_weight
            dimensions[dimension.key] = DimensionScore(
                key=dimension.key,
                label=dimension.label,
                score=sub_score,
                weight=weight,
                default_weight=default_weight,
            )
            weighted_sum += sub_score * weight
            total_weight += weight

        if total_weight > 0:
            raw_score = weighted_sum / total_weight
        else:
            logger.warning(f"Total weight is 0 for {industry_id}/{sub_vertical_id}, raw score set to 0")
            raw_score = 0.0

        boost = compute_contextual_boost(lead, industry_id, sub_vertical_id, reference_date)
        final_score = clamp(min(100.0, raw_score * (1 + boost.multiplier)))

        sub_vertical = self.config_store.get_sub_vertical(industry_id, sub_vertical_id)
        flags = check_qualification_flags(lead, industry_id, sub_vertical_id, sub_vertical)

        logger.debug(
            f"Scored lead {lead.get('id', '?')} for {industry_id}/{sub_vertical_id}: "
            f"raw={raw_score:.2f} boost={boost.multiplier} final={final_score}"
        )

        return ScoreResult(
            score=final_score,
            grade=get_lead_grade(final_score),
            recommended_status=get_recommended_status(final_score),
            conversion_probability=estimate_conversion(final_score, industry_id, self.settings.conversion_cap),
            dimensions=dimensions,
            qualification_flags=flags,
            boost=boost,
            next_best_action=recommend_next_action(final_score, industry_id, sub_vertical_id),
            scored_at=reference_date,
            raw_score=raw_score,
        )

    def _fallback(self, lead: Dict[str, Any], industry_id: str, reference_date: datetime) -> ScoreResult:
        """Score an unconfigured pair from the lead's existing score."""
        existing = number(lead, "score")
        final_score = clamp(existing if existing is not None else self.settings.fallback_score)
        return ScoreResult(
            score=final_score,
            grade=get_lead_grade(final_score),
            recommended_status=get_recommended_status(final_score),
            conversion_probability=estimate_conversion(final_score, industry_id, self.settings.conversion_cap),
            dimensions={},
            qualification_flags=[],
            boost=ContextualBoost(),
            next_best_action=REVIEW,
            scored_at=reference_date,
            raw_score=float(final_score),
            is_fallback=True,
        )

    def explain(self, result: ScoreResult) -> str:
        """Get a human-readable explanation of a score."""
        lines = [f"Score: {result.score} ({result.grade.letter} - {result.grade.label})"]
        lines.append(f"Status: {result.recommended_status.value}")
        lines.append(f"Conversion probability: {result.conversion_probability}%")

        if result.is_fallback:
            lines.append("No scoring strategy registered; score carried over from the lead.")
        else:
            lines.append("")
            lines.append("Dimensions:")
            for dim in top_dimensions(result, limit=len(result.dimensions)):
                lines.append(f"  {dim.label}: {dim.score} x {dim.weight:g}")

        if result.boost.reasons:
            lines.append("")
            lines.append(f"Boost: +{result.boost.multiplier:.0%} ({', '.join(result.boost.reasons)})")

        if result.qualification_flags:
            lines.append("")
            lines.append("Flags:")
            for flag in result.qualification_flags:
                lines.append(f"  [{flag.type}] {flag.message}")

        lines.append("")
        lines.append(f"Next: {result.next_best_action.action} ({result.next_best_action.priority})")
        return "\n".join(lines)


_default_engine: Optional[LeadScoringEngine] = None


def get_default_engine() -> LeadScoringEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = LeadScoringEngine()
    return _default_engine


def score_lead(
    lead: Dict[str, Any],
    industry_id: str,
    sub_vertical_id: str,
    reference_date: Optional[datetime] = None,
) -> ScoreResult:
    """Quick function to score a lead with the built-in configuration."""
    return get_default_engine().score(lead, industry_id, sub_vertical_id, reference_date)


def top_dimensions(result: ScoreResult, limit: int = 3) -> List[DimensionScore]:
    """Dimensions contributing most to the composite, highest first."""
    return sorted(result.dimensions.values(), key=lambda d: d.score * d.weight, reverse=True)[:limit]
