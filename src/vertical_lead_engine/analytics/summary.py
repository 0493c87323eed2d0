"""Aggregate analytics over a batch of scored leads."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from ..core.scorers.common import round_half_up

logger = logging.getLogger(__name__)


@dataclass
class ScoreAnalytics:
    """Summary of one scored batch."""

    total: int = 0
    avg_score: int = 0
    distribution: Dict[str, int] = field(default_factory=lambda: {
        "excellent": 0,  # 80+
        "good": 0,  # 60-79
        "average": 0,  # 40-59
        "poor": 0,  # below 40
    })
    status_breakdown: Dict[str, int] = field(default_factory=dict)
    avg_conversion: int = 0
    dimension_averages: Dict[str, float] = field(default_factory=dict)
    top_dimensions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with camelCase keys."""
        return {
            "total": self.total,
            "avgScore": self.avg_score,
            "distribution": dict(self.distribution),
            "statusBreakdown": dict(self.status_breakdown),
            "avgConversion": self.avg_conversion,
            "dimensionAverages": dict(self.dimension_averages),
            "topDimensions": list(self.top_dimensions),
        }


def _bucket(score: float) -> str:
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "average"
    return "poor"


def summarize(scored_leads: Iterable[Dict[str, Any]]) -> ScoreAnalytics:
    """Aggregate leads as returned by ``score_batch``."""
    leads = list(scored_leads)
    analytics = ScoreAnalytics()
    if not leads:
        return analytics

    total = len(leads)
    score_sum = 0.0
    conversion_sum = 0.0
    dimension_sums: Dict[str, float] = {}
    dimension_counts: Dict[str, int] = {}

    for lead in leads:
        score = lead.get("score") or 0
        score_sum += score
        analytics.distribution[_bucket(score)] += 1

        status = lead.get("recommendedStatus") or "Unknown"
        analytics.status_breakdown[status] = analytics.status_breakdown.get(status, 0) + 1

        conversion_sum += lead.get("conversionProbability") or 0

        for key, dim in (lead.get("scoreBreakdown") or {}).items():
            dimension_sums[key] = dimension_sums.get(key, 0.0) + dim.get("score", 0)
            dimension_counts[key] = dimension_counts.get(key, 0) + 1

    analytics.total = total
    analytics.avg_score = round_half_up(score_sum / total)
    analytics.avg_conversion = round_half_up(conversion_sum / total)
    analytics.dimension_averages = {
        key: round(dimension_sums[key] / dimension_counts[key], 1) for key in dimension_sums
    }
    analytics.top_dimensions = [
        key for key, _ in sorted(analytics.dimension_averages.items(), key=lambda kv: kv[1], reverse=True)[:3]
    ]

    logger.debug(f"Summarized {total} leads, avg score {analytics.avg_score}")
    return analytics
