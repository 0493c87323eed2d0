"""Seasonal and regulatory boosts applied on top of the weighted composite."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..config.markets import get_active_enrollment_periods
from .models import ContextualBoost


def compute_contextual_boost(
    lead: Optional[Dict[str, Any]],
    industry_id: str,
    sub_vertical_id: str,
    reference_date: datetime,
) -> ContextualBoost:
    """Compute the additive multiplier for an industry on a given date.

    Depends only on the industry and the reference date, never the wall
    clock, so repeated calls for the same date always agree. Several windows
    can stack (energy has both a winter and a summer window, financial
    services a Q4 and a tax-season window).
    """
    multiplier = 0.0
    reasons: List[str] = []
    month = reference_date.month

    if industry_id == "healthcare":
        critical = next(
            (p for p in get_active_enrollment_periods(reference_date) if p.priority == "critical"),
            None,
        )
        if critical is not None:
            multiplier += 0.08
            reasons.append(f"Active {critical.name}")

    elif industry_id == "financial_services":
        if 10 <= month <= 12:
            multiplier += 0.05
            reasons.append("Q4 tax planning season")
        if 1 <= month <= 4:
            multiplier += 0.03
            reasons.append("Tax season")

    elif industry_id == "real_estate":
        if 3 <= month <= 8:
            multiplier += 0.05
            reasons.append("Peak buying season")

    elif industry_id == "energy":
        if month >= 11 or month <= 2:
            multiplier += 0.05
            reasons.append("High energy consumption season")
        if 6 <= month <= 8:
            multiplier += 0.03
            reasons.append("Summer cooling season")

    return ContextualBoost(multiplier=round(multiplier, 4), reasons=reasons)
