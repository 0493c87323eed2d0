"""Pure functions of the final score: grade, status, conversion and next action."""

from typing import Dict, Optional, Tuple

from .models import Grade, LeadStatus, NextAction
from .scorers.common import round_half_up


GRADE_BANDS: Tuple[Tuple[int, Grade], ...] = (
    (90, Grade("A+", "Exceptional", "#10b981")),
    (80, Grade("A", "Excellent", "#34d399")),
    (70, Grade("B+", "Very Good", "#3b82f6")),
    (60, Grade("B", "Good", "#60a5fa")),
    (50, Grade("C+", "Above Average", "#fbbf24")),
    (40, Grade("C", "Average", "#f59e0b")),
    (30, Grade("D", "Below Average", "#F24C03")),
)
FAILING_GRADE = Grade("F", "Poor Fit", "#ef4444")


def get_lead_grade(score: int) -> Grade:
    """Map a score to its letter grade."""
    for threshold, grade in GRADE_BANDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE


def get_recommended_status(score: int) -> LeadStatus:
    """Map a score to a pipeline status."""
    if score >= 80:
        return LeadStatus.HOT
    if score >= 60:
        return LeadStatus.WARM
    if score >= 40:
        return LeadStatus.NEW
    return LeadStatus.COLD


# (base, slope) of the linear conversion curve per industry
CONVERSION_CURVES: Dict[str, Tuple[float, float]] = {
    "healthcare": (0.12, 0.0065),
    "financial_services": (0.06, 0.005),
    "real_estate": (0.04, 0.0045),
    "energy": (0.15, 0.007),
}
DEFAULT_CURVE = (0.08, 0.005)
CONVERSION_CAP = 0.85


def estimate_conversion(score: int, industry_id: str, cap: float = CONVERSION_CAP) -> int:
    """Estimated conversion probability as an integer percent."""
    base, slope = CONVERSION_CURVES.get(industry_id, DEFAULT_CURVE)
    probability = min(base + score * slope, cap)
    return round_half_up(probability * 100)


URGENT_ACTIONS: Dict[str, NextAction] = {
    "healthcare": NextAction("Schedule enrollment call", "urgent", "Phone"),
    "financial_services": NextAction("Send proposal/term sheet", "urgent", "FileText"),
    "real_estate": NextAction("Schedule property showing", "urgent", "Calendar"),
    "energy": NextAction("Send savings analysis", "urgent", "TrendingUp"),
}
AGENT_ONBOARDING = NextAction("Schedule onboarding call", "urgent", "Phone")
FOLLOW_UP = NextAction("Send personalized follow-up", "high", "Mail")
NURTURE = NextAction("Add to nurture sequence", "medium", "Zap")
QUALIFY = NextAction("Qualify via survey/form", "low", "ClipboardList")
REVIEW = NextAction("Review and qualify", "medium", "Search")


def recommend_next_action(score: int, industry_id: str, sub_vertical_id: Optional[str] = None) -> NextAction:
    """Pick the next sales action for a score."""
    if score >= 80:
        if industry_id == "energy" and sub_vertical_id == "independent_agents":
            return AGENT_ONBOARDING
        urgent = URGENT_ACTIONS.get(industry_id)
        if urgent is not None:
            return urgent
    if score >= 60:
        return FOLLOW_UP
    if score >= 40:
        return NURTURE
    return QUALIFY
