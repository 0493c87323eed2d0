"""Advisory qualification flags: missing fields, threshold disqualifiers, market warnings."""

from typing import Any, Dict, List, Optional

from ..config.markets import is_deregulated
from ..config.models import SubVertical, Threshold
from .models import QualificationFlag
from .scorers.common import number, text

ENERGY_END_CUSTOMERS = ("end_customer_business", "end_customer_consumer")

# Lending floor applied when the config sets no monthlyRevenue bound
BUSINESS_LOAN_REVENUE_FLOOR = Threshold(min=100000)


def is_missing(value: Any) -> bool:
    """Absent, None, blank strings and empty lists are missing; 0 and False are valid."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def _format_bound(value: float, field_type: str) -> str:
    if field_type == "currency":
        return f"${value:,.0f}"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _threshold_flag(field_key: str, threshold: Threshold, value: float,
                    sub_vertical: SubVertical) -> Optional[QualificationFlag]:
    side = threshold.violation(value)
    if side is None:
        return None
    column = sub_vertical.column(field_key)
    label = column.label if column else field_key
    field_type = column.type if column else "number"
    if side == "min":
        message = f"{label} below {_format_bound(threshold.min, field_type)} minimum"
    else:
        message = f"{label} above {_format_bound(threshold.max, field_type)} maximum"
    return QualificationFlag("disqualifier", field_key, message)


def check_qualification_flags(
    lead: Dict[str, Any],
    industry_id: str,
    sub_vertical_id: str,
    sub_vertical: Optional[SubVertical],
) -> List[QualificationFlag]:
    """Collect flags for a lead. Flags never change the score."""
    flags: List[QualificationFlag] = []
    if sub_vertical is None:
        return flags

    criteria = sub_vertical.qualification
    for field_key in criteria.required_fields:
        if is_missing(lead.get(field_key)):
            flags.append(QualificationFlag("missing", field_key, f"Missing: {field_key}"))

    thresholds = dict(criteria.thresholds)
    if (industry_id, sub_vertical_id) == ("financial_services", "business_loans"):
        thresholds.setdefault("monthlyRevenue", BUSINESS_LOAN_REVENUE_FLOOR)
    for field_key, threshold in thresholds.items():
        value = number(lead, field_key)
        if value is None:
            continue
        result = _threshold_flag(field_key, threshold, value, sub_vertical)
        if result is not None:
            flags.append(result)

    if industry_id == "energy" and sub_vertical_id in ENERGY_END_CUSTOMERS:
        state = text(lead, "state")
        if state and not is_deregulated(state):
            flags.append(QualificationFlag("warning", "state", "Not in a deregulated market"))
        if text(lead, "contractStatus") == "Locked 6+ months":
            flags.append(QualificationFlag("warning", "contractStatus", "Contract locked for 6+ months"))

    return flags
