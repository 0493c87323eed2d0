"""Market reference data: energy deregulation and healthcare enrollment windows."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, List, Optional, Union


DEREGULATED_STATES: Dict[str, Dict[str, List[str]]] = {
    "electricity": {
        "full": ["TX", "PA", "OH", "IL", "NJ", "MD", "CT", "MA", "NY", "ME", "NH", "RI", "DE", "DC"],
        "partial": ["CA", "MI", "VA", "OR", "MT", "NV", "GA"],
    },
    "natural_gas": {
        "full": ["OH", "PA", "NJ", "NY", "MD", "CT", "MA", "GA", "VA", "IL"],
        "partial": ["CA", "MI", "IN", "KY", "WY", "NV"],
    },
}


def get_deregulation_level(state: Optional[str], utility_type: str = "electricity") -> str:
    """Return 'full', 'partial' or 'regulated' for a state code."""
    config = DEREGULATED_STATES.get(utility_type)
    if not config or not isinstance(state, str):
        return "regulated"
    code = state.strip().upper()
    if code in config["full"]:
        return "full"
    if code in config["partial"]:
        return "partial"
    return "regulated"


def is_deregulated(state: Optional[str], utility_type: str = "electricity") -> bool:
    """Whether the state has a fully or partially deregulated market."""
    return get_deregulation_level(state, utility_type) != "regulated"


@dataclass(frozen=True)
class EnrollmentPeriod:
    """A healthcare enrollment window active on some date."""

    id: str
    name: str
    priority: str  # critical, high, medium


def get_active_enrollment_periods(on: Union[date, datetime]) -> List[EnrollmentPeriod]:
    """List enrollment periods active on the given date.

    AEP runs Oct 15 - Dec 7, Medicare Advantage OEP Jan 1 - Mar 31 and ACA open
    enrollment Nov 1 - Jan 15. IEP and SEP depend on the individual, so they are
    always reported as open.
    """
    month, day = on.month, on.day
    periods: List[EnrollmentPeriod] = []

    if (month == 10 and day >= 15) or month == 11 or (month == 12 and day <= 7):
        periods.append(EnrollmentPeriod("AEP", "Annual Enrollment Period (Medicare)", "critical"))
    if 1 <= month <= 3:
        periods.append(EnrollmentPeriod("OEP", "Open Enrollment Period (Medicare Advantage)", "high"))
    if month >= 11 or (month == 1 and day <= 15):
        periods.append(EnrollmentPeriod("ACA_OEP", "ACA Open Enrollment Period", "critical"))

    periods.append(EnrollmentPeriod("IEP", "Initial Enrollment Period", "medium"))
    periods.append(EnrollmentPeriod("SEP", "Special Enrollment Period", "medium"))
    return periods


def active_period_ids(on: Union[date, datetime]) -> List[str]:
    return [p.id for p in get_active_enrollment_periods(on)]
