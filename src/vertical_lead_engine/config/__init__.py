"""Industry and sub-vertical configuration."""

from .models import (
    ConfigurationError,
    FieldSpec,
    Industry,
    QualificationCriteria,
    SubVertical,
    Threshold,
)
from .markets import (
    DEREGULATED_STATES,
    EnrollmentPeriod,
    get_active_enrollment_periods,
    get_deregulation_level,
    is_deregulated,
)
from .store import IndustryConfigStore

__all__ = [
    "ConfigurationError",
    "FieldSpec",
    "Industry",
    "QualificationCriteria",
    "SubVertical",
    "Threshold",
    "DEREGULATED_STATES",
    "EnrollmentPeriod",
    "get_active_enrollment_periods",
    "get_deregulation_level",
    "is_deregulated",
    "IndustryConfigStore",
]
