"""Healthcare dimension scorers: Medicare, ACA, vision and dental."""

from datetime import datetime

from ...config.markets import active_period_ids
from .common import Lead, bucket, clamp, days_between, flag, items, lookup, number, parse_date, text


# === Medicare ===

def score_medicare_enrollment_timing(lead: Lead, reference_date: datetime) -> int:
    """Initial enrollment beats everything; AEP/OEP only count while the window is open."""
    period = text(lead, "enrollmentPeriod")
    active = active_period_ids(reference_date)

    if period == "IEP":
        return 95
    if period == "AEP":
        return 90 if "AEP" in active else 40
    if period == "OEP" and "OEP" in active:
        return 85
    if period == "SEP":
        return 80
    if period == "GI":
        return 75
    return 30


def score_medicare_age_proximity(lead: Lead, reference_date: datetime) -> int:
    age = number(lead, "age")
    if not age:
        return 30
    if age == 64:
        return 95  # turning 65, IEP approaching
    if age == 65:
        return 90
    if 66 <= age <= 70:
        return 75
    if 70 < age <= 80:
        return 60
    if age > 80:
        return 50
    if 62 <= age < 64:
        return 45
    return 20


MEDICARE_INCOME_SCORES = {
    "Below $22K": 90,  # likely dual-eligible
    "$22K-$35K": 80,
    "$35K-$55K": 65,
    "$55K-$85K": 55,
    "$85K+": 45,
}


def score_medicare_income_qualification(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "incomeLevel"), MEDICARE_INCOME_SCORES, 50)


def score_health_complexity(lead: Lead, reference_date: datetime) -> int:
    score = 30
    conditions = items(lead, "chronicConditions")
    if conditions:
        real = [c for c in conditions if c and c != "None"]
        score += min(len(real) * 15, 40)

    rx_count = number(lead, "prescriptionDrugs", 0) or 0
    score += bucket(rx_count, [(5, 20), (3, 15), (1, 10)], 0)
    return clamp(score)


MEDICARE_COVERAGE_GAP = {
    "None": 95,
    "Original Medicare": 80,  # no supplement
    "Employer": 60,
    "Medicare Advantage": 45,
}


def score_medicare_coverage_gap(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "currentCoverage"), MEDICARE_COVERAGE_GAP, 50)


# === ACA ===

def score_aca_subsidy_eligibility(lead: Lead, reference_date: datetime) -> int:
    if flag(lead, "subsidyEligible") is True:
        return 90
    fpl = number(lead, "fpl")
    if not fpl:
        return 50
    if 100 <= fpl <= 150:
        return 95
    if 150 < fpl <= 250:
        return 85
    if 250 < fpl <= 400:
        return 70
    if fpl > 400:
        return 40
    return 30


def score_aca_enrollment_timing(lead: Lead, reference_date: datetime) -> int:
    period = text(lead, "enrollmentPeriod")
    open_enrollment = "ACA_OEP" in active_period_ids(reference_date)

    if period and period.startswith("SEP"):
        return 90
    if period == "OEP":
        return 85 if open_enrollment else 35

    event_date = parse_date(lead.get("sepEventDate"))
    if event_date is not None:
        days_since = days_between(reference_date, event_date)
        if 0 <= days_since <= 30:
            return 95
        if 0 <= days_since <= 60:
            return 75
    return 40


ACA_COVERAGE_URGENCY = {
    "None/Uninsured": 95,
    "Employer Ending": 90,
    "COBRA": 85,
    "Short-Term": 80,
    "ACA Plan": 40,
}


def score_coverage_urgency(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "currentCoverage"), ACA_COVERAGE_URGENCY, 50)


def score_aca_income_qualification(lead: Lead, reference_date: datetime) -> int:
    income = number(lead, "annualIncome")
    if not income:
        return 50
    if income < 15000:
        return 70  # may qualify for Medicaid instead
    if income <= 40000:
        return 90
    if income <= 60000:
        return 75
    if income <= 80000:
        return 60
    return 40


def score_health_need(lead: Lead, reference_date: datetime) -> int:
    return 80 if lead.get("preExistingConditions") else 40


# === Vision ===

def score_vision_coverage_gap(lead: Lead, reference_date: datetime) -> int:
    coverage = text(lead, "currentVisionCoverage")
    if coverage == "None":
        return 95
    if coverage == "Employer Plan" and flag(lead, "employerOffersVision") is False:
        return 90
    return 40


def score_vision_need(lead: Lead, reference_date: datetime) -> int:
    score = 30
    if lead.get("wearsCorrectiveLenses"):
        score += 25
    if lead.get("diabetic"):
        score += 30  # retinopathy screening

    last_exam = parse_date(lead.get("lastEyeExam"))
    if last_exam is not None:
        months_since = days_between(reference_date, last_exam) / 30
        if months_since > 24:
            score += 20
        elif months_since > 12:
            score += 10
    else:
        score += 15
    return clamp(score)


def score_vision_spend_potential(lead: Lead, reference_date: datetime) -> int:
    spend = number(lead, "annualSpend", 0) or 0
    return bucket(spend, [(500, 90), (300, 75), (150, 60)], 40)


# === Dental ===

def score_dental_coverage_gap(lead: Lead, reference_date: datetime) -> int:
    coverage = text(lead, "currentDentalCoverage")
    if coverage == "None":
        return 95
    if coverage == "Discount Plan":
        return 75
    return 40


def score_dental_urgency(lead: Lead, reference_date: datetime) -> int:
    if lead.get("pendingProcedures"):
        return 90
    needs = items(lead, "dentalNeeds")
    if needs:
        if "Implants" in needs or "Major Restorative" in needs:
            return 85
        if "Orthodontics" in needs:
            return 75
        if "Basic Restorative" in needs:
            return 60
    return 30


def score_dental_spend_potential(lead: Lead, reference_date: datetime) -> int:
    budget = number(lead, "annualBudget", 0) or 0
    return bucket(budget, [(2000, 90), (1000, 75), (500, 60)], 40)


def score_family_size(lead: Lead, reference_date: datetime) -> int:
    members = number(lead, "familyMembers") or 1
    return bucket(members, [(4, 90), (3, 75), (2, 60)], 40)
