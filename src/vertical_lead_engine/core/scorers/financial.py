"""Financial services scorers: business loans, exit/liquidity and wealth management."""

from datetime import datetime

from .common import Lead, bucket, clamp, flag, items, lookup, number, text


# === Business loans ===

def score_revenue_strength(lead: Lead, reference_date: datetime) -> int:
    monthly = number(lead, "monthlyRevenue", 0) or 0
    # 100K/month is the lending minimum
    return bucket(monthly, [(500000, 95), (300000, 85), (200000, 75), (100000, 65), (50000, 35)], 15)


def score_creditworthiness(lead: Lead, reference_date: datetime) -> int:
    credit = number(lead, "creditScore")
    if not credit:
        return 50
    return bucket(credit, [(750, 95), (700, 85), (680, 75), (650, 60), (600, 45), (550, 30)], 15)


def score_business_maturity(lead: Lead, reference_date: datetime) -> int:
    years = number(lead, "yearsInBusiness")
    if not years:
        return 40
    return bucket(years, [(10, 90), (5, 80), (3, 65), (2, 50), (1, 35)], 15)


def score_debt_service_capacity(lead: Lead, reference_date: datetime) -> int:
    """Use DSCR when supplied, otherwise estimate from annualised revenue over debt."""
    dscr = number(lead, "dscr")
    if not dscr:
        revenue = number(lead, "monthlyRevenue", 0) or 0
        debt = number(lead, "currentDebt", 0) or 0
        if debt == 0:
            return 80
        ratio = (revenue * 12) / debt
        if ratio > 5:
            return 85
        if ratio > 3:
            return 70
        if ratio > 1.5:
            return 50
        return 25
    return bucket(dscr, [(2.0, 95), (1.5, 80), (1.25, 65), (1.0, 45)], 20)


FUNDING_URGENCY = {
    "Immediate (< 1 week)": 95,
    "Short-term (1-4 weeks)": 80,
    "Medium (1-3 months)": 60,
    "Planning (3+ months)": 35,
}


def score_funding_urgency(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "urgency"), FUNDING_URGENCY, 50)


def score_collateral_position(lead: Lead, reference_date: datetime) -> int:
    available = flag(lead, "collateralAvailable")
    if available is True:
        return 85
    if available is False:
        return 30
    return 50


# === Exit / liquidity ===

def score_business_value(lead: Lead, reference_date: datetime) -> int:
    valuation = number(lead, "businessValuation", 0) or 0
    ebitda = number(lead, "ebitda", 0) or 0
    value = valuation or ebitda * 5
    return bucket(value, [(50000000, 95), (20000000, 85), (10000000, 75), (5000000, 65), (1000000, 50)], 30)


def score_exit_readiness(lead: Lead, reference_date: datetime) -> int:
    score = 30
    if lead.get("successionPlan"):
        score += 20
    if (number(lead, "recurringRevenue", 0) or 0) > 50:
        score += 15
    if (number(lead, "ebitda", 0) or 0) > 0:
        score += 15
    if flag(lead, "hasAdvisor") is False:
        score += 10
    if (number(lead, "employeeCount", 0) or 0) > 10:
        score += 10
    return clamp(score)


EXIT_TIMELINE = {
    "Immediate (< 6 months)": 95,
    "6-12 months": 80,
    "1-2 years": 60,
    "2-5 years": 40,
    "Exploring options": 50,
}


def score_exit_timeline(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "exitTimeline"), EXIT_TIMELINE, 35)


def score_exit_financial_health(lead: Lead, reference_date: datetime) -> int:
    revenue = number(lead, "annualRevenue", 0) or 0
    ebitda = number(lead, "ebitda", 0) or 0
    margin = ebitda / revenue if revenue > 0 else 0
    return bucket(margin, [(0.3, 90), (0.2, 75), (0.15, 60), (0.1, 45)], 30)


def score_advisor_gap(lead: Lead, reference_date: datetime) -> int:
    has_advisor = flag(lead, "hasAdvisor")
    if has_advisor is False:
        return 85
    if has_advisor is True:
        return 30
    return 55


# === Wealth management ===

def score_asset_level(lead: Lead, reference_date: datetime) -> int:
    assets = number(lead, "investableAssets", 0) or 0
    return bucket(
        assets,
        [(10000000, 95), (5000000, 90), (2000000, 80), (1000000, 70), (500000, 60), (250000, 50)],
        20,
    )


ADVISOR_SATISFACTION = {
    "Dissatisfied": 95,
    "No Advisor": 90,
    "Neutral": 70,
    "Satisfied": 25,
    "Very Satisfied": 10,
}


def score_advisor_dissatisfaction(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "advisorSatisfaction"), ADVISOR_SATISFACTION, 50)


LIFE_EVENTS = {
    "Business Sale": 95,
    "Inheritance": 90,
    "Divorce": 85,
    "Windfall": 85,
    "Retirement": 80,
    "Death of Spouse": 80,
    "None": 20,
}


def score_life_event_trigger(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "lifeEvent"), LIFE_EVENTS, 30)


def score_wealth_growth_potential(lead: Lead, reference_date: datetime) -> int:
    income = number(lead, "annualIncome", 0) or 0
    assets = number(lead, "investableAssets", 0) or 0
    if income > 0 and assets > 0:
        ratio = income / assets
        if ratio > 0.5:
            return 85
        if ratio > 0.3:
            return 70
        if ratio > 0.15:
            return 55
        return 40
    return 45


def score_complexity_need(lead: Lead, reference_date: datetime) -> int:
    score = 30
    goals = items(lead, "investmentGoals")
    if goals:
        score += min(len(goals) * 10, 40)

    client_type = text(lead, "clientType")
    if client_type in ("Trust", "Foundation"):
        score += 20
    elif client_type == "Family":
        score += 10
    return clamp(score)
