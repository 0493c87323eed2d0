"""Energy scorers: business/consumer switching, independent agents and CAT buyers."""

from datetime import datetime

from ...config.markets import get_deregulation_level
from .common import Lead, bucket, clamp, days_between, flag, items, lookup, number, parse_date, text


CONTRACT_STATUS = {
    "Expiring < 3 months": 95,
    "No Contract": 90,
    "Month-to-Month": 85,
    "Expiring 3-6 months": 70,
    "Locked 6+ months": 15,
}


def score_contract_timing(lead: Lead, reference_date: datetime) -> int:
    """Declared contract status wins; otherwise count days until the contract end date."""
    status = text(lead, "contractStatus")
    if status in CONTRACT_STATUS:
        return CONTRACT_STATUS[status]

    end_date = parse_date(lead.get("contractEndDate"))
    if end_date is not None:
        days_until = days_between(end_date, reference_date)
        if days_until <= 0:
            return 95
        if days_until <= 30:
            return 90
        if days_until <= 90:
            return 75
        if days_until <= 180:
            return 50
        return 15
    return 50


def score_savings_potential(lead: Lead, reference_date: datetime) -> int:
    savings = number(lead, "estimatedSavings", 0) or 0
    bill = number(lead, "monthlyBill") or 1
    savings_percent = savings / bill * 100
    return bucket(savings_percent, [(20, 95), (15, 85), (10, 70), (5, 55)], 30)


def score_deregulated_status(lead: Lead, reference_date: datetime) -> int:
    if flag(lead, "deregulatedMarket") is True:
        return 90
    state = text(lead, "state")
    if state:
        level = get_deregulation_level(state)
        if level == "full":
            return 90
        if level == "partial":
            return 60
        return 10
    return 40


def score_business_bill_size(lead: Lead, reference_date: datetime) -> int:
    bill = number(lead, "monthlyBill", 0) or 0
    return bucket(bill, [(10000, 95), (5000, 85), (2000, 70), (1000, 55)], 30)


def score_consumer_bill_size(lead: Lead, reference_date: datetime) -> int:
    bill = number(lead, "monthlyBill", 0) or 0
    return bucket(bill, [(400, 90), (250, 75), (150, 60), (100, 45)], 25)


def score_multi_location(lead: Lead, reference_date: datetime) -> int:
    locations = number(lead, "numLocations") or 1
    return bucket(locations, [(10, 95), (5, 85), (3, 70), (2, 55)], 30)


def score_bundle_opportunity(lead: Lead, reference_date: datetime) -> int:
    score = 20
    if lead.get("interestedInATT"):
        score += 40
    telecom = text(lead, "currentTelecom")
    if telecom and telecom != "AT&T":
        score += 20
    if lead.get("greenInterest") or lead.get("solarInterest"):
        score += 15
    return clamp(score)


def score_homeownership(lead: Lead, reference_date: datetime) -> int:
    owner = flag(lead, "homeOwner")
    if owner is True:
        return 80
    if owner is False:
        return 35
    return 50


def score_consumer_credit(lead: Lead, reference_date: datetime) -> int:
    worthy = flag(lead, "creditWorthy")
    if worthy is True:
        return 80
    if worthy is False:
        return 30
    return 50


# === Independent agents ===

def score_existing_customer_base(lead: Lead, reference_date: datetime) -> int:
    base = number(lead, "existingCustomerBase", 0) or 0
    if base <= 0:
        return 15
    return bucket(base, [(500, 95), (200, 85), (100, 75), (50, 65), (20, 50)], 35)


def score_sales_experience(lead: Lead, reference_date: datetime) -> int:
    years = number(lead, "salesExperience", 0) or 0
    return bucket(years, [(10, 90), (7, 80), (5, 70), (3, 60), (1, 45)], 20)


CLOSING_ABILITY = {
    "Proven Closer": 95,
    "Good": 75,
    "Average": 55,
    "Learning": 35,
}


def score_closing_ability(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "closingAbility"), CLOSING_ABILITY, 40)


def score_network_size(lead: Lead, reference_date: datetime) -> int:
    if flag(lead, "existingNetwork") is not True:
        return 20
    size = number(lead, "networkSize", 0) or 0
    return bucket(size, [(1000, 95), (500, 85), (200, 70), (50, 55)], 35)


AGENT_AVAILABILITY = {
    "Full-Time": 90,
    "Part-Time": 65,
    "Side Hustle": 45,
    "Weekend Only": 30,
}


def score_agent_availability(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "availability"), AGENT_AVAILABILITY, 50)


BACKGROUND_POINTS = {
    "Energy": 30,
    "Telecom": 25,
    "Insurance": 15,
    "D2D": 15,
    "B2B": 10,
}


def score_industry_relevance(lead: Lead, reference_date: datetime) -> int:
    background = items(lead, "industryBackground")
    if background is None:
        return 40
    score = 20 + sum(points for name, points in BACKGROUND_POINTS.items() if name in background)
    return clamp(score)


def score_income_motivation(lead: Lead, reference_date: datetime) -> int:
    goal = number(lead, "monthlyIncomeGoal", 0) or 0
    current = number(lead, "currentMonthlyIncome", 0) or 0
    if goal > 0 and current > 0:
        gap = (goal - current) / current
        return bucket(gap, [(1.0, 90), (0.5, 75), (0.25, 60)], 40)
    return bucket(goal, [(10000, 75), (5000, 60)], 45)


# === CAT buyers ===

def score_cat_company_size(lead: Lead, reference_date: datetime) -> int:
    revenue = number(lead, "annualRevenue", 0) or 0
    employees = number(lead, "employeeCount", 0) or 0
    score = 20
    score += bucket(revenue, [(10000000, 40), (5000000, 30), (1000000, 20)], 0)
    score += bucket(employees, [(100, 25), (50, 20), (20, 15), (5, 10)], 0)
    return clamp(score)


def score_cat_budget(lead: Lead, reference_date: datetime) -> int:
    budget = number(lead, "catBudget", 0) or 0
    return bucket(budget, [(100000, 95), (50000, 80), (25000, 65), (10000, 50)], 30)


CAT_DECISION_TIMELINE = {
    "Immediate": 95,
    "1-3 months": 80,
    "Evaluating": 60,
    "3-6 months": 55,
    "6+ months": 30,
}


def score_cat_decision_timeline(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "decisionTimeline"), CAT_DECISION_TIMELINE, 45)


def score_pain_point_severity(lead: Lead, reference_date: datetime) -> int:
    pains = items(lead, "painPoints")
    if pains is None:
        return 40
    score = 20 + min(len(pains) * 12, 50)
    if "Lead Quality" in pains:
        score += 10
    if "Compliance" in pains:
        score += 10
    return clamp(score)


def score_cat_agent_scale(lead: Lead, reference_date: datetime) -> int:
    agents = number(lead, "agentCount", 0) or 0
    return bucket(agents, [(100, 95), (50, 80), (20, 65), (10, 50)], 30)


def score_cat_tool_gap(lead: Lead, reference_date: datetime) -> int:
    tool = text(lead, "currentCAT")
    if tool is None or tool == "None":
        return 85
    if tool in ("Spreadsheets", "Manual"):
        return 80
    return 35
