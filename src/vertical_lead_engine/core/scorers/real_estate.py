"""Real estate scorers for single-family, multifamily and commercial buyers."""

from datetime import datetime

from .common import Lead, bucket, clamp, flag, lookup, number, text


PURCHASE_TIMELINE = {
    "Immediate": 95,
    "1-3 months": 80,
    "3-6 months": 60,
    "6-12 months": 40,
    "12+ months": 20,
}


def score_purchase_timeline(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "purchaseTimeline"), PURCHASE_TIMELINE, 50)


# === Single family ===

def score_residential_financial_readiness(lead: Lead, reference_date: datetime) -> int:
    score = 20
    if lead.get("preApproved"):
        score += 30
    if lead.get("downPaymentReady"):
        score += 25

    credit = number(lead, "creditScore")
    if credit and credit >= 700:
        score += 15
    elif credit and credit >= 620:
        score += 10

    approval = number(lead, "preApprovalAmount")
    budget = number(lead, "budgetMax")
    if approval and budget and approval >= budget:
        score += 10
    return clamp(score)


def score_pre_approval_status(lead: Lead, reference_date: datetime) -> int:
    approved = flag(lead, "preApproved")
    if approved is True:
        return 90
    if approved is False and lead.get("downPaymentReady"):
        return 55
    return 25


def score_buyer_motivation(lead: Lead, reference_date: datetime) -> int:
    score = 40
    housing = text(lead, "currentHousing")
    if housing == "Renting":
        score += 15
    elif housing == "Living with Family":
        score += 20
    if flag(lead, "mustSellFirst") is False:
        score += 15

    buyer_type = text(lead, "buyerType")
    if buyer_type == "Relocation":
        score += 15
    elif buyer_type == "First-Time":
        score += 10
    return clamp(score)


def score_market_alignment(lead: Lead, reference_date: datetime) -> int:
    budget = number(lead, "budgetMax", 0) or 0
    return bucket(budget, [(200000, 70), (100000, 50)], 35)


def score_agent_status(lead: Lead, reference_date: datetime) -> int:
    has_agent = flag(lead, "hasAgent")
    if has_agent is False:
        return 90
    if has_agent is True:
        return 20
    return 55


# === Multifamily ===

def score_mfh_financial_capacity(lead: Lead, reference_date: datetime) -> int:
    score = 20
    budget = number(lead, "budgetMax", 0) or 0
    score += bucket(budget, [(5000000, 35), (1000000, 30), (500000, 25), (200000, 15)], 0)

    if lead.get("proofOfFunds"):
        score += 20
    if lead.get("preApproved"):
        score += 15
    if text(lead, "financingType") == "Cash":
        score += 10
    return clamp(score)


INVESTOR_EXPERIENCE = {
    "Institutional": 90,
    "Syndicator": 85,
    "Experienced": 75,
    "1031 Exchange": 70,
    "First-Time Investor": 45,
    "House Hacker": 40,
}


def score_investor_experience(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "investorType"), INVESTOR_EXPERIENCE, 50)


def score_financing_readiness(lead: Lead, reference_date: datetime) -> int:
    score = 30
    if lead.get("preApproved"):
        score += 30
    if lead.get("proofOfFunds"):
        score += 25
    if text(lead, "financingType") == "Cash":
        score += 15
    return clamp(score)


def score_portfolio_growth(lead: Lead, reference_date: datetime) -> int:
    existing = number(lead, "existingPortfolio", 0) or 0
    if existing > 50:
        return 85
    if existing > 20:
        return 75
    if existing > 5:
        return 65
    if existing > 0:
        return 55
    return 35


def score_market_knowledge(lead: Lead, reference_date: datetime) -> int:
    if lead.get("preferredLocations"):
        return 70
    if (number(lead, "preferredCapRate", 0) or 0) > 0:
        return 65
    return 40


# === Commercial ===

def score_commercial_financial_capacity(lead: Lead, reference_date: datetime) -> int:
    budget = number(lead, "budgetMax", 0) or 0
    return bucket(
        budget,
        [(10000000, 95), (5000000, 85), (2000000, 75), (1000000, 65), (500000, 50)],
        30,
    )


ENTITY_SOPHISTICATION = {
    "REIT": 95,
    "Fund": 95,
    "Corporation": 75,
    "LLC": 65,
    "Partnership": 65,
    "Trust": 60,
    "Individual": 40,
}


def score_commercial_sophistication(lead: Lead, reference_date: datetime) -> int:
    return lookup(text(lead, "entityType"), ENTITY_SOPHISTICATION, 50)


def score_commercial_financing_readiness(lead: Lead, reference_date: datetime) -> int:
    score = 25
    if lead.get("proofOfFunds"):
        score += 30
    financing = text(lead, "financingType")
    if financing == "Cash":
        score += 25
    elif financing == "1031 Exchange":
        score += 20
    if (number(lead, "existingPortfolio", 0) or 0) > 0:
        score += 15
    return clamp(score)


def score_1031_exchange(lead: Lead, reference_date: datetime) -> int:
    if flag(lead, "is1031") is True:
        return 95
    if text(lead, "financingType") == "1031 Exchange":
        return 90
    return 20


def score_commercial_market_alignment(lead: Lead, reference_date: datetime) -> int:
    locations = lead.get("preferredLocations")
    if locations and lead.get("tenantStatus"):
        return 75
    if locations or lead.get("noi"):
        return 55
    return 35
