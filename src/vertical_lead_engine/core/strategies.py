"""Registry mapping (industry, sub-vertical) to the dimensions scored for it."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .scorers import energy, financial, healthcare, real_estate
from .scorers.common import Scorer, score_engagement, score_geographic_fit


@dataclass(frozen=True)
class Dimension:
    """A named scoring axis, its scorer, and the weight used when config omits one."""

    key: str
    label: str
    default_weight: Optional[float]
    scorer: Scorer


@dataclass(frozen=True)
class ScoringStrategy:
    """Ordered set of dimensions evaluated for one sub-vertical."""

    industry_id: str
    sub_vertical_id: str
    dimensions: Tuple[Dimension, ...] = field(default_factory=tuple)

    @property
    def keys(self) -> List[str]:
        """Dimension keys in scoring order."""
        return [d.key for d in self.dimensions]


ENGAGEMENT_KEY = "engagementSignal"
GEOGRAPHIC_KEY = "geographicFit"


def _engagement(weight: float) -> Dimension:
    return Dimension(ENGAGEMENT_KEY, "Engagement", weight, score_engagement)


def _geographic(weight: float) -> Dimension:
    return Dimension(GEOGRAPHIC_KEY, "Geographic Fit", weight, score_geographic_fit)


def _strategy(industry_id: str, sub_vertical_id: str, *dimensions: Dimension) -> ScoringStrategy:
    return ScoringStrategy(industry_id, sub_vertical_id, tuple(dimensions))


STRATEGIES: Dict[str, Dict[str, ScoringStrategy]] = {
    "healthcare": {
        "medicare": _strategy(
            "healthcare", "medicare",
            Dimension("enrollmentTiming", "Enrollment Timing", 0.25, healthcare.score_medicare_enrollment_timing),
            Dimension("coverageGap", "Coverage Gap", 0.20, healthcare.score_medicare_coverage_gap),
            Dimension("ageProximity", "Age Proximity", 0.15, healthcare.score_medicare_age_proximity),
            _engagement(0.15),
            Dimension("healthComplexity", "Health Complexity", 0.10, healthcare.score_health_complexity),
            Dimension("incomeQualification", "Income Qualification", 0.10,
                      healthcare.score_medicare_income_qualification),
            _geographic(0.05),
        ),
        "aca": _strategy(
            "healthcare", "aca",
            Dimension("subsidyEligibility", "Subsidy Eligibility", 0.20, healthcare.score_aca_subsidy_eligibility),
            Dimension("enrollmentTiming", "Enrollment Timing", 0.20, healthcare.score_aca_enrollment_timing),
            Dimension("coverageUrgency", "Coverage Urgency", 0.20, healthcare.score_coverage_urgency),
            Dimension("incomeQualification", "Income Qualification", 0.15,
                      healthcare.score_aca_income_qualification),
            _engagement(0.10),
            Dimension("healthNeed", "Health Need", 0.10, healthcare.score_health_need),
            _geographic(0.05),
        ),
        "vision": _strategy(
            "healthcare", "vision",
            Dimension("coverageGap", "Coverage Gap", 0.25, healthcare.score_vision_coverage_gap),
            Dimension("healthNeed", "Vision Need", 0.20, healthcare.score_vision_need),
            _engagement(0.20),
            Dimension("spendPotential", "Spend Potential", 0.15, healthcare.score_vision_spend_potential),
            Dimension("familySize", "Family Size", 0.10, healthcare.score_family_size),
            _geographic(0.10),
        ),
        "dental": _strategy(
            "healthcare", "dental",
            Dimension("coverageGap", "Coverage Gap", 0.25, healthcare.score_dental_coverage_gap),
            Dimension("procedureUrgency", "Procedure Urgency", 0.20, healthcare.score_dental_urgency),
            _engagement(0.20),
            Dimension("spendPotential", "Spend Potential", 0.15, healthcare.score_dental_spend_potential),
            Dimension("familySize", "Family Size", 0.10, healthcare.score_family_size),
            _geographic(0.10),
        ),
    },
    "financial_services": {
        "business_loans": _strategy(
            "financial_services", "business_loans",
            Dimension("revenueStrength", "Revenue Strength", 0.25, financial.score_revenue_strength),
            Dimension("creditworthiness", "Creditworthiness", 0.20, financial.score_creditworthiness),
            Dimension("businessMaturity", "Business Maturity", 0.15, financial.score_business_maturity),
            Dimension("debtServiceCapacity", "Debt Service Capacity", 0.15, financial.score_debt_service_capacity),
            Dimension("urgencySignal", "Funding Urgency", 0.10, financial.score_funding_urgency),
            _engagement(0.10),
            Dimension("collateralPosition", "Collateral Position", 0.05, financial.score_collateral_position),
        ),
        "exit_liquidity": _strategy(
            "financial_services", "exit_liquidity",
            Dimension("businessValue", "Business Value", 0.25, financial.score_business_value),
            Dimension("exitReadiness", "Exit Readiness", 0.20, financial.score_exit_readiness),
            Dimension("timelineUrgency", "Timeline Urgency", 0.20, financial.score_exit_timeline),
            Dimension("financialHealth", "Financial Health", 0.15, financial.score_exit_financial_health),
            _engagement(0.10),
            Dimension("advisorGap", "Advisor Gap", 0.10, financial.score_advisor_gap),
        ),
        "wealth_management": _strategy(
            "financial_services", "wealth_management",
            Dimension("assetLevel", "Asset Level", 0.25, financial.score_asset_level),
            Dimension("advisorDissatisfaction", "Advisor Dissatisfaction", 0.20,
                      financial.score_advisor_dissatisfaction),
            Dimension("lifeEventTrigger", "Life Event Trigger", 0.15, financial.score_life_event_trigger),
            _engagement(0.15),
            Dimension("wealthGrowthPotential", "Wealth Growth Potential", 0.10,
                      financial.score_wealth_growth_potential),
            Dimension("complexityNeed", "Complexity Need", 0.10, financial.score_complexity_need),
            _geographic(0.05),
        ),
    },
    "real_estate": {
        "residential_sfh": _strategy(
            "real_estate", "residential_sfh",
            Dimension("financialReadiness", "Financial Readiness", 0.25,
                      real_estate.score_residential_financial_readiness),
            Dimension("timelineUrgency", "Timeline Urgency", 0.20, real_estate.score_purchase_timeline),
            Dimension("preApprovalStatus", "Pre-Approval Status", 0.15, real_estate.score_pre_approval_status),
            _engagement(0.15),
            Dimension("motivationLevel", "Motivation Level", 0.10, real_estate.score_buyer_motivation),
            Dimension("marketAlignment", "Market Alignment", 0.10, real_estate.score_market_alignment),
            Dimension("agentStatus", "Agent Status", 0.05, real_estate.score_agent_status),
        ),
        "residential_mfh": _strategy(
            "real_estate", "residential_mfh",
            Dimension("financialCapacity", "Financial Capacity", 0.25, real_estate.score_mfh_financial_capacity),
            Dimension("investorExperience", "Investor Experience", 0.15, real_estate.score_investor_experience),
            Dimension("timelineUrgency", "Timeline Urgency", 0.20, real_estate.score_purchase_timeline),
            Dimension("financingReadiness", "Financing Readiness", 0.15, real_estate.score_financing_readiness),
            _engagement(0.10),
            Dimension("portfolioGrowth", "Portfolio Growth", 0.10, real_estate.score_portfolio_growth),
            Dimension("marketKnowledge", "Market Knowledge", 0.05, real_estate.score_market_knowledge),
        ),
        "commercial": _strategy(
            "real_estate", "commercial",
            Dimension("financialCapacity", "Financial Capacity", 0.25,
                      real_estate.score_commercial_financial_capacity),
            Dimension("timelineUrgency", "Timeline Urgency", 0.20, real_estate.score_purchase_timeline),
            Dimension("investorSophistication", "Investor Sophistication", 0.15,
                      real_estate.score_commercial_sophistication),
            Dimension("financingReadiness", "Financing Readiness", 0.15,
                      real_estate.score_commercial_financing_readiness),
            _engagement(0.10),
            Dimension("dealFlow1031", "1031 Exchange", 0.10, real_estate.score_1031_exchange),
            Dimension("marketAlignment", "Market Alignment", 0.05, real_estate.score_commercial_market_alignment),
        ),
    },
    "energy": {
        "end_customer_business": _strategy(
            "energy", "end_customer_business",
            Dimension("contractTiming", "Contract Timing", 0.25, energy.score_contract_timing),
            Dimension("savingsPotential", "Savings Potential", 0.20, energy.score_savings_potential),
            Dimension("deregulatedStatus", "Deregulated Status", 0.15, energy.score_deregulated_status),
            Dimension("billSize", "Bill Size", 0.15, energy.score_business_bill_size),
            _engagement(0.10),
            Dimension("multiLocationValue", "Multi-Location Value", 0.10, energy.score_multi_location),
            Dimension("bundleOpportunity", "Bundle Opportunity", 0.05, energy.score_bundle_opportunity),
        ),
        "end_customer_consumer": _strategy(
            "energy", "end_customer_consumer",
            Dimension("contractTiming", "Contract Timing", 0.25, energy.score_contract_timing),
            Dimension("savingsPotential", "Savings Potential", 0.20, energy.score_savings_potential),
            Dimension("deregulatedStatus", "Deregulated Status", 0.15, energy.score_deregulated_status),
            Dimension("homeownership", "Homeownership", 0.10, energy.score_homeownership),
            _engagement(0.15),
            Dimension("bundleOpportunity", "Bundle Opportunity", 0.10, energy.score_bundle_opportunity),
            Dimension("creditWorthiness", "Credit Worthiness", 0.05, energy.score_consumer_credit),
        ),
        "independent_agents": _strategy(
            "energy", "independent_agents",
            Dimension("existingCustomerBase", "Customer Base", 0.25, energy.score_existing_customer_base),
            Dimension("salesExperience", "Sales Experience", 0.20, energy.score_sales_experience),
            Dimension("closingAbility", "Closing Ability", 0.15, energy.score_closing_ability),
            Dimension("networkSize", "Network Size", 0.15, energy.score_network_size),
            Dimension("availability", "Availability", 0.10, energy.score_agent_availability),
            Dimension("industryRelevance", "Industry Relevance", 0.10, energy.score_industry_relevance),
            Dimension("incomeMotivation", "Income Motivation", 0.05, energy.score_income_motivation),
        ),
        "cat_buyer": _strategy(
            "energy", "cat_buyer",
            Dimension("companySize", "Company Size", 0.20, energy.score_cat_company_size),
            Dimension("catBudget", "CAT Budget", 0.20, energy.score_cat_budget),
            Dimension("decisionTimeline", "Decision Timeline", 0.20, energy.score_cat_decision_timeline),
            Dimension("painPointSeverity", "Pain Point Severity", 0.15, energy.score_pain_point_severity),
            _engagement(0.10),
            Dimension("agentScale", "Agent Scale", 0.10, energy.score_cat_agent_scale),
            Dimension("currentToolGap", "Current Tool Gap", 0.05, energy.score_cat_tool_gap),
        ),
    },
}


def get_strategy(industry_id: str, sub_vertical_id: str) -> Optional[ScoringStrategy]:
    """Resolve the strategy for a pair, or None when nothing is registered."""
    by_sub_vertical = STRATEGIES.get(industry_id)
    if by_sub_vertical is None:
        return None
    return by_sub_vertical.get(sub_vertical_id)


def registered_pairs() -> List[Tuple[str, str]]:
    return [(industry, sub) for industry, subs in STRATEGIES.items() for sub in subs]
