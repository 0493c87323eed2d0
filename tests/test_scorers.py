"""Tests for individual dimension scorers."""

import json
from datetime import date, datetime, timedelta

import pytest

from vertical_lead_engine.core import score_lead
from vertical_lead_engine.core.scorers import energy, financial, healthcare, real_estate
from vertical_lead_engine.core.scorers.common import (
    clamp,
    number,
    parse_date,
    round_half_up,
    score_engagement,
    score_geographic_fit,
)

REF = datetime(2024, 6, 15, 12, 0)


class TestReaders:
    """Tests for the lenient field readers."""

    def test_clamp(self):
        assert clamp(-3) == 0
        assert clamp(104.2) == 100
        assert clamp(84.5) == 85
        assert isinstance(clamp(50.0), int)

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2

    def test_number_parses_strings(self):
        assert number({"x": "$150,000"}, "x") == 150000
        assert number({"x": " 42 "}, "x") == 42

    def test_number_rejects_bools_and_junk(self):
        assert number({"x": True}, "x") is None
        assert number({"x": "lots"}, "x", 7) == 7
        assert number({"x": float("nan")}, "x") is None
        assert number({}, "x") is None

    def test_number_ignores_ints_beyond_float_range(self):
        huge = json.loads("1" + "0" * 400)
        assert number({"x": huge}, "x") is None
        assert number({"x": -huge}, "x", 0) == 0
        assert number({"x": 10 ** 300}, "x") == 1e300

    def test_huge_json_int_still_scores(self):
        lead = json.loads('{"businessName": "Acme", "monthlyRevenue": 1' + "0" * 400 + "}")
        result = score_lead(lead, "financial_services", "business_loans", REF)
        assert 0 <= result.score <= 100
        assert result.dimensions["revenueStrength"].score == 15

    def test_parse_date_formats(self):
        assert parse_date("2024-06-01") == datetime(2024, 6, 1)
        assert parse_date("2024-06-01T10:00:00Z") == datetime(2024, 6, 1, 10, 0)
        assert parse_date(date(2024, 6, 1)) == datetime(2024, 6, 1)
        assert parse_date("yesterday") is None
        assert parse_date(20240601) is None


class TestEngagement:
    """Tests for the shared engagement scorer."""

    def test_empty_lead(self):
        assert score_engagement({}, REF) == 20

    def test_maximum_engagement(self):
        lead = {"interactions": 12, "lastContact": REF.isoformat(), "source": "Referral"}
        assert score_engagement(lead, REF) == 95

    @pytest.mark.parametrize("days_ago,bonus", [
        (0.5, 30),
        (2, 25),
        (6, 20),
        (10, 10),
        (20, 5),
        (45, 0),
    ])
    def test_recency_relative_to_reference_date(self, days_ago, bonus):
        lead = {"lastContact": (REF - timedelta(days=days_ago)).isoformat()}
        assert score_engagement(lead, REF) == 20 + bonus

    @pytest.mark.parametrize("interactions,bonus", [(1, 10), (3, 15), (5, 25), (10, 30), (0, 0)])
    def test_interaction_buckets(self, interactions, bonus):
        assert score_engagement({"interactions": interactions}, REF) == 20 + bonus

    def test_unknown_source(self):
        assert score_engagement({"source": "Billboard"}, REF) == 20

    def test_geographic_fit(self):
        assert score_geographic_fit({"state": "OH"}, REF) == 65
        assert score_geographic_fit({"zipCode": "43004"}, REF) == 65
        assert score_geographic_fit({}, REF) == 40


class TestHealthcareScorers:
    """Tests for Medicare, ACA, vision and dental scorers."""

    def test_enrollment_timing_windows(self):
        aep = datetime(2024, 10, 20)
        feb = datetime(2024, 2, 10)
        assert healthcare.score_medicare_enrollment_timing({"enrollmentPeriod": "IEP"}, REF) == 95
        assert healthcare.score_medicare_enrollment_timing({"enrollmentPeriod": "AEP"}, aep) == 90
        assert healthcare.score_medicare_enrollment_timing({"enrollmentPeriod": "AEP"}, REF) == 40
        assert healthcare.score_medicare_enrollment_timing({"enrollmentPeriod": "OEP"}, feb) == 85
        assert healthcare.score_medicare_enrollment_timing({"enrollmentPeriod": "OEP"}, REF) == 30
        assert healthcare.score_medicare_enrollment_timing({"enrollmentPeriod": "SEP"}, REF) == 80
        assert healthcare.score_medicare_enrollment_timing({}, REF) == 30

    @pytest.mark.parametrize("age,expected", [
        (64, 95), (65, 90), (68, 75), (75, 60), (85, 50), (63, 45), (40, 20), (None, 30),
    ])
    def test_age_proximity(self, age, expected):
        lead = {} if age is None else {"age": age}
        assert healthcare.score_medicare_age_proximity(lead, REF) == expected

    def test_health_complexity_ignores_none_entry(self):
        assert healthcare.score_health_complexity({"chronicConditions": ["None"]}, REF) == 30
        lead = {"chronicConditions": ["Diabetes", "COPD", "Cancer", "Heart Disease"], "prescriptionDrugs": 6}
        assert healthcare.score_health_complexity(lead, REF) == 90  # 30 + 40 cap + 20

    def test_aca_sep_event_recency(self):
        recent = {"sepEventDate": (REF - timedelta(days=10)).isoformat()}
        older = {"sepEventDate": (REF - timedelta(days=45)).isoformat()}
        future = {"sepEventDate": (REF + timedelta(days=10)).isoformat()}
        assert healthcare.score_aca_enrollment_timing(recent, REF) == 95
        assert healthcare.score_aca_enrollment_timing(older, REF) == 75
        assert healthcare.score_aca_enrollment_timing(future, REF) == 40

    def test_aca_open_enrollment(self):
        lead = {"enrollmentPeriod": "OEP"}
        assert healthcare.score_aca_enrollment_timing(lead, datetime(2024, 11, 20)) == 85
        assert healthcare.score_aca_enrollment_timing(lead, REF) == 35

    def test_subsidy_eligibility(self):
        assert healthcare.score_aca_subsidy_eligibility({"subsidyEligible": True}, REF) == 90
        assert healthcare.score_aca_subsidy_eligibility({"fpl": 120}, REF) == 95
        assert healthcare.score_aca_subsidy_eligibility({"fpl": 500}, REF) == 40
        assert healthcare.score_aca_subsidy_eligibility({}, REF) == 50

    def test_vision_need_uses_reference_date(self):
        lead = {"lastEyeExam": "2022-01-01"}
        assert healthcare.score_vision_need(lead, REF) == 50  # more than 24 months
        assert healthcare.score_vision_need(lead, datetime(2022, 6, 1)) == 30
        assert healthcare.score_vision_need({}, REF) == 45

    def test_dental_urgency(self):
        assert healthcare.score_dental_urgency({"pendingProcedures": True}, REF) == 90
        assert healthcare.score_dental_urgency({"dentalNeeds": ["Implants"]}, REF) == 85
        assert healthcare.score_dental_urgency({"dentalNeeds": ["Orthodontics"]}, REF) == 75
        assert healthcare.score_dental_urgency({}, REF) == 30


class TestFinancialScorers:
    """Tests for business loan scorers."""

    @pytest.mark.parametrize("revenue,expected", [
        (600000, 95), (300000, 85), (200000, 75), (100000, 65), (50000, 35), (10000, 15),
    ])
    def test_revenue_strength(self, revenue, expected):
        assert financial.score_revenue_strength({"monthlyRevenue": revenue}, REF) == expected

    def test_revenue_strength_tolerates_strings(self):
        assert financial.score_revenue_strength({"monthlyRevenue": "$150,000"}, REF) == 65
        assert financial.score_revenue_strength({"monthlyRevenue": True}, REF) == 15

    def test_creditworthiness(self):
        assert financial.score_creditworthiness({"creditScore": 760}, REF) == 95
        assert financial.score_creditworthiness({"creditScore": 560}, REF) == 30
        assert financial.score_creditworthiness({}, REF) == 50

    def test_debt_service_capacity(self):
        assert financial.score_debt_service_capacity({"dscr": 2.1}, REF) == 95
        assert financial.score_debt_service_capacity({"monthlyRevenue": 100000}, REF) == 80
        lead = {"monthlyRevenue": 100000, "currentDebt": 1000000}
        assert financial.score_debt_service_capacity(lead, REF) == 25  # 1.2x coverage
        negative_debt = {"monthlyRevenue": 100000, "currentDebt": -50000}
        assert financial.score_debt_service_capacity(negative_debt, REF) == 25

    def test_collateral(self):
        assert financial.score_collateral_position({"collateralAvailable": True}, REF) == 85
        assert financial.score_collateral_position({"collateralAvailable": False}, REF) == 30
        assert financial.score_collateral_position({}, REF) == 50


class TestRealEstateScorers:
    """Tests for real estate scorers."""

    def test_purchase_timeline(self):
        assert real_estate.score_purchase_timeline({"purchaseTimeline": "Immediate"}, REF) == 95
        assert real_estate.score_purchase_timeline({"purchaseTimeline": "12+ months"}, REF) == 20
        assert real_estate.score_purchase_timeline({}, REF) == 50

    def test_pre_approval_status(self):
        assert real_estate.score_pre_approval_status({"preApproved": True}, REF) == 90
        lead = {"preApproved": False, "downPaymentReady": True}
        assert real_estate.score_pre_approval_status(lead, REF) == 55
        assert real_estate.score_pre_approval_status({}, REF) == 25

    def test_financial_readiness(self):
        lead = {
            "preApproved": True,
            "downPaymentReady": True,
            "creditScore": 720,
            "preApprovalAmount": 400000,
            "budgetMax": 350000,
        }
        assert real_estate.score_residential_financial_readiness(lead, REF) == 100

    @pytest.mark.parametrize("scorer,lead,expected", [
        (real_estate.score_mfh_financial_capacity,
         {"budgetMax": 1200000, "proofOfFunds": True, "preApproved": True, "financingType": "Cash"}, 95),
        (real_estate.score_mfh_financial_capacity, {}, 20),
        (real_estate.score_investor_experience, {"investorType": "Syndicator"}, 85),
        (real_estate.score_investor_experience, {}, 50),
        (real_estate.score_financing_readiness,
         {"preApproved": True, "proofOfFunds": True, "financingType": "Cash"}, 100),
        (real_estate.score_financing_readiness, {}, 30),
        (real_estate.score_portfolio_growth, {"existingPortfolio": 60}, 85),
        (real_estate.score_portfolio_growth, {"existingPortfolio": 10}, 65),
        (real_estate.score_portfolio_growth, {"existingPortfolio": 1}, 55),
        (real_estate.score_portfolio_growth, {}, 35),
        (real_estate.score_market_knowledge, {"preferredLocations": "Austin"}, 70),
        (real_estate.score_market_knowledge, {"preferredCapRate": 6}, 65),
        (real_estate.score_market_knowledge, {}, 40),
    ])
    def test_multifamily(self, scorer, lead, expected):
        assert scorer(lead, REF) == expected

    @pytest.mark.parametrize("scorer,lead,expected", [
        (real_estate.score_commercial_financial_capacity, {"budgetMax": 12000000}, 95),
        (real_estate.score_commercial_financial_capacity, {"budgetMax": 600000}, 50),
        (real_estate.score_commercial_financial_capacity, {}, 30),
        (real_estate.score_commercial_sophistication, {"entityType": "REIT"}, 95),
        (real_estate.score_commercial_sophistication, {"entityType": "Individual"}, 40),
        (real_estate.score_commercial_sophistication, {}, 50),
        (real_estate.score_commercial_financing_readiness,
         {"proofOfFunds": True, "financingType": "1031 Exchange", "existingPortfolio": 3}, 90),
        (real_estate.score_commercial_financing_readiness, {}, 25),
        (real_estate.score_1031_exchange, {"is1031": True}, 95),
        (real_estate.score_1031_exchange, {"financingType": "1031 Exchange"}, 90),
        (real_estate.score_1031_exchange, {}, 20),
        (real_estate.score_commercial_market_alignment, {"preferredLocations": "Dallas", "tenantStatus": "NNN"}, 75),
        (real_estate.score_commercial_market_alignment, {"noi": 250000}, 55),
        (real_estate.score_commercial_market_alignment, {}, 35),
    ])
    def test_commercial(self, scorer, lead, expected):
        assert scorer(lead, REF) == expected


class TestEnergyScorers:
    """Tests for energy scorers."""

    def test_contract_status_wins_over_end_date(self):
        lead = {"contractStatus": "Locked 6+ months", "contractEndDate": REF.isoformat()}
        assert energy.score_contract_timing(lead, REF) == 15

    @pytest.mark.parametrize("days_until,expected", [(-5, 95), (20, 90), (60, 75), (150, 50), (400, 15)])
    def test_contract_end_date_relative_to_reference(self, days_until, expected):
        lead = {"contractEndDate": (REF + timedelta(days=days_until)).date().isoformat()}
        assert energy.score_contract_timing(lead, REF) == expected

    def test_contract_unknown(self):
        assert energy.score_contract_timing({}, REF) == 50

    def test_deregulated_status(self):
        assert energy.score_deregulated_status({"state": "TX"}, REF) == 90
        assert energy.score_deregulated_status({"state": "CA"}, REF) == 60
        assert energy.score_deregulated_status({"state": "FL"}, REF) == 10
        assert energy.score_deregulated_status({}, REF) == 40
        assert energy.score_deregulated_status({"deregulatedMarket": True, "state": "FL"}, REF) == 90

    def test_savings_potential(self):
        assert energy.score_savings_potential({"monthlyBill": 1000, "estimatedSavings": 250}, REF) == 95
        assert energy.score_savings_potential({"monthlyBill": 1000, "estimatedSavings": 60}, REF) == 55
        assert energy.score_savings_potential({}, REF) == 30

    def test_bill_size(self):
        assert energy.score_business_bill_size({"monthlyBill": 12000}, REF) == 95
        assert energy.score_consumer_bill_size({"monthlyBill": 120}, REF) == 45

    @pytest.mark.parametrize("scorer,lead,expected", [
        (energy.score_existing_customer_base, {"existingCustomerBase": 600}, 95),
        (energy.score_existing_customer_base, {"existingCustomerBase": 150}, 75),
        (energy.score_existing_customer_base, {"existingCustomerBase": 10}, 35),
        (energy.score_existing_customer_base, {}, 15),
        (energy.score_sales_experience, {"salesExperience": 12}, 90),
        (energy.score_sales_experience, {"salesExperience": 4}, 60),
        (energy.score_sales_experience, {}, 20),
        (energy.score_closing_ability, {"closingAbility": "Proven Closer"}, 95),
        (energy.score_closing_ability, {"closingAbility": "Unknown"}, 40),
        (energy.score_network_size, {"existingNetwork": True, "networkSize": 600}, 85),
        (energy.score_network_size, {"existingNetwork": True}, 35),
        (energy.score_network_size, {"existingNetwork": False, "networkSize": 600}, 20),
        (energy.score_agent_availability, {"availability": "Full-Time"}, 90),
        (energy.score_agent_availability, {}, 50),
        (energy.score_industry_relevance, {"industryBackground": ["Energy", "Telecom"]}, 75),
        (energy.score_industry_relevance, {"industryBackground": []}, 20),
        (energy.score_industry_relevance, {}, 40),
        (energy.score_income_motivation, {"monthlyIncomeGoal": 10000, "currentMonthlyIncome": 4000}, 90),
        (energy.score_income_motivation, {"monthlyIncomeGoal": 5000, "currentMonthlyIncome": 4000}, 60),
        (energy.score_income_motivation, {"monthlyIncomeGoal": 6000}, 60),
        (energy.score_income_motivation, {}, 45),
    ])
    def test_independent_agents(self, scorer, lead, expected):
        assert scorer(lead, REF) == expected

    @pytest.mark.parametrize("scorer,lead,expected", [
        (energy.score_cat_company_size, {"annualRevenue": 12000000, "employeeCount": 150}, 85),
        (energy.score_cat_company_size, {"annualRevenue": 2000000, "employeeCount": 10}, 50),
        (energy.score_cat_company_size, {}, 20),
        (energy.score_cat_budget, {"catBudget": 60000}, 80),
        (energy.score_cat_budget, {}, 30),
        (energy.score_cat_decision_timeline, {"decisionTimeline": "Evaluating"}, 60),
        (energy.score_cat_decision_timeline, {}, 45),
        (energy.score_pain_point_severity, {"painPoints": ["Lead Quality", "Compliance", "Cost"]}, 76),
        (energy.score_pain_point_severity, {"painPoints": []}, 20),
        (energy.score_pain_point_severity, {}, 40),
        (energy.score_cat_agent_scale, {"agentCount": 25}, 65),
        (energy.score_cat_agent_scale, {}, 30),
        (energy.score_cat_tool_gap, {}, 85),
        (energy.score_cat_tool_gap, {"currentCAT": "Spreadsheets"}, 80),
        (energy.score_cat_tool_gap, {"currentCAT": "Five9"}, 35),
    ])
    def test_cat_buyers(self, scorer, lead, expected):
        assert scorer(lead, REF) == expected
