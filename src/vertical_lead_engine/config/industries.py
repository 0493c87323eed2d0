"""Built-in industry definitions: sub-vertical schemas, weights and qualification criteria.

The data uses the same camelCase JSON shape accepted by
``IndustryConfigStore.from_file`` so a deployment can copy and tune it.
"""

from typing import Any, Dict, List, Optional


def _col(key: str, label: str, type_: str = "text", options: Optional[List[str]] = None,
         sortable: bool = True) -> Dict[str, Any]:
    column: Dict[str, Any] = {"key": key, "label": label, "type": type_, "sortable": sortable}
    if options:
        column["options"] = options
    return column


TIMELINES = ["Immediate", "1-3 months", "3-6 months", "6-12 months", "12+ months"]
CONTRACT_STATUSES = ["No Contract", "Month-to-Month", "Expiring < 3 months",
                     "Expiring 3-6 months", "Locked 6+ months"]

# Columns every lead carries regardless of sub-vertical
BASE_COLUMNS: List[Dict[str, Any]] = [
    {**_col("id", "ID", sortable=False), "system": True},
    {**_col("status", "Status", "select", ["Hot", "Warm", "Cold", "New", "Qualified", "Disqualified"]),
     "system": True},
    {**_col("score", "Score", "number"), "system": True},
    {**_col("source", "Source"), "system": True},
    {**_col("interactions", "Interactions", "number"), "system": True},
    {**_col("createdAt", "Created", "date"), "system": True},
    {**_col("lastContact", "Last Contact", "date"), "system": True},
    {**_col("assignedTo", "Assigned To"), "system": True},
    {**_col("notes", "Notes", sortable=False), "system": True},
]


HEALTHCARE: Dict[str, Any] = {
    "id": "healthcare",
    "name": "Healthcare",
    "icon": "Heart",
    "color": "#10b981",
    "description": "Medicare, ACA, Vision, Dental, and supplemental insurance leads",
    "subVerticals": [
        {
            "id": "medicare",
            "name": "Medicare Products",
            "description": "Medicare Advantage, Medigap, Part D prescription drug plans",
            "leadTypes": ["Medicare Advantage", "Medigap/Supplement", "Part D", "Medicare + Medicaid (Dual)"],
            "columns": [
                _col("age", "Age", "number"),
                _col("dateOfBirth", "Date of Birth", "date"),
                _col("medicareEligibilityDate", "Medicare Eligibility", "date"),
                _col("currentCoverage", "Current Coverage", "select",
                     ["None", "Original Medicare", "Medicare Advantage", "Medigap", "Employer", "Medicaid"]),
                _col("partAEffective", "Part A Effective", "date", sortable=False),
                _col("partBEffective", "Part B Effective", "date", sortable=False),
                _col("enrollmentPeriod", "Enrollment Period", "select", ["IEP", "AEP", "OEP", "SEP", "GI", "N/A"]),
                _col("zipCode", "ZIP Code"),
                _col("county", "County"),
                _col("prescriptionDrugs", "Rx Drugs (count)", "number"),
                _col("preferredDoctors", "Preferred Doctors", sortable=False),
                _col("chronicConditions", "Chronic Conditions", "multiselect",
                     ["Diabetes", "Heart Disease", "COPD", "Cancer", "Kidney Disease", "None"], sortable=False),
                _col("incomeLevel", "Income Bracket", "select",
                     ["Below $22K", "$22K-$35K", "$35K-$55K", "$55K-$85K", "$85K+"]),
                _col("preferredCarrier", "Preferred Carrier"),
                _col("tobaccoUse", "Tobacco Use", "boolean"),
                _col("dualEligible", "Dual Eligible (Medicaid)", "boolean"),
            ],
            "scoringWeights": {
                "enrollmentTiming": 0.25,
                "coverageGap": 0.20,
                "ageProximity": 0.15,
                "engagementSignal": 0.15,
                "healthComplexity": 0.10,
                "incomeQualification": 0.10,
                "geographicFit": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["age", "zipCode", "enrollmentPeriod"],
                "thresholds": {"age": {"min": 64, "max": 100}},
                "disqualifiers": ["Under 64 with no disability", "Already enrolled and satisfied"],
            },
        },
        {
            "id": "aca",
            "name": "ACA Marketplace",
            "description": "Affordable Care Act marketplace plans, subsidies, and special enrollment",
            "leadTypes": ["Individual", "Family", "Small Group", "COBRA Transition", "Medicaid Referral"],
            "columns": [
                _col("age", "Age", "number"),
                _col("householdSize", "Household Size", "number"),
                _col("annualIncome", "Annual Income", "currency"),
                _col("fpl", "FPL %", "number"),
                _col("currentCoverage", "Current Coverage", "select",
                     ["None/Uninsured", "COBRA", "Short-Term", "Employer Ending", "ACA Plan", "Medicaid"]),
                _col("subsidyEligible", "Subsidy Eligible", "boolean"),
                _col("estimatedSubsidy", "Est. Subsidy ($/mo)", "currency"),
                _col("enrollmentPeriod", "Enrollment Period", "select",
                     ["OEP", "SEP - Job Loss", "SEP - Life Event", "SEP - Medicaid Loss", "N/A"]),
                _col("zipCode", "ZIP Code"),
                _col("state", "State"),
                _col("preExistingConditions", "Pre-existing Conditions", "boolean"),
                _col("preferredPlanType", "Preferred Plan", "select",
                     ["Bronze", "Silver", "Gold", "Platinum", "Catastrophic", "Undecided"]),
                _col("tobaccoUse", "Tobacco Use", "boolean"),
                _col("sepQualifyingEvent", "SEP Qualifying Event", sortable=False),
                _col("sepEventDate", "SEP Event Date", "date"),
            ],
            "scoringWeights": {
                "subsidyEligibility": 0.20,
                "enrollmentTiming": 0.20,
                "coverageUrgency": 0.20,
                "incomeQualification": 0.15,
                "engagementSignal": 0.10,
                "healthNeed": 0.10,
                "geographicFit": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["age", "householdSize", "annualIncome", "zipCode"],
                "thresholds": {"age": {"min": 0, "max": 64}},
                "disqualifiers": ["Medicare eligible", "Medicaid enrolled and satisfied"],
            },
        },
        {
            "id": "vision",
            "name": "Vision Insurance",
            "description": "Individual and family vision coverage plans",
            "leadTypes": ["Individual", "Family", "Employer Add-On", "Senior Vision"],
            "columns": [
                _col("age", "Age", "number"),
                _col("currentVisionCoverage", "Current Coverage", "select",
                     ["None", "Employer Plan", "Individual Plan", "Medicare Vision", "Medicaid Vision"]),
                _col("lastEyeExam", "Last Eye Exam", "date"),
                _col("wearsCorrectiveLenses", "Corrective Lenses", "boolean"),
                _col("familyMembers", "Family Members", "number"),
                _col("zipCode", "ZIP Code"),
                _col("preferredProvider", "Preferred Provider", sortable=False),
                _col("annualSpend", "Annual Vision Spend", "currency"),
                _col("diabetic", "Diabetic", "boolean"),
                _col("employerOffersVision", "Employer Offers Vision", "boolean"),
            ],
            "scoringWeights": {
                "coverageGap": 0.25,
                "healthNeed": 0.20,
                "engagementSignal": 0.20,
                "spendPotential": 0.15,
                "familySize": 0.10,
                "geographicFit": 0.10,
            },
            "qualificationCriteria": {
                "requiredFields": ["age", "zipCode"],
                "disqualifiers": ["Full employer coverage and satisfied"],
            },
        },
        {
            "id": "dental",
            "name": "Dental Insurance",
            "description": "Individual and family dental coverage plans",
            "leadTypes": ["Individual", "Family", "Senior Dental", "Orthodontic", "Employer Add-On"],
            "columns": [
                _col("age", "Age", "number"),
                _col("currentDentalCoverage", "Current Coverage", "select",
                     ["None", "Employer Plan", "Individual Plan", "Medicare Dental", "Medicaid Dental",
                      "Discount Plan"]),
                _col("lastDentalVisit", "Last Dental Visit", "date"),
                _col("dentalNeeds", "Dental Needs", "multiselect",
                     ["Preventive Only", "Basic Restorative", "Major Restorative", "Orthodontics", "Implants",
                      "Cosmetic"], sortable=False),
                _col("familyMembers", "Family Members", "number"),
                _col("zipCode", "ZIP Code"),
                _col("annualBudget", "Annual Budget", "currency"),
                _col("preferredDentist", "Preferred Dentist", sortable=False),
                _col("pendingProcedures", "Pending Procedures", "boolean"),
                _col("employerOffersDental", "Employer Offers Dental", "boolean"),
            ],
            "scoringWeights": {
                "coverageGap": 0.25,
                "procedureUrgency": 0.20,
                "engagementSignal": 0.20,
                "spendPotential": 0.15,
                "familySize": 0.10,
                "geographicFit": 0.10,
            },
            "qualificationCriteria": {
                "requiredFields": ["age", "zipCode"],
                "disqualifiers": ["Full employer coverage and satisfied"],
            },
        },
    ],
}


FINANCIAL_SERVICES: Dict[str, Any] = {
    "id": "financial_services",
    "name": "Financial Services",
    "icon": "DollarSign",
    "color": "#3b82f6",
    "description": "Business loans, exit/liquidity planning, portfolio and wealth management",
    "subVerticals": [
        {
            "id": "business_loans",
            "name": "Business Loans",
            "description": "Businesses seeking capital with minimum $100K monthly revenue",
            "leadTypes": ["Term Loan", "Line of Credit", "SBA Loan", "Equipment Financing", "Invoice Factoring",
                          "Merchant Cash Advance"],
            "columns": [
                _col("businessName", "Business Name"),
                _col("ownerName", "Owner/Contact"),
                _col("industry", "Industry"),
                _col("monthlyRevenue", "Monthly Revenue", "currency"),
                _col("annualRevenue", "Annual Revenue", "currency"),
                _col("yearsInBusiness", "Years in Business", "number"),
                _col("creditScore", "Credit Score", "number"),
                _col("requestedAmount", "Requested Amount", "currency"),
                _col("loanPurpose", "Loan Purpose", "select",
                     ["Expansion", "Working Capital", "Equipment", "Real Estate", "Inventory",
                      "Debt Consolidation", "Payroll"]),
                _col("currentDebt", "Current Debt", "currency"),
                _col("dscr", "DSCR", "number"),
                _col("collateralAvailable", "Collateral Available", "boolean"),
                _col("bankStatements", "Bank Statements (months)", "number", sortable=False),
                _col("state", "State"),
                _col("entityType", "Entity Type", "select",
                     ["LLC", "S-Corp", "C-Corp", "Sole Proprietor", "Partnership"]),
                _col("urgency", "Funding Urgency", "select",
                     ["Immediate (< 1 week)", "Short-term (1-4 weeks)", "Medium (1-3 months)",
                      "Planning (3+ months)"]),
            ],
            "scoringWeights": {
                "revenueStrength": 0.25,
                "creditworthiness": 0.20,
                "businessMaturity": 0.15,
                "debtServiceCapacity": 0.15,
                "urgencySignal": 0.10,
                "engagementSignal": 0.10,
                "collateralPosition": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["businessName", "monthlyRevenue", "yearsInBusiness", "requestedAmount"],
                "thresholds": {
                    "monthlyRevenue": {"min": 100000},
                    "yearsInBusiness": {"min": 1},
                    "creditScore": {"min": 550},
                },
                "disqualifiers": ["Monthly revenue under $100K", "Startup with no revenue history"],
            },
        },
        {
            "id": "exit_liquidity",
            "name": "Business Exit / Liquidity",
            "description": "Business owners planning exits, mergers, acquisitions, or liquidity events",
            "leadTypes": ["Full Sale", "Partial Sale/Recapitalization", "Merger", "Management Buyout", "ESOP",
                          "IPO Readiness"],
            "columns": [
                _col("businessName", "Business Name"),
                _col("ownerName", "Owner/Contact"),
                _col("industry", "Industry"),
                _col("annualRevenue", "Annual Revenue", "currency"),
                _col("ebitda", "EBITDA", "currency"),
                _col("businessValuation", "Est. Valuation", "currency"),
                _col("yearsInBusiness", "Years in Business", "number"),
                _col("ownerAge", "Owner Age", "number"),
                _col("exitTimeline", "Exit Timeline", "select",
                     ["Immediate (< 6 months)", "6-12 months", "1-2 years", "2-5 years", "Exploring options"]),
                _col("exitType", "Preferred Exit", "select",
                     ["Full Sale", "Partial Sale", "Merger", "MBO", "ESOP", "IPO", "Undecided"]),
                _col("hasAdvisor", "Has M&A Advisor", "boolean"),
                _col("employeeCount", "Employees", "number"),
                _col("recurringRevenue", "Recurring Revenue %", "number"),
                _col("successionPlan", "Succession Plan", "boolean"),
                _col("state", "State"),
            ],
            "scoringWeights": {
                "businessValue": 0.25,
                "exitReadiness": 0.20,
                "timelineUrgency": 0.20,
                "financialHealth": 0.15,
                "engagementSignal": 0.10,
                "advisorGap": 0.10,
            },
            "qualificationCriteria": {
                "requiredFields": ["businessName", "annualRevenue", "exitTimeline"],
                "thresholds": {"annualRevenue": {"min": 500000}},
                "disqualifiers": ["No intention to sell", "Pre-revenue startup"],
            },
        },
        {
            "id": "wealth_management",
            "name": "Portfolio / Wealth Management",
            "description": "Individuals and companies seeking portfolio management, financial planning, "
                           "and wealth advisory",
            "leadTypes": ["High Net Worth Individual", "Ultra High Net Worth", "Corporate Treasury",
                          "Family Office", "Retirement Planning", "Trust & Estate"],
            "columns": [
                _col("contactName", "Contact Name"),
                _col("entityName", "Entity/Company"),
                _col("clientType", "Client Type", "select",
                     ["Individual", "Couple", "Family", "Corporate", "Trust", "Foundation"]),
                _col("investableAssets", "Investable Assets", "currency"),
                _col("totalNetWorth", "Total Net Worth", "currency"),
                _col("annualIncome", "Annual Income", "currency"),
                _col("currentAdvisor", "Current Advisor", sortable=False),
                _col("advisorSatisfaction", "Advisor Satisfaction", "select",
                     ["Very Satisfied", "Satisfied", "Neutral", "Dissatisfied", "No Advisor"]),
                _col("investmentGoals", "Investment Goals", "multiselect",
                     ["Growth", "Income", "Preservation", "Tax Optimization", "Retirement", "Education",
                      "Legacy"], sortable=False),
                _col("riskTolerance", "Risk Tolerance", "select",
                     ["Conservative", "Moderate-Conservative", "Moderate", "Moderate-Aggressive",
                      "Aggressive"]),
                _col("age", "Age", "number"),
                _col("retirementTimeline", "Retirement Timeline", "select",
                     ["Already Retired", "< 5 years", "5-10 years", "10-20 years", "20+ years"]),
                _col("lifeEvent", "Recent Life Event", "select",
                     ["None", "Inheritance", "Business Sale", "Divorce", "Retirement", "Windfall",
                      "Death of Spouse"]),
                _col("state", "State"),
            ],
            "scoringWeights": {
                "assetLevel": 0.25,
                "advisorDissatisfaction": 0.20,
                "lifeEventTrigger": 0.15,
                "engagementSignal": 0.15,
                "wealthGrowthPotential": 0.10,
                "complexityNeed": 0.10,
                "geographicFit": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["contactName", "investableAssets"],
                "thresholds": {"investableAssets": {"min": 250000}},
                "disqualifiers": ["Under $250K investable assets", "Very satisfied with current advisor"],
            },
        },
    ],
}


REAL_ESTATE: Dict[str, Any] = {
    "id": "real_estate",
    "name": "Real Estate",
    "icon": "Building",
    "color": "#8b5cf6",
    "description": "Residential and commercial property buyer leads",
    "subVerticals": [
        {
            "id": "residential_sfh",
            "name": "Residential - Single Family",
            "description": "Buyer leads for single-family homes",
            "leadTypes": ["First-Time Buyer", "Move-Up Buyer", "Downsizer", "Investor", "Relocation",
                          "Vacation Home"],
            "columns": [
                _col("buyerName", "Buyer Name"),
                _col("buyerType", "Buyer Type", "select",
                     ["First-Time", "Move-Up", "Downsizer", "Investor", "Relocation", "Vacation"]),
                _col("budgetMin", "Budget Min", "currency"),
                _col("budgetMax", "Budget Max", "currency"),
                _col("preApproved", "Pre-Approved", "boolean"),
                _col("preApprovalAmount", "Pre-Approval Amt", "currency"),
                _col("lender", "Lender", sortable=False),
                _col("downPaymentReady", "Down Payment Ready", "boolean"),
                _col("downPaymentPercent", "Down Payment %", "number"),
                _col("preferredLocations", "Preferred Locations", sortable=False),
                _col("bedrooms", "Bedrooms", "number"),
                _col("bathrooms", "Bathrooms", "number"),
                _col("sqftMin", "Min Sq Ft", "number"),
                _col("purchaseTimeline", "Timeline", "select", TIMELINES),
                _col("hasAgent", "Has Agent", "boolean"),
                _col("currentHousing", "Current Housing", "select",
                     ["Renting", "Own - Selling", "Own - Keeping", "Living with Family", "Other"]),
                _col("mustSellFirst", "Must Sell First", "boolean"),
                _col("creditScore", "Credit Score", "number"),
                _col("state", "State"),
            ],
            "scoringWeights": {
                "financialReadiness": 0.25,
                "timelineUrgency": 0.20,
                "preApprovalStatus": 0.15,
                "engagementSignal": 0.15,
                "motivationLevel": 0.10,
                "marketAlignment": 0.10,
                "agentStatus": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["buyerName", "budgetMax", "purchaseTimeline"],
                "disqualifiers": ["No financing plan", "Timeline over 18 months with no urgency"],
            },
        },
        {
            "id": "residential_mfh",
            "name": "Residential - Multifamily",
            "description": "Buyer leads for multifamily/investment residential properties",
            "leadTypes": ["Duplex/Triplex", "Small Apartment (5-20 units)", "Mid-Size (20-100 units)",
                          "Large Complex (100+)", "House Hack", "Portfolio Builder"],
            "columns": [
                _col("buyerName", "Buyer/Entity Name"),
                _col("investorType", "Investor Type", "select",
                     ["First-Time Investor", "Experienced", "Institutional", "Syndicator", "House Hacker",
                      "1031 Exchange"]),
                _col("budgetMin", "Budget Min", "currency"),
                _col("budgetMax", "Budget Max", "currency"),
                _col("unitCountTarget", "Target Units"),
                _col("preferredCapRate", "Min Cap Rate %", "number"),
                _col("cashOnCashTarget", "Target Cash-on-Cash %", "number"),
                _col("financingType", "Financing", "select",
                     ["Conventional", "FHA", "VA", "Commercial", "Hard Money", "Cash", "Seller Finance",
                      "1031 Exchange"]),
                _col("preApproved", "Pre-Approved", "boolean"),
                _col("proofOfFunds", "Proof of Funds", "boolean"),
                _col("existingPortfolio", "Existing Units Owned", "number"),
                _col("preferredLocations", "Target Markets", sortable=False),
                _col("purchaseTimeline", "Timeline", "select", TIMELINES),
                _col("valueAddInterest", "Value-Add Interest", "boolean"),
                _col("managementPreference", "Management", "select",
                     ["Self-Managed", "Property Manager", "Undecided"]),
                _col("state", "State"),
            ],
            "scoringWeights": {
                "financialCapacity": 0.25,
                "investorExperience": 0.15,
                "timelineUrgency": 0.20,
                "financingReadiness": 0.15,
                "engagementSignal": 0.10,
                "portfolioGrowth": 0.10,
                "marketKnowledge": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["buyerName", "budgetMax", "purchaseTimeline"],
                "disqualifiers": ["No capital or financing plan",
                                  "No investment experience and no education interest"],
            },
        },
        {
            "id": "commercial",
            "name": "Commercial Property",
            "description": "Buyer leads for commercial real estate (office, retail, industrial, mixed-use)",
            "leadTypes": ["Office", "Retail", "Industrial/Warehouse", "Mixed-Use", "Land/Development",
                          "NNN/Triple Net", "Self-Storage", "Medical Office"],
            "columns": [
                _col("buyerName", "Buyer/Entity Name"),
                _col("entityType", "Entity Type", "select",
                     ["Individual", "LLC", "Corporation", "REIT", "Fund", "Partnership", "Trust"]),
                _col("propertyType", "Property Type", "select",
                     ["Office", "Retail", "Industrial", "Mixed-Use", "Land", "NNN", "Self-Storage", "Medical",
                      "Hospitality"]),
                _col("budgetMin", "Budget Min", "currency"),
                _col("budgetMax", "Budget Max", "currency"),
                _col("preferredCapRate", "Min Cap Rate %", "number"),
                _col("noi", "Target NOI", "currency"),
                _col("sqftTarget", "Target Sq Ft", sortable=False),
                _col("financingType", "Financing", "select",
                     ["Commercial Loan", "SBA 504", "Bridge Loan", "Cash", "Seller Finance", "1031 Exchange",
                      "CMBS"]),
                _col("proofOfFunds", "Proof of Funds", "boolean"),
                _col("existingPortfolio", "Portfolio Value", "currency"),
                _col("preferredLocations", "Target Markets", sortable=False),
                _col("purchaseTimeline", "Timeline", "select", TIMELINES),
                _col("is1031", "1031 Exchange", "boolean"),
                _col("tenantStatus", "Tenant Preference", "select",
                     ["Fully Leased", "Partially Leased", "Value-Add/Vacant", "Owner-Occupied", "Any"]),
                _col("state", "State"),
            ],
            "scoringWeights": {
                "financialCapacity": 0.25,
                "timelineUrgency": 0.20,
                "investorSophistication": 0.15,
                "financingReadiness": 0.15,
                "engagementSignal": 0.10,
                "dealFlow1031": 0.10,
                "marketAlignment": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["buyerName", "propertyType", "budgetMax"],
                "thresholds": {"budgetMax": {"min": 250000}},
                "disqualifiers": ["No financing or proof of funds", "No commercial experience and no advisor"],
            },
        },
    ],
}


ENERGY: Dict[str, Any] = {
    "id": "energy",
    "name": "Energy",
    "icon": "Zap",
    "color": "#f59e0b",
    "description": "Energy switching, telecom products, independent sales agents, and CAT buyer landscape",
    "subVerticals": [
        {
            "id": "end_customer_business",
            "name": "Business Energy Customers",
            "description": "Businesses in deregulated states switching energy suppliers or adding telecom products",
            "leadTypes": ["Energy Switching", "Telecom Business Products", "Bundle (Energy + Telecom)",
                          "Renewable Energy", "Demand Response"],
            "columns": [
                _col("businessName", "Business Name"),
                _col("contactName", "Decision Maker"),
                _col("contactTitle", "Title"),
                _col("industry", "Industry"),
                _col("state", "State"),
                _col("deregulatedMarket", "Deregulated Market", "boolean"),
                _col("currentProvider", "Current Provider"),
                _col("monthlyBill", "Monthly Energy Bill", "currency"),
                _col("annualUsageKwh", "Annual Usage (kWh)", "number"),
                _col("contractEndDate", "Contract End Date", "date"),
                _col("contractStatus", "Contract Status", "select", CONTRACT_STATUSES),
                _col("estimatedSavings", "Est. Monthly Savings", "currency"),
                _col("interestedInATT", "Interested in AT&T", "boolean"),
                _col("currentTelecom", "Current Telecom", sortable=False),
                _col("numLocations", "Locations", "number"),
                _col("employeeCount", "Employees", "number"),
                _col("greenInterest", "Green Energy Interest", "boolean"),
            ],
            "scoringWeights": {
                "contractTiming": 0.25,
                "savingsPotential": 0.20,
                "deregulatedStatus": 0.15,
                "billSize": 0.15,
                "engagementSignal": 0.10,
                "multiLocationValue": 0.10,
                "bundleOpportunity": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["businessName", "state", "monthlyBill"],
                "disqualifiers": ["Regulated market only",
                                  "Locked in long-term contract with early termination fee"],
            },
        },
        {
            "id": "end_customer_consumer",
            "name": "Consumer Energy Customers",
            "description": "Consumers in deregulated states switching energy suppliers or adding telecom products",
            "leadTypes": ["Energy Switching", "Telecom Consumer Products", "Bundle (Energy + Telecom)",
                          "Solar Interest", "Green Energy"],
            "columns": [
                _col("consumerName", "Consumer Name"),
                _col("state", "State"),
                _col("zipCode", "ZIP Code"),
                _col("deregulatedMarket", "Deregulated Market", "boolean"),
                _col("currentProvider", "Current Provider"),
                _col("monthlyBill", "Monthly Bill", "currency"),
                _col("annualUsageKwh", "Annual Usage (kWh)", "number"),
                _col("contractEndDate", "Contract End Date", "date"),
                _col("contractStatus", "Contract Status", "select", CONTRACT_STATUSES),
                _col("estimatedSavings", "Est. Monthly Savings", "currency"),
                _col("homeOwner", "Homeowner", "boolean"),
                _col("interestedInATT", "Interested in AT&T", "boolean"),
                _col("currentTelecom", "Current Telecom", sortable=False),
                _col("householdSize", "Household Size", "number"),
                _col("solarInterest", "Solar Interest", "boolean"),
                _col("creditWorthy", "Credit Worthy", "boolean"),
            ],
            "scoringWeights": {
                "contractTiming": 0.25,
                "savingsPotential": 0.20,
                "deregulatedStatus": 0.15,
                "homeownership": 0.10,
                "engagementSignal": 0.15,
                "bundleOpportunity": 0.10,
                "creditWorthiness": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["consumerName", "state", "zipCode"],
                "disqualifiers": ["Regulated market only", "Locked in long-term contract"],
            },
        },
        {
            "id": "independent_agents",
            "name": "Independent Sales Agents",
            "description": "Independent salespeople and closers joining the utility network as 1099 agents",
            "leadTypes": ["Experienced Energy Agent", "Telecom Sales Pro", "Insurance Agent Crossover",
                          "D2D Sales Veteran", "Business Owner with Network", "MLM/Network Marketing Pro"],
            "columns": [
                _col("agentName", "Agent Name"),
                _col("currentRole", "Current Role"),
                _col("salesExperience", "Sales Experience (years)", "number"),
                _col("industryBackground", "Industry Background", "multiselect",
                     ["Energy", "Telecom", "Insurance", "Real Estate", "D2D", "B2B", "Retail",
                      "MLM/Network Marketing"], sortable=False),
                _col("existingCustomerBase", "Existing Customer Base", "number"),
                _col("existingNetwork", "Has Existing Network", "boolean"),
                _col("networkSize", "Network Size", "number"),
                _col("closingAbility", "Closing Ability", "select",
                     ["Proven Closer", "Good", "Average", "Learning", "Unknown"]),
                _col("availability", "Availability", "select",
                     ["Full-Time", "Part-Time", "Side Hustle", "Weekend Only"]),
                _col("state", "State"),
                _col("licensedStates", "Licensed States", sortable=False),
                _col("monthlyIncomeGoal", "Monthly Income Goal", "currency"),
                _col("currentMonthlyIncome", "Current Monthly Income", "currency"),
                _col("willingTo1099", "Willing to 1099", "boolean"),
                _col("hasOwnTransportation", "Own Transportation", "boolean"),
                _col("bilingualLanguages", "Languages", sortable=False),
                _col("linkedinProfile", "LinkedIn", sortable=False),
                _col("referralSource", "Referral Source"),
            ],
            "scoringWeights": {
                "existingCustomerBase": 0.25,
                "salesExperience": 0.20,
                "closingAbility": 0.15,
                "networkSize": 0.15,
                "availability": 0.10,
                "industryRelevance": 0.10,
                "incomeMotivation": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["agentName", "salesExperience", "state"],
                "preferredFields": ["existingCustomerBase", "closingAbility"],
                "disqualifiers": ["No sales experience", "Not willing to 1099",
                                  "No transportation in field role"],
            },
        },
        {
            "id": "cat_buyer",
            "name": "CAT Buyer Landscape",
            "description": "Customer Acquisition Tool buyer leads across the energy and telecom ecosystem",
            "leadTypes": ["Energy Retailer", "Telecom Reseller", "Solar Installer", "HVAC Company",
                          "Home Services", "Insurance Agency", "Real Estate Brokerage"],
            "columns": [
                _col("companyName", "Company Name"),
                _col("contactName", "Contact Name"),
                _col("contactTitle", "Title"),
                _col("companyType", "Company Type", "select",
                     ["Energy Retailer", "Telecom Reseller", "Solar Installer", "HVAC", "Home Services",
                      "Insurance Agency", "Real Estate Brokerage", "Other"]),
                _col("annualRevenue", "Annual Revenue", "currency"),
                _col("employeeCount", "Employees", "number"),
                _col("currentCAT", "Current CAT Tool"),
                _col("catBudget", "CAT Budget (annual)", "currency"),
                _col("agentCount", "Sales Agents", "number"),
                _col("marketsCovered", "Markets Covered", sortable=False),
                _col("painPoints", "Pain Points", "multiselect",
                     ["Lead Quality", "Lead Volume", "Cost Per Lead", "CRM Integration", "Compliance",
                      "Agent Management", "Reporting"], sortable=False),
                _col("decisionTimeline", "Decision Timeline", "select",
                     ["Immediate", "1-3 months", "3-6 months", "6+ months", "Evaluating"]),
                _col("contractEndDate", "Current Contract End", "date"),
                _col("state", "HQ State"),
            ],
            "scoringWeights": {
                "companySize": 0.20,
                "catBudget": 0.20,
                "decisionTimeline": 0.20,
                "painPointSeverity": 0.15,
                "engagementSignal": 0.10,
                "agentScale": 0.10,
                "currentToolGap": 0.05,
            },
            "qualificationCriteria": {
                "requiredFields": ["companyName", "contactName", "companyType"],
                "disqualifiers": ["No budget for CAT tools", "Recently signed long-term contract"],
            },
        },
    ],
}


INDUSTRIES: List[Dict[str, Any]] = [HEALTHCARE, FINANCIAL_SERVICES, REAL_ESTATE, ENERGY]
