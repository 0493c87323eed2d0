"""Tests for industry configuration, markets, settings and qualification flags."""

import json
import logging
import tempfile
from datetime import date
from pathlib import Path

import pytest

from vertical_lead_engine.config import (
    ConfigurationError,
    IndustryConfigStore,
    get_active_enrollment_periods,
    get_deregulation_level,
    is_deregulated,
)
from vertical_lead_engine.config.industries import BASE_COLUMNS
from vertical_lead_engine.config.models import Threshold
from vertical_lead_engine.core import ScoringSettings, ScoringSettingsManager, check_qualification_flags
from vertical_lead_engine.core.strategies import get_strategy


@pytest.fixture
def temp_data_dir():
    """Create temporary data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def industry(sub_vertical):
    return [{"id": "acme", "name": "Acme", "subVerticals": [sub_vertical]}]


class TestDefaultStore:
    """Tests for the packaged industry configuration."""

    def setup_method(self):
        self.store = IndustryConfigStore.default()

    def test_industries_and_sub_verticals(self):
        assert [i.id for i in self.store.industries] == [
            "healthcare", "financial_services", "real_estate", "energy",
        ]
        assert len(self.store.all_sub_verticals()) == 14

    def test_default_is_cached(self):
        assert IndustryConfigStore.default() is self.store

    def test_every_sub_vertical_has_matching_strategy(self):
        """Configured weight keys line up with the registered dimensions."""
        for entry in self.store.all_sub_verticals():
            sv = entry["sub_vertical"]
            strategy = get_strategy(entry["industry_id"], sv.id)
            assert strategy is not None, sv.id
            assert set(sv.scoring_weights) == set(strategy.keys), sv.id
            assert sum(sv.scoring_weights.values()) == pytest.approx(1.0), sv.id

    def test_lookup(self):
        sv = self.store.get_sub_vertical("healthcare", "medicare")
        assert sv.name == "Medicare Products"
        assert "age" in sv.qualification.required_fields
        assert self.store.get_sub_vertical("healthcare", "pet_insurance") is None
        assert self.store.get_sub_vertical("retail", "medicare") is None
        assert self.store.get_scoring_weights("retail", "x") == {}

    def test_scoring_weights_are_a_copy(self):
        weights = self.store.get_scoring_weights("healthcare", "medicare")
        weights["enrollmentTiming"] = 0
        assert self.store.get_scoring_weights("healthcare", "medicare")["enrollmentTiming"] == 0.25

    def test_columns_for_includes_system_columns(self):
        columns = self.store.columns_for("financial_services", "business_loans")
        keys = [c.key for c in columns]
        assert keys[0] == BASE_COLUMNS[0]["key"]
        assert "monthlyRevenue" in keys
        assert len(keys) == len(set(keys))
        assert self.store.columns_for("x", "y") == []


class TestValidation:
    """Malformed configuration is rejected at load time."""

    def test_weight_must_be_numeric(self):
        with pytest.raises(ConfigurationError, match="must be a number"):
            IndustryConfigStore(industry({"id": "w", "scoringWeights": {"a": "high"}}))

    def test_weight_must_be_in_range(self):
        with pytest.raises(ConfigurationError, match=r"\[0, 1\]"):
            IndustryConfigStore(industry({"id": "w", "scoringWeights": {"a": 1.5}}))

    def test_bool_weight_rejected(self):
        with pytest.raises(ConfigurationError):
            IndustryConfigStore(industry({"id": "w", "scoringWeights": {"a": True}}))

    def test_threshold_min_above_max(self):
        criteria = {"thresholds": {"age": {"min": 70, "max": 60}}}
        with pytest.raises(ConfigurationError, match="min > max"):
            IndustryConfigStore(industry({"id": "w", "qualificationCriteria": criteria}))

    def test_flat_criteria_bounds(self):
        criteria = {"minAge": 64, "maxAge": 100, "requiredFields": ["age"]}
        sv = IndustryConfigStore(industry({"id": "w", "qualificationCriteria": criteria})).get_sub_vertical("acme", "w")
        assert sv.qualification.thresholds == {"age": Threshold(min=64, max=100)}

    def test_thresholds_object_overrides_flat_bounds(self):
        criteria = {"minAge": 64, "maxAge": 100, "thresholds": {"age": {"min": 18}}}
        sv = IndustryConfigStore(industry({"id": "w", "qualificationCriteria": criteria})).get_sub_vertical("acme", "w")
        assert sv.qualification.thresholds == {"age": Threshold(min=18, max=100)}

    def test_flat_bound_must_be_numeric(self):
        criteria = {"minAge": "sixty"}
        with pytest.raises(ConfigurationError, match="must be numeric"):
            IndustryConfigStore(industry({"id": "w", "qualificationCriteria": criteria}))

    def test_required_fields_must_be_list(self):
        criteria = {"requiredFields": "age"}
        with pytest.raises(ConfigurationError, match="requiredFields"):
            IndustryConfigStore(industry({"id": "w", "qualificationCriteria": criteria}))

    def test_unknown_field_type(self):
        columns = [{"key": "age", "label": "Age", "type": "integer"}]
        with pytest.raises(ConfigurationError, match="unknown type"):
            IndustryConfigStore(industry({"id": "w", "columns": columns}))

    def test_duplicate_ids(self):
        with pytest.raises(ConfigurationError, match="duplicate industry"):
            IndustryConfigStore([{"id": "a"}, {"id": "a"}])
        with pytest.raises(ConfigurationError, match="duplicate sub-vertical"):
            IndustryConfigStore([{"id": "a", "subVerticals": [{"id": "s"}, {"id": "s"}]}])

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestFromFile:
    """Loading configuration from JSON files."""

    def test_wrapped_document(self, temp_data_dir):
        path = temp_data_dir / "industries.json"
        path.write_text(json.dumps({"industries": industry({"id": "w", "scoringWeights": {"a": 0.5}})}))
        store = IndustryConfigStore.from_file(path)
        assert store.get_scoring_weights("acme", "w") == {"a": 0.5}

    def test_keyed_sub_verticals(self, temp_data_dir):
        path = temp_data_dir / "industries.json"
        path.write_text(json.dumps([{"id": "acme", "subVerticals": {"w": {"id": "w"}}}]))
        assert IndustryConfigStore.from_file(path).get_sub_vertical("acme", "w") is not None

    def test_invalid_json(self, temp_data_dir):
        path = temp_data_dir / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Cannot read"):
            IndustryConfigStore.from_file(path)

    def test_missing_file(self, temp_data_dir):
        with pytest.raises(ConfigurationError):
            IndustryConfigStore.from_file(temp_data_dir / "nope.json")

    def test_flat_revenue_minimum_disqualifies(self, temp_data_dir):
        path = temp_data_dir / "industries.json"
        path.write_text(json.dumps([{
            "id": "financial_services",
            "subVerticals": [{
                "id": "business_loans",
                "columns": [{"key": "monthlyRevenue", "label": "Monthly Revenue", "type": "currency"}],
                "qualificationCriteria": {
                    "minMonthlyRevenue": 150000,
                    "requiredFields": ["businessName", "monthlyRevenue"],
                },
            }],
        }]))
        sv = IndustryConfigStore.from_file(path).get_sub_vertical("financial_services", "business_loans")
        flags = check_qualification_flags({"businessName": "A", "monthlyRevenue": 120000},
                                          "financial_services", "business_loans", sv)
        assert [(f.type, f.field, f.message) for f in flags] == [
            ("disqualifier", "monthlyRevenue", "Monthly Revenue below $150,000 minimum"),
        ]


class TestMarkets:
    """Deregulated markets and enrollment periods."""

    def test_deregulation(self):
        assert get_deregulation_level("TX") == "full"
        assert get_deregulation_level("ca") == "partial"
        assert get_deregulation_level("FL") == "regulated"
        assert get_deregulation_level("IN", "natural_gas") == "partial"
        assert is_deregulated(" oh ")
        assert not is_deregulated("FL")
        assert not is_deregulated(None)

    def test_enrollment_periods(self):
        ids = [p.id for p in get_active_enrollment_periods(date(2024, 11, 10))]
        assert ids == ["AEP", "ACA_OEP", "IEP", "SEP"]
        ids = [p.id for p in get_active_enrollment_periods(date(2024, 12, 8))]
        assert ids == ["ACA_OEP", "IEP", "SEP"]
        ids = [p.id for p in get_active_enrollment_periods(date(2024, 1, 16))]
        assert ids == ["OEP", "IEP", "SEP"]
        ids = [p.id for p in get_active_enrollment_periods(date(2024, 10, 14))]
        assert ids == ["IEP", "SEP"]


class TestQualificationFlags:
    """Missing fields, disqualifiers and energy market warnings."""

    def setup_method(self):
        self.store = IndustryConfigStore.default()

    def flags(self, lead, industry_id, sub_vertical_id):
        sv = self.store.get_sub_vertical(industry_id, sub_vertical_id)
        return check_qualification_flags(lead, industry_id, sub_vertical_id, sv)

    def test_missing_required_fields(self):
        flags = self.flags({"age": 66, "zipCode": ""}, "healthcare", "medicare")
        assert [(f.type, f.field) for f in flags] == [("missing", "zipCode"), ("missing", "enrollmentPeriod")]
        assert flags[0].message == "Missing: zipCode"

    def test_zero_and_false_are_present(self):
        lead = {"businessName": "Acme", "monthlyRevenue": 200000, "yearsInBusiness": 0, "requestedAmount": 0}
        flags = self.flags(lead, "financial_services", "business_loans")
        assert not [f for f in flags if f.type == "missing"]
        # 0 years is present but under the minimum
        assert [(f.type, f.field) for f in flags] == [("disqualifier", "yearsInBusiness")]

    def test_empty_list_is_missing(self):
        sv = IndustryConfigStore(industry({
            "id": "w", "qualificationCriteria": {"requiredFields": ["tags"]},
        })).get_sub_vertical("acme", "w")
        flags = check_qualification_flags({"tags": []}, "acme", "w", sv)
        assert [f.type for f in flags] == ["missing"]

    def test_threshold_max(self):
        flags = self.flags({"age": 70, "zipCode": "10001", "householdSize": 1, "annualIncome": 30000},
                           "healthcare", "aca")
        assert [(f.type, f.field, f.message) for f in flags] == [("disqualifier", "age", "Age above 64 maximum")]

    def test_energy_warnings(self):
        lead = {"state": "FL", "contractStatus": "Locked 6+ months"}
        flags = [f for f in self.flags(lead, "energy", "end_customer_business") if f.type == "warning"]
        assert [(f.field, f.message) for f in flags] == [
            ("state", "Not in a deregulated market"),
            ("contractStatus", "Contract locked for 6+ months"),
        ]

    def test_energy_warnings_only_for_end_customers(self):
        lead = {"state": "FL", "contractStatus": "Locked 6+ months"}
        flags = self.flags(lead, "energy", "independent_agents")
        assert not [f for f in flags if f.type == "warning"]

    def test_deregulated_state_no_warning(self):
        flags = self.flags({"state": "TX"}, "energy", "end_customer_consumer")
        assert not [f for f in flags if f.type == "warning"]

    def test_unknown_sub_vertical(self):
        assert check_qualification_flags({}, "x", "y", None) == []

    def test_business_loan_revenue_floor_without_thresholds(self):
        sv = IndustryConfigStore([{
            "id": "financial_services",
            "subVerticals": [{"id": "business_loans", "qualificationCriteria": {"requiredFields": ["businessName"]}}],
        }]).get_sub_vertical("financial_services", "business_loans")
        flags = check_qualification_flags({"businessName": "A", "monthlyRevenue": 50000},
                                          "financial_services", "business_loans", sv)
        assert [(f.type, f.field) for f in flags] == [("disqualifier", "monthlyRevenue")]
        flags = check_qualification_flags({"businessName": "A", "monthlyRevenue": 100000},
                                          "financial_services", "business_loans", sv)
        assert flags == []


class TestScoringSettings:
    """Persisted engine settings."""

    def test_defaults_without_file(self, temp_data_dir):
        manager = ScoringSettingsManager(temp_data_dir / "settings.json")
        assert manager.settings.fallback_score == 50
        assert manager.settings.conversion_cap == 0.85
        assert manager.settings.max_workers == 1

    def test_update_persists(self, temp_data_dir):
        path = temp_data_dir / "settings.json"
        manager = ScoringSettingsManager(path)
        manager.update(fallback_score=60, max_workers=4)

        reloaded = ScoringSettingsManager(path)
        assert reloaded.settings.fallback_score == 60
        assert reloaded.settings.max_workers == 4
        assert reloaded.settings.conversion_cap == 0.85

    def test_update_rejects_invalid_values(self, temp_data_dir):
        manager = ScoringSettingsManager(temp_data_dir / "settings.json")
        with pytest.raises(ConfigurationError):
            manager.update(conversion_cap=1.5)
        with pytest.raises(ConfigurationError):
            manager.update(max_workers=0)
        with pytest.raises(ConfigurationError, match="Unknown setting"):
            manager.update(hot_threshold=90)
        assert manager.settings.conversion_cap == 0.85

    def test_corrupt_file_uses_defaults(self, temp_data_dir, caplog):
        path = temp_data_dir / "settings.json"
        path.write_text("{oops")
        with caplog.at_level(logging.ERROR):
            manager = ScoringSettingsManager(path)
        assert manager.settings.fallback_score == 50
        assert "Error loading scoring settings" in caplog.text

    def test_invalid_values_in_file_raise(self, temp_data_dir):
        path = temp_data_dir / "settings.json"
        path.write_text(json.dumps({"max_workers": -2}))
        with pytest.raises(ConfigurationError):
            ScoringSettingsManager(path)

    def test_reset(self, temp_data_dir):
        manager = ScoringSettingsManager(temp_data_dir / "settings.json")
        manager.update(fallback_score=10)
        assert manager.reset().fallback_score == 50

    def test_round_trip_dict(self):
        settings = ScoringSettings(fallback_score=42)
        assert ScoringSettings.from_dict(settings.to_dict()).fallback_score == 42
