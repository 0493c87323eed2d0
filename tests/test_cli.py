"""Tests for the leadscore command line interface."""

import json
import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from vertical_lead_engine.cli.main import cli

LEADS = [
    {"id": "m-1", "age": 64, "enrollmentPeriod": "IEP", "currentCoverage": "None", "zipCode": "33101",
     "interactions": 10, "lastContact": "2024-11-01", "source": "Referral"},
    {"id": "m-2", "age": 45},
    {"id": "m-3", "age": 70, "enrollmentPeriod": "SEP", "zipCode": "43004"},
]


@pytest.fixture
def temp_data_dir():
    """Create temporary data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def leads_file(temp_data_dir):
    path = temp_data_dir / "leads.json"
    path.write_text(json.dumps(LEADS))
    return path


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, temp_data_dir, *args):
    """Run the CLI with settings isolated to the temp directory."""
    return runner.invoke(cli, ["--settings-path", str(temp_data_dir / "settings.json"), *args])


class TestBrowse:
    """industries and columns commands."""

    def test_industries(self, runner, temp_data_dir):
        result = invoke(runner, temp_data_dir, "industries")
        assert result.exit_code == 0, result.output
        assert "Industries" in result.output
        assert "medicare" in result.output

    def test_columns(self, runner, temp_data_dir):
        result = invoke(runner, temp_data_dir, "columns", "healthcare", "medicare")
        assert result.exit_code == 0, result.output
        assert "Medicare Products fields" in result.output
        assert "Disqualifiers" in result.output

    def test_columns_marks_preferred_fields(self, runner, temp_data_dir):
        result = invoke(runner, temp_data_dir, "columns", "energy", "independent_agents")
        assert result.exit_code == 0, result.output
        assert "required" in result.output
        assert "preferred" in result.output

    def test_columns_unknown(self, runner, temp_data_dir):
        result = invoke(runner, temp_data_dir, "columns", "healthcare", "pet_insurance")
        assert result.exit_code != 0
        assert "Unknown sub-vertical healthcare/pet_insurance" in result.output

    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "leadscore score" in result.output


class TestScore:
    """score and explain commands."""

    def test_score_writes_output(self, runner, temp_data_dir, leads_file):
        out = temp_data_dir / "ranked.json"
        result = invoke(runner, temp_data_dir, "score", "healthcare", "medicare",
                        "-p", str(leads_file), "--date", "2024-11-01", "-o", str(out), "-w", "2")
        assert result.exit_code == 0, result.output
        assert "Ranked leads (3)" in result.output

        data = json.loads(out.read_text())
        scores = [lead["score"] for lead in data["leads"]]
        assert scores == sorted(scores, reverse=True)
        assert data["leads"][0]["id"] == "m-1"
        assert data["leads"][0]["recommendedStatus"] == "Hot"
        assert data["analytics"]["total"] == 3

    def test_score_csv(self, runner, temp_data_dir):
        path = temp_data_dir / "loans.csv"
        path.write_text("id,businessName,monthlyRevenue,yearsInBusiness,requestedAmount\n"
                        "b-1,Acme,50000,3,100000\n")
        out = temp_data_dir / "ranked.json"
        result = invoke(runner, temp_data_dir, "score", "financial_services", "business_loans",
                        "-p", str(path), "--date", "2024-06-15", "-o", str(out))
        assert result.exit_code == 0, result.output
        lead = json.loads(out.read_text())["leads"][0]
        assert lead["monthlyRevenue"] == 50000
        assert {"type": "disqualifier", "field": "monthlyRevenue",
                "message": "Monthly Revenue below $100,000 minimum"} in lead["qualificationFlags"]

    def test_score_unknown_pair_uses_fallback(self, runner, temp_data_dir, leads_file):
        result = invoke(runner, temp_data_dir, "score", "healthcare", "pet_insurance", "-p", str(leads_file))
        assert result.exit_code == 0, result.output
        assert "is not configured" in result.output

    def test_score_bad_file(self, runner, temp_data_dir):
        path = temp_data_dir / "leads.json"
        path.write_text('{"people": []}')
        result = invoke(runner, temp_data_dir, "score", "healthcare", "medicare", "-p", str(path))
        assert result.exit_code == 1
        assert "expected a list" in result.output

    def test_score_bad_config(self, runner, temp_data_dir, leads_file):
        config = temp_data_dir / "industries.json"
        config.write_text(json.dumps([{"id": "a", "subVerticals": [{"id": "b", "scoringWeights": {"x": 2}}]}]))
        result = invoke(runner, temp_data_dir, "score", "a", "b", "-p", str(leads_file), "--config", str(config))
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_explain(self, runner, temp_data_dir, leads_file):
        result = invoke(runner, temp_data_dir, "explain", "healthcare", "medicare",
                        "-p", str(leads_file), "--index", "1", "--date", "2024-06-15")
        assert result.exit_code == 0, result.output
        assert "Score:" in result.output
        assert "Missing: zipCode" in result.output

    def test_explain_index_out_of_range(self, runner, temp_data_dir, leads_file):
        result = invoke(runner, temp_data_dir, "explain", "healthcare", "medicare",
                        "-p", str(leads_file), "--index", "9")
        assert result.exit_code == 1
        assert "out of range" in result.output


class TestSettings:
    """settings command."""

    def test_show_defaults(self, runner, temp_data_dir):
        result = invoke(runner, temp_data_dir, "settings")
        assert result.exit_code == 0, result.output
        assert "Fallback score: 50" in result.output

    def test_update(self, runner, temp_data_dir):
        result = invoke(runner, temp_data_dir, "settings", "--fallback-score", "60", "--workers", "2")
        assert result.exit_code == 0, result.output
        saved = json.loads((temp_data_dir / "settings.json").read_text())
        assert saved["fallback_score"] == 60
        assert saved["max_workers"] == 2

    def test_invalid_update(self, runner, temp_data_dir):
        result = invoke(runner, temp_data_dir, "settings", "--conversion-cap", "1.5")
        assert result.exit_code == 1
        assert "conversion_cap" in result.output
        assert not (temp_data_dir / "settings.json").exists()

    def test_fallback_score_setting_applies(self, runner, temp_data_dir, leads_file):
        invoke(runner, temp_data_dir, "settings", "--fallback-score", "65")
        out = temp_data_dir / "ranked.json"
        result = invoke(runner, temp_data_dir, "score", "retail", "shoes", "-p", str(leads_file), "-o", str(out))
        assert result.exit_code == 0, result.output
        assert {lead["score"] for lead in json.loads(out.read_text())["leads"]} == {65}
