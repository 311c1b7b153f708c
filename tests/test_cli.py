"""Tests for the approval-templates CLI"""
from typer.testing import CliRunner

from approval_templates import INVALID_SELECTION_MESSAGE
from approval_templates.cli import app

runner = CliRunner()


class TestResolveCommand:
    """Tests for `resolve`"""

    def test_known_pair(self):
        result = runner.invoke(app, ["resolve", "GLPP", "INDIVIDUAL_PROSPECT"])

        assert result.exit_code == 0
        assert "GUIDEPP\tGLPP.ftl" in result.output

    def test_unsupported_pair(self):
        result = runner.invoke(app, ["resolve", "GLPP", "LEGAL_PROSPECT"])

        assert result.exit_code == 1
        assert INVALID_SELECTION_MESSAGE in result.output


class TestListCommand:
    def test_lists_registry(self):
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "GUIDEPP" in result.output
        assert "KYC_PP.ftl" in result.output


class TestReportCommand:
    """Tests for `report`"""

    def test_prints_report(self, baseline_path):
        result = runner.invoke(app, ["report"])

        assert result.exit_code == 0
        assert result.output == baseline_path.read_text(encoding="utf-8")

    def test_matches_baseline(self, baseline_path):
        result = runner.invoke(app, ["report", "--baseline", str(baseline_path)])

        assert result.exit_code == 0
        assert "matches baseline" in result.output

    def test_drift_fails(self, tmp_path):
        stale = tmp_path / "report.txt"
        stale.write_text("[GLPP,INDIVIDUAL_PROSPECT] => old\n", encoding="utf-8")

        result = runner.invoke(app, ["report", "--baseline", str(stale)])

        assert result.exit_code == 1
        assert "-[GLPP,INDIVIDUAL_PROSPECT] => old" in result.output

    def test_missing_baseline(self, tmp_path):
        result = runner.invoke(app, ["report", "--baseline", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Baseline not found" in result.output

    def test_write_without_baseline_rejected(self):
        result = runner.invoke(app, ["report", "--write"])

        assert result.exit_code == 2
        assert "--baseline" in result.output

    def test_write_baseline(self, tmp_path, baseline_path):
        target = tmp_path / "snapshots" / "report.txt"

        result = runner.invoke(app, ["report", "--baseline", str(target), "--write"])

        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8") == baseline_path.read_text(encoding="utf-8")
