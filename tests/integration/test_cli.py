"""Integration tests for CLI commands.

These tests run the commands end to end: a CSV file and a JSON field catalog
are written to a temporary directory and mapped through the real container.
"""

import json
from pathlib import Path

from click.testing import CliRunner
import pytest

from column_mapper.cli import app

RESULTS_CSV = (
    "Athlete Name,Club,Final Time,Place,Remarks\n"
    "Anna Berg,SC Nord,52.34,1,\n"
    "Ben Cole,SV Ost,53.10,2,PB\n"
    "Cleo Dahl,SC Nord,1:01.20,3,\n"
)
FIELD_CATALOG = [
    {"name": "name"},
    {"name": "team", "cardinality": 40},
    {"name": "time", "type": "time", "category": "measure"},
    {"name": "place", "isNumeric": True},
]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> Path:
    (tmp_path / "results.csv").write_text(RESULTS_CSV)
    (tmp_path / "fields.json").write_text(json.dumps(FIELD_CATALOG))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.integration
class TestSuggestCommand:
    """Integration tests for the suggest command."""

    def test_suggest_help(self, runner):
        result = runner.invoke(app, ["suggest", "--help"])

        assert result.exit_code == 0
        assert "DATA_FILE" in result.output
        assert "FIELDS_FILE" in result.output
        assert "--min-confidence" in result.output
        assert "--output" in result.output

    def test_suggest_prints_mapping(self, runner, workspace):
        result = runner.invoke(app, ["suggest", "results.csv", "fields.json"])

        assert result.exit_code == 0, result.output
        assert "Column Mapping Suggestions" in result.output
        assert "Mapped:" in result.output
        assert "Accepted:" in result.output

    def test_suggest_with_bracketed_headers(self, runner, tmp_path, monkeypatch):
        (tmp_path / "laps.csv").write_text("Time [s],lap[/b]\n52.3,1\n53.1,2\n")
        (tmp_path / "fields.json").write_text(json.dumps([{"name": "Time [s]"}]))
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["suggest", "laps.csv", "fields.json", "-vv"])

        assert result.exit_code == 0, result.output
        assert "Unmapped: lap[/b]" in result.output

    def test_suggest_writes_output(self, runner, workspace):
        result = runner.invoke(
            app,
            ["suggest", "results.csv", "fields.json", "--output", "out/mapping.json"],
        )

        assert result.exit_code == 0, result.output
        saved = json.loads((workspace / "out" / "mapping.json").read_text())
        assert saved["mappings"]["Final Time"] == "time"
        assert saved["mappings"]["Place"] == "place"
        assert saved["summary"]["total_columns"] == 5
        targets = list(saved["mappings"].values())
        assert len(targets) == len(set(targets))

    def test_verbose_output(self, runner, workspace):
        result = runner.invoke(app, ["suggest", "results.csv", "fields.json", "-v"])

        assert result.exit_code == 0, result.output
        assert "Mapping results.csv" in result.output
        assert "5 source columns, 4 target fields" in result.output

    def test_config_file_is_applied(self, runner, workspace):
        (workspace / "column_mapper.toml").write_text(
            "[thresholds]\nmin_confidence = 0.99\n"
        )

        result = runner.invoke(app, ["suggest", "results.csv", "fields.json"])

        assert result.exit_code == 0, result.output
        assert "above 99% confidence" in result.output

    def test_min_confidence_option_wins(self, runner, workspace):
        result = runner.invoke(
            app,
            ["suggest", "results.csv", "fields.json", "--min-confidence", "0.5"],
        )

        assert result.exit_code == 0, result.output
        assert "above 50% confidence" in result.output

    def test_invalid_catalog_fails(self, runner, workspace):
        (workspace / "fields.json").write_text("{not json")

        result = runner.invoke(app, ["suggest", "results.csv", "fields.json"])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_missing_data_file(self, runner, workspace):
        result = runner.invoke(app, ["suggest", "missing.csv", "fields.json"])

        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_min_confidence_out_of_range(self, runner, workspace):
        result = runner.invoke(
            app,
            ["suggest", "results.csv", "fields.json", "--min-confidence", "1.5"],
        )

        assert result.exit_code == 2


@pytest.mark.integration
class TestSynonymsCommand:
    def test_lists_all_concepts(self, runner):
        result = runner.invoke(app, ["synonyms"])

        assert result.exit_code == 0
        assert "Domain Synonyms" in result.output
        assert "time" in result.output

    def test_single_concept(self, runner):
        result = runner.invoke(app, ["synonyms", "Name"])

        assert result.exit_code == 0
        assert "name" in result.output

    def test_unknown_concept(self, runner):
        result = runner.invoke(app, ["synonyms", "banana"])

        assert result.exit_code == 1
        assert "Unknown concept: banana" in result.output


def test_app_help(runner):
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "suggest" in result.output
    assert "synonyms" in result.output
