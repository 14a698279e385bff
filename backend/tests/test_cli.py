"""Tests for fieldcore CLI commands."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from fieldcore.cli.main import cli

FIXTURE = str(Path(__file__).parent / "fixtures" / "fields.yaml")


@pytest.fixture
def runner():
    return CliRunner()


class TestFieldsCheck:
    def test_check_succeeds(self, runner):
        result = runner.invoke(cli, ["fields", "check", FIXTURE])
        assert result.exit_code == 0
        assert "All field definitions are valid" in result.output

    def test_check_lists_fields(self, runner):
        result = runner.invoke(cli, ["fields", "check", FIXTURE])
        assert "Loaded 4 field(s)" in result.output
        assert "age (integer, 1 pre-validator(s), 1 rule(s))" in result.output
        assert "email (text, 2 pre-validator(s), 0 rule(s))" in result.output

    def test_check_reads_path_from_env(self, runner):
        result = runner.invoke(cli, ["fields", "check"], env={"FIELDCORE_FIELDS_PATH": FIXTURE})
        assert result.exit_code == 0

    def test_check_schema_errors(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("fields:\n  - {name: a, kind: date, value: 1}\n")
        result = runner.invoke(cli, ["fields", "check", str(path)])
        assert result.exit_code == 1
        assert "fields[0]/kind" in result.output
        assert "1 schema error(s) found" in result.output

    def test_check_semantic_errors(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "fields:\n"
            "  - name: a\n"
            "    kind: integer\n"
            "    value: 1\n"
            "    preValidators:\n"
            "      - type: prime\n"
        )
        result = runner.invoke(cli, ["fields", "check", str(path)])
        assert result.exit_code == 1
        assert "Semantic validation failed" in result.output
        assert "prime" in result.output

    def test_check_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["fields", "check", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 2


class TestFieldsSimulate:
    def test_simulate_age_scenario(self, runner):
        result = runner.invoke(
            cli,
            ["fields", "simulate", FIXTURE, "--field", "age", "focus", "type:15", "type:30", "blur"],
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "type:15" in lines[1]
        assert "text='25'" in lines[1]
        assert "! Debe ser mayor de 18 años." in lines[2]
        assert "text='30'" in lines[3]
        assert "value=30" in lines[3]
        assert "state=idle" in lines[4]

    def test_simulate_json(self, runner):
        result = runner.invoke(
            cli,
            ["fields", "simulate", FIXTURE, "--field", "price", "--json", "focus", "type:0.5"],
        )
        assert result.exit_code == 0
        steps = json.loads(result.output)
        assert steps[0]["result"] is None
        assert steps[1]["errors"] == ["El valor mínimo es 1.0"]
        assert steps[1]["result"] == {
            "accepted": False,
            "value": 1.0,
            "message": "El valor mínimo es 1.0",
        }
        assert steps[1]["state"]["displayedText"] == "1.00"
        assert steps[1]["revertDeferred"] is False

    def test_simulate_deferred(self, runner):
        result = runner.invoke(
            cli,
            ["fields", "simulate", FIXTURE, "--field", "age", "--deferred", "--json", "focus", "type:15"],
        )
        steps = json.loads(result.output)
        assert steps[1]["revertDeferred"] is True
        assert steps[1]["state"]["displayedText"] == "25"

    def test_simulate_external(self, runner):
        result = runner.invoke(
            cli,
            ["fields", "simulate", FIXTURE, "--field", "age", "--json", "external:40"],
        )
        steps = json.loads(result.output)
        assert steps[0]["state"]["displayedText"] == "40"
        assert steps[0]["state"]["externalValue"] == 40
        assert steps[0]["value"] == 40

    def test_simulate_rejection_after_external_falls_back_to_owner_value(self, runner):
        result = runner.invoke(
            cli,
            ["fields", "simulate", FIXTURE, "--field", "age", "--json", "external:40", "focus", "type:15"],
        )
        steps = json.loads(result.output)
        assert steps[2]["result"] == {
            "accepted": False,
            "value": 40,
            "message": "Debe ser mayor de 18 años.",
        }
        assert steps[2]["value"] == 40
        assert steps[2]["state"]["displayedText"] == "40"

    def test_simulate_unknown_field(self, runner):
        result = runner.invoke(cli, ["fields", "simulate", FIXTURE, "--field", "nope", "focus"])
        assert result.exit_code == 1
        assert "unknown field 'nope'" in result.output

    def test_simulate_unknown_event(self, runner):
        result = runner.invoke(cli, ["fields", "simulate", FIXTURE, "--field", "age", "jump"])
        assert result.exit_code == 2
        assert "unknown event 'jump'" in result.output


class TestLogging:
    def test_log_level_option(self, runner):
        result = runner.invoke(cli, ["--log-level", "debug", "fields", "check", FIXTURE])
        assert result.exit_code == 0

    def test_rejects_unknown_level(self, runner):
        result = runner.invoke(cli, ["--log-level", "loud", "fields", "check", FIXTURE])
        assert result.exit_code == 2
