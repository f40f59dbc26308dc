# tests/test_cli_commands.py

import json
import os
import subprocess
import sys
from pathlib import Path

import yaml

SANDBOX_FILE = Path(__file__).parent / "fixtures" / "sandbox_fixture.py"


def run_cli(*args, env=None):
    return subprocess.run(
        [sys.executable, "-m", "connector_fixtures.cli", *args],
        capture_output=True,
        text=True,
        env=env,
    )


class TestCLI:
    def test_list_command(self):
        result = run_cli("list")
        assert result.returncode == 0
        assert result.stdout.split() == [
            "adyen",
            "bankofamerica",
            "bluesnap",
            "cybersource",
            "nmi",
            "paypal",
            "stripe",
            "trustpay",
        ]

    def test_list_with_source(self):
        result = run_cli("list", "--source", f"sandbox={SANDBOX_FILE}:connector_details")
        assert result.returncode == 0
        assert "sandbox" in result.stdout.split()

    def test_list_with_source_from_env(self):
        env = {**os.environ, "CONNECTOR_FIXTURES_SOURCES": f"sandbox={SANDBOX_FILE}:connector_details"}
        result = run_cli("list", env=env)
        assert result.returncode == 0
        assert "sandbox" in result.stdout.split()

    def test_list_verbose(self):
        result = run_cli("list", "-v")
        assert result.returncode == 0
        assert "[registry] loaded 8 connectors" in result.stdout

    def test_bad_source(self):
        result = run_cli("list", "--source", "sandbox")
        assert result.returncode == 1

    def test_show_json(self):
        result = run_cli("show", "stripe")
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["card_pm"]["PaymentIntent"]["Response"]["status"] == 200

    def test_show_scenario_yaml(self):
        result = run_cli("show", "bluesnap", "--scenario", "No3DSManualCapture", "--format", "yaml")
        assert result.returncode == 0
        data = yaml.safe_load(result.stdout)
        assert data["Response"]["body"]["status"] == "requires_capture"
        assert "&id" not in result.stdout

    def test_show_unknown_scenario(self):
        result = run_cli("show", "nmi", "--scenario", "3DSAutoCapture")
        assert result.returncode == 1

    def test_show_unknown_connector(self):
        result = run_cli("show", "unknownconnector")
        assert result.returncode == 1
        assert "Unknown connector" in result.stdout

    def test_show_is_case_sensitive(self):
        result = run_cli("show", "NMI")
        assert result.returncode == 1

    def test_validate_all(self):
        result = run_cli("validate")
        assert result.returncode == 0
        assert "Validated 8 fixtures" in result.stdout

    def test_validate_selected(self):
        result = run_cli("validate", "adyen", "paypal")
        assert result.returncode == 0
        assert "Validated 2 fixtures" in result.stdout

    def test_validate_unknown_connector(self):
        result = run_cli("validate", "Adyen")
        assert result.returncode == 1

    def test_validate_broken_source(self):
        result = run_cli("validate", "broken", "--source", f"broken={SANDBOX_FILE}:broken_details")
        assert result.returncode == 1
        assert "[broken] card_pm.No3DSAutoCapture.Response.status" in result.stdout

    def test_diagnose_command(self):
        result = run_cli("diagnose")
        assert result.returncode == 0
        assert "Dependencies" in result.stdout
        assert "Connectors: 8" in result.stdout
