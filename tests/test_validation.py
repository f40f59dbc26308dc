# tests/test_validation.py

import pytest

from connector_fixtures.registry import CONNECTOR_DETAILS, connector_ids
from connector_fixtures.validation import FixtureError, validate_connector_details


class TestBundledFixtures:
    @pytest.mark.parametrize("connector_id", connector_ids())
    def test_bundled_fixture_is_well_formed(self, connector_id):
        errors = validate_connector_details(CONNECTOR_DETAILS[connector_id], connector=connector_id)

        assert errors == []

    @pytest.mark.parametrize("connector_id", connector_ids())
    def test_core_scenarios_present(self, connector_id):
        scenarios = CONNECTOR_DETAILS[connector_id]["card_pm"]

        for name in ("PaymentIntent", "No3DSAutoCapture", "No3DSManualCapture", "Refund"):
            assert name in scenarios, f"{connector_id} is missing {name}"


class TestValidation:
    def test_missing_response_status(self):
        details = {"card_pm": {"No3DSAutoCapture": {"Request": {}, "Response": {"body": {}}}}}

        errors = validate_connector_details(details)

        assert len(errors) == 1
        assert errors[0].location == "card_pm.No3DSAutoCapture.Response.status"

    def test_missing_response(self):
        details = {"card_pm": {"Refund": {"Request": {}}}}

        errors = validate_connector_details(details)

        assert [e.location for e in errors] == ["card_pm.Refund.Response"]

    def test_status_out_of_range(self):
        details = {"card_pm": {"Refund": {"Response": {"status": 42, "body": {}}}}}

        errors = validate_connector_details(details)

        assert len(errors) == 1
        assert "greater than or equal to 100" in errors[0].message

    def test_all_errors_reported(self):
        details = {
            "card_pm": {
                "Capture": {"Response": {"status": 200}},
                "Refund": {"Response": {"body": {}}},
            }
        }

        errors = validate_connector_details(details)

        assert len(errors) == 2

    def test_not_a_mapping(self):
        errors = validate_connector_details("stripe")

        assert len(errors) == 1
        assert errors[0].location == "<root>"

    def test_extra_keys_allowed(self):
        details = {
            "card_pm": {
                "No3DSAutoCapture": {
                    "Request": {"card": {}},
                    "Response": {"status": 200, "body": {}, "headers": {}},
                    "Configs": {"TRIGGER_SKIP": True},
                    "Notes": "flaky in sandbox",
                }
            }
        }

        assert validate_connector_details(details) == []

    def test_error_str_includes_connector(self):
        error = FixtureError(location="card_pm.Refund.Response", message="Field required", connector="nmi")

        assert str(error) == "[nmi] card_pm.Refund.Response: Field required"

    def test_error_str_without_connector(self):
        error = FixtureError(location="<root>", message="Input should be a valid dictionary")

        assert str(error) == "<root>: Input should be a valid dictionary"
