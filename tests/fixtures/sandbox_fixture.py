# tests/fixtures/sandbox_fixture.py
"""Fixture module for a connector that is not bundled."""

connector_details = {
    "card_pm": {
        "PaymentIntent": {
            "Request": {"currency": "EUR"},
            "Response": {"status": 200, "body": {"status": "requires_payment_method"}},
        },
        "No3DSAutoCapture": {
            "Request": {"currency": "EUR"},
            "Response": {"status": 200, "body": {"status": "succeeded"}},
        },
    },
}

broken_details = {
    "card_pm": {
        "No3DSAutoCapture": {
            "Request": {"currency": "EUR"},
            "Response": {"body": {"status": "succeeded"}},
        },
    },
}

not_a_mapping = ["card_pm"]
