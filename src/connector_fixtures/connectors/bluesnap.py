# src/connector_fixtures/connectors/bluesnap.py

successful_no_three_ds_card_details = {
    "card_number": "4242424242424242",
    "card_exp_month": "10",
    "card_exp_year": "30",
    "card_holder_name": "John",
    "card_cvc": "737",
}

successful_three_ds_test_card_details = {
    "card_number": "4000000000001091",
    "card_exp_month": "10",
    "card_exp_year": "30",
    "card_holder_name": "Joseph",
    "card_cvc": "737",
}

connector_details = {
    "card_pm": {
        "PaymentIntent": {
            "Request": {
                "card": successful_no_three_ds_card_details,
                "currency": "USD",
                "customer_acceptance": None,
                "setup_future_usage": "on_session",
            },
            "Response": {
                "status": 200,
                "body": {"status": "requires_payment_method"},
            },
        },
        "3DSAutoCapture": {
            "Request": {
                "card": successful_three_ds_test_card_details,
                "currency": "USD",
                "customer_acceptance": None,
                "setup_future_usage": "on_session",
            },
            "Response": {
                "status": 200,
                "body": {"status": "requires_customer_action"},
            },
        },
        "No3DSAutoCapture": {
            "Request": {
                "card": successful_no_three_ds_card_details,
                "currency": "USD",
                "customer_acceptance": None,
                "setup_future_usage": "on_session",
            },
            "Response": {
                "status": 200,
                "body": {"status": "succeeded"},
            },
        },
        "No3DSManualCapture": {
            "Request": {
                "card": successful_no_three_ds_card_details,
                "currency": "USD",
                "customer_acceptance": None,
                "setup_future_usage": "on_session",
            },
            "Response": {
                "status": 200,
                "body": {"status": "requires_capture"},
            },
        },
        "Capture": {
            "Request": {
                "card": successful_no_three_ds_card_details,
                "currency": "USD",
                "customer_acceptance": None,
            },
            "Response": {
                "status": 200,
                "body": {
                    "status": "succeeded",
                    "amount": 6500,
                    "amount_capturable": 0,
                    "amount_received": 6500,
                },
            },
        },
        "Refund": {
            "Request": {
                "card": successful_no_three_ds_card_details,
                "currency": "USD",
                "customer_acceptance": None,
            },
            "Response": {
                "status": 200,
                "body": {"status": "succeeded"},
            },
        },
    },
}
