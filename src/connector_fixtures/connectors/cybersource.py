# src/connector_fixtures/connectors/cybersource.py

successful_no_three_ds_card_details = {
    "card_number": "4111111111111111",
    "card_exp_month": "01",
    "card_exp_year": "25",
    "card_holder_name": "joseph Doe",
    "card_cvc": "123",
}

successful_three_ds_test_card_details = {
    "card_number": "4000000000001091",
    "card_exp_month": "01",
    "card_exp_year": "25",
    "card_holder_name": "joseph Doe",
    "card_cvc": "123",
}

billing = {
    "address": {
        "line1": "1467",
        "line2": "Harrison Street",
        "city": "San Fransico",
        "state": "California",
        "zip": "94122",
        "country": "US",
        "first_name": "joseph",
        "last_name": "Doe",
    },
    "email": "mauro.morandi@nexi.it",
}

connector_details = {
    "card_pm": {
        "PaymentIntent": {
            "Request": {
                "card": successful_no_three_ds_card_details,
                "currency": "USD",
                "customer_acceptance": None,
                "setup_future_usage": "on_session",
                "billing": billing,
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
                "billing": billing,
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
                "billing": billing,
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
                "billing": billing,
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
                    "status": "processing",
                    "amount": 6500,
                    "amount_capturable": 6500,
                    "amount_received": 0,
                },
            },
        },
        "Void": {
            "Request": {},
            "Response": {
                "status": 200,
                "body": {"status": "cancelled"},
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
                "body": {"status": "pending"},
            },
        },
    },
}
