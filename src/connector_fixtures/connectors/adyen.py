# src/connector_fixtures/connectors/adyen.py

successful_no_three_ds_card_details = {
    "card_number": "4111111111111111",
    "card_exp_month": "03",
    "card_exp_year": "30",
    "card_holder_name": "John Doe",
    "card_cvc": "737",
}

successful_three_ds_test_card_details = {
    "card_number": "4917610000000000",
    "card_exp_month": "03",
    "card_exp_year": "30",
    "card_holder_name": "Joseph Doe",
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
        # Adyen authorises synchronously but settles captures asynchronously
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
                "body": {"status": "processing"},
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
