# src/connector_fixtures/connectors/nmi.py

successful_no_three_ds_card_details = {
    "card_number": "4000000000002503",
    "card_exp_month": "08",
    "card_exp_year": "25",
    "card_holder_name": "joseph Doe",
    "card_cvc": "999",
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
        # NMI reports every authorisation as processing until the webhook lands
        "No3DSAutoCapture": {
            "Request": {
                "card": successful_no_three_ds_card_details,
                "currency": "USD",
                "customer_acceptance": None,
                "setup_future_usage": "on_session",
            },
            "Response": {
                "status": 200,
                "body": {"status": "processing"},
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
                    "status": "processing",
                    "amount": 6500,
                    "amount_capturable": 6500,
                    "amount_received": 0,
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
                "body": {"status": "pending"},
            },
        },
    },
}
