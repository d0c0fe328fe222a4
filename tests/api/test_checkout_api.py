"""Testes da API de checkout (sem servidor)."""

from decimal import Decimal


class TestHealth:
    def test_root_returns_app_info(self, test_client):
        r = test_client.get("/")
        assert r.status_code == 200
        data = r.json()
        assert data.get("name") == "Loja API"
        assert "version" in data
        assert data.get("status") == "running"

    def test_health_returns_ok(self, test_client):
        r = test_client.get("/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["components"]["payments"] == "ok"

    def test_unknown_path(self, test_client):
        r = test_client.get("/nao-existe")
        assert r.status_code == 404
        assert r.json()["error"] == "Not Found"


class TestStoreAndKinds:
    def test_store(self, test_client):
        r = test_client.get("/store")
        assert r.status_code == 200
        data = r.json()
        assert data["name"] == "Loja do João"
        assert Decimal(data["delivery_fee"]) == Decimal("10.0")

    def test_store_from_env(self, test_client, monkeypatch):
        monkeypatch.setenv("STORE_DELIVERY_FEE", "7.5")
        r = test_client.get("/store")
        assert Decimal(r.json()["delivery_fee"]) == Decimal("7.5")

    def test_payment_methods(self, test_client):
        r = test_client.get("/payment-methods")
        assert r.status_code == 200
        assert {"cartao", "pix", "boleto"} <= set(r.json()["kinds"])


class TestCheckout:
    def test_card_checkout(self, test_client, card_checkout_payload):
        r = test_client.post("/orders/checkout", json=card_checkout_payload)
        assert r.status_code == 200
        data = r.json()
        assert data["store_name"] == "Loja do João"
        assert [i["name"] for i in data["items"]] == ["Mouse Gamer", "Teclado Mecânico"]
        assert Decimal(data["subtotal"]) == Decimal("389.80")
        assert Decimal(data["delivery_fee"]) == Decimal("10.0")
        assert Decimal(data["total"]) == Decimal("399.80")
        assert data["payment"]["succeeded"] is True
        assert data["payment"]["method"] == "cartao"
        assert data["payment"]["details"]["card"].endswith("3456")

    def test_pix_checkout(self, test_client):
        payload = {"items": [{"name": "Headset", "price": "159.90"}], "payment_method": "PIX"}
        r = test_client.post("/orders/checkout", json=payload)
        assert r.status_code == 200
        data = r.json()
        assert Decimal(data["total"]) == Decimal("169.90")
        assert data["payment"]["details"]["key"] == "maria@email.com"

    def test_boleto_checkout_with_credentials(self, test_client):
        payload = {
            "items": [
                {"name": "Webcam HD", "price": "249.90"},
                {"name": "Microfone USB", "price": "179.90"},
            ],
            "payment_method": "boleto",
            "credentials": {"tax_id": "987.654.321-00"},
        }
        r = test_client.post("/orders/checkout", json=payload)
        assert r.status_code == 200
        data = r.json()
        assert Decimal(data["total"]) == Decimal("439.80")
        assert data["payment"]["details"]["tax_id"] == "987.654.321-00"

    def test_unknown_kind(self, test_client, card_checkout_payload):
        card_checkout_payload["payment_method"] = "invalid"
        r = test_client.post("/orders/checkout", json=card_checkout_payload)
        assert r.status_code == 400
        assert r.json()["error"] == "UnknownPaymentKind"

    def test_missing_method(self, test_client, card_checkout_payload):
        del card_checkout_payload["payment_method"]
        r = test_client.post("/orders/checkout", json=card_checkout_payload)
        assert r.status_code == 409
        assert r.json()["error"] == "NoPaymentMethodSelected"

    def test_short_card_number(self, test_client, card_checkout_payload):
        card_checkout_payload["credentials"] = {"card_number": "1234", "holder": "Ana"}
        r = test_client.post("/orders/checkout", json=card_checkout_payload)
        assert r.status_code == 422
        assert r.json()["error"] == "MalformedCardNumber"

    def test_bad_credentials(self, test_client, card_checkout_payload):
        card_checkout_payload["credentials"] = {"numero": "1234567890123456"}
        r = test_client.post("/orders/checkout", json=card_checkout_payload)
        assert r.status_code == 400
        assert r.json()["error"] == "InvalidPaymentCredentials"

    def test_negative_price_rejected(self, test_client, card_checkout_payload):
        card_checkout_payload["items"][0]["price"] = "-1"
        r = test_client.post("/orders/checkout", json=card_checkout_payload)
        assert r.status_code == 422


class TestCheckoutValidation:
    def test_non_string_credentials_rejected_before_payment(self, test_client, monkeypatch):
        from loja.payments import BoletoPayment

        charged = []
        original = BoletoPayment.process

        def spy(self, amount):
            charged.append(amount)
            return original(self, amount)

        monkeypatch.setattr(BoletoPayment, "process", spy)
        payload = {
            "items": [{"name": "Webcam HD", "price": "249.90"}],
            "payment_method": "boleto",
            "credentials": {"tax_id": 12345678900},
        }
        r = test_client.post("/orders/checkout", json=payload)
        assert r.status_code == 422
        assert charged == []

    def test_error_responses_documented(self, test_client):
        schema = test_client.get("/openapi.json").json()
        responses = schema["paths"]["/orders/checkout"]["post"]["responses"]
        for status in ("400", "409", "422"):
            ref = responses[status]["content"]["application/json"]["schema"]["$ref"]
            assert ref.endswith("/ErrorResponse")


class TestStoreMisconfiguration:
    def test_invalid_fee_is_server_error(self, test_client, monkeypatch):
        monkeypatch.setenv("STORE_DELIVERY_FEE", "dez reais")
        r = test_client.get("/store")
        assert r.status_code == 500
        assert r.json()["error"] == "InvalidStoreConfig"
