import logging
import uuid

import pytest

from config.settings import mask_sensitive_data


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_api_responses_carry_request_id(self, api_client_with_correlation):
        api_client, cid = api_client_with_correlation
        response = api_client.get("/products")
        assert response.status_code == 200
        assert response["X-Request-ID"] == cid

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_service_logs_carry_correlation_id(self, api_client, caplog):
        custom_id = "create-product-correlation-789"
        payload = {"name": "Logged", "price": "1.00", "quantity": 1, "sku": "LOG-1"}
        with caplog.at_level(logging.INFO, logger="modules.products.services"):
            api_client.post(
                "/products", payload, format="json", HTTP_X_REQUEST_ID=custom_id
            )
        messages = [r.getMessage() for r in caplog.records]
        assert any("product.created" in m and custom_id in m for m in messages)


class TestSensitiveDataMasking:
    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_authorization_header_masked(self):
        event_dict = {"event": "test", "header": "Authorization: Bearer-xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "Bearer-xyz" not in result["header"]

    @pytest.mark.parametrize("value", ["LAP-001", "Laptop 14 inch", "1200.00"])
    def test_catalog_values_unchanged(self, value):
        event_dict = {"event": "product.created", "value": value}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["value"] == value
        assert result["event"] == "product.created"

    def test_non_string_values_untouched(self):
        event_dict = {"event": "product.stock_decreased", "remaining": 40}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["remaining"] == 40
