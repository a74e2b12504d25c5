import pytest

from config.settings import mask_sensitive_data

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_password_masked(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["header"] == "token=***MASKED***"

    def test_secret_masked(self):
        event_dict = {"event": "test", "dsn": "secret: hunter2"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "hunter2" not in result["dsn"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "product.deleted", "product_id": 12, "reference": "demo_1"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {"event": "product.deleted", "product_id": 12, "reference": "demo_1"}
