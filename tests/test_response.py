"""Tests for response helpers."""

import json
import logging

from lambda_hooks.utils.response import bad_request, ok, response, server_error


class TestResponse:
    """Test API Gateway response helpers."""

    def test_string_body_passes_through(self) -> None:
        """Test string bodies are not re-encoded."""
        assert response(200, "plain") == {"statusCode": 200, "body": "plain"}

    def test_dict_body_is_json(self) -> None:
        """Test dict bodies are JSON-encoded."""
        result = response(201, {"id": 1})
        assert json.loads(result["body"]) == {"id": 1}

    def test_none_body(self) -> None:
        """Test a missing body is encoded as JSON null."""
        assert response(204) == {"statusCode": 204, "body": "null"}

    def test_status_helpers(self, caplog) -> None:
        """Test ok, bad_request and server_error set status codes and log."""
        with caplog.at_level(logging.INFO):
            assert ok("fine")["statusCode"] == 200
            assert bad_request({"error": "bad"})["statusCode"] == 400
            assert server_error("boom") == {"statusCode": 500, "body": "boom"}

        assert "returning a 500 response with body: boom" in caplog.text
